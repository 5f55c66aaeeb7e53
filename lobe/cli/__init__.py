""" Command line interface.

Each subcommand lives in its own module, with a function of the same name
accepting a list of arguments.
"""
