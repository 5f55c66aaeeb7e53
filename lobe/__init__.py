""" A brainfuck parser and bytecode interpreter implemented in pure Python.

Example usage:

>>> import io
>>> from lobe import api
>>> output = io.StringIO()
>>> api.run('++++++++[>++++++++<-]>+.', stdout=output)
>>> output.getvalue()
'A'

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 3, 1)
__version__ = '.'.join(map(str, __version_info__))
