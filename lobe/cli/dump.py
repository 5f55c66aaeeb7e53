""" Display the bytecode of a brainfuck program """

import argparse
from .base import base_parser, LogSetup
from .. import api


parser = argparse.ArgumentParser(description=__doc__, parents=[base_parser])
parser.add_argument(
    'source', metavar='source', help='brainfuck source file')


def dump(args=None):
    """ Display the bytecode of a brainfuck program """
    args = parser.parse_args(args)
    with LogSetup(args):
        program = api.load_file(args.source)
        program.dump()


if __name__ == '__main__':
    dump()
