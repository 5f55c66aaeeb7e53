""" Run a brainfuck program.

The program reads from standard input (or the file given with --input)
and writes to standard output.
"""

import argparse
import sys
from .base import base_parser, LogSetup
from .. import api
from ..config import CELL_WIDTHS, DEFAULT_TAPE_SIZE, ExecutionConfig


parser = argparse.ArgumentParser(description=__doc__, parents=[base_parser])
parser.add_argument(
    'source', metavar='source', help='brainfuck source file')
parser.add_argument(
    '--cell-width', type=int, default=8, choices=CELL_WIDTHS,
    help='Number of bits per cell')
parser.add_argument(
    '--tape', default='fixed', choices=['fixed', 'grow'],
    help='Use a fixed size tape, or one that grows when needed')
parser.add_argument(
    '--tape-size', type=int, default=DEFAULT_TAPE_SIZE, metavar='cells',
    help='Size of the (initial) tape')
parser.add_argument(
    '--underflow', default='wrap', choices=['wrap', 'error'],
    help='Moving left of the first cell of a growing tape either wraps to '
    'the last cell or is an error')
parser.add_argument(
    '--input', metavar='input-file', type=argparse.FileType('rb'),
    help='File to read input from instead of standard input')


def run(args=None):
    """ Run a brainfuck program """
    args = parser.parse_args(args)
    try:
        config = ExecutionConfig.from_options(
            cell_width=args.cell_width, tape=args.tape,
            tape_size=args.tape_size, underflow=args.underflow)
    except ValueError as ex:
        parser.error(str(ex))

    with LogSetup(args):
        program = api.load_file(args.source)
        try:
            api.run(program, config=config, stdin=args.input)
        finally:
            stdin = getattr(sys.stdin, 'buffer', sys.stdin)
            if args.input and args.input is not stdin:
                args.input.close()


if __name__ == '__main__':
    run()
