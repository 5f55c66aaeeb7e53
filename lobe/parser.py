""" This is the brainfuck parser.

Brainfuck is a language that is so simple, the entire front-end can be
implemented in one pass. Only the bracket targets need to be patched
afterwards.
"""

import logging
from .common import SourceLocation
from .common import UnmatchedCloseBracket, UnmatchedOpenBracket
from .instructions import INSTRUCTION_CLASSES, Program
from .instructions import BranchIfZero, BranchIfNonZero


def parse(source, filename=None):
    """ Parse brainfuck source into a program.

    Args:
        source: a string or a file like object.
        filename: optional name of the source, used in error messages.

    Returns:
        A new :class:`lobe.instructions.Program`.

    .. doctest::

        >>> from lobe.parser import parse
        >>> program = parse('++[>+<-]')
        >>> program[2], program[7]
        (BranchIfZero(7), BranchIfNonZero(2))
    """
    if hasattr(source, 'read'):
        if filename is None:
            filename = getattr(source, 'name', None)
        source = source.read()
    return Parser().parse(source, filename=filename)


class Parser:
    """ Turns source text into a program with resolved branch targets """
    logger = logging.getLogger('lobe.parser')

    def parse(self, source, filename=None):
        if isinstance(source, (bytes, bytearray)):
            source = source.decode('utf-8', errors='replace')
        self.logger.debug('Parsing %s characters of brainfuck', len(source))
        instructions = []

        # A stack of pending loops, as (instruction index, location) pairs:
        loops = []
        pairs = []

        for char, row, col in self.scan(source):
            index = len(instructions)
            if char == '[':
                loc = SourceLocation(filename, row, col, source=source)
                loops.append((index, loc))
                instructions.append(BranchIfZero(0))
            elif char == ']':
                if not loops:
                    loc = SourceLocation(filename, row, col, source=source)
                    raise UnmatchedCloseBracket(loc)
                open_index, _ = loops.pop(-1)
                pairs.append((open_index, index))
                instructions.append(BranchIfNonZero(0))
            else:
                instructions.append(INSTRUCTION_CLASSES[char]())

        if loops:
            _, loc = loops[-1]
            raise UnmatchedOpenBracket(len(loops), loc)

        # Patch bracket targets:
        for open_index, close_index in pairs:
            instructions[open_index] = BranchIfZero(close_index)
            instructions[close_index] = BranchIfNonZero(open_index)

        program = Program(instructions)
        self.logger.debug(
            'Parsed %s instructions with %s loops', len(program), len(pairs))
        return program

    @staticmethod
    def scan(source):
        """ Generate all brainfuck commands with their row and column.

        Any other character is a comment and is skipped.
        """
        row, col = 1, 1
        for char in source:
            if char in INSTRUCTION_CLASSES:
                yield char, row, col
            if char == '\n':
                row += 1
                col = 1
            else:
                col += 1
