""" Tape implementations.

A tape is an indexable sequence of cells, which knows how the data
pointer moves over it. Cells start out as zero.
"""

import logging
from .common import PointerUnderflowError


class Tape:
    """ Base tape, a plain list of cells """

    logger = logging.getLogger('lobe.tape')

    def __init__(self, size):
        self.cells = [0] * size

    def __len__(self):
        return len(self.cells)

    def __getitem__(self, pointer):
        return self.cells[pointer]

    def __setitem__(self, pointer, value):
        self.cells[pointer] = value

    def forward(self, pointer):  # pragma: no cover
        """ Return the pointer value after moving one cell right """
        raise NotImplementedError()

    def backward(self, pointer):  # pragma: no cover
        """ Return the pointer value after moving one cell left """
        raise NotImplementedError()


class FixedTape(Tape):
    """ Tape of fixed length, the pointer wraps around at both ends. """

    def forward(self, pointer):
        return (pointer + 1) % len(self.cells)

    def backward(self, pointer):
        return (pointer - 1) % len(self.cells)


class GrowingTape(Tape):
    """ Tape which grows to the right when the pointer goes beyond the end.

    The tape doubles its length until the pointer is covered, before a
    cell beyond the end is accessed and before the pointer moves right.
    """

    def __init__(self, size, wrap_underflow=True):
        super().__init__(size)
        self.wrap_underflow = wrap_underflow

    def __getitem__(self, pointer):
        self.ensure(pointer)
        return self.cells[pointer]

    def __setitem__(self, pointer, value):
        self.ensure(pointer)
        self.cells[pointer] = value

    def ensure(self, pointer):
        """ Grow the tape until the given pointer is a valid index """
        if pointer >= len(self.cells):
            size = len(self.cells)
            while size <= pointer:
                size *= 2
            self.logger.debug(
                'Growing tape from %s to %s cells', len(self.cells), size)
            self.cells.extend([0] * (size - len(self.cells)))

    def forward(self, pointer):
        self.ensure(pointer)
        return pointer + 1

    def backward(self, pointer):
        if pointer > 0:
            return pointer - 1
        elif self.wrap_underflow:
            return len(self.cells) - 1
        else:
            raise PointerUnderflowError(
                'Data pointer moved left of the first cell')
