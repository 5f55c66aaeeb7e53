""" Execution configuration.

This module contains the options which influence how a program runs:

- the cell width in bits
- the tape policy (fixed size with wrap around, or growing on demand)
- what happens when the data pointer moves left of the first cell

"""

import enum
from .tape import FixedTape, GrowingTape


CELL_WIDTHS = (8, 16, 32, 64)
DEFAULT_TAPE_SIZE = 30000


class PointerUnderflow(enum.Enum):
    """ Behavior of a growing tape when moving left at the first cell """

    WRAP = 1
    ERROR = 2


class TapePolicy:
    """ Base class of the tape sizing policies """

    def create_tape(self):  # pragma: no cover
        raise NotImplementedError()


class FixedWrap(TapePolicy):
    """ A tape of fixed size, the data pointer wraps at both ends """

    def __init__(self, size=DEFAULT_TAPE_SIZE):
        if size < 1:
            raise ValueError('Tape size must be positive, not {}'.format(size))
        self.size = size

    def __repr__(self):
        return 'FixedWrap(size={})'.format(self.size)

    def __eq__(self, other):
        return isinstance(other, FixedWrap) and self.size == other.size

    def create_tape(self):
        return FixedTape(self.size)


class GrowOnDemand(TapePolicy):
    """ A tape which doubles its size whenever the pointer runs off the end
    """

    def __init__(
        self, initial_size=DEFAULT_TAPE_SIZE, underflow=PointerUnderflow.WRAP
    ):
        if initial_size < 1:
            raise ValueError(
                'Tape size must be positive, not {}'.format(initial_size))
        if not isinstance(underflow, PointerUnderflow):
            raise TypeError(
                'Expected a PointerUnderflow, not {}'.format(underflow))
        self.initial_size = initial_size
        self.underflow = underflow

    def __repr__(self):
        return 'GrowOnDemand(initial_size={}, underflow={})'.format(
            self.initial_size, self.underflow.name)

    def __eq__(self, other):
        return (
            isinstance(other, GrowOnDemand)
            and self.initial_size == other.initial_size
            and self.underflow == other.underflow
        )

    def create_tape(self):
        return GrowingTape(
            self.initial_size,
            wrap_underflow=self.underflow is PointerUnderflow.WRAP)


class ExecutionConfig:
    """ A collection of options for the interpreter """

    def __init__(self, cell_width=8, tape_policy=None):
        if cell_width not in CELL_WIDTHS:
            raise ValueError(
                'Invalid cell width: {}, choose from {}'.format(
                    cell_width, CELL_WIDTHS))
        if tape_policy is None:
            tape_policy = FixedWrap()
        if not isinstance(tape_policy, TapePolicy):
            raise TypeError(
                'Expected a tape policy, not {}'.format(tape_policy))
        self.cell_width = cell_width
        self.tape_policy = tape_policy

    def __repr__(self):
        return 'ExecutionConfig(cell_width={}, tape_policy={})'.format(
            self.cell_width, self.tape_policy)

    @property
    def cell_mask(self):
        """ The mask to apply after each arithmetic cell operation """
        return (1 << self.cell_width) - 1

    @classmethod
    def from_options(
        cls, cell_width=8, tape='fixed', tape_size=DEFAULT_TAPE_SIZE,
        underflow='wrap'
    ):
        """ Create a configuration from command line style options """
        if tape == 'fixed':
            if underflow != 'wrap':
                raise ValueError('A fixed tape always wraps')
            tape_policy = FixedWrap(tape_size)
        elif tape == 'grow':
            try:
                underflow = PointerUnderflow[underflow.upper()]
            except KeyError:
                raise ValueError(
                    'Invalid pointer underflow: {}'.format(underflow))
            tape_policy = GrowOnDemand(tape_size, underflow=underflow)
        else:
            raise ValueError('Invalid tape policy: {}'.format(tape))
        return cls(cell_width=cell_width, tape_policy=tape_policy)
