""" Bytecode for brainfuck programs.

Each brainfuck command maps onto exactly one instruction class. The two
bracket instructions carry the index of their matching bracket, so a
:class:`Program` is a flat list which can be executed without any
further searching.
"""

import sys


class Instruction:
    """ Base class of all bytecode instructions """
    __slots__ = ()
    symbol = None

    def _key(self):
        return ()

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self), self._key()))

    def __setattr__(self, name, value):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    def __repr__(self):
        return '{}()'.format(type(self).__name__)


class MovePointerForward(Instruction):
    __slots__ = ()
    symbol = '>'


class MovePointerBackward(Instruction):
    __slots__ = ()
    symbol = '<'


class IncrementCell(Instruction):
    __slots__ = ()
    symbol = '+'


class DecrementCell(Instruction):
    __slots__ = ()
    symbol = '-'


class OutputCell(Instruction):
    __slots__ = ()
    symbol = '.'


class InputCell(Instruction):
    __slots__ = ()
    symbol = ','


class Branch(Instruction):
    """ A bracket instruction, refering to its matching bracket """
    __slots__ = ('target',)

    def __init__(self, target):
        object.__setattr__(self, 'target', target)

    def _key(self):
        return (self.target,)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, self.target)


class BranchIfZero(Branch):
    """ Skip past the matching close bracket when the cell is zero """
    __slots__ = ()
    symbol = '['


class BranchIfNonZero(Branch):
    """ Jump back to the matching open bracket when the cell is not zero """
    __slots__ = ()
    symbol = ']'


INSTRUCTION_CLASSES = {
    cls.symbol: cls
    for cls in (
        MovePointerForward, MovePointerBackward, IncrementCell,
        DecrementCell, OutputCell, InputCell, BranchIfZero, BranchIfNonZero)
}


class Program:
    """ An immutable sequence of instructions.

    Programs are created by the parser and never change afterwards,
    so one program can be run by any number of machines.
    """
    __slots__ = ('instructions',)

    def __init__(self, instructions=()):
        object.__setattr__(self, 'instructions', tuple(instructions))

    def __setattr__(self, name, value):
        raise AttributeError('Program is immutable')

    def __len__(self):
        return len(self.instructions)

    def __getitem__(self, index):
        return self.instructions[index]

    def __iter__(self):
        return iter(self.instructions)

    def __eq__(self, other):
        return isinstance(other, Program) and \
            self.instructions == other.instructions

    def __hash__(self):
        return hash(self.instructions)

    def __repr__(self):
        return 'Program of {} instructions'.format(len(self))

    def verify(self):
        """ Check that all branch targets refer to each other.

        Raises a ValueError when a target is out of range, points to
        the wrong kind of instruction or when brackets cross.
        """
        pending = []
        for index, instruction in enumerate(self.instructions):
            if not isinstance(instruction, Branch):
                continue
            target = instruction.target
            if target not in range(len(self)):
                raise ValueError(
                    'Target {} of instruction {} out of range'.format(
                        target, index))
            if isinstance(instruction, BranchIfZero):
                matching = BranchIfNonZero
                pending.append(index)
            else:
                matching = BranchIfZero
                if not pending or pending.pop() != target:
                    raise ValueError(
                        'Brackets cross at instruction {}'.format(index))
            other = self.instructions[target]
            if not isinstance(other, matching) or other.target != index:
                raise ValueError(
                    'Instruction {} and {} do not match'.format(
                        index, target))
        if pending:
            raise ValueError('{} brackets not closed'.format(len(pending)))

    def to_source(self):
        """ Render the program back into brainfuck text """
        return ''.join(instruction.symbol for instruction in self)

    def dump(self, file=None):
        """ Print a listing of all instructions """
        if file is None:
            file = sys.stdout
        width = len(str(max(len(self) - 1, 0)))
        for index, instruction in enumerate(self):
            if isinstance(instruction, Branch):
                print(
                    '{:{}}  {}  {:20} -> {}'.format(
                        index, width, instruction.symbol,
                        type(instruction).__name__, instruction.target),
                    file=file)
            else:
                print(
                    '{:{}}  {}  {}'.format(
                        index, width, instruction.symbol,
                        type(instruction).__name__),
                    file=file)
