""" The brainfuck bytecode interpreter.

A :class:`Machine` executes a :class:`lobe.instructions.Program`. It owns
the tape and the two cursors (the data pointer and the instruction
pointer), and talks to the outside world via an input source and an
output sink.
"""

import logging
from . import instructions
from .common import ExecutionAborted, ExecutionError
from .config import ExecutionConfig
from .streams import create_input_source, create_output_sink


class MachineState:
    """ The mutable state of a single execution """

    def __init__(self, tape):
        self.tape = tape
        self.data_pointer = 0
        self.instruction_pointer = 0

    def __repr__(self):
        return 'MachineState(ip={}, dp={}, tape={} cells)'.format(
            self.instruction_pointer, self.data_pointer, len(self.tape))

    @property
    def cell(self):
        """ Value of the cell under the data pointer """
        return self.tape[self.data_pointer]


class Machine:
    """ Brainfuck machine.

    Args:
        program: the program to execute.
        config: an :class:`lobe.config.ExecutionConfig`, defaults to 8 bit
            cells on a fixed tape of 30000 cells.
        input_stream: where the ',' command reads from, see
            :func:`lobe.streams.create_input_source`.
        output_stream: where the '.' command writes to, see
            :func:`lobe.streams.create_output_sink`.
        abort_check: optional callable, called before every instruction.
            When it returns a true value, execution stops with
            :class:`lobe.common.ExecutionAborted`.
    """
    logger = logging.getLogger('lobe.machine')

    def __init__(
        self, program, config=None, input_stream=None, output_stream=None,
        abort_check=None
    ):
        if not isinstance(program, instructions.Program):
            raise TypeError('Expected a Program, not {}'.format(program))
        if config is None:
            config = ExecutionConfig()
        self.program = program
        self.config = config
        self.input_source = create_input_source(input_stream)
        self.output_sink = create_output_sink(output_stream)
        self.abort_check = abort_check
        self.reset()
        self.dispatch = {
            instructions.MovePointerForward: self.move_forward,
            instructions.MovePointerBackward: self.move_backward,
            instructions.IncrementCell: self.increment,
            instructions.DecrementCell: self.decrement,
            instructions.OutputCell: self.output,
            instructions.InputCell: self.input,
            instructions.BranchIfZero: self.branch_if_zero,
            instructions.BranchIfNonZero: self.branch_if_non_zero,
        }

    def reset(self):
        """ Reset machine state """
        self.state = MachineState(self.config.tape_policy.create_tape())
        self.steps = 0
        self.failed = False

    @property
    def finished(self):
        return self.state.instruction_pointer >= len(self.program)

    def run(self):
        """ Run until the end of the program is reached. """
        if self.failed:
            raise ExecutionError('Machine failed before and cannot resume')
        self.logger.debug(
            'Running %s instructions with %s', len(self.program), self.config)
        try:
            while not self.finished:
                if self.abort_check is not None and self.abort_check():
                    raise ExecutionAborted(
                        'Aborted after {} steps'.format(self.steps))
                self.step()
        except ExecutionError:
            self.failed = True
            raise
        self.logger.debug('Finished after %s steps', self.steps)

    def step(self):
        """ Execute a single instruction. """
        if self.finished:
            raise ExecutionError('Machine already finished')
        state = self.state
        instruction = self.program[state.instruction_pointer]
        self.dispatch[type(instruction)](instruction)
        self.steps += 1

    def move_forward(self, instruction):
        state = self.state
        state.data_pointer = state.tape.forward(state.data_pointer)
        state.instruction_pointer += 1

    def move_backward(self, instruction):
        state = self.state
        state.data_pointer = state.tape.backward(state.data_pointer)
        state.instruction_pointer += 1

    def increment(self, instruction):
        state = self.state
        value = state.tape[state.data_pointer] + 1
        state.tape[state.data_pointer] = value & self.config.cell_mask
        state.instruction_pointer += 1

    def decrement(self, instruction):
        state = self.state
        value = state.tape[state.data_pointer] - 1
        state.tape[state.data_pointer] = value & self.config.cell_mask
        state.instruction_pointer += 1

    def output(self, instruction):
        state = self.state
        self.output_sink.write_cell(
            state.tape[state.data_pointer], self.config.cell_width)
        state.instruction_pointer += 1

    def input(self, instruction):
        state = self.state
        value = self.input_source.read_byte()
        if value is None:  # End of input
            value = 0
        state.tape[state.data_pointer] = value & self.config.cell_mask
        state.instruction_pointer += 1

    def branch_if_zero(self, instruction):
        state = self.state
        if state.tape[state.data_pointer] == 0:
            state.instruction_pointer = instruction.target + 1
        else:
            state.instruction_pointer += 1

    def branch_if_non_zero(self, instruction):
        state = self.state
        if state.tape[state.data_pointer] != 0:
            state.instruction_pointer = instruction.target
        else:
            state.instruction_pointer += 1
