"""
This module contains a set of handy functions to invoke the parser and
the interpreter.
"""

import logging
from .common import get_file
from .config import ExecutionConfig, FixedWrap, GrowOnDemand
from .config import PointerUnderflow
from .instructions import Program
from .machine import Machine
from .parser import parse


__all__ = [
    'parse', 'create_machine', 'run', 'ExecutionConfig', 'FixedWrap',
    'GrowOnDemand', 'PointerUnderflow']


logger = logging.getLogger('lobe.api')


def load_program(source):
    """ Get a program from a program, a file like object or source text """
    if isinstance(source, Program):
        return source
    return parse(source)


def load_file(filename):
    """ Parse the brainfuck program in the given file """
    logger.debug('Loading %s', filename)
    with get_file(filename) as f:
        return parse(f)


def create_machine(
    source, config=None, stdin=None, stdout=None, abort_check=None
):
    """ Parse the source and prepare a machine to run it.

    A source with unbalanced brackets raises a
    :class:`lobe.common.ParseError` before a machine is created.
    """
    program = load_program(source)
    return Machine(
        program, config=config, input_stream=stdin, output_stream=stdout,
        abort_check=abort_check)


def run(source, config=None, stdin=None, stdout=None, abort_check=None):
    """ Run a brainfuck program

    Args:
        source: a program, source text or a file like object.
        config: an :class:`lobe.config.ExecutionConfig`.
        stdin: input for the program, a file like object or bytes. The
            standard input of the process is used when not given.
        stdout: file like object to write output to. The standard output
            of the process is used when not given.
        abort_check: callable which stops the run when it returns True.

    .. doctest::

        >>> import io
        >>> from lobe.api import run
        >>> output = io.StringIO()
        >>> run(',[.,]', stdin=b'echo', stdout=output)
        >>> output.getvalue()
        'echo'

    """
    machine = create_machine(
        source, config=config, stdin=stdin, stdout=stdout,
        abort_check=abort_check)
    machine.run()
