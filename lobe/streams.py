""" Input and output of running programs.

The machine never touches the process streams directly. Instead it reads
bytes from an :class:`InputSource` and writes cell values to an
:class:`OutputSink`. Both can be replaced, for example by in memory
streams during testing.
"""

import abc
import io
import sys
from .common import InputError, OutputError


class InputSource(metaclass=abc.ABCMeta):
    """ Interface to read input bytes from """

    @abc.abstractmethod
    def read_byte(self):
        """ Read a single byte, return None when there is no more input """
        raise NotImplementedError("Abstract base class")


class NullInputSource(InputSource):
    """ Input source which is always exhausted """

    def read_byte(self):
        return None


class BytesInputSource(InputSource):
    """ Input source reading from a bytes object """

    def __init__(self, data):
        if isinstance(data, str):
            data = data.encode('utf-8')
        self.data = bytes(data)
        self.position = 0

    def read_byte(self):
        if self.position < len(self.data):
            value = self.data[self.position]
            self.position += 1
            return value


class FileInputSource(InputSource):
    """ Input source reading from a file like object.

    Binary files deliver their bytes as is. Characters read from text
    files are encoded as utf-8 and delivered byte per byte.
    """

    def __init__(self, f):
        self.f = f
        self.pending = b''

    def read_byte(self):
        if not self.pending:
            try:
                data = self.f.read(1)
            except OSError as ex:
                raise InputError('Reading input failed: {}'.format(ex)) \
                    from ex
            if isinstance(data, str):
                data = data.encode('utf-8')
            self.pending = data
        if self.pending:
            value = self.pending[0]
            self.pending = self.pending[1:]
            return value


class OutputSink(metaclass=abc.ABCMeta):
    """ Interface to write cell values to.

    Values of 8 bit cells are written as a single character, wider cells
    are written as decimal numbers. Output is flushed after each value.
    """

    def write_cell(self, value, cell_width):
        """ Render the value and write it out """
        try:
            self.do_write(value, cell_width)
        except (OSError, UnicodeEncodeError) as ex:
            raise OutputError('Writing output failed: {}'.format(ex)) from ex

    @abc.abstractmethod
    def do_write(self, value, cell_width):
        """ Actual write implementation """
        raise NotImplementedError("Abstract base class")


class TextOutputSink(OutputSink):
    """ Output sink writing to a text file """

    def __init__(self, f):
        self.f = f

    def do_write(self, value, cell_width):
        if cell_width == 8:
            self.f.write(chr(value))
        else:
            self.f.write(str(value))
        self.f.flush()


class BinaryOutputSink(OutputSink):
    """ Output sink writing to a binary file """

    def __init__(self, f):
        self.f = f

    def do_write(self, value, cell_width):
        if cell_width == 8:
            self.f.write(bytes([value]))
        else:
            self.f.write(str(value).encode('ascii'))
        self.f.flush()


def create_input_source(stdin=None):
    """ Determine the input source to use.

    Accepts an input source, a file like object, a bytes or str object, or
    None to read from the standard input of the process.
    """
    if stdin is None:
        stdin = getattr(sys.stdin, 'buffer', sys.stdin)
    if isinstance(stdin, InputSource):
        return stdin
    elif isinstance(stdin, (bytes, bytearray, str)):
        return BytesInputSource(stdin)
    elif hasattr(stdin, 'read'):
        return FileInputSource(stdin)
    else:
        raise TypeError('Cannot read input from {}'.format(stdin))


def create_output_sink(stdout=None):
    """ Determine the output sink to use.

    Accepts an output sink, a file like object, or None to write to the
    standard output of the process.
    """
    if stdout is None:
        stdout = sys.stdout
    if isinstance(stdout, OutputSink):
        return stdout
    elif isinstance(stdout, io.TextIOBase):
        return TextOutputSink(stdout)
    elif isinstance(stdout, (io.RawIOBase, io.BufferedIOBase)):
        return BinaryOutputSink(stdout)
    elif hasattr(stdout, 'write'):
        return TextOutputSink(stdout)
    else:
        raise TypeError('Cannot write output to {}'.format(stdout))
