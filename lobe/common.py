"""
   Error handling routines
   Source location structures
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


def get_file(f, mode='r'):
    """ Determine if argument is a file like object or make it so! """
    if hasattr(f, 'read'):
        # Assume this is a file like object
        return f
    elif isinstance(f, str):
        return open(f, mode)
    else:
        raise FileNotFoundError('Cannot open {}'.format(f))


class SourceLocation:
    """ A location that refers to a position in a source text """

    __slots__ = ['filename', 'row', 'col', 'length', 'source']

    def __init__(self, filename, row, col, ln=1, source=None):
        self.filename = filename
        self.row = row
        self.col = col
        self.length = ln
        self.source = source

    def __repr__(self):
        return '({}, {}, {}, {})'.format(
            self.filename, self.row, self.col, self.length)

    def __str__(self):
        return '{}:{}:{}'.format(self.filename or '?', self.row, self.col)

    def print_message(self, message, lines=None, file=None):
        """ Print a message at this location in the given source lines """
        if lines is None:
            if self.source is None:
                print(message, file=file)
                return
            lines = self.source.splitlines()

        if self.filename:
            print('File : "{}"'.format(self.filename), file=file)

        print_message(
            lines, self.row, self.col, self.length, message, file=file)


def print_message(lines, row, col, length, message, file=None):
    """ Render a message nicely embedded in surrounding source """
    prerow = max(row - 2, 1)
    afterrow = min(row + 3, len(lines))

    for r in range(prerow, afterrow + 1):
        if r - 1 in range(len(lines)):
            print('{:5} :{}'.format(r, lines[r - 1]), file=file)

        # Point at the offending character:
        if r == row:
            base_txt = '      :'
            marker = '^' * max(length, 1)
            indent1_txt = base_txt + ' ' * (col - 1)
            indent2_txt = indent1_txt + ' ' * (max(length, 1) // 2)
            print(indent1_txt + marker, file=file)
            print(indent2_txt + '|', file=file)
            print(indent2_txt + '+---- ' + message, file=file)


class LobeError(Exception):
    """ Base class of all errors raised by lobe """
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc
        if loc:
            assert isinstance(loc, SourceLocation), \
                '{0} must be SourceLocation'.format(type(loc))

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def print(self, file=None):
        """ Print the error inside some nice context """
        if self.loc:
            self.loc.print_message(self.msg, file=file)
        else:
            print(self.msg, file=file)


class ParseError(LobeError):
    """ The source text could not be turned into a program """
    pass


class UnmatchedCloseBracket(ParseError):
    def __init__(self, loc=None):
        super().__init__('] has no matching [', loc)


class UnmatchedOpenBracket(ParseError):
    def __init__(self, count, loc=None):
        super().__init__(
            '[ requires matching ] ({} unclosed)'.format(count), loc)
        self.count = count


class ExecutionError(LobeError):
    """ A running program could not continue """
    pass


class InputError(ExecutionError):
    pass


class OutputError(ExecutionError):
    pass


class PointerUnderflowError(ExecutionError):
    pass


class ExecutionAborted(ExecutionError):
    pass

