import unittest
import io
import os
import tempfile
from unittest.mock import patch, Mock

from lobe.cli.run import run


class RunTestCase(unittest.TestCase):
    def setUp(self):
        fd, self.filename = tempfile.mkstemp(suffix='.b')
        os.close(fd)

    def tearDown(self):
        os.remove(self.filename)

    def write_source(self, src):
        with open(self.filename, 'w') as f:
            f.write(src)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_help(self, mock_stdout):
        """ Check run help message """
        with self.assertRaises(SystemExit) as cm:
            run(['-h'])
        self.assertEqual(0, cm.exception.code)
        self.assertIn('--cell-width', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_run(self, mock_stdout):
        self.write_source('++++++++[>++++++++<-]>+. print an A')
        run([self.filename])
        self.assertEqual('A', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_cell_width(self, mock_stdout):
        self.write_source('-.')
        run(['--cell-width', '16', '--tape', 'grow', self.filename])
        self.assertEqual('65535', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_input_file(self, mock_stdout):
        fd, input_filename = tempfile.mkstemp()
        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(b'cat')
            self.write_source(',[.,]')
            run(['--input', input_filename, self.filename])
        finally:
            os.remove(input_filename)
        self.assertEqual('cat', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_input_from_stdin(self, mock_stdout):
        """ Check that standard input is not closed after the run """
        stdin = Mock()
        stdin.buffer = io.BytesIO(b'hi')
        self.write_source(',[.,]')
        with patch('sys.stdin', stdin):
            run(['--input', '-', self.filename])
        self.assertFalse(stdin.buffer.closed)
        self.assertEqual('hi', mock_stdout.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_parse_error(self, mock_stdout, mock_stderr):
        """ Check that a bad program exits with an error and no output """
        self.write_source('+.[')
        with self.assertRaises(SystemExit) as cm:
            run([self.filename])
        self.assertEqual(1, cm.exception.code)
        self.assertEqual('', mock_stdout.getvalue())
        self.assertIn('[ requires matching ]', mock_stderr.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_underflow_error(self, mock_stdout, mock_stderr):
        self.write_source('.<')
        with self.assertRaises(SystemExit) as cm:
            run(['--tape', 'grow', '--underflow', 'error', self.filename])
        self.assertEqual(1, cm.exception.code)
        self.assertEqual('\x00', mock_stdout.getvalue())

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_bad_options(self, mock_stderr):
        self.write_source('+')
        with self.assertRaises(SystemExit) as cm:
            run(['--underflow', 'error', self.filename])
        self.assertEqual(2, cm.exception.code)

    @patch('sys.stderr', new_callable=io.StringIO)
    def test_missing_file(self, mock_stderr):
        with self.assertRaises(SystemExit) as cm:
            run([self.filename + '.missing'])
        self.assertEqual(1, cm.exception.code)


if __name__ == '__main__':
    unittest.main(verbosity=2)
