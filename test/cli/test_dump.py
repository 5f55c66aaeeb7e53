import unittest
import io
import os
import tempfile
from unittest.mock import patch

from lobe.cli.dump import dump


class DumpTestCase(unittest.TestCase):
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_help(self, mock_stdout):
        """ Check dump help message """
        with self.assertRaises(SystemExit) as cm:
            dump(['-h'])
        self.assertEqual(0, cm.exception.code)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_dump(self, mock_stdout):
        fd, filename = tempfile.mkstemp(suffix='.b')
        try:
            with os.fdopen(fd, 'w') as f:
                f.write('++[>+<-]')
            dump([filename])
        finally:
            os.remove(filename)
        lines = mock_stdout.getvalue().splitlines()
        self.assertEqual(8, len(lines))
        self.assertIn('BranchIfZero', lines[2])
        self.assertTrue(lines[2].endswith('-> 7'))
        self.assertTrue(lines[7].endswith('-> 2'))


if __name__ == '__main__':
    unittest.main(verbosity=2)
