import unittest
import io
from unittest.mock import patch

from lobe.__main__ import main


class MainTestCase(unittest.TestCase):
    @patch('sys.argv', ['lobe'])
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_no_arguments(self, mock_stdout):
        main()
        self.assertIn('python -m lobe run -h', mock_stdout.getvalue())

    @patch('sys.argv', ['lobe', 'compile'])
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_unknown_command(self, mock_stdout):
        main()
        self.assertIn('Please use one of', mock_stdout.getvalue())

    @patch('sys.argv', ['lobe', 'dump', '-h'])
    @patch('sys.stdout', new_callable=io.StringIO)
    def test_subcommand(self, mock_stdout):
        with self.assertRaises(SystemExit) as cm:
            main()
        self.assertEqual(0, cm.exception.code)


if __name__ == '__main__':
    unittest.main(verbosity=2)
