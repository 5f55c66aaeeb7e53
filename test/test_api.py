import unittest
import io
import os
import tempfile
from lobe import api
from lobe.common import ParseError, UnmatchedOpenBracket
from lobe.instructions import Program


class ApiTestCase(unittest.TestCase):
    def test_run(self):
        output = io.StringIO()
        api.run(',[.,]', stdin=b'abc', stdout=output)
        self.assertEqual('abc', output.getvalue())

    def test_run_program(self):
        """ Test that an already parsed program can be run """
        program = api.parse('++++++[>++++++++<-]>+.')
        self.assertIsInstance(program, Program)
        output = io.StringIO()
        api.run(program, stdout=output)
        self.assertEqual('1', output.getvalue())

    def test_run_with_config(self):
        output = io.StringIO()
        config = api.ExecutionConfig(
            cell_width=32, tape_policy=api.GrowOnDemand(16))
        api.run('-.', config=config, stdout=output)
        self.assertEqual(str(2 ** 32 - 1), output.getvalue())

    def test_parse_error_prevents_execution(self):
        """ Test that nothing runs when the source does not parse """
        output = io.StringIO()
        with self.assertRaises(UnmatchedOpenBracket):
            api.run('+++.[', stdout=output)
        self.assertEqual('', output.getvalue())

    def test_create_machine(self):
        machine = api.create_machine('+', stdout=io.StringIO())
        machine.run()
        self.assertEqual(1, machine.state.cell)
        with self.assertRaises(ParseError):
            api.create_machine(']')

    def test_load_file(self):
        fd, filename = tempfile.mkstemp(suffix='.b')
        try:
            with os.fdopen(fd, 'w') as f:
                f.write('comment +[-]')
            program = api.load_file(filename)
        finally:
            os.remove(filename)
        self.assertEqual('+[-]', program.to_source())


if __name__ == '__main__':
    unittest.main()
