""" Run the example programs and check their output """

import unittest
import io
import os
from lobe import api


examples_dir = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), '..', 'examples')


def relpath(*args):
    return os.path.normpath(os.path.join(examples_dir, *args))


class SamplesTestCase(unittest.TestCase):
    def run_sample(self, filename, stdin=b''):
        program = api.load_file(relpath(filename))
        output = io.StringIO()
        api.run(program, stdin=stdin, stdout=output)
        return output.getvalue()

    def test_hello(self):
        self.assertEqual('Hello World!\n', self.run_sample('hello.b'))

    def test_hello_grow(self):
        """ Test hello world on a tiny tape which needs to grow """
        program = api.load_file(relpath('hello.b'))
        output = io.StringIO()
        config = api.ExecutionConfig(tape_policy=api.GrowOnDemand(1))
        api.run(program, config=config, stdout=output)
        self.assertEqual('Hello World!\n', output.getvalue())

    def test_cat(self):
        self.assertEqual('meow\n', self.run_sample('cat.b', stdin=b'meow\n'))


if __name__ == '__main__':
    unittest.main()
