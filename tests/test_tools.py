from __future__ import absolute_import, print_function

import os
import tempfile
from io import StringIO
from contextlib import redirect_stderr
from unittest import TestCase, main

from llsets.tools import analyze


GRAMMAR = '''
start_symbol = 10
[terminals]
1 = "a"
2 = "b"
[non_terminals]
10 = "S"
11 = "A"
[productions]
1 = { lhs = [10], rhs = [11, 2] }
2 = { lhs = [11], rhs = [1] }
3 = { lhs = [11], rhs = [] }
4 = { lhs = [11], rhs = [12] }
'''


class TestAnalyze(TestCase):
    def setUp(self):
        fd, self.grammar_path = tempfile.mkstemp(suffix='.toml')
        with os.fdopen(fd, 'w', encoding='utf8') as f:
            f.write(GRAMMAR)
        fd, self.out_path = tempfile.mkstemp(suffix='.txt')
        os.close(fd)

    def tearDown(self):
        os.remove(self.grammar_path)
        os.remove(self.out_path)

    def _run(self, *args):
        err = StringIO()
        with redirect_stderr(err):
            status = analyze.main(list(args) + ['-o', self.out_path, self.grammar_path])
        with open(self.out_path, encoding='utf8') as f:
            return status, f.read(), err.getvalue()

    def test_permissive(self):
        status, out, _ = self._run('--permissive')
        self.assertEqual(status, 0)
        self.assertEqual(out, 'Starting symbol: S\n'
                              'P1: S -> Ab\n'
                              'P2: A -> a\n'
                              'P3: A -> ε\n'
                              'P4: A -> T12\n'
                              '\n'
                              'Nullable = {A}\n'
                              'First(S) = {a, b, T12}\n'
                              'First(A) = {a, T12}\n')

    def test_only(self):
        status, out, _ = self._run('--permissive', '--nullable-only')
        self.assertEqual((status, out), (0, 'Nullable = {A}\n'))

        status, out, _ = self._run('--permissive', '--first-only')
        self.assertEqual((status, out), (0, 'First(S) = {a, b, T12}\nFirst(A) = {a, T12}\n'))

    def test_strict_failure(self):
        status, out, err = self._run()
        self.assertEqual(status, 1)
        self.assertEqual(out, '')
        self.assertIn('UnknownSymbol', err)
        self.assertIn('12', err)

    def test_analyze(self):
        from llsets import LLSets
        out = StringIO()
        analyze.analyze(LLSets(GRAMMAR.replace('[12]', '[1, 1]')), out, nullable=False)
        self.assertEqual(out.getvalue(), 'First(S) = {a, b}\nFirst(A) = {a}\n')


if __name__ == '__main__':
    main()
