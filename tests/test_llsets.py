from __future__ import absolute_import

import os
import tempfile
from io import StringIO
from unittest import TestCase, main

from llsets import LLSets, ConfigurationError, UnknownSymbol
from llsets.llsets import LLSetsOptions

from .configurations import build_grammar


STATEMENTS = '''
start_symbol = 10

[terminals]
1 = "a"
2 = "b"
3 = "c"

[non_terminals]
10 = "S"
11 = "A"
12 = "B"

[productions]
1 = { lhs = [10], rhs = [11, 12, 3] }
2 = { lhs = [11], rhs = [1, 11] }
3 = { lhs = [11], rhs = [] }
4 = { lhs = [12], rhs = [2] }
5 = { lhs = [12], rhs = [99] }
'''


class TestOptions(TestCase):
    def test_defaults(self):
        o = LLSetsOptions({})
        self.assertEqual(o.debug, False)
        self.assertEqual(o.strict, True)
        self.assertEqual(o.epsilon, 'ε')

    def test_unknown_option(self):
        self.assertRaises(ConfigurationError, LLSetsOptions, {'parser': 'lalr'})
        self.assertRaises(ConfigurationError, LLSets, build_grammar('S -> a')[0], start='S')

    def test_bad_epsilon(self):
        self.assertRaises(ConfigurationError, LLSetsOptions, {'epsilon': None})

    def test_setattr(self):
        o = LLSetsOptions({'debug': 1})
        self.assertIs(o.debug, True)
        o.debug = False
        self.assertIs(o.debug, False)
        self.assertRaises(ConfigurationError, setattr, o, 'foo', 1)


class TestLLSets(TestCase):
    def test_from_grammar(self):
        grammar, ids = build_grammar('E -> E + T', 'E -> T', 'T -> T * F', 'T -> F', 'F -> id')
        s = LLSets(grammar)
        self.assertIs(s.grammar, grammar)
        self.assertEqual(s.nullable, set())
        self.assertEqual(s.format_nullable(), 'Nullable = {}')
        self.assertEqual(s.format_first_sets(), 'First(E) = {id}\n'
                                                'First(T) = {id}\n'
                                                'First(F) = {id}')

    def test_from_text(self):
        self.assertRaises(UnknownSymbol, LLSets, STATEMENTS)

        s = LLSets(STATEMENTS, strict=False)
        self.assertEqual(s.format_nullable(), 'Nullable = {A}')
        self.assertEqual(s.format_first_sets(), 'First(S) = {a, b, T99}\n'
                                                'First(A) = {a}\n'
                                                'First(B) = {b, T99}')

    def test_from_file(self):
        s = LLSets(StringIO(STATEMENTS.replace('99', '3')))
        self.assertEqual(s.format_first_sets(), 'First(S) = {a, b, c}\n'
                                                'First(A) = {a}\n'
                                                'First(B) = {b, c}')

    def test_format_grammar(self):
        s = LLSets(STATEMENTS.replace('99', '3'), epsilon='<e>')
        self.assertEqual(s.format_grammar(), 'Starting symbol: S\n'
                                             'P1: S -> ABc\n'
                                             'P2: A -> aA\n'
                                             'P3: A -> <e>\n'
                                             'P4: B -> b\n'
                                             'P5: B -> c')

    def test_open(self):
        fd, path = tempfile.mkstemp(suffix='.toml')
        try:
            with os.fdopen(fd, 'w', encoding='utf8') as f:
                f.write(STATEMENTS.replace('99', '3'))
            s = LLSets.open(os.path.basename(path), rel_to=path)
            self.assertEqual(s.nullable, {11})
        finally:
            os.remove(path)

    def test_open_from_package(self):
        s = LLSets.open_from_package('llsets', 'grammars/expression.toml')
        self.assertEqual(s.format_first_sets(), 'First(E) = {(, id}\n'
                                                'First(T) = {(, id}\n'
                                                'First(F) = {(, id}')

        s = LLSets.open_from_package('llsets', 'grammars/statements.toml')
        self.assertEqual(s.format_nullable(), 'Nullable = {A, B}')
        self.assertEqual(s.format_first_sets(), 'First(S) = {a, b, c}\n'
                                                'First(A) = {a}\n'
                                                'First(B) = {b}\n'
                                                'First(C) = {a, b, c}\n'
                                                'First(D) = {a, b, c}')


if __name__ == '__main__':
    main()
