import os
import pkgutil

from .exceptions import ConfigurationError, assert_config
from .grammar import Grammar, EPSILON
from .load_grammar import load_grammar
from .analysis import GrammarAnalyzer


class LLSetsOptions(object):
    """Specifies the options for LLSets

    """
    OPTIONS_DOC = """
    debug
            Log the nullable set, the dependency edges, the mutually recursive
            groups and the FIRST sets through the ``llsets`` logger (default: False)
    strict
            When the grammar is given as TOML text, reject productions that reference
            unknown symbol ids. When False, missing symbols are created instead (default: True)
    epsilon
            Text used when rendering an empty production body (default: "ε")
    """
    if __doc__:
        __doc__ += OPTIONS_DOC

    _defaults = {
        'debug': False,
        'strict': True,
        'epsilon': EPSILON,
    }

    def __init__(self, options_dict):
        o = dict(options_dict)

        options = {}
        for name, default in self._defaults.items():
            if name in o:
                value = o.pop(name)
                if isinstance(default, bool):
                    value = bool(value)
            else:
                value = default

            options[name] = value

        if not isinstance(options['epsilon'], str):
            raise ConfigurationError("epsilon must be a string, got %r" % (options['epsilon'],))

        self.__dict__['options'] = options

        if o:
            raise ConfigurationError("Unknown options: %s" % list(o.keys()))

    def __getattr__(self, name):
        try:
            return self.__dict__['options'][name]
        except KeyError as e:
            raise AttributeError(e)

    def __setattr__(self, name, value):
        assert_config(name, self.options.keys(), "%r isn't a valid option. Expected one of: %s")
        self.options[name] = value


class LLSets(object):
    """Main interface for the library.

    Analyses a grammar once and keeps its nullable set and FIRST sets.

    Parameters:
        grammar: a Grammar, a string of TOML, or a file object containing it
        options: a dictionary controlling the analysis. See LLSetsOptions.

    Example:
        >>> LLSets(grammar_text).first
        {...}
    """
    if __doc__:
        __doc__ += "\n\n" + LLSetsOptions.OPTIONS_DOC

    def __init__(self, grammar, **options):
        self.options = LLSetsOptions(options)

        if not isinstance(grammar, Grammar):
            try:
                read = grammar.read
            except AttributeError:
                pass
            else:
                grammar = read()
            grammar = load_grammar(grammar, strict=self.options.strict)

        self.grammar = grammar
        self.analyzer = GrammarAnalyzer(grammar, debug=self.options.debug)

    @property
    def nullable(self):
        return self.analyzer.nullable

    @property
    def first(self):
        return self.analyzer.first

    @classmethod
    def open(cls, grammar_filename, rel_to=None, **options):
        """Create an instance of LLSets with the grammar given by its filename

        If ``rel_to`` is provided, the function will find the grammar filename in relation to it.

        Example:

            >>> LLSets.open("grammar_file.toml", rel_to=__file__, debug=True)
            LLSets(...)

        """
        if rel_to:
            basepath = os.path.dirname(rel_to)
            grammar_filename = os.path.join(basepath, grammar_filename)
        with open(grammar_filename, encoding='utf8') as f:
            return cls(f, **options)

    @classmethod
    def open_from_package(cls, package, grammar_path, **options):
        """Create an instance of LLSets with the grammar loaded from within the package `package`.
        This allows grammar loading from zipapps.

        Example:

            LLSets.open_from_package("llsets", "grammars/expression.toml")
        """
        data = pkgutil.get_data(package, grammar_path)
        if data is None:
            raise IOError("Cannot load %r from package %r" % (grammar_path, package))
        return cls(data.decode('utf8'), **options)

    def _text(self, symbol_id):
        return self.grammar.get_symbol(symbol_id).text

    def format_grammar(self):
        return '\n'.join(self.grammar.format_productions(self.options.epsilon))

    def format_nullable(self):
        return 'Nullable = {%s}' % ', '.join(self._text(s) for s in sorted(self.nullable))

    def format_first_sets(self):
        return '\n'.join('First(%s) = {%s}' % (self._text(symbol_id), ', '.join(self._text(t) for t in sorted(first)))
                         for symbol_id, first in sorted(self.first.items()))

    def __repr__(self):
        return 'LLSets(%r, debug=%r)' % (self.grammar, self.options.debug)
