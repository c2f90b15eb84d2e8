"Loads a Grammar from its TOML description"

import tomllib

from .exceptions import MalformedInput
from .grammar import Grammar, Symbol, Production, FreeProduction


def _parse_id(key, what):
    try:
        return int(key)
    except (TypeError, ValueError):
        raise MalformedInput("Invalid %s id: %r" % (what, key))


def _table(data, name):
    table = data.get(name, {})
    if not isinstance(table, dict):
        raise MalformedInput("Expected a table for %r, got %r" % (name, table))
    return table


def _symbols(data, name, what):
    for key, text in _table(data, name).items():
        symbol_id = _parse_id(key, what)
        if not isinstance(text, str):
            raise MalformedInput("Expected a string for %s %s, got %r" % (what, key, text))
        yield symbol_id, text


def _id_list(value, field, production_key):
    if not isinstance(value, list) or not all(isinstance(x, int) and not isinstance(x, bool) for x in value):
        raise MalformedInput("Production %s: %r must be a list of symbol ids" % (production_key, field))
    return value


def _productions(data):
    for key, prod in _table(data, 'productions').items():
        pid = _parse_id(key, 'production')
        if not isinstance(prod, dict) or 'lhs' not in prod or 'rhs' not in prod:
            raise MalformedInput("Production %s must define 'lhs' and 'rhs'" % key)

        lhs = _id_list(prod['lhs'], 'lhs', key)
        rhs = _id_list(prod['rhs'], 'rhs', key)
        if len(lhs) == 1:
            yield FreeProduction(pid, lhs[0], rhs)
        else:
            yield Production(pid, lhs, rhs)


def load_grammar(text, strict=True):
    """Builds a Grammar from TOML text.

    The document holds a ``terminals`` and a ``non_terminals`` table mapping ids to
    display texts, a ``productions`` table of ``{lhs = [...], rhs = [...]}`` entries,
    and an optional ``start_symbol`` id.

    Productions with a single-symbol ``lhs`` become FreeProductions.
    When ``strict`` is False, unknown ids are created on the fly instead of raising UnknownSymbol.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise MalformedInput("TOML deserialization failed: %s" % e)

    grammar = Grammar()
    for symbol_id, content in _symbols(data, 'terminals', 'terminal'):
        grammar.add_terminal(Symbol.terminal(symbol_id, content))
    for symbol_id, content in _symbols(data, 'non_terminals', 'non-terminal'):
        grammar.add_non_terminal(Symbol.non_terminal(symbol_id, content))

    add_production = grammar.add_production_strict if strict else grammar.add_production
    for production in _productions(data):
        add_production(production)

    if 'start_symbol' in data:
        start = data['start_symbol']
        if not isinstance(start, int) or isinstance(start, bool):
            raise MalformedInput("Invalid start symbol: %r" % (start,))
        grammar.set_start_symbol(start)

    return grammar


def open_grammar(filename, strict=True):
    with open(filename, encoding='utf8') as f:
        return load_grammar(f.read(), strict)
