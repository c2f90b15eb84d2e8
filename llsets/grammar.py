from .enums import SymbolKind
from .exceptions import DuplicateId, UnknownSymbol, PreconditionViolated
from .utils import logger, classify

EPSILON = 'ε'


class Symbol(object):
    """A vocabulary entry: integer id, display text and kind. Immutable."""

    __slots__ = ('id', 'text', 'kind')

    def __init__(self, id, text, kind):
        object.__setattr__(self, 'id', id)
        object.__setattr__(self, 'text', text)
        object.__setattr__(self, 'kind', kind)

    @classmethod
    def terminal(cls, id, text):
        return cls(id, text, SymbolKind.terminal)

    @classmethod
    def non_terminal(cls, id, text):
        return cls(id, text, SymbolKind.non_terminal)

    @property
    def is_term(self):
        return self.kind is SymbolKind.terminal

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.id == other.id and self.text == other.text and self.kind == other.kind

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return 'Symbol(%r, %r, %s)' % (self.id, self.text, self.kind.name)


class Production(object):
    """
        id : unique integer id
        driver : a sequence of symbol ids (the left-hand side)
        body : a sequence of symbol ids, empty for an epsilon production
    """
    __slots__ = ('id', 'driver', 'body')

    def __init__(self, id, driver, body):
        self.id = id
        self.driver = tuple(driver)
        self.body = tuple(body)

    @property
    def driver_ids(self):
        return self.driver

    def __repr__(self):
        return 'Production(%r, %r, %r)' % (self.id, list(self.driver), list(self.body))

    def __eq__(self, other):
        if not isinstance(other, Production):
            return False
        return self.id == other.id and self.driver == other.driver and self.body == other.body

    def __hash__(self):
        return hash((self.id, self.driver, self.body))


class FreeProduction(object):
    """A context-free production, whose driver is exactly one non-terminal id.

    Only grammars made of free productions can be analysed.
    """
    __slots__ = ('id', 'driver', 'body')

    def __init__(self, id, driver, body):
        self.id = id
        self.driver = driver
        self.body = tuple(body)

    @property
    def driver_ids(self):
        return (self.driver,)

    def __repr__(self):
        return 'FreeProduction(%r, %r, %r)' % (self.id, self.driver, list(self.body))

    def __eq__(self, other):
        if not isinstance(other, FreeProduction):
            return False
        return self.id == other.id and self.driver == other.driver and self.body == other.body

    def __hash__(self):
        return hash((self.id, self.driver, self.body))


class Grammar(object):
    """A vocabulary of symbols, an optional start symbol and a set of productions.

    Symbols and productions are both keyed by their integer ids.
    All mutation goes through the methods below; a method that raises leaves
    the grammar as it was.
    """

    def __init__(self):
        self.symbols = {}
        self.start_symbol = None
        self.productions = {}

    def _add_symbol(self, symbol):
        if symbol.id in self.symbols:
            raise DuplicateId(symbol.id)
        self.symbols[symbol.id] = symbol

    def add_terminal(self, symbol):
        self._add_symbol(symbol)

    def add_non_terminal(self, symbol):
        self._add_symbol(symbol)

    def set_start_symbol(self, symbol_id):
        if symbol_id not in self.symbols:
            raise UnknownSymbol(symbol_id)
        self.start_symbol = symbol_id

    def _store(self, production):
        if production.id in self.productions:
            logger.debug("Replacing production P%s", production.id)
        self.productions[production.id] = production

    def add_production_strict(self, production):
        "Adds the production, after checking that every symbol it references is in the vocabulary"
        for symbol_id in production.driver_ids + production.body:
            if symbol_id not in self.symbols:
                raise UnknownSymbol(symbol_id, production.id)
        self._store(production)

    def add_production(self, production):
        """Adds the production, creating a fresh symbol for every unknown id it references.

        Unknown driver ids become non-terminals, unknown body ids become terminals.
        """
        for symbol_id in production.driver_ids:
            if symbol_id not in self.symbols:
                self.symbols[symbol_id] = Symbol.non_terminal(symbol_id, 'NT%s' % symbol_id)
        for symbol_id in production.body:
            if symbol_id not in self.symbols:
                self.symbols[symbol_id] = Symbol.terminal(symbol_id, 'T%s' % symbol_id)
        self._store(production)

    def lookup(self, symbol_id):
        return self.symbols.get(symbol_id)

    def get_symbol(self, symbol_id):
        try:
            return self.symbols[symbol_id]
        except KeyError:
            raise PreconditionViolated("Dangling reference to symbol %r" % (symbol_id,), symbol_id=symbol_id)

    @property
    def terminals(self):
        return [s for _, s in sorted(self.symbols.items()) if s.is_term]

    @property
    def non_terminals(self):
        return [s for _, s in sorted(self.symbols.items()) if not s.is_term]

    def _render(self, symbol_ids):
        texts = []
        for symbol_id in symbol_ids:
            symbol = self.symbols.get(symbol_id)
            if symbol is None:
                return None
            texts.append(symbol.text)
        return ''.join(texts)

    def render_driver(self, production_id):
        production = self.productions.get(production_id)
        if production is None:
            return None
        return self._render(production.driver_ids)

    def render_body(self, production_id, epsilon=EPSILON):
        production = self.productions.get(production_id)
        if production is None:
            return None
        if not production.body:
            return epsilon
        return self._render(production.body)

    def free_productions(self):
        """Returns the productions sorted by id, checking that the grammar can be analysed.

        Raises PreconditionViolated if a production is not a FreeProduction,
        has a driver that isn't a known non-terminal, or has a dangling body reference.
        """
        productions = []
        for pid, production in sorted(self.productions.items()):
            if not isinstance(production, FreeProduction):
                raise PreconditionViolated("Production P%s is not context-free" % pid, production_id=pid)
            driver = self.symbols.get(production.driver)
            if driver is None:
                raise PreconditionViolated("Production P%s has an unknown driver %r" % (pid, production.driver),
                                           production_id=pid, symbol_id=production.driver)
            if driver.is_term:
                raise PreconditionViolated("Production P%s is driven by terminal %r" % (pid, driver.text),
                                           production_id=pid, symbol_id=production.driver)
            for symbol_id in production.body:
                if symbol_id not in self.symbols:
                    raise PreconditionViolated("Production P%s references unknown symbol %r" % (pid, symbol_id),
                                               production_id=pid, symbol_id=symbol_id)
            productions.append(production)
        return productions

    def productions_by_driver(self):
        "Returns a dict mapping every driver id to its productions, in id order"
        return classify(self.free_productions(), lambda p: p.driver)

    def format_productions(self, epsilon=EPSILON):
        lines = []
        if self.start_symbol is not None:
            lines.append('Starting symbol: %s' % self.get_symbol(self.start_symbol).text)

        for pid in sorted(self.productions):
            driver = self.render_driver(pid)
            body = self.render_body(pid, epsilon)
            if driver is None or body is None:
                raise PreconditionViolated("Production P%s references an unknown symbol" % pid, production_id=pid)
            lines.append('P%s: %s -> %s' % (pid, driver, body))
        return lines

    def __str__(self):
        return '\n'.join(self.format_productions())

    def __repr__(self):
        return 'Grammar(<%d symbols>, start=%r, <%d productions>)' % (
            len(self.symbols), self.start_symbol, len(self.productions))
