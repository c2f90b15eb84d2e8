class LLSetsError(Exception):
    pass


class ConfigurationError(LLSetsError, ValueError):
    pass


def assert_config(value, options, msg='Got %r, expected one of %s'):
    if value not in options:
        raise ConfigurationError(msg % (value, options))


class GrammarError(LLSetsError):
    pass


class DuplicateId(GrammarError):
    """Raised when a symbol is registered under an id that is already in the vocabulary."""

    def __init__(self, symbol_id):
        self.symbol_id = symbol_id
        super(DuplicateId, self).__init__("Id already existing: %r" % (symbol_id,))


class UnknownSymbol(GrammarError):
    """Raised by strict construction when a production, or the start symbol,
    references an id that is not in the vocabulary.

    The grammar is left untouched when this is raised.
    """

    def __init__(self, symbol_id, production_id=None):
        self.symbol_id = symbol_id
        self.production_id = production_id
        if production_id is None:
            message = "Symbol %r not found in vocabulary" % (symbol_id,)
        else:
            message = "Symbol %r referenced by production P%s not found in vocabulary" % (symbol_id, production_id)
        super(UnknownSymbol, self).__init__(message)


UnknownSymbolReference = UnknownSymbol


class MalformedInput(LLSetsError):
    """Raised by the grammar loader when its input cannot be turned into a Grammar."""
    pass


class PreconditionViolated(LLSetsError):
    """Raised by the analyses when the grammar they are given does not hold
    up its invariants: a dangling symbol reference, a production that is not
    context-free, or a driver that is not a non-terminal.
    """

    def __init__(self, message, production_id=None, symbol_id=None):
        self.production_id = production_id
        self.symbol_id = symbol_id
        super(PreconditionViolated, self).__init__(message)

