from .utils import logger
from .enums import SymbolKind
from .grammar import Symbol, Production, FreeProduction, Grammar, EPSILON
from .exceptions import (LLSetsError, ConfigurationError, GrammarError, DuplicateId, UnknownSymbol,
                         UnknownSymbolReference, MalformedInput, PreconditionViolated)
from .load_grammar import load_grammar, open_grammar
from .analysis import compute_nullable, compute_first_sets, GrammarAnalyzer
from .llsets import LLSets

__version__: str = "0.3.0"
