from ..utils import logger
from .nullable import compute_nullable
from .dependency import build_dependency_graph
from .scc import Condensation
from .first import propagate_first_sets


class GrammarAnalyzer(object):
    """Runs the nullable and FIRST analyses once over a grammar.

    The grammar is only read. The intermediate dependency graph and its
    condensation are kept on the instance for inspection.
    """

    def __init__(self, grammar, debug=False):
        self.grammar = grammar
        self.debug = debug

        self.nullable = compute_nullable(grammar)
        self.graph = build_dependency_graph(grammar, self.nullable)
        self.condensation = Condensation.from_graph(self.graph.nodes, self.graph.successors)
        self.first = propagate_first_sets(self.graph, self.condensation)

        if self.debug:
            self._log_analysis()

    def _text(self, symbol_id):
        return self.grammar.get_symbol(symbol_id).text

    def _log_analysis(self):
        logger.debug("Nullable: %s", ', '.join(self._text(s) for s in sorted(self.nullable)))
        for source, target in self.graph.iter_edges():
            logger.debug("edge %s -> %s", self._text(source), self._text(target))
        for members in self.condensation.components:
            if len(members) > 1:
                logger.debug("Mutually recursive: %s", ', '.join(self._text(s) for s in sorted(members)))
        for symbol_id, first in sorted(self.first.items()):
            logger.debug("First(%s) = {%s}", self._text(symbol_id), ', '.join(self._text(t) for t in sorted(first)))
