from ..utils import fzset
from .nullable import compute_nullable
from .dependency import build_dependency_graph
from .scc import Condensation, toposort


def propagate_first_sets(graph, condensation=None):
    """Solves FIRST(A) = direct(A) | union of FIRST(B) for every edge A -> B.

    Components are resolved in reverse topological order, so every component a
    component points to is already final when it is reached. All the members of
    a component share one FIRST set.
    """
    if condensation is None:
        condensation = Condensation.from_graph(graph.nodes, graph.successors)

    resolved = {}
    first = {}
    for c in reversed(toposort(condensation)):
        members = condensation.components[c]

        f = set()
        for node in members:
            f |= graph.direct[node]
        for target in condensation.successors[c]:
            f |= resolved[target]

        resolved[c] = f = fzset(f)
        for node in members:
            first[node] = f

    return first


def compute_first_sets(grammar, nullable=None):
    """Returns a dict mapping every non-terminal id to the set of terminal ids that can begin it."""
    if nullable is None:
        nullable = compute_nullable(grammar)
    graph = build_dependency_graph(grammar, nullable)
    return propagate_first_sets(graph)
