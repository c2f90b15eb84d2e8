from ..utils import dedup_list


class DependencyGraph(object):
    """Directed graph over non-terminal ids.

    An edge A -> B means FIRST(A) must include FIRST(B).
    ``direct`` maps every node to the terminals it contributes to its own FIRST set.
    """
    __slots__ = ('nodes', 'edges', 'direct')

    def __init__(self, nodes, edges, direct):
        self.nodes = nodes
        self.edges = edges
        self.direct = direct

    def successors(self, node):
        return self.edges[node]

    def iter_edges(self):
        for source in self.nodes:
            for target in self.edges[source]:
                yield source, target

    def __repr__(self):
        return 'DependencyGraph(<%d nodes>, <%d edges>)' % (len(self.nodes), sum(len(v) for v in self.edges.values()))


def build_dependency_graph(grammar, nullable):
    nodes = [s.id for s in grammar.non_terminals]
    edges = {n: [] for n in nodes}
    direct = {n: set() for n in nodes}

    for p in grammar.free_productions():
        for symbol_id in p.body:
            symbol = grammar.get_symbol(symbol_id)
            if symbol.is_term:
                direct[p.driver].add(symbol_id)
                break

            edges[p.driver].append(symbol_id)
            if symbol_id not in nullable:
                break

    edges = {n: dedup_list(targets) for n, targets in edges.items()}
    return DependencyGraph(nodes, edges, direct)
