"""Strongly connected components, condensation and topological order.

Tarjan's algorithm is run without recursion, so that long dependency chains
don't hit the interpreter's recursion limit.
"""

from collections import deque
from itertools import count


def strongly_connected_components(nodes, successors):
    """Returns the SCCs of the graph as lists of nodes.

    Components are listed in the order Tarjan's algorithm completes them: every
    component comes after all the components reachable from it.
    """
    index = {}
    lowlink = {}
    stack = []
    on_stack = set()
    components = []
    counter = count()

    def visit(node):
        index[node] = lowlink[node] = next(counter)
        stack.append(node)
        on_stack.add(node)
        return node, iter(successors(node))

    for root in nodes:
        if root in index:
            continue

        work = [visit(root)]
        while work:
            node, children = work[-1]
            for child in children:
                if child not in index:
                    work.append(visit(child))
                    break
                elif child in on_stack:
                    lowlink[node] = min(lowlink[node], index[child])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[node])

                if lowlink[node] == index[node]:
                    component = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        component.append(member)
                        if member == node:
                            break
                    components.append(component)

    return components


class Condensation(object):
    """The DAG obtained by collapsing every SCC of a graph into a single node.

    components : list of member lists, indexed by component number
    component_of : node -> component number
    successors : component number -> sorted list of distinct successor components
                 (self-loops and intra-component edges are dropped)
    """
    __slots__ = ('components', 'component_of', 'successors')

    def __init__(self, components, component_of, successors):
        self.components = components
        self.component_of = component_of
        self.successors = successors

    @classmethod
    def from_graph(cls, nodes, successors):
        components = strongly_connected_components(nodes, successors)
        component_of = {}
        for i, members in enumerate(components):
            for node in members:
                component_of[node] = i

        dag = {}
        for i, members in enumerate(components):
            targets = {component_of[t] for node in members for t in successors(node)}
            targets.discard(i)
            dag[i] = sorted(targets)

        return cls(components, component_of, dag)

    def __len__(self):
        return len(self.components)

    def __repr__(self):
        return 'Condensation(%r)' % (self.components,)


def toposort(condensation):
    """Returns the component numbers so that every edge goes from an earlier to a later one."""
    in_degree = {c: 0 for c in range(len(condensation))}
    for c, targets in condensation.successors.items():
        for t in targets:
            in_degree[t] += 1

    order = []
    open_q = deque(c for c, d in sorted(in_degree.items()) if d == 0)
    while open_q:
        c = open_q.popleft()
        order.append(c)
        for t in condensation.successors[c]:
            in_degree[t] -= 1
            if in_degree[t] == 0:
                open_q.append(t)

    assert len(order) == len(condensation), "condensation is not acyclic"
    return order
