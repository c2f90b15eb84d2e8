"""Computes which non-terminals can derive the empty sequence."""

from collections import defaultdict

from ..utils import bfs, fzset, dedup_list


def compute_nullable(grammar):
    """Returns the set of non-terminal ids that can derive the empty sequence.

    Instead of repeatedly shrinking a copy of every body, each production keeps
    a count of the body positions not yet known to be nullable. Marking a symbol
    nullable decrements the counter of every production it appears in, and a
    production whose counter drops to zero makes its driver nullable in turn.
    The caller's grammar is only read.
    """
    productions = grammar.free_productions()

    remaining = {}
    occurrences = defaultdict(list)
    for p in productions:
        remaining[p.id] = len(p.body)
        for symbol_id in p.body:
            occurrences[symbol_id].append(p)

    def newly_nullable(symbol_id):
        for p in occurrences[symbol_id]:
            remaining[p.id] -= 1
            if remaining[p.id] == 0:
                yield p.driver

    # A symbol is expanded at most once, so every body position is counted down at most once
    seeds = dedup_list([p.driver for p in productions if not p.body])
    return fzset(bfs(seeds, newly_nullable))
