from llsets import Grammar, Symbol, FreeProduction


def configurations(cases):
    def decorator(f):
        def inner(self):
            for case in cases:
                f.__name__ += f".case({case})"
                f.__qualname__ += f".case({case})"
                f(self, case)
        inner.__name__ = f.__name__
        inner.__qualname__ = f.__qualname__
        return inner
    return decorator

insertion_policies = configurations(("strict", "permissive"))


def build_grammar(*rules, policy="strict"):
    """Builds a grammar of FreeProductions from rules such as 'A -> B c'.

    Names starting with an uppercase letter are non-terminals, everything else is a terminal.
    'ε' stands for an empty body. Productions are numbered from 1 in the given order.

    Returns the grammar and a dict mapping names to symbol ids.
    """
    grammar = Grammar()
    ids = {}

    def symbol_id(name):
        if name not in ids:
            ids[name] = len(ids) + 1
            if name[0].isupper():
                grammar.add_non_terminal(Symbol.non_terminal(ids[name], name))
            else:
                grammar.add_terminal(Symbol.terminal(ids[name], name))
        return ids[name]

    add_production = grammar.add_production_strict if policy == "strict" else grammar.add_production
    for pid, rule in enumerate(rules, 1):
        driver, body = rule.split('->')
        driver_id = symbol_id(driver.strip())
        body_ids = [symbol_id(name) for name in body.split() if name != 'ε']
        add_production(FreeProduction(pid, driver_id, body_ids))

    return grammar, ids


def names(ids, symbol_ids):
    by_id = {v: k for k, v in ids.items()}
    return {by_id[s] for s in symbol_ids}


def first_by_name(ids, first):
    by_id = {v: k for k, v in ids.items()}
    return {by_id[nt]: {by_id[t] for t in f} for nt, f in first.items()}
