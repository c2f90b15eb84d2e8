#
# Building a grammar in code, and inspecting the analysis artifacts
#
#   A -> B a | c
#   B -> C b | ε
#   C -> A d
#
import logging

from llsets import Grammar, Symbol, FreeProduction, GrammarAnalyzer, logger

logger.setLevel(logging.DEBUG)

grammar = Grammar()
for i, text in enumerate('abcd', 1):
    grammar.add_terminal(Symbol.terminal(i, text))
for i, text in enumerate('ABC', 10):
    grammar.add_non_terminal(Symbol.non_terminal(i, text))
grammar.set_start_symbol(10)

rules = [(10, [11, 1]), (10, [3]), (11, [12, 2]), (11, []), (12, [10, 4])]
for pid, (driver, body) in enumerate(rules, 1):
    grammar.add_production_strict(FreeProduction(pid, driver, body))

if __name__ == '__main__':
    print(grammar)
    analyzer = GrammarAnalyzer(grammar, debug=True)
    for members in analyzer.condensation.components:
        print([grammar.lookup(m).text for m in members])
