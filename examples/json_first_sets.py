#
# FIRST sets of a small JSON grammar, loaded from TOML text
#
from llsets import LLSets

json_grammar = """
start_symbol = 20

[terminals]
1 = "{"
2 = "}"
3 = "["
4 = "]"
5 = ","
6 = ":"
7 = "string"
8 = "number"
9 = "true"
10 = "false"
11 = "null"

[non_terminals]
20 = "Value"
21 = "Object"
22 = "Members"
23 = "MoreMembers"
24 = "Array"
25 = "Elements"
26 = "MoreElements"

[productions]
1 = { lhs = [20], rhs = [21] }
2 = { lhs = [20], rhs = [24] }
3 = { lhs = [20], rhs = [7] }
4 = { lhs = [20], rhs = [8] }
5 = { lhs = [20], rhs = [9] }
6 = { lhs = [20], rhs = [10] }
7 = { lhs = [20], rhs = [11] }
8 = { lhs = [21], rhs = [1, 22, 2] }
9 = { lhs = [22], rhs = [7, 6, 20, 23] }
10 = { lhs = [22], rhs = [] }
11 = { lhs = [23], rhs = [5, 7, 6, 20, 23] }
12 = { lhs = [23], rhs = [] }
13 = { lhs = [24], rhs = [3, 25, 4] }
14 = { lhs = [25], rhs = [20, 26] }
15 = { lhs = [25], rhs = [] }
16 = { lhs = [26], rhs = [5, 20, 26] }
17 = { lhs = [26], rhs = [] }
"""

json_sets = LLSets(json_grammar, epsilon='<empty>')

if __name__ == '__main__':
    print(json_sets.format_grammar())
    print()
    print(json_sets.format_nullable())
    print(json_sets.format_first_sets())
