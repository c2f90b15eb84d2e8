import sys
from argparse import ArgumentParser, FileType
from llsets import LLSets

base_argparser = ArgumentParser(add_help=False, epilog='Grammars are TOML files with terminals, non_terminals and productions tables')


flags = [
    ('d', 'debug'),
]

options = []

base_argparser.add_argument('-o', '--out', type=FileType('w', encoding='utf-8'), default=sys.stdout, help='the output file (default=stdout)')
base_argparser.add_argument('--permissive', action='store_true', help='create missing symbols instead of rejecting the grammar')
base_argparser.add_argument('grammar_file', type=FileType('r', encoding='utf-8'), help='A valid .toml grammar file')

for f in flags:
    if isinstance(f, tuple):
        options.append(f[1])
        base_argparser.add_argument('-' + f[0], '--' + f[1], action='store_true')
    else:
        options.append(f)
        base_argparser.add_argument('--' + f, action='store_true')

def build_analysis(namespace):
    kwargs = {n: getattr(namespace, n) for n in options}
    kwargs['strict'] = not namespace.permissive
    return LLSets(namespace.grammar_file, **kwargs), namespace.out
