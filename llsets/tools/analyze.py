import sys
import logging
from argparse import ArgumentParser

from llsets import logger, LLSetsError
from llsets.tools import base_argparser, build_analysis

argparser = ArgumentParser(prog='python -m llsets.tools.analyze', parents=[base_argparser],
                           description="Computes the nullable non-terminals and the FIRST sets of a context-free grammar")

only = argparser.add_mutually_exclusive_group()
only.add_argument('--nullable-only', action='store_true', help='only print the nullable set')
only.add_argument('--first-only', action='store_true', help='only print the FIRST sets')


def analyze(ll_sets, out, nullable=True, first=True):
    if nullable and first:
        out.write(ll_sets.format_grammar() + '\n\n')
    if nullable:
        out.write(ll_sets.format_nullable() + '\n')
    if first:
        first_sets = ll_sets.format_first_sets()
        if first_sets:
            out.write(first_sets + '\n')


def main(argv=None):
    args = argparser.parse_args(argv)
    if args.debug:
        logger.setLevel(logging.DEBUG)

    try:
        ll_sets, out = build_analysis(args)
        analyze(ll_sets, out, nullable=not args.first_only, first=not args.nullable_only)
    except LLSetsError as e:
        print('%s: %s' % (type(e).__name__, e), file=sys.stderr)
        return 1
    finally:
        if args.out is not sys.stdout:
            args.out.close()
        if args.grammar_file is not sys.stdin:
            args.grammar_file.close()

    return 0

if __name__ == '__main__':
    sys.exit(main())
