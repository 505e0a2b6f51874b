"""
Command line front-end: read a grammar, print its analysis, then parse
strings with it.

    python -m ll1 grammar.txt -s "i+i" -s "(i)"
    python -m ll1            # prompts for productions, then loops on input
"""
import argparse
import logging
import sys

from ll1.analysis import analyze
from ll1.errors import GrammarError
from ll1.grammar import parse_productions
from ll1.parser import parse
from ll1.render import format_sets, format_tree, table_frame


def read_productions():
    n = int(input("Enter number of productions: "))
    return [input("Production: ") for _ in range(n)]


def print_analysis(analysis):
    print("\nFIRST Sets:")
    for line in format_sets("FIRST", analysis.first):
        print(line)
    print("\nFOLLOW Sets:")
    for line in format_sets("FOLLOW", analysis.follow):
        print(line)

    print("\nLL(1) PARSING TABLE\n")
    print(table_frame(analysis.table).to_string())

    print("\n--- Checking LL(1) Conditions ---")
    for conflict in analysis.conflicts:
        print(f"  Conflict: {conflict.message}")
    if analysis.is_ll1:
        print("  All LL(1) conditions satisfied.")


def print_parse(analysis, text):
    print(f'\n--- Parsing: "{text}" ---\n')
    result = parse(analysis.table, analysis.grammar, text)
    print(f"{'Stack':<30} {'Input':<20} Action")
    print("-" * 70)
    for step in result.steps:
        print(f"{step.stack:<30} {step.remaining:<20} {step.action}")

    if result.accepted:
        print("\nString ACCEPTED!")
        print("\n--- Parse Tree ---\n")
        print(format_tree(result.tree))
    else:
        print(f"\nString REJECTED! ({result.reason} at step {result.step}, "
              f"input position {result.position})")
    return result


def main(argv=None):
    parser = argparse.ArgumentParser(prog='ll1', description='LL(1) grammar analyser and predictive parser')
    parser.add_argument('grammar', nargs='?',
                        help='file with one production per line, e.g. E->TX or X=+TX/ε')
    parser.add_argument('-s', '--string', action='append', dest='strings',
                        help='string to parse; may be repeated. Without it, strings are read interactively')
    parser.add_argument('-v', '--verbose', action='store_true', help='enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.grammar is not None:
        with open(args.grammar, encoding='utf-8') as f:
            lines = f.read().splitlines()
    else:
        lines = read_productions()

    try:
        grammar = parse_productions(lines)
    except GrammarError as e:
        print(f"Grammar error: {e}", file=sys.stderr)
        return 1

    analysis = analyze(grammar)
    print_analysis(analysis)

    if not analysis.is_ll1:
        print("\nThe grammar is NOT LL(1). Cannot proceed with parsing.")
        return 1 if args.strings else 0
    print("\nThe grammar is LL(1). Proceeding...")

    if args.strings:
        results = [print_parse(analysis, text) for text in args.strings]
        return 0 if all(r.accepted for r in results) else 2

    while True:
        try:
            text = input("\nEnter a string to parse (or 'exit' to quit): ")
        except EOFError:
            break
        if text.strip().lower() == 'exit':
            break
        print_parse(analysis, text)
    return 0


if __name__ == '__main__':
    sys.exit(main())
