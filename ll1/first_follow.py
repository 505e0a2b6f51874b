"""
FIRST and FOLLOW set computation.

Both sets are grown by repeated passes over every production until a whole
pass leaves the total size unchanged. Results map each nonterminal to a
frozenset.
"""
import logging
from collections import defaultdict

from ll1.grammar import EPSILON, END_MARKER, is_nonterminal

logger = logging.getLogger(__name__)


def _total_len(sets):
    return sum(len(s) for s in sets.values())


def _freeze(grammar, sets):
    return {vn: frozenset(sets[vn]) for vn in grammar.nonterminals}


def first_of_symbol(symbol, first):
    if symbol == EPSILON:
        return frozenset((EPSILON,))
    if is_nonterminal(symbol):
        return frozenset(first[symbol])
    return frozenset((symbol,))


def first_of_sequence(symbols, first):
    """
    FIRST of a symbol string: scan left to right, stopping at the first
    terminal or non-nullable nonterminal. ``ε`` is included only if every
    symbol can derive the empty string.
    """
    result = set()
    for symbol in symbols:
        if symbol == EPSILON:
            continue
        if not is_nonterminal(symbol):
            result.add(symbol)
            return frozenset(result)
        result |= first[symbol] - {EPSILON}
        if EPSILON not in first[symbol]:
            return frozenset(result)
    result.add(EPSILON)
    return frozenset(result)


def compute_first(grammar, seed=None):
    first = defaultdict(set)
    if seed is not None:
        for vn, symbols in seed.items():
            first[vn] |= set(symbols)

    passes = 0
    while True:
        old_len = _total_len(first)
        passes += 1
        for left, right in grammar.productions.items():
            for production in right:
                first[left] |= first_of_sequence(production.rhs, first)
        new_len = _total_len(first)
        logger.debug("FIRST pass %d: %d symbols", passes, new_len)
        if old_len == new_len:
            break

    return _freeze(grammar, first)


def compute_follow(grammar, first, seed=None):
    follow = defaultdict(set)
    follow[grammar.start].add(END_MARKER)
    if seed is not None:
        for vn, symbols in seed.items():
            follow[vn] |= set(symbols)

    passes = 0
    while True:
        old_len = _total_len(follow)
        passes += 1
        for left, right in grammar.productions.items():
            for production in right:
                if production.is_epsilon:
                    continue
                rhs = production.rhs
                for i, symbol in enumerate(rhs):
                    if not is_nonterminal(symbol):
                        continue
                    # S->..Bβ: FIRST(β)\{ε}, plus FOLLOW(S) when β is nullable
                    rest = first_of_sequence(rhs[i + 1:], first)
                    follow[symbol] |= rest - {EPSILON}
                    if EPSILON in rest:
                        follow[symbol] |= follow[left]
        new_len = _total_len(follow)
        logger.debug("FOLLOW pass %d: %d symbols", passes, new_len)
        if old_len == new_len:
            break

    return _freeze(grammar, follow)
