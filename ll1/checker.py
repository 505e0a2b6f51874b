"""
LL(1) condition checks.

Every violation is collected; nothing stops early, so one call reports the
full list of conflicts for a grammar.
"""
import logging
from itertools import combinations

from ll1.first_follow import first_of_sequence
from ll1.grammar import EPSILON

logger = logging.getLogger(__name__)

FIRST_FIRST = 'first/first'
FIRST_FOLLOW = 'first/follow'


class Conflict:
    def __init__(self, kind, nonterminal, productions, terminals):
        self.kind = kind
        self.nonterminal = nonterminal
        self.productions = tuple(productions)
        self.terminals = tuple(sorted(terminals))

    @property
    def message(self):
        symbols = ", ".join(self.terminals)
        if self.kind == FIRST_FIRST:
            p1, p2 = self.productions
            return f"FIRST({p1}) ∩ FIRST({p2}) = {{ {symbols} }}"
        vn = self.nonterminal
        return f"FIRST({vn}) ∩ FOLLOW({vn}) = {{ {symbols} }} (ε in FIRST({vn}))"

    def to_dict(self):
        return {
            'kind': self.kind,
            'nonterminal': self.nonterminal,
            'productions': [str(p) for p in self.productions],
            'terminals': list(self.terminals),
            'message': self.message,
        }

    def __eq__(self, other):
        if not isinstance(other, Conflict):
            return NotImplemented
        return (self.kind, self.nonterminal, self.productions, self.terminals) == (
            other.kind, other.nonterminal, other.productions, other.terminals
        )

    def __repr__(self):
        return f"Conflict({self.kind}: {self.message})"


def validate(grammar, first, follow):
    """Return ``(is_ll1, conflicts)`` for the grammar and its FIRST/FOLLOW sets."""
    conflicts = []
    for left, right in grammar.productions.items():
        # Condition 1: alternatives of one nonterminal start differently
        for p1, p2 in combinations(right, 2):
            common = first_of_sequence(p1.rhs, first) & first_of_sequence(p2.rhs, first)
            common -= {EPSILON}
            if common:
                conflicts.append(Conflict(FIRST_FIRST, left, (p1, p2), common))

        # Condition 2: a nullable nonterminal cannot start with what follows it
        if EPSILON in first[left]:
            common = (first[left] - {EPSILON}) & follow[left]
            if common:
                conflicts.append(Conflict(FIRST_FOLLOW, left, (), common))

    for conflict in conflicts:
        logger.info("LL(1) conflict: %s", conflict.message)
    is_ll1 = not conflicts
    logger.info("grammar %s LL(1)", "is" if is_ll1 else "is not")
    return is_ll1, conflicts
