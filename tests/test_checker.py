import unittest

from ll1 import compute_first, compute_follow, parse_productions, validate
from ll1.checker import FIRST_FIRST, FIRST_FOLLOW

from tests import grammars


def check(lines):
    grammar = parse_productions(lines)
    first = compute_first(grammar)
    follow = compute_follow(grammar, first)
    return validate(grammar, first, follow)


class TestValidate(unittest.TestCase):
    def test_ll1_grammars(self):
        for lines in (grammars.EXPR, grammars.EXPR_ARROWS, grammars.SEQUENCE,
                      grammars.NULLABLE_CHAIN):
            is_ll1, conflicts = check(lines)
            self.assertTrue(is_ll1, lines)
            self.assertEqual(conflicts, [])

    def test_first_first_conflict(self):
        is_ll1, conflicts = check(grammars.COMMON_PREFIX)
        self.assertFalse(is_ll1)
        self.assertEqual(len(conflicts), 1)
        conflict = conflicts[0]
        self.assertEqual(conflict.kind, FIRST_FIRST)
        self.assertEqual(conflict.nonterminal, "A")
        self.assertEqual([str(p) for p in conflict.productions], ["A->ab", "A->ac"])
        self.assertEqual(conflict.terminals, ("a",))
        self.assertEqual(conflict.message, "FIRST(A->ab) ∩ FIRST(A->ac) = { a }")

    def test_first_follow_conflict(self):
        is_ll1, conflicts = check(grammars.NULLABLE_FOLLOW)
        self.assertFalse(is_ll1)
        self.assertEqual(len(conflicts), 1)
        conflict = conflicts[0]
        self.assertEqual(conflict.kind, FIRST_FOLLOW)
        self.assertEqual(conflict.nonterminal, "A")
        self.assertEqual(conflict.productions, ())
        self.assertEqual(conflict.terminals, ("a",))

    def test_every_conflict_is_reported(self):
        is_ll1, conflicts = check([
            "S->Ab|Ac|B",
            "A->a",
            "B->aB|ε",
        ])
        self.assertFalse(is_ll1)
        pairs = [
            tuple(str(p) for p in c.productions)
            for c in conflicts if c.kind == FIRST_FIRST
        ]
        self.assertEqual(pairs, [("S->Ab", "S->Ac"), ("S->Ab", "S->B"), ("S->Ac", "S->B")])

    def test_conflict_through_nonterminal(self):
        is_ll1, conflicts = check(["S->Ax|By", "A->a", "B->a"])
        self.assertFalse(is_ll1)
        self.assertEqual(conflicts[0].terminals, ("a",))

    def test_left_recursion_is_not_ll1(self):
        is_ll1, conflicts = check(["E->E+T|T", "T->i"])
        self.assertFalse(is_ll1)
        self.assertEqual(conflicts[0].kind, FIRST_FIRST)

    def test_to_dict(self):
        _, conflicts = check(grammars.COMMON_PREFIX)
        self.assertEqual(conflicts[0].to_dict(), {
            "kind": "first/first",
            "nonterminal": "A",
            "productions": ["A->ab", "A->ac"],
            "terminals": ["a"],
            "message": "FIRST(A->ab) ∩ FIRST(A->ac) = { a }",
        })


if __name__ == "__main__":
    unittest.main()
