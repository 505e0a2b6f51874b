import unittest

from ll1 import EPSILON, GrammarError, Production, load_grammar, parse_productions
from ll1.grammar import is_nonterminal, is_terminal, parse_production

from tests import grammars


class TestSymbols(unittest.TestCase):
    def test_classification(self):
        self.assertTrue(is_nonterminal("E"))
        self.assertFalse(is_nonterminal("e"))
        self.assertTrue(is_terminal("+"))
        self.assertTrue(is_terminal("i"))
        self.assertFalse(is_terminal(EPSILON))
        self.assertFalse(is_terminal("T"))


class TestLoadGrammar(unittest.TestCase):
    def test_start_and_order(self):
        grammar = load_grammar([
            ("E", ["TX"]),
            ("X", ["+TX", "ε"]),
            ("T", ["(E)", "i"]),
        ])
        self.assertEqual(grammar.start, "E")
        self.assertEqual(grammar.nonterminals, ("E", "X", "T"))
        self.assertEqual(grammar.terminals, ("+", "(", ")", "i"))
        self.assertEqual(
            [str(p) for p in grammar.alternatives("X")],
            ["X->+TX", "X->ε"],
        )
        self.assertEqual(len(grammar), 5)

    def test_mapping_input(self):
        grammar = load_grammar({"S": ["aS", ""]})
        self.assertEqual(grammar.alternatives("S")[1], Production("S", (EPSILON,)))
        self.assertTrue(grammar.alternatives("S")[1].is_epsilon)

    def test_whitespace_is_ignored(self):
        grammar = load_grammar([("E", ["T X"]), ("X", ["+ T X", " ε "]), ("T", ["i"])])
        self.assertEqual(grammar.alternatives("E")[0].rhs, ("T", "X"))
        self.assertTrue(grammar.alternatives("X")[1].is_epsilon)

    def test_repeated_lhs_merges(self):
        grammar = load_grammar([("A", ["a", "a"]), ("A", ["b"])])
        self.assertEqual([p.body for p in grammar.alternatives("A")], ["a", "b"])

    def test_undefined_nonterminal(self):
        with self.assertRaises(GrammarError):
            load_grammar([("S", ["aB"])])

    def test_invalid_lhs(self):
        with self.assertRaises(GrammarError):
            load_grammar([("s", ["a"])])
        with self.assertRaises(GrammarError):
            load_grammar([("SS", ["a"])])

    def test_reserved_symbols(self):
        with self.assertRaises(GrammarError):
            load_grammar([("S", ["a$"])])
        with self.assertRaises(GrammarError):
            load_grammar([("S", ["aε"])])

    def test_empty_grammar(self):
        with self.assertRaises(GrammarError):
            load_grammar([])

    def test_grammar_is_read_only(self):
        grammar = load_grammar([("S", ["a"])])
        with self.assertRaises(TypeError):
            grammar.productions["T"] = ()


class TestParseProductions(unittest.TestCase):
    def test_equals_and_slash(self):
        grammar = parse_productions(grammars.EXPR)
        self.assertEqual(grammar.start, "E")
        self.assertEqual([p.body for p in grammar.alternatives("T")], ["(E)", "i"])

    def test_arrow_and_bar(self):
        grammar = parse_productions(grammars.EXPR_ARROWS)
        self.assertEqual(grammar.nonterminals, ("E", "G", "T", "S", "F"))
        self.assertEqual([p.body for p in grammar.alternatives("S")], ["*FS", "ε"])

    def test_separator_follows_arrow_style(self):
        self.assertEqual(parse_production("A->a/b"), ("A", ["a/b"]))
        self.assertEqual(parse_production("A=a|b"), ("A", ["a|b"]))

    def test_text_with_comments(self):
        grammar = parse_productions("# expressions\nE = T X\n\nX = + T X / ε\nT = ( E ) / i\n")
        self.assertEqual(grammar.terminals, ("+", "(", ")", "i"))

    def test_missing_separator(self):
        with self.assertRaises(GrammarError) as cm:
            parse_productions(["E TX"])
        self.assertIn("separator", str(cm.exception))


if __name__ == "__main__":
    unittest.main()
