import contextlib
import io
import os
import tempfile
import unittest

from ll1.__main__ import main

from tests import grammars


class TestCommandLine(unittest.TestCase):
    def run_cli(self, lines, *args):
        with tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False, encoding="utf-8") as f:
            f.write("\n".join(lines))
        self.addCleanup(os.unlink, f.name)
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main([f.name, *args])
        return code, out.getvalue()

    def test_parse_strings(self):
        code, output = self.run_cli(grammars.EXPR, "-s", "i+i", "-s", "(i)")
        self.assertEqual(code, 0)
        self.assertIn("FIRST(T) = { (, i }", output)
        self.assertIn("FOLLOW(E) = { ), $ }", output)
        self.assertIn("The grammar is LL(1). Proceeding...", output)
        self.assertEqual(output.count("String ACCEPTED!"), 2)
        self.assertIn("`-- [ε]", output)

    def test_rejected_string(self):
        code, output = self.run_cli(grammars.EXPR, "-s", "i+")
        self.assertEqual(code, 2)
        self.assertIn("String REJECTED! (no table entry at step 6, input position 2)", output)

    def test_non_ll1_grammar(self):
        code, output = self.run_cli(grammars.COMMON_PREFIX, "-s", "ab")
        self.assertEqual(code, 1)
        self.assertIn("Conflict: FIRST(A->ab) ∩ FIRST(A->ac) = { a }", output)
        self.assertIn("NOT LL(1)", output)

    def test_grammar_error(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            code, _ = self.run_cli(["E TX"], "-s", "i")
        self.assertEqual(code, 1)
        self.assertIn("Grammar error", err.getvalue())


if __name__ == "__main__":
    unittest.main()
