"""
One-call analysis of a grammar, and the LL1 session object used by the web
API and the command line.
"""
import logging

from ll1.checker import validate
from ll1.first_follow import compute_first, compute_follow
from ll1.grammar import parse_productions
from ll1.parser import parse
from ll1.table import build_table

logger = logging.getLogger(__name__)


class Analysis:
    """FIRST, FOLLOW, the LL(1) verdict with its conflicts, and the table."""

    def __init__(self, grammar, first, follow, is_ll1, conflicts, table):
        self.grammar = grammar
        self.first = first
        self.follow = follow
        self.is_ll1 = is_ll1
        self.conflicts = conflicts
        self.table = table

    def __iter__(self):
        return iter((self.first, self.follow, self.is_ll1, self.conflicts, self.table))


def analyze(grammar):
    """
    Compute FIRST, FOLLOW, the LL(1) verdict and the parsing table.

    The table is built even when the grammar is not LL(1); cells claimed by
    more than one production keep the last one and are listed in
    ``table.collisions``. Check ``is_ll1`` before parsing with it.
    """
    first = compute_first(grammar)
    follow = compute_follow(grammar, first)
    is_ll1, conflicts = validate(grammar, first, follow)
    table = build_table(grammar, first, follow, strict=False)
    return Analysis(grammar, first, follow, is_ll1, conflicts, table)


class LL1:
    def __init__(self, input_str_list):
        self.input_str_list = input_str_list
        self.grammar = None
        self.formulas_dict = {}  # nonterminal -> list of right-hand sides
        self.S = ""  # start symbol
        self.Vt = []  # terminals
        self.Vn = []  # nonterminals
        self.first = {}
        self.follow = {}
        self.conflicts = []
        self.table = None
        self.isLL1 = False
        self.result = None
        self.info = {}

    def init(self):
        self.grammar = parse_productions(self.input_str_list)
        self.formulas_dict = {
            left: [p.body for p in right] for left, right in self.grammar.productions.items()
        }
        self.S = self.grammar.start
        self.Vn = list(self.grammar.nonterminals)
        self.Vt = list(self.grammar.terminals)

        analysis = analyze(self.grammar)
        self.first = analysis.first
        self.follow = analysis.follow
        self.isLL1 = analysis.is_ll1
        self.conflicts = analysis.conflicts
        self.table = analysis.table
        return self

    def solve(self, s):
        if not self.isLL1:
            self.result = None
            self.info = {
                "info_step": [],
                "info_stack": [],
                "info_str": [],
                "info_msg": [],
                "info_res": "error: grammar is not LL(1), input not analysed",
            }
            return self.info

        self.result = parse(self.table, self.grammar, s)
        steps = self.result.steps
        self.info = {
            "info_step": [step.step for step in steps],
            "info_stack": [step.stack for step in steps],
            "info_str": [step.remaining for step in steps],
            "info_msg": [step.action for step in steps],
            "info_res": self.result.message,
        }
        return self.info
