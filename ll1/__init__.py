"""
LL(1) grammar analysis: FIRST/FOLLOW sets, LL(1) conflict checks, the
predictive parsing table, and a table-driven parser that builds parse trees.

Grammars use one character per symbol. Uppercase letters are nonterminals,
every other character except ``ε`` is a terminal, and ``$`` marks the end of
input. A typical session::

    grammar = parse_productions(["E->TX", "X->+TX|ε", "T->(E)|i"])
    analysis = analyze(grammar)
    if analysis.is_ll1:
        result = parse(analysis.table, grammar, "i+i")
"""

__all__ = (
    "Analysis",
    "AnalysisError",
    "Conflict",
    "END_MARKER",
    "EPSILON",
    "Grammar",
    "GrammarError",
    "LL1",
    "ParseResult",
    "ParseTreeNode",
    "ParsingTable",
    "Production",
    "TableConflictError",
    "analyze",
    "build_table",
    "compute_first",
    "compute_follow",
    "load_grammar",
    "parse",
    "parse_productions",
    "validate",
    "__version__",
)

__version__ = "1.0.0"

from ll1.analysis import LL1, Analysis, analyze
from ll1.checker import Conflict, validate
from ll1.errors import AnalysisError, GrammarError, TableConflictError
from ll1.first_follow import compute_first, compute_follow
from ll1.grammar import (
    END_MARKER,
    EPSILON,
    Grammar,
    Production,
    load_grammar,
    parse_productions,
)
from ll1.parser import ParseResult, ParseTreeNode, parse
from ll1.table import ParsingTable, build_table
