"""
Exceptions raised by the LL(1) analysis package.

Analysis conflicts and parse rejections are reported as values
(Conflict, ParseResult), not raised.
"""


class AnalysisError(Exception):
    """Base class for every exception raised by the package."""


class GrammarError(AnalysisError):
    """
    The grammar text or structure is unusable: a production without a
    separator, an invalid symbol, or a nonterminal used on a right-hand side
    without productions of its own.
    """


class TableConflictError(AnalysisError):
    """Two different productions claimed the same parsing table cell."""

    def __init__(self, nonterminal, terminal, existing, production):
        self.nonterminal = nonterminal
        self.terminal = terminal
        self.existing = existing
        self.production = production
        super().__init__(
            f"table cell ({nonterminal}, {terminal}) claimed by both "
            f"{existing} and {production}"
        )
