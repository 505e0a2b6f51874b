"""
Predictive parsing table: (nonterminal, lookahead terminal) -> production.
"""
import logging

from ll1.errors import TableConflictError
from ll1.grammar import EPSILON, END_MARKER, Production, is_nonterminal

logger = logging.getLogger(__name__)


class ParsingTable:
    """
    The table keeps the winning production of every cell and, separately,
    each distinct production ever written there. A cell with more than one
    writer is a collision; it can only happen for non-LL(1) grammars.
    """

    def __init__(self, nonterminals, terminals):
        self.nonterminals = tuple(nonterminals)
        self.terminals = tuple(terminals) + (END_MARKER,)
        self._cells = {}
        self._writers = {}

    def _set(self, nonterminal, terminal, production, strict):
        key = (nonterminal, terminal)
        writers = self._writers.setdefault(key, [])
        if production not in writers:
            if writers and strict:
                raise TableConflictError(nonterminal, terminal, writers[-1], production)
            writers.append(production)
        self._cells[key] = production

    def get(self, nonterminal, terminal, default=None):
        return self._cells.get((nonterminal, terminal), default)

    def __getitem__(self, key):
        return self._cells[key]

    def __contains__(self, key):
        return key in self._cells

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        return iter(self._cells)

    def items(self):
        return self._cells.items()

    def writers(self, nonterminal, terminal):
        return tuple(self._writers.get((nonterminal, terminal), ()))

    @property
    def collisions(self):
        return {key: tuple(writers) for key, writers in self._writers.items() if len(writers) > 1}

    def __eq__(self, other):
        if not isinstance(other, ParsingTable):
            return NotImplemented
        return self._cells == other._cells and self._writers == other._writers

    def __repr__(self):
        return "ParsingTable(%s)" % ", ".join(
            f"[{vn},{vt}]={p}" for (vn, vt), p in self._cells.items()
        )


def build_table(grammar, first, follow, strict=True):
    """
    Fill the table from FIRST/FOLLOW.

    With ``strict`` a second production claiming a cell raises
    TableConflictError. Otherwise the later production wins and the clash is
    left in ``table.collisions``.
    """
    table = ParsingTable(grammar.nonterminals, grammar.terminals)
    for left, right in grammar.productions.items():
        for production in right:
            if production.is_epsilon:
                for fo in sorted(follow[left]):
                    table._set(left, fo, Production(left, (EPSILON,)), strict)
                continue
            head = production.rhs[0]
            if is_nonterminal(head):
                for fi in sorted(first[head] - {EPSILON}):
                    table._set(left, fi, production, strict)
            else:
                table._set(left, head, production, strict)

    if table.collisions:
        logger.warning("parsing table has %d ambiguous cells", len(table.collisions))
    return table
