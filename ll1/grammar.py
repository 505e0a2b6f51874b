"""
Grammar model: symbols, productions and the grammar container, plus the
textual ingestion of productions such as ``E->TG|ε`` or ``E=TX/ε``.
"""
import logging
from types import MappingProxyType

from ll1.errors import GrammarError

logger = logging.getLogger(__name__)

EPSILON = 'ε'
END_MARKER = '$'


def is_nonterminal(symbol):
    return len(symbol) == 1 and 'A' <= symbol <= 'Z'


def is_terminal(symbol):
    return not is_nonterminal(symbol) and symbol != EPSILON


class Production:
    """One alternative ``lhs -> rhs``; rhs is a tuple of one-character symbols."""

    def __init__(self, lhs, rhs):
        self.lhs = lhs
        self.rhs = tuple(rhs)

    @property
    def is_epsilon(self):
        return self.rhs == (EPSILON,)

    @property
    def body(self):
        return ''.join(self.rhs)

    def to_dict(self):
        return {
            'lhs': self.lhs,
            'rhs': list(self.rhs),
        }

    def __eq__(self, other):
        if isinstance(other, Production):
            return self.lhs == other.lhs and self.rhs == other.rhs
        return NotImplemented

    def __hash__(self):
        return hash((self.lhs, self.rhs))

    def __str__(self):
        return f"{self.lhs}->{self.body}"

    def __repr__(self):
        return f"Production({self})"


class Grammar:
    """
    Read-only grammar: the start symbol, the productions of every nonterminal
    in declaration order, and the nonterminal (Vn) and terminal (Vt) lists in
    order of first appearance.
    """

    def __init__(self, start, productions):
        self._start = start
        self._productions = MappingProxyType(
            {lhs: tuple(alternatives) for lhs, alternatives in productions.items()}
        )
        self._nonterminals = tuple(self._productions)
        terminals = []
        for alternatives in self._productions.values():
            for production in alternatives:
                for symbol in production.rhs:
                    if is_terminal(symbol) and symbol not in terminals:
                        terminals.append(symbol)
        self._terminals = tuple(terminals)

    @property
    def start(self):
        return self._start

    @property
    def productions(self):
        return self._productions

    @property
    def nonterminals(self):
        return self._nonterminals

    @property
    def terminals(self):
        return self._terminals

    def alternatives(self, nonterminal):
        return self._productions[nonterminal]

    def __iter__(self):
        for alternatives in self._productions.values():
            yield from alternatives

    def __len__(self):
        return sum(len(alternatives) for alternatives in self._productions.values())

    def __repr__(self):
        return "Grammar(start=%r, %s)" % (
            self._start,
            "; ".join(str(p) for p in self),
        )


def _split_symbols(lhs, alternative):
    symbols = [ch for ch in alternative if not ch.isspace()]
    if not symbols or symbols == [EPSILON]:
        return (EPSILON,)
    if EPSILON in symbols:
        raise GrammarError(f"{lhs}->{alternative}: 'ε' must be the whole alternative")
    if END_MARKER in symbols:
        raise GrammarError(f"{lhs}->{alternative}: '{END_MARKER}' is reserved for the end marker")
    return tuple(symbols)


def load_grammar(productions):
    """
    Build a Grammar from ``(lhs, alternatives)`` pairs (or a mapping).

    Alternatives keep their order; a repeated lhs adds to the earlier entry
    and exact duplicates are dropped. The first lhs is the start symbol.
    """
    if hasattr(productions, 'items'):
        productions = productions.items()

    formulas_dict = {}
    for lhs, alternatives in productions:
        lhs = lhs.strip()
        if not is_nonterminal(lhs):
            raise GrammarError(f"left-hand side {lhs!r} is not a single uppercase letter")
        if isinstance(alternatives, str):
            alternatives = [alternatives]
        rules = formulas_dict.setdefault(lhs, [])
        for alternative in alternatives:
            production = Production(lhs, _split_symbols(lhs, alternative))
            if production not in rules:
                rules.append(production)

    if not formulas_dict:
        raise GrammarError("grammar has no productions")

    for rules in formulas_dict.values():
        for production in rules:
            for symbol in production.rhs:
                if is_nonterminal(symbol) and symbol not in formulas_dict:
                    raise GrammarError(
                        f"nonterminal {symbol!r} used in {production} has no productions"
                    )

    start = next(iter(formulas_dict))
    grammar = Grammar(start, formulas_dict)
    logger.debug("loaded %d productions, start symbol %s", len(grammar), start)
    return grammar


def parse_production(line):
    """
    Split ``A->x|y`` or ``A=x/y`` into ``(lhs, [alternatives])``.

    The alternative separator follows the arrow style, so ``/`` stays usable
    as a terminal in ``->`` grammars and ``|`` in ``=`` grammars.
    """
    if '->' in line:
        left, right = line.split('->', 1)
        r_list = right.split('|')
    elif '=' in line:
        left, right = line.split('=', 1)
        r_list = right.split('/')
    else:
        raise GrammarError(f"production {line!r} has no '->' or '=' separator")
    left = ''.join(left.split())
    if not left:
        raise GrammarError(f"production {line!r} has an empty left-hand side")
    return left, r_list


def parse_productions(lines):
    """Parse production lines; blank lines and ``#`` comments are skipped."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    productions = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        productions.append(parse_production(line))
    return load_grammar(productions)
