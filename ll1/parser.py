"""
Table-driven predictive parser.

A symbol stack and a parallel stack of parse-tree nodes are driven by the
parsing table until the input is accepted or rejected. Rejections are
returned in the ParseResult, never raised.
"""
import logging

from ll1.grammar import EPSILON, END_MARKER, is_nonterminal

logger = logging.getLogger(__name__)

UNEXPECTED_TERMINAL = 'unexpected terminal'
NO_TABLE_ENTRY = 'no table entry'
STACK_EXHAUSTED = 'stack exhausted'


class ParseTreeNode:
    """
    Parse tree node. Right-recursive grammars give trees as deep as the
    input is long, so every walk below uses an explicit stack.
    """

    def __init__(self, symbol, is_terminal=False):
        self.symbol = symbol
        self.children = []
        self.is_terminal = is_terminal

    @property
    def is_epsilon(self):
        return self.symbol == EPSILON

    def walk(self):
        """Yield ``(node, parent)`` pairs in preorder; the root's parent is None."""
        stack = [(self, None)]
        while stack:
            node, parent = stack.pop()
            yield node, parent
            stack.extend((child, node) for child in reversed(node.children))

    def leaves(self):
        """Yield the leaves left to right, epsilon leaves included."""
        for node, _ in self.walk():
            if not node.children:
                yield node

    def text(self):
        """The derived string: the non-epsilon leaves read left to right."""
        return ''.join(leaf.symbol for leaf in self.leaves() if not leaf.is_epsilon)

    def to_dict(self):
        out = {}
        for node, parent in self.walk():
            d = {'symbol': node.symbol, 'is_terminal': node.is_terminal, 'children': []}
            out[id(node)] = d
            if parent is not None:
                out[id(parent)]['children'].append(d)
        return out[id(self)]

    def __repr__(self):
        parts = []
        stack = [(self, False)]
        while stack:
            node, closed = stack.pop()
            if not node.children:
                parts.append(f"[{node.symbol}]" if node.is_terminal else node.symbol)
            elif closed:
                n = len(node.children)
                inner = " ".join(parts[-n:])
                del parts[-n:]
                parts.append(f"{node.symbol}({inner})")
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
        return parts[0]


class ParseStep:
    """One row of the parse trace."""

    def __init__(self, step, stack, remaining, action=""):
        self.step = step
        self.stack = stack
        self.remaining = remaining
        self.action = action

    def to_dict(self):
        return {
            'step': self.step,
            'stack': self.stack,
            'input': self.remaining,
            'action': self.action,
        }


class ParseResult:
    def __init__(self, accepted, tree=None, reason=None, step=0, position=0,
                 top=None, lookahead=None, steps=None):
        self.accepted = accepted
        self.tree = tree
        self.reason = reason
        self.step = step
        self.position = position
        self.top = top
        self.lookahead = lookahead
        self.steps = steps if steps is not None else []

    @property
    def message(self):
        if self.accepted:
            return "Success!"
        if self.reason == UNEXPECTED_TERMINAL:
            return f"error: stack top '{self.top}' does not match input '{self.lookahead}'"
        if self.reason == NO_TABLE_ENTRY:
            return f"error: no table entry for ({self.top}, {self.lookahead})"
        return "error: stack exhausted before the input was accepted"

    def to_dict(self):
        return {
            'accepted': self.accepted,
            'reason': self.reason,
            'step': self.step,
            'position': self.position,
            'top': self.top,
            'lookahead': self.lookahead,
            'message': self.message,
        }

    def __bool__(self):
        return self.accepted

    def __repr__(self):
        if self.accepted:
            return f"ParseResult(accepted, tree={self.tree!r})"
        return f"ParseResult(rejected: {self.reason} at step {self.step}, position {self.position})"


def parse(table, grammar, text):
    """
    Parse ``text`` (one character per terminal, whitespace ignored) with
    ``table``. ``grammar`` supplies the start symbol.
    """
    s = [ch for ch in text if not ch.isspace()]
    s.append(END_MARKER)
    end = len(s) - 1
    sp = 0

    root = ParseTreeNode(grammar.start)
    stack = [END_MARKER, grammar.start]
    nodes = [None, root]
    steps = []

    def reject(reason, top, ch):
        result = ParseResult(False, reason=reason, step=len(steps), position=sp,
                             top=top, lookahead=ch, steps=steps)
        steps[-1].action = result.message
        logger.debug("rejected at step %d: %s", len(steps), result.message)
        return result

    while stack:
        top = stack[-1]
        ch = s[sp]
        step = ParseStep(len(steps) + 1, ''.join(stack), ''.join(s[sp:]))
        steps.append(step)

        if top == END_MARKER and ch == END_MARKER and sp == end:
            step.action = "accept"
            return ParseResult(True, tree=root, step=step.step, position=sp,
                               top=top, lookahead=ch, steps=steps)

        if top != END_MARKER and not is_nonterminal(top):
            if top != ch:
                return reject(UNEXPECTED_TERMINAL, top, ch)
            stack.pop()
            nodes.pop().is_terminal = True
            sp += 1
            step.action = f"match '{ch}'"
            continue

        production = table.get(top, ch) if is_nonterminal(top) else None
        if production is None:
            return reject(NO_TABLE_ENTRY, top, ch)

        stack.pop()
        parent = nodes.pop()
        step.action = f"apply {production}"
        if production.is_epsilon:
            parent.children = [ParseTreeNode(EPSILON, is_terminal=True)]
            continue
        children = [ParseTreeNode(symbol) for symbol in production.rhs]
        parent.children = children
        stack.extend(reversed(production.rhs))
        nodes.extend(reversed(children))

    return ParseResult(False, reason=STACK_EXHAUSTED, step=len(steps), position=sp,
                       steps=steps)
