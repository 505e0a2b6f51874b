"""
Presentation helpers: JSON-ready forms of the analysis results, a pandas
view of the parsing table, and text / graphviz renderings of parse trees.
"""
import graphviz
import pandas as pd

from ll1.grammar import END_MARKER, EPSILON


def _ordered(symbols):
    # terminals sorted, then ε and $ last
    special = [s for s in (EPSILON, END_MARKER) if s in symbols]
    return sorted(s for s in symbols if s not in special) + special


def sets_to_dict(sets):
    # frozenset values are not JSON serializable
    return {key: _ordered(value) for key, value in sets.items()}


def table_to_dict(table):
    # tuple keys are not JSON serializable, use "A|t"
    return {f"{x}|{y}": production.body for (x, y), production in table.items()}


def conflicts_to_list(conflicts):
    return [conflict.to_dict() for conflict in conflicts]


def tree_to_dict(tree):
    """
    Flat JSON form of a parse tree: ``{"root": 0, "nodes": [...]}`` with
    nodes in preorder, each listing its children by id. Nested JSON for a
    deep tree would overrun the encoder's recursion limit.
    """
    if tree is None:
        return None
    nodes = []
    ids = {}
    for node, parent in tree.walk():
        ids[id(node)] = len(nodes)
        nodes.append({
            'id': len(nodes),
            'symbol': node.symbol,
            'is_terminal': node.is_terminal,
            'children': [],
        })
        if parent is not None:
            nodes[ids[id(parent)]]['children'].append(ids[id(node)])
    return {'root': 0, 'nodes': nodes}


def format_sets(name, sets):
    return [f"{name}({key}) = {{ {', '.join(_ordered(value))} }}" for key, value in sets.items()]


def table_frame(table):
    """Parsing table as a DataFrame: one row per nonterminal, one column per terminal."""
    rows = list(table.nonterminals)
    columns = list(table.terminals)
    if not len(table):
        return pd.DataFrame('', index=rows, columns=columns)

    df = pd.DataFrame(list(table.items()), columns=['Key', 'Value'])
    df['Vn'] = [x[0] for x in df['Key']]
    df['Vt'] = [x[1] for x in df['Key']]
    df['Value'] = [str(p) for p in df['Value']]
    tab_df = df.pivot(index='Vn', columns='Vt', values='Value')
    tab_df = tab_df.reindex(index=rows, columns=columns).fillna('')
    tab_df.index.name = None
    tab_df.columns.name = None
    return tab_df


def format_tree(tree):
    """Indented text layout of a parse tree; terminal leaves are bracketed."""

    def label(node):
        return f"[{node.symbol}]" if node.is_terminal else node.symbol

    def push_children(stack, node, prefix):
        last = len(node.children) - 1
        for i in range(last, -1, -1):
            stack.append((node.children[i], prefix, i == last))

    lines = [label(tree)]
    stack = []
    push_children(stack, tree, "")
    while stack:
        node, prefix, is_last = stack.pop()
        lines.append(prefix + ("`-- " if is_last else "+-- ") + label(node))
        push_children(stack, node, prefix + ("    " if is_last else "|   "))
    return "\n".join(lines)


def tree_to_dot(tree):
    """graphviz DOT source for a parse tree, nodes numbered in preorder."""
    dot = graphviz.Digraph(comment='LL1_parse_tree')
    ids = {}
    for node, parent in tree.walk():
        node_id = str(len(ids))
        ids[id(node)] = node_id
        if node.is_terminal:
            dot.node(node_id, label=node.symbol, shape='box',
                     style='filled', fillcolor='lightpink', fontname='Verdana')
        else:
            dot.node(node_id, label=node.symbol, shape='ellipse',
                     style='filled', fillcolor='lightblue', fontname='Verdana')
        if parent is not None:
            dot.edge(ids[id(parent)], node_id)
    return dot.source
