"""Graphviz visualization helpers for expression trees.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). `write_and_render` writes the file to disk.

Layout: one graph node per tree node, edges from parent to child labelled
`left`/`right` for operations. Literal leaves are boxes, variables are
ellipses, operations and print are bold.
"""

from typing import List, Optional, Tuple
from ast_nodes import *
from graphviz import Digraph
from lexer import token_name


def _label(node: ASTNode) -> str:
    match node:
        case OperationNode(token=op):
            return f"{token_name(op.type)} {op.lexeme}"
        case LiteralNode(token=tok):
            return tok.lexeme
        case VariableNode(token=tok):
            return f"var {tok.lexeme}" if tok.lexeme else "var <end>"
        case PrintNode():
            return "PRINT"
        case _:
            return str(node.type)


def _shape(node: ASTNode) -> str:
    match node:
        case LiteralNode():
            return "box"
        case VariableNode():
            return "ellipse"
        case _:
            return "oval"


def render_ast_dot(node: Optional[ASTNode], name: str = "ast") -> Digraph:
    """Return a graphviz.Digraph for the given tree.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(name=name, format="svg")
    dot.attr("graph", rankdir="TB")

    counter = 0
    # (node, parent id, edge label)
    stack: List[Tuple[Optional[ASTNode], Optional[str], Optional[str]]] = [(node, None, None)]

    while stack:
        n, parent_id, edge_label = stack.pop()
        if n is None:
            continue
        node_id = f"n{counter}"
        counter += 1
        style = "bold" if isinstance(n, (OperationNode, PrintNode)) else "solid"
        dot.node(node_id, label=_label(n), shape=_shape(n), style=style)
        if parent_id is not None:
            if edge_label:
                dot.edge(parent_id, node_id, label=edge_label)
            else:
                dot.edge(parent_id, node_id)

        match n:
            case OperationNode(left=l, right=r):
                stack.append((r, node_id, "right"))
                stack.append((l, node_id, "left"))
            case PrintNode(operand=child) | ExpressionNode(expression=child) | ProgramNode(body=child):
                stack.append((child, node_id, None))

    return dot


def write_and_render(node: Optional[ASTNode], out_path: str, fmt: str = "svg") -> None:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(tree, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
