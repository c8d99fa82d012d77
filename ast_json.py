"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node: the node type, the token
it was built from (kind and text), and its children.
"""

from typing import Any, Dict, Optional
from ast_nodes import *
from tokens import Token


def token_to_json(token: Token) -> Dict[str, str]:
    return {"kind": str(token.type), "text": token.lexeme}


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    if t == NodeType.LITERAL and isinstance(node, LiteralNode):
        return {"node_type": "Literal", "token": token_to_json(node.token)}
    if t == NodeType.VARIABLE and isinstance(node, VariableNode):
        return {"node_type": "Variable", "token": token_to_json(node.token)}
    if t == NodeType.OPERATION and isinstance(node, OperationNode):
        return {
            "node_type": "Operation",
            "token": token_to_json(node.token),
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
        }
    if t == NodeType.PRINT and isinstance(node, PrintNode):
        return {
            "node_type": "Print",
            "token": token_to_json(node.token),
            "operand": ast_to_json(node.operand),
        }
    if t == NodeType.EXPRESSION and isinstance(node, ExpressionNode):
        return {"node_type": "Expression", "expression": ast_to_json(node.expression)}
    if t == NodeType.PROGRAM and isinstance(node, ProgramNode):
        return {"node_type": "Program", "body": ast_to_json(node.body)}

    return {"node_type": getattr(t, "name", str(t))}
