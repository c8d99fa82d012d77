"""Pretty-printer for the AST.

Provides two renderings of an expression tree, both for debugging and
development rather than for producing source code:

- `PrettyPrinter.print_inline(node)`: a one-line parenthesized form such as
    `PRINT((2 ADD (3 MUL 4)))`.
- `PrettyPrinter.print_ast(node, indent, prefix)`: a multi-line indented form.

Examples:
    PrettyPrinter.print_ast(tree)
"""

from __future__ import annotations
from typing import List, Optional, Tuple, Union
from ast_nodes import *
from lexer import token_name


class PrettyPrinter:
    @staticmethod
    def print_inline(node: Optional[ASTNode]) -> str:
        """Return the parenthesized one-line form of a tree."""
        parts: List[str] = []
        # Pending work: either a node to render or literal text to emit.
        stack: List[Union[ASTNode, str, None]] = [node]

        while stack:
            item = stack.pop()
            if item is None:
                continue
            if isinstance(item, str):
                parts.append(item)
                continue

            match item:
                case ProgramNode(body=body):
                    stack.append(body)
                case ExpressionNode(expression=expr):
                    stack.append(expr)
                case OperationNode(token=op, left=l, right=r):
                    stack.extend([")", r, f" {token_name(op.type)} ", l, "("])
                case LiteralNode(token=tok):
                    parts.append(tok.lexeme)
                case VariableNode(token=tok):
                    parts.append(f"var:{tok.lexeme}")
                case PrintNode(token=tok, operand=operand):
                    stack.extend([")", operand, f"{token_name(tok.type)}("])
                case _:
                    parts.append("<unrecognized>")

        return "".join(parts)

    @staticmethod
    def print_ast(node: Optional[ASTNode], indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        stack: List[Tuple[Optional[ASTNode], int, str]] = [(node, indent, prefix)]

        while stack:
            current, depth, label = stack.pop()
            indent_str = " " * depth

            if not isinstance(current, ASTNode):
                lines.append(f"{indent_str}{label}{current}")
                continue

            match current:
                case ProgramNode(body=body):
                    lines.append(f"{indent_str}{label}Program")
                    if body is not None:
                        stack.append((body, depth + 2, ""))

                case ExpressionNode(expression=expr):
                    lines.append(f"{indent_str}{label}Expression")
                    if expr is not None:
                        stack.append((expr, depth + 2, ""))

                case OperationNode(token=op, left=left, right=right):
                    lines.append(f"{indent_str}{label}Operation({token_name(op.type)})")
                    # Right is pushed first so left is printed first.
                    stack.append((right, depth + 2, "right: "))
                    stack.append((left, depth + 2, "left: "))

                case LiteralNode(token=tok):
                    lines.append(f"{indent_str}{label}Literal({tok.lexeme})")

                case VariableNode(token=tok):
                    lines.append(f"{indent_str}{label}Variable({tok.lexeme})")

                case PrintNode(operand=operand):
                    lines.append(f"{indent_str}{label}Print")
                    stack.append((operand, depth + 2, ""))

                case _:
                    lines.append(f"{indent_str}{label}Unknown node type: {type(current)}")

        return "\n".join(line for line in lines if line)
