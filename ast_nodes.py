"""AST node definitions for the LeafCode expression language.

This module defines the node dataclasses built by the parser and read by the
evaluator and the printers. Each variant is its own dataclass and carries a
`NodeType` tag, so consumers either pattern-match on the class or compare
`node.type`.

Conventions:
- `OperationNode` always has both `left` and `right`.
- `LiteralNode` and `VariableNode` are leaves that only carry their token.
- `PrintNode` wraps exactly one `operand`.
- `ProgramNode` and `ExpressionNode` are wrappers that the printers know how
    to descend into. The parser does not produce them for a single line.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional
from tokens import Token, TokenType


class NodeType(Enum):
    PROGRAM = auto()
    EXPRESSION = auto()
    OPERATION = auto()
    LITERAL = auto()
    VARIABLE = auto()
    PRINT = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: NodeType


@dataclass
class LiteralNode(ASTNode):
    type: NodeType = NodeType.LITERAL
    token: Token = field(default_factory=lambda: Token(TokenType.NUM, "0"))


@dataclass
class VariableNode(ASTNode):
    type: NodeType = NodeType.VARIABLE
    token: Token = field(default_factory=lambda: Token(TokenType.VAR, ""))


@dataclass
class OperationNode(ASTNode):
    type: NodeType = NodeType.OPERATION
    token: Token = field(default_factory=lambda: Token(TokenType.ADD, "+"))
    left: ASTNode = field(default_factory=lambda: LiteralNode())
    right: ASTNode = field(default_factory=lambda: LiteralNode())


@dataclass
class PrintNode(ASTNode):
    type: NodeType = NodeType.PRINT
    token: Token = field(default_factory=lambda: Token(TokenType.PRINT, "print"))
    operand: Optional[ASTNode] = None


@dataclass
class ExpressionNode(ASTNode):
    type: NodeType = NodeType.EXPRESSION
    expression: Optional[ASTNode] = None


# Program Node
@dataclass
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    body: Optional[ASTNode] = None
