"""
Parser for the LeafCode expression language.

Overview and approach:
- A small hand-written recursive-descent parser over one line's tokens.
    Each grammar level is one method, from loosest to tightest binding:

        expression := "print" expression | term
        term       := factor ( ("+" | "-") factor )*
        factor     := literal ( ("*" | "/") literal )*
        literal    := NUM | VAR

- `term` and `factor` fold left-associatively, so `6 / 3 / 2` is
    `(6 / 3) / 2` and `2 + 3 * 4` is `2 + (3 * 4)`. There are no parentheses.

Malformed input:
- Any token in operand position that is not a numeral becomes a
    `VariableNode`, keywords included. That is not an error.
- The cursor never moves past the terminator token. By default a missing
    operand (`3 +`) is read as a `VariableNode` over the terminator, whose
    text is empty. With `strict=True` the parser raises
    `UnexpectedEndOfInput` instead.
- Tokens left over after a complete expression are not consumed.
"""

from __future__ import annotations
from typing import List, Tuple
from tokens import Token, TokenType, TERMINATOR
from ast_nodes import *


class UnexpectedEndOfInput(SyntaxError):
    pass


TERM_OPERATORS: Tuple[TokenType, ...] = (TokenType.ADD, TokenType.SUB)
FACTOR_OPERATORS: Tuple[TokenType, ...] = (TokenType.MUL, TokenType.DIV)


class Parser:
    def __init__(self, tokens: List[Token], strict: bool = False):
        # Guarantee a terminator even for hand-built token lists.
        if not tokens or not tokens[-1].is_terminator:
            tokens = list(tokens) + [TERMINATOR]
        self.tokens = tokens
        self.pos = 0
        self.current = tokens[0]
        self.strict = strict

    def advance(self) -> Token:
        """Consume the current token and return it. Stops at the terminator."""
        token = self.current
        if not token.is_terminator:
            self.pos += 1
            self.current = self.tokens[self.pos]
        return token

    def check(self, *token_types: TokenType) -> bool:
        """Check if the current token is one of the given kinds."""
        return self.current.type in token_types

    def parse(self) -> ASTNode:
        """Parse one line into an expression tree."""
        return self.parse_expression()

    def parse_expression(self) -> ASTNode:
        if self.check(TokenType.PRINT):
            return self.parse_print()
        return self.parse_term()

    def parse_print(self) -> PrintNode:
        token = self.advance()
        operand = self.parse_expression()
        return PrintNode(token=token, operand=operand)

    def parse_term(self) -> ASTNode:
        """Parse additions and subtractions."""
        left = self.parse_factor()
        while self.check(*TERM_OPERATORS):
            operator = self.advance()
            right = self.parse_factor()
            left = OperationNode(token=operator, left=left, right=right)
        return left

    def parse_factor(self) -> ASTNode:
        """Parse multiplications and divisions."""
        left = self.parse_literal()
        while self.check(*FACTOR_OPERATORS):
            operator = self.advance()
            right = self.parse_literal()
            left = OperationNode(token=operator, left=left, right=right)
        return left

    def parse_literal(self) -> ASTNode:
        token = self.current

        if token.is_terminator:
            if self.strict:
                raise UnexpectedEndOfInput(
                    f"Expected operand at token {self.pos}, got end of input"
                )
            return VariableNode(token=token)

        self.advance()
        match token.type:
            case TokenType.NUM:
                return LiteralNode(token=token)
            case _:
                return VariableNode(token=token)
