"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small `Token` dataclass that holds a token type and the
verbatim word it was produced from. Tokens are the atomic units produced by
the lexer and consumed by the parser.

Only `NUM`, `VAR`, the four arithmetic operators and `PRINT` are consumed by
the grammar today. The remaining kinds are recognized by the lexer so that
source using them still tokenizes; the parser treats them as plain words.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    # Declarations and blocks
    BLOOM = auto()
    WITHER = auto()
    PETAL = auto()
    VINE = auto()
    TREE = auto()
    STUMP = auto()

    # Punctuation
    LILLY = auto()
    WATER = auto()

    # Literals
    NUM = auto()
    VAR = auto()

    # Type names
    POPPY = auto()
    ROSE = auto()
    BUSH = auto()

    # Arithmetic operators
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()

    # Comparison operators
    EQUAL = auto()
    NOTEQUAL = auto()
    RIGHTCROC = auto()
    LEFTCROC = auto()

    # Print
    PRINT = auto()

    PLANT = auto()
    POT = auto()

    # Special
    NONE = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str = ""

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        return self.value

    @property
    def is_terminator(self) -> bool:
        return self.type == TokenType.NONE


TERMINATOR = Token(TokenType.NONE, "")
