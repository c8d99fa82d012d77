"""
Lexer for the LeafCode expression language.

Overview:
- A line of source is a run of words separated by whitespace (and by the
    `;` statement delimiter). Every word becomes exactly one `Token`.
- A word is classified by an exact, case-sensitive match against the
    keyword table, then as a numeral if it is all ASCII digits, and
    otherwise as an identifier (`VAR`). Classification never fails.
- The token list always ends with a single terminator token
    (`TokenType.NONE`, empty text) so the parser can detect the end of input.

Examples:
    Input:  "stampa 2 sprout 3"
    Tokens: [PRINT('stampa'), NUM('2'), ADD('sprout'), NUM('3'), NONE('')]

Implementation notes:
- The keyword table is scanned linearly and the first match wins. Leaf words
    and their symbolic spellings (`sprout` and `+`, `stampa` and `print`)
    map to the same kind.
- Numerals keep their text; the evaluator re-reads the value from it.
"""

from __future__ import annotations
import re
from typing import List, Tuple
from tokens import Token, TokenType, TERMINATOR


KEYWORDS: Tuple[Tuple[str, TokenType], ...] = (
    ("BLOOM", TokenType.BLOOM),
    ("wither", TokenType.WITHER),
    ("petal", TokenType.PETAL),
    ("vine", TokenType.VINE),
    ("tree", TokenType.TREE),
    ("stump", TokenType.STUMP),
    (":", TokenType.LILLY),
    ('"', TokenType.WATER),
    ("Poppy", TokenType.POPPY),
    ("Rose", TokenType.ROSE),
    ("Bush", TokenType.BUSH),
    ("sprout", TokenType.ADD),
    ("+", TokenType.ADD),
    ("shed", TokenType.SUB),
    ("-", TokenType.SUB),
    ("branch", TokenType.MUL),
    ("*", TokenType.MUL),
    ("decay", TokenType.DIV),
    ("/", TokenType.DIV),
    ("=", TokenType.EQUAL),
    ("!=", TokenType.NOTEQUAL),
    ("rightcroc", TokenType.RIGHTCROC),
    ("leftcroc", TokenType.LEFTCROC),
    ("stampa", TokenType.PRINT),
    ("print", TokenType.PRINT),
    ("plant", TokenType.PLANT),
    ("pot", TokenType.POT),
)

# Words are separated by whitespace and by the statement delimiter.
WORD_SEPARATORS = re.compile(r"[\s;]+")


def classify_word(word: str) -> TokenType:
    """Return the token kind for a single word."""
    for keyword, token_type in KEYWORDS:
        if word == keyword:
            return token_type

    if word and word.isascii() and word.isdigit():
        return TokenType.NUM
    return TokenType.VAR


def process_word(word: str) -> Token:
    """Convert a word to a token."""
    return Token(classify_word(word), word)


def token_name(token_type: TokenType) -> str:
    """Display name of a token kind, for diagnostics."""
    return str(token_type)


class Lexer:
    def __init__(self, text: str):
        self.text = text

    def words(self) -> List[str]:
        """Split the input into words, dropping empty fragments."""
        return [w for w in WORD_SEPARATORS.split(self.text.strip()) if w]

    def tokenize(self) -> List[Token]:
        """Return all tokens for the input followed by the terminator."""
        tokens = [process_word(word) for word in self.words()]
        tokens.append(TERMINATOR)
        return tokens
