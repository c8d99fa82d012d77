from lexer import Lexer
from parser import Parser
from ast_interpreter import evaluate


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_text(text: str, strict: bool = False):
    """Convenience: lex+parse a source line into an expression tree."""
    return Parser(Lexer(text).tokenize(), strict=strict).parse()


def eval_text(text: str) -> str:
    """Lex, parse and evaluate a source line."""
    return evaluate(parse_text(text))
