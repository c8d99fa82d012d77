import pytest

from tests.utils import lex, parse_text
from ast_nodes import *
from parser import Parser, UnexpectedEndOfInput
from tokens import Token, TokenType


def test_parser_parses_single_literal():
    ast = parse_text("42")
    assert isinstance(ast, LiteralNode)
    assert ast.type == NodeType.LITERAL
    assert ast.token.lexeme == "42"


def test_parser_parses_identifier_as_variable():
    ast = parse_text("x")
    assert isinstance(ast, VariableNode)
    assert ast.token.lexeme == "x"


def test_factor_chain_is_left_associative():
    ast = parse_text("6 / 3 / 2")
    assert isinstance(ast, OperationNode)
    assert ast.token.type == TokenType.DIV
    assert isinstance(ast.right, LiteralNode)
    assert ast.right.token.lexeme == "2"

    inner = ast.left
    assert isinstance(inner, OperationNode)
    assert inner.left.token.lexeme == "6"
    assert inner.right.token.lexeme == "3"


def test_multiplication_nests_under_addition():
    ast = parse_text("2 + 3 * 4")
    assert ast.token.type == TokenType.ADD
    assert isinstance(ast.left, LiteralNode)
    assert isinstance(ast.right, OperationNode)
    assert ast.right.token.type == TokenType.MUL


def test_term_chain_is_left_associative():
    ast = parse_text("1 - 2 + 3")
    assert ast.token.type == TokenType.ADD
    assert ast.left.token.type == TokenType.SUB


def test_print_wraps_whole_expression():
    ast = parse_text("print 3 + 4")
    assert isinstance(ast, PrintNode)
    assert isinstance(ast.operand, OperationNode)
    assert ast.operand.token.type == TokenType.ADD


def test_nested_print():
    ast = parse_text("stampa print 1")
    assert isinstance(ast, PrintNode)
    assert isinstance(ast.operand, PrintNode)
    assert isinstance(ast.operand.operand, LiteralNode)


def test_keyword_in_operand_position_becomes_variable():
    ast = parse_text("1 + petal")
    assert isinstance(ast.right, VariableNode)
    assert ast.right.token.type == TokenType.PETAL


def test_trailing_operator_reads_terminator_as_variable():
    ast = parse_text("3 +")
    assert isinstance(ast, OperationNode)
    assert isinstance(ast.right, VariableNode)
    assert ast.right.token.is_terminator


def test_empty_line_parses_to_terminator_variable():
    ast = parse_text("")
    assert isinstance(ast, VariableNode)
    assert ast.token.is_terminator


def test_strict_mode_rejects_missing_operand():
    with pytest.raises(UnexpectedEndOfInput):
        parse_text("3 *", strict=True)


def test_strict_mode_error_is_a_syntax_error():
    with pytest.raises(SyntaxError):
        parse_text("print", strict=True)


def test_leftover_tokens_are_not_consumed():
    parser = Parser(lex("1 2 + 3"))
    ast = parser.parse()
    assert isinstance(ast, LiteralNode)
    assert parser.current.lexeme == "2"


def test_cursor_never_moves_past_terminator():
    parser = Parser(lex("1 +"))
    parser.parse()
    assert parser.current.is_terminator
    assert parser.pos == len(parser.tokens) - 1
    parser.advance()
    assert parser.pos == len(parser.tokens) - 1


def test_parser_adds_terminator_to_hand_built_tokens():
    tokens = [Token(TokenType.NUM, "1"), Token(TokenType.MUL, "*")]
    ast = Parser(tokens).parse()
    assert isinstance(ast, OperationNode)
    assert ast.right.token.is_terminator
