"""Evaluator for LeafCode expression trees.

`evaluate(node)` walks the tree post-order and returns the result as text:
either the decimal form of an integer or one of the fixed error strings
below. Errors never escape `evaluate`; the failing node is replaced by its
error text and evaluation carries on. A parent operation reads that text
like any other non-numeric operand, as zero.

There is no variable environment. A `VariableNode` evaluates to its own
name, which is zero inside arithmetic.
"""

import re
import sys
from typing import Callable, List, Optional, Tuple
from tokens import Token, TokenType
from ast_nodes import *


DIVIDE_BY_ZERO = "Error: divide by zero"
UNKNOWN_OPERATION = "Error: Unknown operation"
UNRECOGNIZED_NODE = "Error: Unrecognized node type"

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class EvaluationError(RuntimeError):
    result = ""


class DivideByZeroError(EvaluationError):
    result = DIVIDE_BY_ZERO


class UnknownOperationError(EvaluationError):
    result = UNKNOWN_OPERATION


class UnrecognizedNodeError(EvaluationError):
    result = UNRECOGNIZED_NODE


def parse_int(text: str) -> int:
    """Best-effort integer parse: the leading integer of `text`, else 0."""
    m = _LEADING_INT.match(text)
    return int(m.group(1)) if m else 0


def _divide(lv: int, rv: int) -> int:
    # Truncate toward zero.
    q = abs(lv) // abs(rv)
    return q if (lv < 0) == (rv < 0) else -q


def _apply(operator: Token, lv: int, rv: int) -> int:
    match operator.type:
        case TokenType.ADD:
            return lv + rv
        case TokenType.SUB:
            return lv - rv
        case TokenType.MUL:
            return lv * rv
        case TokenType.DIV:
            if rv == 0:
                raise DivideByZeroError(DIVIDE_BY_ZERO)
            return _divide(lv, rv)
        case _:
            raise UnknownOperationError(f"{UNKNOWN_OPERATION}: {operator.type}")


def _eval_leaf(node: Optional[ASTNode]) -> str:
    match node:
        case None:
            return ""
        case LiteralNode(token=tok) | VariableNode(token=tok):
            return tok.lexeme
        case _:
            raise UnrecognizedNodeError(
                f"{UNRECOGNIZED_NODE}: {getattr(node, 'type', type(node).__name__)}"
            )


def _recover(step: Callable[[], str]) -> str:
    try:
        return step()
    except EvaluationError as e:
        print(e, file=sys.stderr)
        return e.result


def evaluate(node: Optional[ASTNode]) -> str:
    """Evaluate a tree and return its result text.

    The walk uses an explicit stack, so long operator chains do not hit the
    recursion limit. An `EvaluationError` is reported on stderr and replaced
    by the error text of the node that failed.
    """
    results: List[str] = []
    # (node, children_done)
    stack: List[Tuple[Optional[ASTNode], bool]] = [(node, False)]

    while stack:
        current, children_done = stack.pop()
        match current:
            case OperationNode(token=op, left=l, right=r):
                if not children_done:
                    stack.append((current, True))
                    stack.append((r, False))
                    stack.append((l, False))
                    continue
                rv = parse_int(results.pop())
                lv = parse_int(results.pop())
                results.append(_recover(lambda: str(_apply(op, lv, rv))))
            case PrintNode(operand=operand):
                stack.append((operand, False))
            case _:
                results.append(_recover(lambda: _eval_leaf(current)))

    return results.pop()
