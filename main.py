from __future__ import annotations
import json
from typing import Any, List, Optional
from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser, UnexpectedEndOfInput
from ast_interpreter import evaluate
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token], strict: bool = False) -> ASTNode:
    """Parse tokens into AST."""
    parser = Parser(tokens, strict=strict)
    return parser.parse()


def run(text: str, strict: bool = False) -> str:
    """Tokenize, parse and evaluate one line, returning the result text."""
    return evaluate(parse_tokens(lex(text), strict=strict))


def validate_line(raw: str) -> str:
    """Check that a source line ends with `;` and return it without the `;`.

    Trailing whitespace is ignored. Raises SyntaxError for empty lines and for
    lines missing the terminating semicolon.
    """
    line = raw.rstrip()
    if not line or not line.endswith(";"):
        raise SyntaxError("lines must end with ';'")
    return line[:-1]


def process_line(
    text: str,
    *,
    print_tokens: bool = False,
    print_inline: bool = True,
    print_ast: bool = True,
    strict: bool = False,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    trees: Optional[List[Any]] = None,
) -> str:
    """Process a single line: lex, parse, optionally print stages, evaluate.

    Flags control which parts are printed. When `trees` is given, the JSON
    form of the parsed tree is appended to it. Returns the evaluation result.
    """
    tokens = lex(text)
    if print_tokens:
        print(f"Tokens ({len(tokens)}):")
        for i, token in enumerate(tokens):
            print(f"  {i:3}: {token}")

    ast = parse_tokens(tokens, strict=strict)
    if trees is not None:
        trees.append(ast_to_json(ast))
    if print_inline:
        print(PrettyPrinter.print_inline(ast))
    if print_ast:
        print(PrettyPrinter.print_ast(ast))

    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    result = evaluate(ast)
    print(f"stdout: {result}")
    return result


def process_file(
    path: str,
    *,
    print_tokens: bool = False,
    print_inline: bool = True,
    print_ast: bool = True,
    strict: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> List[str]:
    """Process a source file line by line and return the results in order.

    Reading stops at the first line that is not terminated by `;`; results
    gathered up to that point are returned. In strict mode a line that fails
    to parse is reported and skipped, and the following lines still run.
    """
    results: List[str] = []
    trees: Optional[List[Any]] = [] if dump_ast_path else None

    with open(path, "r", encoding="utf-8") as fh:
        for line_num, raw in enumerate(fh, start=1):
            try:
                text = validate_line(raw)
            except SyntaxError as e:
                print(f"Syntax Error: line {line_num}: {e}")
                break

            try:
                results.append(
                    process_line(
                        text,
                        print_tokens=print_tokens,
                        print_inline=print_inline,
                        print_ast=print_ast,
                        strict=strict,
                        viz_path=f"{viz_path}_{line_num}" if viz_path else None,
                        viz_format=viz_format,
                        trees=trees,
                    )
                )
            except UnexpectedEndOfInput as e:
                print(f"Syntax Error: line {line_num}: {e}")

    if dump_ast_path:
        try:
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                json.dump(trees, fh, indent=2)
            print(f"Wrote AST JSON to {dump_ast_path}")
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

    return results


def interactive_mode(
    print_tokens: bool = False,
    print_inline: bool = True,
    print_ast: bool = True,
    strict: bool = False,
) -> None:
    """Run an interactive REPL reading one line at a time from stdin.

    A trailing `;` is optional here.
    """
    print("\nLEAFCODE LANG (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\n> ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_line(
                text.rstrip(";"),
                print_tokens=print_tokens,
                print_inline=print_inline,
                print_ast=print_ast,
                strict=strict,
            )

        except SyntaxError as e:
            print(f"Syntax error: {e}")
        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


if __name__ == "__main__":
    import argparse
    import sys

    parser = argparse.ArgumentParser(
        description="Evaluate LeafCode source from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file",
        "-f",
        dest="file",
        default="input.txt",
        help="Path to source file to process (default: input.txt)",
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-inline",
        dest="print_inline",
        action="store_false",
        help="Do not print the inline AST",
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print the indented AST"
    )
    parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Treat a missing operand at end of line as a syntax error",
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the ASTs of all lines as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path prefix (without extension) for Graphviz renderings of each line's AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )

    args = parser.parse_args()

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_inline=args.print_inline,
            print_ast=args.print_ast,
            strict=args.strict,
        )
    else:
        print("\nLEAFCODE LANG")
        print("Nature is so cool\n")
        try:
            process_file(
                args.file,
                print_tokens=args.print_tokens,
                print_inline=args.print_inline,
                print_ast=args.print_ast,
                strict=args.strict,
                dump_ast_path=args.dump_ast,
                viz_path=args.viz_ast,
                viz_format=args.viz_format,
            )
        except OSError as e:
            print(f"Couldn't open file {args.file}: {e}")
            sys.exit(1)
