"""Command-line entry point for Soloman.

    soloman prog.sol                  run the program, one line per print
    soloman --compile prog prog.sol   build an executable with clang
    soloman -i                        interactive mode

Program output goes to stdout; stage dumps and diagnostics go to stderr.
Exit status is 0 on success, 1 on a lexical, syntax or runtime error, an
unreadable file or a failed output step, and 2 on a usage error.
"""

from __future__ import annotations
import argparse
import json
import subprocess
import sys
from typing import Iterable, List, Optional, TextIO

import graphviz

from ast_interpreter import run_program
from ast_json import ast_to_json
from ast_nodes import ProgramNode
from ast_viz import write_and_render
from errors import SolomanError
from lexer import Lexer
from llvm_emit import build_executable, emit_llvm
from parser import Parser
from pretty_printer import PrettyPrinter
from tokens import Token


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: Iterable[Token]) -> ProgramNode:
    """Parse tokens into AST."""
    parser = Parser(tokens)
    return parser.parse()


def run_source(text: str, out: Optional[TextIO] = None) -> List[int]:
    """Lex, parse and run `text`; return the printed values.

    The whole program is parsed before the first statement runs, so lexical
    and syntax errors never produce partial output.
    """
    return run_program(parse_tokens(Lexer(text)), out=out)


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    emit_llvm_path: Optional[str] = None,
    compile_path: Optional[str] = None,
    cc: str = "clang",
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Process a single program and return the process exit status.

    Stages: lex, parse, optional dumps, then either run the program (writing
    values to `out`) or, with `emit_llvm_path` and/or `compile_path`, write
    LLVM IR or build an executable instead of running. Stage dumps and
    diagnostics go to `err`.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    try:
        if print_tokens:
            tokens = lex(text)
            print(f"Tokens ({len(tokens)}):", file=err)
            for i, token in enumerate(tokens[:50]):
                print(f"  {i:3}: {token}", file=err)
            if len(tokens) > 50:
                print(f"  ... and {len(tokens) - 50} more", file=err)
            ast = parse_tokens(tokens)
        else:
            ast = parse_tokens(Lexer(text))

        if print_ast:
            print("AST:", file=err)
            print(PrettyPrinter.print_ast(ast), file=err)

        if dump_ast_path:
            try:
                with open(dump_ast_path, "w", encoding="utf-8") as fh:
                    json.dump(ast_to_json(ast), fh, indent=2)
                print(f"Wrote AST JSON to {dump_ast_path}", file=err)
            except OSError as e:
                print(f"Failed to write AST JSON to {dump_ast_path}: {e}", file=err)
                return 1
            except RecursionError:
                print(
                    f"Failed to write AST JSON to {dump_ast_path}: tree too deeply nested",
                    file=err,
                )
                return 1

        if viz_path:
            try:
                rendered = write_and_render(ast, viz_path, fmt=viz_format)
                print(f"Wrote AST visualization to {rendered}", file=err)
            except (
                OSError,
                graphviz.ExecutableNotFound,
                graphviz.CalledProcessError,
            ) as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}", file=err)
                return 1

        if emit_llvm_path:
            try:
                with open(emit_llvm_path, "w", encoding="utf-8") as fh:
                    fh.write(emit_llvm(ast))
                print(f"Wrote LLVM IR to {emit_llvm_path}", file=err)
            except OSError as e:
                print(f"Failed to write LLVM IR to {emit_llvm_path}: {e}", file=err)
                return 1

        if compile_path:
            try:
                ll_path = build_executable(ast, compile_path, cc=cc)
                print(f"Compiled {compile_path} (LLVM IR in {ll_path})", file=err)
            except (OSError, subprocess.CalledProcessError) as e:
                print(f"Failed to compile {compile_path}: {e}", file=err)
                return 1

        if emit_llvm_path or compile_path:
            return 0

        run_program(ast, out=out)

    except SolomanError as e:
        out.flush()
        print(f"error: {e}", file=err)
        return 1

    return 0


def interactive_mode(print_tokens: bool = False, print_ast: bool = False) -> int:
    """Run interactive REPL reading one program per line from stdin."""
    print("Soloman interactive mode (type 'quit' to exit)")
    print("=" * 60)

    while True:
        try:
            text = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting...")
            return 0

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            return 0

        if not text:
            continue

        process_program(text, print_tokens=print_tokens, print_ast=print_ast)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="soloman",
        description="Run a Soloman program from a file or interactively from stdin",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("file", nargs="?", help="Path to source file to run")
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # stage dumps (written to stderr)
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write a Graphviz rendering of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--emit-llvm",
        dest="emit_llvm",
        help="Compile to LLVM IR at this path instead of running the program",
    )
    parser.add_argument(
        "--compile",
        dest="compile",
        help="Build an executable at this path with clang instead of running the program",
    )
    parser.add_argument(
        "--cc",
        dest="cc",
        default="clang",
        help="C compiler used by --compile to link the LLVM IR (default: clang)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        return interactive_mode(
            print_tokens=args.print_tokens, print_ast=args.print_ast
        )

    if not args.file:
        parser.print_help(sys.stderr)
        return 2

    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read file {args.file}: {e}", file=sys.stderr)
        return 1

    return process_program(
        text,
        print_tokens=args.print_tokens,
        print_ast=args.print_ast,
        dump_ast_path=args.dump_ast,
        viz_path=args.viz_ast,
        viz_format=args.viz_format,
        emit_llvm_path=args.emit_llvm,
        compile_path=args.compile,
        cc=args.cc,
    )


if __name__ == "__main__":
    sys.exit(main())
