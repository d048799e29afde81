"""CLI entry point for the CallChain interpreter."""
from __future__ import annotations
import sys
import logging
import argparse
import traceback

from . import __version__
from .lexer import Lexer, LexerError
from .parser import Parser, ParseError
from .printer import Printer, format_tokens
from .runtime import Interpreter
from .host import demo_scope


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        prog="callchain",
        description="CallChain interpreter: run DSL source against the demo host scope",
    )
    parser.add_argument("file", nargs="?", help="Source file to execute")
    parser.add_argument("-e", "--eval", dest="source", default=None,
                        help="Execute SOURCE instead of a file")
    parser.add_argument("--tokens", action="store_true", help="Print tokens instead of running")
    parser.add_argument("--ast", action="store_true", help="Print the AST instead of running")
    parser.add_argument("--repl", action="store_true", help="Force REPL mode")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline stages to stderr")
    parser.add_argument("--version", action="version", version=f"callchain {__version__}")

    args = parser.parse_args(argv)

    flags = {
        "dump_tokens": args.tokens,
        "dump_ast": args.ast,
        "verbose": args.verbose,
    }

    if flags["verbose"]:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.repl or (args.file is None and args.source is None):
        run_repl(flags)
    elif args.source is not None:
        sys.exit(run_source(args.source, flags))
    else:
        sys.exit(run_file(args.file, flags))


def run_file(path: str, flags: dict) -> int:
    """Execute a source file. Returns the process exit code."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
    except FileNotFoundError:
        print(f"[callchain] File not found: {path}")
        return 1
    return run_source(source, flags)


def run_source(source: str, flags: dict) -> int:
    """Execute (or dump) a source string. Returns the process exit code."""
    try:
        tokens = Lexer(source).tokenize()
        if flags.get("dump_tokens"):
            print(format_tokens(tokens))
            return 0
        program = Parser(tokens).parse()
        if flags.get("dump_ast"):
            print(Printer().format_tree(program))
            return 0
        Interpreter(demo_scope()).execute_program(program)
    except (LexerError, ParseError) as e:
        print(f"[callchain] {e}")
        return 1
    except Exception as e:
        print(f"\n[callchain] Host function error: {e}")
        traceback.print_exc()
        return 2
    return 0


def run_repl(flags: dict):
    """Interactive REPL sharing one demo scope across lines."""
    print(f"callchain REPL {__version__}")
    print("Type 'quit' to exit.\n")

    interp = Interpreter(demo_scope())

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print("\n[callchain] Goodbye.")
            break

        line = line.strip()
        if not line:
            continue
        if line in ("quit", "exit"):
            print("[callchain] Goodbye.")
            break

        try:
            if flags.get("dump_tokens"):
                print(format_tokens(Lexer(line).tokenize()))
            elif flags.get("dump_ast"):
                print(Printer().format_tree(Parser(Lexer(line).tokenize()).parse()))
            else:
                interp.run(line)
        except (LexerError, ParseError) as e:
            print(f"[Error] {e}")
        except Exception as e:
            print(f"[Host Error] {e}")


if __name__ == "__main__":
    main()
