"""Command-line entry point: ``codekata factorial`` and ``codekata namebook``."""

from __future__ import annotations

import argparse
import logging
import time

from codekata.constants import BACKENDS, DEFAULT_BACKEND, DEFAULT_METHOD, METHODS, UPPER_BOUND
from codekata.errors import InvalidNameError, OutOfRangeError
from codekata.factorial import digit_sum_of_factorial
from codekata.namebook import NameBook, TreeNameBook

log = logging.getLogger("codekata")

EXIT_OK = 0
EXIT_OUT_OF_RANGE = -1
EXIT_BAD_INPUT = 1


def _prompt(message: str) -> str | None:
    try:
        return input(message).strip()
    except (EOFError, KeyboardInterrupt):
        print()
        return None


def _yes_no(flag: bool) -> str:
    return "true" if flag else "false"


def run_factorial(value: str | None, backend: str = DEFAULT_BACKEND,
                  upper_bound: int = UPPER_BOUND) -> int:
    """Print the digit sum of value!; prompts for the value when missing."""
    if value is None:
        value = _prompt(f"Enter a number within range [0,{upper_bound}]: ")
        if value is None:
            log.error("No number given.")
            return EXIT_BAD_INPUT

    try:
        n = int(value)
    except ValueError:
        log.error("Not an integer: %r", value)
        return EXIT_BAD_INPUT

    t0 = time.time()
    try:
        digit_sum = digit_sum_of_factorial(n, backend=backend, upper_bound=upper_bound)
    except OutOfRangeError as exc:
        print(exc)
        return EXIT_OUT_OF_RANGE
    log.debug("%s backend took %.3fs", backend, time.time() - t0)

    print(f"Sum of digits of factorial of {n} = {digit_sum}")
    return EXIT_OK


def run_namebook(path: str | None, method: str = DEFAULT_METHOD) -> int:
    """Report whether the names in *path* are consistent."""
    if path is None:
        path = _prompt("Enter file name with list of name: ")
        if not path:
            log.error("No file name given.")
            return EXIT_BAD_INPUT

    try:
        if method in ("pairwise", "both"):
            book = NameBook(path)
            print(f"Name book is consistent after loop? {_yes_no(book.consistent)}")
            print(f"Name book is consistent? {_yes_no(book.is_consistent())}")
            if book.first_collision:
                log.info("First collision: '%s' / '%s'", *book.first_collision)
        if method in ("trie", "both"):
            tree_book = TreeNameBook(path)
            label = "Name book (trie)" if method == "both" else "Name book"
            print(f"{label} is consistent? {_yes_no(tree_book.consistent)}")
            if tree_book.first_collision:
                log.info("First collision: '%s'", tree_book.first_collision)
    except OSError as exc:
        log.error("Cannot read name file %s: %s", path, exc)
        return EXIT_BAD_INPUT
    except InvalidNameError as exc:
        log.error("%s", exc)
        return EXIT_BAD_INPUT
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codekata",
        description="Factorial hash and name book challenges",
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    sub = parser.add_subparsers(dest="command", required=True)

    fact = sub.add_parser("factorial", help="Sum of the digits of n!")
    fact.add_argument("number", nargs="?", default=None,
                      help="n; prompted for when omitted")
    fact.add_argument("--backend", choices=BACKENDS, default=DEFAULT_BACKEND,
                      help="Integer type used to compute n!")
    fact.add_argument("--upper-bound", type=int, default=UPPER_BOUND,
                      help="Largest accepted n")

    names = sub.add_parser("namebook", help="Check that no name prefixes another")
    names.add_argument("file", nargs="?", default=None,
                       help="Name list file; prompted for when omitted")
    names.add_argument("--method", choices=METHODS + ("both",), default=DEFAULT_METHOD,
                       help="Pairwise comparison, prefix trie, or both")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "factorial":
        return run_factorial(args.number, backend=args.backend, upper_bound=args.upper_bound)
    return run_namebook(args.file, method=args.method)
