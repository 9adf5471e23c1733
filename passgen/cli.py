"""
Command line entry point. Run: python -m passgen.cli [options]  (or the `passgen` script)
With no arguments (or -i) the options are asked for interactively.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from dotenv import load_dotenv

from .corpus import DATA_DIR
from .generator import MIN_LENGTH, generate_passphrase_with_max_length, random_number_to_join
from .strength import format_password_stats
from .words import migrate_word_list, read_word_index

DEFAULT_LENGTH = 20
DEFAULT_SEPARATOR = "-"

TRUE_VALUES = {"true", "t", "yes", "y", "1"}
FALSE_VALUES = {"false", "f", "no", "n", "0"}


def _parse_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in TRUE_VALUES:
        return True
    if v in FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def _parse_length(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid length: {value!r}")
    if n < MIN_LENGTH:
        raise argparse.ArgumentTypeError(f"length must be at least {MIN_LENGTH}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="passgen", description="Generate a passphrase of random words up to a given length.")
    p.add_argument("-l", "--length", type=_parse_length, default=DEFAULT_LENGTH, help="length of passphrase (default: 20)")
    p.add_argument("-s", "--separator", default=DEFAULT_SEPARATOR, help="separator between words (default: -)")
    p.add_argument("-c", "--capitalise", type=_parse_bool, default=True, metavar="BOOL", help="capitalise each word (default: true)")
    p.add_argument("-n", "--add-number", type=_parse_bool, default=True, metavar="BOOL", help="add random number (default: true)")
    p.add_argument("-i", "--interactive", action="store_true", help="use interactive prompt mode")
    p.add_argument("--stats", action="store_true", help="show password stats")
    p.add_argument("--migrate", action="store_true", help="migrate the raw word list to the JSON index first")
    return p


def options_from_args(args: argparse.Namespace) -> dict:
    return {
        "length": args.length,
        "separator": args.separator,
        "capitalise": args.capitalise,
        "add_number": args.add_number,
        "show_stats": args.stats,
    }


def _prompt_length(input_fn: Callable[[str], str]) -> int | None:
    """None means the user cancelled (empty, zero or non-numeric input)."""
    while True:
        value = input_fn("What is the length restriction on your password? ").strip()
        try:
            n = int(value) if value else 0
        except ValueError:
            return None
        if not n:
            return None
        if n < MIN_LENGTH:
            print(f"  Must be at least {MIN_LENGTH}")
            continue
        return n


def _prompt_yes_no(input_fn: Callable[[str], str], question: str, default: bool) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    while True:
        choice = input_fn(f"{question} {hint}: ").strip().lower()
        if choice == "":
            return default
        if choice in ("y", "yes"):
            return True
        if choice in ("n", "no"):
            return False
        print("  Please enter y or n")


def prompt_options(input_fn: Callable[[str], str] = input) -> dict | None:
    """Ask for each option in turn. Returns None if the length prompt is cancelled."""
    try:
        length = _prompt_length(input_fn)
        if length is None:
            return None
        separator = input_fn(f"What separator would you like to use? ({DEFAULT_SEPARATOR}) ")
        return {
            "length": length,
            "separator": separator or DEFAULT_SEPARATOR,
            "capitalise": _prompt_yes_no(input_fn, "Would you like to capitalise each word?", True),
            "add_number": _prompt_yes_no(input_fn, "Would you like to add a random number in the string?", True),
            "show_stats": _prompt_yes_no(input_fn, "Would you like to show some password stats?", False),
        }
    except (EOFError, KeyboardInterrupt):
        return None


def main(argv: list[str] | None = None) -> int:
    load_dotenv(DATA_DIR.parent / ".env")
    logging.basicConfig(level=logging.INFO, format="[passgen] %(message)s")
    argv = sys.argv[1:] if argv is None else argv
    args = build_parser().parse_args(argv)

    try:
        if args.migrate:
            migrate_word_list()
        if args.interactive or not argv:
            options = prompt_options()
            if options is None:
                print("Operation cancelled")
                return 1
        else:
            options = options_from_args(args)

        index = read_word_index()
        number_to_join = random_number_to_join() if options["add_number"] else None
        passphrase = generate_passphrase_with_max_length(
            index,
            options["length"],
            options["separator"],
            options["capitalise"],
            number_to_join,
        )
    # CorpusUnavailable is a FileNotFoundError (an OSError), LengthTooShort a ValueError
    except (OSError, ValueError) as e:
        logging.error("Unable to generate password: %s", e)
        return 1

    print(passphrase)
    if options["show_stats"]:
        print(format_password_stats(passphrase))
    return 0


if __name__ == "__main__":
    sys.exit(main())
