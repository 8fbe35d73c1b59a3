"""Interactive prompts on the terminal."""

from __future__ import annotations

import getpass
import sys


def prompt_password(prompt: str, allow_empty: bool) -> str:
    """Read a hidden, trimmed value, asking again while it is empty unless allowed.

    Raises EOFError if input ends.
    """
    while True:
        print(prompt, end="", flush=True)
        entered = getpass.getpass("")
        print(file=sys.stderr)
        entered = entered.strip()
        if allow_empty or entered:
            return entered
        print("\nError: a value must be set")


def prompt(prompt: str) -> str:
    """Print prompt and return the next input line with whitespace trimmed.

    Raises EOFError if input ends before a full line is read.
    """
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if not line.endswith("\n"):
        raise EOFError("input ended before a line was read")
    return line.strip()