"""Shift-reduce parsing for E -> E+E | E*E | (E) | id."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence

HANDLES = ("id", "E+E", "E*E", "(E)")
GRAMMAR = "E -> E+E | E*E | (E) | id"


@dataclass(frozen=True)
class Step:
    """The stack and unread input after one parser action."""

    stack: str
    remaining: str
    action: str


@dataclass(frozen=True)
class ParseResult:
    """All actions taken and whether the input reduced to a single E."""

    steps: tuple[Step, ...]
    valid: bool

    def render(self) -> str:
        """Lay the steps out as a Stack / Input / Action table with a verdict."""
        lines = ["Stack\t\tInput\t\tAction"]
        lines.extend(f"${step.stack}\t\t{step.remaining}$\t\t{step.action}" for step in self.steps)
        lines.append("")
        lines.append("Input string is VALID." if self.valid else "Input string is INVALID.")
        return "\n".join(lines)


def _reduce(stack: str, steps: list[Step]) -> str:
    while True:
        handle = next((h for h in HANDLES if stack.endswith(h)), None)
        if handle is None:
            return stack
        stack = stack[: -len(handle)] + "E"
        steps.append(Step(stack, "", f"REDUCE->{handle}"))


def parse(text: str) -> ParseResult:
    """Shift each token of ``text`` and reduce greedily after every shift."""
    steps: list[Step] = []
    stack = ""
    position = 0
    while position < len(text):
        if text.startswith("id", position):
            token = "id"
        else:
            token = text[position]
        position += len(token)
        stack += token
        steps.append(Step(stack, text[position:], f"SHIFT->{token}"))
        stack = _reduce(stack, steps)
    return ParseResult(tuple(steps), stack == "E")


def main(argv: Sequence[str] | None = None) -> int:
    """Read one expression from standard input and print the parse."""
    parser = argparse.ArgumentParser(
        prog="shift-reduce",
        description=f"Shift-reduce parse of an expression in the grammar {GRAMMAR}.",
    )
    parser.parse_args(argv)

    print(f"GRAMMAR is:\n{GRAMMAR}")
    print("Enter input string: ", end="")
    words = sys.stdin.read().split()
    expression = words[0] if words else ""
    print()
    print()
    print(parse(expression).render())
    return 0


if __name__ == "__main__":
    sys.exit(main())