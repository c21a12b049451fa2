"""Recursive-descent derivation for a non-left-recursive expression grammar.

E -> TE'   E' -> +TE' | e   T -> FT'   T' -> *FT' | e   F -> (E) | i
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence

VALID_SYMBOLS = frozenset("+*()iI")
GRAMMAR = "E->TE'\nE'->+TE'|e\nT->FT'\nT'->*FT'|e\nF->(E)|i"


class ParseError(ValueError):
    """The input does not fit the grammar."""


@dataclass(frozen=True)
class DerivationStep:
    """The sentential form after applying ``rule``."""

    form: str
    rule: str

    def __str__(self) -> str:
        return f"E={self.form:<25}{self.rule}"


class _Deriver:
    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0
        self.form = ""
        self.steps: list[DerivationStep] = []

    def _peek(self) -> str:
        return self.text[self.position] if self.position < len(self.text) else ""

    def _record(self, rule: str) -> None:
        self.steps.append(DerivationStep(self.form, rule))

    def _locate(self, symbol: str) -> int:
        self.form = self.form.replace("e", "")
        index = self.form.find(symbol)
        return len(self.form) if index < 0 else index

    def _rewrite(self, index: int, width: int, replacement: str) -> None:
        self.form = self.form[:index] + replacement + self.form[index + width :]

    def expression(self) -> None:
        self.form = "TE'"
        self._record("E->TE'")
        self.term()
        self.expression_rest()

    def expression_rest(self) -> None:
        index = self._locate("E")
        if self._peek() == "+":
            self._rewrite(index, 2, "+TE'")
            self._record("E'->+TE'")
            self.position += 1
            self.term()
            self.expression_rest()
        else:
            self._rewrite(index, 2, "e")
            self._record("E'->e")

    def term(self) -> None:
        index = self._locate("T")
        self._rewrite(index, 1, "FT'")
        self._record("T->FT'")
        self.factor()
        self.term_rest()

    def term_rest(self) -> None:
        index = self._locate("T")
        if self._peek() == "*":
            self._rewrite(index, 2, "*FT'")
            self._record("T'->*FT'")
            self.position += 1
            self.factor()
            self.term_rest()
        else:
            self._rewrite(index, 2, "e")
            self._record("T'->e")

    def factor(self) -> None:
        index = self._locate("F")
        symbol = self._peek()
        if symbol in ("i", "I"):
            self._rewrite(index, 1, "i")
            self._record("F->i")
            self.position += 1
        elif symbol == "(":
            self.position += 1
            self.expression()
            if self._peek() == ")":
                self.position += 1
                self._rewrite(index, 1, "(E)")
                self._record("F->(E)")
        else:
            raise ParseError(f"syntax error at position {self.position}")


def derive(expression: str) -> list[DerivationStep]:
    """Return the leftmost derivation of ``expression``.

    Raises ParseError where a factor is expected but not found.
    """
    deriver = _Deriver(expression)
    deriver.expression()
    return deriver.steps


def main(argv: Sequence[str] | None = None) -> int:
    """Read an expression from standard input and print its derivation."""
    parser = argparse.ArgumentParser(prog="recursive-descent", description="Derive an expression.")
    parser.parse_args(argv)

    print("Grammar without left recursion")
    print(GRAMMAR)
    words = sys.stdin.read().split()
    expression = words[0] if words else ""
    print("Expressions\t Sequence of production rules")
    try:
        steps = derive(expression)
    except ParseError:
        print("\n\t syntax error")
        return 1
    for step in steps:
        print(step, end="" if step.rule == "E'->e" else "\n")
    if any(ch not in VALID_SYMBOLS for ch in expression):
        print("\nSyntax error")
        return 1
    final = steps[-1].form.replace("e", "")
    print(f"\nE={final:<25}")
    return 0


if __name__ == "__main__":
    sys.exit(main())