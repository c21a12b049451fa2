"""FIRST and FOLLOW sets of a context-free grammar.

Productions are written ``A=rhs``: a single upper-case letter, one separator
character, then the right-hand side. Upper-case letters are nonterminals,
every other character is a terminal, and ``e`` stands for the empty string.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterable, Sequence

EPSILON = "e"
END_MARKER = "$"


def is_terminal(symbol: str) -> bool:
    """Anything that is not an upper-case ASCII letter is a terminal."""
    return not ("A" <= symbol <= "Z")


@dataclass
class Grammar:
    """A grammar whose FIRST and FOLLOW sets are computed on construction.

    The left-hand side of the first production is the start symbol.
    Sets are strings of symbols in the order they were found.
    """

    productions: tuple[str, ...]
    _rules: list[tuple[str, str]] = field(default_factory=list, init=False, repr=False)
    _firsts: dict[str, str] = field(default_factory=dict, init=False, repr=False)
    _follows: dict[str, str] = field(default_factory=dict, init=False, repr=False)
    _busy: set[str] = field(default_factory=set, init=False, repr=False)

    def __init__(self, productions: Iterable[str]) -> None:
        self.productions = tuple(productions)
        self._rules = []
        self._firsts = {}
        self._follows = {}
        self._busy = set()
        for production in self.productions:
            if len(production) < 2 or is_terminal(production[0]):
                raise ValueError(f"invalid production: {production!r}")
            self._rules.append((production[0], production[2:]))
        if not self._rules:
            raise ValueError("a grammar needs at least one production")
        for lhs, _ in self._rules:
            self._compute_first(lhs)
        self._busy.clear()
        for lhs, _ in self._rules:
            self._compute_follow(lhs)

    @property
    def start(self) -> str:
        return self._rules[0][0]

    def _compute_first(self, nonterminal: str) -> None:
        if nonterminal in self._firsts:
            return
        if nonterminal in self._busy:
            raise ValueError(f"left recursion through {nonterminal}")
        self._busy.add(nonterminal)
        found: list[str] = []
        for lhs, rhs in self._rules:
            if lhs != nonterminal:
                continue
            position = 0
            more = True
            while position < len(rhs) and more:
                more = False
                symbol = rhs[position]
                if is_terminal(symbol):
                    found.append(rhs[0])
                    break
                self._compute_first(symbol)
                for member in self._firsts[symbol]:
                    found.append(member)
                    if member == EPSILON:
                        position += 1
                        more = True
        self._busy.discard(nonterminal)
        self._firsts[nonterminal] = "".join(found)

    def _compute_follow(self, nonterminal: str) -> None:
        if nonterminal in self._follows:
            return
        if nonterminal in self._busy:
            raise ValueError(f"circular FOLLOW dependency through {nonterminal}")
        self._busy.add(nonterminal)
        found: list[str] = [END_MARKER] if nonterminal == self.start else []
        for lhs, rhs in self._rules:
            for position, symbol in enumerate(rhs):
                if symbol != nonterminal:
                    continue
                include_lhs = False
                following = rhs[position + 1] if position + 1 < len(rhs) else None
                if following is not None:
                    if is_terminal(following):
                        found.append(following)
                        break
                    for member in self._firsts.get(following, ""):
                        if member == EPSILON:
                            include_lhs = True
                        elif member not in found:
                            found.append(member)
                if (following is None or include_lhs) and lhs != nonterminal:
                    self._compute_follow(lhs)
                    found.extend(m for m in self._follows[lhs] if m not in found)
        self._busy.discard(nonterminal)
        self._follows[nonterminal] = "".join(found)

    def first(self, nonterminal: str) -> str:
        """FIRST set of ``nonterminal``; KeyError if it was never computed."""
        return self._firsts[nonterminal]

    def follow(self, nonterminal: str) -> str:
        """FOLLOW set of ``nonterminal``; KeyError if it was never computed."""
        return self._follows[nonterminal]

    def first_sets(self) -> dict[str, str]:
        """All FIRST sets, keyed by nonterminal in alphabetical order."""
        return dict(sorted(self._firsts.items()))

    def follow_sets(self) -> dict[str, str]:
        """All FOLLOW sets, keyed by nonterminal in alphabetical order."""
        return dict(sorted(self._follows.items()))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a production count and productions from standard input."""
    parser = argparse.ArgumentParser(
        prog="first-follow",
        description="Print FIRST and FOLLOW sets of a grammar read from standard input.",
    )
    parser.parse_args(argv)

    words = sys.stdin.read().split()
    if not words:
        parser.error("expected the number of productions")
    try:
        count = int(words[0])
    except ValueError:
        parser.error(f"invalid number of productions: {words[0]!r}")
    productions = words[1 : 1 + count]
    if len(productions) < count:
        parser.error(f"expected {count} productions, got {len(productions)}")
    try:
        grammar = Grammar(productions)
    except ValueError as exc:
        parser.error(str(exc))

    print("Firsts:")
    for symbol, members in grammar.first_sets().items():
        print(f"{symbol} : {members}")
    print("Follows:")
    for symbol, members in grammar.follow_sets().items():
        print(f"{symbol} : {members}")
    return 0


if __name__ == "__main__":
    sys.exit(main())