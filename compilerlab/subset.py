"""Subset construction from a nondeterministic to a deterministic automaton."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from compilerlab.enfa import UnknownSymbolError


def _label(state: frozenset[int]) -> str:
    return "{" + "".join(f"q{member} " for member in sorted(state)) + "}\t"


@dataclass
class DFA:
    """A deterministic automaton whose states are sets of NFA states."""

    alphabet: tuple[str, ...]
    start: int
    states: list[frozenset[int]]
    transitions: dict[tuple[frozenset[int], str], frozenset[int] | None]
    finals: list[frozenset[int]]

    def render(self) -> str:
        """Describe the automaton as a transition table and state lists."""
        parts = [
            "Equivalent DFA.....\n",
            ".......................\n",
            "Transitions of DFA\n",
            "".join(f"\t\t{symbol}" for symbol in self.alphabet) + "\n",
        ]
        for state in self.states:
            parts.append(_label(state))
            for symbol in self.alphabet:
                target = self.transitions[(state, symbol)]
                parts.append("NULL" if target is None else _label(target))
            parts.append("\n")
        parts.append("\n\nStates of DFA:\n")
        parts.extend(_label(state) for state in self.states)
        parts.append("\n Alphabets: ")
        parts.extend(f"{symbol}\t" for symbol in self.alphabet)
        parts.append(f"\n Start State:q{self.start}\n")
        parts.append("Final states: ")
        parts.extend(_label(state) + " " for state in self.finals)
        return "".join(parts)


@dataclass
class NFA:
    """A nondeterministic automaton over numbered states ``1..state_count``.

    Every alphabet symbol, ``e`` included, is treated as an ordinary input.
    """

    alphabet: tuple[str, ...]
    state_count: int
    start: int
    finals: tuple[int, ...] = ()
    _moves: dict[tuple[int, str], list[int]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.alphabet = tuple(self.alphabet)
        self.finals = tuple(self.finals)

    def add_transition(self, source: int, symbol: str, target: int) -> None:
        """Record a move; raise UnknownSymbolError for a foreign symbol."""
        if symbol not in self.alphabet:
            raise UnknownSymbolError(symbol)
        self._moves.setdefault((source, symbol), []).append(target)

    def to_dfa(self) -> DFA:
        """Build the reachable subsets breadth first, starting from ``{start}``."""
        valid = range(1, self.state_count + 1)
        initial = frozenset(s for s in (self.start,) if s in valid)
        states = [initial]
        known = {initial}
        table: dict[tuple[frozenset[int], str], frozenset[int] | None] = {}
        pending = deque([initial])
        while pending:
            current = pending.popleft()
            for symbol in self.alphabet:
                targets = {t for member in current for t in self._moves.get((member, symbol), ())}
                if not targets:
                    table[(current, symbol)] = None
                    continue
                successor = frozenset(t for t in targets if t in valid)
                table[(current, symbol)] = successor
                if successor not in known:
                    known.add(successor)
                    states.append(successor)
                    pending.append(successor)
        finals = [state for state in states if any(final in state for final in self.finals)]
        return DFA(self.alphabet, self.start, states, table, finals)


class _Words:
    def __init__(self, words: Iterable[str]) -> None:
        self._words = iter(words)

    def word(self, what: str) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError(f"missing {what}") from None

    def number(self, what: str) -> int:
        word = self.word(what)
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"invalid {what}: {word!r}") from None

    def symbol(self, what: str) -> str:
        word = self.word(what)
        if len(word) != 1:
            raise ValueError(f"invalid {what}: {word!r}")
        return word


def parse_nfa(text: str) -> NFA:
    """Build an automaton from its whitespace-separated description.

    The layout is: symbol count, symbols, state count, start state, final
    count, final states, transition count, then ``source symbol target``.
    """
    words = _Words(text.split())
    alphabet = [words.symbol("alphabet symbol") for _ in range(words.number("number of symbols"))]
    state_count = words.number("number of states")
    start = words.number("start state")
    finals = [words.number("final state") for _ in range(words.number("number of final states"))]
    nfa = NFA(alphabet, state_count, start, finals)
    for _ in range(words.number("number of transitions")):
        source = words.number("transition source")
        symbol = words.symbol("transition symbol")
        target = words.number("transition target")
        nfa.add_transition(source, symbol, target)
    return nfa


def main(argv: Sequence[str] | None = None) -> int:
    """Read an automaton description and print the equivalent DFA."""
    parser = argparse.ArgumentParser(
        prog="subset",
        description="Convert an NFA to a DFA by subset construction.",
    )
    parser.add_argument("file", nargs="?", help="description file (default: standard input)")
    args = parser.parse_args(argv)

    try:
        if args.file:
            with open(args.file, encoding="utf-8") as handle:
                text = handle.read()
        else:
            text = sys.stdin.read()
        nfa = parse_nfa(text)
    except UnknownSymbolError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    print()
    print(nfa.to_dfa().render())
    return 0


if __name__ == "__main__":
    sys.exit(main())