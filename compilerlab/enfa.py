"""Remove epsilon moves from a nondeterministic automaton."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

EPSILON = "e"


class UnknownSymbolError(ValueError):
    """A transition names a symbol that is not in the alphabet."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"symbol {symbol!r} is not in the alphabet")
        self.symbol = symbol


@dataclass
class EpsilonNFA:
    """An automaton over numbered states ``1..state_count``.

    When the last alphabet symbol is ``e`` it stands for the empty move.
    """

    alphabet: tuple[str, ...]
    state_count: int
    start: int
    finals: tuple[int, ...] = ()
    _moves: dict[tuple[int, str], list[int]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.alphabet = tuple(self.alphabet)
        self.finals = tuple(self.finals)

    @property
    def states(self) -> range:
        return range(1, self.state_count + 1)

    @property
    def has_epsilon(self) -> bool:
        return bool(self.alphabet) and self.alphabet[-1] == EPSILON

    def add_transition(self, source: int, symbol: str, target: int) -> None:
        """Record a move; raise UnknownSymbolError for a foreign symbol."""
        if symbol not in self.alphabet:
            raise UnknownSymbolError(symbol)
        self._moves.setdefault((source, symbol), []).append(target)

    def closure(self, state: int) -> tuple[int, ...]:
        """States reachable by epsilon moves, in depth-first visiting order.

        The most recently added move out of a state is followed first.
        States outside ``1..state_count`` have an empty closure.
        """
        if state not in self.states:
            return ()
        if not self.has_epsilon:
            return (state,)
        order: list[int] = []
        seen: set[int] = set()
        pending = [state]
        while pending:
            current = pending.pop()
            if current in seen:
                continue
            seen.add(current)
            order.append(current)
            pending.extend(self._moves.get((current, EPSILON), ()))
        return tuple(order)

    def transitions_on(self, state: int, symbol: str) -> frozenset[int]:
        """States reached from the closure of ``state`` on ``symbol``, closed again."""
        if symbol not in self.alphabet:
            raise UnknownSymbolError(symbol)
        reached: set[int] = set()
        for member in self.closure(state):
            for target in self._moves.get((member, symbol), ()):
                reached.update(self.closure(target))
        return frozenset(reached)

    def final_closures(self) -> list[int]:
        """States whose closure holds a final state, listed once per final state."""
        return [
            state
            for final in self.finals
            for state in self.states
            if final in self.closure(state)
        ]

    def _label(self, state: int) -> str:
        closure = self.closure(state)
        return f"{{q{closure[0]},}}\t" if closure else "{}\t"

    def _transition_rows(self) -> Iterator[str]:
        for state in self.states:
            for symbol in self.alphabet[:-1]:
                reached = sorted(s for s in self.transitions_on(state, symbol) if s in self.states)
                members = "".join(f"q{s}," for s in reached)
                yield f"\n{self._label(state)}{symbol}\t{{{members}}}"

    def render(self) -> str:
        """Describe the equivalent automaton without epsilon moves."""
        parts = [
            "Equivalent NFA without epsilon\n",
            "-" * 35 + "\n",
            "start state:",
            self._label(self.start),
            "\nAlphabets:",
            "".join(f"{symbol} " for symbol in self.alphabet),
            "\nStates :",
            "".join(self._label(state) for state in self.states),
            "\nTransitions are...:\n",
            *self._transition_rows(),
            "\nFinal states:",
            *(self._label(state) for state in self.final_closures()),
        ]
        return "".join(parts)


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


def parse_enfa(text: str) -> EpsilonNFA:
    """Build an automaton from its whitespace-separated description.

    The layout is: symbol count, symbols, state count, start state, final
    count, final states, transition count, then ``source symbol target``.
    """
    words = _Words(text.split())
    alphabet = [words.symbol("alphabet symbol") for _ in range(words.number("number of symbols"))]
    state_count = words.number("number of states")
    start = words.number("start state")
    finals = [words.number("final state") for _ in range(words.number("number of final states"))]
    nfa = EpsilonNFA(alphabet, state_count, start, finals)
    for _ in range(words.number("number of transitions")):
        source = words.number("transition source")
        symbol = words.symbol("transition symbol")
        target = words.number("transition target")
        nfa.add_transition(source, symbol, target)
    return nfa


def main(argv: Sequence[str] | None = None) -> int:
    """Read an automaton description and print its epsilon-free form."""
    parser = argparse.ArgumentParser(
        prog="enfa",
        description="Convert an epsilon-NFA ('e' is the empty move, listed last) to an NFA.",
    )
    parser.add_argument("file", nargs="?", help="description file (default: standard input)")
    args = parser.parse_args(argv)

    try:
        if args.file:
            with open(args.file, encoding="utf-8") as handle:
                text = handle.read()
        else:
            text = sys.stdin.read()
        nfa = parse_enfa(text)
    except UnknownSymbolError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    print()
    print(nfa.render())
    return 0


if __name__ == "__main__":
    sys.exit(main())