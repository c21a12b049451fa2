"""Follow chains of epsilon moves through a list of transitions."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

EPSILON = "e"


@dataclass(frozen=True)
class Transition:
    """One move ``source --symbol--> target`` of an automaton."""

    source: str
    symbol: str
    target: str


def parse_transitions(text: str) -> list[Transition]:
    """Read whitespace-separated ``source symbol target`` triples.

    A trailing group of fewer than three words is ignored.
    """
    words = iter(text.split())
    return [Transition(source, symbol, target) for source, symbol, target in zip(words, words, words)]


def epsilon_chain(state: str, transitions: Iterable[Transition]) -> list[str]:
    """Collect the states reached from ``state`` by epsilon moves.

    The transitions are scanned once, in order; each epsilon move out of the
    current state is taken and its target becomes the new current state.
    """
    chain = [state]
    current = state
    for transition in transitions:
        if transition.source == current and transition.symbol == EPSILON:
            chain.append(transition.target)
            current = transition.target
    return chain


def format_closure(state: str, closure: Sequence[str]) -> str:
    """Render one closure line."""
    members = ",".join(f" {member}" for member in closure)
    return f"Epsilon closure of {state} = {{ {members} }} "


def main(argv: Sequence[str] | None = None) -> int:
    """Print the epsilon closure of each state named on standard input.

    Standard input holds the number of states followed by the state names.
    """
    parser = argparse.ArgumentParser(
        prog="eclosure",
        description="Print epsilon closures of states read from standard input.",
    )
    parser.add_argument(
        "transitions",
        nargs="?",
        default="input.txt",
        help="file of 'state symbol state' lines (default: input.txt)",
    )
    args = parser.parse_args(argv)

    try:
        with open(args.transitions, encoding="utf-8") as handle:
            transitions = parse_transitions(handle.read())
    except OSError as exc:
        parser.error(str(exc))

    words = sys.stdin.read().split()
    if not words:
        parser.error("expected the number of states on standard input")
    try:
        count = int(words[0])
    except ValueError:
        parser.error(f"invalid number of states: {words[0]!r}")
    states = words[1 : 1 + count]
    if len(states) < count:
        parser.error(f"expected {count} states, got {len(states)}")

    for state in states:
        print(format_closure(state, epsilon_chain(state, transitions)))
    return 0


if __name__ == "__main__":
    sys.exit(main())