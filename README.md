# compilerlab

Small compiler-construction tools. Each can be used as a library module
or from the command line.

| Command | Module | What it does |
| --- | --- | --- |
| `compilerlab-eclosure` | `compilerlab.eclosure` | Follows a chain of epsilon moves from each named state |
| `compilerlab-enfa` | `compilerlab.enfa` | Describes the automaton left after removing epsilon moves from an epsilon-NFA |
| `compilerlab-nfa-to-dfa` | `compilerlab.subset` | Subset construction from an NFA to a DFA |
| `compilerlab-shift-reduce` | `compilerlab.shift_reduce` | Shift-reduce parse for `E -> E+E \| E*E \| (E) \| id` |
| `compilerlab-first-follow` | `compilerlab.first_follow` | FIRST and FOLLOW sets of a grammar |
| `compilerlab-lex` | `compilerlab.lexer` | Splits C-like source lines into keywords, numbers, identifiers, operators and delimiters |
| `compilerlab-rd` | `compilerlab.recursive_descent` | Leftmost derivation with the grammar `E->TE'`, `E'->+TE'\|e`, `T->FT'`, `T'->*FT'\|e`, `F->(E)\|i` |

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Conventions

- The letter `e` stands for epsilon in automata and grammars.
- States are positive integers numbered from 1.
- Nonterminals are upper-case letters; every other character is a
  terminal. Productions are written `A=BC`: the right-hand side starts at
  the third character.

## Commands and their input

All input is whitespace separated.

- `compilerlab-eclosure [TRANSITIONS]` reads `state symbol state` triples
  from `TRANSITIONS` (default `input.txt`), and from standard input a
  count followed by that many state names. For each state it scans the
  transitions once, in order, following each `e` move out of the current
  state.
- `compilerlab-enfa [FILE]` and `compilerlab-nfa-to-dfa [FILE]` read, from
  `FILE` or standard input: the number of symbols, the symbols, the number
  of states, the start state, the number of final states, the final
  states, the number of transitions, then `source symbol target` triples.
  For `compilerlab-enfa`, `e` is the empty move only when it is the last
  symbol; `compilerlab-nfa-to-dfa` treats every symbol as an ordinary
  input. A transition on a symbol outside the alphabet is reported on
  standard error and the command exits with status 1.
- `compilerlab-shift-reduce` reads one expression from standard input and
  prints the Stack / Input / Action table and whether it is valid.
- `compilerlab-first-follow` reads a production count and the productions
  from standard input.
- `compilerlab-lex [FILE]` reads `FILE` (default `input.txt`). Lines
  containing `//` are skipped, as is a line containing `/*` together with
  the following lines up to one containing `*/`.
- `compilerlab-rd` reads one expression from standard input and prints its
  derivation; it exits with status 1 on a syntax error.

Every `main` function can also be called from Python with a list of
arguments, or with none.

## Library use

```python
from compilerlab.eclosure import parse_transitions, epsilon_chain

transitions = parse_transitions("q0 e q1\nq1 e q2\nq1 a q3")
print(epsilon_chain("q0", transitions))  # ['q0', 'q1', 'q2']
```

```python
from compilerlab.enfa import EpsilonNFA

nfa = EpsilonNFA(alphabet=("a", "e"), state_count=2, start=1, finals=(2,))
nfa.add_transition(1, "e", 2)
nfa.add_transition(2, "a", 2)
print(nfa.closure(1))               # (1, 2)
print(nfa.transitions_on(1, "a"))   # frozenset({2})
print(nfa.render())
```

```python
from compilerlab.subset import parse_nfa

nfa = parse_nfa("2 a b  2 1  1 2  3  1 a 1  1 a 2  2 b 2")
dfa = nfa.to_dfa()
print(dfa.states)
print(dfa.render())
```

```python
from compilerlab.shift_reduce import parse

result = parse("id+id*id")
print(result.valid)
print(result.render())
```

```python
from compilerlab.first_follow import Grammar

grammar = Grammar(["E=TR", "R=+TR", "R=e", "T=i"])
print(grammar.first_sets())   # {'E': 'i', 'R': '+e', 'T': 'i'}
print(grammar.follow_sets())
```

`Grammar` raises `ValueError` for a malformed production, an empty
grammar, or a left-recursive one.

```python
from compilerlab.lexer import tokenize_line

for token in tokenize_line("int x = 42;\n"):
    print(token)   # e.g. "int - Keyword"
```

```python
from compilerlab.recursive_descent import derive, ParseError

for step in derive("i+i*i"):
    print(step)
```

`derive` raises `ParseError` where a factor is expected but not found.

## Limits

- The two parsers work with their fixed expression grammars only; they do
  not accept a user-supplied grammar.
- `epsilon_chain` follows a single chain in one pass over the transitions;
  it is not a full epsilon closure. `EpsilonNFA.closure` computes the full
  closure.
- The lexer has no notion of string or character literals, and an operator
  or delimiter is reported before the word it ends.