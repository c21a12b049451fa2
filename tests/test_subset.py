import pytest

from compilerlab.enfa import UnknownSymbolError
from compilerlab.subset import NFA, main, parse_nfa

DESCRIPTION = "2\na\nb\n2\n1\n1\n2\n3\n1 a 1\n1 a 2\n2 b 2\n"


def build():
    nfa = NFA("ab", 2, 1, [2])
    nfa.add_transition(1, "a", 1)
    nfa.add_transition(1, "a", 2)
    nfa.add_transition(2, "b", 2)
    return nfa


def test_subset_states_in_discovery_order():
    dfa = build().to_dfa()
    assert dfa.states == [frozenset({1}), frozenset({1, 2}), frozenset({2})]


def test_missing_move_is_none():
    dfa = build().to_dfa()
    assert dfa.transitions[(frozenset({1}), "b")] is None


def test_transition_table_is_complete_and_closed():
    dfa = build().to_dfa()
    for state in dfa.states:
        for symbol in dfa.alphabet:
            target = dfa.transitions[(state, symbol)]
            assert target is None or target in dfa.states
    assert len(dfa.transitions) == len(dfa.states) * len(dfa.alphabet)


def test_states_are_unique():
    dfa = build().to_dfa()
    assert len(set(dfa.states)) == len(dfa.states)


def test_finals_are_states_holding_a_final():
    dfa = build().to_dfa()
    assert dfa.finals == [state for state in dfa.states if 2 in state]
    assert dfa.finals


def test_epsilon_is_an_ordinary_symbol():
    nfa = NFA("ae", 2, 1, [2])
    nfa.add_transition(1, "e", 2)
    dfa = nfa.to_dfa()
    assert dfa.transitions[(frozenset({1}), "e")] == frozenset({2})
    assert dfa.transitions[(frozenset({1}), "a")] is None


def test_targets_outside_state_range_are_dropped():
    nfa = NFA("a", 1, 1, [1])
    nfa.add_transition(1, "a", 5)
    dfa = nfa.to_dfa()
    assert dfa.transitions[(frozenset({1}), "a")] == frozenset()


def test_unknown_symbol_is_rejected():
    with pytest.raises(UnknownSymbolError):
        build().add_transition(1, "z", 2)


def test_render_layout():
    text = build().to_dfa().render()
    assert text.startswith("Equivalent DFA.....\n")
    assert "Transitions of DFA\n" in text
    assert "NULL" in text
    assert "\n Start State:q1\n" in text
    assert "{q1 }\t" in text


def test_parse_nfa_matches_built_automaton():
    assert parse_nfa(DESCRIPTION).to_dfa() == build().to_dfa()


def test_parse_nfa_truncated():
    with pytest.raises(ValueError):
        parse_nfa("2\na\nb\n2\n")


def test_main_prints_render(tmp_path, capsys):
    path = tmp_path / "nfa.txt"
    path.write_text(DESCRIPTION, encoding="utf-8")
    assert main([str(path)]) == 0
    assert build().to_dfa().render() in capsys.readouterr().out