import pytest

from compilerlab.enfa import EpsilonNFA, UnknownSymbolError, main, parse_enfa

DESCRIPTION = "3\na\nb\ne\n3\n1\n1\n3\n4\n1 e 2\n2 e 3\n1 a 2\n2 b 3\n"


def build():
    nfa = EpsilonNFA("abe", 3, 1, [3])
    nfa.add_transition(1, "e", 2)
    nfa.add_transition(2, "e", 3)
    nfa.add_transition(1, "a", 2)
    nfa.add_transition(2, "b", 3)
    return nfa


def test_closure_holds_reachable_states_starting_with_itself():
    closure = build().closure(1)
    assert closure[0] == 1
    assert set(closure) == {1, 2, 3}


def test_closure_follows_latest_move_first():
    nfa = EpsilonNFA("ae", 3, 1, [3])
    nfa.add_transition(1, "e", 2)
    nfa.add_transition(1, "e", 3)
    assert nfa.closure(1) == (1, 3, 2)


def test_closure_outside_state_range_is_empty():
    nfa = build()
    assert nfa.closure(0) == ()
    assert nfa.closure(4) == ()


def test_without_epsilon_closure_is_the_state_alone():
    nfa = EpsilonNFA("ab", 2, 1, [2])
    nfa.add_transition(1, "b", 2)
    assert nfa.closure(1) == (1,)


def test_unknown_symbol_is_rejected():
    nfa = build()
    with pytest.raises(UnknownSymbolError):
        nfa.add_transition(1, "z", 2)


def test_transitions_on_unions_target_closures():
    nfa = build()
    assert nfa.transitions_on(1, "a") == frozenset(nfa.closure(2))
    assert nfa.transitions_on(1, "b") == frozenset(nfa.closure(3))


def test_transitions_on_rejects_unknown_symbol():
    with pytest.raises(UnknownSymbolError):
        build().transitions_on(1, "z")


def test_final_closures_all_reach_a_final_state():
    nfa = build()
    finals = nfa.final_closures()
    assert all(3 in nfa.closure(state) for state in finals)
    assert sorted(finals) == [1, 2, 3]


def test_render_layout():
    text = build().render()
    assert text.startswith("Equivalent NFA without epsilon\n")
    assert "start state:{q1,}\t" in text
    assert "\nTransitions are...:\n" in text
    assert "\nFinal states:" in text


def test_render_has_no_row_for_epsilon():
    text = build().render()
    assert "\ta\t{" in text
    assert "\te\t{" not in text


def test_parse_enfa_matches_built_automaton():
    nfa = parse_enfa(DESCRIPTION)
    assert nfa.alphabet == ("a", "b", "e")
    assert nfa.render() == build().render()


def test_parse_enfa_unknown_symbol():
    with pytest.raises(UnknownSymbolError):
        parse_enfa("2\na\ne\n2\n1\n1\n2\n1\n1 x 2\n")


def test_parse_enfa_truncated():
    with pytest.raises(ValueError):
        parse_enfa("2\na\ne\n2\n1\n")


def test_main_prints_render(tmp_path, capsys):
    path = tmp_path / "enfa.txt"
    path.write_text(DESCRIPTION, encoding="utf-8")
    assert main([str(path)]) == 0
    assert build().render() in capsys.readouterr().out