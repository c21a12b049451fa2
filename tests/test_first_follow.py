import io

import pytest

from compilerlab.first_follow import Grammar, is_terminal, main

EXPRESSION = ["E=TR", "R=+TR", "R=e", "T=FY", "Y=*FY", "Y=e", "F=(E)", "F=i"]


def test_is_terminal():
    assert is_terminal("a")
    assert is_terminal("+")
    assert is_terminal("e")
    assert not is_terminal("A")
    assert not is_terminal("Z")


def test_first_sets_of_expression_grammar():
    grammar = Grammar(EXPRESSION)
    assert grammar.first_sets() == {"E": "(i", "F": "(i", "R": "+e", "T": "(i", "Y": "*e"}


def test_follow_sets_of_expression_grammar():
    grammar = Grammar(EXPRESSION)
    assert grammar.follow("E") == "$)"
    assert grammar.follow("R") == grammar.follow("E")
    assert grammar.follow("T") == "+$)"


def test_start_symbol_follow_begins_with_end_marker():
    grammar = Grammar(EXPRESSION)
    assert grammar.follow(grammar.start).startswith("$")


def test_follow_has_no_epsilon_and_no_duplicates():
    grammar = Grammar(EXPRESSION)
    for members in grammar.follow_sets().values():
        assert "e" not in members
        assert len(set(members)) == len(members)


def test_first_of_terminal_production():
    grammar = Grammar(["S=a"])
    assert grammar.first("S") == "a"


def test_unknown_nonterminal_raises_key_error():
    with pytest.raises(KeyError):
        Grammar(["S=a"]).first("Q")


def test_invalid_production_rejected():
    with pytest.raises(ValueError):
        Grammar(["s=a"])


def test_left_recursion_rejected():
    with pytest.raises(ValueError):
        Grammar(["S=Sa"])


def test_main_prints_sets(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nS=a\nS=b\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "S : ab" in out
    assert "S : $" in out