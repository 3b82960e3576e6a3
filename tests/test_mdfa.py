import pytest

from xlex.dfa import Dfa
from xlex.mdfa import MDfa, MDfaNode
from xlex.nfa import Nfa


def build(pattern):
    dfa = Dfa(Nfa(pattern))
    return dfa, MDfa(dfa)


@pytest.mark.parametrize(
    "pattern, accepted, rejected",
    [
        ("a", ["a"], ["", "aa", "b"]),
        ("ab*", ["a", "ab", "abbb"], ["", "b", "ba"]),
        ("a|b", ["a", "b"], ["", "ab"]),
        ("abc", ["abc"], ["", "ab", "abcc"]),
        ("a*", ["", "a", "aaaa"], ["b"]),
    ],
)
def test_accepts(pattern, accepted, rejected):
    _, mdfa = build(pattern)
    for text in accepted:
        assert mdfa.accepts(text)
    for text in rejected:
        assert not mdfa.accepts(text)


@pytest.mark.parametrize("pattern", ["a", "ab*", "a|b", "abc", "a*"])
def test_same_language_as_dfa(pattern):
    dfa, mdfa = build(pattern)
    for text in ["", "a", "b", "ab", "abb", "abc", "aa", "ba"]:
        assert mdfa.accepts(text) == dfa.accepts(text)


@pytest.mark.parametrize("pattern", ["a", "ab*", "a|b", "abc", "a*"])
def test_never_more_states_than_dfa(pattern):
    dfa, mdfa = build(pattern)
    assert 1 <= len(mdfa.nodes) <= len(dfa.nodes)
    assert [node.state for node in mdfa.nodes] == list(range(len(mdfa.nodes)))


def test_star_collapses_to_one_state():
    _, mdfa = build("a*")
    assert len(mdfa.nodes) == 1
    assert mdfa.nodes[0].is_end
    assert mdfa.nodes[0].transfers == {"a": 0}


def test_union_merges_accepting_states():
    _, mdfa = build("a|b")
    assert len(mdfa.nodes) == 2
    assert mdfa.nodes[0].transfers["a"] == mdfa.nodes[0].transfers["b"]


def test_bind_dfa_nodes_marks_end():
    dfa, _ = build("a")
    node = MDfaNode(0)
    node.bind_dfa_nodes(dfa.nodes)
    assert node.is_end
    assert node.dfa_nodes == frozenset(dfa.nodes)
    plain = MDfaNode(1)
    plain.bind_dfa_nodes([n for n in dfa.nodes if not n.is_end])
    assert not plain.is_end


def test_lex_program_shape():
    _, mdfa = build("a")
    program = mdfa.lex()
    assert program.startswith("#include <iostream>\n")
    assert program.endswith("     return 0;\n}\n")
    assert "     case 1:\n         cout << \"Accepted.\" << '\\n';" in program
    assert "Not Accepted." in program
    assert program.count("Error: Invalid input character.") == len(mdfa.nodes)


def test_lex_lists_every_transition():
    _, mdfa = build("ab*")
    program = mdfa.lex()
    for node in mdfa.nodes:
        for symbol, target in node.transfers.items():
            assert f"             case '{symbol}':\n                 currentState = {target};" in program