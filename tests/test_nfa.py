import pytest

from xlex.nfa import Nfa, NfaGraph, NfaNode, prepare
from xlex.syntax import EPSILON


def test_prepare_inserts_concat():
    assert prepare("ab") == "a.b"


def test_prepare_expands_brackets_to_union():
    assert prepare("[abc]") == "(a|b|c)"


def test_prepare_no_concat_before_operators():
    assert prepare("a|b*") == "a|b*"


def test_prepare_drops_spaces_and_epsilon():
    assert " " not in prepare("a b")
    assert EPSILON not in prepare("a@b")


def test_prepare_keeps_escape():
    assert prepare("\\*") == "\\*"


@pytest.mark.parametrize(
    "pattern", ["a", "ab", "a|b", "a*", "a+", "a?", "(a|b)*c", "[abc]+d", "a\\*b"]
)
def test_states_are_contiguous(pattern):
    nfa = Nfa(pattern)
    nodes = nfa.graph.reachable()
    states = sorted(node.state for node in nodes)
    assert states == list(range(len(nodes)))
    assert nfa.graph.start.state == 0
    assert nfa.graph.end.state == len(nodes) - 1


@pytest.mark.parametrize("pattern", ["a", "ab", "a|b", "a*", "a+", "a?", "(ab)*"])
def test_single_accepting_node(pattern):
    graph = Nfa(pattern).graph
    accepting = [node for node in graph.reachable() if node.is_end]
    assert accepting == [graph.end]


def test_symbols_collected():
    assert Nfa("[abc]").symbols == {"a", "b", "c"}


def test_escaped_operator_is_symbol():
    assert Nfa("a\\*").symbols == {"a", "*"}


def test_single_symbol_graph():
    graph = Nfa("a").graph
    assert graph.start.transfers["a"] == [graph.end]


def test_update_state_shifts_every_node():
    graph = Nfa("a|b").graph
    before = {node: node.state for node in graph.reachable()}
    graph.update_state(5)
    assert all(node.state == old + 5 for node, old in before.items())


def test_reachable_on_hand_built_graph():
    start, middle, end = NfaNode(0), NfaNode(1), NfaNode(2, is_end=True)
    start.transfers["x"] = [middle]
    middle.transfers[EPSILON] = [end, start]
    graph = NfaGraph(start, end)
    assert set(graph.reachable()) == {start, middle, end}
    assert graph.reachable()[0] is start


@pytest.mark.parametrize("pattern", ["", "|", "a|", "(a", "*"])
def test_malformed_patterns(pattern):
    with pytest.raises(ValueError):
        Nfa(pattern)