"""Subset construction of a DFA from an NFA."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .nfa import Nfa, NfaNode
from .syntax import ANY, EPSILON


def epsilon_closure(source):
    """Return the nodes reachable from ``source`` by epsilon moves alone."""
    closure = set()
    pending = [source]
    while pending:
        node = pending.pop()
        if node in closure:
            continue
        closure.add(node)
        pending.extend(node.transfers.get(EPSILON, ()))
    return closure


def move(source, symbol):
    """Return the nodes reached from ``source`` on ``symbol``, closed under epsilon."""
    result = set()
    for target in source.transfers.get(symbol, ()):
        result |= epsilon_closure(target)
    return result


@dataclass(eq=False)
class DfaNode:
    """A DFA state standing for a set of NFA nodes."""

    state: int = 0
    is_end: bool = False
    transfers: dict[str, int] = field(default_factory=dict)
    nfa_nodes: frozenset[NfaNode] = frozenset()

    def bind_nfa_nodes(self, nodes):
        """Attach the NFA nodes and mark the state accepting if any of them is."""
        self.nfa_nodes = frozenset(nodes)
        if any(node.is_end for node in self.nfa_nodes):
            self.is_end = True


class Dfa:
    """The deterministic automaton equivalent to an NFA."""

    def __init__(self, nfa: Nfa):
        self.nfa = nfa
        self.nodes: list[DfaNode] = []
        self._generate()

    def _generate(self):
        symbols = sorted(self.nfa.symbols)
        start = DfaNode(0)
        start.bind_nfa_nodes(epsilon_closure(self.nfa.graph.start))
        self.nodes.append(start)
        known = {start.nfa_nodes: start}
        pending = deque([start])
        while pending:
            current = pending.popleft()
            for symbol in symbols:
                reached = set()
                for node in current.nfa_nodes:
                    reached |= move(node, symbol)
                if not reached:
                    continue
                key = frozenset(reached)
                target = known.get(key)
                if target is None:
                    target = DfaNode(len(self.nodes))
                    target.bind_nfa_nodes(key)
                    self.nodes.append(target)
                    known[key] = target
                    pending.append(target)
                current.transfers[symbol] = target.state

    def accepts(self, text):
        """Tell whether the automaton accepts the whole of ``text``."""
        state = 0
        for char in text:
            transfers = self.nodes[state].transfers
            if char in transfers:
                state = transfers[char]
            elif ANY in transfers:
                state = transfers[ANY]
            else:
                return False
        return self.nodes[state].is_end