"""Minimisation of a DFA by partition refinement."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from .dfa import Dfa, DfaNode
from .syntax import ANY


@dataclass(eq=False)
class MDfaNode:
    """A state of the minimised automaton standing for a block of DFA states."""

    state: int = 0
    is_end: bool = False
    transfers: dict[str, int] = field(default_factory=dict)
    dfa_nodes: frozenset[DfaNode] = frozenset()

    def bind_dfa_nodes(self, dfa_nodes):
        """Attach a block of DFA nodes and mark the state accepting if any of them is."""
        self.dfa_nodes = frozenset(dfa_nodes)
        if any(node.is_end for node in self.dfa_nodes):
            self.is_end = True


def _holds_state(block, state):
    return any(node.state == state for node in block)


def _block_keys(target, prepared, completed):
    """Yield the keys of the blocks that hold ``target``, as the refinement numbers them."""
    for index, block in enumerate(prepared):
        if _holds_state(block, target):
            yield index
            break
    offset = len(prepared)
    for index, block in enumerate(completed):
        if _holds_state(block, target):
            yield offset + index
            break


class MDfa:
    """The minimised form of a DFA."""

    def __init__(self, dfa: Dfa):
        self.dfa = dfa
        self.nodes: list[MDfaNode] = []
        self._minimize()

    def _partition(self, symbols):
        nodes = self.dfa.nodes
        completed = [
            frozenset(node for node in nodes if not node.is_end),
            frozenset(node for node in nodes if node.is_end),
        ]
        for symbol in symbols:
            prepared = list(completed)
            completed = []
            while prepared:
                current = prepared[0]
                if len(current) <= 1:
                    prepared.pop(0)
                    if current:
                        completed.append(current)
                    continue
                destination: dict[int, set[DfaNode]] = {}
                for node in current:
                    if symbol not in node.transfers:
                        destination.setdefault(-1, set()).add(node)
                        continue
                    target = node.transfers[symbol]
                    for key in _block_keys(target, prepared, completed):
                        destination.setdefault(key, set()).add(node)
                prepared.pop(0)
                if len(destination) > 1:
                    prepared.extend(frozenset(destination[key]) for key in sorted(destination))
                else:
                    completed.append(current)
        return completed

    def _minimize(self):
        symbols = sorted(self.dfa.nfa.symbols)
        blocks = self._partition(symbols)
        start_block = next((block for block in blocks if _holds_state(block, 0)), frozenset())
        start = MDfaNode(0)
        start.bind_dfa_nodes(start_block)
        self.nodes.append(start)
        known = {start.dfa_nodes: start}
        pending = deque([start])
        while pending:
            current = pending.popleft()
            for symbol in symbols:
                reached = {
                    node.transfers[symbol]
                    for node in current.dfa_nodes
                    if symbol in node.transfers
                }
                if not reached:
                    continue
                block = next(
                    (b for b in blocks if any(node.state in reached for node in b)),
                    None,
                )
                if block is None:
                    continue
                target = known.get(block)
                if target is None:
                    target = MDfaNode(len(self.nodes))
                    target.bind_dfa_nodes(block)
                    self.nodes.append(target)
                    known[target.dfa_nodes] = target
                    pending.append(target)
                current.transfers[symbol] = target.state

    def accepts(self, text):
        """Tell whether the minimised automaton accepts the whole of ``text``."""
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

    def lex(self):
        """Return the source of a standalone recogniser program for this automaton."""
        lines = [
            "#include <iostream>",
            "#include <string>",
            "#include <cstring>",
            "",
            "using namespace std;",
            "",
            "int main() {",
            "     string input;",
            "     cin >> input;",
            "     int currentState = 0;",
            "     for (int i = 0; i < input.size(); ++i) {",
            "         char id = input[i];",
            "         switch(currentState) {",
        ]
        for node in self.nodes:
            lines.append(f"         case {node.state}:")
            lines.append("             switch (id) {")
            for symbol, target in sorted(node.transfers.items()):
                lines.append(f"             case '{symbol}':")
                lines.append(f"                 currentState = {target};")
                lines.append("                 break;")
            lines.append("             default:")
            if ANY in node.transfers:
                lines.append(f"                 currentState = {node.transfers[ANY]};")
                lines.append("                 break;")
            else:
                lines.append(
                    "                 cout << \"Error: Invalid input character.\" << '\\n';"
                )
                lines.append("                 return 1;")
            lines.append("             }")
            lines.append("             break;")
        lines.extend(
            [
                "         }",
                "     }",
                "     switch (currentState) {",
            ]
        )
        for node in self.nodes:
            if not node.is_end:
                continue
            lines.append(f"     case {node.state}:")
            lines.append("         cout << \"Accepted.\" << '\\n';")
            lines.append("         break;")
        lines.extend(
            [
                "     default:",
                "         cout << \"Not Accepted.\" << '\\n';",
                "     }",
                "     return 0;",
                "}",
            ]
        )
        return "\n".join(lines) + "\n"