"""Pattern preprocessing and Thompson construction of the NFA."""

from __future__ import annotations

from dataclasses import dataclass, field

from .syntax import (
    CLOSURE,
    CLOSURE_PLUS,
    CLOSURE_STAR,
    CONCAT,
    EPSILON,
    ESCAPE,
    LBRACKET,
    LMBRACKET,
    RBRACKET,
    RMBRACKET,
    UNION,
    is_reserved,
    is_skipped,
    privilege,
)

_NO_JOIN_AFTER = frozenset({UNION, CONCAT, LBRACKET, LMBRACKET})
_NO_JOIN_BEFORE = frozenset(
    {RBRACKET, RMBRACKET, UNION, CLOSURE, CLOSURE_PLUS, CLOSURE_STAR}
)


@dataclass(eq=False)
class NfaNode:
    """A state of the NFA with its labelled transitions."""

    state: int = 0
    is_end: bool = False
    transfers: dict[str, list[NfaNode]] = field(default_factory=dict)


def _link(source, symbol, target):
    source.transfers.setdefault(symbol, []).append(target)


@dataclass(eq=False)
class NfaGraph:
    """A fragment of the NFA with one entry and one exit node."""

    start: NfaNode
    end: NfaNode

    def reachable(self):
        """Return every node reachable from the start, in depth-first order."""
        seen = set()
        order = []
        pending = [self.start]
        while pending:
            node = pending.pop()
            if node in seen:
                continue
            seen.add(node)
            order.append(node)
            for targets in node.transfers.values():
                pending.extend(t for t in targets if t not in seen)
        return order

    def update_state(self, offset):
        """Shift the number of every reachable node by ``offset``."""
        for node in self.reachable():
            node.state += offset


def prepare(pattern):
    """Expand brackets and insert the implicit concatenation operators."""
    out = []
    escaped = False
    in_bracket = False
    last = len(pattern) - 1
    for i, char in enumerate(pattern):
        if char == ESCAPE and not escaped:
            escaped = True
            out.append(ESCAPE)
            continue
        if is_skipped(char):
            continue
        if char == LMBRACKET and not escaped:
            in_bracket = True
            out.append(LBRACKET)
        elif char == RMBRACKET and not escaped:
            in_bracket = False
            out.append(RBRACKET)
        else:
            out.append(char)
        no_join = (
            i == last
            or (char in _NO_JOIN_AFTER and not escaped)
            or pattern[i + 1] in _NO_JOIN_BEFORE
        )
        if not no_join:
            out.append(UNION if in_bracket else CONCAT)
        escaped = False
    return "".join(out)


def _from_symbol(symbol):
    graph = NfaGraph(NfaNode(0), NfaNode(1, is_end=True))
    _link(graph.start, symbol, graph.end)
    return graph


def _concat(first, second):
    first.end.is_end = False
    second.update_state(first.end.state + 1)
    _link(first.end, EPSILON, second.start)
    return NfaGraph(first.start, second.end)


def _union(first, second):
    graph = NfaGraph(NfaNode(), NfaNode(is_end=True))
    first.update_state(1)
    second.update_state(first.end.state + 1)
    graph.end.state = second.end.state + 1
    first.end.is_end = False
    second.end.is_end = False
    _link(graph.start, EPSILON, first.start)
    _link(graph.start, EPSILON, second.start)
    _link(first.end, EPSILON, graph.end)
    _link(second.end, EPSILON, graph.end)
    return graph


def _wrap(target):
    graph = NfaGraph(NfaNode(), NfaNode(is_end=True))
    target.update_state(1)
    graph.end.state = target.end.state + 1
    target.end.is_end = False
    return graph


def _closure(target):
    graph = _wrap(target)
    _link(graph.start, EPSILON, target.start)
    _link(graph.start, EPSILON, graph.end)
    _link(target.end, EPSILON, target.start)
    _link(target.end, EPSILON, graph.end)
    return graph


def _optional(target):
    graph = _wrap(target)
    _link(graph.start, EPSILON, target.start)
    _link(graph.start, EPSILON, graph.end)
    _link(target.end, EPSILON, graph.end)
    return graph


def _closure_plus(target):
    graph = _wrap(target)
    _link(graph.start, EPSILON, target.start)
    _link(target.end, EPSILON, graph.end)
    _link(target.end, EPSILON, target.start)
    return graph


_UNARY = {CLOSURE: _closure, CLOSURE_STAR: _optional, CLOSURE_PLUS: _closure_plus}


def _apply(op, subgraphs):
    if op in _UNARY:
        if not subgraphs:
            raise ValueError(f"operator {op!r} has no operand")
        subgraphs.append(_UNARY[op](subgraphs.pop()))
        return
    if len(subgraphs) < 2:
        raise ValueError(f"operator {op!r} needs two operands")
    second = subgraphs.pop()
    first = subgraphs.pop()
    subgraphs.append(_concat(first, second) if op == CONCAT else _union(first, second))


class Nfa:
    """The NFA built from a pattern, with the set of symbols it uses."""

    def __init__(self, pattern):
        self.pattern = pattern
        self.prepared = prepare(pattern)
        self.symbols: set[str] = set()
        self.graph = self._build(self.prepared)

    def _build(self, prepared):
        ops = []
        subgraphs = []
        escaped = False
        for char in prepared:
            if char == ESCAPE and not escaped:
                escaped = True
                continue
            if char == LBRACKET and not escaped:
                ops.append(char)
                continue
            if char == RBRACKET and not escaped:
                while ops:
                    op = ops.pop()
                    if op == LBRACKET:
                        break
                    _apply(op, subgraphs)
                continue
            if is_reserved(char) and not escaped:
                while ops and privilege(char) <= privilege(ops[-1]):
                    _apply(ops.pop(), subgraphs)
                ops.append(char)
                continue
            subgraphs.append(_from_symbol(char))
            self.symbols.add(char)
            escaped = False
        while ops:
            op = ops.pop()
            if op == LBRACKET:
                raise ValueError("unbalanced bracket in pattern")
            _apply(op, subgraphs)
        if not subgraphs:
            raise ValueError("pattern contains no symbols")
        return subgraphs[-1]