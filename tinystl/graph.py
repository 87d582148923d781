"""A directed graph kept as adjacency lists, with depth- and breadth-first walks."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, NamedTuple


class Node(NamedTuple):
    """A graph node: an identifying index and the value it carries."""

    index: Any
    value: Any


@dataclass
class _Entry:
    node: Node
    edges: deque = field(default_factory=deque)


class DirectedGraph:
    """Directed graph whose nodes are ``(index, value)`` pairs.

    Nodes and edges are kept newest first: a node added later is listed
    before older ones, and so is an edge added later.
    """

    def __init__(self, equal_func: Callable[[Any, Any], bool] = operator.eq) -> None:
        self._equal = equal_func
        self._entries: list[_Entry] = []

    @staticmethod
    def make_node(index: Any, value: Any) -> Node:
        """Build a node from an index and a value."""
        return Node(index, value)

    @staticmethod
    def empty_node_set() -> list[Node]:
        """Return a new, empty list of nodes."""
        return []

    def _entry(self, index: Any) -> _Entry | None:
        return next((e for e in self._entries if self._equal(e.node.index, index)), None)

    @staticmethod
    def _index_of(node: Any) -> Any:
        return node.index if isinstance(node, Node) else node

    def get_node(self, index: Any) -> Node:
        """Return the node with ``index``; raise KeyError if there is none."""
        entry = self._entry(index)
        if entry is None:
            raise KeyError(index)
        return entry.node

    def is_contained(self, index: Any) -> bool:
        return self._entry(index) is not None

    def empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Node]:
        return (entry.node for entry in self._entries)

    def neighbors(self, index: Any) -> Iterator[Node]:
        """Iterate over the nodes that ``index`` has edges to."""
        entry = self._entry(index)
        if entry is not None:
            yield from entry.edges

    def adjacent_nodes(self, node: Any) -> list[Node]:
        """List the nodes adjacent to ``node``, given as a Node or an index."""
        return list(self.neighbors(self._index_of(node)))

    def _seen(self, visited: list[Any], index: Any) -> bool:
        return any(self._equal(v, index) for v in visited)

    def dfs(self, index: Any, visit: Callable[[Node], Any]) -> None:
        """Walk depth first from ``index``, calling ``visit`` on each node once."""
        visited: list[Any] = []

        def walk(node: Node) -> None:
            adjacent = self.adjacent_nodes(node.index)
            visit(node)
            visited.append(node.index)
            for nxt in adjacent:
                if not self._seen(visited, nxt.index):
                    walk(nxt)

        walk(self.get_node(index))

    def bfs(self, index: Any, visit: Callable[[Node], Any]) -> None:
        """Walk breadth first from ``index``, calling ``visit`` on each node once."""
        start = self.get_node(index)
        frontier = self.adjacent_nodes(start.index)
        visit(start)
        visited: list[Any] = [start.index]
        while frontier:
            following: list[Node] = []
            for node in frontier:
                if not self._seen(visited, node.index):
                    visit(node)
                    visited.append(node.index)
                    following.extend(self.adjacent_nodes(node.index))
            frontier = following

    def to_string(self) -> str:
        """Render every node with its adjacency list."""
        lines = []
        for entry in self._entries:
            head = f"[{entry.node.index},{entry.node.value}]:"
            edges = "".join(f"[{n.index},{n.value}]->" for n in entry.edges)
            lines.append(f"{head}{edges}[nil]\n{'|':>4}\n")
        lines.append("[nil]\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def add_node(self, node: Any, nodes: Iterable[Node] = ()) -> None:
        """Add edges from ``node`` to each of ``nodes``.

        ``node`` given as a Node is added first if missing; given as an index
        it must already be in the graph.  Target nodes not yet in the graph
        are added too.
        """
        if isinstance(node, Node):
            if not self.is_contained(node.index):
                self._entries.insert(0, _Entry(node))
            index = node.index
        else:
            index = node
        targets = list(nodes)
        if not targets:
            return
        entry = self._entry(index)
        if entry is None:
            raise KeyError(index)
        for target in targets:
            entry.edges.appendleft(target)
            if not self.is_contained(target.index):
                self.add_node(target)

    def delete_node(self, node: Any) -> None:
        """Remove ``node`` (a Node or an index) and every edge leading to it."""
        index = self._index_of(node)
        self._entries = [e for e in self._entries if not self._equal(e.node.index, index)]
        for entry in self._entries:
            entry.edges = deque(n for n in entry.edges if not self._equal(n.index, index))

    def make_edge(self, index1: Any, index2: Any) -> None:
        """Add an edge from ``index1`` to the existing node ``index2``."""
        target = self.get_node(index2)
        for entry in self._entries:
            if self._equal(entry.node.index, index1):
                entry.edges.appendleft(target)

    def __repr__(self) -> str:
        return f"DirectedGraph({list(self)!r})"