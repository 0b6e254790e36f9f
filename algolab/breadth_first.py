"""Breadth-first traversal of a directed graph of nodes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Edge:
    """A one-way route to ``to``."""

    to: Node


@dataclass(eq=False)
class Node:
    """A location; ``neighbors`` holds its outgoing routes."""

    value: Any
    neighbors: list[Edge] = field(default_factory=list, repr=False)

    def add_route(self, node: Node) -> None:
        """Add a one-way route from this node to ``node``."""
        self.neighbors.append(Edge(node))


class Graph:
    """Visits nodes level by level; ``nodes`` holds the last traversal."""

    def __init__(self) -> None:
        self.nodes: list[Node] = []

    def explore(self, start: Node) -> list[Node]:
        """Return every node reachable from ``start`` in breadth-first order."""
        self.nodes = []
        visited: set[Node] = set()
        queue: deque[Node] = deque([start])
        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)
            self.nodes.append(current)
            queue.extend(edge.to for edge in current.neighbors)
        return list(self.nodes)

    def clear(self) -> None:
        """Forget the last traversal."""
        self.nodes = []