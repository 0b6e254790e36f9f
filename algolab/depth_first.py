"""Depth-first traversal of a directed graph of nodes."""

from __future__ import annotations

from collections.abc import Iterator
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
    """Walks routes as deep as possible; ``path`` holds the last traversal."""

    def __init__(self) -> None:
        self.path: list[Node] = []

    def explore(self, start: Node) -> list[Node]:
        """Return nodes in the order they are first reached from ``start``.

        ``start`` itself is not marked at the outset, so it appears in the
        result only if a route leads back to it.
        """
        self.path = []
        visited: set[Node] = set()
        stack: list[Iterator[Edge]] = [iter(start.neighbors)]
        while stack:
            for edge in stack[-1]:
                neighbor = edge.to
                if neighbor not in visited:
                    visited.add(neighbor)
                    self.path.append(neighbor)
                    stack.append(iter(neighbor.neighbors))
                    break
            else:
                stack.pop()
        return list(self.path)