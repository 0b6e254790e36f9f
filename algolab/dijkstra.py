"""Dijkstra's cheapest-path search over a weighted directed graph."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from itertools import count
from typing import Any


@dataclass(frozen=True)
class Edge:
    """A one-way route to ``to`` costing ``cost``."""

    to: Node
    cost: float


@dataclass(eq=False)
class Node:
    """A location; ``neighbors`` holds its outgoing routes."""

    value: Any
    neighbors: list[Edge] = field(default_factory=list, repr=False)

    def add_route(self, node: Node, cost: float) -> None:
        """Add a one-way route from this node to ``node``."""
        self.neighbors.append(Edge(node, cost))


class Graph:
    """Computes cheapest routes from one source to every reachable node."""

    def __init__(self) -> None:
        self._came_from: dict[Node, Node | None] = {}
        self._cost: dict[Node, float] = {}

    def explore(self, start: Node) -> dict[Node, float]:
        """Search outward from ``start``; return the cost of reaching each node."""
        came_from: dict[Node, Node | None] = {start: None}
        cost: dict[Node, float] = {start: 0.0}
        tie = count()
        queue: list[tuple[float, int, Node]] = [(0.0, next(tie), start)]
        while queue:
            reached, _, current = heapq.heappop(queue)
            if reached > cost[current]:
                continue
            for edge in current.neighbors:
                new_cost = cost[current] + edge.cost
                if edge.to not in cost or new_cost < cost[edge.to]:
                    cost[edge.to] = new_cost
                    came_from[edge.to] = current
                    heapq.heappush(queue, (new_cost, next(tie), edge.to))
        self._came_from = came_from
        self._cost = cost
        return dict(cost)

    def get_path(self, start: Node, target: Node) -> list[Node]:
        """Follow the last search back from ``target`` and return the path.

        The walk stops at ``start`` or at the search's source; ``start`` is
        always the first element. Raises ``ValueError`` if ``target`` was not
        reached by the last search.
        """
        if target not in self._came_from:
            raise ValueError(f"{target!r} was not reached")
        path: list[Node] = []
        node: Node | None = target
        while node is not None and node is not start:
            path.append(node)
            node = self._came_from.get(node)
        path.append(start)
        path.reverse()
        return path

    def clear(self) -> None:
        """Forget the last search."""
        self._came_from = {}
        self._cost = {}