"""A* search over a weighted directed graph of nodes."""

from __future__ import annotations

import heapq
from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import count
from typing import Any

Heuristic = Callable[["Node", "Node"], float]


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
    """Finds cheapest paths, guided by ``heuristic(node, goal)``.

    Without a heuristic every estimate is zero.
    """

    def __init__(self, heuristic: Heuristic | None = None) -> None:
        self._heuristic = heuristic
        self._came_from: dict[Node, Node | None] = {}
        self._cost: dict[Node, float] = {}

    def _estimate(self, node: Node, goal: Node) -> float:
        if self._heuristic is None:
            return 0.0
        return self._heuristic(node, goal)

    def explore(self, start: Node, goal: Node) -> list[Node]:
        """Search from ``start`` until ``goal`` is expanded; return the path.

        Raises ``ValueError`` if ``goal`` cannot be reached.
        """
        came_from: dict[Node, Node | None] = {start: None}
        cost: dict[Node, float] = {start: 0.0}
        tie = count()
        queue: list[tuple[float, int, Node]] = [(0.0, next(tie), start)]
        while queue:
            _, _, current = heapq.heappop(queue)
            for edge in current.neighbors:
                new_cost = cost[current] + edge.cost
                if edge.to not in cost or new_cost < cost[edge.to]:
                    cost[edge.to] = new_cost
                    came_from[edge.to] = current
                    estimate = new_cost + self._estimate(edge.to, goal)
                    heapq.heappush(queue, (estimate, next(tie), edge.to))
            if current is goal:
                break
        self._came_from = came_from
        self._cost = cost
        return self.get_path(start, goal)

    def get_path(self, start: Node, goal: Node) -> list[Node]:
        """Return the path from the last search, ``start`` first.

        Raises ``ValueError`` if the last search did not reach ``goal``.
        """
        if goal not in self._came_from:
            raise ValueError(f"no path reaches {goal!r}")
        path: list[Node] = []
        node: Node | None = goal
        while node is not None and node is not start:
            path.append(node)
            node = self._came_from.get(node)
        path.append(start)
        path.reverse()
        return path