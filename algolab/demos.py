"""Demonstration runs of the sorts, searches and data structures."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from typing import Any

from . import astar, breadth_first, depth_first, dijkstra
from .bst import BinarySearchTree
from .doubly_linked import DoublyLinkedList
from .heap_tree import MaxHeap
from .searching import binary_search, exponential_search, jump_search, linear_search
from .singly_linked import SinglyLinkedList
from .sorting import (
    bubble_sort,
    heap_sort,
    hoare_quick_sort,
    insertion_sort,
    lomuto_quick_sort,
    merge_sort,
    selection_sort,
)
from .trie import Trie

_ROUTES = {
    "a": "bc",
    "b": "ade",
    "c": "afg",
    "d": "b",
    "e": "bhf",
    "f": "ecg",
    "g": "fc",
    "h": "e",
}

_WEIGHTED_ROUTES = {
    "a": [("d", 1.0), ("b", 3.0)],
    "b": [("a", 3.0), ("d", 4.0), ("e", 5.0), ("c", 5.0)],
    "c": [("b", 5.0), ("e", 9.0)],
    "d": [("e", 1.0), ("b", 4.0), ("a", 1.0)],
    "e": [("c", 9.0), ("b", 5.0), ("d", 1.0)],
}


def _joined(values: Iterable[Any]) -> str:
    return "".join(f"{value}, " for value in values)


def _display(title: str, values: Iterable[Any]) -> str:
    return f"{title}\n{_joined(values)}\n"


def _display_search(title: str, values: Sequence[Any], index: int) -> str:
    return f"{title}\n{values[index]} is located at index {index}\n"


def algorithms_report() -> str:
    """Run every sort and search on sample data and describe the results."""
    parts = []

    merged = merge_sort([12, 11, 13, 5, 6, 7])
    parts.append(_display("---Merge Sort---", merged))

    insert_values = [1, 5, 53, 14, 88, 9, 545, 321, 1, 13, 2]
    insertion_sort(insert_values)
    parts.append(_display("---Insertion Sort---", insert_values))

    heap_values = [821, 279, 20, 513, 828, 623, 287, 834, 130, 789]
    heap_sort(heap_values)
    parts.append(_display("---Heap Sort---", heap_values))

    lomuto_values = [436, 739, 307, 224, 102, 450, 468, 56, 676, 48]
    lomuto_quick_sort(lomuto_values, 0, len(lomuto_values) - 1)
    parts.append(_display("---Quick Sort (Lomuto)---", lomuto_values))

    hoare_values = [27, 826, 708, 817, 847, 853, 447, 276, 494, 657]
    hoare_quick_sort(hoare_values, 0, len(hoare_values) - 1)
    parts.append(_display("---Quick Sort (Hoare)---", hoare_values))

    select_values = [880, 575, 199, 335, 35, 990, 941, 551, 962, 34]
    selection_sort(select_values)
    parts.append(_display("---Selection Sort---", select_values))

    bubble_values = [275, 458, 253, 483, 712, 181, 520, 306, 53, 829]
    bubble_sort(bubble_values)
    parts.append(_display("---Bubble Sort---", bubble_values))

    parts.append("\n")

    bin_values = [4, 21, 374, 431, 435, 450, 613, 694, 811, 871]
    parts.append(
        _display_search(
            "---Binary Search---",
            bin_values,
            binary_search(bin_values, 871, 0, len(bin_values) - 1),
        )
    )

    linear_values = [44, 99, 149, 235, 318, 417, 778, 784, 893, 990]
    parts.append(
        _display_search("---Linear Search---", linear_values, linear_search(linear_values, 778))
    )

    jump_values = [88, 91, 175, 236, 347, 647, 661, 784, 958, 990]
    parts.append(
        _display_search("---Jump Search---", jump_values, jump_search(jump_values, 88, 4))
    )

    expo_values = [71, 115, 120, 396, 414, 431, 463, 600, 650, 913]
    parts.append(
        _display_search(
            "---Exponential Search---", expo_values, exponential_search(expo_values, 913)
        )
    )

    return "".join(parts)


def bst_report() -> str:
    """Build a binary search tree, delete a value and list what remains."""
    tree = BinarySearchTree([10, 1, 5, 2, 78, 8])
    tree.delete(1)
    return tree.description() + "\n"


def singly_linked_report() -> str:
    """Fill a singly linked list, query it and remove a value."""
    values = SinglyLinkedList([5, 7, 34, 1])
    wanted = 5
    lines = [
        values.description(),
        f"Contains #{wanted}: {wanted in values}",
    ]
    values.remove(7)
    lines.append(values.description())
    return "\n".join(lines) + "\n"


def doubly_linked_report() -> str:
    """Fill a doubly linked list, query it and remove its tail value."""
    values = DoublyLinkedList([5, 7, 34, 1])
    wanted = 5
    lines = [
        values.description(),
        f"Contains #{wanted}: {wanted in values}",
    ]
    values.remove(1)
    lines.append(values.description())
    return "\n".join(lines) + "\n"


def heap_report() -> str:
    """Fill a max heap and pop every value, largest first."""
    heap = MaxHeap([10, 7, 2, 5, 1, 16])
    return _joined(heap.pop_all()) + "\n"


def trie_report() -> str:
    """Store some words in a trie and look up a prefix."""
    trie = Trie(["cat", "catapillar", "dog", "lizard", "camera"])
    return f"Tree Contains catapillar: {trie.contains('cata')}\n"


def _unweighted_nodes(module: Any) -> dict[str, Any]:
    nodes = {name: module.Node(name) for name in _ROUTES}
    for name, targets in _ROUTES.items():
        for target in targets:
            nodes[name].add_route(nodes[target])
    return nodes


def _weighted_nodes(module: Any) -> dict[str, Any]:
    nodes = {name: module.Node(name) for name in _WEIGHTED_ROUTES}
    for name, routes in _WEIGHTED_ROUTES.items():
        for target, cost in routes:
            nodes[name].add_route(nodes[target], cost)
    return nodes


def _names(nodes: Iterable[Any]) -> str:
    return _joined(node.value for node in nodes)


def graph_report() -> str:
    """Traverse sample graphs breadth first, depth first, by Dijkstra and by A*."""
    parts = []

    bfs_nodes = _unweighted_nodes(breadth_first)
    parts.append(
        _display("---Breadth First---", [n.value for n in breadth_first.Graph().explore(bfs_nodes["a"])])
    )

    dfs_nodes = _unweighted_nodes(depth_first)
    parts.append(
        _display("---Depth First---", [n.value for n in depth_first.Graph().explore(dfs_nodes["a"])])
    )

    dijkstra_nodes = _weighted_nodes(dijkstra)
    dijkstra_graph = dijkstra.Graph()
    dijkstra_graph.explore(dijkstra_nodes["a"])
    path = dijkstra_graph.get_path(dijkstra_nodes["d"], dijkstra_nodes["c"])
    parts.append(f"---Dijkstra---\n{_names(path)}\n")

    astar_nodes = _weighted_nodes(astar)
    path = astar.Graph().explore(astar_nodes["a"], astar_nodes["c"])
    parts.append(f"---A*---\n{_names(path)}\n")

    return "".join(parts)


_REPORTS = {
    "algorithms": algorithms_report,
    "bst": bst_report,
    "singly": singly_linked_report,
    "doubly": doubly_linked_report,
    "heap": heap_report,
    "trie": trie_report,
    "graphs": graph_report,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the chosen demonstrations, or all of them."""
    parser = argparse.ArgumentParser(
        prog="algolab", description="Run demonstrations of algorithms and data structures."
    )
    parser.add_argument(
        "demos",
        nargs="*",
        choices=sorted(_REPORTS),
        help="demonstrations to run (default: all)",
    )
    args = parser.parse_args(argv)
    chosen = args.demos or list(_REPORTS)
    for name in chosen:
        sys.stdout.write(_REPORTS[name]())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())