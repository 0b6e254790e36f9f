# algolab

A small collection of textbook algorithms and data structures in plain Python,
with no dependencies beyond the standard library.

## Contents

- **Sorting** (`algolab.sorting`): `merge_sort` returns a new sorted list.
  `insertion_sort`, `heap_sort`, `lomuto_quick_sort`, `hoare_quick_sort`,
  `selection_sort`, `bubble_sort` and `bubble_sort_recursive` sort a mutable
  sequence in place and return `None`. The quick sorts take optional `low` and
  `high` bounds (inclusive, `high` defaulting to the last index);
  `bubble_sort_recursive` takes an optional `start` and leaves earlier items
  alone.
- **Searching** (`algolab.searching`): `binary_search`, `linear_search`,
  `jump_search` and `exponential_search`. Each returns the index of the target
  and raises `ValueError` when it is absent, as `list.index` does. All but
  `linear_search` expect sorted input; `jump_search` needs a positive `steps`.
- **Linked lists**: `SinglyLinkedList` (`algolab.singly_linked`) and
  `DoublyLinkedList` (`algolab.doubly_linked`), with `insert`, `remove`,
  `clear`, `description`, iteration and `in`. `DoublyLinkedList` also supports
  `reversed()`. `SinglyLinkedList.remove` raises `ValueError` if a non-empty
  list does not hold the value; `DoublyLinkedList.remove` does nothing then.
- **Trees**:
  - `BinarySearchTree` (`algolab.bst`): an unbalanced tree that keeps
    duplicates, with `insert`, `search` (returns a `TreeNode` or `None`),
    `delete`, `description` and in-order iteration.
  - `MaxHeap` (`algolab.heap_tree`): `insert`, `pop` (largest first, raises
    `IndexError` when empty), `pop_all`, `len()` and `in`.
  - `Trie` (`algolab.trie`): `insert` and `contains`/`in`, where any prefix of
    a stored word counts as contained.
- **Graph searches**, each module with its own `Node`, `Edge` and `Graph`:
  - `algolab.breadth_first`: `Graph.explore(start)` returns reachable nodes in
    breadth-first order.
  - `algolab.depth_first`: `Graph.explore(start)` returns nodes in the order
    they are first reached; `start` appears only if a route leads back to it.
  - `algolab.dijkstra`: `Graph.explore(start)` returns a dict of costs;
    `Graph.get_path(start, target)` rebuilds the route.
  - `algolab.astar`: `Graph(heuristic=None).explore(start, goal)` returns the
    path; without a heuristic every estimate is zero.

  `get_path` raises `ValueError` when the target was not reached.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from algolab.sorting import merge_sort, heap_sort
from algolab.searching import binary_search

print(merge_sort([12, 11, 13, 5, 6, 7]))   # [5, 6, 7, 11, 12, 13]

values = [821, 279, 20, 513, 828]
heap_sort(values)                          # sorts in place
print(values)                              # [20, 279, 513, 821, 828]

sorted_values = [4, 21, 374, 431, 435, 450, 613, 694, 811, 871]
print(binary_search(sorted_values, 871))   # 9
```

Data structures:

```python
from algolab.singly_linked import SinglyLinkedList
from algolab.heap_tree import MaxHeap
from algolab.trie import Trie

items = SinglyLinkedList([5, 7, 34, 1])
items.remove(7)
print(items.description())       # "5, 34, 1, "
print(5 in items)                # True

heap = MaxHeap([10, 7, 2, 5, 1, 16])
print(heap.pop_all())            # [16, 10, 7, 5, 2, 1]

words = Trie(["catapillar"])
print("cata" in words)           # True: prefixes count as contained
```

Graph searches:

```python
from algolab.dijkstra import Graph, Node

a, b, c = Node("a"), Node("b"), Node("c")
a.add_route(b, 1.0)
b.add_route(c, 2.0)
a.add_route(c, 5.0)

graph = Graph()
costs = graph.explore(a)
print(costs[c])                                       # 3.0
print([node.value for node in graph.get_path(a, c)])  # ['a', 'b', 'c']
```

## Command line

The `algolab` command prints demonstration reports. With no arguments it runs
all of them; otherwise name the ones to run from `algorithms`, `bst`, `doubly`,
`graphs`, `heap`, `singly` and `trie`:

```
algolab
algolab heap trie
```

The same reports are available as functions in `algolab.demos`
(`algorithms_report`, `bst_report`, `singly_linked_report`,
`doubly_linked_report`, `heap_report`, `trie_report`, `graph_report`), each
returning its text.