import re

import pytest

from algolab.demos import (
    algorithms_report,
    bst_report,
    doubly_linked_report,
    graph_report,
    heap_report,
    main,
    singly_linked_report,
    trie_report,
)

SORT_INPUTS = {
    "---Merge Sort---": [12, 11, 13, 5, 6, 7],
    "---Insertion Sort---": [1, 5, 53, 14, 88, 9, 545, 321, 1, 13, 2],
    "---Heap Sort---": [821, 279, 20, 513, 828, 623, 287, 834, 130, 789],
    "---Quick Sort (Lomuto)---": [436, 739, 307, 224, 102, 450, 468, 56, 676, 48],
    "---Quick Sort (Hoare)---": [27, 826, 708, 817, 847, 853, 447, 276, 494, 657],
    "---Selection Sort---": [880, 575, 199, 335, 35, 990, 941, 551, 962, 34],
    "---Bubble Sort---": [275, 458, 253, 483, 712, 181, 520, 306, 53, 829],
}

SEARCH_INPUTS = {
    "---Binary Search---": ([4, 21, 374, 431, 435, 450, 613, 694, 811, 871], 871),
    "---Linear Search---": ([44, 99, 149, 235, 318, 417, 778, 784, 893, 990], 778),
    "---Jump Search---": ([88, 91, 175, 236, 347, 647, 661, 784, 958, 990], 88),
    "---Exponential Search---": ([71, 115, 120, 396, 414, 431, 463, 600, 650, 913], 913),
}

ROUTES = {
    "a": "bc",
    "b": "ade",
    "c": "afg",
    "d": "b",
    "e": "bhf",
    "f": "ecg",
    "g": "fc",
    "h": "e",
}


def _values(line):
    return [item for item in line.split(", ") if item]


def _ints(line):
    return [int(item) for item in _values(line)]


def _after(lines, title):
    return lines[lines.index(title) + 1]


@pytest.mark.parametrize("title", list(SORT_INPUTS))
def test_algorithms_report_sorts(title):
    lines = algorithms_report().splitlines()
    assert _ints(_after(lines, title)) == sorted(SORT_INPUTS[title])


@pytest.mark.parametrize("title", list(SEARCH_INPUTS))
def test_algorithms_report_searches(title):
    values, target = SEARCH_INPUTS[title]
    lines = algorithms_report().splitlines()
    match = re.fullmatch(r"(-?\d+) is located at index (\d+)", _after(lines, title))
    assert match is not None
    found, index = int(match.group(1)), int(match.group(2))
    assert found == target
    assert values[index] == target


def test_algorithms_report_separates_sorts_from_searches():
    lines = algorithms_report().splitlines()
    blank = lines.index("")
    assert blank < lines.index("---Binary Search---")
    assert blank > lines.index("---Bubble Sort---")


def test_singly_linked_report():
    first, contains, last = singly_linked_report().splitlines()
    assert _ints(first) == [5, 7, 34, 1]
    assert contains == "Contains #5: True"
    assert _ints(last) == [v for v in _ints(first) if v != 7]


def test_doubly_linked_report():
    first, contains, last = doubly_linked_report().splitlines()
    assert _ints(first) == [5, 7, 34, 1]
    assert contains == "Contains #5: True"
    assert _ints(last) == _ints(first)[:-1]


def test_trie_report():
    assert trie_report() == "Tree Contains catapillar: True\n"


def test_graph_report_breadth_first():
    lines = graph_report().splitlines()
    order = _values(_after(lines, "---Breadth First---"))
    assert order[0] == "a"
    assert sorted(order) == sorted(ROUTES)
    assert len(order) == len(set(order))


def test_graph_report_depth_first_follows_routes():
    lines = graph_report().splitlines()
    order = _values(_after(lines, "---Depth First---"))
    assert sorted(order) == sorted(ROUTES)
    assert order[0] in ROUTES["a"]


def test_graph_report_weighted_paths():
    lines = graph_report().splitlines()
    dijkstra_path = _values(_after(lines, "---Dijkstra---"))
    assert dijkstra_path[0] == "d"
    assert dijkstra_path[-1] == "c"
    astar_path = _values(_after(lines, "---A*---"))
    assert astar_path[0] == "a"
    assert astar_path[-1] == "c"
    assert astar_path == ["a", "b", "c"]


def test_main_runs_selected_demo(capsys):
    assert main(["heap"]) == 0
    assert capsys.readouterr().out == heap_report()


def test_main_runs_everything_by_default(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(algorithms_report())
    assert out.endswith(graph_report())
    assert trie_report() in out


def test_main_rejects_unknown_demo(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["nonsense"])
    assert excinfo.value.code == 2