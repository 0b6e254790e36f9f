from algolab.depth_first import Edge, Graph, Node

DEMO_ROUTES = {
    "a": "bc",
    "b": "ade",
    "c": "afg",
    "d": "b",
    "e": "bhf",
    "f": "ecg",
    "g": "fc",
    "h": "e",
}


def _demo_graph():
    nodes = {name: Node(name) for name in DEMO_ROUTES}
    for source, targets in DEMO_ROUTES.items():
        for target in targets:
            nodes[source].add_route(nodes[target])
    return nodes


def test_demo_order():
    nodes = _demo_graph()
    result = Graph().explore(nodes["a"])
    assert "".join(node.value for node in result) == "bacfehgd"


def test_each_node_once():
    nodes = _demo_graph()
    graph = Graph()
    result = graph.explore(nodes["d"])
    assert len(result) == len(set(map(id, result))) == len(nodes)
    assert graph.path == result


def test_first_step_is_first_neighbor():
    nodes = _demo_graph()
    result = Graph().explore(nodes["c"])
    assert result[0] is nodes["c"].neighbors[0].to


def test_start_absent_without_cycle():
    root, leaf = Node("r"), Node("l")
    root.add_route(leaf)
    assert Graph().explore(root) == [leaf]


def test_no_routes_gives_empty_path():
    assert Graph().explore(Node("z")) == []


def test_add_route_records_edge():
    first, second = Node(1), Node(2)
    first.add_route(second)
    assert first.neighbors == [Edge(second)]