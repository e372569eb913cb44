import pytest

from algosuite.graphs import (
    GraphNode,
    UnionFind,
    can_finish,
    clone_graph,
    find_order,
    find_redundant_connection,
    make_connected,
)


def _build_graph(adjacency):
    nodes = {val: GraphNode(val) for val in adjacency}
    for val, neighbours in adjacency.items():
        nodes[val].neighbors = [nodes[n] for n in neighbours]
    return nodes


def _collect(start):
    seen = {}
    stack = [start]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen[id(node)] = node
        stack.extend(node.neighbors)
    return list(seen.values())


def _is_valid_order(order, num_courses, prerequisites):
    if sorted(order) != list(range(num_courses)):
        return False
    position = {course: i for i, course in enumerate(order)}
    return all(position[b] < position[a] for a, b in prerequisites)


def test_clone_graph_none():
    assert clone_graph(None) is None


def test_clone_graph_square_cycle():
    adjacency = {1: [2, 4], 2: [1, 3], 3: [2, 4], 4: [1, 3]}
    nodes = _build_graph(adjacency)
    copy = clone_graph(nodes[1])
    assert copy is not nodes[1]
    assert copy.val == nodes[1].val
    cloned = _collect(copy)
    originals = {id(n) for n in nodes.values()}
    assert all(id(n) not in originals for n in cloned)
    cloned_adjacency = {n.val: [m.val for m in n.neighbors] for n in cloned}
    assert cloned_adjacency == adjacency


def test_clone_graph_single_node():
    node = GraphNode(7)
    copy = clone_graph(node)
    assert copy.val == 7
    assert copy.neighbors == []
    assert copy is not node


def test_clone_graph_shares_nodes_like_original():
    nodes = _build_graph({1: [2], 2: [1]})
    copy = clone_graph(nodes[1])
    assert copy.neighbors[0].neighbors[0] is copy


def test_union_find_union_and_find():
    sets = UnionFind(5)
    assert sets.count == 5
    assert sets.union(0, 1) is True
    assert sets.union(1, 2) is True
    assert sets.union(0, 2) is False
    assert sets.find(0) == sets.find(2)
    assert sets.find(3) != sets.find(0)
    assert sets.count == 3


def test_union_find_out_of_range():
    sets = UnionFind(3)
    with pytest.raises(IndexError):
        sets.find(3)


def test_union_find_negative_size():
    with pytest.raises(ValueError):
        UnionFind(-1)


def test_can_finish_simple_chain():
    assert can_finish(2, [[1, 0]]) is True


def test_can_finish_cycle():
    assert can_finish(2, [[1, 0], [0, 1]]) is False


def test_can_finish_longer_cycle_and_self_loop():
    assert can_finish(4, [[1, 0], [2, 1], [3, 2], [1, 3]]) is False
    assert can_finish(1, [[0, 0]]) is False


def test_can_finish_no_prerequisites():
    assert can_finish(3, []) is True


def test_can_finish_rejects_unknown_course():
    with pytest.raises(ValueError):
        can_finish(2, [[2, 0]])


def test_find_order_is_topological():
    prerequisites = [[1, 0], [2, 0], [3, 1], [3, 2]]
    order = find_order(4, prerequisites)
    assert sorted(order) == [0, 1, 2, 3]
    assert order[0] == 0
    assert order[-1] == 3
    assert _is_valid_order(order, 4, prerequisites) is True


def test_find_order_cycle_gives_empty():
    assert find_order(3, [[0, 1], [1, 2], [2, 0]]) == []


def test_find_order_single_course():
    assert find_order(1, []) == [0]


def test_find_order_agrees_with_can_finish():
    cases = [
        (3, [[1, 0], [2, 1]]),
        (3, [[1, 0], [0, 1]]),
        (5, [[4, 3], [3, 2], [2, 1], [1, 0]]),
    ]
    for num, prereqs in cases:
        order = find_order(num, prereqs)
        assert bool(order) == can_finish(num, prereqs)
        if order:
            assert _is_valid_order(order, num, prereqs)


def test_find_redundant_connection_triangle():
    assert find_redundant_connection([[1, 2], [1, 3], [2, 3]]) == [2, 3]


def test_find_redundant_connection_longer_cycle():
    edges = [[1, 2], [2, 3], [3, 4], [1, 4], [1, 5]]
    assert find_redundant_connection(edges) == [1, 4]


def test_make_connected_too_few_cables():
    assert make_connected(6, [[0, 1], [0, 2], [0, 3], [1, 2]]) == -1


def test_make_connected_one_move():
    assert make_connected(4, [[0, 1], [0, 2], [1, 2]]) == 1


def test_make_connected_already_connected():
    assert make_connected(3, [[0, 1], [1, 2]]) == 0


def test_make_connected_counts_components():
    connections = [[0, 1], [0, 2], [0, 3], [1, 2], [1, 3]]
    assert make_connected(6, connections) == 6 - 4