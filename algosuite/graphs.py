"""Graph problems: cloning, course ordering and disjoint-set connectivity."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

__all__ = [
    "GraphNode",
    "UnionFind",
    "clone_graph",
    "can_finish",
    "find_order",
    "find_redundant_connection",
    "make_connected",
]


@dataclass(eq=False)
class GraphNode:
    """A vertex of an undirected graph together with its adjacency list."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list, repr=False)


class UnionFind:
    """Disjoint sets over ``0..n-1`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))
        self._rank = [1] * n
        self.count = n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the sets of ``x`` and ``y``; return False if already joined."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        elif self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        self.count -= 1
        return True


def clone_graph(node: GraphNode | None) -> GraphNode | None:
    """Return a deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies: dict[int, GraphNode] = {id(node): GraphNode(node.val)}
    queue = deque([node])
    while queue:
        current = queue.popleft()
        current_copy = copies[id(current)]
        for neighbour in current.neighbors:
            if id(neighbour) not in copies:
                copies[id(neighbour)] = GraphNode(neighbour.val)
                queue.append(neighbour)
            current_copy.neighbors.append(copies[id(neighbour)])
    return copies[id(node)]


def _check_course(course: int, num_courses: int) -> int:
    if not 0 <= course < num_courses:
        raise ValueError(f"course {course} out of range 0..{num_courses - 1}")
    return course


def _adjacency(
    num_courses: int, prerequisites: Iterable[Sequence[int]], *, forward: bool
) -> list[list[int]]:
    graph: list[list[int]] = [[] for _ in range(num_courses)]
    for course, required in prerequisites:
        _check_course(course, num_courses)
        _check_course(required, num_courses)
        if forward:
            graph[required].append(course)
        else:
            graph[course].append(required)
    return graph


def can_finish(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> bool:
    """Return True if every course can be taken, i.e. the prerequisites have no cycle.

    Each prerequisite ``[a, b]`` means course ``b`` must come before ``a``.
    """
    graph = _adjacency(num_courses, prerequisites, forward=False)
    done = [False] * num_courses
    on_path = [False] * num_courses
    for start in range(num_courses):
        if done[start]:
            continue
        done[start] = on_path[start] = True
        stack = [(start, iter(graph[start]))]
        while stack:
            node, pending = stack[-1]
            for nxt in pending:
                if on_path[nxt]:
                    return False
                if not done[nxt]:
                    done[nxt] = on_path[nxt] = True
                    stack.append((nxt, iter(graph[nxt])))
                    break
            else:
                on_path[node] = False
                stack.pop()
    return True


def find_order(num_courses: int, prerequisites: Iterable[Sequence[int]]) -> list[int]:
    """Return an order in which all courses can be taken, or [] if none exists.

    Each prerequisite ``[a, b]`` means course ``b`` must come before ``a``.
    """
    graph = _adjacency(num_courses, prerequisites, forward=True)
    in_degree = [0] * num_courses
    for targets in graph:
        for target in targets:
            in_degree[target] += 1
    queue = deque(course for course in range(num_courses) if in_degree[course] == 0)
    order: list[int] = []
    while queue:
        course = queue.popleft()
        order.append(course)
        for nxt in graph[course]:
            in_degree[nxt] -= 1
            if in_degree[nxt] == 0:
                queue.append(nxt)
    return order if len(order) == num_courses else []


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the first edge that closes a cycle, or [] if the edges form a forest.

    Vertices are numbered from 1 to ``len(edges)``.
    """
    sets = UnionFind(len(edges) + 1)
    for edge in edges:
        u, v = edge
        if not sets.union(u, v):
            return list(edge)
    return []


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Return how many cables must move to connect all ``n`` computers, or -1."""
    if len(connections) < n - 1:
        return -1
    sets = UnionFind(n)
    for u, v in connections:
        sets.union(u, v)
    return sets.count - 1