"""Graph algorithms: connectivity, shortest paths and topological ordering."""

from __future__ import annotations

import heapq
import math
from collections import Counter, defaultdict, deque
from collections.abc import Sequence

MOD = 10**9 + 7


class UnionFind:
    """Disjoint sets over ``0..n-1`` with union by rank and path compression."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, node: int) -> int:
        """Return the representative of ``node``'s set."""
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return False if already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        elif self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        self._parent[root_b] = root_a
        return True


def _union_all(n: int, edges: Sequence[Sequence[int]]) -> UnionFind:
    sets = UnionFind(n)
    for edge in edges:
        sets.union(edge[0], edge[1])
    return sets


def valid_path(n: int, edges: Sequence[Sequence[int]], source: int, destination: int) -> bool:
    """Return whether ``source`` and ``destination`` are connected."""
    sets = _union_all(n, edges)
    return sets.find(source) == sets.find(destination)


def count_paths(n: int, roads: Sequence[Sequence[int]]) -> int:
    """Count shortest paths from node 0 to node n-1, modulo 10**9 + 7."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for a, b, weight in roads:
        adjacency[a].append((b, weight))
        adjacency[b].append((a, weight))

    distance = [math.inf] * n
    ways = [0] * n
    distance[0] = 0
    ways[0] = 1
    heap = [(0, 0)]
    while heap:
        current, node = heapq.heappop(heap)
        if current > distance[node]:
            continue
        for neighbor, weight in adjacency[node]:
            candidate = current + weight
            if candidate < distance[neighbor]:
                distance[neighbor] = candidate
                ways[neighbor] = ways[node]
                heapq.heappush(heap, (candidate, neighbor))
            elif candidate == distance[neighbor]:
                ways[neighbor] = (ways[neighbor] + ways[node]) % MOD
    return ways[n - 1]


def find_all_recipes(
    recipes: Sequence[str],
    ingredients: Sequence[Sequence[str]],
    supplies: Sequence[str],
) -> list[str]:
    """Return the recipes that can be made, in the order they become available."""
    missing: Counter[str] = Counter()
    needed_by: defaultdict[str, list[str]] = defaultdict(list)
    for recipe, parts in zip(recipes, ingredients):
        for part in parts:
            needed_by[part].append(recipe)
            missing[recipe] += 1

    made: list[str] = []
    queue = deque(supplies)
    while queue:
        item = queue.popleft()
        for recipe in needed_by[item]:
            missing[recipe] -= 1
            if missing[recipe] == 0:
                made.append(recipe)
                queue.append(recipe)
    return made


def _half(value: int) -> int:
    return value // 2 if value >= 0 else -(-value // 2)


def most_profitable_path(edges: Sequence[Sequence[int]], bob: int, amount: Sequence[int]) -> int:
    """Return Alice's best net income walking from node 0 to a leaf while Bob walks to 0."""
    n = len(edges) + 1
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)

    parent = [-1] * n
    seen = {0}
    queue = deque([0])
    while queue:
        node = queue.popleft()
        for neighbor in adjacency[node]:
            if neighbor not in seen:
                seen.add(neighbor)
                parent[neighbor] = node
                queue.append(neighbor)

    bob_time = [math.inf] * n
    node, time = bob, 0
    while True:
        bob_time[node] = time
        if node == 0:
            break
        node, time = parent[node], time + 1

    best: int | None = None
    stack = [(0, -1, 0, amount[0])]
    while stack:
        node, came_from, time, total = stack.pop()
        if node != 0 and len(adjacency[node]) == 1:
            best = total if best is None else max(best, total)
            continue
        arrival = time + 1
        for neighbor in adjacency[node]:
            if neighbor == came_from:
                continue
            if bob_time[neighbor] > arrival:
                gain = amount[neighbor]
            elif bob_time[neighbor] == arrival:
                gain = _half(amount[neighbor])
            else:
                gain = 0
            stack.append((neighbor, node, arrival, total + gain))
    if best is None:
        raise ValueError("tree has no leaf to reach")
    return best


def count_complete_components(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Count connected components in which every pair of nodes is adjacent."""
    sets = _union_all(n, edges)
    edge_count = Counter(sets.find(edge[0]) for edge in edges)
    node_count = Counter(sets.find(node) for node in range(n))
    return sum(
        1
        for root, size in node_count.items()
        if size == 1 or size * (size - 1) // 2 == edge_count[root]
    )


def minimum_cost(
    n: int, edges: Sequence[Sequence[int]], query: Sequence[Sequence[int]]
) -> list[int]:
    """For each query, return the AND of all weights in the shared component, or -1."""
    sets = _union_all(n, edges)
    cost: dict[int, int] = {}
    for a, _, weight in edges:
        root = sets.find(a)
        cost[root] = cost.get(root, -1) & weight

    answers = []
    for start, end in query:
        root = sets.find(start)
        answers.append(cost.get(root, -1) if root == sets.find(end) else -1)
    return answers


def _is_connected(adjacency: list[set[int]], n: int) -> bool:
    seen = {1}
    queue = deque([1])
    while queue:
        for neighbor in adjacency[queue.popleft()]:
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return len(seen) == n


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """Return the last edge whose removal leaves nodes 1..n connected, or []."""
    n = len(edges)
    adjacency: list[set[int]] = [set() for _ in range(n + 1)]
    for a, b in edges:
        adjacency[a].add(b)
        adjacency[b].add(a)

    for a, b in reversed(edges):
        adjacency[a].discard(b)
        adjacency[b].discard(a)
        if adjacency[a] and adjacency[b] and _is_connected(adjacency, n):
            return [a, b]
        adjacency[a].add(b)
        adjacency[b].add(a)
    return []


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return, sorted, the nodes from which every path ends at a terminal node."""
    reverse: list[list[int]] = [[] for _ in graph]
    outgoing = [len(targets) for targets in graph]
    for node, targets in enumerate(graph):
        for target in targets:
            reverse[target].append(node)

    queue = deque(node for node, count in enumerate(outgoing) if count == 0)
    safe = []
    while queue:
        node = queue.popleft()
        safe.append(node)
        for source in reverse[node]:
            outgoing[source] -= 1
            if outgoing[source] == 0:
                queue.append(source)
    return sorted(safe)