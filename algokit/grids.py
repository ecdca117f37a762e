"""Algorithms over two-dimensional grids."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable, Iterator, Sequence

from algokit.graphs import UnionFind

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _neighbors(row: int, col: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for d_row, d_col in _STEPS:
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def count_servers(grid: Sequence[Sequence[int]]) -> int:
    """Count servers (cells equal to 1) sharing a row or column with another server."""
    row_counts = [sum(1 for cell in row if cell == 1) for row in grid]
    col_counts = [sum(1 for cell in col if cell == 1) for col in zip(*grid)]
    return sum(
        1
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == 1 and (row_counts[r] >= 2 or col_counts[c] >= 2)
    )


def highest_peak(is_water: Sequence[Sequence[int]]) -> list[list[int]]:
    """Assign heights so water is 0 and each land cell is one above its lowest neighbour.

    Cells that no water cell can reach keep the height -1.
    """
    rows = len(is_water)
    cols = len(is_water[0]) if rows else 0
    height = [[0 if cell == 1 else -1 for cell in row] for row in is_water]
    queue = deque(
        (r, c) for r, row in enumerate(is_water) for c, cell in enumerate(row) if cell == 1
    )
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbors(r, c, rows, cols):
            if height[nr][nc] == -1:
                height[nr][nc] = height[r][c] + 1
                queue.append((nr, nc))
    return height


def min_operations_uni_value(grid: Sequence[Sequence[int]], x: int) -> int:
    """Return the fewest +/- ``x`` steps making all cells equal, or -1 if impossible."""
    values = sorted(cell for row in grid for cell in row)
    if not values:
        raise ValueError("grid must not be empty")
    remainder = grid[0][0] % x
    if any(value % x != remainder for value in values):
        return -1
    median = values[len(values) // 2]
    return sum(abs(median - value) // x for value in values)


def max_points(grid: Sequence[Sequence[int]], queries: Sequence[int]) -> list[int]:
    """For each query, count cells reachable from the top-left through values below it."""
    rows, cols = len(grid), len(grid[0])
    heap = [(grid[0][0], 0, 0)]
    visited = {(0, 0)}
    reached = 0
    answer_for: dict[int, int] = {}
    for query in sorted(set(queries)):
        while heap and heap[0][0] < query:
            _, r, c = heapq.heappop(heap)
            reached += 1
            for nr, nc in _neighbors(r, c, rows, cols):
                if (nr, nc) not in visited:
                    visited.add((nr, nc))
                    heapq.heappush(heap, (grid[nr][nc], nr, nc))
        answer_for[query] = reached
    return [answer_for[query] for query in queries]


def find_missing_and_repeated_values(grid: Sequence[Sequence[int]]) -> list[int]:
    """Return ``[repeated, missing]`` for an n x n grid meant to hold 1..n*n once each."""
    n = len(grid)
    counts = Counter(cell for row in grid for cell in row)
    repeated = missing = 0
    for value in range(1, n * n + 1):
        if counts[value] == 0:
            missing = value
        elif counts[value] == 2:
            repeated = value
    return [repeated, missing]


def largest_island(grid: Sequence[Sequence[int]]) -> int:
    """Return the largest island size obtainable by turning at most one 0 into 1."""
    n = len(grid)
    sets = UnionFind(n * n)
    land = [(r, c) for r, row in enumerate(grid) for c, cell in enumerate(row) if cell == 1]
    for r, c in land:
        for nr, nc in _neighbors(r, c, n, n):
            if grid[nr][nc] == 1:
                sets.union(nr * n + nc, r * n + c)

    size = Counter(sets.find(r * n + c) for r, c in land)
    best = max(size.values(), default=0)
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 0:
                roots = {
                    sets.find(nr * n + nc)
                    for nr, nc in _neighbors(r, c, n, n)
                    if grid[nr][nc] == 1
                }
                best = max(best, 1 + sum(size[root] for root in roots))
    return best


def _section_count(spans: Iterable[tuple[int, int]]) -> int:
    delta: dict[int, int] = {}
    for start, end in spans:
        delta[start + 1] = delta.get(start + 1, 0) + 1
        delta[end] = delta.get(end, 0) - 1
    open_spans = 0
    sections = 0
    for key in sorted(delta):
        open_spans += delta[key]
        if open_spans == 0:
            sections += 1
    return sections


def check_valid_cuts(n: int, rectangles: Sequence[Sequence[int]]) -> bool:
    """Return whether two parallel cuts split the rectangles into three non-empty sections.

    Each rectangle is ``[start_x, start_y, end_x, end_y]``.
    """
    horizontal = _section_count((rect[1], rect[3]) for rect in rectangles)
    if horizontal >= 3:
        return True
    vertical = _section_count((rect[0], rect[2]) for rect in rectangles)
    return vertical >= 3