"""Breadth-first searches and tree queries over small graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


def shortest_path_all_nodes(graph: Sequence[Sequence[int]]) -> int:
    """Length of the shortest walk that visits every node of ``graph``.

    ``graph[i]`` lists the neighbours of node ``i``. The walk may start and
    end anywhere and may revisit nodes and edges.
    """
    count = len(graph)
    if count == 0:
        raise ValueError("graph has no nodes")
    target = (1 << count) - 1
    seen = {(node, 1 << node) for node in range(count)}
    queue = deque((node, 1 << node, 0) for node in range(count))
    while queue:
        node, mask, moves = queue.popleft()
        if mask == target:
            return moves
        for neighbour in graph[node]:
            state = (neighbour, mask | 1 << neighbour)
            if state not in seen:
                seen.add(state)
                queue.append((*state, moves + 1))
    raise ValueError("graph is not connected")


def shortest_path_with_eliminations(grid: Sequence[Sequence[int]], k: int) -> int | None:
    """Fewest steps from the top-left to the bottom-right cell.

    Cells holding 1 are obstacles; at most ``k`` of them may be walked
    through. Returns None when no such path exists.
    """
    if not grid or not grid[0]:
        raise ValueError("grid is empty")
    rows, cols = len(grid), len(grid[0])
    goal = (rows - 1, cols - 1)
    seen = {(0, 0, 0)}
    queue = deque([(0, 0, 0, 0)])
    while queue:
        row, col, used, moves = queue.popleft()
        if (row, col) == goal:
            return moves
        for d_row, d_col in _MOVES:
            x, y = row + d_row, col + d_col
            if not (0 <= x < rows and 0 <= y < cols) or (x, y, used) in seen:
                continue
            if grid[x][y] == 1:
                if used == k:
                    continue
                seen.add((x, y, used))
                queue.append((x, y, used + 1, moves + 1))
            else:
                seen.add((x, y, used))
                queue.append((x, y, used, moves + 1))
    return None


def max_candies(
    status: Sequence[int],
    candies: Sequence[int],
    keys: Sequence[Sequence[int]],
    contained_boxes: Sequence[Sequence[int]],
    initial_boxes: Sequence[int],
) -> int:
    """Total candies collectable by opening boxes with the keys found in them.

    ``status[i]`` is 1 for a box that is open from the start. The inputs are
    not modified.
    """
    opened_state = list(status)
    found = set(initial_boxes)
    emptied: set[int] = set()
    queue = deque(initial_boxes)
    total = 0
    while queue:
        box = queue.popleft()
        if not opened_state[box] or box in emptied:
            continue
        total += candies[box]
        emptied.add(box)
        for key in keys[box]:
            opened_state[key] = 1
            if key in found and key not in emptied:
                queue.append(key)
        for inner in contained_boxes[box]:
            if inner not in emptied:
                found.add(inner)
                queue.append(inner)
    return total


def weighted_median_nodes(
    n: int,
    edges: Sequence[Sequence[int]],
    queries: Sequence[Sequence[int]],
) -> list[int]:
    """Weighted median node of the path for each ``(u, v)`` query.

    ``edges`` holds ``(u, v, weight)`` triples of a tree on nodes ``0..n-1``.
    The median is the first node on the path from ``u`` towards ``v`` whose
    distance from ``u`` is at least half of the whole path weight.
    """
    if n < 1:
        raise ValueError("tree needs at least one node")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, weight in edges:
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    parent = [-1] * n
    depth = [0] * n
    dist = [0] * n
    visited = {0}
    stack = [0]
    while stack:
        node = stack.pop()
        for neighbour, weight in adjacency[node]:
            if neighbour in visited:
                continue
            visited.add(neighbour)
            parent[neighbour] = node
            depth[neighbour] = depth[node] + 1
            dist[neighbour] = dist[node] + weight
            stack.append(neighbour)

    up = [parent]
    for _ in range(1, max(1, (n - 1).bit_length())):
        previous = up[-1]
        up.append([previous[a] if a != -1 else -1 for a in previous])

    def lca(a: int, b: int) -> int:
        if depth[a] < depth[b]:
            a, b = b, a
        gap = depth[a] - depth[b]
        for power, level in enumerate(up):
            if gap >> power & 1:
                a = level[a]
        if a == b:
            return a
        for level in reversed(up):
            if level[a] != level[b]:
                a, b = level[a], level[b]
        return parent[a]

    def climb(node: int, budget: int) -> tuple[int, int]:
        for level in reversed(up):
            ancestor = level[node]
            if ancestor == -1:
                continue
            step = dist[node] - dist[ancestor]
            if step <= budget:
                budget -= step
                node = ancestor
        return node, budget

    answers = []
    for u, v in queries:
        meet = lca(u, v)
        from_u = dist[u] - dist[meet]
        from_v = dist[v] - dist[meet]
        half = (from_u + from_v + 1) // 2
        if from_u >= half:
            node, rest = climb(u, half)
            answers.append(node if rest == 0 else parent[node])
        else:
            node, _ = climb(v, from_v - (half - from_u))
            answers.append(node)
    return answers