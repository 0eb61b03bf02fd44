"""Graph and scheduling algorithms."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from collections.abc import Iterable, Sequence


def _adjacency(n: int, edges: Iterable[Sequence[int]], directed: bool) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u].append(v)
        if not directed:
            adjacency[v].append(u)
    return adjacency


def _bfs_distances(adjacency: Sequence[Sequence[int]], source: int) -> dict[int, int]:
    distances = {source: 0}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for child in adjacency[node]:
            if child not in distances:
                distances[child] = distances[node] + 1
                queue.append(child)
    return distances


def valid_path(
    n: int, edges: Iterable[Sequence[int]], source: int, destination: int
) -> bool:
    """Whether ``destination`` is reachable from ``source`` in an undirected graph."""
    adjacency = _adjacency(n, edges, directed=False)
    return destination in _bfs_distances(adjacency, source)


def maximum_importance(n: int, roads: Iterable[Sequence[int]]) -> int:
    """Largest total importance when cities get distinct values 1..n."""
    degree = Counter(city for road in roads for city in road)
    ranked = sorted(degree[city] for city in range(n))
    return sum(deg * value for value, deg in enumerate(ranked, start=1))


def most_booked(n: int, meetings: Iterable[Sequence[int]]) -> int:
    """Room that held the most meetings; ties go to the lowest-numbered room.

    Meetings take the lowest free room; if none is free they are delayed
    until the earliest room frees up, keeping their duration.
    """
    free = list(range(n))
    busy: list[tuple[int, int]] = []
    used = [0] * n
    for start, end in sorted(tuple(m) for m in meetings):
        while busy and busy[0][0] <= start:
            _, room = heapq.heappop(busy)
            heapq.heappush(free, room)
        if free:
            room = heapq.heappop(free)
            heapq.heappush(busy, (end, room))
        else:
            finish, room = heapq.heappop(busy)
            heapq.heappush(busy, (finish + end - start, room))
        used[room] += 1
    return max(range(n), key=lambda room: (used[room], -room), default=0)


def find_champion(n: int, edges: Iterable[Sequence[int]]) -> int:
    """The unique team nobody beats, or -1 if there is not exactly one."""
    beaten = {loser for _, loser in edges}
    unbeaten = [team for team in range(n) if team not in beaten]
    return unbeaten[0] if len(unbeaten) == 1 else -1


def shortest_distance_after_queries(
    n: int, queries: Iterable[Sequence[int]]
) -> list[int]:
    """Shortest path from city 0 to city n-1 after each one-way road is added."""
    adjacency = [[i + 1] for i in range(n - 1)] + [[]]
    answer = []
    for u, v in queries:
        adjacency[u].append(v)
        answer.append(_bfs_distances(adjacency, 0)[n - 1])
    return answer