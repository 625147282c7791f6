"""Shortest-path searches over a route graph and totals along a path."""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Mapping, Sequence

from .graph import COST, DISTANCE, TIME, Graph, Vertex
from .preference import Preference

DISTANCE_SCALE = 111.0
"""Approximate kilometres per degree at the equator, used by the A* heuristic."""

_CRITERIA_TYPES = {"distance": DISTANCE, "time": TIME, "cost": COST}


class NoPathError(RuntimeError):
    """Raised when no path joins the start and goal vertices."""


def reconstruct_path(came_from: Mapping[str, str], start: str, end: str) -> list[str]:
    """Follow predecessor links back from ``end`` to ``start``.

    Returns an empty list when ``end`` cannot be traced back to ``start``.
    """
    if end not in came_from and start != end:
        return []
    path = []
    current = end
    while current != start:
        path.append(current)
        if current not in came_from:
            return []
        current = came_from[current]
    path.append(start)
    path.reverse()
    return path


def dijkstra_shortest_path(
    graph: Graph, start: str, goal: str, preferences: Preference
) -> list[str]:
    """Return the path from ``start`` to ``goal`` with the least total edge distance.

    The preferences are accepted for the caller's convenience; edges are ranked
    by distance. An empty list means the goal cannot be reached.
    """
    came_from: dict[str, str] = {}
    cost_so_far: dict[str, float] = {start: 0.0}
    frontier: list[tuple[float, str]] = [(0.0, start)]

    while frontier:
        _, current = heapq.heappop(frontier)
        if current == goal:
            break
        for nxt in graph.neighbors(current):
            new_cost = cost_so_far[current] + graph.edge_weight(current, nxt, DISTANCE)
            if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                cost_so_far[nxt] = new_cost
                came_from[nxt] = current
                heapq.heappush(frontier, (new_cost, nxt))

    return reconstruct_path(came_from, start, goal)


def heuristic(current: Vertex, goal: Vertex) -> float:
    """Straight-line distance between two vertices, scaled to kilometres."""
    dx = current.longitude - goal.longitude
    dy = current.latitude - goal.latitude
    return math.sqrt(dx * dx + dy * dy) * DISTANCE_SCALE


def astar_path(graph: Graph, start: str, goal: str) -> list[str]:
    """Return a path from ``start`` to ``goal`` found by A* over edge distances."""
    if not graph.has_vertex(start) or not graph.has_vertex(goal):
        raise ValueError("Start or goal vertex not found in graph")

    goal_vertex = graph.vertex(goal)
    g_score: dict[str, float] = {start: 0.0}
    came_from: dict[str, str] = {}
    order = itertools.count()
    frontier: list[tuple[float, int, str]] = [
        (heuristic(graph.vertex(start), goal_vertex), next(order), start)
    ]

    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current == goal:
            path = []
            while current != start:
                path.append(current)
                current = came_from[current]
            path.append(start)
            path.reverse()
            return path

        for neighbor in graph.neighbors(current):
            tentative = g_score[current] + graph.edge_weight(current, neighbor)
            if neighbor not in g_score or tentative < g_score[neighbor]:
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f_score = tentative + heuristic(graph.vertex(neighbor), goal_vertex)
                heapq.heappush(frontier, (f_score, next(order), neighbor))

    raise NoPathError("No path found between start and goal")


def _sum_weights(graph: Graph, path: Sequence[str], preference_type: int) -> float:
    return sum(
        (graph.edge_weight(a, b, preference_type) for a, b in zip(path, path[1:])),
        0.0,
    )


def path_distance(graph: Graph, path: Sequence[str]) -> float:
    """Total distance along consecutive vertices of ``path``."""
    return _sum_weights(graph, path, DISTANCE)


def path_time(graph: Graph, path: Sequence[str]) -> float:
    """Total travel time along consecutive vertices of ``path``."""
    return _sum_weights(graph, path, TIME)


def path_cost(graph: Graph, path: Sequence[str]) -> float:
    """Total cost along consecutive vertices of ``path``."""
    return _sum_weights(graph, path, COST)


def path_total(graph: Graph, path: Sequence[str], criteria: str) -> float:
    """Total of ``path`` under a named criterion.

    ``"transfers"`` counts one per hop; unknown names fall back to distance.
    """
    if criteria == "transfers":
        return float(max(len(path) - 1, 0))
    return _sum_weights(graph, path, _CRITERIA_TYPES.get(criteria, DISTANCE))