# pathfinding.py

from collections import deque
import math

import networkx as nx # type: ignore

from graph_utils import check_place


def find_route(G, start, goal):
    """Shortest route from ``start`` to ``goal`` by hop count.

    Routes are grown outward from ``start`` one road at a time; the first
    route that reaches ``goal`` is returned. The route excludes ``start`` and
    ends with ``goal``. Returns None when ``goal`` cannot be reached.
    """
    check_place(G, start)
    check_place(G, goal)
    if start == goal:
        return []
    work = [(start, [])]
    enqueued = {start}
    i = 0
    while i < len(work):
        at, route = work[i]
        i += 1
        for place in G.neighbors(at):
            if place == goal:
                return route + [place]
            if place not in enqueued:
                enqueued.add(place)
                work.append((place, route + [place]))
    return None


def calculate_distance(G, start, goal):
    """Number of roads between two places, or ``math.inf`` if unreachable."""
    check_place(G, start)
    check_place(G, goal)
    visited = set()
    queue = deque([(start, 0)])
    while queue:
        current, distance = queue.popleft()
        if current == goal:
            return distance
        if current in visited:
            continue
        visited.add(current)
        for nbr in G.neighbors(current):
            if nbr not in visited:
                queue.append((nbr, distance + 1))
    return math.inf


def build_mail_route(G, start):
    """Closed tour from ``start`` through every place reachable from it.

    Places are visited in depth-first preorder, consecutive places joined by
    their shortest route, and the tour ends back at ``start``.
    """
    check_place(G, start)
    tour = []
    at = start
    order = list(nx.dfs_preorder_nodes(G, source=start))
    for place in order[1:] + [start]:
        tour.extend(find_route(G, at, place))
        at = place
    return tour
