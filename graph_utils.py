# graph_utils.py

import networkx as nx # type: ignore
import random

# The village: 11 places joined by 14 roads.
VILLAGE_ROADS = [
    "Alice's House-Bob's House",
    "Alice's House-Cabin",
    "Alice's House-Post Office",
    "Bob's House-Town Hall",
    "Daria's House-Ernie's House",
    "Daria's House-Town Hall",
    "Ernie's House-Grete's House",
    "Grete's House-Farm",
    "Grete's House-Shop",
    "Marketplace-Post Office",
    "Marketplace-Town Hall",
    "Marketplace-Farm",
    "Marketplace-Shop",
    "Shop-Town Hall",
]

HUB = "Post Office"

MAX_GRAPH_ATTEMPTS = 20


class UnknownLocation(KeyError):
    """Raised when a place is looked up that the road graph does not contain."""

    def __init__(self, place):
        super().__init__(place)
        self.place = place

    def __str__(self):
        return f"unknown location: {self.place!r}"


class InvalidEdgeFormat(ValueError):
    """Raised for a road descriptor that is not of the form 'A-B'."""


def _split_road(road):
    ends = road.split("-")
    if len(ends) != 2 or not all(ends):
        raise InvalidEdgeFormat(f"road {road!r} is not of the form 'A-B'")
    return ends[0], ends[1]


def build_road_graph(edges):
    """Build a frozen undirected graph from 'A-B' road descriptors.

    Neighbors iterate in the order roads were given, so searches over the
    result are reproducible.
    """
    G = nx.Graph()
    for road in edges:
        u, v = _split_road(road)
        G.add_edge(u, v)
    return nx.freeze(G)


def create_random_road_graph(nodes, max_degree, seed):
    """Random connected road graph with places named 'Place 0', 'Place 1', ...

    Sparse graphs are rarely connected on their own; after
    MAX_GRAPH_ATTEMPTS draws the last one is stitched together with one
    extra road between each pair of consecutive components.
    """
    if nodes < 2:
        raise ValueError(f"a road graph needs at least 2 places, got {nodes}")
    m = max(nodes - 1, (nodes * max_degree) // 2)
    for attempt in range(MAX_GRAPH_ATTEMPTS):
        G = nx.gnm_random_graph(nodes, m, seed=seed + attempt)
        if nx.is_connected(G):
            break
    else:
        rng = random.Random(seed)
        components = [sorted(c) for c in nx.connected_components(G)]
        for a, b in zip(components, components[1:]):
            G.add_edge(rng.choice(a), rng.choice(b))
    G = nx.relabel_nodes(G, {u: f"Place {u}" for u in G.nodes()})
    return nx.freeze(G)


def check_place(G, place):
    if place not in G:
        raise UnknownLocation(place)


def neighbors(G, place):
    check_place(G, place)
    return list(G.neighbors(place))


def places(G):
    return list(G.nodes())
