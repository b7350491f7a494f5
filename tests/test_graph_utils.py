"""Road graph construction and lookups."""

import networkx as nx
import pytest

import graph_utils
from graph_utils import (
    InvalidEdgeFormat,
    UnknownLocation,
    build_road_graph,
    create_random_road_graph,
    neighbors,
    places,
)


def test_village_has_eleven_places_and_fourteen_roads(village):
    assert village.number_of_nodes() == 11
    assert village.number_of_edges() == 14
    assert graph_utils.HUB in village


def test_roads_are_two_way(village):
    for a in places(village):
        for b in places(village):
            assert (b in neighbors(village, a)) == (a in neighbors(village, b))


def test_neighbors_keep_registration_order():
    G = build_road_graph(["A-C", "A-B", "D-A"])
    assert neighbors(G, "A") == ["C", "B", "D"]
    assert neighbors(G, "D") == ["A"]


def test_unknown_place_raises(line):
    with pytest.raises(UnknownLocation) as excinfo:
        neighbors(line, "Z")
    assert excinfo.value.place == "Z"
    assert isinstance(excinfo.value, KeyError)


@pytest.mark.parametrize("road", ["AB", "A-", "-B", "A-B-C", ""])
def test_malformed_roads_are_rejected(road):
    with pytest.raises(InvalidEdgeFormat):
        build_road_graph([road])


def test_graph_is_frozen(line):
    assert nx.is_frozen(line)
    with pytest.raises(nx.NetworkXError):
        line.add_edge("C", "D")


def test_random_road_graph_is_connected_and_named():
    G = create_random_road_graph(12, 3, seed=7)
    assert G.number_of_nodes() == 12
    assert nx.is_connected(G)
    assert places(G)[0] == "Place 0"
    assert nx.is_frozen(G)


def test_random_road_graph_is_reproducible():
    a = create_random_road_graph(15, 3, seed=3)
    b = create_random_road_graph(15, 3, seed=3)
    assert list(a.edges()) == list(b.edges())


def test_random_road_graph_needs_two_places():
    with pytest.raises(ValueError):
        create_random_road_graph(1, 3, seed=0)


def test_sparse_random_road_graph_is_still_connected():
    G = create_random_road_graph(50, 1, seed=0)
    assert G.number_of_nodes() == 50
    assert nx.is_connected(G)
