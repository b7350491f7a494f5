import random

import pytest

from graph_utils import VILLAGE_ROADS, build_road_graph


@pytest.fixture
def village():
    return build_road_graph(VILLAGE_ROADS)


@pytest.fixture
def line():
    # A - B - C
    return build_road_graph(["A-B", "B-C"])


@pytest.fixture
def rng():
    return random.Random(1234)
