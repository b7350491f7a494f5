# robots.py
#
# A robot looks at the world and decides where to go next. Every robot is a
# plain callable ``robot(state, memory) -> Action``; whatever it needs to
# remember between turns goes into the returned memory, never onto itself.

from dataclasses import dataclass
from typing import NamedTuple, Tuple
import math
import random

from graph_utils import HUB
from pathfinding import build_mail_route, calculate_distance, find_route

# One closed tour through the village, starting and ending at the post office.
MAIL_ROUTE = (
    "Alice's House",
    "Cabin",
    "Alice's House",
    "Bob's House",
    "Town Hall",
    "Daria's House",
    "Ernie's House",
    "Grete's House",
    "Shop",
    "Grete's House",
    "Farm",
    "Marketplace",
    "Post Office",
)


@dataclass(frozen=True)
class RouteMemory:
    """Steps still to walk. Empty means no route is in progress."""
    steps: Tuple[str, ...] = ()

    @property
    def empty(self) -> bool:
        return len(self.steps) == 0

    def pop(self):
        return self.steps[0], RouteMemory(self.steps[1:])


NO_ROUTE = RouteMemory()


class Action(NamedTuple):
    direction: str
    memory: RouteMemory = NO_ROUTE


def _follow(route):
    direction, rest = RouteMemory(tuple(route)).pop()
    return Action(direction, rest)


def _route_to(state, target):
    route = find_route(state.graph, state.place, target)
    if route is None:
        raise RuntimeError(f"no road leads from {state.place!r} to {target!r}")
    return route


def _next_stop(parcel, place):
    # Not yet picked up: go get it. Carried: take it home.
    return parcel.place if parcel.place != place else parcel.address


# ----------------------------------------------------------------------
# RANDOM
# ----------------------------------------------------------------------

def make_random_robot(rng=None):
    rng = rng or random

    def random_robot(state, memory=NO_ROUTE):
        return Action(rng.choice(list(state.graph.neighbors(state.place))), memory)

    return random_robot


random_robot = make_random_robot()


# ----------------------------------------------------------------------
# FIXED ROUTE
# ----------------------------------------------------------------------

def make_route_robot(tour):
    """Robot that walks ``tour`` over and over.

    Two laps are always enough: every parcel is picked up somewhere on the
    first and dropped off somewhere on the second.
    """
    tour = tuple(tour)
    if not tour:
        raise ValueError("route robot needs a non-empty tour")

    def route_robot(state, memory=NO_ROUTE):
        if memory.empty:
            memory = RouteMemory(tour)
        direction, rest = memory.pop()
        return Action(direction, rest)

    return route_robot


route_robot = make_route_robot(MAIL_ROUTE)


# ----------------------------------------------------------------------
# GOAL ORIENTED
# ----------------------------------------------------------------------

def goal_oriented_robot(state, memory=NO_ROUTE):
    """Deal with the first parcel on the list, one parcel at a time."""
    if not memory.empty:
        return Action(*memory.pop())
    if state.solved:
        raise ValueError("goal_oriented_robot called with nothing left to deliver")
    parcel = state.parcels[0]
    return _follow(_route_to(state, _next_stop(parcel, state.place)))


# ----------------------------------------------------------------------
# QUICKNESS
# ----------------------------------------------------------------------

def find_closest_parcel(G, place, parcels):
    """Parcel whose next stop is fewest roads away; the first one wins ties."""
    closest = None
    shortest = math.inf
    for parcel in parcels:
        distance = calculate_distance(G, place, _next_stop(parcel, place))
        if distance < shortest:
            shortest = distance
            closest = parcel
    return closest


def quickness_robot(state, memory=NO_ROUTE):
    """Like goal_oriented_robot, but always heads for the nearest errand."""
    if not memory.empty:
        return Action(*memory.pop())
    if state.solved:
        raise ValueError("quickness_robot called with nothing left to deliver")
    parcel = find_closest_parcel(state.graph, state.place, state.parcels)
    if parcel is None:
        raise RuntimeError(f"no parcel is reachable from {state.place!r}")
    return _follow(_route_to(state, _next_stop(parcel, state.place)))


# ----------------------------------------------------------------------
# REGISTRY
# ----------------------------------------------------------------------

def _walks(G, start, tour):
    at = start
    for place in tour:
        if at not in G or place not in G[at]:
            return False
        at = place
    return at == start


def _route_robot_for(G, rng=None, hub=HUB):
    if set(MAIL_ROUTE) == set(G.nodes()) and _walks(G, hub, MAIL_ROUTE):
        return route_robot
    return make_route_robot(build_mail_route(G, hub))


ROBOTS = {
    "random": lambda G, rng=None, hub=HUB: make_random_robot(rng),
    "route": _route_robot_for,
    "goal": lambda G, rng=None, hub=HUB: goal_oriented_robot,
    "quickness": lambda G, rng=None, hub=HUB: quickness_robot,
}


def make_robot(name, G, rng=None, hub=HUB):
    """Look up a robot by its CLI name, ready to run on ``G`` from ``hub``."""
    try:
        factory = ROBOTS[name]
    except KeyError:
        raise ValueError(f"unknown robot {name!r}; choose from {sorted(ROBOTS)}") from None
    return factory(G, rng, hub)
