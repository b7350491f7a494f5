# simulation.py

from typing import NamedTuple
import logging
import random

from graph_utils import HUB, VILLAGE_ROADS, build_road_graph
from robots import NO_ROUTE
from world_state import DEFAULT_PARCEL_COUNT, WorldState

DEFAULT_TASKS = 100

log = logging.getLogger(__name__)


class TurnLimitExceeded(RuntimeError):
    def __init__(self, robot_name, max_turns):
        super().__init__(f"{robot_name} still busy after {max_turns} turns")
        self.robot_name = robot_name
        self.max_turns = max_turns


class RobotScore(NamedTuple):
    name: str
    average_turns: float


class Comparison(NamedTuple):
    robot1: RobotScore
    robot2: RobotScore


def robot_name(robot):
    return getattr(robot, "__name__", type(robot).__name__)


def run_robot(state, robot, memory=None, max_turns=None):
    """Let ``robot`` drive until every parcel is delivered; return the turns taken.

    There is no turn limit unless ``max_turns`` is given, so a robot that
    never delivers keeps the loop going forever.
    """
    if memory is None:
        memory = NO_ROUTE
    name = robot_name(robot)
    turn = 0
    while not state.solved:
        if max_turns is not None and turn >= max_turns:
            raise TurnLimitExceeded(name, max_turns)
        action = robot(state, memory)
        state = state.move(action.direction)
        memory = action.memory
        log.debug("Moved to %s", action.direction)
        turn += 1
    log.info("%s done in %d turns", name, turn)
    return turn


def compare_robots(robot1, robot2, tasks=DEFAULT_TASKS, graph=None,
                   parcel_count=DEFAULT_PARCEL_COUNT, hub=HUB, rng=None,
                   max_turns=None):
    """Average turns of two robots over the same ``tasks`` random tasks."""
    if tasks < 1:
        raise ValueError(f"tasks must be >= 1, got {tasks}")
    if graph is None:
        graph = build_road_graph(VILLAGE_ROADS)
    rng = rng or random
    total1 = 0
    total2 = 0
    for _ in range(tasks):
        task = WorldState.random(graph, parcel_count, hub, rng)
        total1 += run_robot(task, robot1, NO_ROUTE, max_turns)
        total2 += run_robot(task, robot2, NO_ROUTE, max_turns)
    return Comparison(
        RobotScore(robot_name(robot1), total1 / tasks),
        RobotScore(robot_name(robot2), total2 / tasks),
    )
