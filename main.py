# main.py

import argparse
import datetime
import json
import logging
import os
import random
import sys

import graph_utils
from robots import ROBOTS, make_robot
from simulation import DEFAULT_TASKS, TurnLimitExceeded, compare_robots, run_robot
from world_state import DEFAULT_PARCEL_COUNT, WorldState

DEFAULT_SEED = 42
DEFAULT_RANDOM_NODES = 11
DEFAULT_MAX_DEGREE = 3

log = logging.getLogger("main")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Run delivery robots around the village and compare how many turns they need."
    )
    parser.add_argument(
        "--output-dir", "-o",
        help="Directory to save the results as a timestamped JSON file. If not provided, prints JSON to stdout.",
        metavar="DIRECTORY"
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed")
    parser.add_argument("--parcels", type=int, default=DEFAULT_PARCEL_COUNT, help="Parcels per task")
    parser.add_argument("--max-turns", type=int, default=None,
                        help="Give up on a task after this many turns (default: no limit)")
    parser.add_argument("--random-graph", type=int, default=None, metavar="NODES",
                        help="Use a random road graph with this many places instead of the village")
    parser.add_argument("--max-degree", type=int, default=DEFAULT_MAX_DEGREE,
                        help="Average roads per place for --random-graph")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every move")

    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Run one robot on one random task")
    run.add_argument("--robot", choices=sorted(ROBOTS), default="quickness")

    compare = sub.add_parser("compare", help="Compare two robots on the same random tasks")
    compare.add_argument("robot1", choices=sorted(ROBOTS))
    compare.add_argument("robot2", choices=sorted(ROBOTS))
    compare.add_argument("--tasks", type=int, default=DEFAULT_TASKS, help="Number of tasks")
    return parser


def load_graph(args):
    """Road graph and hub the robots start from."""
    if args.random_graph is None:
        return graph_utils.build_road_graph(graph_utils.VILLAGE_ROADS), graph_utils.HUB
    G = graph_utils.create_random_road_graph(args.random_graph, args.max_degree, args.seed)
    return G, graph_utils.places(G)[0]


def run_command(args, G, hub, rng):
    robot = make_robot(args.robot, G, rng, hub)
    task = WorldState.random(G, args.parcels, hub, rng)
    turns = run_robot(task, robot, max_turns=args.max_turns)
    return {
        "command": "run",
        "robot": args.robot,
        "seed": args.seed,
        "start": task.place,
        "parcels": [{"place": p.place, "address": p.address} for p in task.parcels],
        "turns": turns,
    }


def compare_command(args, G, hub, rng):
    robot1 = make_robot(args.robot1, G, rng, hub)
    robot2 = make_robot(args.robot2, G, rng, hub)
    result = compare_robots(robot1, robot2, args.tasks, G, args.parcels, hub, rng, args.max_turns)
    return {
        "command": "compare",
        "seed": args.seed,
        "tasks": args.tasks,
        "parcels": args.parcels,
        "robots": [
            {"name": args.robot1, "average_turns": result.robot1.average_turns},
            {"name": args.robot2, "average_turns": result.robot2.average_turns},
        ],
    }


def save_result(result, output_dir):
    os.makedirs(output_dir, exist_ok=True)
    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    filepath = os.path.join(output_dir, f"{result['command']}_{timestamp}.json")
    with open(filepath, 'w') as f:
        json.dump(result, f, indent=2)
    return filepath


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    rng = random.Random(args.seed)

    try:
        G, hub = load_graph(args)
        log.info("Road graph has %d places and %d roads, hub %s",
                 G.number_of_nodes(), G.number_of_edges(), hub)
        if args.command == "run":
            result = run_command(args, G, hub, rng)
        else:
            result = compare_command(args, G, hub, rng)
    except (ValueError, KeyError, TurnLimitExceeded) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output_dir:
        try:
            filepath = save_result(result, args.output_dir)
        except OSError as e:
            print(f"Error saving results to {args.output_dir}: {e}", file=sys.stderr)
            return 1
        print(f"Results saved to {filepath}", file=sys.stderr)
    else:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
