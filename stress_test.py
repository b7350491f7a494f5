# stress_test.py
import random
import traceback

import graph_utils
from pathfinding import build_mail_route
from robots import ROBOTS, make_robot
from simulation import run_robot
from world_state import WorldState


GREEN = "\033[92m"
RED   = "\033[91m"
BOLD  = "\033[1m"
RESET = "\033[0m"

# Random walks need far more turns than the others; this only catches hangs.
MAX_TURNS = 100_000


def run_one(nodes: int, parcel_count: int, degree: int, seed: int):
    G = graph_utils.create_random_road_graph(nodes, degree, seed)
    hub = graph_utils.places(G)[0]
    rng = random.Random(seed)
    task = WorldState.random(G, parcel_count, hub, rng)
    turns = {}
    for name in sorted(ROBOTS):
        robot = make_robot(name, G, rng, hub)
        turns[name] = run_robot(task, robot, max_turns=MAX_TURNS)
    # Two laps of the tour always finish the job.
    laps = 2 * len(build_mail_route(G, hub))
    if turns["route"] > laps:
        raise AssertionError(f"route robot took {turns['route']} turns, more than two laps ({laps})")
    return turns

def main():
    rng = random.Random(0)

    degree = 3
    num_tests = 200

    tests = [(rng.randint(2, 30), rng.randint(0, 10), rng.randint(0, 10_000))
             for _ in range(num_tests)]

    failures = 0

    for i, (nodes, parcel_count, seed) in enumerate(tests, start=1):
        try:
            turns = run_one(nodes, parcel_count, degree, seed)
            summary = ", ".join(f"{name}={t}" for name, t in turns.items())
            print(f"[{i:03d}/{num_tests}] nodes={nodes:2d}, parcels={parcel_count:2d}, seed={seed:5d}  "
                  f"{GREEN}{BOLD}PASSED{RESET}  {summary}")
        except Exception:
            failures += 1
            print(f"[{i:03d}/{num_tests}] nodes={nodes:2d}, parcels={parcel_count:2d}, seed={seed:5d}  "
                  f"{RED}{BOLD}FAILED{RESET}")
            print(f"{RED}{traceback.format_exc()}{RESET}")

            # Uncomment to stop on first failure:
            # break

    if failures == 0:
        print(f"\n{GREEN}{BOLD}ALL {num_tests} TESTS PASSED ✅{RESET}")
    else:
        print(f"\n{RED}{BOLD}{failures}/{num_tests} TESTS FAILED ❌{RESET}")


if __name__ == "__main__":
    main()
