# world_state.py

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple
import random

from graph_utils import HUB, check_place, places

DEFAULT_PARCEL_COUNT = 5


@dataclass(frozen=True)
class Parcel:
    place: str      # where the parcel currently is
    address: str    # where it has to go


@dataclass(frozen=True)
class WorldState:
    """Immutable snapshot of the village: where the robot is and which
    parcels are still undelivered.

    A parcel sitting at the robot's place counts as carried: it travels with
    the robot on the next move and is dropped once it reaches its address.
    The road graph rides along by reference and takes no part in equality.
    """
    place: str
    parcels: Tuple[Parcel, ...]
    graph: Any = field(compare=False, repr=False)

    def __post_init__(self):
        if self.graph is None:
            raise ValueError("WorldState needs a road graph")
        check_place(self.graph, self.place)
        # A parcel already at its address counts as delivered.
        parcels = tuple(p for p in self.parcels if p.place != p.address)
        object.__setattr__(self, "parcels", parcels)

    @property
    def solved(self) -> bool:
        return len(self.parcels) == 0

    def move(self, destination: str) -> "WorldState":
        """Move the robot to a neighboring place.

        NOTE: a destination that is not a neighbor of the current place is
        not an error. The move is ignored and this same state is returned.
        """
        if destination not in self.graph[self.place]:
            return self
        parcels = []
        for p in self.parcels:
            if p.place == self.place:
                p = Parcel(destination, p.address)
            if p.place != p.address:
                parcels.append(p)
        return WorldState(destination, tuple(parcels), self.graph)

    @classmethod
    def random(cls, graph, parcel_count: int = DEFAULT_PARCEL_COUNT,
               hub: str = HUB, rng: Optional[random.Random] = None) -> "WorldState":
        """Random task: ``parcel_count`` parcels, each addressed somewhere
        other than where it starts, and the robot waiting at ``hub``."""
        if parcel_count < 0:
            raise ValueError(f"parcel_count must be >= 0, got {parcel_count}")
        rng = rng or random
        names = places(graph)
        if parcel_count > 0 and len(names) < 2:
            raise ValueError("parcels need at least two places to travel between")
        parcels = []
        for _ in range(parcel_count):
            address = rng.choice(names)
            place = rng.choice(names)
            while place == address:
                place = rng.choice(names)
            parcels.append(Parcel(place, address))
        return cls(hub, tuple(parcels), graph)
