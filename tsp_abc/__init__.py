"""
Route planning over geographic locations with an artificial bee colony.
"""

from .colony import Bee, BestSolution, ColonyConfig, ColonyConfigError, ColonyState, initialize
from .engine import step
from .evaluation import SENTINEL_DISTANCE, tour_distance, tour_fitness
from .geo import Location, haversine

__all__ = [
    "Bee",
    "BestSolution",
    "ColonyConfig",
    "ColonyConfigError",
    "ColonyState",
    "Location",
    "SENTINEL_DISTANCE",
    "haversine",
    "initialize",
    "step",
    "tour_distance",
    "tour_fitness",
]
