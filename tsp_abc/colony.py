import random
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from .evaluation import fitness_of, tour_distance
from .geo import Coordinate, Location, bounding_box
from .operators import random_tour


EMPLOYED = "employed"
ONLOOKER = "onlooker"
SCOUT = "scout"


class ColonyConfigError(ValueError):
    """Raised when a colony cannot be formed from the given settings."""


@dataclass
class ColonyConfig:
    population_size: int = 50
    limit: int = 50
    employed_fraction: float = 0.5
    onlooker_fraction: float = 0.3
    random_seed: int = 123

    def partition(self) -> Tuple[int, int, int]:
        if self.population_size < 3:
            raise ColonyConfigError(
                f"population_size must be at least 3, got {self.population_size}."
            )
        if not 0.0 < self.employed_fraction < 1.0 or not 0.0 < self.onlooker_fraction < 1.0:
            raise ColonyConfigError("Role fractions must lie strictly between 0 and 1.")
        if self.limit < 1:
            raise ColonyConfigError(f"limit must be positive, got {self.limit}.")
        employed = int(self.population_size * self.employed_fraction)
        onlooker = int(self.population_size * self.onlooker_fraction)
        scout = self.population_size - employed - onlooker
        if employed < 1 or scout < 0:
            raise ColonyConfigError(
                f"population_size={self.population_size} cannot be split into "
                f"employed={employed}, onlooker={onlooker}, scout={scout}."
            )
        return employed, onlooker, scout


@dataclass(frozen=True)
class Bee:
    role: str
    tour: Tuple[int, ...] = ()
    distance: float = 0.0
    fitness: float = 0.0
    trials: int = 0
    # Employed index an onlooker last reinforced.
    target: Optional[int] = None


@dataclass(frozen=True)
class BestSolution:
    path: Tuple[int, ...]
    distance: float
    fitness: float


@dataclass(frozen=True)
class ColonyState:
    employed: Tuple[Bee, ...]
    onlookers: Tuple[Bee, ...]
    scouts: Tuple[Bee, ...]
    best_solution: BestSolution
    last_improvement_iteration: int = 0
    # (min_lat, max_lat, min_lon, max_lon) over the locations.
    bounds: Optional[Tuple[float, float, float, float]] = None

    @property
    def bees(self) -> Tuple[Bee, ...]:
        return self.employed + self.onlookers + self.scouts


def employed_bee(tour: Sequence[int], locations: Sequence[Location], origin: Coordinate, trials: int = 0) -> Bee:
    distance = tour_distance(tour, locations, origin)
    return Bee(role=EMPLOYED, tour=tuple(tour), distance=distance, fitness=fitness_of(distance), trials=trials)


def best_of(employed: Sequence[Bee]) -> Bee:
    best = employed[0]
    for bee in employed[1:]:
        if bee.fitness > best.fitness:
            best = bee
    return best


def initialize(
    locations: Sequence[Location],
    origin: Coordinate,
    population_size: Optional[int] = None,
    config: Optional[ColonyConfig] = None,
    rng: Optional[random.Random] = None,
) -> ColonyState:
    """Build the starting colony: random employed tours plus idle onlookers and scouts.

    ``population_size`` overrides ``config.population_size`` when given.
    Raises ColonyConfigError for an unpartitionable population or an empty
    location set.
    """
    cfg = config or ColonyConfig()
    if population_size is not None:
        cfg = replace(cfg, population_size=population_size)
    employed_count, onlooker_count, scout_count = cfg.partition()
    if not locations:
        raise ColonyConfigError("Cannot build a tour over an empty location set.")
    rng = rng or random.Random()
    n = len(locations)
    employed = tuple(
        employed_bee(random_tour(n, rng), locations, origin) for _ in range(employed_count)
    )
    onlookers = tuple(Bee(role=ONLOOKER) for _ in range(onlooker_count))
    scouts = tuple(Bee(role=SCOUT) for _ in range(scout_count))
    best = best_of(employed)
    return ColonyState(
        employed=employed,
        onlookers=onlookers,
        scouts=scouts,
        best_solution=BestSolution(path=best.tour, distance=best.distance, fitness=best.fitness),
        last_improvement_iteration=0,
        bounds=bounding_box(locations),
    )
