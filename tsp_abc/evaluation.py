import math
from typing import Sequence

from .geo import Coordinate, Location, haversine


# Distance assigned to tours that cannot be measured; keeps fitness finite.
SENTINEL_DISTANCE = float(2**53 - 1)


def tour_distance(tour: Sequence[int], locations: Sequence[Location], origin: Coordinate) -> float:
    """Closed length origin -> tour[0] -> ... -> tour[-1] -> origin in km."""
    if len(tour) == 0:
        return SENTINEL_DISTANCE
    coords = [locations[i].coordinates for i in tour]
    dist = haversine(origin, coords[0])
    for a, b in zip(coords, coords[1:]):
        dist += haversine(a, b)
    dist += haversine(coords[-1], origin)
    if not math.isfinite(dist) or dist <= 0.0:
        return SENTINEL_DISTANCE
    return float(dist)


def fitness_of(distance: float) -> float:
    if not math.isfinite(distance) or distance <= 0.0:
        distance = SENTINEL_DISTANCE
    return 1.0 / distance


def tour_fitness(tour: Sequence[int], locations: Sequence[Location], origin: Coordinate) -> float:
    return fitness_of(tour_distance(tour, locations, origin))
