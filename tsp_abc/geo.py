import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np


EARTH_RADIUS_KM = 6371.0

Coordinate = Tuple[float, float]


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float

    @property
    def coordinates(self) -> Coordinate:
        return (self.latitude, self.longitude)


def haversine(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in kilometers between two (lat, lon) pairs."""
    lat1, lon1 = a
    lat2, lon2 = b
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def bounding_box(locations: Sequence[Location]) -> Tuple[float, float, float, float]:
    """Return (min_lat, max_lat, min_lon, max_lon) over the locations."""
    if not locations:
        raise ValueError("Bounding box of an empty location set is undefined.")
    coords = np.array([loc.coordinates for loc in locations], dtype=float)
    mins = coords.min(axis=0)
    maxs = coords.max(axis=0)
    return float(mins[0]), float(maxs[0]), float(mins[1]), float(maxs[1])
