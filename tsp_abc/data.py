import json
from pathlib import Path
from typing import List, Tuple

import tsplib95

from .geo import Coordinate, Location


def _geo_degrees(value: float) -> float:
    # TSPLIB GEO coordinates are DDD.MM (degrees and minutes).
    deg = int(value)
    minutes = value - deg
    return deg + 5.0 * minutes / 3.0


def load_tsplib_locations(path: Path) -> List[Location]:
    problem = tsplib95.load(path)
    weight_type = (problem.edge_weight_type or "").upper()
    if weight_type != "GEO":
        raise ValueError(
            f"{path} uses EDGE_WEIGHT_TYPE={weight_type or 'none'}; only GEO instances carry latitude/longitude."
        )
    return [
        Location(name=str(node), latitude=_geo_degrees(x), longitude=_geo_degrees(y))
        for node, (x, y) in sorted(problem.node_coords.items())
    ]


def load_json_locations(path: Path) -> List[Location]:
    records = json.loads(Path(path).read_text())
    if not isinstance(records, list):
        raise ValueError(f"{path} must contain a list of location records.")
    locations = []
    for i, item in enumerate(records):
        try:
            lat, lon = item["coordinates"]
            name = str(item.get("name", i))
            latitude, longitude = float(lat), float(lon)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"{path}: malformed location record at index {i}: {item!r}") from exc
        locations.append(Location(name=name, latitude=latitude, longitude=longitude))
    return locations


def load_locations(path: Path) -> List[Location]:
    path = Path(path)
    if path.suffix.lower() == ".json":
        return load_json_locations(path)
    return load_tsplib_locations(path)


def split_origin(locations: List[Location]) -> Tuple[Coordinate, List[Location]]:
    """Use the first location as the origin and return the remaining destinations."""
    if not locations:
        raise ValueError("No locations to pick an origin from.")
    return locations[0].coordinates, locations[1:]


def parse_coordinate(text: str) -> Coordinate:
    try:
        lat_s, lon_s = text.split(",")
        return float(lat_s), float(lon_s)
    except ValueError as exc:
        raise ValueError(f"Expected 'LAT,LON', got {text!r}") from exc
