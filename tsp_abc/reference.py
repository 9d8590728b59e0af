import itertools
from typing import List, Sequence, Tuple

import networkx as nx
import numpy as np

from .geo import Coordinate, Location, haversine


MAX_BRUTE_FORCE = 9


def distance_matrix(locations: Sequence[Location], origin: Coordinate) -> np.ndarray:
    """Pairwise haversine distances; row/column N is the origin."""
    points = [loc.coordinates for loc in locations] + [tuple(origin)]
    n = len(points)
    mat = np.zeros((n, n), dtype=float)
    for i in range(n):
        for j in range(i + 1, n):
            mat[i, j] = mat[j, i] = haversine(points[i], points[j])
    return mat


def location_graph(locations: Sequence[Location], origin: Coordinate) -> nx.Graph:
    """Complete weighted graph over the locations plus the origin (node N)."""
    mat = distance_matrix(locations, origin)
    # Built explicitly so coincident points still get a (zero) edge.
    graph = nx.complete_graph(mat.shape[0])
    for i, j in graph.edges():
        graph[i][j]["weight"] = float(mat[i, j])
    return graph


def closed_tour_length(graph: nx.Graph, tour: Sequence[int]) -> float:
    origin = graph.number_of_nodes() - 1
    if not tour:
        return 0.0
    stops = [origin] + list(tour) + [origin]
    dist = 0.0
    for a, b in zip(stops, stops[1:]):
        dist += graph[a][b]["weight"]
    return float(dist)


def brute_force_tour(locations: Sequence[Location], origin: Coordinate) -> Tuple[List[int], float]:
    n = len(locations)
    if n > MAX_BRUTE_FORCE:
        raise ValueError(f"Exhaustive search is limited to {MAX_BRUTE_FORCE} locations, got {n}.")
    graph = location_graph(locations, origin)
    best_tour: List[int] = []
    best_len = float("inf")
    for perm in itertools.permutations(range(n)):
        length = closed_tour_length(graph, perm)
        if length < best_len:
            best_tour = list(perm)
            best_len = length
    return best_tour, best_len


def christofides_tour(locations: Sequence[Location], origin: Coordinate) -> Tuple[List[int], float]:
    n = len(locations)
    graph = location_graph(locations, origin)
    if n < 2:
        tour = list(range(n))
        return tour, closed_tour_length(graph, tour)
    cycle = nx.approximation.christofides(graph)
    # Cycle repeats its first node at the end; rotate so the origin leads.
    nodes = cycle[:-1]
    start = nodes.index(n)
    tour = nodes[start + 1 :] + nodes[:start]
    return tour, closed_tour_length(graph, tour)
