import itertools

import pytest

from tsp_abc.evaluation import tour_distance
from tsp_abc.geo import Location
from tsp_abc.reference import (
    brute_force_tour,
    christofides_tour,
    closed_tour_length,
    distance_matrix,
    location_graph,
)


class TestGraph:
    def test_matrix_shape_and_symmetry(self, triangle, origin):
        mat = distance_matrix(triangle, origin)
        assert mat.shape == (4, 4)
        assert (mat == mat.T).all()
        assert (mat.diagonal() == 0).all()

    def test_graph_length_matches_evaluator(self, warehouses, origin):
        graph = location_graph(warehouses, origin)
        assert graph.number_of_nodes() == len(warehouses) + 1
        tour = [3, 1, 0, 6, 2, 5, 4]
        assert closed_tour_length(graph, tour) == pytest.approx(tour_distance(tour, warehouses, origin))


class TestReferenceTours:
    def test_brute_force_is_minimum(self, triangle, origin):
        tour, length = brute_force_tour(triangle, origin)
        lengths = [tour_distance(p, triangle, origin) for p in itertools.permutations(range(3))]
        assert length == pytest.approx(min(lengths))
        assert tour_distance(tour, triangle, origin) == pytest.approx(length)

    def test_brute_force_refuses_large_sets(self, origin):
        locations = [Location(str(i), 19.0 + i * 0.01, -99.0) for i in range(10)]
        with pytest.raises(ValueError):
            brute_force_tour(locations, origin)

    def test_christofides_is_valid_and_no_better_than_exact(self, warehouses, origin):
        tour, length = christofides_tour(warehouses, origin)
        assert sorted(tour) == list(range(len(warehouses)))
        assert length == pytest.approx(tour_distance(tour, warehouses, origin))
        _, exact = brute_force_tour(warehouses, origin)
        assert length >= exact - 1e-9

    def test_christofides_single_location(self, origin):
        tour, length = christofides_tour([Location("x", 19.3, -99.1)], origin)
        assert tour == [0]
        assert length > 0
