import random
from typing import List, Sequence


Tour = List[int]


def random_tour(n: int, rng: random.Random) -> Tour:
    """Uniform permutation of 0..n-1 (Fisher-Yates)."""
    tour = list(range(n))
    for i in range(n - 1, 0, -1):
        j = rng.randrange(i + 1)
        tour[i], tour[j] = tour[j], tour[i]
    return tour


def three_cycle_neighbor(tour: Sequence[int], rng: random.Random) -> Tour:
    """Rotate the occupants of three distinct positions: i <- j, j <- k, k <- i.

    Tours shorter than three positions fall back to a swap (two positions)
    or a copy (one or none).
    """
    new_tour = list(tour)
    n = len(new_tour)
    if n < 2:
        return new_tour
    if n == 2:
        new_tour[0], new_tour[1] = new_tour[1], new_tour[0]
        return new_tour
    i = rng.randrange(n)
    j = rng.randrange(n)
    while j == i:
        j = rng.randrange(n)
    k = rng.randrange(n)
    while k == i or k == j:
        k = rng.randrange(n)
    new_tour[i], new_tour[j], new_tour[k] = new_tour[j], new_tour[k], new_tour[i]
    return new_tour


def selection_probabilities(fitnesses: Sequence[float]) -> List[float]:
    total = sum(fitnesses)
    if total <= 0.0:
        if not fitnesses:
            return []
        return [1.0 / len(fitnesses)] * len(fitnesses)
    return [f / total for f in fitnesses]


def roulette_select(probabilities: Sequence[float], rng: random.Random) -> int:
    """Index of the first cumulative probability exceeding a uniform draw."""
    if not probabilities:
        raise ValueError("Cannot select from an empty distribution.")
    r = rng.random()
    cumulative = 0.0
    for idx, p in enumerate(probabilities):
        cumulative += p
        if cumulative > r:
            return idx
    # Rounding left the cumulative sum at or below r.
    return len(probabilities) - 1


def is_permutation(tour: Sequence[int], n: int) -> bool:
    return len(tour) == n and set(tour) == set(range(n))
