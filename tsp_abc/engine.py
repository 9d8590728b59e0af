"""
One generation of the artificial bee colony: employed local search, onlooker
reinforcement, abandonment of stagnant tours and best-solution tracking.
"""

import random
from dataclasses import replace
from typing import Dict, List, Optional, Sequence, Tuple

from .colony import Bee, BestSolution, ColonyConfig, ColonyState, best_of, employed_bee
from .geo import Coordinate, Location
from .operators import random_tour, roulette_select, selection_probabilities, three_cycle_neighbor


def employed_phase(
    employed: Sequence[Bee], locations: Sequence[Location], origin: Coordinate, rng: random.Random
) -> Tuple[Bee, ...]:
    updated: List[Bee] = []
    for bee in employed:
        candidate = employed_bee(three_cycle_neighbor(bee.tour, rng), locations, origin)
        if candidate.fitness > bee.fitness:
            updated.append(candidate)
        else:
            updated.append(replace(bee, trials=bee.trials + 1))
    return tuple(updated)


def onlooker_phase(
    employed: Sequence[Bee],
    onlookers: Sequence[Bee],
    locations: Sequence[Location],
    origin: Coordinate,
    rng: random.Random,
) -> Tuple[Tuple[Bee, ...], Tuple[Bee, ...]]:
    """Let each onlooker probe a fitness-proportionally chosen employed tour.

    Every onlooker searches from the same snapshot of the employed population.
    Proposals are buffered per employed index and folded in afterwards: the
    fittest proposal replaces the employed tour if it improves on it,
    otherwise the employed bee's trials grow by the number of attempts made
    on it.
    """
    probabilities = selection_probabilities([bee.fitness for bee in employed])
    last = len(employed) - 1
    proposals: Dict[int, Bee] = {}
    attempts: Dict[int, int] = {}
    updated_onlookers: List[Bee] = []
    for onlooker in onlookers:
        idx = min(max(roulette_select(probabilities, rng), 0), last)
        candidate = employed_bee(three_cycle_neighbor(employed[idx].tour, rng), locations, origin)
        attempts[idx] = attempts.get(idx, 0) + 1
        if idx not in proposals or candidate.fitness > proposals[idx].fitness:
            proposals[idx] = candidate
        updated_onlookers.append(replace(onlooker, target=idx))

    folded: List[Bee] = []
    for idx, bee in enumerate(employed):
        if idx not in attempts:
            folded.append(bee)
        elif proposals[idx].fitness > bee.fitness:
            folded.append(proposals[idx])
        else:
            folded.append(replace(bee, trials=bee.trials + attempts[idx]))
    return tuple(folded), tuple(updated_onlookers)


def scout_phase(
    employed: Sequence[Bee],
    locations: Sequence[Location],
    origin: Coordinate,
    limit: int,
    rng: random.Random,
) -> Tuple[Bee, ...]:
    n = len(locations)
    return tuple(
        employed_bee(random_tour(n, rng), locations, origin) if bee.trials >= limit else bee
        for bee in employed
    )


def step(
    state: ColonyState,
    locations: Sequence[Location],
    origin: Coordinate,
    iteration: int,
    config: Optional[ColonyConfig] = None,
    rng: Optional[random.Random] = None,
) -> ColonyState:
    """Advance the colony by one generation and return the new state.

    ``state`` is left untouched. ``iteration`` is recorded as the
    last-improvement iteration when the best fitness strictly improves.
    """
    cfg = config or ColonyConfig()
    rng = rng or random.Random()

    employed = employed_phase(state.employed, locations, origin, rng)
    employed, onlookers = onlooker_phase(employed, state.onlookers, locations, origin, rng)
    employed = scout_phase(employed, locations, origin, cfg.limit, rng)

    best_solution = state.best_solution
    last_improvement = state.last_improvement_iteration
    champion = best_of(employed)
    if champion.fitness > best_solution.fitness:
        best_solution = BestSolution(
            path=champion.tour, distance=champion.distance, fitness=champion.fitness
        )
        last_improvement = iteration

    return ColonyState(
        employed=employed,
        onlookers=onlookers,
        scouts=state.scouts,
        best_solution=best_solution,
        last_improvement_iteration=last_improvement,
        bounds=state.bounds,
    )
