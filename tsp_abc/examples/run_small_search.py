import random

from tsp_abc.driver import ColonyRun, RunConfig
from tsp_abc.geo import Location
from tsp_abc.reference import brute_force_tour


WAREHOUSES = [
    Location("Norte", 19.5012, -99.1405),
    Location("Sur", 19.2965, -99.1620),
    Location("Oriente", 19.3987, -99.0512),
    Location("Poniente", 19.4010, -99.2440),
    Location("Centro", 19.4326, -99.1332),
    Location("Aeropuerto", 19.4361, -99.0719),
]


def main():
    origin = (19.4270, -99.1677)
    cfg = RunConfig(population_size=20, max_iterations=60, stagnation_window=20)
    run = ColonyRun(cfg, WAREHOUSES, origin, rng=random.Random(cfg.random_seed))
    while not run.done():
        run.step()
        best = run.state.best_solution
        print(f"iter {run.iteration}: best={best.distance:.2f} km path={list(best.path)}")
    _, optimum = brute_force_tour(WAREHOUSES, origin)
    result = run.result(reference=optimum)
    print(f"stopped ({result.stop_reason}); gap to exact tour {result.gap:.2%}")


if __name__ == "__main__":
    main()
