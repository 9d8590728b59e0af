import argparse
import json
import random
import sys
import time
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Tuple

from tsp_abc.data import load_locations, parse_coordinate, split_origin
from tsp_abc.driver import ColonyRun, RunConfig, RunResult
from tsp_abc.geo import Coordinate, Location
from tsp_abc.reference import MAX_BRUTE_FORCE, brute_force_tour, christofides_tour


def log(msg: str, stream=None) -> None:
    ts = time.strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", file=stream or sys.stdout, flush=True)


def _log_stream(args):
    # Keep stdout clean for the JSON payload.
    return sys.stderr if args.json else sys.stdout


def _load(args) -> Tuple[Coordinate, List[Location]]:
    path = Path(args.path)
    stream = _log_stream(args)
    log(f"loading locations from {path}", stream)
    try:
        locations = load_locations(path)
    except (OSError, ValueError) as exc:
        raise RuntimeError(f"Could not load locations from {path}: {exc}") from exc
    if args.origin:
        try:
            origin = parse_coordinate(args.origin)
        except ValueError as exc:
            raise RuntimeError(f"Invalid --origin: {exc}") from exc
    else:
        origin, locations = split_origin(locations)
    if not locations:
        raise RuntimeError(f"No destinations left in {path} once the origin is chosen.")
    log(f"loaded {len(locations)} destinations, origin={origin}", stream)
    return origin, locations


def _build_config(args) -> RunConfig:
    return RunConfig(
        population_size=args.population_size,
        limit=args.limit,
        random_seed=args.seed,
        max_iterations=args.iterations,
        stagnation_window=args.stagnation,
        interval=args.interval,
    )


def _print_progress(run: ColonyRun) -> None:
    best = run.state.best_solution
    trials = [bee.trials for bee in run.state.employed]
    print(
        f"iter {run.iteration}: best={best.distance:10.2f} km "
        f"last_improvement={run.state.last_improvement_iteration} max_trials={max(trials)}"
    )


def _solve(args, origin: Coordinate, locations: List[Location]) -> RunResult:
    cfg = _build_config(args)
    run = ColonyRun(cfg, locations, origin, rng=random.Random(cfg.random_seed))
    stream = _log_stream(args)
    log(f"initial best={run.state.best_solution.distance:.2f} km", stream)
    t0 = time.perf_counter()
    result = run.run(callback=None if args.json else _print_progress)
    log(f"stopped after {result.iterations} iterations ({result.stop_reason}) in {time.perf_counter() - t0:.2f}s", stream)
    return result


def _report(args, result: RunResult, locations: List[Location], reference_name: Optional[str] = None) -> None:
    if args.json:
        payload = asdict(result)
        payload["stops"] = [locations[i].name for i in result.tour]
        if result.reference is not None:
            payload["gap"] = result.gap
            payload["reference_method"] = reference_name
        print(json.dumps(payload, indent=2))
        return
    print(f"best distance: {result.distance:.2f} km")
    print("tour: origin -> " + " -> ".join(locations[i].name for i in result.tour) + " -> origin")
    if result.reference is not None:
        print(f"{reference_name} reference: {result.reference:.2f} km (gap {result.gap:.2%})")


def run(args) -> None:
    origin, locations = _load(args)
    result = _solve(args, origin, locations)
    _report(args, result, locations)


def compare(args) -> None:
    origin, locations = _load(args)
    result = _solve(args, origin, locations)
    if len(locations) <= MAX_BRUTE_FORCE:
        name = "exact"
        _, reference = brute_force_tour(locations, origin)
    else:
        name = "christofides"
        _, reference = christofides_tour(locations, origin)
    result.reference = reference
    _report(args, result, locations, reference_name=name)


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="TSPLIB GEO instance or JSON list of {name, coordinates}")
    parser.add_argument("--origin", help="LAT,LON of the origin; defaults to the first location")
    parser.add_argument("--population-size", type=int, default=50)
    parser.add_argument("--iterations", type=int, default=100)
    parser.add_argument("--stagnation", type=int, default=20)
    parser.add_argument("--limit", type=int, default=50)
    parser.add_argument("--seed", type=int, default=123)
    parser.add_argument("--interval", type=float, default=0.0, help="Seconds to wait between iterations")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")


def main():
    parser = argparse.ArgumentParser(description="Artificial bee colony route planner")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Plan a closed tour from the origin through every location")
    _add_common(run_parser)
    run_parser.set_defaults(func=run)

    compare_parser = subparsers.add_parser("compare", help="Plan a tour and report the gap to a reference tour")
    _add_common(compare_parser)
    compare_parser.set_defaults(func=compare)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
