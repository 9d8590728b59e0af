import math
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .colony import ColonyConfig, ColonyState, initialize
from .engine import step
from .geo import Coordinate, Location


@dataclass
class RunConfig(ColonyConfig):
    max_iterations: int = 100
    stagnation_window: int = 20
    interval: float = 0.0


@dataclass
class RunResult:
    tour: List[int]
    distance: float
    iterations: int
    last_improvement_iteration: int
    stop_reason: str
    reference: Optional[float] = None

    @property
    def gap(self) -> float:
        if self.reference is None or math.isclose(self.reference, 0.0):
            return float("inf")
        return (self.distance - self.reference) / self.reference


class ColonyRun:
    """Steps a colony until the iteration budget or the stagnation window runs out."""

    def __init__(
        self,
        cfg: RunConfig,
        locations: Sequence[Location],
        origin: Coordinate,
        rng: random.Random = None,
    ):
        self.cfg = cfg
        self.locations = locations
        self.origin = origin
        self.rng = rng or random.Random(cfg.random_seed)
        self.state: ColonyState = initialize(locations, origin, config=cfg, rng=self.rng)
        self.iteration = 0

    def step(self) -> ColonyState:
        self.iteration += 1
        self.state = step(
            self.state, self.locations, self.origin, self.iteration, config=self.cfg, rng=self.rng
        )
        return self.state

    def stagnant(self) -> bool:
        return self.iteration - self.state.last_improvement_iteration > self.cfg.stagnation_window

    def done(self) -> bool:
        return self.iteration >= self.cfg.max_iterations or self.stagnant()

    def stop_reason(self) -> Optional[str]:
        if self.iteration >= self.cfg.max_iterations:
            return "budget"
        if self.stagnant():
            return "stagnation"
        return None

    def result(self, reference: Optional[float] = None) -> RunResult:
        best = self.state.best_solution
        return RunResult(
            tour=list(best.path),
            distance=best.distance,
            iterations=self.iteration,
            last_improvement_iteration=self.state.last_improvement_iteration,
            stop_reason=self.stop_reason() or "running",
            reference=reference,
        )

    def run(self, callback: Callable[["ColonyRun"], None] = None) -> RunResult:
        while not self.done():
            self.step()
            if callback is not None:
                callback(self)
            if self.cfg.interval > 0 and not self.done():
                time.sleep(self.cfg.interval)
        return self.result()
