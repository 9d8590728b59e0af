import math
import random

import pytest

from tsp_abc.driver import ColonyRun, RunConfig, RunResult
from tsp_abc.geo import Location


class TestColonyRun:
    def test_budget_stop(self, warehouses, origin):
        cfg = RunConfig(population_size=10, max_iterations=15, stagnation_window=1000)
        run = ColonyRun(cfg, warehouses, origin, rng=random.Random(1))
        result = run.run()
        assert result.iterations == 15
        assert result.stop_reason == "budget"
        assert sorted(result.tour) == list(range(len(warehouses)))

    def test_stagnation_stop(self, origin):
        # A single destination can never improve after initialization.
        cfg = RunConfig(population_size=10, max_iterations=100, stagnation_window=2)
        run = ColonyRun(cfg, [Location("only", 19.3, -99.1)], origin, rng=random.Random(1))
        result = run.run()
        assert result.iterations == 3
        assert result.stop_reason == "stagnation"
        assert result.last_improvement_iteration == 0

    def test_callback_sees_every_step(self, warehouses, origin):
        seen = []
        cfg = RunConfig(population_size=10, max_iterations=5, stagnation_window=1000)
        run = ColonyRun(cfg, warehouses, origin)
        run.run(callback=lambda r: seen.append(r.iteration))
        assert seen == [1, 2, 3, 4, 5]

    def test_manual_stepping(self, warehouses, origin):
        cfg = RunConfig(population_size=10, max_iterations=3)
        run = ColonyRun(cfg, warehouses, origin, rng=random.Random(2))
        first = run.state
        second = run.step()
        assert run.iteration == 1
        assert run.state is second
        assert second is not first
        assert run.result().stop_reason == "running"

    def test_seed_from_config(self, warehouses, origin):
        cfg = RunConfig(population_size=10, max_iterations=10, random_seed=42)
        a = ColonyRun(cfg, warehouses, origin).run()
        b = ColonyRun(cfg, warehouses, origin).run()
        assert a == b


class TestRunResult:
    def test_gap(self):
        result = RunResult(tour=[0], distance=110.0, iterations=1, last_improvement_iteration=0,
                           stop_reason="budget", reference=100.0)
        assert result.gap == pytest.approx(0.1)

    def test_gap_without_reference(self):
        result = RunResult(tour=[0], distance=110.0, iterations=1, last_improvement_iteration=0,
                           stop_reason="budget")
        assert math.isinf(result.gap)


def test_example_script_runs(capsys):
    import runpy
    from pathlib import Path

    script = Path(__file__).resolve().parents[1] / "tsp_abc" / "examples" / "run_small_search.py"
    runpy.run_path(str(script), run_name="__main__")
    assert "gap to exact tour" in capsys.readouterr().out
