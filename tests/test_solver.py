"""End-to-end tests of the Pikaia facade."""

from loguru import logger
import numpy as np
import pytest

from pikaia import ConfigurationError, Pikaia, StopReason
from pikaia.problems import paraboloid, rosenbrock, twod


def sphere(x):
    return -float(np.sum(np.asarray(x) ** 2))


class TestConfigure:
    def test_unknown_option_raises(self):
        with pytest.raises(ConfigurationError):
            Pikaia(2, [0.0, 0.0], [1.0, 1.0], paraboloid, popsize=10)

    def test_wrong_type_raises(self):
        with pytest.raises(ConfigurationError):
            Pikaia(2, [0.0, 0.0], [1.0, 1.0], paraboloid, population_size="many")

    def test_out_of_range_is_reported_not_raised(self):
        solver = Pikaia(2, [0.0, 0.0], [1.0, 1.0], paraboloid, population_size=101)
        assert solver.status == 105
        assert solver.config_result.codes == [105]

    def test_solve_refuses_invalid_configuration(self):
        solver = Pikaia(2, [0.0, 0.0], [1.0, 1.0], paraboloid, population_size=101)
        with pytest.raises(ConfigurationError):
            solver.solve([0.5, 0.5])

    def test_reconfigure_clears_errors(self):
        solver = Pikaia(2, [0.0, 0.0], [1.0, 1.0], paraboloid, population_size=101)
        result = solver.configure(2, [0.0, 0.0], [1.0, 1.0], paraboloid, population_size=10)
        assert result.ok
        assert solver.status == 0

    def test_header_printed_when_verbose(self, capsys):
        Pikaia(2, [0.0, 0.0], [1.0, 1.0], paraboloid, verbosity=1)
        assert "PIKAIA Genetic Algorithm Report" in capsys.readouterr().out


class TestSolve:
    def test_paraboloid_converges_to_centre(self):
        solver = Pikaia(
            2,
            [0.0, 0.0],
            [1.0, 1.0],
            paraboloid,
            max_generations=200,
            convergence_tolerance=1e-6,
        )
        x, f, reason = solver.solve([0.1, 0.9])
        assert f > -1e-3
        assert np.allclose(x, 0.5, atol=0.05)
        assert reason in (StopReason.CONVERGED, StopReason.GENERATION_LIMIT_REACHED)

    def test_paraboloid_reference_run(self):
        """Population 100, 200 generations, seed 999: should land within 10^-5 of the maximum."""
        solver = Pikaia(
            2,
            [0.0, 0.0],
            [1.0, 1.0],
            paraboloid,
            population_size=100,
            max_generations=200,
            random_seed=999,
        )
        x, f, reason = solver.solve([0.1, 0.9])
        assert abs(f) <= 1e-5
        assert np.allclose(x, 0.5, atol=5e-3)
        assert reason is StopReason.CONVERGED

    def test_physical_bounds_are_rescaled(self):
        solver = Pikaia(
            2,
            [-1.0, -1.0],
            [1.0, 1.0],
            sphere,
            max_generations=200,
            convergence_tolerance=1e-6,
        )
        x, f, _ = solver.solve([0.8, -0.8])
        assert f > -5e-3
        assert np.allclose(x, 0.0, atol=0.1)

    @pytest.mark.parametrize("plan", [1, 2, 3])
    @pytest.mark.parametrize("mode", [1, 2, 3, 4, 5, 6])
    def test_every_plan_and_mode_keeps_the_initial_guess_as_floor(self, plan, mode):
        solver = Pikaia(
            2,
            [0.0, 0.0],
            [1.0, 1.0],
            paraboloid,
            population_size=20,
            max_generations=10,
            mutation_mode=mode,
            replacement_plan=plan,
        )
        guess = [0.45, 0.55]
        x, f, _ = solver.solve(guess)
        assert f >= paraboloid(np.array(guess))
        assert f == pytest.approx(paraboloid(x))
        assert np.all((x >= 0.0) & (x <= 1.0))

    def test_repeated_solves_are_identical(self):
        solver = Pikaia(2, [-2.0, -2.0], [2.0, 2.0], rosenbrock, population_size=20, max_generations=15)
        first = solver.solve([0.0, 0.0])
        second = solver.solve([0.0, 0.0])
        assert np.array_equal(first.x, second.x)
        assert first.f == second.f

    def test_different_seeds_differ(self):
        results = []
        for seed in (1, 2):
            solver = Pikaia(2, [0.0, 0.0], [1.0, 1.0], twod, population_size=20, max_generations=5, random_seed=seed)
            results.append(solver.solve([0.1, 0.1]).x)
        assert not np.array_equal(results[0], results[1])

    def test_generation_limit(self):
        solver = Pikaia(2, [0.0, 0.0], [1.0, 1.0], paraboloid, population_size=10, max_generations=3)
        result = solver.solve([0.2, 0.2])
        assert result.stop_reason is StopReason.GENERATION_LIMIT_REACHED
        assert solver.metrics.total_generations == 3

    def test_flat_objective_converges_after_window(self):
        solver = Pikaia(
            2, [0.0, 0.0], [1.0, 1.0], lambda x: 1.0, population_size=10, convergence_window=5
        )
        result = solver.solve([0.2, 0.2])
        assert result.stop_reason is StopReason.CONVERGED
        assert solver.metrics.total_generations == 6

    def test_verbose_run_reports_outcome(self, capsys):
        solver = Pikaia(
            1, [0.0], [1.0], lambda x: 1.0, population_size=4, convergence_window=2, verbosity=1
        )
        solver.solve([0.5])
        out = capsys.readouterr().out
        assert "Reproduction Plan: Full generational replacement" in out
        assert out.rstrip().endswith("Solution Converged")

    def test_initial_guess_outside_bounds_is_clamped(self):
        seen = []
        solver = Pikaia(
            1,
            [0.0],
            [1.0],
            lambda x: float(x[0]),
            population_size=4,
            max_generations=1,
        )
        solver.objective = lambda x: seen.append(float(x[0])) or float(x[0])
        solver.solve([5.0])
        assert seen[0] == 1.0


class TestCallbackAndMetrics:
    def test_callback_sees_physical_coordinates(self):
        calls = []
        solver = Pikaia(
            2,
            [10.0, 10.0],
            [20.0, 20.0],
            lambda x: -float(np.sum((np.asarray(x) - 15.0) ** 2)),
            population_size=20,
            max_generations=8,
            per_generation_callback=lambda g, x, f: calls.append((g, x.copy(), f)),
        )
        result = solver.solve([11.0, 19.0])
        assert [g for g, _, _ in calls] == list(range(1, len(calls) + 1))
        assert all(np.all((x >= 10.0) & (x <= 20.0)) for _, x, _ in calls)
        assert calls[-1][2] == result.f
        assert np.allclose(calls[-1][1], result.x)

    def test_metrics_track_the_run(self):
        solver = Pikaia(2, [0.0, 0.0], [1.0, 1.0], paraboloid, population_size=10, max_generations=4)
        solver.solve([0.3, 0.3])
        metrics = solver.metrics
        assert metrics.total_generations == 4
        assert metrics.breeding_events == 4 * 5
        assert len(metrics.best_fitness_history) == 4
        assert metrics.best_fitness_history == sorted(metrics.best_fitness_history)
        # initial population plus one evaluation per offspring
        assert metrics.evaluations == 10 + 4 * 10
        assert metrics.offspring_admitted == 4 * 10 - metrics.elites_preserved


def test_library_is_quiet_until_logging_is_set_up():
    """Should emit no log records from the package when embedded."""
    messages = []
    sink = logger.add(messages.append, level="DEBUG")
    try:
        Pikaia(2, [0.0, 0.0], [1.0, 1.0], paraboloid, population_size=10, max_generations=3).solve(
            [0.2, 0.2]
        )
    finally:
        logger.remove(sink)
    assert not [m for m in messages if "[EvolutionEngine]" in m or "[Pikaia]" in m]
