"""Tests for the Hydra configuration tree and the command-line runner."""

from pathlib import Path
import sys

from hydra import compose, initialize_config_dir
from loguru import logger
import pytest

from pikaia import Pikaia
from pikaia.config.resolvers import register_resolvers
from pikaia.problems import paraboloid, rosenbrock, twod
from pikaia.utils.logger_setup import setup_logger
from run import run_problem

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


def load(*overrides):
    register_resolvers()
    with initialize_config_dir(config_dir=str(CONFIG_DIR), version_base=None):
        return compose(config_name="config", overrides=list(overrides))


@pytest.mark.parametrize(
    "problem, objective",
    [("paraboloid", paraboloid), ("rosenbrock", rosenbrock), ("twod", twod)],
)
def test_problem_objective_resolves(problem, objective):
    cfg = load(f"problem={problem}")
    assert cfg.problem.name == problem
    assert cfg.problem.objective is objective
    assert len(cfg.problem.lower) == cfg.problem.n


def test_run_problem_completes():
    cfg = load(
        "problem=paraboloid",
        "options.population_size=10",
        "options.max_generations=3",
        "options.verbosity=0",
    )
    run_problem(cfg)


def test_run_problem_rejects_invalid_options():
    cfg = load("options.population_size=11", "options.verbosity=0")
    with pytest.raises(RuntimeError):
        run_problem(cfg)


def test_setup_logger_writes_file(tmp_path):
    log_file = setup_logger(log_dir=str(tmp_path), level="DEBUG", enable_colors=False)
    try:
        logger.info("[Test] hello")
        Pikaia(2, [0.0, 0.0], [1.0, 1.0], paraboloid)
        assert Path(log_file).parent == tmp_path
        text = Path(log_file).read_text(encoding="utf-8")
        assert "[Test] hello" in text
        assert "[Pikaia] Configured" in text
    finally:
        logger.remove()
        logger.add(sys.stderr)
        logger.disable("pikaia")
