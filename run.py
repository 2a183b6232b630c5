from datetime import datetime, timezone
import time

import hydra
from loguru import logger
import numpy as np
from omegaconf import DictConfig, OmegaConf

from pikaia import Pikaia
from pikaia.config.resolvers import register_resolvers
from pikaia.utils.logger_setup import setup_logger


def run_problem(cfg: DictConfig) -> None:
    start_time = time.time()

    logger.info("=" * 80)
    logger.info("PIKAIA Genetic Algorithm Run")
    logger.info("=" * 80)
    logger.info(f"Problem: {cfg.problem.name}")
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")
    logger.info("")

    try:
        logger.info("Step 1/3: Configuring solver...")
        options = OmegaConf.to_container(cfg.options, resolve=True)
        solver = Pikaia(
            cfg.problem.n,
            list(cfg.problem.lower),
            list(cfg.problem.upper),
            cfg.problem.objective,
            **options,
        )
        if solver.status != 0:
            raise RuntimeError(
                f"Invalid options for {cfg.problem.name}: codes {solver.config_result.codes}"
            )
        logger.info("Step 1/3: Complete")
        logger.info("")

        logger.info("Step 2/3: Evolving...")
        logger.info(f"  Max generations: {solver.config.max_generations}")
        logger.info(f"  Population size: {solver.config.population_size}")
        result = solver.solve(list(cfg.problem.initial_guess))
        logger.info(f"Step 2/3: Stopped ({result.stop_reason.value})")
        logger.info("")

        logger.info("Step 3/3: Result")
        logger.info(f"  x = {np.array2string(result.x, precision=6)}")
        logger.info(f"  f = {result.f:.8g}")
        logger.info(
            f"  generations = {solver.metrics.total_generations}, "
            f"evaluations = {solver.metrics.evaluations}"
        )
    except Exception as e:  # pylint: disable=broad-except
        logger.error(f"Run failed: {e}")
        raise
    finally:
        duration = time.time() - start_time
        logger.info(f"Total run duration: {duration:.2f} seconds")
        logger.info("=" * 80)


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    log_file_path = setup_logger(
        log_dir=cfg.logging.log_dir,
        level=cfg.logging.level,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
    )
    logger.info(
        "Run working directory: {}.",
        hydra.core.hydra_config.HydraConfig.get().runtime.output_dir,
    )
    logger.info(f"Log file: {log_file_path}")
    run_problem(cfg)


if __name__ == "__main__":
    register_resolvers()
    main()
