import logging

from card_flip_sim.config import SimulationConfig
from card_flip_sim.random_source import RandomSource
from card_flip_sim.report import render_result, ruleset_notice
from card_flip_sim.results import expected_distribution
from card_flip_sim.strategies import STRATEGIES, simulate

logger = logging.getLogger("card_flip_sim")


def run_all(config):
    """Run every strategy on its own random stream. Returns {title: tally}."""
    sources = RandomSource(config.seed).spawn(len(STRATEGIES))
    results = {}
    for strategy, source in zip(STRATEGIES, sources):
        logger.info("Simulating %s", strategy.name)
        results[strategy.title] = simulate(strategy, config, source).tally
    return results


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = SimulationConfig()

    print(ruleset_notice(config))
    print("\n\n[Simulation Results]")

    expected = expected_distribution(config)
    for title, tally in run_all(config).items():
        print(render_result(title, tally, expected))


if __name__ == "__main__":
    main()
