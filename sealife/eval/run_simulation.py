"""
Runs the sea life simulation from the command line:

    python -m sealife.eval.run_simulation --steps 700 --render
"""
# discretionary libraries
from sealife.config.config_sealife import simulator_kwargs
from sealife.envs.simulator import Simulator
from sealife.utils.logging_config import setup_logging
from sealife.utils.population_plotter import PopulationPlotter
from sealife.utils.reporter import ConsoleReporter

# external libraries
import argparse
import logging
import os
import time
from typing import List, Optional

logger = logging.getLogger(__name__)


class _StatisticsFanOut:
    # passes every report on to several statistics sinks
    def __init__(self, sinks):
        self.sinks = sinks

    def report(self, tick, weather, population_counts):
        for sink in self.sinks:
            sink.report(tick, weather, population_counts)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the sea life predator-prey simulation.")
    parser.add_argument("--depth", type=int, default=simulator_kwargs["depth"])
    parser.add_argument("--width", type=int, default=simulator_kwargs["width"])
    parser.add_argument("--steps", type=int, default=simulator_kwargs["long_run_steps"])
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--delay", type=int, default=simulator_kwargs["delay_ms"], help="pause per step in milliseconds")
    parser.add_argument("--render", action="store_true", help="show the field in a pygame window")
    parser.add_argument("--cell-scale", type=int, default=6)
    parser.add_argument("--report-every", type=int, default=1)
    parser.add_argument("--plot", action="store_true", help="show the population plot after the run")
    parser.add_argument("--output-dir", type=str, default=None, help="save population CSV and plot here")
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    plotter = PopulationPlotter()
    reporter = ConsoleReporter(report_every=args.report_every)
    simulator = Simulator(
        args.depth,
        args.width,
        seed=args.seed,
        statistics_sink=_StatisticsFanOut([reporter, plotter]),
    )
    renderer = None
    if args.render:
        # pygame is only needed when watching the run
        from sealife.utils.renderer import FieldRenderer

        # the simulator may have fallen back to its default dimensions
        renderer = FieldRenderer(simulator.depth, simulator.width, cell_scale=args.cell_scale)
        simulator.display_sink = renderer
        renderer.notify(simulator.tick, simulator.field)

    results = []
    try:
        for _ in range(args.steps):
            if not simulator.is_viable():
                break
            results.append(simulator.step())
            if args.delay > 0:
                time.sleep(args.delay / 1000.0)
    finally:
        if renderer is not None:
            renderer.close()

    logger.info("Simulation finished after %s steps, viable: %s", simulator.tick, simulator.is_viable())

    if args.output_dir is not None:
        plotter.save_population_data(os.path.join(args.output_dir, "population_data.csv"))
        plotter.plot(file_path=os.path.join(args.output_dir, "population.png"), show=args.plot)
    elif args.plot:
        plotter.plot()
    return results


if __name__ == "__main__":
    main()
