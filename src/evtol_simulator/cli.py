"""
eVTOL Fleet Simulator - command line entry point.

Builds a scenario from an optional YAML file plus command line overrides,
runs one simulation and prints the per-model results table.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from evtol_simulator.config.scenario import Scenario, load_scenario
from evtol_simulator.engine.orchestrator import run_engine
from evtol_simulator.report.results_table import format_results_table, write_results_file

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="evtol-sim",
        description="eVTOL fleet and charging-station simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--scenario", type=str, default=None,
        help="YAML scenario file; the flags below override its values"
    )

    # Fleet configuration
    parser.add_argument(
        "--vehicles", type=int, default=None,
        help="Number of vehicles (scenario default: 20)"
    )
    parser.add_argument(
        "--charging-stations", type=int, default=None,
        help="Number of charging stations (scenario default: 3)"
    )

    # Simulation configuration
    parser.add_argument(
        "--duration-hours", type=float, default=None,
        help="Simulated time in hours (scenario default: 3.0)"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for reproducibility"
    )

    # Output configuration
    parser.add_argument(
        "--results", type=str, default=None,
        help="Write the results table to this file"
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity"
    )

    return parser.parse_args(argv)


def build_scenario(args) -> Scenario:
    """Scenario from ``--scenario`` (or defaults) with flag overrides applied."""
    scenario = load_scenario(args.scenario) if args.scenario else Scenario()
    data = scenario.model_dump()

    if args.vehicles is not None:
        data["fleet"]["vehicle_count"] = args.vehicles
    if args.charging_stations is not None:
        data["fleet"]["charging_station_count"] = args.charging_stations
    if args.duration_hours is not None:
        data["simulation"]["duration_hours"] = args.duration_hours
    if args.seed is not None:
        data["simulation"]["random_seed"] = args.seed

    return Scenario(**data)


def main(argv=None) -> int:
    """Main entry point for the fleet simulation."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        scenario = build_scenario(args)
    except ValidationError as exc:
        print(f"Invalid scenario:\n{exc}", file=sys.stderr)
        return 2

    print("=" * 60)
    print("eVTOL FLEET SIMULATION")
    print("=" * 60)
    print(f"Vehicles:          {scenario.fleet.vehicle_count}")
    print(f"Charging stations: {scenario.fleet.charging_station_count}")
    print(f"Duration:          {scenario.simulation.duration_hours} hours")
    print(f"Vehicle models:    {len(scenario.vehicle_models)}")
    if scenario.simulation.random_seed is not None:
        print(f"Random seed:       {scenario.simulation.random_seed}")
    print()

    result = run_engine(scenario)

    if result.stalled:
        print(f"Simulation stalled at {result.elapsed_time_s:.3f} s after {result.step_count} steps")
    print(format_results_table(result), end="")

    if args.results:
        path = write_results_file(args.results, result)
        logger.info("Results written to %s", path)
        print(f"\nResults written to: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
