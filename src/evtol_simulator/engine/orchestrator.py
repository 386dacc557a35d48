"""Orchestrator — builds a run from a ``Scenario`` and packages its result.

Wires together:
  1. Random generator  — ``np.random.default_rng(seed)``, shared by the fleet
     draw and every fault draw, so one seed reproduces the whole run
  2. Fleet             — ``Vehicles.generate`` over the scenario's model catalog
  3. Stations          — ``ChargingStations.with_count``
  4. Simulation        — variable-step driver, optional per-step timeline hook

Entry point: ``run_engine(scenario)``
"""

from __future__ import annotations

import logging

import numpy as np

from evtol_simulator.config.scenario import Scenario
from evtol_simulator.engine.charging_station import ChargingStations
from evtol_simulator.engine.fleet import VehicleModels, Vehicles
from evtol_simulator.engine.simulation import Simulation
from evtol_simulator.engine.vehicle import VehicleStatus
from evtol_simulator.models.results import (
    FleetSnapshot,
    ModelReport,
    SimulationResult,
)
from evtol_simulator.units import HOUR

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# Public entry point
# ═══════════════════════════════════════════════════════════════════════════

def run_engine(scenario: Scenario) -> SimulationResult:
    """Run one simulation and return a fully-populated ``SimulationResult``."""
    sim_cfg = scenario.simulation
    rng = np.random.default_rng(sim_cfg.random_seed)

    models, vehicles = build_fleet(scenario, rng)
    stations = ChargingStations.with_count(scenario.fleet.charging_station_count)

    timeline: list[FleetSnapshot] | None = None
    on_step = None
    if sim_cfg.record_timeline:
        timeline = [snapshot_fleet(0.0, vehicles)]

        def on_step(elapsed_time_s: float, fleet: Vehicles) -> None:
            timeline.append(snapshot_fleet(elapsed_time_s, fleet))

    simulation = Simulation()
    outcome = simulation.run(
        sim_cfg.duration_hours * HOUR,
        vehicles,
        stations,
        rng,
        on_step=on_step,
    )

    # ── Per-model reports ───────────────────────────────────────────────
    head_count: dict[int, int] = {}
    for vehicle in vehicles:
        if vehicle.model is not None:
            head_count[vehicle.model.id] = head_count.get(vehicle.model.id, 0) + 1

    reports = [
        ModelReport(
            vehicle_model_id=model_id,
            manufacturer_name=models.at(model_id).manufacturer_name,
            model_name=models.at(model_id).model_name,
            vehicle_count=head_count.get(model_id, 0),
            statistics=stats.to_summary(),
        )
        for model_id, stats in sorted(simulation.statistics.items())
    ]

    return SimulationResult(
        duration_s=outcome.duration_s,
        elapsed_time_s=outcome.elapsed_time_s,
        step_count=outcome.step_count,
        completed=outcome.completed,
        stalled=outcome.stalled,
        random_seed=sim_cfg.random_seed,
        vehicle_count=len(vehicles),
        charging_station_count=len(stations),
        models=reports,
        timeline=timeline,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Building blocks
# ═══════════════════════════════════════════════════════════════════════════

def build_fleet(scenario: Scenario, rng: np.random.Generator) -> tuple[VehicleModels, Vehicles]:
    """Register the scenario's model catalog and generate its fleet."""
    models = VehicleModels(scenario.vehicle_models)
    logger.info("Registered %d vehicle models", len(models))
    vehicles = Vehicles.generate(scenario.fleet.vehicle_count, models, rng)
    return models, vehicles


def snapshot_fleet(elapsed_time_s: float, vehicles: Vehicles) -> FleetSnapshot:
    """Count vehicles per status."""
    counts = {status: 0 for status in VehicleStatus}
    for vehicle in vehicles:
        counts[vehicle.status] += 1
    return FleetSnapshot(
        elapsed_time_s=elapsed_time_s,
        on_standby=counts[VehicleStatus.ON_STANDBY],
        waiting_to_charge=counts[VehicleStatus.WAITING_TO_CHARGE],
        charging=counts[VehicleStatus.CHARGING],
        flying=counts[VehicleStatus.FLYING],
    )
