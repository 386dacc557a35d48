"""Simulation driver — variable-step, event-aligned time advance.

Each step is sized to the earliest status change anywhere in the fleet (or
the time left in the run, whichever is smaller):

  1. time_step = min(duration − elapsed, min_v duration_to_next_status_change(v))
     stop when time_step ≤ 0
  2. boundary pass   — ``update`` every vehicle
  3. advance pass    — ``perform_time_step(time_step)`` every vehicle
  4. boundary pass   — ``update`` every vehicle
  5. elapsed += time_step

Because no vehicle can change status strictly inside a step, per-state
physics are exact and no transition is skipped.  When the step computes to
zero before the duration is reached (a vehicle whose model can never leave
its status), the run stops early and is reported as stalled.

After the loop every vehicle's statistics are folded into one aggregate per
vehicle model.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from evtol_simulator.engine.charging_station import ChargingStations
from evtol_simulator.engine.fleet import Vehicles
from evtol_simulator.engine.statistics import Statistics

logger = logging.getLogger(__name__)

StepHook = Callable[[float, Vehicles], None]


@dataclass(frozen=True)
class SimulationOutcome:
    """How a run ended."""

    duration_s: float
    elapsed_time_s: float
    step_count: int
    completed: bool
    stalled: bool


class Simulation:
    """Drives a fleet and its charging stations through simulated time."""

    def __init__(self) -> None:
        self._elapsed_time_s = 0.0
        self._statistics: dict[int, Statistics] = {}

    @property
    def elapsed_time_s(self) -> float:
        return self._elapsed_time_s

    @property
    def statistics(self) -> dict[int, Statistics]:
        """Aggregate statistics keyed by vehicle model id, filled by ``run``."""
        return self._statistics

    def run(
        self,
        duration_s: float,
        vehicles: Vehicles,
        stations: ChargingStations,
        rng: np.random.Generator,
        on_step: StepHook | None = None,
    ) -> SimulationOutcome:
        """Advance until ``duration_s`` is reached or no progress is possible.

        ``on_step(elapsed_time_s, vehicles)`` is called after every step.
        """
        self._elapsed_time_s = 0.0
        self._statistics = {}
        step_count = 0

        active = [v for v in vehicles if v.model is not None]

        while self._elapsed_time_s < duration_s:
            time_step = self._compute_time_step(duration_s, active)
            if time_step <= 0.0:
                break

            logger.debug("Step %d at t=%.3f s: time_step=%.6f s", step_count, self._elapsed_time_s, time_step)

            for vehicle in active:
                vehicle.update(stations)
            for vehicle in active:
                vehicle.perform_time_step(time_step, stations, rng)
            for vehicle in active:
                vehicle.update(stations)

            self._elapsed_time_s += time_step
            step_count += 1

            if on_step is not None:
                on_step(self._elapsed_time_s, vehicles)

        completed = self._elapsed_time_s >= duration_s
        stalled = not completed
        if stalled:
            logger.warning(
                "Simulation stalled at t=%.3f s of %.3f s after %d steps: no vehicle can change status",
                self._elapsed_time_s, duration_s, step_count,
            )
        else:
            logger.info("Simulation finished at t=%.3f s after %d steps", self._elapsed_time_s, step_count)

        self._aggregate(active)

        return SimulationOutcome(
            duration_s=duration_s,
            elapsed_time_s=self._elapsed_time_s,
            step_count=step_count,
            completed=completed,
            stalled=stalled,
        )

    def _compute_time_step(self, duration_s: float, vehicles: list) -> float:
        time_step = duration_s - self._elapsed_time_s
        for vehicle in vehicles:
            time_step = min(time_step, vehicle.duration_to_next_status_change_s())
        return time_step

    def _aggregate(self, vehicles: list) -> None:
        for vehicle in vehicles:
            model_id = vehicle.model.id
            if model_id in self._statistics:
                self._statistics[model_id].aggregate(vehicle.statistics)
            else:
                self._statistics[model_id] = vehicle.statistics.copy()
        logger.info("Aggregated statistics for %d vehicle models", len(self._statistics))
