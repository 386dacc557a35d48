"""Vehicle — the per-aircraft state machine.

States and transitions (checked by ``update`` at every step boundary):

  ON_STANDBY         battery > 0            → FLYING             opens a flight
  ON_STANDBY         battery == 0           → WAITING_TO_CHARGE  joins the least-loaded station
  WAITING_TO_CHARGE  front of its queue     → CHARGING           opens a charging session
  CHARGING           battery ≥ capacity     → FLYING             leaves the station, opens a flight
  FLYING             battery ≤ 0            → ON_STANDBY         lands, then queues to charge

Within a status every quantity changes linearly (constant drain while flying,
constant charging rate while charging), so the time to the next transition is
exact.  ``perform_time_step`` never advances a vehicle past that instant:
the effective duration is ``min(requested, duration_to_next_status_change)``.

Faults follow a time-homogeneous Poisson process: each physics advance draws
``Poisson(fault_rate × effective_duration)`` from the shared
``numpy.random.Generator``.  Because the effective duration never crosses a
transition, faults are always drawn within a single status.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from evtol_simulator.config.vehicle_model import VehicleModel
from evtol_simulator.engine.charging_station import ChargingStations
from evtol_simulator.engine.statistics import Statistics


class VehicleStatus(str, Enum):
    ON_STANDBY = "on_standby"
    WAITING_TO_CHARGE = "waiting_to_charge"
    CHARGING = "charging"
    FLYING = "flying"

    @property
    def at_station(self) -> bool:
        """True for the statuses in which a vehicle belongs to a charging station."""
        return self in (VehicleStatus.WAITING_TO_CHARGE, VehicleStatus.CHARGING)


@dataclass(frozen=True)
class VehicleState:
    """Status plus the charging station it refers to.

    A station id is present if and only if the status is WAITING_TO_CHARGE or
    CHARGING; any other combination is rejected at construction.
    """

    status: VehicleStatus = VehicleStatus.ON_STANDBY
    charging_station_id: int | None = None

    def __post_init__(self) -> None:
        if self.status.at_station != (self.charging_station_id is not None):
            raise ValueError(
                f"status {self.status.value!r} is incompatible with "
                f"charging_station_id={self.charging_station_id!r}"
            )


class Vehicle:
    """One aircraft of a given vehicle model.

    Parameters
    ----------
    vehicle_id : int
        Fleet-unique identifier.
    model : VehicleModel | None
        Shared immutable model.  None only for a placeholder vehicle, which
        never flies, charges or queues.
    battery_j : float | None
        Initial battery energy.  None (the default) starts fully charged.
        Clamped into ``[0, battery_capacity_j]``.
    """

    def __init__(
        self,
        vehicle_id: int = 0,
        model: VehicleModel | None = None,
        battery_j: float | None = None,
    ) -> None:
        self._id = vehicle_id
        self._model = model
        self._state = VehicleState()
        self._statistics = Statistics()

        capacity = model.battery_capacity_j if model is not None else 0.0
        initial = capacity if battery_j is None else battery_j
        self._battery_j = min(max(initial, 0.0), capacity)

    # ── Read-only properties ────────────────────────────────────────────

    @property
    def id(self) -> int:
        return self._id

    @property
    def model(self) -> VehicleModel | None:
        return self._model

    @property
    def state(self) -> VehicleState:
        return self._state

    @property
    def status(self) -> VehicleStatus:
        return self._state.status

    @property
    def charging_station_id(self) -> int | None:
        """Station where this vehicle is queued or charging, else None."""
        return self._state.charging_station_id

    @property
    def battery_j(self) -> float:
        return self._battery_j

    @property
    def statistics(self) -> Statistics:
        return self._statistics

    # ── Pure queries ────────────────────────────────────────────────────

    def range_m(self) -> float:
        """Distance this vehicle can still fly on its current charge."""
        if self._model is None or self._model.energy_consumption_j_per_m <= 0.0:
            return 0.0
        return self._battery_j / self._model.energy_consumption_j_per_m

    def endurance_s(self) -> float:
        """Time this vehicle can still fly on its current charge."""
        if self._model is None or self._model.cruise_speed_m_per_s <= 0.0:
            return 0.0
        return self.range_m() / self._model.cruise_speed_m_per_s

    def duration_to_full_charge_s(self) -> float:
        """Charging time from the current charge to full.  0 when already full or unchargeable."""
        if self._model is None:
            return 0.0
        if self._battery_j >= self._model.battery_capacity_j:
            return 0.0
        if self._model.charging_rate_w <= 0.0:
            return 0.0
        return (self._model.battery_capacity_j - self._battery_j) / self._model.charging_rate_w

    def duration_to_next_status_change_s(self) -> float:
        status = self._state.status
        if status is VehicleStatus.ON_STANDBY:
            if self._battery_j > 0.0:
                return self.endurance_s()
            return self.duration_to_full_charge_s()
        if status is VehicleStatus.FLYING:
            return self.endurance_s()
        # WAITING_TO_CHARGE and CHARGING
        return self.duration_to_full_charge_s()

    # ── Simulation hooks ────────────────────────────────────────────────

    def update(self, stations: ChargingStations) -> None:
        """Apply any transition due at the current instant.

        Called for every vehicle once before and once after each physics
        advance.
        """
        if self._model is None:
            return

        status = self._state.status
        if status is VehicleStatus.ON_STANDBY:
            if self._battery_j > 0.0:
                self._takeoff()
            else:
                self._enqueue_if_not_already(stations)
                if self._can_begin_charging(stations):
                    self._begin_charging()

        elif status is VehicleStatus.WAITING_TO_CHARGE:
            if self._can_begin_charging(stations):
                self._begin_charging()

        elif status is VehicleStatus.CHARGING:
            if self._battery_j >= self._model.battery_capacity_j:
                self._battery_j = self._model.battery_capacity_j
                self._leave_charging_station(stations)
                self._takeoff()

        elif status is VehicleStatus.FLYING:
            if self._battery_j <= 0.0:
                self._battery_j = 0.0
                self._land()
                self._enqueue_if_not_already(stations)

    def perform_time_step(
        self,
        duration_s: float,
        stations: ChargingStations,
        rng: np.random.Generator,
    ) -> None:
        """Advance this vehicle's physics by up to ``duration_s``.

        The duration is capped at the time to this vehicle's next status
        change, so a transition is never skipped.
        """
        if self._model is None:
            return

        effective_s = max(min(duration_s, self.duration_to_next_status_change_s()), 0.0)

        status = self._state.status
        if status is VehicleStatus.ON_STANDBY:
            if self._battery_j > 0.0:
                self._takeoff()
                self._fly(effective_s, rng)
            else:
                self._enqueue_if_not_already(stations)

        elif status is VehicleStatus.WAITING_TO_CHARGE:
            if self._can_begin_charging(stations):
                self._begin_charging()
                self._charge(effective_s, rng)

        elif status is VehicleStatus.CHARGING:
            self._charge(effective_s, rng)

        elif status is VehicleStatus.FLYING:
            self._fly(effective_s, rng)

    # ── Transitions ─────────────────────────────────────────────────────

    def _takeoff(self) -> None:
        self._state = VehicleState(VehicleStatus.FLYING)
        self._statistics.increment_flight_count()

    def _land(self) -> None:
        self._state = VehicleState(VehicleStatus.ON_STANDBY)

    def _enqueue_if_not_already(self, stations: ChargingStations) -> None:
        if self._state.charging_station_id is not None:
            return
        station = stations.lowest_count()
        if station is None:
            return
        station.enqueue(self._id)
        self._state = VehicleState(VehicleStatus.WAITING_TO_CHARGE, station.id)

    def _can_begin_charging(self, stations: ChargingStations) -> bool:
        station_id = self._state.charging_station_id
        if station_id is None:
            return False
        station = stations.at(station_id)
        return station is not None and station.front() == self._id

    def _begin_charging(self) -> None:
        self._state = VehicleState(VehicleStatus.CHARGING, self._state.charging_station_id)
        self._statistics.increment_charging_session_count()

    def _leave_charging_station(self, stations: ChargingStations) -> None:
        station_id = self._state.charging_station_id
        if station_id is not None:
            station = stations.at(station_id)
            if station is not None:
                station.dequeue()
        self._state = VehicleState(VehicleStatus.ON_STANDBY)

    # ── Physics ─────────────────────────────────────────────────────────

    def _fly(self, duration_s: float, rng: np.random.Generator) -> None:
        model = self._model
        # Reaching the endurance limit lands exactly on an empty battery.
        depleted = duration_s > 0.0 and duration_s >= self.endurance_s()
        distance_m = model.cruise_speed_m_per_s * duration_s
        if depleted:
            self._battery_j = 0.0
        else:
            self._battery_j = max(self._battery_j - model.transport_power_w * duration_s, 0.0)
        self._statistics.add_flight(model.passenger_count, duration_s, distance_m)
        self._generate_faults(duration_s, rng)

    def _charge(self, duration_s: float, rng: np.random.Generator) -> None:
        model = self._model
        full = duration_s > 0.0 and duration_s >= self.duration_to_full_charge_s()
        if full:
            self._battery_j = model.battery_capacity_j
        else:
            self._battery_j = min(
                self._battery_j + model.charging_rate_w * duration_s,
                model.battery_capacity_j,
            )
        self._statistics.add_charging_duration(duration_s)
        self._generate_faults(duration_s, rng)

    def _generate_faults(self, duration_s: float, rng: np.random.Generator) -> None:
        expected_faults = self._model.fault_rate_per_s * duration_s
        self._statistics.add_faults(int(rng.poisson(expected_faults)))

    def __repr__(self) -> str:
        model_id = self._model.id if self._model is not None else None
        return (
            f"Vehicle(id={self._id}, model={model_id}, status={self.status.value}, "
            f"station={self.charging_station_id}, battery_j={self._battery_j:g})"
        )
