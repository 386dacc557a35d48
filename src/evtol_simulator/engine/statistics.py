"""Operational statistics — per-vehicle accumulators and their per-model aggregate.

Totals and counts are summed; means are *derived* and recomputed after every
mutation, so they are always consistent with their totals:

  mean_flight_duration  = total_flight_duration / total_flight_count
  mean_flight_distance  = total_flight_distance / total_flight_count
  mean_charging_duration = total_charging_duration / total_charging_session_count

A zero count gives a zero mean.  Aggregation adds totals and counts and then
recomputes the means; means are never averaged, so aggregating vehicles with
different flight counts weights each flight equally.

Passenger-distance is accumulated per flight segment (distance × passengers)
rather than as passengers × total distance, so flights with different
passenger counts combine correctly.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from evtol_simulator.models.results import ModelStatistics


@dataclass
class Statistics:
    """Mutable statistics of one vehicle, or of every vehicle of one model."""

    total_flight_count: int = 0
    total_flight_duration_s: float = 0.0
    total_flight_distance_m: float = 0.0
    total_flight_passenger_distance_m: float = 0.0
    total_charging_session_count: int = 0
    total_charging_duration_s: float = 0.0
    total_fault_count: int = 0

    mean_flight_duration_s: float = field(default=0.0, init=False)
    mean_flight_distance_m: float = field(default=0.0, init=False)
    mean_charging_duration_s: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self._recompute_means()

    # ── Flights ─────────────────────────────────────────────────────────

    def increment_flight_count(self) -> None:
        """Open a new flight."""
        self.total_flight_count += 1
        self._recompute_means()

    def add_flight(self, passenger_count: int, duration_s: float, distance_m: float) -> None:
        """Add duration and distance flown during the currently open flight."""
        self.total_flight_duration_s += duration_s
        self.total_flight_distance_m += distance_m
        self.total_flight_passenger_distance_m += distance_m * passenger_count
        self._recompute_means()

    # ── Charging ────────────────────────────────────────────────────────

    def increment_charging_session_count(self) -> None:
        """Open a new charging session."""
        self.total_charging_session_count += 1
        self._recompute_means()

    def add_charging_duration(self, duration_s: float) -> None:
        """Add time spent charging during the currently open session."""
        self.total_charging_duration_s += duration_s
        self._recompute_means()

    # ── Faults ──────────────────────────────────────────────────────────

    def add_faults(self, count: int) -> None:
        self.total_fault_count += count

    # ── Aggregation ─────────────────────────────────────────────────────

    def aggregate(self, other: Statistics) -> None:
        """Add every total and count of ``other`` into this accumulator."""
        self.total_flight_count += other.total_flight_count
        self.total_flight_duration_s += other.total_flight_duration_s
        self.total_flight_distance_m += other.total_flight_distance_m
        self.total_flight_passenger_distance_m += other.total_flight_passenger_distance_m
        self.total_charging_session_count += other.total_charging_session_count
        self.total_charging_duration_s += other.total_charging_duration_s
        self.total_fault_count += other.total_fault_count
        self._recompute_means()

    def copy(self) -> Statistics:
        return replace(self)

    def to_summary(self) -> ModelStatistics:
        """Convert to the immutable Pydantic model for output."""
        return ModelStatistics(
            total_flight_count=self.total_flight_count,
            total_flight_duration_s=self.total_flight_duration_s,
            total_flight_distance_m=self.total_flight_distance_m,
            total_flight_passenger_distance_m=self.total_flight_passenger_distance_m,
            mean_flight_duration_s=self.mean_flight_duration_s,
            mean_flight_distance_m=self.mean_flight_distance_m,
            total_charging_session_count=self.total_charging_session_count,
            total_charging_duration_s=self.total_charging_duration_s,
            mean_charging_duration_s=self.mean_charging_duration_s,
            total_fault_count=self.total_fault_count,
        )

    # ── Internal ────────────────────────────────────────────────────────

    def _recompute_means(self) -> None:
        if self.total_flight_count > 0:
            self.mean_flight_duration_s = self.total_flight_duration_s / self.total_flight_count
            self.mean_flight_distance_m = self.total_flight_distance_m / self.total_flight_count
        else:
            self.mean_flight_duration_s = 0.0
            self.mean_flight_distance_m = 0.0

        if self.total_charging_session_count > 0:
            self.mean_charging_duration_s = (
                self.total_charging_duration_s / self.total_charging_session_count
            )
        else:
            self.mean_charging_duration_s = 0.0
