"""Result types — the contract between engine, report writer, CLI, API and dashboard.

Every quantity is SI (seconds, metres), matching the engine.  The report
writer converts to hours and miles for display.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════
# Per-model statistics
# ═══════════════════════════════════════════════════════════════════════════

class ModelStatistics(BaseModel):
    """Immutable snapshot of one ``Statistics`` accumulator."""

    total_flight_count: int = 0
    total_flight_duration_s: float = 0.0
    total_flight_distance_m: float = 0.0
    total_flight_passenger_distance_m: float = 0.0
    """Σ (flight distance × passengers) over every flight."""

    mean_flight_duration_s: float = 0.0
    """total_flight_duration / total_flight_count (0 when no flights)."""

    mean_flight_distance_m: float = 0.0
    """total_flight_distance / total_flight_count (0 when no flights)."""

    total_charging_session_count: int = 0
    total_charging_duration_s: float = 0.0
    mean_charging_duration_s: float = 0.0
    """total_charging_duration / total_charging_session_count (0 when no sessions)."""

    total_fault_count: int = 0


class ModelReport(BaseModel):
    """Aggregate results for every vehicle of one vehicle model."""

    vehicle_model_id: int
    manufacturer_name: str
    model_name: str
    vehicle_count: int
    """Vehicles of this model in the fleet."""

    statistics: ModelStatistics


# ═══════════════════════════════════════════════════════════════════════════
# Fleet timeline
# ═══════════════════════════════════════════════════════════════════════════

class FleetSnapshot(BaseModel):
    """Vehicle count per status at the end of one time step."""

    elapsed_time_s: float
    on_standby: int = 0
    waiting_to_charge: int = 0
    charging: int = 0
    flying: int = 0


# ═══════════════════════════════════════════════════════════════════════════
# Top-level result
# ═══════════════════════════════════════════════════════════════════════════

class SimulationResult(BaseModel):
    """Complete output of one run."""

    duration_s: float
    """Requested simulated time horizon."""

    elapsed_time_s: float
    """Simulated time actually reached."""

    step_count: int
    """Variable-size time steps taken."""

    completed: bool
    """True when ``elapsed_time_s`` reached ``duration_s``."""

    stalled: bool
    """True when the run halted on a zero time step before reaching the duration."""

    random_seed: int | None = None
    vehicle_count: int = 0
    charging_station_count: int = 0

    models: list[ModelReport] = Field(default_factory=list)
    """One entry per vehicle model present in the fleet, ordered by model id."""

    timeline: list[FleetSnapshot] | None = None
    """Per-step fleet snapshots, only when ``SimulationConfig.record_timeline`` is set."""
