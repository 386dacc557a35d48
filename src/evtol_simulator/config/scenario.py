"""Top-level scenario — bundles fleet, simulation settings and the vehicle-model catalog."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from evtol_simulator.config.catalog import sample_vehicle_models
from evtol_simulator.config.vehicle_model import VehicleModel


class FleetConfig(BaseModel):
    """Fleet and infrastructure size."""

    vehicle_count: int = Field(default=20, ge=0, description="Vehicles in the simulation")
    charging_station_count: int = Field(default=3, ge=0, description="Charging stations in the network")


class SimulationConfig(BaseModel):
    """Simulation-level settings."""

    duration_hours: float = Field(default=3.0, ge=0, description="Simulated time horizon (hours)")
    random_seed: int | None = Field(
        default=None,
        description="Optional RNG seed for reproducible runs. None = seeded from OS entropy.",
    )
    record_timeline: bool = Field(
        default=False,
        description="Record a fleet-status snapshot after every time step.",
    )


class Scenario(BaseModel):
    """Complete input bundle for one simulation run."""

    fleet: FleetConfig = Field(default_factory=FleetConfig)
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    vehicle_models: list[VehicleModel] = Field(
        default_factory=sample_vehicle_models,
        description="Catalog of vehicle models; each vehicle draws one uniformly at random.",
    )

    @field_validator("vehicle_models")
    @classmethod
    def _unique_model_ids(cls, models: list[VehicleModel]) -> list[VehicleModel]:
        ids = [m.id for m in models]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"duplicate vehicle model ids: {duplicates}")
        return models


def load_scenario(path: str | Path) -> Scenario:
    """Load a YAML scenario file.  Missing sections fall back to defaults."""
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return Scenario(**data)
