"""Configuration models — scenario inputs and the vehicle-model catalog."""

from evtol_simulator.config.vehicle_model import VehicleModel
from evtol_simulator.config.catalog import sample_vehicle_models
from evtol_simulator.config.scenario import (
    FleetConfig,
    Scenario,
    SimulationConfig,
    load_scenario,
)

__all__ = [
    "VehicleModel",
    "sample_vehicle_models",
    "FleetConfig",
    "SimulationConfig",
    "Scenario",
    "load_scenario",
]
