"""Engine — vehicle state machine, charging queues and the variable-step driver."""

from evtol_simulator.engine.statistics import Statistics
from evtol_simulator.engine.charging_station import ChargingStation, ChargingStations
from evtol_simulator.engine.vehicle import Vehicle, VehicleState, VehicleStatus
from evtol_simulator.engine.fleet import VehicleModels, Vehicles
from evtol_simulator.engine.simulation import Simulation, SimulationOutcome
from evtol_simulator.engine.orchestrator import build_fleet, run_engine

__all__ = [
    "Statistics",
    "ChargingStation",
    "ChargingStations",
    "Vehicle",
    "VehicleState",
    "VehicleStatus",
    "VehicleModels",
    "Vehicles",
    "Simulation",
    "SimulationOutcome",
    # Entry points
    "run_engine",
    "build_fleet",
]
