"""Result models — simulation output contracts."""

from evtol_simulator.models.results import (
    FleetSnapshot,
    ModelReport,
    ModelStatistics,
    SimulationResult,
)

__all__ = [
    "FleetSnapshot",
    "ModelReport",
    "ModelStatistics",
    "SimulationResult",
]
