"""Fleet registries — the vehicle-model catalog and the vehicles built from it.

Both registries are insertion-ordered id → item mappings.  Iteration order is
registration order, which fixes the order vehicles consume the shared random
generator and so keeps a seeded run reproducible.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator

import numpy as np

from evtol_simulator.config.vehicle_model import VehicleModel
from evtol_simulator.engine.vehicle import Vehicle

logger = logging.getLogger(__name__)


class VehicleModels:
    """Catalog of vehicle models keyed by model id."""

    def __init__(self, models: Iterable[VehicleModel] = ()) -> None:
        self._models: dict[int, VehicleModel] = {}
        for model in models:
            self.insert(model)

    def insert(self, model: VehicleModel) -> bool:
        """Register a model.  Returns False if its id is already registered."""
        if model.id in self._models:
            return False
        self._models[model.id] = model
        return True

    def at(self, model_id: int) -> VehicleModel | None:
        return self._models.get(model_id)

    def random(self, rng: np.random.Generator) -> VehicleModel | None:
        """Uniformly drawn model, or None for an empty catalog."""
        if not self._models:
            return None
        models = list(self._models.values())
        return models[int(rng.integers(len(models)))]

    def __len__(self) -> int:
        return len(self._models)

    def __iter__(self) -> Iterator[VehicleModel]:
        return iter(self._models.values())


class Vehicles:
    """Fleet of vehicles keyed by vehicle id."""

    def __init__(self) -> None:
        self._vehicles: dict[int, Vehicle] = {}

    @classmethod
    def generate(cls, count: int, models: VehicleModels, rng: np.random.Generator) -> Vehicles:
        """Build ``count`` fully charged vehicles with ids 0 … count-1.

        Each vehicle's model is drawn uniformly from ``models``.  An empty
        catalog yields an empty fleet.
        """
        vehicles = cls()
        if len(models) == 0:
            logger.warning("No vehicle models registered; generated an empty fleet")
            return vehicles

        for vehicle_id in range(max(count, 0)):
            vehicles.insert(Vehicle(vehicle_id, models.random(rng)))

        per_model = Counter(v.model.id for v in vehicles)
        for model in models:
            logger.info(
                "Model %d (%s %s): %d vehicles",
                model.id, model.manufacturer_name, model.model_name, per_model.get(model.id, 0),
            )
        logger.info("Generated fleet of %d vehicles", len(vehicles))
        return vehicles

    def insert(self, vehicle: Vehicle) -> bool:
        """Register a vehicle.  Returns False if its id is already registered."""
        if vehicle.id in self._vehicles:
            return False
        self._vehicles[vehicle.id] = vehicle
        return True

    def at(self, vehicle_id: int) -> Vehicle | None:
        return self._vehicles.get(vehicle_id)

    def exists(self, vehicle_id: int) -> bool:
        return vehicle_id in self._vehicles

    def random(self, rng: np.random.Generator) -> Vehicle | None:
        if not self._vehicles:
            return None
        vehicles = list(self._vehicles.values())
        return vehicles[int(rng.integers(len(vehicles)))]

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(self._vehicles.values())
