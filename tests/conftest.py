"""Shared test fixtures — a unit-scale vehicle model and a sample scenario matching base_case.yaml."""

from __future__ import annotations

import numpy as np
import pytest

from evtol_simulator.config import (
    FleetConfig,
    Scenario,
    SimulationConfig,
    VehicleModel,
)
from evtol_simulator.engine.charging_station import ChargingStations


@pytest.fixture
def unit_model() -> VehicleModel:
    """2 J battery, 1 J/m, 1 m/s, 1 s full charge → 1 W drain, 2 W charge, 2 s endurance."""
    return VehicleModel(
        id=0,
        manufacturer_name="Test Company",
        model_name="Test Model",
        passenger_count=2,
        cruise_speed_m_per_s=1.0,
        battery_capacity_j=2.0,
        charging_duration_s=1.0,
        fault_rate_per_s=0.0,
        energy_consumption_j_per_m=1.0,
    )


@pytest.fixture
def faulty_model() -> VehicleModel:
    """Unit-scale model with a very high fault rate, so faults are effectively certain."""
    return VehicleModel(
        id=1,
        manufacturer_name="Faulty Company",
        model_name="Faulty Model",
        passenger_count=1,
        cruise_speed_m_per_s=1.0,
        battery_capacity_j=2.0,
        charging_duration_s=1.0,
        fault_rate_per_s=100.0,
        energy_consumption_j_per_m=1.0,
    )


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture
def one_station() -> ChargingStations:
    return ChargingStations.with_count(1)


@pytest.fixture
def base_scenario() -> Scenario:
    return Scenario(
        fleet=FleetConfig(vehicle_count=20, charging_station_count=3),
        simulation=SimulationConfig(duration_hours=3.0, random_seed=42),
    )
