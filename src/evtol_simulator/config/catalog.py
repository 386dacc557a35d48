"""Sample vehicle-model catalog — five reference aircraft, Alpha through Echo.

Published in engineering units (mph, kWh, hours, faults/hour, kWh/mile) and
converted to SI on construction.
"""

from __future__ import annotations

from evtol_simulator.config.vehicle_model import VehicleModel
from evtol_simulator.units import (
    HOUR,
    KILOWATT_HOUR,
    KILOWATT_HOUR_PER_MILE,
    MILE_PER_HOUR,
    PER_HOUR,
)

# id, manufacturer, model, passengers, cruise mph, battery kWh, charge h, faults/h, kWh/mile
_SAMPLE_TABLE: list[tuple[int, str, str, int, float, float, float, float, float]] = [
    (0, "Alpha Company", "Alpha Model", 4, 120.0, 320.0, 0.60, 0.25, 1.6),
    (1, "Bravo Company", "Bravo Model", 5, 100.0, 100.0, 0.20, 0.10, 1.5),
    (2, "Charlie Company", "Charlie Model", 3, 160.0, 220.0, 0.80, 0.05, 2.2),
    (3, "Delta Company", "Delta Model", 2, 90.0, 120.0, 0.62, 0.22, 0.8),
    (4, "Echo Company", "Echo Model", 2, 30.0, 150.0, 0.30, 0.61, 5.8),
]


def sample_vehicle_models() -> list[VehicleModel]:
    """Return the sample catalog, ordered by model id."""
    return [
        VehicleModel(
            id=model_id,
            manufacturer_name=manufacturer,
            model_name=name,
            passenger_count=passengers,
            cruise_speed_m_per_s=cruise_mph * MILE_PER_HOUR,
            battery_capacity_j=battery_kwh * KILOWATT_HOUR,
            charging_duration_s=charge_hours * HOUR,
            fault_rate_per_s=faults_per_hour * PER_HOUR,
            energy_consumption_j_per_m=kwh_per_mile * KILOWATT_HOUR_PER_MILE,
        )
        for (
            model_id, manufacturer, name, passengers,
            cruise_mph, battery_kwh, charge_hours, faults_per_hour, kwh_per_mile,
        ) in _SAMPLE_TABLE
    ]
