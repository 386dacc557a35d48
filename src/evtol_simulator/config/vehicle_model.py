"""Vehicle model — immutable per-model physical profile shared by every vehicle of that model."""

from __future__ import annotations

from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class VehicleModel(BaseModel):
    """One aircraft model.  All quantities in SI units.

    Negative physical inputs are clamped to zero rather than rejected, so every
    derived quantity below is also ≥ 0 and never divides by zero.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(default=0, description="Unique vehicle model identifier")
    manufacturer_name: str = Field(default="", description="Manufacturer name (English)")
    model_name: str = Field(default="", description="Model name (English)")
    passenger_count: int = Field(default=0, description="Passengers carried per flight (crew excluded)")
    cruise_speed_m_per_s: float = Field(default=0.0, description="Cruise speed in steady level flight (m/s)")
    battery_capacity_j: float = Field(default=0.0, description="Battery energy when fully charged (J)")
    charging_duration_s: float = Field(default=0.0, description="Time to charge from empty to full (s)")
    fault_rate_per_s: float = Field(default=0.0, description="Mean faults per second of operation")
    energy_consumption_j_per_m: float = Field(
        default=0.0,
        description="Transport energy consumption — energy used per metre flown (J/m)",
    )

    @field_validator(
        "passenger_count",
        "cruise_speed_m_per_s",
        "battery_capacity_j",
        "charging_duration_s",
        "fault_rate_per_s",
        "energy_consumption_j_per_m",
    )
    @classmethod
    def _clamp_non_negative(cls, value: float) -> float:
        return max(value, 0)

    # ── Derived constants (computed once, cached on the frozen instance) ──

    @computed_field
    @cached_property
    def charging_rate_w(self) -> float:
        """Battery capacity / charging duration (W).  0 when the duration is 0."""
        if self.charging_duration_s <= 0.0:
            return 0.0
        return self.battery_capacity_j / self.charging_duration_s

    @computed_field
    @cached_property
    def transport_power_w(self) -> float:
        """Cruise speed × energy consumption (W)."""
        return self.cruise_speed_m_per_s * self.energy_consumption_j_per_m

    @computed_field
    @cached_property
    def range_limit_m(self) -> float:
        """Distance flown on a full battery (m).  0 when consumption is 0."""
        if self.energy_consumption_j_per_m <= 0.0:
            return 0.0
        return self.battery_capacity_j / self.energy_consumption_j_per_m

    @computed_field
    @cached_property
    def endurance_limit_s(self) -> float:
        """Flight time on a full battery (s).  0 when cruise speed is 0."""
        if self.cruise_speed_m_per_s <= 0.0:
            return 0.0
        return self.range_limit_m / self.cruise_speed_m_per_s
