"""Unit conversion constants — every engine quantity is a float in SI units.

Field and parameter names carry the unit (``_s``, ``_m``, ``_j``, ``_w``,
``_m_per_s``, ``_per_s``, ``_j_per_m``).  Multiply an engineering value by
the matching constant to get SI; divide to go back::

    cruise_speed_m_per_s = 120.0 * MILE_PER_HOUR
    battery_capacity_j = 320.0 * KILOWATT_HOUR
    duration_hours = elapsed_time_s / HOUR
"""

from __future__ import annotations

SECOND = 1.0
MINUTE = 60.0
HOUR = 3_600.0

METRE = 1.0
KILOMETRE = 1_000.0
MILE = 1_609.344

JOULE = 1.0
KILOWATT_HOUR = 3_600_000.0

METRE_PER_SECOND = 1.0
MILE_PER_HOUR = MILE / HOUR

PER_SECOND = 1.0
PER_HOUR = 1.0 / HOUR

JOULE_PER_METRE = 1.0
KILOWATT_HOUR_PER_MILE = KILOWATT_HOUR / MILE
