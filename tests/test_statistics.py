"""Tests for engine/statistics.py — per-vehicle accumulators and aggregation.

Covers:
  - Zero counts give zero means
  - Means track totals after every mutation
  - Passenger-distance accumulates per flight segment
  - Aggregation: totals add, means recomputed (never averaged)
  - Aggregation is commutative and associative over totals
  - copy() is independent
  - to_summary() snapshot
"""

from __future__ import annotations

import pytest

from evtol_simulator.engine.statistics import Statistics
from evtol_simulator.models.results import ModelStatistics


def _flights(*durations: float, distance_per_s: float = 10.0, passengers: int = 2) -> Statistics:
    stats = Statistics()
    for d in durations:
        stats.increment_flight_count()
        stats.add_flight(passengers, d, d * distance_per_s)
    return stats


def _totals(stats: Statistics) -> tuple:
    return (
        stats.total_flight_count,
        stats.total_flight_duration_s,
        stats.total_flight_distance_m,
        stats.total_flight_passenger_distance_m,
        stats.total_charging_session_count,
        stats.total_charging_duration_s,
        stats.total_fault_count,
    )


# ═══════════════════════════════════════════════════════════════════════════
# Accumulation
# ═══════════════════════════════════════════════════════════════════════════

class TestAccumulation:

    def test_empty(self):
        stats = Statistics()
        assert stats.total_flight_count == 0
        assert stats.mean_flight_duration_s == 0.0
        assert stats.mean_flight_distance_m == 0.0
        assert stats.mean_charging_duration_s == 0.0
        assert stats.total_fault_count == 0

    def test_open_flight_without_time_has_zero_mean(self):
        stats = Statistics()
        stats.increment_flight_count()
        assert stats.total_flight_count == 1
        assert stats.mean_flight_duration_s == 0.0

    def test_single_flight(self):
        stats = _flights(10.0)
        assert stats.total_flight_duration_s == pytest.approx(10.0)
        assert stats.total_flight_distance_m == pytest.approx(100.0)
        assert stats.total_flight_passenger_distance_m == pytest.approx(200.0)
        assert stats.mean_flight_duration_s == pytest.approx(10.0)
        assert stats.mean_flight_distance_m == pytest.approx(100.0)

    def test_flight_split_across_segments(self):
        stats = Statistics()
        stats.increment_flight_count()
        stats.add_flight(3, 4.0, 40.0)
        stats.add_flight(3, 6.0, 60.0)
        assert stats.total_flight_count == 1
        assert stats.mean_flight_duration_s == pytest.approx(10.0)
        assert stats.total_flight_passenger_distance_m == pytest.approx(300.0)

    def test_mean_over_flights(self):
        stats = _flights(10.0, 30.0)
        assert stats.mean_flight_duration_s == pytest.approx(20.0)
        assert stats.mean_flight_distance_m == pytest.approx(200.0)

    def test_charging_mean(self):
        stats = Statistics()
        for d in (1.0, 2.0, 6.0):
            stats.increment_charging_session_count()
            stats.add_charging_duration(d)
        assert stats.total_charging_session_count == 3
        assert stats.mean_charging_duration_s == pytest.approx(3.0)

    def test_faults(self):
        stats = Statistics()
        stats.add_faults(2)
        stats.add_faults(0)
        stats.add_faults(5)
        assert stats.total_fault_count == 7

    def test_means_derived_on_construction(self):
        stats = Statistics(total_flight_count=2, total_flight_duration_s=10.0)
        assert stats.mean_flight_duration_s == pytest.approx(5.0)


# ═══════════════════════════════════════════════════════════════════════════
# Aggregation
# ═══════════════════════════════════════════════════════════════════════════

class TestAggregation:

    def test_means_weight_each_flight_equally(self):
        a = _flights(10.0)
        b = _flights(10.0, 20.0, 20.0)
        a.aggregate(b)
        assert a.total_flight_count == 4
        assert a.total_flight_duration_s == pytest.approx(60.0)
        assert a.mean_flight_duration_s == pytest.approx(15.0)

    def test_identity(self):
        a = _flights(10.0, 5.0)
        before = _totals(a)
        a.aggregate(Statistics())
        assert _totals(a) == before

    def test_commutative(self):
        a = _flights(10.0)
        a.add_faults(3)
        b = _flights(7.0, 8.0, passengers=4)
        b.increment_charging_session_count()
        b.add_charging_duration(2.5)

        ab = a.copy()
        ab.aggregate(b)
        ba = b.copy()
        ba.aggregate(a)
        assert _totals(ab) == pytest.approx(_totals(ba))
        assert ab.mean_flight_duration_s == pytest.approx(ba.mean_flight_duration_s)

    def test_associative(self):
        a, b, c = _flights(1.0), _flights(2.0, 3.0), _flights(4.0)

        left = a.copy()
        left.aggregate(b)
        left.aggregate(c)

        bc = b.copy()
        bc.aggregate(c)
        right = a.copy()
        right.aggregate(bc)

        assert _totals(left) == pytest.approx(_totals(right))

    def test_copy_is_independent(self):
        a = _flights(10.0)
        b = a.copy()
        b.aggregate(_flights(5.0))
        assert a.total_flight_count == 1
        assert b.total_flight_count == 2


class TestSummary:

    def test_to_summary(self):
        stats = _flights(10.0, 30.0)
        stats.add_faults(4)
        summary = stats.to_summary()
        assert isinstance(summary, ModelStatistics)
        assert summary.total_flight_count == 2
        assert summary.mean_flight_duration_s == pytest.approx(20.0)
        assert summary.total_fault_count == 4
        assert summary.total_charging_session_count == 0
