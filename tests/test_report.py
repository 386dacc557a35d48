"""Tests for report/results_table.py — fixed-width results table.

Covers:
  - Header line and one row per model
  - Units: hours and miles with six decimals
  - Spaces in names replaced by underscores
  - Column alignment across rows
  - File writing creates parent directories
"""

from __future__ import annotations

from evtol_simulator.models.results import ModelReport, ModelStatistics, SimulationResult
from evtol_simulator.report.results_table import format_results_table, write_results_file
from evtol_simulator.units import HOUR, MILE


def _report(model_id: int, manufacturer: str, model: str, **stats) -> ModelReport:
    return ModelReport(
        vehicle_model_id=model_id,
        manufacturer_name=manufacturer,
        model_name=model,
        vehicle_count=1,
        statistics=ModelStatistics(**stats),
    )


def _result(*reports: ModelReport) -> SimulationResult:
    return SimulationResult(
        duration_s=3 * HOUR,
        elapsed_time_s=3 * HOUR,
        step_count=10,
        completed=True,
        stalled=False,
        models=list(reports),
    )


ALPHA = _report(
    0, "Alpha Company", "Alpha Model",
    mean_flight_duration_s=0.75 * HOUR,
    mean_flight_distance_m=90 * MILE,
    mean_charging_duration_s=0.6 * HOUR,
    total_flight_passenger_distance_m=360 * MILE,
    total_fault_count=3,
)
BRAVO = _report(1, "Bravo Co", "B", total_fault_count=12)


class TestFormat:

    def test_header(self):
        lines = format_results_table(_result()).splitlines()
        assert lines == [
            "#Manufacturer  Model  MeanFlightDuration  MeanFlightDistance  "
            "MeanChargingDuration  TotalFlightPassengerDistance  TotalFaults"
        ]

    def test_row_values(self):
        lines = format_results_table(_result(ALPHA)).splitlines()
        assert len(lines) == 2
        assert lines[1].split() == [
            "Alpha_Company", "Alpha_Model",
            "0.750000", "hr",
            "90.000000", "mi",
            "0.600000", "hr",
            "360.000000", "mi",
            "3",
        ]

    def test_zero_statistics(self):
        row = format_results_table(_result(BRAVO)).splitlines()[1]
        assert row.split() == [
            "Bravo_Co", "B", "0.000000", "hr", "0.000000", "mi",
            "0.000000", "hr", "0.000000", "mi", "12",
        ]

    def test_columns_aligned(self):
        header, alpha, bravo = format_results_table(_result(ALPHA, BRAVO)).splitlines()
        model_col = header.index("Model")
        assert alpha[model_col:].startswith("Alpha_Model")
        assert bravo[model_col:].startswith("B ")
        faults_col = header.index("TotalFaults")
        assert alpha[faults_col:] == "3"
        assert bravo[faults_col:] == "12"

    def test_separated_by_two_spaces(self):
        row = format_results_table(_result(ALPHA)).splitlines()[1]
        assert row.startswith("Alpha_Company  Alpha_Model  ")

    def test_ends_with_newline(self):
        assert format_results_table(_result(ALPHA)).endswith("\n")


class TestWrite:

    def test_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "out" / "nested" / "results.txt"
        result = _result(ALPHA, BRAVO)
        written = write_results_file(path, result)
        assert written == path
        assert path.read_text() == format_results_table(result)
