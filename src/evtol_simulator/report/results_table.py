"""Results report — fixed-width, whitespace-separated per-model table.

Layout:

  #Manufacturer  Model  MeanFlightDuration  ...  TotalFaults
  Alpha_Company  Alpha_Model  0.750000 hr   ...  3

Durations are printed in hours and distances in miles.  Spaces inside names
become underscores so every row splits cleanly on whitespace.  Each column is
left-aligned and padded to its widest cell; columns are separated by two
spaces.
"""

from __future__ import annotations

from pathlib import Path

from evtol_simulator.models.results import ModelReport, SimulationResult
from evtol_simulator.units import HOUR, MILE

HEADER = (
    "#Manufacturer",
    "Model",
    "MeanFlightDuration",
    "MeanFlightDistance",
    "MeanChargingDuration",
    "TotalFlightPassengerDistance",
    "TotalFaults",
)

COLUMN_SEPARATOR = "  "


def _hours(duration_s: float) -> str:
    return f"{duration_s / HOUR:.6f} hr"


def _miles(distance_m: float) -> str:
    return f"{distance_m / MILE:.6f} mi"


def _token(name: str) -> str:
    return name.replace(" ", "_")


def _row(report: ModelReport) -> tuple[str, ...]:
    stats = report.statistics
    return (
        _token(report.manufacturer_name),
        _token(report.model_name),
        _hours(stats.mean_flight_duration_s),
        _miles(stats.mean_flight_distance_m),
        _hours(stats.mean_charging_duration_s),
        _miles(stats.total_flight_passenger_distance_m),
        str(stats.total_fault_count),
    )


def format_results_table(result: SimulationResult) -> str:
    """Render the per-model results as text, one line per model after the header."""
    rows = [HEADER] + [_row(report) for report in result.models]
    widths = [max(len(row[col]) for row in rows) for col in range(len(HEADER))]
    lines = [
        COLUMN_SEPARATOR.join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip()
        for row in rows
    ]
    return "\n".join(lines) + "\n"


def write_results_file(path: str | Path, result: SimulationResult) -> Path:
    """Write the results table to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_results_table(result))
    return path
