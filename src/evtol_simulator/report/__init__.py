"""Report — plain-text results output."""

from evtol_simulator.report.results_table import format_results_table, write_results_file

__all__ = [
    "format_results_table",
    "write_results_file",
]
