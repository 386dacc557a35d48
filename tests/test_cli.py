"""Tests for cli.py — argument parsing, scenario overrides, output.

Covers:
  - Flags override scenario defaults and YAML values
  - Results table printed and optionally written to a file
  - Invalid values exit with status 2, malformed arguments via argparse
"""

from __future__ import annotations

from pathlib import Path

import pytest

from evtol_simulator.cli import build_scenario, main, parse_args

SCENARIOS = Path(__file__).parent.parent / "scenarios"


class TestBuildScenario:

    def test_defaults(self):
        s = build_scenario(parse_args([]))
        assert s.fleet.vehicle_count == 20
        assert s.fleet.charging_station_count == 3
        assert s.simulation.duration_hours == 3.0
        assert s.simulation.random_seed is None

    def test_flags_override(self):
        s = build_scenario(parse_args([
            "--vehicles", "7",
            "--charging-stations", "2",
            "--duration-hours", "1.5",
            "--seed", "11",
        ]))
        assert s.fleet.vehicle_count == 7
        assert s.fleet.charging_station_count == 2
        assert s.simulation.duration_hours == 1.5
        assert s.simulation.random_seed == 11

    def test_flags_override_yaml(self):
        s = build_scenario(parse_args([
            "--scenario", str(SCENARIOS / "single_model.yaml"),
            "--vehicles", "9",
        ]))
        assert s.fleet.vehicle_count == 9
        assert s.fleet.charging_station_count == 1
        assert s.simulation.random_seed == 7
        assert len(s.vehicle_models) == 1

    def test_bad_argument_type(self):
        with pytest.raises(SystemExit):
            parse_args(["--vehicles", "many"])


class TestMain:

    def test_prints_table(self, capsys):
        assert main(["--vehicles", "5", "--charging-stations", "2", "--duration-hours", "1", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "Vehicles:          5" in out
        assert "#Manufacturer" in out

    def test_writes_results(self, tmp_path, capsys):
        path = tmp_path / "results" / "run.txt"
        assert main(["--seed", "1", "--duration-hours", "0.5", "--results", str(path)]) == 0
        assert path.exists()
        assert path.read_text().startswith("#Manufacturer")
        assert str(path) in capsys.readouterr().out

    def test_invalid_value_exits_2(self, capsys):
        assert main(["--vehicles", "-1"]) == 2
        assert "Invalid scenario" in capsys.readouterr().err
