"""FastAPI server — HTTP access to the eVTOL fleet simulator.

Run with:
    uvicorn evtol_simulator.api.server:app --reload --port 8000

Or:
    python -m evtol_simulator.api.server

Endpoints:
    GET  /health             — liveness probe
    GET  /schema             — full JSON Schema for Scenario inputs
    GET  /scenario/defaults  — complete default scenario as JSON
    GET  /vehicle-models     — the default vehicle-model catalog
    POST /simulate           — run a simulation (partial or full Scenario)
    POST /simulate/report    — run a simulation, return only the results table
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, ValidationError

from evtol_simulator.config.scenario import Scenario
from evtol_simulator.engine.orchestrator import run_engine
from evtol_simulator.models.results import SimulationResult
from evtol_simulator.report.results_table import format_results_table


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="eVTOL Fleet Simulator API",
    version="1.0",
    description=(
        "Discrete-event simulation of an eVTOL fleet sharing a network of "
        "single-charger stations. Configure the fleet, stations and vehicle "
        "models, run a simulation, and get per-model flight, charging and "
        "fault statistics."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SimulateRequest(BaseModel):
    """Request body for /simulate. All fields optional — defaults used for missing."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults. "
                    "Example: {'fleet': {'vehicle_count': 50}, 'simulation': {'random_seed': 7}}",
    )


class SimulateResponse(BaseModel):
    """Response from /simulate."""
    result: SimulationResult
    report: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _default_scenario() -> dict[str, Any]:
    return Scenario().model_dump(mode="json")


def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults."""
    defaults = _default_scenario()
    _deep_merge(defaults, overrides)
    try:
        return Scenario(**defaults)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointers to the main endpoints."""
    return {
        "name": "eVTOL Fleet Simulator API",
        "version": "1.0",
        "start_here": "GET /scenario/defaults",
        "docs": "GET /docs (interactive Swagger UI)",
        "description": "Fleet simulation of eVTOL aircraft sharing a charging-station network.",
    }


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario — all input parameters with types, defaults, constraints."""
    return Scenario.model_json_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return _default_scenario()


@app.get("/vehicle-models")
def get_vehicle_models():
    """Default vehicle-model catalog, SI units, including derived rates and limits."""
    return _default_scenario()["vehicle_models"]


@app.post("/simulate", response_model=SimulateResponse)
def simulate(req: SimulateRequest):
    """Run a simulation.

    Send a partial Scenario (only the fields you want to change).
    Missing fields use defaults. Returns the full SimulationResult plus the
    plain-text results table.

    Example minimal request:
    ```json
    {"scenario": {"fleet": {"vehicle_count": 50, "charging_station_count": 5}}}
    ```
    """
    scenario = _build_scenario(req.scenario)
    result = run_engine(scenario)
    return SimulateResponse(result=result, report=format_results_table(result))


@app.post("/simulate/report", response_class=PlainTextResponse)
def simulate_report(req: SimulateRequest):
    """Run a simulation and return ONLY the results table as plain text."""
    scenario = _build_scenario(req.scenario)
    return format_results_table(run_engine(scenario))


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "evtol_simulator.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
