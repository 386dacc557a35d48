"""eVTOL Fleet Simulator — Streamlit Dashboard.

Layout: sidebar inputs → main area with two tabs (Fleet | Vehicle Models).
Design: metric cards for headlines, a per-model table, a fleet-status
timeline and the plain-text results table for export.

Run with:
    streamlit run src/evtol_simulator/dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from evtol_simulator.config import FleetConfig, Scenario, SimulationConfig, sample_vehicle_models
from evtol_simulator.engine.orchestrator import run_engine
from evtol_simulator.models.results import SimulationResult
from evtol_simulator.report.results_table import format_results_table
from evtol_simulator.units import HOUR, KILOWATT_HOUR, MILE, MILE_PER_HOUR, PER_HOUR

# ---------------------------------------------------------------------------
# Default instances used as sidebar defaults
# ---------------------------------------------------------------------------
_DEF_F = FleetConfig()
_DEF_SIM = SimulationConfig()

st.set_page_config(page_title="eVTOL Fleet Simulator", page_icon="🚁", layout="wide")

st.title("eVTOL Fleet Simulator")
st.caption("Fleet of electric aircraft sharing single-charger stations · per-model flight, charging and fault statistics")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _card(icon: str, label: str, value: str, accent: str = "#6c5ce7") -> str:
    """Return HTML for a styled metric card with colored top accent."""
    return f"""
    <div style="
        border: 1px solid rgba(255,255,255,0.05);
        border-top: 3px solid {accent};
        border-radius: 8px;
        padding: 14px 16px 12px;
        text-align: center;
    ">
        <div style="font-size: 1.3rem; margin-bottom: 2px; line-height: 1;">{icon}</div>
        <div style="font-size: 1.25rem; font-weight: 700;">{value}</div>
        <div style="font-size: 0.65rem; text-transform: uppercase; letter-spacing: 0.6px; margin-top: 3px;">{label}</div>
    </div>
    """


def _models_frame(result: SimulationResult) -> pd.DataFrame:
    """Per-model results in display units (hours, miles)."""
    rows = []
    for report in result.models:
        s = report.statistics
        rows.append({
            "Manufacturer": report.manufacturer_name,
            "Model": report.model_name,
            "Vehicles": report.vehicle_count,
            "Flights": s.total_flight_count,
            "Mean flight (hr)": round(s.mean_flight_duration_s / HOUR, 4),
            "Mean distance (mi)": round(s.mean_flight_distance_m / MILE, 2),
            "Charging sessions": s.total_charging_session_count,
            "Mean charge (hr)": round(s.mean_charging_duration_s / HOUR, 4),
            "Passenger-miles": round(s.total_flight_passenger_distance_m / MILE, 1),
            "Faults": s.total_fault_count,
        })
    return pd.DataFrame(rows)


def _timeline_frame(result: SimulationResult) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Hours": snap.elapsed_time_s / HOUR,
            "Flying": snap.flying,
            "Charging": snap.charging,
            "Waiting": snap.waiting_to_charge,
            "On standby": snap.on_standby,
        }
        for snap in (result.timeline or [])
    ])


# ---------------------------------------------------------------------------
# SIDEBAR: Inputs
# ---------------------------------------------------------------------------
st.sidebar.header("Scenario Inputs")

with st.sidebar.expander("Fleet", expanded=True):
    c1, c2 = st.columns(2)
    f_vehicles = c1.number_input("Vehicles", 0, 10_000, _DEF_F.vehicle_count, 1)
    f_stations = c2.number_input("Stations", 0, 1_000, _DEF_F.charging_station_count, 1)

with st.sidebar.expander("Simulation", expanded=True):
    sim_hours = st.number_input("Duration (hours)", 0.0, 240.0, _DEF_SIM.duration_hours, 0.5)
    sim_seed = st.number_input("Seed", 0, 999999, 42, help="Random seed for reproducibility")

scenario = Scenario(
    fleet=FleetConfig(vehicle_count=f_vehicles, charging_station_count=f_stations),
    simulation=SimulationConfig(duration_hours=sim_hours, random_seed=sim_seed, record_timeline=True),
    vehicle_models=sample_vehicle_models(),
)

run_clicked = st.sidebar.button("Run Simulation", type="primary", use_container_width=True)

if not (run_clicked or "result" in st.session_state):
    st.info("Configure the fleet in the sidebar, then click **Run Simulation**.")
    st.stop()

# ---------------------------------------------------------------------------
# RUN ENGINE
# ---------------------------------------------------------------------------
if run_clicked:
    with st.spinner("Running simulation…"):
        st.session_state["result"] = run_engine(scenario)
result: SimulationResult = st.session_state["result"]

fleet_tab, models_tab = st.tabs(["Fleet", "Vehicle Models"])

# ═══════════════════════════════════════════════════════════════════════════
# FLEET TAB
# ═══════════════════════════════════════════════════════════════════════════
with fleet_tab:
    if result.stalled:
        st.warning(
            f"Simulation stalled at {result.elapsed_time_s / HOUR:.3f} h: "
            "no vehicle could change status."
        )

    models_df = _models_frame(result)
    total_flights = int(models_df["Flights"].sum()) if not models_df.empty else 0
    total_faults = int(models_df["Faults"].sum()) if not models_df.empty else 0
    passenger_miles = float(models_df["Passenger-miles"].sum()) if not models_df.empty else 0.0

    cols = st.columns(5)
    cards = [
        ("🚁", "Vehicles", f"{result.vehicle_count:,}", "#6c5ce7"),
        ("🔌", "Stations", f"{result.charging_station_count:,}", "#00b894"),
        ("🛫", "Flights", f"{total_flights:,}", "#0984e3"),
        ("👥", "Passenger-miles", f"{passenger_miles:,.0f}", "#fdcb6e"),
        ("⚠️", "Faults", f"{total_faults:,}", "#e17055"),
    ]
    for col, (icon, label, value, accent) in zip(cols, cards):
        col.markdown(_card(icon, label, value, accent), unsafe_allow_html=True)
    st.write("")
    st.caption(
        f"{result.step_count:,} time steps · {result.elapsed_time_s / HOUR:.3f} of "
        f"{result.duration_s / HOUR:.3f} hours simulated"
    )

    st.subheader("Fleet Status Over Time")
    timeline_df = _timeline_frame(result)
    if timeline_df.empty:
        st.caption("No timeline recorded.")
    else:
        fig = go.Figure()
        for name, color in [
            ("Flying", "#0984e3"),
            ("Charging", "#00b894"),
            ("Waiting", "#fdcb6e"),
            ("On standby", "#b2bec3"),
        ]:
            fig.add_trace(go.Scatter(
                x=timeline_df["Hours"],
                y=timeline_df[name],
                name=name,
                mode="lines",
                line={"shape": "hv", "color": color},
                stackgroup="fleet",
            ))
        fig.update_layout(
            xaxis_title="Elapsed time (hours)",
            yaxis_title="Vehicles",
            height=360,
            margin={"l": 40, "r": 20, "t": 20, "b": 40},
            legend={"orientation": "h"},
        )
        st.plotly_chart(fig, use_container_width=True)

    st.subheader("Per-Model Results")
    st.dataframe(models_df, use_container_width=True, hide_index=True)

    with st.expander("Results table (text)"):
        report_text = format_results_table(result)
        st.code(report_text, language=None)
        st.download_button("Download results", report_text, file_name="results.txt")

# ═══════════════════════════════════════════════════════════════════════════
# VEHICLE MODELS TAB
# ═══════════════════════════════════════════════════════════════════════════
with models_tab:
    st.subheader("Vehicle Model Catalog")
    st.dataframe(
        pd.DataFrame([
            {
                "Manufacturer": m.manufacturer_name,
                "Model": m.model_name,
                "Passengers": m.passenger_count,
                "Cruise (mph)": round(m.cruise_speed_m_per_s / MILE_PER_HOUR, 1),
                "Battery (kWh)": round(m.battery_capacity_j / KILOWATT_HOUR, 1),
                "Charge time (hr)": round(m.charging_duration_s / HOUR, 2),
                "Faults / hr": round(m.fault_rate_per_s / PER_HOUR, 3),
                "Range (mi)": round(m.range_limit_m / MILE, 1),
                "Endurance (hr)": round(m.endurance_limit_s / HOUR, 3),
            }
            for m in scenario.vehicle_models
        ]),
        use_container_width=True,
        hide_index=True,
    )
