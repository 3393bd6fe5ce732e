"""
Scenario metrics and results aggregation engine.

Provides:
  - Scenario metrics: annual energy, useful air volume, cost and SEC for one
    operating scenario, with every correction factor exposed.
  - Comparison: savings of the proposed scenario over the base and a simple
    linear payback against an externally summed CAPEX.
  - Project results: both of the above for a whole project, plus the
    calculation steps shown in the results table and the report.

Formulas:
  Pressure factor:  Fp = 1 + (P_bar - 7) × 0.07
  Leak factor:      Fl = 1 + leak% / 100
  Load energy:      E_load = h_load × P_load × Fp × Fl
  Unload energy:    E_unload = h_unload × P_unload   (no correction)
  Useful volume:    V_useful = h_load × Q_ls × 3.6 × (1 - leak% / 100)
  SEC:              E / V_useful   (0 when V_useful ≤ 0)

No input is validated: out-of-range values give consistent but physically
meaningless figures rather than errors.
"""

from airaudit.config import (
    CO2_KG_PER_KWH,
    LS_HOURS_TO_M3,
    PRESSURE_PENALTY_PER_BAR,
    REFERENCE_PRESSURE_BAR,
)
from airaudit.engine.budget import capex_total
from airaudit.models.project import CalculationStep, ProjectData, ProjectResults
from airaudit.models.scenario import (
    ComparisonResult,
    ScenarioData,
    ScenarioMetricsResult,
)


def compute_scenario_metrics(
    scenario: ScenarioData,
    energy_cost_per_kwh: float,
) -> ScenarioMetricsResult:
    """Compute the annual energy, volume, cost and SEC of one scenario."""
    s = scenario

    pressure_factor = 1 + (s.pressure_bar - REFERENCE_PRESSURE_BAR) * PRESSURE_PENALTY_PER_BAR
    power_load_adjusted = s.power_load_kw * pressure_factor

    # Leaked air must be produced on top of the useful demand
    leak_factor = 1 + s.leak_percentage / 100

    annual_hours_load = s.hours_load_per_day * s.days_per_week * s.weeks_per_year
    annual_hours_unload = s.hours_unload_per_day * s.days_per_week * s.weeks_per_year

    energy_load = annual_hours_load * power_load_adjusted * leak_factor
    energy_unload = annual_hours_unload * s.power_unload_kw
    annual_energy = energy_load + energy_unload

    volume_total = annual_hours_load * s.flow_ls * LS_HOURS_TO_M3
    volume_useful = volume_total * (1 - s.leak_percentage / 100)

    energy_cost = annual_energy * energy_cost_per_kwh
    total_opex = energy_cost + s.maintenance_cost_euro_per_year

    sec = annual_energy / volume_useful if volume_useful > 0 else 0.0

    return ScenarioMetricsResult(
        pressure_factor=pressure_factor,
        leak_factor=leak_factor,
        power_load_adjusted_kw=power_load_adjusted,
        annual_hours_load=annual_hours_load,
        annual_hours_unload=annual_hours_unload,
        energy_load_kwh=energy_load,
        energy_unload_kwh=energy_unload,
        annual_energy_kwh=annual_energy,
        volume_total_m3=volume_total,
        volume_useful_m3=volume_useful,
        energy_cost=energy_cost,
        maintenance_cost=s.maintenance_cost_euro_per_year,
        total_opex=total_opex,
        sec_kwh_per_m3=sec,
    )


def compute_comparison(
    base: ScenarioMetricsResult,
    proposed: ScenarioMetricsResult,
    capex_total: float,
) -> ComparisonResult:
    """
    Compare two scenarios.

    Negative savings are a valid finding. Payback is 0 whenever savings are
    not positive, which callers must read as "not applicable".
    """
    savings_euro = base.total_opex - proposed.total_opex
    payback_years = capex_total / savings_euro if savings_euro > 0 else 0.0

    return ComparisonResult(
        savings_energy_kwh=base.annual_energy_kwh - proposed.annual_energy_kwh,
        savings_euro=savings_euro,
        capex_total=capex_total,
        payback_years=payback_years,
    )


def sec_improvement_pct(base_sec: float, proposed_sec: float) -> float:
    """Relative SEC reduction in %, 0 when the base SEC is not positive."""
    if base_sec <= 0:
        return 0.0
    return (1 - proposed_sec / base_sec) * 100


def compute_project_results(project: ProjectData) -> ProjectResults:
    """Compute base, proposed and comparison results for a whole project."""
    base = compute_scenario_metrics(project.base_scenario, project.energy_cost)
    proposed = compute_scenario_metrics(project.proposed_scenario, project.energy_cost)
    comparison = compute_comparison(base, proposed, capex_total(project.budget_items))

    return ProjectResults(
        base=base,
        proposed=proposed,
        comparison=comparison,
        co2_reduction_kg=comparison.savings_energy_kwh * CO2_KG_PER_KWH,
        sec_improvement_pct=sec_improvement_pct(base.sec_kwh_per_m3, proposed.sec_kwh_per_m3),
        calculation_steps=_build_calculation_steps(project, base, proposed),
    )


def _build_calculation_steps(
    project: ProjectData,
    base: ScenarioMetricsResult,
    proposed: ScenarioMetricsResult,
) -> list[CalculationStep]:
    """Build the human-readable traceability rows."""
    b = project.base_scenario
    p = project.proposed_scenario

    # Corrected power here is a display figure combining both factors
    base_corrected = b.power_load_kw * base.pressure_factor * base.leak_factor
    prop_corrected = p.power_load_kw * proposed.pressure_factor * proposed.leak_factor

    return [
        CalculationStep(
            label="Pressure penalty (base vs proposed)",
            formula="1 + (P_bar - 7) * 0.07",
            value=f"Base: x{base.pressure_factor:.2f} | Prop: x{proposed.pressure_factor:.2f}",
        ),
        CalculationStep(
            label="Consumption increase from leaks (%)",
            formula="1 + (Leaks / 100)",
            value=(
                f"Base: x{base.leak_factor:.2f} (+{b.leak_percentage:g}%) | "
                f"Prop: x{proposed.leak_factor:.2f} (+{p.leak_percentage:g}%)"
            ),
        ),
        CalculationStep(
            label="Corrected load power (kW)",
            formula="P_nominal * F_pressure * F_leaks",
            value=f"Base: {base_corrected:.1f} kW | Prop: {prop_corrected:.1f} kW",
        ),
        CalculationStep(
            label="Useful specific energy consumption (SEC)",
            formula="Total energy (kWh) / Useful air volume (m³)",
            value=f"Base: {base.sec_kwh_per_m3:.4f} | Prop: {proposed.sec_kwh_per_m3:.4f} kWh/m³",
        ),
    ]
