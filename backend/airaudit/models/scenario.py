"""
Pydantic models for operating scenarios and their computed metrics.

Provides models for:
  - ScenarioData: one operating regime (base or proposed)
  - ScenarioMetricsResult: annual energy, volume, cost and SEC for a scenario
  - ComparisonResult: base vs proposed savings and payback
"""

from typing import Optional

from pydantic import BaseModel, Field

from airaudit.config import CompressorType, ProfileType


class ScenarioData(BaseModel):
    """
    One compressed-air operating regime.

    Values are not range-checked: load + unload hours ≤ 24, days ≤ 7 and
    weeks ≤ 52 are obligations of the caller (see engine.scenario_editor).
    """
    compressor_type: CompressorType
    profile_type: ProfileType
    load_start_time: int                 # hour of day [0, 24)
    hours_load_per_day: float
    hours_unload_per_day: float
    power_load_kw: float
    power_unload_kw: float
    flow_ls: float                       # free-air delivery, L/s
    pressure_bar: float
    leak_percentage: float               # % of produced air lost to leaks
    days_per_week: int
    weeks_per_year: int
    maintenance_cost_euro_per_year: float
    selected_model_id: Optional[str] = None


class ScenarioMetricsInput(BaseModel):
    """Input for a single-scenario metrics calculation."""
    scenario: ScenarioData
    energy_cost_per_kwh: float


class ScenarioMetricsResult(BaseModel):
    """Annual figures for one scenario, including every correction factor."""
    pressure_factor: float
    leak_factor: float
    power_load_adjusted_kw: float
    annual_hours_load: float
    annual_hours_unload: float
    energy_load_kwh: float
    energy_unload_kwh: float
    annual_energy_kwh: float
    volume_total_m3: float
    volume_useful_m3: float
    energy_cost: float
    maintenance_cost: float
    total_opex: float
    sec_kwh_per_m3: float     # 0 when useful volume ≤ 0


class ComparisonInput(BaseModel):
    """Input for a base vs proposed comparison."""
    base: ScenarioMetricsResult
    proposed: ScenarioMetricsResult
    capex_total: float = 0.0


class ComparisonResult(BaseModel):
    """Savings of the proposed scenario over the base scenario."""
    savings_energy_kwh: float
    savings_euro: float
    capex_total: float
    payback_years: float = Field(
        ..., description="0 when savings are not positive (not applicable)"
    )
