"""
Pydantic models for an audit project: budget lines, the project snapshot
and the whole-project results view.
"""

from typing import Optional

from pydantic import BaseModel, Field, computed_field

from airaudit.config import BudgetCategory, BudgetChapter, DEFAULT_ENERGY_COST
from airaudit.models.scenario import (
    ComparisonResult,
    ScenarioData,
    ScenarioMetricsResult,
)


class BudgetItem(BaseModel):
    """One CAPEX line, optionally tagged with the measure that created it."""
    id: str
    measure_id: Optional[str] = None
    description: str
    category: BudgetCategory
    chapter: BudgetChapter
    quantity: float
    unit_price: float

    @computed_field
    @property
    def total(self) -> float:
        return self.quantity * self.unit_price


class ProjectData(BaseModel):
    """Whole project state; the JSON form of this model is the saved file."""
    client_name: str = ""
    installation: str = ""
    location: str = ""
    date: str = ""
    technician_name: str = ""
    energy_cost: float = DEFAULT_ENERGY_COST     # €/kWh
    selected_measure_ids: list[str] = Field(default_factory=list)
    custom_measures: list[str] = Field(default_factory=list)
    budget_items: list[BudgetItem] = Field(default_factory=list)
    base_scenario: ScenarioData
    proposed_scenario: ScenarioData


class CalculationStep(BaseModel):
    """Traceability row shown in the results table and the report."""
    label: str
    formula: str
    value: str


class ProjectResults(BaseModel):
    """Base and proposed metrics, their comparison and derived indicators."""
    base: ScenarioMetricsResult
    proposed: ScenarioMetricsResult
    comparison: ComparisonResult
    co2_reduction_kg: float
    sec_improvement_pct: float
    calculation_steps: list[CalculationStep]
