"""
Pydantic models for efficiency measures, budget editing and scenario form rules.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel

from airaudit.config import BudgetCategory, BudgetChapter, ProfileType
from airaudit.models.project import ProjectData
from airaudit.models.scenario import ScenarioData


class ImpactType(str, Enum):
    POWER = "power"
    FLOW = "flow"
    PRESSURE = "pressure"
    UNLOAD = "unload"
    MULTI = "multi"


class BudgetTemplate(BaseModel):
    """Default budget line injected when a measure is selected."""
    description: str
    category: BudgetCategory
    chapter: BudgetChapter
    quantity: float
    unit_price: float


class PredefinedMeasure(BaseModel):
    id: str
    title: str
    description: str
    impact_type: ImpactType
    suggested_impact: str
    default_budget_templates: list[BudgetTemplate]


class ToggleMeasureInput(BaseModel):
    project: ProjectData
    measure_id: str


class ChapterTotal(BaseModel):
    chapter: BudgetChapter
    item_count: int
    total: float


class BudgetSummary(BaseModel):
    chapters: list[ChapterTotal]
    capex_total: float


class ApplyProfileInput(BaseModel):
    scenario: ScenarioData
    profile_type: ProfileType


class UpdateFieldInput(BaseModel):
    scenario: ScenarioData
    field: str
    value: Any


class CustomItemInput(BaseModel):
    """Chapter that receives a new hand-written budget line."""
    chapter: BudgetChapter
