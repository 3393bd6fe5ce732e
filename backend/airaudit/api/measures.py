"""
API routes for efficiency measures, budget summary and scenario form rules.
"""

from fastapi import APIRouter, HTTPException

from airaudit.engine.budget import new_custom_item, summarize_budget
from airaudit.engine.measures import PREDEFINED_MEASURES, sync_forced_measures, toggle_measure
from airaudit.engine.scenario_editor import apply_profile_template, update_scenario_field
from airaudit.models.measures import (
    ApplyProfileInput,
    BudgetSummary,
    CustomItemInput,
    PredefinedMeasure,
    ToggleMeasureInput,
    UpdateFieldInput,
)
from airaudit.models.project import BudgetItem, ProjectData
from airaudit.models.scenario import ScenarioData

router = APIRouter(prefix="/api/v1", tags=["measures"])


@router.get("/measures", response_model=list[PredefinedMeasure])
def list_measures():
    return PREDEFINED_MEASURES


@router.post("/measures/sync", response_model=ProjectData)
async def sync_measures(project: ProjectData) -> ProjectData:
    """Select the measures the scenarios imply and inject their budget lines."""
    try:
        return sync_forced_measures(project)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/measures/toggle", response_model=ProjectData)
async def toggle(data: ToggleMeasureInput) -> ProjectData:
    """
    Select or deselect a measure.

    Forced measures cannot be toggled and return 422.
    """
    try:
        return toggle_measure(data.project, data.measure_id)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/budget/summary", response_model=BudgetSummary)
async def budget_summary(items: list[BudgetItem]) -> BudgetSummary:
    """Totals per budget chapter and the overall CAPEX."""
    return summarize_budget(items)


@router.post("/budget/custom-item", response_model=BudgetItem)
async def custom_item(data: CustomItemInput) -> BudgetItem:
    """Blank budget line for a chapter, not tied to any measure."""
    return new_custom_item(data.chapter)


@router.post("/scenario/profile", response_model=ScenarioData)
async def apply_profile(data: ApplyProfileInput) -> ScenarioData:
    return apply_profile_template(data.scenario, data.profile_type)


@router.post("/scenario/update-field", response_model=ScenarioData)
async def update_field(data: UpdateFieldInput) -> ScenarioData:
    """Set one scenario field, clamping days, weeks and daily hours."""
    try:
        return update_scenario_field(data.scenario, data.field, data.value)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
