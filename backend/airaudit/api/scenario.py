"""
API routes for scenario metrics, comparison and whole-project results.
"""

from fastapi import APIRouter, HTTPException

from airaudit.engine.metrics import (
    compute_comparison,
    compute_project_results,
    compute_scenario_metrics,
)
from airaudit.engine.project import new_project
from airaudit.models.project import ProjectData, ProjectResults
from airaudit.models.scenario import (
    ComparisonInput,
    ComparisonResult,
    ScenarioMetricsInput,
    ScenarioMetricsResult,
)

router = APIRouter(prefix="/api/v1", tags=["results"])


@router.post("/scenario/metrics", response_model=ScenarioMetricsResult)
async def scenario_metrics(data: ScenarioMetricsInput) -> ScenarioMetricsResult:
    """
    Compute annual energy, useful air volume, OPEX and SEC for one scenario.

    Out-of-range values are not rejected; they produce consistent but
    physically meaningless figures.
    """
    try:
        return compute_scenario_metrics(data.scenario, data.energy_cost_per_kwh)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/comparison", response_model=ComparisonResult)
async def comparison(data: ComparisonInput) -> ComparisonResult:
    """Compare base and proposed metrics; payback is 0 when savings are not positive."""
    try:
        return compute_comparison(data.base, data.proposed, data.capex_total)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/project/results", response_model=ProjectResults)
async def project_results(project: ProjectData) -> ProjectResults:
    """Compute base, proposed and comparison results for a whole project."""
    try:
        return compute_project_results(project)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.get("/project/default", response_model=ProjectData)
async def default_project() -> ProjectData:
    """Project pre-filled with a typical audited and proposed installation."""
    return new_project()
