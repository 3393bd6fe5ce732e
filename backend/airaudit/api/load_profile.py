"""
API routes for the chronological load simulator and load diagrams.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from airaudit.engine.load_diagrams import build_load_diagram, export_8760_csv, load_stats
from airaudit.engine.load_profile import generate_8760_table, generate_daily_profile
from airaudit.models.load_profile import (
    AnnualTableOutput,
    DailyProfileOutput,
    LoadDiagramInput,
    LoadDiagramOutput,
)
from airaudit.models.project import ProjectData
from airaudit.models.scenario import ScenarioData

router = APIRouter(prefix="/api/v1", tags=["load-profile"])

CSV_FILENAME = "airaudit_simulation_8760h.csv"


@router.post("/load-profile/daily", response_model=DailyProfileOutput)
async def daily_profile(scenario: ScenarioData) -> DailyProfileOutput:
    """Power draw (kW) for each hour of the day."""
    try:
        return DailyProfileOutput(values=generate_daily_profile(scenario))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/load-profile/annual", response_model=AnnualTableOutput)
async def annual_table(scenario: ScenarioData) -> AnnualTableOutput:
    """Power draw (kW) for each of the 8760 hours of the simulated year."""
    try:
        table = generate_8760_table(scenario)
        stats = load_stats(table)
        return AnnualTableOutput(values=table, peak_kw=stats.peak_kw, total_kwh=stats.total_kwh)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/load-profile/diagram", response_model=LoadDiagramOutput)
async def load_diagram(data: LoadDiagramInput) -> LoadDiagramOutput:
    """Base vs proposed chart series for one view, with peak and total stats."""
    try:
        return build_load_diagram(data.project, data.view)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.post("/load-profile/export-csv")
async def export_csv(project: ProjectData) -> Response:
    """Download both 8760-hour tables side by side as CSV."""
    try:
        content = export_8760_csv(
            generate_8760_table(project.base_scenario),
            generate_8760_table(project.proposed_scenario),
        )
        return Response(
            content=content,
            media_type="text/csv; charset=utf-8",
            headers={
                "Content-Disposition": f'attachment; filename="{CSV_FILENAME}"',
            },
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))
