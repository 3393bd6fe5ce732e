"""
Pydantic models for the chronological load simulator and its diagrams.
"""

from enum import Enum

from pydantic import BaseModel

from airaudit.models.project import ProjectData


class DiagramView(str, Enum):
    DAILY = "daily"      # first 24 h, kW
    WEEKLY = "weekly"    # first 168 h every 2 h, kW
    MONTHLY = "monthly"  # energy per month, MWh
    ANNUAL = "annual"    # mean power per day, kW


class DailyProfileOutput(BaseModel):
    """24 hourly power values (kW) for one day."""
    values: list[float]


class AnnualTableOutput(BaseModel):
    """8760 hourly power values (kW) for a simulated year."""
    values: list[float]
    peak_kw: float
    total_kwh: float


class SeriesPoint(BaseModel):
    """Single chart point with base and proposed values side by side."""
    label: str
    base: float
    proposed: float


class LoadStats(BaseModel):
    peak_kw: float
    total_kwh: float


class LoadDiagramInput(BaseModel):
    project: ProjectData
    view: DiagramView = DiagramView.DAILY


class LoadDiagramOutput(BaseModel):
    """Chart series for one view plus annual statistics for both scenarios."""
    view: DiagramView
    unit: str
    series: list[SeriesPoint]
    base_stats: LoadStats
    proposed_stats: LoadStats
