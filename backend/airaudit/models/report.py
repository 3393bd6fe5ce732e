"""
Pydantic models for PDF report generation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from airaudit.models.project import ProjectData


class ReportInput(BaseModel):
    """Input for generating the technical audit report."""

    title: str = "Compressed Air Energy Audit"
    project: ProjectData
    chart_image_base64: Optional[str] = Field(
        None, description="Base64-encoded PNG of the load diagram, if any"
    )
    notes: Optional[str] = Field(
        None, description="Free-text notes to include in the report"
    )
    include_sections: list[str] = Field(
        default_factory=lambda: [
            "methodology", "scenarios", "steps", "chart", "budget", "financial", "notes",
        ],
        description="Which sections to include in the report",
    )
