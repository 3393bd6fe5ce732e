"""
API route for PDF report generation.
"""

import re
from urllib.parse import quote

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from airaudit.models.report import ReportInput
from airaudit.engine.report_generator import generate_report

router = APIRouter(prefix="/api/v1", tags=["report"])


def content_disposition(title: str) -> str:
    """Attachment header with an ASCII fallback name and an RFC 5987 UTF-8 name."""
    fallback = re.sub(r'[^A-Za-z0-9 ._-]', "", title).strip() or "report"
    return (
        f'attachment; filename="{fallback}.pdf"; '
        f"filename*=UTF-8''{quote(title + '.pdf', safe='')}"
    )


@router.post("/report/generate")
async def create_report(body: ReportInput) -> Response:
    """Generate the audit report and return it as a downloadable PDF."""
    try:
        pdf_bytes = bytes(generate_report(body))
        return Response(
            content=pdf_bytes,
            media_type="application/pdf",
            headers={"Content-Disposition": content_disposition(body.title)},
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    except Exception as exc:
        raise HTTPException(status_code=500, detail=f"Report error: {str(exc)}")
