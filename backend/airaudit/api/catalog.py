"""
API routes for the OEM compressor catalog.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from airaudit.config import Brand, CompressorType
from airaudit.engine.catalog import apply_catalog_model, get_compressor, search_catalog
from airaudit.models.catalog import ApplyCatalogInput, CompressorModel
from airaudit.models.scenario import ScenarioData

router = APIRouter(prefix="/api/v1", tags=["catalog"])


@router.get("/catalog/compressors", response_model=list[CompressorModel])
def list_compressors(
    q: str = Query("", description="Search query (model or brand)"),
    brand: Optional[Brand] = Query(None),
    compressor_type: Optional[CompressorType] = Query(None),
):
    """Search the compressor catalog."""
    return search_catalog(q, brand=brand, compressor_type=compressor_type)


@router.get("/catalog/compressors/{compressor_id}", response_model=CompressorModel)
def compressor_detail(compressor_id: str):
    try:
        return get_compressor(compressor_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/catalog/apply", response_model=ScenarioData)
def apply_model(body: ApplyCatalogInput):
    """Copy a catalog model's power and flow figures into a scenario."""
    try:
        model = get_compressor(body.compressor_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return apply_catalog_model(body.scenario, model)
