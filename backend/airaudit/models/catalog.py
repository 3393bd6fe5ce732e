"""
Pydantic models for the OEM compressor catalog.
"""

from typing import Optional

from pydantic import BaseModel

from airaudit.config import Brand, CompressorType
from airaudit.models.scenario import ScenarioData


class EfficiencyPoint(BaseModel):
    flow_percentage: float
    specific_power: float    # kW/(m³/min)


class CompressorModel(BaseModel):
    """One catalog entry."""
    id: str
    brand: Brand
    model: str
    type: CompressorType
    nominal_power_kw: float
    flow_ls: float
    pressure_max_bar: float
    specific_power_kw_m3min: float
    efficiency_curve: Optional[list[EfficiencyPoint]] = None
    estimated_price: float
    dimensions: Optional[str] = None     # "L x W x H (mm)"
    weight_kg: Optional[float] = None
    current_a: Optional[float] = None
    voltage_v: Optional[float] = None


class ApplyCatalogInput(BaseModel):
    """Input for copying a catalog model's figures into a scenario."""
    scenario: ScenarioData
    compressor_id: str
