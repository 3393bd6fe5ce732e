"""
OEM compressor catalog.

Holds a curated set of screw compressor models and supports searching and
copying a model's figures into a scenario. Applying a model is a one-shot
copy: the scenario keeps only the model id and drifts freely afterwards.
"""

from typing import Optional

from airaudit.config import (
    FIXED_UNLOAD_POWER_FRACTION,
    VSD_UNLOAD_POWER_FRACTION,
    Brand,
    CompressorType,
)
from airaudit.models.catalog import CompressorModel, EfficiencyPoint
from airaudit.models.scenario import ScenarioData

# Specific power multipliers at 20/40/60/80/100 % flow for VSD machines
_VSD_CURVE_SHAPE = [(20, 1.25), (40, 1.10), (60, 1.02), (80, 1.00), (100, 1.01)]

_FIXED = CompressorType.FIXED_SPEED_SCREW
_VSD = CompressorType.VSD_SCREW


def _vsd_curve(base_specific_power: float) -> list[EfficiencyPoint]:
    return [
        EfficiencyPoint(flow_percentage=pct, specific_power=base_specific_power * k)
        for pct, k in _VSD_CURVE_SHAPE
    ]


def _model(
    model_id: str,
    brand: Brand,
    name: str,
    ctype: CompressorType,
    kw: float,
    flow: float,
    pmax: float,
    specific: float,
    price: float,
) -> CompressorModel:
    return CompressorModel(
        id=model_id,
        brand=brand,
        model=name,
        type=ctype,
        nominal_power_kw=kw,
        flow_ls=flow,
        pressure_max_bar=pmax,
        specific_power_kw_m3min=specific,
        efficiency_curve=_vsd_curve(specific) if ctype == _VSD else None,
        estimated_price=price,
    )


_AC = Brand.ATLAS_COPCO
_KS = Brand.KAESER
_IR = Brand.INGERSOLL_RAND

COMPRESSOR_DATABASE: list[CompressorModel] = [
    # Atlas Copco GA, fixed speed
    _model("ac-ga7", _AC, "GA 7", _FIXED, 7.5, 21, 10, 7.2, 6800),
    _model("ac-ga11", _AC, "GA 11", _FIXED, 11, 30, 10, 6.8, 8500),
    _model("ac-ga15", _AC, "GA 15", _FIXED, 15, 42, 10, 6.6, 10200),
    _model("ac-ga22", _AC, "GA 22", _FIXED, 22, 65, 10, 6.4, 14500),
    _model("ac-ga37", _AC, "GA 37", _FIXED, 37, 112, 10, 6.2, 19800),
    _model("ac-ga55", _AC, "GA 55", _FIXED, 55, 172, 10, 6.1, 28000),
    _model("ac-ga75", _AC, "GA 75", _FIXED, 75, 235, 10, 5.9, 39000),
    _model("ac-ga90", _AC, "GA 90", _FIXED, 90, 285, 10, 5.8, 48000),
    # Atlas Copco GA VSD+
    _model("ac-ga7vsd", _AC, "GA 7 VSD+", _VSD, 7.5, 24, 13, 6.4, 11500),
    _model("ac-ga11vsd", _AC, "GA 11 VSD+", _VSD, 11, 34, 13, 6.2, 13800),
    _model("ac-ga15vsd", _AC, "GA 15 VSD+", _VSD, 15, 48, 13, 6.1, 16200),
    _model("ac-ga22vsd", _AC, "GA 22 VSD+", _VSD, 22, 72, 13, 5.9, 21000),
    _model("ac-ga37vsd", _AC, "GA 37 VSD+", _VSD, 37, 125, 13, 5.7, 29500),
    _model("ac-ga55vsd", _AC, "GA 55 VSD+", _VSD, 55, 188, 13, 5.5, 42000),
    _model("ac-ga75vsd", _AC, "GA 75 VSD+", _VSD, 75, 245, 13, 5.4, 58000),
    _model("ac-ga90vsd", _AC, "GA 90 VSD+", _VSD, 90, 295, 13, 5.3, 72000),
    # Kaeser SM / SK / AS
    _model("ks-sm10", _KS, "SM 10", _FIXED, 5.5, 15, 11, 7.5, 5200),
    _model("ks-sk22", _KS, "SK 22", _FIXED, 11, 33, 11, 6.9, 7900),
    _model("ks-as31", _KS, "AS 31", _FIXED, 18.5, 52, 11, 6.6, 11200),
    # Kaeser ASD / BSD / CSD
    _model("ks-asd40", _KS, "ASD 40", _FIXED, 22, 68, 12, 6.4, 15800),
    _model("ks-asd40v", _KS, "ASD 40 SFC", _VSD, 22, 75, 12, 6.3, 22500),
    _model("ks-bsd75", _KS, "BSD 75", _FIXED, 37, 118, 12, 6.2, 21500),
    _model("ks-csd105", _KS, "CSD 105", _FIXED, 55, 185, 12, 6.1, 32000),
    _model("ks-csd125v", _KS, "CSD 125 SFC", _VSD, 75, 242, 12, 5.8, 49000),
    # Kaeser DSD
    _model("ks-dsd175", _KS, "DSD 175", _FIXED, 90, 295, 15, 5.9, 58000),
    _model("ks-dsd240v", _KS, "DSD 240 SFC", _VSD, 132, 420, 15, 5.6, 84000),
    # Ingersoll Rand
    _model("ir-rs11", _IR, "RS11i", _FIXED, 11, 29, 10, 7.0, 8800),
    _model("ir-rs15", _IR, "RS15i", _FIXED, 15, 41, 10, 6.8, 10800),
    _model("ir-rs22", _IR, "RS22i", _FIXED, 22, 64, 10, 6.5, 15200),
    _model("ir-rs30", _IR, "RS30i", _FIXED, 30, 88, 10, 6.4, 18500),
    _model("ir-rs37v", _IR, "RS37n VSD", _VSD, 37, 122, 10, 6.2, 28500),
    _model("ir-rs55v", _IR, "RS55n VSD", _VSD, 55, 185, 10, 6.0, 45000),
    _model("ir-rs75", _IR, "RS75i", _FIXED, 75, 245, 10, 5.9, 42000),
    _model("ir-rs110v", _IR, "RS110n VSD", _VSD, 110, 365, 10, 5.7, 82000),
    _model("ir-rs160", _IR, "RS160i", _FIXED, 160, 520, 10, 5.6, 95000),
]


def search_catalog(
    query: str = "",
    brand: Optional[Brand] = None,
    compressor_type: Optional[CompressorType] = None,
) -> list[CompressorModel]:
    """
    Filter the catalog by a case-insensitive substring of model or brand,
    and optionally by brand and compressor type.
    """
    q = query.lower().strip()
    results = []
    for c in COMPRESSOR_DATABASE:
        if q and q not in c.model.lower() and q not in c.brand.value.lower():
            continue
        if brand is not None and c.brand != brand:
            continue
        if compressor_type is not None and c.type != compressor_type:
            continue
        results.append(c)
    return results


def get_compressor(model_id: str) -> CompressorModel:
    for c in COMPRESSOR_DATABASE:
        if c.id == model_id:
            return c
    raise ValueError(f"Compressor model '{model_id}' not found")


def apply_catalog_model(scenario: ScenarioData, model: CompressorModel) -> ScenarioData:
    """Return a copy of the scenario initialised from a catalog model."""
    if model.type == CompressorType.VSD_SCREW:
        unload_fraction = VSD_UNLOAD_POWER_FRACTION
    else:
        unload_fraction = FIXED_UNLOAD_POWER_FRACTION

    return scenario.model_copy(update={
        "compressor_type": model.type,
        "selected_model_id": model.id,
        "power_load_kw": model.nominal_power_kw,
        "flow_ls": model.flow_ls,
        "power_unload_kw": model.nominal_power_kw * unload_fraction,
    })
