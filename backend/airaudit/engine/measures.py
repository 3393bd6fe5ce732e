"""
Efficiency measures and their coupling to the scenarios and the budget.

A measure is "forced" when the proposed scenario already implies it:
  - pressure_reduction: proposed pressure below base pressure
  - leak_repair:        proposed leak % below base leak %
  - vsd_install:        proposed compressor is VSD and the base is not

Forced measures are always selected and cannot be toggled off. All
functions return a new ProjectData and leave the input untouched.
"""

import logging

from airaudit.config import BudgetCategory, BudgetChapter, CompressorType
from airaudit.engine.budget import items_for_measure
from airaudit.models.measures import BudgetTemplate, ImpactType, PredefinedMeasure
from airaudit.models.project import ProjectData

logger = logging.getLogger(__name__)


class MeasureLockedError(ValueError):
    """Raised when toggling a measure the scenarios currently force."""


_CH = BudgetChapter
_CAT = BudgetCategory

PREDEFINED_MEASURES: list[PredefinedMeasure] = [
    PredefinedMeasure(
        id="leak_repair",
        title="Leak detection and repair",
        description="Locate and eliminate losses in the distribution network.",
        impact_type=ImpactType.FLOW,
        suggested_impact="Reduces the required flow by 10% to 30%.",
        default_budget_templates=[
            BudgetTemplate(description="Technical survey and ultrasonic leak audit",
                           category=_CAT.SERVICE, chapter=_CH.PREPARATORY,
                           quantity=1, unit_price=750),
            BudgetTemplate(description="Quick repair kit and pneumatic fittings",
                           category=_CAT.MATERIAL, chapter=_CH.MECHANICAL,
                           quantity=1, unit_price=350),
            BudgetTemplate(description="Labour for repairing critical points",
                           category=_CAT.LABOUR, chapter=_CH.MECHANICAL,
                           quantity=8, unit_price=45),
            BudgetTemplate(description="Site cleaning and debris removal",
                           category=_CAT.SERVICE, chapter=_CH.HANDOVER,
                           quantity=1, unit_price=150),
        ],
    ),
    PredefinedMeasure(
        id="pressure_reduction",
        title="Working pressure reduction",
        description="Lower the pressure set point to the minimum the process needs.",
        impact_type=ImpactType.PRESSURE,
        suggested_impact="Saves ~7% of energy for every 1 bar of reduction.",
        default_budget_templates=[
            BudgetTemplate(description="Pressure compatibility study at points of use",
                           category=_CAT.SERVICE, chapter=_CH.PREPARATORY,
                           quantity=1, unit_price=250),
            BudgetTemplate(description="High-accuracy pressure transducers",
                           category=_CAT.EQUIPMENT, chapter=_CH.ELECTRICAL,
                           quantity=2, unit_price=380),
            BudgetTemplate(description="Network set point tuning and optimisation",
                           category=_CAT.SERVICE, chapter=_CH.COMMISSIONING,
                           quantity=1, unit_price=150),
        ],
    ),
    PredefinedMeasure(
        id="vsd_install",
        title="VSD compressor installation",
        description="Replacement with variable speed drive technology.",
        impact_type=ImpactType.UNLOAD,
        suggested_impact="Eliminates unloaded running and matches consumption to real demand.",
        default_budget_templates=[
            BudgetTemplate(description="Electrical load and lifting study",
                           category=_CAT.SERVICE, chapter=_CH.PREPARATORY,
                           quantity=1, unit_price=350),
            BudgetTemplate(description="Dismantling and decommissioning of existing compressor (LOTO)",
                           category=_CAT.SERVICE, chapter=_CH.DISMANTLING,
                           quantity=1, unit_price=500),
            BudgetTemplate(description="OEM screw compressor with variable frequency drive (VSD)",
                           category=_CAT.EQUIPMENT, chapter=_CH.EQUIPMENT_SUPPLY,
                           quantity=1, unit_price=18500),
            BudgetTemplate(description="Concrete plinth and structural reinforcement",
                           category=_CAT.SERVICE, chapter=_CH.CIVIL,
                           quantity=1, unit_price=850),
            BudgetTemplate(description="Mechanical installation, connections and pneumatic by-pass",
                           category=_CAT.SERVICE, chapter=_CH.MECHANICAL,
                           quantity=1, unit_price=1200),
            BudgetTemplate(description="Power supply and protection panel",
                           category=_CAT.MATERIAL, chapter=_CH.ELECTRICAL,
                           quantity=1, unit_price=850),
            BudgetTemplate(description="Assisted start-up, testing and operator training",
                           category=_CAT.SERVICE, chapter=_CH.COMMISSIONING,
                           quantity=1, unit_price=650),
            BudgetTemplate(description="Operating manual and CE technical file",
                           category=_CAT.SERVICE, chapter=_CH.TRAINING,
                           quantity=1, unit_price=200),
            BudgetTemplate(description="Waste management and final cleaning of the plant room",
                           category=_CAT.SERVICE, chapter=_CH.HANDOVER,
                           quantity=1, unit_price=450),
        ],
    ),
    PredefinedMeasure(
        id="central_control",
        title="Centralised management system",
        description="Sequential control of multiple compressors.",
        impact_type=ImpactType.MULTI,
        suggested_impact="Optimises the pressure cascade and reduces unloaded running.",
        default_budget_templates=[
            BudgetTemplate(description="Intelligent master compressor controller",
                           category=_CAT.EQUIPMENT, chapter=_CH.EQUIPMENT_SUPPLY,
                           quantity=1, unit_price=4200),
            BudgetTemplate(description="Modbus/Ethernet communication cabling",
                           category=_CAT.MATERIAL, chapter=_CH.ELECTRICAL,
                           quantity=1, unit_price=600),
            BudgetTemplate(description="Programming of pressure cascade algorithms",
                           category=_CAT.SERVICE, chapter=_CH.COMMISSIONING,
                           quantity=1, unit_price=1500),
        ],
    ),
]


def get_measure(measure_id: str) -> PredefinedMeasure:
    for m in PREDEFINED_MEASURES:
        if m.id == measure_id:
            return m
    raise ValueError(f"Unknown measure '{measure_id}'")


def forced_measure_ids(project: ProjectData) -> list[str]:
    """Measures implied by the difference between the two scenarios."""
    base = project.base_scenario
    prop = project.proposed_scenario

    forced = []
    if prop.pressure_bar < base.pressure_bar:
        forced.append("pressure_reduction")
    if prop.leak_percentage < base.leak_percentage:
        forced.append("leak_repair")
    if (
        prop.compressor_type == CompressorType.VSD_SCREW
        and base.compressor_type != CompressorType.VSD_SCREW
    ):
        forced.append("vsd_install")
    return forced


def sync_forced_measures(project: ProjectData) -> ProjectData:
    """
    Select every forced measure and inject its budget lines once.

    Lines are only injected for a forced measure that has no tagged line
    yet, so manual edits to injected lines survive repeated syncs.
    """
    forced = forced_measure_ids(project)
    missing = [mid for mid in forced if mid not in project.selected_measure_ids]
    if not missing:
        return project

    budget = list(project.budget_items)
    for mid in forced:
        if any(item.measure_id == mid for item in budget):
            continue
        new_items = items_for_measure(get_measure(mid))
        logger.info("Forced measure %s: injecting %d budget lines", mid, len(new_items))
        budget.extend(new_items)

    return project.model_copy(update={
        "selected_measure_ids": project.selected_measure_ids + missing,
        "budget_items": budget,
    })


def toggle_measure(project: ProjectData, measure_id: str) -> ProjectData:
    """Select or deselect a measure, adding or removing its budget lines."""
    measure = get_measure(measure_id)

    if measure_id in forced_measure_ids(project):
        raise MeasureLockedError(
            f"Measure '{measure_id}' is locked by the scenario parameters; "
            "adjust the proposed scenario to remove it"
        )

    if measure_id in project.selected_measure_ids:
        return project.model_copy(update={
            "selected_measure_ids": [m for m in project.selected_measure_ids if m != measure_id],
            "budget_items": [i for i in project.budget_items if i.measure_id != measure_id],
        })

    return project.model_copy(update={
        "selected_measure_ids": project.selected_measure_ids + [measure_id],
        "budget_items": project.budget_items + items_for_measure(measure),
    })
