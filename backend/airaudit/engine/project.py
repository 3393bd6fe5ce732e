"""
Default project used when a new audit is started.
"""

from datetime import date

from airaudit.config import DEFAULT_ENERGY_COST, CompressorType, ProfileType
from airaudit.models.project import ProjectData
from airaudit.models.scenario import ScenarioData


def default_base_scenario() -> ScenarioData:
    """Typical audited fixed-speed installation."""
    return ScenarioData(
        compressor_type=CompressorType.FIXED_SPEED_SCREW,
        profile_type=ProfileType.NORMAL_SHIFT,
        load_start_time=8,
        hours_load_per_day=12,
        hours_unload_per_day=4,
        power_load_kw=45,
        power_unload_kw=15,
        flow_ls=120,
        pressure_bar=8.5,
        leak_percentage=25,
        days_per_week=5,
        weeks_per_year=52,
        maintenance_cost_euro_per_year=1800,
    )


def default_proposed_scenario() -> ScenarioData:
    """VSD upgrade at reduced pressure with repaired leaks."""
    return ScenarioData(
        compressor_type=CompressorType.VSD_SCREW,
        profile_type=ProfileType.NORMAL_SHIFT,
        load_start_time=8,
        hours_load_per_day=14,
        hours_unload_per_day=0.5,
        power_load_kw=38,
        power_unload_kw=8,
        flow_ls=115,
        pressure_bar=7.0,
        leak_percentage=5,
        days_per_week=5,
        weeks_per_year=52,
        maintenance_cost_euro_per_year=1200,
    )


def new_project() -> ProjectData:
    return ProjectData(
        client_name="Global Textile Industries",
        installation="Porto Industrial Unit",
        location="Maia, Porto",
        date=date.today().isoformat(),
        technician_name="",
        energy_cost=DEFAULT_ENERGY_COST,
        base_scenario=default_base_scenario(),
        proposed_scenario=default_proposed_scenario(),
    )
