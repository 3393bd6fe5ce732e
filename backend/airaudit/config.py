"""
AirAudit configuration and constants.
"""

from enum import Enum


class CompressorType(str, Enum):
    FIXED_SPEED_SCREW = "fixed_speed_screw"
    VSD_SCREW = "vsd_screw"
    PISTON = "piston"
    CENTRIFUGAL = "centrifugal"
    OTHER = "other"


class ProfileType(str, Enum):
    NORMAL_SHIFT = "normal_shift"    # 08-17h
    DOUBLE_SHIFT = "double_shift"    # 06-22h
    CONTINUOUS = "continuous"        # 24h
    CUSTOM = "custom"


class Brand(str, Enum):
    ATLAS_COPCO = "Atlas Copco"
    KAESER = "Kaeser"
    INGERSOLL_RAND = "Ingersoll Rand"
    GENERIC = "Generic"


class BudgetCategory(str, Enum):
    EQUIPMENT = "equipment"
    MATERIAL = "material"
    LABOUR = "labour"
    SERVICE = "service"


class BudgetChapter(str, Enum):
    STUDIES = "1. Studies and detailed design"
    PREPARATORY = "2. Preparatory and preliminary works"
    DISMANTLING = "3. Dismantling and decommissioning of the existing system"
    EQUIPMENT_SUPPLY = "4. Supply of new equipment"
    CIVIL = "5. Civil adaptation works"
    MECHANICAL = "6. Mechanical installation"
    ELECTRICAL = "7. Electrical installation"
    COMMISSIONING = "8. Testing, commissioning and start-up"
    TRAINING = "9. Training, documentation and warranties"
    HANDOVER = "10. Final works and handover"


# Budget chapters in report order
BUDGET_CHAPTERS: list[BudgetChapter] = list(BudgetChapter)


# Pressure correction: every bar above the reference adds ~7% input power
REFERENCE_PRESSURE_BAR = 7.0
PRESSURE_PENALTY_PER_BAR = 0.07

# L/s × h → m³  (3600 s/h / 1000 L/m³)
LS_HOURS_TO_M3 = 3.6

# Grid emission factor used for the CO2 reduction estimate
CO2_KG_PER_KWH = 0.45

# Default electricity tariff (€/kWh)
DEFAULT_ENERGY_COST = 0.145

# Simulated calendar (non-leap, no real dates)
HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7
WEEKS_PER_YEAR = 52
DAYS_PER_YEAR = 365
HOURS_PER_YEAR = DAYS_PER_YEAR * HOURS_PER_DAY  # 8760

MONTH_LABELS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]
DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

# Unloaded (idle) power as a fraction of nominal when a catalog model is applied
VSD_UNLOAD_POWER_FRACTION = 0.15
FIXED_UNLOAD_POWER_FRACTION = 0.35

# Duty-cycle templates applied when a named profile is selected
PROFILE_TEMPLATES: dict[ProfileType, dict[str, float]] = {
    ProfileType.NORMAL_SHIFT: {
        "load_start_time": 8,
        "hours_load_per_day": 8.0,
        "hours_unload_per_day": 1.0,
    },
    ProfileType.DOUBLE_SHIFT: {
        "load_start_time": 6,
        "hours_load_per_day": 14.0,
        "hours_unload_per_day": 2.0,
    },
    ProfileType.CONTINUOUS: {
        "load_start_time": 0,
        "hours_load_per_day": 20.0,
        "hours_unload_per_day": 4.0,
    },
    ProfileType.CUSTOM: {},
}
