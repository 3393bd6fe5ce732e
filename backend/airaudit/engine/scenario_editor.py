"""
Form-level editing rules for scenarios.

The calculation engines accept any values; these rules keep edited
scenarios consistent (days ≤ 7, weeks ≤ 52, load + unload hours ≤ 24).
"""

from typing import Any

from airaudit.config import (
    DAYS_PER_WEEK,
    HOURS_PER_DAY,
    PROFILE_TEMPLATES,
    WEEKS_PER_YEAR,
    ProfileType,
)
from airaudit.models.scenario import ScenarioData


def _clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


def apply_profile_template(scenario: ScenarioData, profile_type: ProfileType) -> ScenarioData:
    """Select a named duty cycle; custom keeps the current timing."""
    update: dict[str, Any] = {"profile_type": profile_type}
    update.update(PROFILE_TEMPLATES[profile_type])
    return scenario.model_copy(update=update)


def update_scenario_field(scenario: ScenarioData, field: str, value: Any) -> ScenarioData:
    """
    Set one field, applying the form rules.

    The value is validated through the model first, so bad types raise a
    ValidationError before any clamping. Raising one daily-hours field past
    24 h total shrinks the other one.
    """
    if field not in ScenarioData.model_fields:
        raise ValueError(f"Unknown scenario field '{field}'")

    if field == "profile_type":
        return apply_profile_template(scenario, ProfileType(value))

    data = scenario.model_dump()
    data[field] = value
    validated = ScenarioData.model_validate(data)
    value = getattr(validated, field)

    if field == "days_per_week":
        return scenario.model_copy(update={field: int(_clamp(value, 0, DAYS_PER_WEEK))})

    if field == "weeks_per_year":
        return scenario.model_copy(update={field: int(_clamp(value, 0, WEEKS_PER_YEAR))})

    if field in ("hours_load_per_day", "hours_unload_per_day"):
        other = (
            "hours_unload_per_day" if field == "hours_load_per_day" else "hours_load_per_day"
        )
        hours = float(_clamp(value, 0, HOURS_PER_DAY))
        update = {field: hours}
        if hours + getattr(scenario, other) > HOURS_PER_DAY:
            update[other] = max(0.0, HOURS_PER_DAY - hours)
        return scenario.model_copy(update=update)

    return validated
