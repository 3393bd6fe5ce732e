"""
Chronological load-profile simulator.

Builds the hour-by-hour power draw of a scenario:
  - Daily profile: 24 values from the loaded/unloaded duty cycle, wrapping
    past midnight. Hours that are neither loaded nor unloaded draw 0 kW.
  - Annual table: 8760 values repeating the daily profile over a simulated
    365-day year. Day 0 is an arbitrary reference, not January 1st; a day is
    active when week_of_year < weeks_per_year and day_of_week < days_per_week.

Values are nameplate powers. Unlike engine.metrics, no pressure or leak
correction is applied, so the table total does not reconcile with the
annual energy figure.
"""

import numpy as np

from airaudit.config import DAYS_PER_WEEK, DAYS_PER_YEAR, HOURS_PER_DAY
from airaudit.models.scenario import ScenarioData


def _in_window(hour: int, start: float, end: float) -> bool:
    """True when hour lies in [start, end), wrapping past midnight if end ≤ start."""
    if start < end:
        return start <= hour < end
    return hour >= start or hour < end


def generate_daily_profile(scenario: ScenarioData) -> list[float]:
    """Power draw (kW) for each hour of the day."""
    s = scenario
    load_start = s.load_start_time
    load_end = (load_start + s.hours_load_per_day) % HOURS_PER_DAY
    unload_end = (load_end + s.hours_unload_per_day) % HOURS_PER_DAY

    profile = []
    for hour in range(HOURS_PER_DAY):
        is_load = _in_window(hour, load_start, load_end)

        if load_end < unload_end:
            is_unload = load_end <= hour < unload_end
        else:
            is_unload = s.hours_unload_per_day > 0 and _in_window(hour, load_end, unload_end)

        if is_load:
            profile.append(float(s.power_load_kw))
        elif is_unload:
            profile.append(float(s.power_unload_kw))
        else:
            profile.append(0.0)

    return profile


def active_day_mask(days_per_week: int, weeks_per_year: int) -> np.ndarray:
    """Boolean mask over the 365 simulated days."""
    days = np.arange(DAYS_PER_YEAR)
    day_of_week = days % DAYS_PER_WEEK
    week_of_year = days // DAYS_PER_WEEK
    return (week_of_year < weeks_per_year) & (day_of_week < days_per_week)


def generate_8760_table(scenario: ScenarioData) -> list[float]:
    """Power draw (kW) for each hour of the simulated year."""
    profile = np.asarray(generate_daily_profile(scenario), dtype=float)
    mask = active_day_mask(scenario.days_per_week, scenario.weeks_per_year)

    hourly = np.tile(profile, DAYS_PER_YEAR)
    active = np.repeat(mask, HOURS_PER_DAY)
    return np.where(active, hourly, 0.0).tolist()
