"""
Tests for forced-measure detection, budget line injection and toggling.
"""

import pytest

from airaudit.config import CompressorType
from airaudit.engine.budget import capex_total, items_for_measure
from airaudit.engine.measures import (
    PREDEFINED_MEASURES,
    MeasureLockedError,
    forced_measure_ids,
    get_measure,
    sync_forced_measures,
    toggle_measure,
)
from airaudit.engine.project import new_project


def _unforced_project():
    """Proposed scenario identical to the base one: nothing is forced."""
    project = new_project()
    return project.model_copy(update={"proposed_scenario": project.base_scenario})


class TestCatalogOfMeasures:

    def test_four_predefined_measures(self):
        assert [m.id for m in PREDEFINED_MEASURES] == [
            "leak_repair", "pressure_reduction", "vsd_install", "central_control",
        ]

    @pytest.mark.parametrize("measure_id,lines,total", [
        ("leak_repair", 4, 1610),
        ("pressure_reduction", 3, 1160),
        ("vsd_install", 9, 23550),
        ("central_control", 3, 6300),
    ])
    def test_templates(self, measure_id, lines, total):
        items = items_for_measure(get_measure(measure_id))
        assert len(items) == lines
        assert capex_total(items) == pytest.approx(total)
        assert all(i.measure_id == measure_id for i in items)

    def test_unknown_measure(self):
        with pytest.raises(ValueError):
            get_measure("solar_panels")


class TestForcedMeasures:

    def test_default_project_forces_three(self):
        assert set(forced_measure_ids(new_project())) == {
            "pressure_reduction", "leak_repair", "vsd_install",
        }

    def test_identical_scenarios_force_nothing(self):
        assert forced_measure_ids(_unforced_project()) == []

    def test_vsd_to_vsd_is_not_forced(self):
        project = new_project()
        base = project.base_scenario.model_copy(update={"compressor_type": CompressorType.VSD_SCREW})
        project = project.model_copy(update={"base_scenario": base})
        assert "vsd_install" not in forced_measure_ids(project)

    def test_higher_proposed_pressure_not_forced(self):
        project = new_project()
        prop = project.proposed_scenario.model_copy(update={"pressure_bar": 9})
        project = project.model_copy(update={"proposed_scenario": prop})
        assert "pressure_reduction" not in forced_measure_ids(project)


class TestSync:

    def test_injects_lines_once(self):
        project = sync_forced_measures(new_project())
        assert len(project.budget_items) == 16
        assert capex_total(project.budget_items) == pytest.approx(26320)
        assert set(project.selected_measure_ids) == {
            "pressure_reduction", "leak_repair", "vsd_install",
        }

    def test_idempotent(self):
        once = sync_forced_measures(new_project())
        twice = sync_forced_measures(once)
        assert twice.budget_items == once.budget_items
        assert twice.selected_measure_ids == once.selected_measure_ids

    def test_existing_tagged_lines_not_duplicated(self):
        project = new_project()
        project = project.model_copy(update={
            "budget_items": items_for_measure(get_measure("leak_repair")),
        })
        synced = sync_forced_measures(project)
        leak_lines = [i for i in synced.budget_items if i.measure_id == "leak_repair"]
        assert len(leak_lines) == 4
        assert "leak_repair" in synced.selected_measure_ids

    def test_edited_lines_survive_resync(self):
        project = sync_forced_measures(new_project())
        edited = project.budget_items[0].model_copy(update={"unit_price": 999})
        project = project.model_copy(update={"budget_items": [edited] + project.budget_items[1:]})
        assert sync_forced_measures(project).budget_items[0].unit_price == 999

    def test_nothing_forced_leaves_project_unchanged(self):
        project = _unforced_project()
        assert sync_forced_measures(project) is project

    def test_input_not_mutated(self):
        project = new_project()
        sync_forced_measures(project)
        assert project.budget_items == []
        assert project.selected_measure_ids == []


class TestToggle:

    def test_forced_measure_is_locked(self):
        project = sync_forced_measures(new_project())
        with pytest.raises(MeasureLockedError):
            toggle_measure(project, "vsd_install")

    def test_locked_error_is_value_error(self):
        assert issubclass(MeasureLockedError, ValueError)

    def test_select_adds_lines(self):
        project = sync_forced_measures(new_project())
        toggled = toggle_measure(project, "central_control")
        assert "central_control" in toggled.selected_measure_ids
        assert len(toggled.budget_items) == 19
        assert capex_total(toggled.budget_items) == pytest.approx(26320 + 6300)

    def test_deselect_removes_tagged_lines(self):
        project = sync_forced_measures(new_project())
        toggled = toggle_measure(toggle_measure(project, "central_control"), "central_control")
        assert "central_control" not in toggled.selected_measure_ids
        assert len(toggled.budget_items) == 16

    def test_manual_lines_kept_on_deselect(self):
        project = _unforced_project()
        project = toggle_measure(project, "leak_repair")
        manual = project.budget_items[0].model_copy(update={"id": "manual", "measure_id": None})
        project = project.model_copy(update={"budget_items": project.budget_items + [manual]})
        toggled = toggle_measure(project, "leak_repair")
        assert [i.id for i in toggled.budget_items] == ["manual"]

    def test_unknown_measure_raises(self):
        with pytest.raises(ValueError, match="Unknown measure"):
            toggle_measure(new_project(), "nope")
