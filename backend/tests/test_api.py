"""
API tests for the AirAudit routes using FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from airaudit.main import app
from airaudit.engine.measures import sync_forced_measures
from airaudit.engine.project import default_base_scenario, new_project

client = TestClient(app)


def _scenario_json() -> dict:
    return default_base_scenario().model_dump(mode="json")


def _project_json(synced: bool = True) -> dict:
    project = new_project()
    if synced:
        project = sync_forced_measures(project)
    return project.model_dump(mode="json")


class TestHealth:

    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "service": "airaudit"}


class TestScenarioAPI:

    def test_metrics(self):
        resp = client.post("/api/v1/scenario/metrics", json={
            "scenario": _scenario_json(),
            "energy_cost_per_kwh": 0.145,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["annual_hours_load"] == pytest.approx(3120.0)
        assert data["energy_load_kwh"] == pytest.approx(193927.5)

    def test_metrics_missing_field(self):
        scenario = _scenario_json()
        del scenario["pressure_bar"]
        resp = client.post("/api/v1/scenario/metrics", json={
            "scenario": scenario,
            "energy_cost_per_kwh": 0.145,
        })
        assert resp.status_code == 422

    def test_metrics_out_of_range_accepted(self):
        scenario = {**_scenario_json(), "leak_percentage": 150}
        resp = client.post("/api/v1/scenario/metrics", json={
            "scenario": scenario,
            "energy_cost_per_kwh": 0.145,
        })
        assert resp.status_code == 200
        assert resp.json()["sec_kwh_per_m3"] == 0

    def test_comparison(self):
        metrics = client.post("/api/v1/scenario/metrics", json={
            "scenario": _scenario_json(),
            "energy_cost_per_kwh": 0.145,
        }).json()
        resp = client.post("/api/v1/comparison", json={
            "base": metrics,
            "proposed": metrics,
            "capex_total": 5000,
        })
        assert resp.status_code == 200
        assert resp.json()["payback_years"] == 0

    def test_project_results(self):
        resp = client.post("/api/v1/project/results", json=_project_json())
        assert resp.status_code == 200
        data = resp.json()
        assert data["comparison"]["capex_total"] == pytest.approx(26320)
        assert len(data["calculation_steps"]) == 4

    def test_default_project(self):
        resp = client.get("/api/v1/project/default")
        assert resp.status_code == 200
        data = resp.json()
        assert data["base_scenario"]["pressure_bar"] == 8.5
        assert data["budget_items"] == []


class TestLoadProfileAPI:

    def test_daily(self):
        resp = client.post("/api/v1/load-profile/daily", json=_scenario_json())
        assert resp.status_code == 200
        values = resp.json()["values"]
        assert len(values) == 24
        assert values[8] == 45

    def test_annual(self):
        resp = client.post("/api/v1/load-profile/annual", json=_scenario_json())
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["values"]) == 8760
        assert data["peak_kw"] == 45
        assert data["total_kwh"] == pytest.approx(260 * 600)

    @pytest.mark.parametrize("view,points,unit", [
        ("daily", 24, "kW"),
        ("weekly", 84, "kW"),
        ("monthly", 12, "MWh"),
        ("annual", 365, "kW"),
    ])
    def test_diagram(self, view, points, unit):
        resp = client.post("/api/v1/load-profile/diagram", json={
            "project": _project_json(synced=False),
            "view": view,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["series"]) == points
        assert data["unit"] == unit

    def test_diagram_bad_view(self):
        resp = client.post("/api/v1/load-profile/diagram", json={
            "project": _project_json(synced=False),
            "view": "hourly",
        })
        assert resp.status_code == 422

    def test_export_csv(self):
        resp = client.post("/api/v1/load-profile/export-csv", json=_project_json(synced=False))
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        assert "airaudit_simulation_8760h.csv" in resp.headers["content-disposition"]
        assert len(resp.text.splitlines()) == 8761


class TestCatalogAPI:

    def test_list(self):
        resp = client.get("/api/v1/catalog/compressors")
        assert resp.status_code == 200
        assert len(resp.json()) == 35

    def test_search_and_filter(self):
        resp = client.get("/api/v1/catalog/compressors", params={
            "q": "GA", "compressor_type": "vsd_screw",
        })
        assert resp.status_code == 200
        assert len(resp.json()) == 8

    def test_brand_filter(self):
        resp = client.get("/api/v1/catalog/compressors", params={"brand": "Kaeser"})
        assert len(resp.json()) == 10

    def test_detail(self):
        resp = client.get("/api/v1/catalog/compressors/ac-ga37")
        assert resp.status_code == 200
        assert resp.json()["nominal_power_kw"] == 37

    def test_detail_not_found(self):
        resp = client.get("/api/v1/catalog/compressors/zz-none")
        assert resp.status_code == 404

    def test_apply(self):
        resp = client.post("/api/v1/catalog/apply", json={
            "scenario": _scenario_json(),
            "compressor_id": "ac-ga37vsd",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["compressor_type"] == "vsd_screw"
        assert data["power_unload_kw"] == pytest.approx(5.55)

    def test_apply_unknown(self):
        resp = client.post("/api/v1/catalog/apply", json={
            "scenario": _scenario_json(),
            "compressor_id": "zz-none",
        })
        assert resp.status_code == 404


class TestMeasuresAPI:

    def test_list(self):
        resp = client.get("/api/v1/measures")
        assert resp.status_code == 200
        assert len(resp.json()) == 4

    def test_sync(self):
        resp = client.post("/api/v1/measures/sync", json=_project_json(synced=False))
        assert resp.status_code == 200
        assert len(resp.json()["budget_items"]) == 16

    def test_toggle(self):
        resp = client.post("/api/v1/measures/toggle", json={
            "project": _project_json(),
            "measure_id": "central_control",
        })
        assert resp.status_code == 200
        assert "central_control" in resp.json()["selected_measure_ids"]

    def test_toggle_locked(self):
        resp = client.post("/api/v1/measures/toggle", json={
            "project": _project_json(),
            "measure_id": "vsd_install",
        })
        assert resp.status_code == 422
        assert "locked" in resp.json()["detail"]

    def test_custom_item(self):
        resp = client.post("/api/v1/budget/custom-item", json={
            "chapter": "6. Mechanical installation",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["chapter"] == "6. Mechanical installation"
        assert data["measure_id"] is None
        assert data["total"] == 0

    def test_custom_item_unknown_chapter(self):
        resp = client.post("/api/v1/budget/custom-item", json={"chapter": "11. Extras"})
        assert resp.status_code == 422

    def test_budget_summary(self):
        items = _project_json()["budget_items"]
        resp = client.post("/api/v1/budget/summary", json=items)
        assert resp.status_code == 200
        data = resp.json()
        assert data["capex_total"] == pytest.approx(26320)
        assert len(data["chapters"]) == 10


class TestScenarioEditingAPI:

    def test_apply_profile(self):
        resp = client.post("/api/v1/scenario/profile", json={
            "scenario": _scenario_json(),
            "profile_type": "continuous",
        })
        assert resp.status_code == 200
        assert resp.json()["hours_load_per_day"] == 20

    def test_update_field_clamps(self):
        resp = client.post("/api/v1/scenario/update-field", json={
            "scenario": _scenario_json(),
            "field": "days_per_week",
            "value": 12,
        })
        assert resp.status_code == 200
        assert resp.json()["days_per_week"] == 7

    def test_update_unknown_field(self):
        resp = client.post("/api/v1/scenario/update-field", json={
            "scenario": _scenario_json(),
            "field": "colour",
            "value": "red",
        })
        assert resp.status_code == 422

    @pytest.mark.parametrize("field,value", [
        ("days_per_week", "abc"),
        ("hours_load_per_day", None),
    ])
    def test_update_field_bad_value(self, field, value):
        resp = client.post("/api/v1/scenario/update-field", json={
            "scenario": _scenario_json(),
            "field": field,
            "value": value,
        })
        assert resp.status_code == 422
