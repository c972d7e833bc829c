"""
Tests for the Streamlit page wiring: dropdown defaults, region mapping,
independent year selections and the load-failure path.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from ev_dashboard import config

APP_PATH = Path(__file__).resolve().parent.parent / "app" / "app.py"

CSV_TEXT = (
    "region,year,parameter,value\n"
    "World,2020,EV stock,100\n"
    "World,2020,EV sales,40\n"
    "World,2021,EV stock,160\n"
    "World,2021,EV sales,60\n"
    "World,2021,Electricity demand,12\n"
    "Europe,2020,EV sales share,10\n"
    "Europe,2020,EV stock share,1.1\n"
    "Europe,2020,Electricity demand,5\n"
    "World,2022,EV stock,220\n"
)


def _shape_lines(at):
    return [m.value for m in at.markdown if m.value.startswith("Shape:")]


@pytest.fixture
def dashboard(tmp_path, monkeypatch, restore_root_logger):
    data_file = tmp_path / "full_data.csv"
    data_file.write_text(CSV_TEXT, encoding="utf-8")
    monkeypatch.setenv("EV_DASHBOARD_DATA", str(data_file))
    monkeypatch.setattr(config, "LOG_TO_FILE", False)
    return AppTest.from_file(str(APP_PATH), default_timeout=30)


# ==============================================================================
# TEST: region dropdown
# ==============================================================================

def test_region_dropdown_defaults_to_all_regions(dashboard):
    at = dashboard.run()

    assert not at.exception
    region = at.selectbox(key="scatter_region")
    assert region.value == config.ALL_REGIONS
    assert list(region.options) == [config.ALL_REGIONS, "Europe", "World"]
    assert _shape_lines(at) == ["Shape: **9 rows × 4 columns**"]


def test_selecting_region_narrows_records(dashboard):
    at = dashboard.run()

    at.selectbox(key="scatter_region").set_value("Europe").run()

    assert not at.exception
    assert _shape_lines(at) == ["Shape: **3 rows × 4 columns**"]
    assert not at.warning


# ==============================================================================
# TEST: year dropdowns
# ==============================================================================

def test_year_dropdowns_default_to_first_year(dashboard):
    at = dashboard.run()

    for key in ("bar_year", "treemap_year"):
        year = at.selectbox(key=key)
        assert year.value == "2020"
        assert list(year.options) == ["2020", "2021", "2022"]


def test_year_dropdowns_are_independent(dashboard):
    at = dashboard.run()

    at.selectbox(key="bar_year").set_value("2021").run()

    assert at.selectbox(key="bar_year").value == "2021"
    assert at.selectbox(key="treemap_year").value == "2020"


def test_treemap_year_without_demand_warns(dashboard):
    at = dashboard.run()

    at.selectbox(key="treemap_year").set_value("2022").run()

    assert not at.exception
    assert any("No electricity demand data for 2022" in w.value for w in at.warning)
    assert at.selectbox(key="bar_year").value == "2020"


# ==============================================================================
# TEST: load failure
# ==============================================================================

def test_missing_data_file_shows_error_and_stops(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("EV_DASHBOARD_DATA", str(tmp_path / "missing.csv"))
    monkeypatch.setattr(config, "LOG_TO_FILE", False)

    at = AppTest.from_file(str(APP_PATH), default_timeout=30).run()

    assert not at.exception
    assert len(at.error) == 1
    assert "Data file not found" in at.error[0].value
    assert len(at.selectbox) == 0
