import logging

import pandas as pd
import pytest

from ev_dashboard.data import normalize_records


ROWS = [
    ("China", "2020", "EV stock", "4500000"),
    ("China", "2020", "EV sales", "1200000"),
    ("China", "2020", "EV sales share", "5.7"),
    ("China", "2020", "EV stock share", "1.6"),
    ("China", "2020", "Electricity demand", "21000"),
    ("China", "2021", "EV stock", "7800000"),
    ("China", "2021", "EV sales", "3300000"),
    ("China", "2021", "Electricity demand", "32000"),
    ("Europe", "2020", "EV stock", "3200000"),
    ("Europe", "2020", "EV sales", "1400000"),
    ("Europe", "2020", "EV sales share", "10"),
    ("Europe", "2020", "EV stock share", "1.1"),
    ("Europe", "2020", "Electricity demand", "14000"),
    ("Europe", "2021", "EV stock", "5500000"),
    ("Europe", "2021", "EV sales share", "17"),
    ("Europe", "2021", "Electricity demand", "22000"),
    ("India", "2020", "Electricity demand", "900"),
    ("India", "2020", "EV sales share", "0.2"),
]


@pytest.fixture
def records():
    df = pd.DataFrame(ROWS, columns=["region", "year", "parameter", "value"])
    return normalize_records(df)


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="full_data.csv"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    # pytest re-attaches its own capture handlers for every phase
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(saved_level)
