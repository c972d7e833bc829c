"""
Dashboard Configuration
========================

Central settings for the EV adoption dashboard. Paths can be overridden
through environment variables, chart geometry and names are fixed.
"""

import os
from pathlib import Path

# ===== Paths =====
PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_DATA_PATH = PROJECT_ROOT / "data" / "full_data.csv"


def data_path():
    """CSV location, read from ``EV_DASHBOARD_DATA`` on every call."""
    return Path(os.getenv("EV_DASHBOARD_DATA", DEFAULT_DATA_PATH))


LOGS_DIR = Path(os.getenv("EV_DASHBOARD_LOG_DIR", PROJECT_ROOT / "logs"))

# ===== Logging =====
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("EV_DASHBOARD_LOG_TO_FILE", "true").lower() == "true"

# ===== Dashboard Settings =====
DASHBOARD_TITLE = "EV Adoption Dashboard"
REQUIRED_COLUMNS = ["region", "year", "parameter", "value"]
ALL_REGIONS = "All regions"

# Parameters
EV_STOCK = "EV stock"
EV_SALES = "EV sales"
EV_SALES_SHARE = "EV sales share"
EV_STOCK_SHARE = "EV stock share"
ELECTRICITY_DEMAND = "Electricity demand"
STACK_KEYS = (EV_SALES_SHARE, EV_STOCK_SHARE)

# ===== Chart geometry (pixels) =====
WIDTH = 600
HEIGHT = 400
MARGIN = dict(t=20, r=70, b=30, l=60)
BAR_WIDTH = WIDTH - MARGIN["l"] - MARGIN["r"]
BAR_HEIGHT = HEIGHT - MARGIN["t"] - MARGIN["b"]
BAR_PADDING = 0.1
TREEMAP_PADDING = 1

# ===== Look =====
SUPPLY_COLOR = "blue"
DEMAND_COLOR = "red"
POINT_RADIUS = 5
TREEMAP_FILL = "lightblue"
TREEMAP_STROKE = "black"
TREEMAP_FONT_SIZE = 10
TRANSITION_MS = 750
TOOLTIP_STYLE = dict(
    bgcolor="rgba(255,255,255,0.9)",
    bordercolor="#999999",
    font=dict(size=12, color="black"),
)
EMPTY_MESSAGE = "No data for the current selection"
