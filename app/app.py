# ============================================================
# EV-Adoption Dashboard
# Stock, sales, market share and electricity demand by region
# ============================================================

import logging

import streamlit as st

from ev_dashboard import config
from ev_dashboard.charts import build_scatter_chart, build_stacked_bar_chart, build_treemap
from ev_dashboard.data import (
    distinct_regions,
    distinct_years,
    filter_by_region,
    load_records,
    records_to_csv,
)
from ev_dashboard.errors import DataLoadError
from ev_dashboard.logging_config import setup_logging

setup_logging()
logger = logging.getLogger("ev_dashboard.app")

# ------------------------------------------------------------
# 1. Page Config & Styling
# ------------------------------------------------------------
st.set_page_config(
    page_title=config.DASHBOARD_TITLE,
    layout="wide",
)

# Custom CSS: clean layout + bounding boxes around tab headers
st.markdown("""
    <style>
        .block-container {
            padding-top: 2rem;
            padding-bottom: 1rem;
            padding-left: 2rem;
            padding-right: 2rem;
        }
        footer {visibility: hidden;}

        [data-testid="stTabs"] button {
            border: 1px solid #0a9396 !important;
            border-radius: 5px !important;
            color: #0a9396 !important;
            font-weight: 600 !important;
            background-color: #f7f7f7 !important;
        }
        [data-testid="stTabs"] button[aria-selected="true"] {
            background-color: #0a9396 !important;
            color: white !important;
        }
    </style>
""", unsafe_allow_html=True)

# ------------------------------------------------------------
# 2. Load Data
# ------------------------------------------------------------
@st.cache_data
def load_data(path):
    return load_records(path)

try:
    records = load_data(str(config.data_path()))
except DataLoadError as exc:
    logger.exception("Failed to load dashboard data")
    st.error(f"❌ {exc}")
    st.stop()

regions = distinct_regions(records)
years = distinct_years(records)

# ------------------------------------------------------------
# 3. Sidebar (Minimal)
# ------------------------------------------------------------
with st.sidebar:
    st.title("EV-Adoption Dashboard")
    st.caption(f"{len(records)} records · {len(regions)} regions · {len(years)} years")

    selected_region = st.selectbox(
        "Region:",
        options=[config.ALL_REGIONS] + regions,
        index=0,
        key="scatter_region",
    )

region_filter = None if selected_region == config.ALL_REGIONS else selected_region

# ------------------------------------------------------------
# 4. Page Title
# ------------------------------------------------------------
st.markdown("### Electric Vehicle Adoption Across Regions")
st.markdown("---")

# ------------------------------------------------------------
# 5. Tabs
# ------------------------------------------------------------
tab1, tab2, tab3, tab4, tab5 = st.tabs([
    "Stock vs Sales",
    "Market Share",
    "Electricity Demand",
    "Dataset",
    "About"
])

# ------------------------------------------------------------
# TAB 1: EV stock (supply) vs EV sales (demand)
# ------------------------------------------------------------
with tab1:
    st.subheader("EV Stock and Sales Over the Years")
    fig_scatter = build_scatter_chart(records, region_filter)
    if not fig_scatter.data:
        st.warning(f"⚠ No stock or sales data for {selected_region}.")
    st.plotly_chart(fig_scatter, width="content")

# ------------------------------------------------------------
# TAB 2: Stacked market share by region
# ------------------------------------------------------------
with tab2:
    st.subheader("EV Sales Share and Stock Share by Region")
    bar_year = st.selectbox("Year:", options=years, index=0, key="bar_year")
    fig_bar = build_stacked_bar_chart(records, bar_year)
    if not fig_bar.data:
        st.warning(f"⚠ No share data for {bar_year}.")
    st.plotly_chart(fig_bar, width="content")

# ------------------------------------------------------------
# TAB 3: Electricity demand treemap
# ------------------------------------------------------------
with tab3:
    st.subheader("Electricity Demand from EVs by Region")
    treemap_year = st.selectbox("Year:", options=years, index=0, key="treemap_year")
    fig_treemap = build_treemap(records, treemap_year)
    if not fig_treemap.data:
        st.warning(f"⚠ No electricity demand data for {treemap_year}.")
    st.plotly_chart(fig_treemap, width="content")

# ------------------------------------------------------------
# TAB 4: Dataset viewer
# ------------------------------------------------------------
with tab4:
    st.subheader("Records in View")
    df_view = filter_by_region(records, region_filter)

    if df_view.empty:
        st.warning("No data available for this selection.")
    else:
        st.write(f"Shape: **{df_view.shape[0]} rows × {df_view.shape[1]} columns**")
        st.dataframe(df_view, width="stretch")
        st.download_button(
            "💾 Download these records as CSV",
            data=records_to_csv(df_view),
            file_name="ev_records_export.csv",
            mime="text/csv",
        )

# ------------------------------------------------------------
# TAB 5: About
# ------------------------------------------------------------
with tab5:
    st.subheader("About This Project")
    st.markdown("""
    ### Project Overview
    This dashboard explores **electric vehicle adoption** by region using a
    `region, year, parameter, value` statistics file.

    ### Charts
    - **Stock vs Sales**: EV stock (supply) and EV sales (demand) per year, filtered by the sidebar region
    - **Market Share**: EV sales share stacked on EV stock share for every region in a year
    - **Electricity Demand**: treemap of EV electricity demand per region in a year

    Hover any mark for its exact values.
    """)
