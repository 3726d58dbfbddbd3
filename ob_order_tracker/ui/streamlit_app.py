"""
Streamlit dashboard for OB achievement against targets.
"""
import os
import sys
import traceback

import streamlit as st

# Add the parent directory to the path so we can import the package
# This is only needed when running the script directly
parent_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if parent_dir not in sys.path:
    sys.path.insert(0, parent_dir)

from ob_order_tracker.analysis.rollup import RouteAnalyzer, SellerAnalyzer, TSMAnalyzer
from ob_order_tracker.analysis.exporters.csv_exporter import CSVExporter
from ob_order_tracker.config.database_config import get_database_config
from ob_order_tracker.data.connectors.sqlite_connector import SQLiteConnector
from ob_order_tracker.data.models.order import OrderFilter
from ob_order_tracker.main import OrderTrackerApp
from ob_order_tracker.ui.components.filters import create_date_filters, create_tsm_filter
from ob_order_tracker.ui.components.visualizations import (
    create_metrics,
    create_results_table,
    create_rollup_chart,
    create_target_chart
)
from ob_order_tracker.utils.date_helpers import get_today
from ob_order_tracker.utils.exceptions import RecordNotFoundError, ValidationError


st.set_page_config(
    page_title="OB Achievement Dashboard",
    page_icon="📦",
    layout="wide"
)

st.title("OB Achievement Dashboard")
st.markdown("Order booker sales in equivalent cartons against monthly brand targets.")


@st.cache_resource
def initialize_app() -> OrderTrackerApp:
    """Open the database once per Streamlit server."""
    config = get_database_config()
    config["check_same_thread"] = False
    return OrderTrackerApp(connector=SQLiteConnector(config))


def target_form(app: OrderTrackerApp) -> None:
    """Sidebar form for setting one seller's category target."""
    with st.sidebar.expander("Set Target"):
        with st.form("target_form"):
            sellers = app.seller_repository.get_all()
            seller_id = st.selectbox(
                "Order Booker",
                options=[seller.seller_id for seller in sellers],
                format_func=lambda sid: f"{sid} - {next(s.name for s in sellers if s.seller_id == sid)}"
            )
            category = st.selectbox("Category", options=app.categories)
            target = st.number_input("Target (Ctn)", min_value=0.0, step=1.0)
            if st.form_submit_button("Save"):
                try:
                    entry = app.set_target(seller_id, category, target)
                    st.success(f"{entry.seller_id} / {entry.category}: {entry.target_cartons:.2f} Ctn")
                except (ValidationError, RecordNotFoundError) as e:
                    st.error(str(e))


try:
    app = initialize_app()
except Exception as e:
    st.error(f"Could not open the order database: {str(e)}")
    st.stop()

st.sidebar.header("Filters")
as_of, start_date, end_date, all_time = create_date_filters(get_today())
tsm = create_tsm_filter(sorted({seller.tsm for seller in app.seller_repository.get_all() if seller.tsm}))
include_idle = st.sidebar.checkbox("Show OBs without orders", value=False)
target_form(app)

try:
    report = app.build_report(
        as_of=as_of,
        start_date=start_date,
        end_date=end_date,
        tsm=tsm,
        include_idle=include_idle,
        all_time=all_time
    )
except Exception as e:
    st.error(f"Error building report: {str(e)}")
    st.code(traceback.format_exc())
    st.stop()

create_metrics(report.summary)
st.plotly_chart(create_target_chart(report.summary), use_container_width=True)

categories = app.categories
seller_df = SellerAnalyzer(app.catalog, categories=categories).prepare_output_dataframe(report.sellers)
tsm_df = TSMAnalyzer(app.catalog, categories=categories).prepare_output_dataframe(report.tsms)
route_df = RouteAnalyzer(app.catalog, categories=categories).prepare_output_dataframe(report.routes)

seller_tab, tsm_tab, route_tab = st.tabs(["Order Bookers", "TSMs", "Routes"])

with seller_tab:
    create_results_table(seller_df, "Order Booker Achievement")
    if not seller_df.empty:
        st.plotly_chart(create_rollup_chart(seller_df, 'NAME', "Achievement by Order Booker"), use_container_width=True)

with tsm_tab:
    create_results_table(tsm_df, "TSM Achievement")
    if not tsm_df.empty:
        st.plotly_chart(create_rollup_chart(tsm_df, 'TSM', "Achievement by TSM"), use_container_width=True)

with route_tab:
    create_results_table(route_df, "Route Achievement")

orders = app.get_orders(OrderFilter(
    tsm=tsm,
    start_date=report.start_date,
    end_date=report.end_date
))
orders_df = CSVExporter(app.catalog, categories).prepare_orders_dataframe(orders)
st.download_button(
    label="Download Orders CSV",
    data=orders_df.to_csv(index=False),
    file_name=f"orders_{as_of.isoformat()}.csv",
    mime="text/csv"
)
