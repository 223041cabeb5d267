"""
FreightCompare
==============

Streamlit page to compare illustrative carrier quotes by price, speed and
CO₂e for a single shipment.

Run with:
    streamlit run freight_quotes/dashboard/FreightCompare.py
"""

import streamlit as st

from freight_quotes.compare import compare
from freight_quotes.config import (
    DEFAULT_MAX_PRICE,
    MAX_PRICE_MIN,
    MAX_PRICE_MAX,
    MAX_PRICE_STEP,
    SORT_KEYS,
    SORT_LABELS,
)
from freight_quotes.dashboard.data import (
    get_rate_card,
    comparison_frame,
    format_currency,
    format_km,
    price_eta_chart,
)
from freight_quotes.models import ShipmentRequest, RankingControls

# =============================================================================
# PAGE CONFIG
# =============================================================================

st.set_page_config(
    page_title="FreightCompare",
    page_icon="🚚",
    layout="wide",
)

rate_card = get_rate_card()

st.title("Ship smarter. Spend less.")
st.markdown(
    "Instantly compare carriers by price, speed, and CO₂e. "
    "Start with a lane below, no signup needed."
)

# =============================================================================
# SHIPMENT FORM
# =============================================================================

col1, col2, col3, col4 = st.columns(4)
with col1:
    origin = st.text_input("Origin", placeholder="e.g., Seattle, WA")
with col2:
    destination = st.text_input("Destination", placeholder="e.g., Taipei, TW")
with col3:
    mode = st.selectbox(
        "Mode",
        rate_card.mode_ids,
        format_func=lambda m: rate_card.mode(m).label,
    )
with col4:
    service = st.selectbox(
        "Service",
        rate_card.service_ids,
        index=rate_card.service_ids.index("standard") if "standard" in rate_card.service_ids else 0,
        format_func=lambda s: rate_card.service_level(s).label,
    )

col1, col2, col3, col4 = st.columns(4)
with col1:
    weight = st.number_input("Weight (kg)", min_value=0, value=100, step=1)
with col2:
    length = st.number_input("Length (cm)", min_value=0, value=120, step=1)
with col3:
    width = st.number_input("Width (cm)", min_value=0, value=80, step=1)
with col4:
    height = st.number_input("Height (cm)", min_value=0, value=60, step=1)

# =============================================================================
# SORT & FILTERS
# =============================================================================

with st.sidebar:
    st.header("Sort & Filters")
    sort_by = st.selectbox("Sort by", list(SORT_KEYS), format_func=lambda k: SORT_LABELS[k])
    max_price = st.slider(
        "Max price",
        min_value=MAX_PRICE_MIN,
        max_value=MAX_PRICE_MAX,
        value=int(DEFAULT_MAX_PRICE),
        step=MAX_PRICE_STEP,
    )
    st.caption(format_currency(max_price))
    only_lower_emission = st.toggle("Show only lower-emission options")

shipment = ShipmentRequest(
    origin=origin.strip(),
    destination=destination.strip(),
    mode=mode,
    service=service,
    weight_kg=weight,
    length_cm=length,
    width_cm=width,
    height_cm=height,
)
controls = RankingControls(
    max_price=max_price,
    only_lower_emission=only_lower_emission,
    sort_by=sort_by,
)

# Pure and cheap: recomputed on every rerun
result = compare(shipment, controls, rate_card)

# =============================================================================
# SUMMARY
# =============================================================================

col1, col2, col3 = st.columns(3)
col1.metric("Distance (est.)", format_km(result.distance_km))
col2.metric(
    "CO₂e (best)",
    f"{result.min_co2e_kg:,} kg" if result.min_co2e_kg is not None else "-",
)
col3.metric("Best price", format_currency(result.best_price))

if not shipment.is_quotable:
    st.info("Enter shipment details to see quotes.")
    st.stop()

if not result.quotes:
    st.warning("No quotes match the current filters.")
    st.stop()

# =============================================================================
# QUOTES
# =============================================================================

tab_table, tab_cards, tab_chart = st.tabs(["Table", "Cards", "Price vs ETA"])

with tab_table:
    st.dataframe(
        comparison_frame(result),
        hide_index=True,
        use_container_width=True,
        column_config={
            "carrier": "Carrier",
            "best": st.column_config.CheckboxColumn("Best"),
            "mode": "Mode",
            "service": "Service",
            "price": st.column_config.NumberColumn("Price", format="$%d"),
            "eta_days": "ETA (days)",
            "co2e_kg": "CO₂e (kg)",
            "price_per_day": st.column_config.NumberColumn("$/day", format="$%d"),
        },
    )
    st.caption("Quotes are illustrative. Hook up carrier APIs to fetch live rates.")

with tab_cards:
    cols = st.columns(3)
    for i, quote in enumerate(result.quotes):
        with cols[i % 3].container(border=True):
            title = f"**{quote.carrier}**"
            if result.is_best(quote):
                title += " :green[Best]"
            st.markdown(title)
            st.markdown(f"### {format_currency(quote.price)}")
            st.caption(f"{quote.mode.capitalize()} · {quote.service}")
            c1, c2, c3 = st.columns(3)
            c1.metric("days", quote.eta_days)
            c2.metric("kg CO₂e", f"{quote.co2e_kg:,}")
            c3.metric("$/day", f"{quote.price_per_day:,}")

with tab_chart:
    st.plotly_chart(price_eta_chart(result), use_container_width=True)

st.caption("FreightCompare. Rates are illustrative only.")
