"""
Dashboard Data Layer
====================

Cached rate card plus formatting and chart helpers for the comparison page.
The quote engine itself is pure and cheap, so results are recomputed on
every rerun; only the reference data is cached.

Convention: Polars for all transforms. Plotly and streamlit accept polars
frames directly.
"""

import plotly.express as px
import plotly.graph_objects as go
import polars as pl
import streamlit as st

from freight_quotes.compare import QuoteComparison
from freight_quotes.estimators import round_half_up_expr
from freight_quotes.rate_card import RateCard, load_rate_card
from freight_quotes.ranking import quotes_to_frame


@st.cache_resource
def get_rate_card() -> RateCard:
    """Load the bundled rate card once per session."""
    return load_rate_card()


def comparison_frame(result: QuoteComparison) -> pl.DataFrame:
    """Ranked quotes with display columns for the table view."""
    df = quotes_to_frame(list(result.quotes))
    return df.with_columns(
        (pl.col("price") == result.best_price).alias("best"),
        round_half_up_expr(pl.col("price") / pl.col("eta_days")).alias("price_per_day"),
    ).select(["carrier", "best", "mode", "service", "price", "eta_days", "co2e_kg", "price_per_day"])


def format_currency(value) -> str:
    if value is None:
        return "-"
    return f"${value:,.2f}"


def format_km(value) -> str:
    if not value:
        return "-"
    return f"{value:,.0f} km"


def apply_chart_layout(fig: go.Figure, extra_right: int = 0, has_legend: bool = True) -> go.Figure:
    """Apply consistent layout settings to prevent label cutoff.

    Args:
        fig: Plotly figure to update
        extra_right: Extra right margin for charts with outside text labels
        has_legend: If True, adds extra top margin for horizontal legend above plot
    """
    fig.update_xaxes(automargin=True)
    fig.update_yaxes(automargin=True)
    top_margin = 80 if has_legend else 50
    fig.update_layout(
        margin=dict(l=10, r=10 + extra_right, t=top_margin, b=10),
        autosize=True,
    )
    return fig


def price_eta_chart(result: QuoteComparison) -> go.Figure:
    """Price vs ETA scatter, marker size by CO2e."""
    df = quotes_to_frame(list(result.quotes))
    fig = px.scatter(
        df,
        x="eta_days",
        y="price",
        size="co2e_kg",
        color="carrier",
        hover_data=["co2e_kg"],
        labels={"eta_days": "ETA (days)", "price": "Price (USD)", "co2e_kg": "CO₂e (kg)"},
    )
    fig.update_layout(legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0))
    return apply_chart_layout(fig)
