"""
Quote Ranking

Filter & sort pipeline applied to a generated quote set:

    1. Keep quotes with price <= max_price
    2. Lower-emission only: keep quotes with co2e <= cleanest * LOWER_EMISSION_TOLERANCE,
       where "cleanest" is taken from the price-filtered set
    3. Stable ascending sort by price, ETA or CO2e (ties keep roster order)
    4. Best: every quote sharing the minimum price of the ranked list

ORDER OF OPERATIONS
-------------------
The emission threshold comes from the already price-filtered quotes, so
raising max_price can change which carriers count as lower-emission. This
matches the original comparison page and is kept on purpose; it is a UX
quirk worth revisiting, not a calculation bug.

rank_quotes() works on quote DataFrames and ranks each shipment_id
independently. rank() is the same pipeline for a list of Quote objects.
"""

import polars as pl

from .data import LOWER_EMISSION_TOLERANCE
from .models import Quote, RankingControls, QUOTE_FIELDS
from .calculate_quotes import frame_to_quotes


QUOTE_SCHEMA = {
    "carrier": pl.Utf8,
    "price": pl.Int64,
    "eta_days": pl.Int64,
    "co2e_kg": pl.Int64,
    "mode": pl.Utf8,
    "service": pl.Utf8,
}


# =============================================================================
# DATAFRAME PIPELINE
# =============================================================================

def rank_quotes(df: pl.DataFrame, controls: RankingControls | None = None) -> pl.DataFrame:
    """
    Filter and sort quote rows per shipment.

    Args:
        df: Quote DataFrame (from calculate_quotes or quotes_to_frame)
        controls: Max price, lower-emission toggle and sort key (defaults if
            not provided)

    Returns:
        Filtered DataFrame with shipments in first-appearance order, each
        sorted by the sort key, with an added is_best column
    """
    if controls is None:
        controls = RankingControls()

    if "shipment_id" not in df.columns:
        df = df.with_columns(pl.lit(0, dtype=pl.UInt32).alias("shipment_id"))

    df = df.filter(pl.col("price") <= controls.max_price)

    if controls.only_lower_emission:
        df = df.filter(
            pl.col("co2e_kg")
            <= pl.col("co2e_kg").min().over("shipment_id") * LOWER_EMISSION_TOLERANCE
        )

    # Shipments stay in first-appearance order, whatever their id values
    df = (
        df.with_row_index("_shipment_order")
        .with_columns(pl.col("_shipment_order").min().over("shipment_id"))
        .sort(["_shipment_order", controls.sort_column], maintain_order=True)
        .drop("_shipment_order")
    )

    return df.with_columns(
        (pl.col("price") == pl.col("price").min().over("shipment_id")).alias("is_best")
    )


def quotes_to_frame(quotes: list[Quote]) -> pl.DataFrame:
    """Quote objects as a DataFrame, keeping list order."""
    return pl.DataFrame(
        [{field: getattr(q, field) for field in QUOTE_FIELDS} for q in quotes],
        schema=QUOTE_SCHEMA,
    )


# =============================================================================
# QUOTE LISTS
# =============================================================================

def rank(quotes: list[Quote], controls: RankingControls | None = None) -> list[Quote]:
    """
    Filter and sort a single shipment's quotes.

    Returns an empty list when nothing passes the filters; that is a valid
    outcome (no carrier meets the constraints), not an error.
    """
    return frame_to_quotes(rank_quotes(quotes_to_frame(quotes), controls))


def best_price(quotes: list[Quote]) -> int | None:
    """Minimum price among quotes, None when there are none."""
    if not quotes:
        return None
    return min(q.price for q in quotes)


def best_quotes(quotes: list[Quote]) -> list[Quote]:
    """All quotes sharing the minimum price."""
    lowest = best_price(quotes)
    return [q for q in quotes if q.price == lowest]


__all__ = [
    "rank_quotes",
    "quotes_to_frame",
    "rank",
    "best_price",
    "best_quotes",
    "QUOTE_SCHEMA",
]
