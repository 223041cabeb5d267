"""
Freight Quote Calculator

DataFrame in, DataFrame out. The input can come from any source (CSV, the
interactive calculator, a single ShipmentRequest) as long as it contains the
required columns. The output has one row per (shipment, carrier) with the
calculation columns and quote figures appended.

REQUIRED INPUT COLUMNS
----------------------
    origin              - Free-text origin (e.g., "Seattle, WA")
    destination         - Free-text destination (e.g., "Taipei, TW")
    mode                - Transport mode id (air, ocean, road)
    service             - Service level id (express, standard, economy)
    weight_kg           - Actual weight in kg
    length_cm           - Package length in cm
    width_cm            - Package width in cm
    height_cm           - Package height in cm

    shipment_id is optional; the row index is used when it is absent.

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - volume_m3, distance_km, is_quotable

    calculate() drops non-quotable shipments and adds:
        - emission_factor, rate_adjustment, speed_divisor (mode parameters)
        - speed_hint_days, multiplier (service level parameters)
        - carrier_index, carrier (one row per roster carrier)
        - carrier_multiplier, price, eta_days, co2e_kg
        - calculator_version

USAGE
-----
    from freight_quotes.calculate_quotes import calculate_quotes, generate_quotes
    result = calculate_quotes(df)
    quotes = generate_quotes(shipment)
"""

import logging

import polars as pl

from .version import VERSION
from .data import CARRIER_PRICE_STEP, CARRIER_ETA_STEP_DAYS, CARRIER_CO2E_STEP
from .estimators import (
    DistanceEstimator,
    estimate_distance_km,
    base_rate_amount,
    transit_days,
    co2e_amount,
    round_half_up_expr,
)
from .models import ShipmentRequest, Quote
from .rate_card import RateCard, load_rate_card


logger = logging.getLogger(__name__)

REQUIRED_INPUT_COLS = [
    "origin",
    "destination",
    "mode",
    "service",
    "weight_kg",
    "length_cm",
    "width_cm",
    "height_cm",
]

DIMENSION_COLS = ["weight_kg", "length_cm", "width_cm", "height_cm"]


# =============================================================================
# MAIN ENTRY POINTS
# =============================================================================

def calculate_quotes(
    df: pl.DataFrame,
    rate_card: RateCard | None = None,
    distance_estimator: DistanceEstimator = estimate_distance_km,
) -> pl.DataFrame:
    """
    Calculate carrier quotes for a shipment DataFrame.

    Args:
        df: Shipment DataFrame with required columns (see module docstring)
        rate_card: Modes, service levels and rosters (loaded from reference
            CSVs if not provided)
        distance_estimator: Callable (origin, destination) -> km

    Returns:
        DataFrame with one row per quotable shipment and roster carrier
    """
    if rate_card is None:
        rate_card = load_rate_card()

    df = supplement_shipments(df, distance_estimator)
    df = calculate(df, rate_card)
    return df


def generate_quotes(
    shipment: ShipmentRequest,
    rate_card: RateCard | None = None,
    distance_estimator: DistanceEstimator = estimate_distance_km,
) -> list[Quote]:
    """
    Generate one quote per carrier in the shipment's mode roster.

    Returns an empty list when the shipment is not quotable (no lane yet,
    or a non-positive weight or dimension).
    """
    if not shipment.is_quotable:
        return []

    df = calculate_quotes(
        pl.DataFrame([shipment.to_row()]),
        rate_card=rate_card,
        distance_estimator=distance_estimator,
    )
    return frame_to_quotes(df)


def frame_to_quotes(df: pl.DataFrame) -> list[Quote]:
    """Convert quote rows to Quote objects, keeping row order."""
    return [
        Quote(
            carrier=row["carrier"],
            price=row["price"],
            eta_days=row["eta_days"],
            co2e_kg=row["co2e_kg"],
            mode=row["mode"],
            service=row["service"],
        )
        for row in df.iter_rows(named=True)
    ]


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(
    df: pl.DataFrame,
    distance_estimator: DistanceEstimator = estimate_distance_km,
) -> pl.DataFrame:
    """
    Supplement shipment data with volume, lane distance and quotability.

    Args:
        df: Raw shipment DataFrame
        distance_estimator: Callable (origin, destination) -> km

    Returns:
        DataFrame with added columns:
            - shipment_id (if absent)
            - volume_m3, distance_km, is_quotable
    """
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Shipment data is missing required column(s): {', '.join(missing)}")

    if "shipment_id" not in df.columns:
        df = df.with_row_index("shipment_id")

    df = df.with_columns(
        [pl.col(c).fill_null("").cast(pl.Utf8) for c in ["origin", "destination"]]
        + [pl.col(c).cast(pl.Float64, strict=False) for c in DIMENSION_COLS]
    )

    df = _add_volume(df)
    df = _lookup_distances(df, distance_estimator)
    df = _add_quotable_flag(df)

    return df


def _add_volume(df: pl.DataFrame) -> pl.DataFrame:
    """Volume in cubic meters from centimeter dimensions."""
    return df.with_columns(
        (pl.col("length_cm") * pl.col("width_cm") * pl.col("height_cm") / 1_000_000)
        .alias("volume_m3")
    )


def _lookup_distances(df: pl.DataFrame, distance_estimator: DistanceEstimator) -> pl.DataFrame:
    """
    Add lane distance, estimated once per unique (origin, destination) pair.

    The estimator is an arbitrary Python callable (a heuristic today, a
    geocoding client later), so lanes are estimated outside polars and
    joined back.
    """
    lanes = df.select(["origin", "destination"]).unique(maintain_order=True)
    distances = [
        float(distance_estimator(origin, destination))
        for origin, destination in lanes.iter_rows()
    ]
    lanes = lanes.with_columns(pl.Series("distance_km", distances, dtype=pl.Float64))
    logger.debug("Estimated distance for %d lane(s)", len(lanes))

    return df.join(lanes, on=["origin", "destination"], how="left", maintain_order="left")


def _add_quotable_flag(df: pl.DataFrame) -> pl.DataFrame:
    """
    A shipment is quotable once a lane is set and all measures are positive.

    Unparseable measures arrive as null and NaN compares above every number
    in polars, so both count as missing.
    """
    return df.with_columns(
        (
            (pl.col("origin") != "")
            & (pl.col("destination") != "")
            & pl.all_horizontal([pl.col(c).fill_null(0).fill_nan(0) > 0 for c in DIMENSION_COLS])
        ).alias("is_quotable")
    )


# =============================================================================
# CALCULATE QUOTES
# =============================================================================

def calculate(df: pl.DataFrame, rate_card: RateCard) -> pl.DataFrame:
    """
    Calculate carrier quotes for supplemented shipments.

    Args:
        df: Supplemented shipment DataFrame from supplement_shipments
        rate_card: Modes, service levels and rosters

    Returns:
        DataFrame with one row per quotable shipment and roster carrier

    Processing order:
        1. Drop non-quotable shipments
        2. Join mode and service level parameters
        3. Expand each shipment across its mode's carrier roster
        4. Price, transit days and CO2e per carrier
        5. Stamp version
    """
    input_count = len(df)
    df = df.filter(pl.col("is_quotable"))
    if len(df) < input_count:
        logger.debug("Skipped %d non-quotable shipment(s)", input_count - len(df))

    df = _join_parameters(df, rate_card)
    df = _expand_roster(df, rate_card)
    df = _apply_carrier_multiplier(df)
    df = _calculate_price(df)
    df = _calculate_eta(df)
    df = _calculate_co2e(df)
    df = _stamp_version(df)

    logger.debug("Calculated %d quote(s) for %d shipment(s)", len(df), df["shipment_id"].n_unique())
    return df


def _join_parameters(df: pl.DataFrame, rate_card: RateCard) -> pl.DataFrame:
    """
    Join mode and service level parameters.

    Unknown ids violate the rate card contract and raise ValueError.
    """
    df = (
        df
        .join(rate_card.modes_frame(), on="mode", how="left", maintain_order="left")
        .join(rate_card.service_levels_frame(), on="service", how="left", maintain_order="left")
    )

    for id_col, param_col in [("mode", "emission_factor"), ("service", "multiplier")]:
        unknown = df.filter(pl.col(param_col).is_null())
        if len(unknown) > 0:
            ids = sorted(str(v) for v in unknown[id_col].unique().to_list())
            raise ValueError(
                f"{len(unknown)} shipment(s) have an unknown {id_col}: {', '.join(ids)}. "
                f"Check the rate card."
            )

    return df


def _expand_roster(df: pl.DataFrame, rate_card: RateCard) -> pl.DataFrame:
    """One row per carrier in the shipment's mode roster, in roster order."""
    df = df.with_row_index("_row_id")
    df = df.join(rate_card.roster_frame(), on="mode", how="inner")
    return df.sort(["_row_id", "carrier_index"]).drop("_row_id")


def _apply_carrier_multiplier(df: pl.DataFrame) -> pl.DataFrame:
    """Later carriers in a roster are modeled as marginally pricier."""
    return df.with_columns(
        (pl.col("multiplier") * (1 + pl.col("carrier_index") * CARRIER_PRICE_STEP))
        .alias("carrier_multiplier")
    )


def _calculate_price(df: pl.DataFrame) -> pl.DataFrame:
    return df.with_columns(base_rate_amount().alias("price"))


def _calculate_eta(df: pl.DataFrame) -> pl.DataFrame:
    """Transit days plus one day per roster position."""
    return df.with_columns(
        (transit_days() + pl.col("carrier_index") * CARRIER_ETA_STEP_DAYS).alias("eta_days")
    )


def _calculate_co2e(df: pl.DataFrame) -> pl.DataFrame:
    """Mode-level CO2e scaled per roster position, then rounded again."""
    return df.with_columns(
        round_half_up_expr(
            co2e_amount() * (1 + pl.col("carrier_index") * CARRIER_CO2E_STEP)
        ).alias("co2e_kg")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "calculate_quotes",
    "generate_quotes",
    "frame_to_quotes",
    "supplement_shipments",
    "calculate",
    "REQUIRED_INPUT_COLS",
]
