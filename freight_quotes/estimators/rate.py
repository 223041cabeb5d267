"""
Rate Estimator

Base price from weight, volume, distance, a service/carrier multiplier and
the transport mode:

    price = (weight * WEIGHT_RATE + volume * VOLUME_RATE)
            * multiplier * mode_adj * distance_adj * density_adj + BASE_FEE

DENSITY ADJUSTMENT
------------------
Dimensional-weight style: weight / (volume * DIM_FACTOR), never below
DENSITY_FLOOR. Bulky, light shipments get billed closer to volumetric
weight. A zero volume yields the floor.

DISTANCE ADJUSTMENT
-------------------
ln(distance + DISTANCE_OFFSET_KM) / DISTANCE_DAMPING, so long-haul cost
grows sub-linearly.

estimate_base_rate() is the reference form of the formula; base_rate_amount()
is the polars twin the quote pipeline runs and must agree with it.

The result is rounded and floored at MIN_PRICE.
"""

import math

import polars as pl

from ..data import (
    WEIGHT_RATE,
    VOLUME_RATE,
    BASE_FEE,
    MIN_PRICE,
    DIM_FACTOR,
    DENSITY_FLOOR,
    DISTANCE_OFFSET_KM,
    DISTANCE_DAMPING,
)
from ..rate_card import TransportMode
from .rounding import round_half_up, round_half_up_expr


# =============================================================================
# SCALAR
# =============================================================================

def density_adjustment(weight_kg: float, volume_m3: float) -> float:
    """Density factor, DENSITY_FLOOR when the volumetric denominator is zero."""
    denominator = volume_m3 * DIM_FACTOR
    if not denominator:
        return DENSITY_FLOOR
    return max(weight_kg / denominator, DENSITY_FLOOR)


def distance_adjustment(distance_km: float) -> float:
    return math.log(distance_km + DISTANCE_OFFSET_KM) / DISTANCE_DAMPING


def estimate_base_rate(
    weight_kg: float,
    volume_m3: float,
    distance_km: float,
    multiplier: float,
    mode: TransportMode,
) -> int:
    """
    Estimate base price for a shipment.

    Args:
        weight_kg: Actual weight in kg
        volume_m3: Volume in cubic meters
        distance_km: Lane distance in km
        multiplier: Service level multiplier (already scaled per carrier)
        mode: Transport mode (supplies rate_adjustment)

    Returns:
        Integer price, at least MIN_PRICE
    """
    price = (
        (weight_kg * WEIGHT_RATE + volume_m3 * VOLUME_RATE)
        * multiplier
        * mode.rate_adjustment
        * distance_adjustment(distance_km)
        * density_adjustment(weight_kg, volume_m3)
        + BASE_FEE
    )
    return max(round_half_up(price), MIN_PRICE)


# =============================================================================
# POLARS EXPRESSIONS
# =============================================================================

def density_adjustment_expr() -> pl.Expr:
    denominator = pl.col("volume_m3") * DIM_FACTOR
    return (
        pl.when(denominator != 0)
        .then(pl.max_horizontal(pl.col("weight_kg") / denominator, pl.lit(DENSITY_FLOOR)))
        .otherwise(pl.lit(DENSITY_FLOOR))
    )


def base_rate_amount() -> pl.Expr:
    """
    Polars expression for the base price.

    Reads columns: weight_kg, volume_m3, distance_km, carrier_multiplier,
    rate_adjustment.
    """
    price = (
        (pl.col("weight_kg") * WEIGHT_RATE + pl.col("volume_m3") * VOLUME_RATE)
        * pl.col("carrier_multiplier")
        * pl.col("rate_adjustment")
        * ((pl.col("distance_km") + DISTANCE_OFFSET_KM).log() / DISTANCE_DAMPING)
        * density_adjustment_expr()
        + BASE_FEE
    )
    return pl.max_horizontal(round_half_up_expr(price), pl.lit(MIN_PRICE, dtype=pl.Int64))


__all__ = [
    "density_adjustment",
    "distance_adjustment",
    "estimate_base_rate",
    "density_adjustment_expr",
    "base_rate_amount",
]
