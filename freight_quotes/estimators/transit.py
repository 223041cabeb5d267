"""
Transit Time Estimator

Whole days in transit: distance over the mode's daily speed, floored by
SPEED_HINT_FLOOR x the service level's nominal days, rounded up. An
express shipment never shows faster than 60% of its advertised minimum,
even on very short lanes.

estimate_transit_days() is the reference form; transit_days() is the polars
twin the quote pipeline runs and must agree with it.
"""

import math

import polars as pl

from ..data import SPEED_HINT_FLOOR
from ..rate_card import TransportMode


def estimate_transit_days(distance_km: float, mode: TransportMode, speed_hint_days: float) -> int:
    """
    Estimate transit time in whole days.

    Args:
        distance_km: Lane distance in km
        mode: Transport mode (supplies speed_divisor)
        speed_hint_days: Service level nominal days

    Returns:
        Positive integer day count (2.1 days is reported as 3)
    """
    travel_days = distance_km / mode.speed_divisor
    return math.ceil(max(travel_days, speed_hint_days * SPEED_HINT_FLOOR))


def transit_days() -> pl.Expr:
    """
    Polars expression for transit days.

    Reads columns: distance_km, speed_divisor, speed_hint_days.
    """
    return (
        pl.max_horizontal(
            pl.col("distance_km") / pl.col("speed_divisor"),
            pl.col("speed_hint_days") * SPEED_HINT_FLOOR,
        )
        .ceil()
        .cast(pl.Int64)
    )


__all__ = ["estimate_transit_days", "transit_days"]
