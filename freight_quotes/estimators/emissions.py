"""
Emissions Estimator

CO2e in kg: ton-km times the mode's emission factor (g CO2e per ton-km),
converted to kg and rounded. Depends only on mode, distance and weight;
service level and carrier do not enter.

estimate_co2e_kg() is the reference form; co2e_amount() is the polars twin
the quote pipeline runs and must agree with it.
"""

import polars as pl

from ..rate_card import TransportMode
from .rounding import round_half_up, round_half_up_expr


def estimate_co2e_kg(mode: TransportMode, distance_km: float, weight_kg: float) -> int:
    """
    Estimate CO2e for a shipment.

    Args:
        mode: Transport mode (supplies emission_factor)
        distance_km: Lane distance in km
        weight_kg: Actual weight in kg

    Returns:
        Non-negative integer kg CO2e
    """
    ton_km = (weight_kg / 1000) * distance_km
    return round_half_up((mode.emission_factor * ton_km) / 1000)


def co2e_amount() -> pl.Expr:
    """
    Polars expression for mode-level CO2e in kg (before carrier scaling).

    Reads columns: emission_factor, distance_km, weight_kg.
    """
    ton_km = (pl.col("weight_kg") / 1000) * pl.col("distance_km")
    return round_half_up_expr((pl.col("emission_factor") * ton_km) / 1000)


__all__ = ["estimate_co2e_kg", "co2e_amount"]
