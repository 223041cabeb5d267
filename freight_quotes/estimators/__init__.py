"""
Quote Estimators

Closed-form estimates feeding each quote. Every estimator has a scalar
function for single values and a polars expression for the batch
calculator; both produce identical figures.
"""

from .distance import DistanceEstimator, estimate_distance_km
from .rate import estimate_base_rate, base_rate_amount
from .transit import estimate_transit_days, transit_days
from .emissions import estimate_co2e_kg, co2e_amount
from .rounding import round_half_up, round_half_up_expr

__all__ = [
    "DistanceEstimator",
    "estimate_distance_km",
    "estimate_base_rate",
    "base_rate_amount",
    "estimate_transit_days",
    "transit_days",
    "estimate_co2e_kg",
    "co2e_amount",
    "round_half_up",
    "round_half_up_expr",
]
