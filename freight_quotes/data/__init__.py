"""
Freight Quote Data

Reference data loaders for transport modes, service levels and carrier rosters.

Structure:
    - reference/*.csv: Static tables (modes, service levels, carriers)
    - reference/*.py:  Formula constants (pricing, distance heuristic)
"""

import polars as pl
from pathlib import Path

from .reference.pricing import (
    WEIGHT_RATE,
    VOLUME_RATE,
    BASE_FEE,
    MIN_PRICE,
    DIM_FACTOR,
    DENSITY_FLOOR,
    DISTANCE_OFFSET_KM,
    DISTANCE_DAMPING,
    SPEED_HINT_FLOOR,
    CARRIER_PRICE_STEP,
    CARRIER_ETA_STEP_DAYS,
    CARRIER_CO2E_STEP,
    LOWER_EMISSION_TOLERANCE,
)
from .reference.distance import BASE_OFFSET_KM, LENGTH_DIFF_KM, FIRST_CHAR_DIFF_KM


REFERENCE_DIR = Path(__file__).parent / "reference"

MODE_COLUMNS = ["mode", "label", "emission_factor", "rate_adjustment", "speed_divisor"]
SERVICE_LEVEL_COLUMNS = ["service", "label", "speed_hint_days", "multiplier"]
CARRIER_COLUMNS = ["mode", "carrier"]


def _read_reference(path: Path, columns: list[str], schema: dict) -> pl.DataFrame:
    """Read a reference CSV, check it carries the expected columns, cast to schema."""
    df = pl.read_csv(path, infer_schema=False)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"{path.name} is missing required column(s): {', '.join(missing)}")
    return df.select([pl.col(c).cast(schema[c]) for c in columns])


def load_modes(reference_dir: Path | None = None) -> pl.DataFrame:
    """
    Load transport modes from CSV.

    Returns:
        DataFrame with columns:
            - mode: Mode identifier (air, ocean, road)
            - label: Display label
            - emission_factor: Grams CO2e per ton-km
            - rate_adjustment: Mode price multiplier
            - speed_divisor: Average km covered per day
    """
    return _read_reference(
        (reference_dir or REFERENCE_DIR) / "modes.csv",
        MODE_COLUMNS,
        {
            "mode": pl.Utf8,
            "label": pl.Utf8,
            "emission_factor": pl.Float64,
            "rate_adjustment": pl.Float64,
            "speed_divisor": pl.Float64,
        },
    )


def load_service_levels(reference_dir: Path | None = None) -> pl.DataFrame:
    """
    Load service levels from CSV.

    Returns:
        DataFrame with columns: service, label, speed_hint_days, multiplier
    """
    return _read_reference(
        (reference_dir or REFERENCE_DIR) / "service_levels.csv",
        SERVICE_LEVEL_COLUMNS,
        {
            "service": pl.Utf8,
            "label": pl.Utf8,
            "speed_hint_days": pl.Float64,
            "multiplier": pl.Float64,
        },
    )


def load_carriers(reference_dir: Path | None = None) -> pl.DataFrame:
    """
    Load carrier rosters from CSV.

    Row order within a mode is the roster order; earlier carriers are
    quoted as cheaper, faster and cleaner than later ones.

    Returns:
        DataFrame with columns: mode, carrier
    """
    return _read_reference(
        (reference_dir or REFERENCE_DIR) / "carriers.csv",
        CARRIER_COLUMNS,
        {"mode": pl.Utf8, "carrier": pl.Utf8},
    )


__all__ = [
    # Reference data loaders
    "load_modes",
    "load_service_levels",
    "load_carriers",
    "REFERENCE_DIR",
    # Pricing config
    "WEIGHT_RATE",
    "VOLUME_RATE",
    "BASE_FEE",
    "MIN_PRICE",
    "DIM_FACTOR",
    "DENSITY_FLOOR",
    "DISTANCE_OFFSET_KM",
    "DISTANCE_DAMPING",
    "SPEED_HINT_FLOOR",
    "CARRIER_PRICE_STEP",
    "CARRIER_ETA_STEP_DAYS",
    "CARRIER_CO2E_STEP",
    "LOWER_EMISSION_TOLERANCE",
    # Distance heuristic config
    "BASE_OFFSET_KM",
    "LENGTH_DIFF_KM",
    "FIRST_CHAR_DIFF_KM",
]
