"""
Rate Card

Immutable configuration consumed by the quote engine: transport modes (with
emission factor, price adjustment, speed and carrier roster) and service
levels (speed hint and price multiplier).

A RateCard is passed into every calculation instead of being read from
module state, so alternate rosters or pricing tables can be swapped in:

    card = load_rate_card()                       # bundled reference CSVs
    card = load_rate_card(Path("my_reference"))   # same layout, other values
    card = RateCard(modes=(...), service_levels=(...))
"""

from dataclasses import dataclass
from pathlib import Path

import polars as pl

from .data import load_modes, load_service_levels, load_carriers


@dataclass(frozen=True)
class TransportMode:
    """A transport mode and its ordered carrier roster."""
    id: str
    label: str
    emission_factor: float    # g CO2e per ton-km
    rate_adjustment: float    # Price multiplier (air > road > ocean)
    speed_divisor: float      # km per day
    carriers: tuple[str, ...] = ()


@dataclass(frozen=True)
class ServiceLevel:
    """A service level with its nominal speed and price multiplier."""
    id: str
    label: str
    speed_hint_days: float
    multiplier: float


@dataclass(frozen=True)
class RateCard:
    modes: tuple[TransportMode, ...]
    service_levels: tuple[ServiceLevel, ...]

    @property
    def mode_ids(self) -> list[str]:
        return [m.id for m in self.modes]

    @property
    def service_ids(self) -> list[str]:
        return [s.id for s in self.service_levels]

    def mode(self, mode_id: str) -> TransportMode:
        """Look up a mode by id. Raises ValueError for unknown ids."""
        for m in self.modes:
            if m.id == mode_id:
                return m
        raise ValueError(
            f"Unknown transport mode {mode_id!r}. Expected one of: {', '.join(self.mode_ids)}"
        )

    def service_level(self, service_id: str) -> ServiceLevel:
        """Look up a service level by id. Raises ValueError for unknown ids."""
        for s in self.service_levels:
            if s.id == service_id:
                return s
        raise ValueError(
            f"Unknown service level {service_id!r}. Expected one of: {', '.join(self.service_ids)}"
        )

    # -------------------------------------------------------------------------
    # FRAMES (for joining in the batch calculator)
    # -------------------------------------------------------------------------

    def modes_frame(self) -> pl.DataFrame:
        """Mode parameters keyed by mode id."""
        return pl.DataFrame(
            {
                "mode": [m.id for m in self.modes],
                "emission_factor": [m.emission_factor for m in self.modes],
                "rate_adjustment": [m.rate_adjustment for m in self.modes],
                "speed_divisor": [m.speed_divisor for m in self.modes],
            },
            schema={
                "mode": pl.Utf8,
                "emission_factor": pl.Float64,
                "rate_adjustment": pl.Float64,
                "speed_divisor": pl.Float64,
            },
        )

    def service_levels_frame(self) -> pl.DataFrame:
        """Service level parameters keyed by service id."""
        return pl.DataFrame(
            {
                "service": [s.id for s in self.service_levels],
                "speed_hint_days": [s.speed_hint_days for s in self.service_levels],
                "multiplier": [s.multiplier for s in self.service_levels],
            },
            schema={
                "service": pl.Utf8,
                "speed_hint_days": pl.Float64,
                "multiplier": pl.Float64,
            },
        )

    def roster_frame(self) -> pl.DataFrame:
        """One row per (mode, carrier) with the carrier's roster position."""
        rows = [
            {"mode": m.id, "carrier_index": i, "carrier": name}
            for m in self.modes
            for i, name in enumerate(m.carriers)
        ]
        return pl.DataFrame(
            rows,
            schema={"mode": pl.Utf8, "carrier_index": pl.Int64, "carrier": pl.Utf8},
        )


def load_rate_card(reference_dir: Path | None = None) -> RateCard:
    """
    Build a RateCard from reference CSVs.

    Args:
        reference_dir: Directory with modes.csv, service_levels.csv and
            carriers.csv (bundled reference data if not provided)

    Returns:
        RateCard with modes and service levels in file order
    """
    modes = load_modes(reference_dir)
    service_levels = load_service_levels(reference_dir)
    carriers = load_carriers(reference_dir)

    return RateCard(
        modes=tuple(
            TransportMode(
                id=row["mode"],
                label=row["label"],
                emission_factor=row["emission_factor"],
                rate_adjustment=row["rate_adjustment"],
                speed_divisor=row["speed_divisor"],
                carriers=tuple(
                    carriers.filter(pl.col("mode") == row["mode"])["carrier"].to_list()
                ),
            )
            for row in modes.iter_rows(named=True)
        ),
        service_levels=tuple(
            ServiceLevel(
                id=row["service"],
                label=row["label"],
                speed_hint_days=row["speed_hint_days"],
                multiplier=row["multiplier"],
            )
            for row in service_levels.iter_rows(named=True)
        ),
    )


__all__ = [
    "TransportMode",
    "ServiceLevel",
    "RateCard",
    "load_rate_card",
]
