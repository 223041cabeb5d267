"""
Quote Engine Models

Immutable inputs and outputs of a quote computation. Nothing here is
mutated after creation; every change to a shipment or to the ranking
controls produces fresh objects.
"""

from dataclasses import dataclass

from .config import DEFAULT_MAX_PRICE, SORT_KEYS
from .estimators.rounding import round_half_up


@dataclass(frozen=True)
class ShipmentRequest:
    """A single shipment to quote."""
    origin: str
    destination: str
    mode: str            # Transport mode id (air, ocean, road)
    service: str         # Service level id (express, standard, economy)
    weight_kg: float
    length_cm: float
    width_cm: float
    height_cm: float

    @property
    def volume_m3(self) -> float:
        return self.length_cm * self.width_cm * self.height_cm / 1_000_000

    @property
    def is_quotable(self) -> bool:
        """True when a lane is set and weight and all dimensions are positive."""
        return bool(
            self.origin
            and self.destination
            and self.weight_kg > 0
            and self.length_cm > 0
            and self.width_cm > 0
            and self.height_cm > 0
        )

    def to_row(self) -> dict:
        return {
            "origin": self.origin,
            "destination": self.destination,
            "mode": self.mode,
            "service": self.service,
            "weight_kg": float(self.weight_kg),
            "length_cm": float(self.length_cm),
            "width_cm": float(self.width_cm),
            "height_cm": float(self.height_cm),
        }


@dataclass(frozen=True)
class Quote:
    """One carrier's quote for a shipment."""
    carrier: str
    price: int
    eta_days: int
    co2e_kg: int
    mode: str
    service: str

    @property
    def price_per_day(self) -> int:
        return round_half_up(self.price / self.eta_days)


@dataclass(frozen=True)
class RankingControls:
    """User-selected constraints applied to a quote set."""
    max_price: float = DEFAULT_MAX_PRICE
    only_lower_emission: bool = False
    sort_by: str = "price"

    def __post_init__(self):
        if self.sort_by not in SORT_KEYS:
            raise ValueError(
                f"Unknown sort key {self.sort_by!r}. Expected one of: {', '.join(SORT_KEYS)}"
            )

    @property
    def sort_column(self) -> str:
        return SORT_KEYS[self.sort_by]


QUOTE_FIELDS = ["carrier", "price", "eta_days", "co2e_kg", "mode", "service"]


__all__ = [
    "ShipmentRequest",
    "Quote",
    "RankingControls",
    "QUOTE_FIELDS",
]
