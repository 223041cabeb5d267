"""
Quote Comparison

The whole engine as one pure call: rank(generate_quotes(shipment), controls)
plus the summary figures a comparison page shows next to the ranked list.
Callers re-run it whenever the shipment or the controls change; nothing is
cached between calls.
"""

from dataclasses import dataclass

from .calculate_quotes import generate_quotes
from .estimators import DistanceEstimator, estimate_distance_km
from .models import ShipmentRequest, Quote, RankingControls
from .rate_card import RateCard, load_rate_card
from .ranking import rank, best_price


@dataclass(frozen=True)
class QuoteComparison:
    """Ranked quotes for one shipment and the figures shown beside them."""
    shipment: ShipmentRequest
    controls: RankingControls
    distance_km: float
    quotes: tuple[Quote, ...]          # Ranked and filtered
    min_co2e_kg: int | None            # Over all generated quotes, before filtering
    best_price: int | None             # Over the ranked quotes

    def is_best(self, quote: Quote) -> bool:
        return self.best_price is not None and quote.price == self.best_price


def compare(
    shipment: ShipmentRequest,
    controls: RankingControls | None = None,
    rate_card: RateCard | None = None,
    distance_estimator: DistanceEstimator = estimate_distance_km,
) -> QuoteComparison:
    """
    Generate, filter and rank quotes for a shipment.

    Args:
        shipment: Shipment to quote
        controls: Ranking controls (defaults if not provided)
        rate_card: Modes, service levels and rosters (reference CSVs if not
            provided)
        distance_estimator: Callable (origin, destination) -> km

    Returns:
        QuoteComparison; quotes is empty when the shipment is not quotable
        or nothing passes the filters
    """
    if controls is None:
        controls = RankingControls()
    if rate_card is None:
        rate_card = load_rate_card()

    generated = generate_quotes(shipment, rate_card, distance_estimator)
    ranked = rank(generated, controls)

    return QuoteComparison(
        shipment=shipment,
        controls=controls,
        distance_km=distance_estimator(shipment.origin, shipment.destination),
        quotes=tuple(ranked),
        min_co2e_kg=min((q.co2e_kg for q in generated), default=None),
        best_price=best_price(ranked),
    )


__all__ = ["QuoteComparison", "compare"]
