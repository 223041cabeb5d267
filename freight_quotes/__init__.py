"""
Freight Quote Engine

Illustrative carrier quotes (price, transit days, CO2e) for a shipment,
ranked and filtered for comparison. No carrier APIs are called; every
figure comes from closed-form estimates over a static rate card.
"""

from .calculate_quotes import calculate_quotes, generate_quotes
from .compare import QuoteComparison, compare
from .models import ShipmentRequest, Quote, RankingControls
from .rate_card import RateCard, TransportMode, ServiceLevel, load_rate_card
from .ranking import rank, rank_quotes, best_price
from .version import VERSION

__all__ = [
    "calculate_quotes",
    "generate_quotes",
    "QuoteComparison",
    "compare",
    "ShipmentRequest",
    "Quote",
    "RankingControls",
    "RateCard",
    "TransportMode",
    "ServiceLevel",
    "load_rate_card",
    "rank",
    "rank_quotes",
    "best_price",
    "VERSION",
]
