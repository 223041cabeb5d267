"""
Unit Tests for Quote Comparison

Tests the end-to-end pipeline rank(generate_quotes(shipment), controls)
and the summary figures.

Run with: pytest freight_quotes/tests/test_compare.py -v
"""

from dataclasses import replace

import pytest

from freight_quotes.compare import compare
from freight_quotes.models import ShipmentRequest, RankingControls
from freight_quotes.rate_card import load_rate_card


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture(scope="module")
def rate_card():
    return load_rate_card()


@pytest.fixture
def shipment():
    return ShipmentRequest(
        origin="Seattle, WA",
        destination="Taipei, TW",
        mode="air",
        service="standard",
        weight_kg=100,
        length_cm=120,
        width_cm=80,
        height_cm=60,
    )


# =============================================================================
# COMPARISON TESTS
# =============================================================================

class TestCompare:
    """Tests for the full comparison."""

    def test_summary_figures(self, shipment, rate_card):
        result = compare(shipment, rate_card=rate_card)
        assert result.distance_km == 925
        assert result.min_co2e_kg == 46
        assert result.best_price == 385

    def test_ranked_by_price(self, shipment, rate_card):
        result = compare(shipment, RankingControls(sort_by="price"), rate_card)
        assert [q.price for q in result.quotes] == [385, 402, 418, 435]

    def test_max_price_filters(self, shipment, rate_card):
        result = compare(shipment, RankingControls(max_price=410), rate_card)
        assert [q.carrier for q in result.quotes] == ["DHL Express", "FedEx"]

    def test_min_co2e_ignores_filters(self, shipment, rate_card):
        """The CO2e summary is taken over all generated quotes."""
        result = compare(shipment, RankingControls(max_price=100), rate_card)
        assert result.quotes == ()
        assert result.min_co2e_kg == 46
        assert result.best_price is None

    def test_lower_emission_only(self, shipment, rate_card):
        # 46 * 1.2 = 55.2 keeps all four air quotes (46..50)
        result = compare(shipment, RankingControls(only_lower_emission=True), rate_card)
        assert len(result.quotes) == 4

    def test_is_best(self, shipment, rate_card):
        result = compare(shipment, rate_card=rate_card)
        assert [result.is_best(q) for q in result.quotes] == [True, False, False, False]

    def test_not_quotable(self, shipment, rate_card):
        result = compare(replace(shipment, destination=""), rate_card=rate_card)
        assert result.distance_km == 0
        assert result.quotes == ()
        assert result.min_co2e_kg is None
        assert result.best_price is None

    def test_deterministic(self, shipment, rate_card):
        controls = RankingControls(sort_by="co2", only_lower_emission=True, max_price=1000)
        assert compare(shipment, controls, rate_card) == compare(shipment, controls, rate_card)

    def test_ocean_cheaper_and_cleaner_than_air(self, shipment, rate_card):
        air = compare(shipment, rate_card=rate_card)
        ocean = compare(replace(shipment, mode="ocean", service="economy"), rate_card=rate_card)
        assert ocean.best_price < air.best_price
        assert ocean.min_co2e_kg < air.min_co2e_kg

    def test_injected_distance_estimator(self, shipment, rate_card):
        result = compare(shipment, rate_card=rate_card, distance_estimator=lambda o, d: 4000.0)
        assert result.distance_km == 4000.0
        assert result.min_co2e_kg == 200
