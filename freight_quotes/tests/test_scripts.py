"""
Unit Tests for Command-Line Tools

Tests the batch script end to end on temporary CSVs and the calculator's
report formatting.

Run with: pytest freight_quotes/tests/test_scripts.py -v
"""

import polars as pl
import pytest

from freight_quotes.compare import compare
from freight_quotes.models import ShipmentRequest, RankingControls
from freight_quotes.scripts import quote_batch
from freight_quotes.scripts.calculator import _choose, format_results


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def shipments_csv(tmp_path):
    path = tmp_path / "shipments.csv"
    pl.DataFrame({
        "shipment_id": ["S1", "S2"],
        "origin": ["Seattle, WA", "Hamburg, DE"],
        "destination": ["Taipei, TW", "Lyon, FR"],
        "mode": ["air", "road"],
        "service": ["standard", "economy"],
        "weight_kg": [100, 400],
        "length_cm": [120, 100],
        "width_cm": [80, 100],
        "height_cm": [60, 100],
    }).write_csv(path)
    return path


@pytest.fixture
def shipment():
    return ShipmentRequest("Seattle, WA", "Taipei, TW", "air", "standard", 100, 120, 80, 60)


# =============================================================================
# BATCH SCRIPT TESTS
# =============================================================================

class TestQuoteBatch:
    """Tests for the batch quote script."""

    def test_writes_csv(self, shipments_csv, tmp_path):
        output = tmp_path / "out" / "quotes.csv"
        code = quote_batch.main(["--input", str(shipments_csv), "--output", str(output)])
        assert code == 0
        df = pl.read_csv(output)
        assert len(df) == 8
        assert df.columns == quote_batch.OUTPUT_COLUMNS

    def test_writes_parquet(self, shipments_csv, tmp_path):
        output = tmp_path / "quotes.parquet"
        assert quote_batch.main(["--input", str(shipments_csv), "--output", str(output)]) == 0
        df = pl.read_parquet(output)
        seattle = df.filter(pl.col("shipment_id") == "S1")
        assert seattle["price"].to_list() == [385, 402, 418, 435]

    def test_filters_applied(self, shipments_csv):
        ranked = quote_batch.run(
            shipments_csv,
            RankingControls(max_price=410, sort_by="co2"),
        )
        seattle = ranked.filter(pl.col("shipment_id") == "S1")
        assert seattle["carrier"].to_list() == ["DHL Express", "FedEx"]
        assert (ranked["price"] <= 410).all()

    def test_dry_run_writes_nothing(self, shipments_csv, tmp_path):
        output = tmp_path / "quotes.csv"
        code = quote_batch.main(
            ["--input", str(shipments_csv), "--output", str(output), "--dry-run"]
        )
        assert code == 0
        assert not output.exists()

    def test_missing_input_returns_error(self, tmp_path):
        code = quote_batch.main(["--input", str(tmp_path / "nope.csv")])
        assert code == 1

    def test_unknown_mode_returns_error(self, tmp_path):
        path = tmp_path / "bad.csv"
        pl.DataFrame({
            "origin": ["A"], "destination": ["B"], "mode": ["rail"], "service": ["standard"],
            "weight_kg": [1], "length_cm": [1], "width_cm": [1], "height_cm": [1],
        }).write_csv(path)
        assert quote_batch.main(["--input", str(path), "--dry-run"]) == 1

    def test_nan_measure_skips_shipment(self, tmp_path):
        path = tmp_path / "nan.csv"
        path.write_text(
            "shipment_id,origin,destination,mode,service,weight_kg,length_cm,width_cm,height_cm\n"
            "S1,Seattle,Taipei,air,standard,100,120,80,60\n"
            "S2,Hamburg,Lyon,road,economy,NaN,100,100,100\n"
        )
        output = tmp_path / "quotes.csv"
        assert quote_batch.main(["--input", str(path), "--output", str(output)]) == 0
        assert pl.read_csv(output)["shipment_id"].unique().to_list() == ["S1"]

    def test_non_numeric_measure_skips_shipment(self, tmp_path):
        path = tmp_path / "text.csv"
        path.write_text(
            "shipment_id,origin,destination,mode,service,weight_kg,length_cm,width_cm,height_cm\n"
            "S1,Seattle,Taipei,air,standard,100,120,80,60\n"
            "S2,Hamburg,Lyon,road,economy,abc,100,100,100\n"
        )
        output = tmp_path / "quotes.csv"
        assert quote_batch.main(["--input", str(path), "--output", str(output)]) == 0
        assert pl.read_csv(output)["shipment_id"].unique().to_list() == ["S1"]


# =============================================================================
# CALCULATOR REPORT TESTS
# =============================================================================

class TestCalculatorReport:
    """Tests for the interactive calculator's report."""

    def test_report_lists_carriers_and_marks_best(self, shipment):
        report = format_results(compare(shipment))
        assert "Distance (est.): 925 km" in report
        assert "CO2e (best): 46 kg" in report
        assert "DHL Express *" in report
        assert "FedEx *" not in report

    def test_report_without_quotes(self, shipment):
        report = format_results(compare(shipment, RankingControls(max_price=100)))
        assert "No quotes match" in report


# =============================================================================
# CALCULATOR MENU TESTS
# =============================================================================

class TestChoose:
    """Tests for the calculator's numbered menu."""

    OPTIONS = [("air", "Air"), ("ocean", "Ocean"), ("road", "Road")]

    def _answers(self, monkeypatch, answers):
        replies = iter(answers)
        monkeypatch.setattr("builtins.input", lambda prompt="": next(replies))

    def test_enter_keeps_default(self, monkeypatch):
        self._answers(monkeypatch, [""])
        assert _choose("Mode", self.OPTIONS, "air") == "air"

    def test_valid_number(self, monkeypatch):
        self._answers(monkeypatch, ["3"])
        assert _choose("Mode", self.OPTIONS, "air") == "road"

    def test_out_of_range_reprompts(self, monkeypatch):
        """0, too-large and non-numeric answers are rejected, not wrapped around."""
        self._answers(monkeypatch, ["0", "4", "x", "-1", "2"])
        assert _choose("Mode", self.OPTIONS, "air") == "ocean"
