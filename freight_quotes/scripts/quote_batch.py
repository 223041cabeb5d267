"""
Batch Quote Comparison
======================

Quotes every shipment in a CSV across its mode's carrier roster, ranks the
quotes per shipment and writes them to CSV or parquet.

Input CSV columns:
    origin, destination, mode, service, weight_kg, length_cm, width_cm, height_cm
    (shipment_id optional)

Usage:
    python -m freight_quotes.scripts.quote_batch --input shipments.csv --output quotes.csv
    python -m freight_quotes.scripts.quote_batch --input shipments.csv --output quotes.parquet --sort-by co2 --only-lower-emission
    python -m freight_quotes.scripts.quote_batch --input shipments.csv --max-price 800 --dry-run
    python -m freight_quotes.scripts.quote_batch --input shipments.csv --output quotes.csv --reference-dir my_rate_card/
"""

import argparse
import logging
import sys
from pathlib import Path

import polars as pl

from freight_quotes.calculate_quotes import calculate_quotes
from freight_quotes.config import DEFAULT_MAX_PRICE, SORT_KEYS, setup_logging
from freight_quotes.models import RankingControls
from freight_quotes.rate_card import load_rate_card
from freight_quotes.ranking import rank_quotes


# =============================================================================
# CONFIGURATION
# =============================================================================

# Columns to write (in order)
OUTPUT_COLUMNS = [
    "shipment_id",
    "origin", "destination", "mode", "service",
    "weight_kg", "length_cm", "width_cm", "height_cm",
    "volume_m3", "distance_km",
    "carrier_index", "carrier",
    "price", "eta_days", "co2e_kg", "is_best",
    "calculator_version",
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Rank illustrative carrier quotes for a CSV of shipments"
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="CSV file with one shipment per row"
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("quotes.csv"),
        help="Output file (.csv or .parquet)"
    )
    parser.add_argument(
        "--max-price",
        type=float,
        default=DEFAULT_MAX_PRICE,
        help="Drop quotes priced above this"
    )
    parser.add_argument(
        "--sort-by",
        choices=list(SORT_KEYS),
        default="price",
        help="Sort key within each shipment"
    )
    parser.add_argument(
        "--only-lower-emission",
        action="store_true",
        help="Keep only quotes within 20%% of the cleanest affordable quote"
    )
    parser.add_argument(
        "--reference-dir",
        type=Path,
        default=None,
        help="Directory with modes.csv, service_levels.csv and carriers.csv"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print a preview instead of writing the output file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser.parse_args(argv)


def run(
    input_path: Path,
    controls: RankingControls,
    reference_dir: Path | None = None,
) -> pl.DataFrame:
    """Load shipments, quote them and rank per shipment."""
    shipments = pl.read_csv(
        input_path,
        schema_overrides={"origin": pl.Utf8, "destination": pl.Utf8},
    )
    rate_card = load_rate_card(reference_dir)
    quotes = calculate_quotes(shipments, rate_card=rate_card)
    ranked = rank_quotes(quotes, controls)
    return ranked.select([c for c in OUTPUT_COLUMNS if c in ranked.columns])


def write_output(df: pl.DataFrame, output_path: Path) -> None:
    """Write quotes as parquet or CSV depending on the file suffix."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix == ".parquet":
        df.write_parquet(output_path)
    else:
        df.write_csv(output_path)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logging(level=log_level)

    try:
        controls = RankingControls(
            max_price=args.max_price,
            only_lower_emission=args.only_lower_emission,
            sort_by=args.sort_by,
        )

        logger.info(f"Loading shipments from {args.input}")
        ranked = run(args.input, controls, args.reference_dir)

        shipment_count = ranked["shipment_id"].n_unique() if len(ranked) else 0
        logger.info(f"Ranked {len(ranked):,} quote(s) across {shipment_count:,} shipment(s)")

        if args.dry_run:
            print(ranked.head(20))
            logger.info(f"[DRY RUN] Would write {len(ranked):,} rows to {args.output}")
            return 0

        write_output(ranked, args.output)
        logger.info(f"Quotes saved to {args.output}")
        return 0

    except FileNotFoundError as e:
        logger.error(f"File not found: {e}")
        return 1
    except (ValueError, pl.exceptions.PolarsError) as e:
        logger.error(f"Data error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
