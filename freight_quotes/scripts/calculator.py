"""
Freight Quote Calculator
========================

Interactive CLI tool to compare carrier quotes for a single shipment.

Usage:
    python -m freight_quotes.scripts.calculator
"""

from freight_quotes.compare import QuoteComparison, compare
from freight_quotes.config import DEFAULT_MAX_PRICE, DISPLAY_CURRENCY, SORT_KEYS
from freight_quotes.models import ShipmentRequest, RankingControls
from freight_quotes.rate_card import RateCard, load_rate_card
from freight_quotes.version import VERSION


def _choose(prompt: str, options: list[tuple[str, str]], default: str) -> str:
    """Numbered menu over (id, label) options; Enter keeps the default."""
    print(f"\n{prompt}:")
    for i, (_, label) in enumerate(options, start=1):
        print(f"  {i}. {label}")
    while True:
        choice = input(f"Select (1-{len(options)}) [default: {default}]: ").strip()
        if not choice:
            return default
        if choice.isdigit() and 1 <= int(choice) <= len(options):
            return options[int(choice) - 1][0]
        print(f"Invalid choice '{choice}', enter a number from 1 to {len(options)}.")


def get_user_input(rate_card: RateCard) -> tuple[ShipmentRequest, RankingControls]:
    """Prompt user for shipment details and ranking controls."""
    print("\n=== Freight Quote Calculator ===")
    print(f"Version: {VERSION}\n")

    # Lane
    origin = input("Origin (e.g., Seattle, WA): ").strip()
    destination = input("Destination (e.g., Taipei, TW): ").strip()

    mode = _choose("Mode", [(m.id, m.label) for m in rate_card.modes], "air")
    service = _choose(
        "Service", [(s.id, s.label) for s in rate_card.service_levels], "standard"
    )

    # Package
    weight = float(input("\nWeight (kg): "))
    length = float(input("Length (cm): "))
    width = float(input("Width (cm): "))
    height = float(input("Height (cm): "))

    # Controls
    sort_by = _choose("Sort by", [(k, k) for k in SORT_KEYS], "price")
    max_price_input = input(f"\nMax price [default: {DEFAULT_MAX_PRICE:,.0f}]: ").strip()
    max_price = float(max_price_input) if max_price_input else DEFAULT_MAX_PRICE
    only_lower_emission = input("Only lower-emission options? (y/N): ").strip().lower() == "y"

    shipment = ShipmentRequest(
        origin=origin,
        destination=destination,
        mode=mode,
        service=service,
        weight_kg=weight,
        length_cm=length,
        width_cm=width,
        height_cm=height,
    )
    controls = RankingControls(
        max_price=max_price,
        only_lower_emission=only_lower_emission,
        sort_by=sort_by,
    )
    return shipment, controls


def format_results(result: QuoteComparison) -> str:
    """Render a comparison as a plain-text report."""
    shipment = result.shipment
    lines = [
        "=" * 72,
        "QUOTE COMPARISON",
        "=" * 72,
        "",
        f"Lane: {shipment.origin} -> {shipment.destination}",
        f"Shipment: {shipment.length_cm:g}x{shipment.width_cm:g}x{shipment.height_cm:g} cm, "
        f"{shipment.weight_kg:g} kg ({shipment.volume_m3:.3f} m3)",
        f"Mode / service: {shipment.mode} / {shipment.service}",
        f"Distance (est.): {result.distance_km:,.0f} km" if result.distance_km else "Distance (est.): -",
        f"CO2e (best): {result.min_co2e_kg:,} kg" if result.min_co2e_kg is not None else "CO2e (best): -",
        "",
    ]

    if not result.quotes:
        lines.append("No quotes match. Check the shipment details or relax the filters.")
        return "\n".join(lines)

    lines.append(
        f"{'Carrier':<24}{'Price (' + DISPLAY_CURRENCY + ')':>14}{'ETA (days)':>12}"
        f"{'CO2e (kg)':>12}{'$/day':>10}"
    )
    lines.append("-" * 72)
    for q in result.quotes:
        name = f"{q.carrier} *" if result.is_best(q) else q.carrier
        lines.append(
            f"{name:<24}{q.price:>14,}{q.eta_days:>12}{q.co2e_kg:>12,}{q.price_per_day:>10,}"
        )
    lines.append("")
    lines.append("* Best price. Quotes are illustrative only.")
    return "\n".join(lines)


def main():
    """Main entry point."""
    try:
        rate_card = load_rate_card()

        # Get user input
        shipment, controls = get_user_input(rate_card)

        # Run the comparison
        result = compare(shipment, controls, rate_card)

        # Print results
        print()
        print(format_results(result))
        print()

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
