"""Display defaults and logging setup for the freight quote engine."""

import logging


DISPLAY_CURRENCY = "USD"

# Ranking controls
DEFAULT_MAX_PRICE = 5000.0
MAX_PRICE_MIN = 100
MAX_PRICE_MAX = 10000
MAX_PRICE_STEP = 50
SORT_KEYS = {
    "price": "price",
    "eta": "eta_days",
    "co2": "co2e_kg",
}
SORT_LABELS = {"price": "Price", "eta": "ETA", "co2": "Emissions"}


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure and return the application logger."""
    logger = logging.getLogger("freight_quotes")
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
