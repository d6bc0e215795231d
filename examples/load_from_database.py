"""This example doesn't actually load anything from a database, but shows how it should be done."""

from __future__ import annotations

import logging
from pathlib import Path

from monet import CurrencyMoney, DifferentCurrencyError, DynamicMoney, load_currencies_toml
from monet.domain.monetary.currency_money import try_convert_all

logger = logging.getLogger(__name__)

CURRENCIES_TOML = Path(__file__).with_name("currencies.toml")
CHF = load_currencies_toml(CURRENCIES_TOML).get("CHF")


def load_database() -> list[DynamicMoney]:
    return [DynamicMoney(100, "CHF", 2), DynamicMoney(1250, "CHF", 2), DynamicMoney(390, "CHF", 2)]


def load_database_bad() -> list[DynamicMoney]:
    return [DynamicMoney(100, "USD", 2), DynamicMoney(1250, "CHF", 2), DynamicMoney(390, "CHF", 2)]


def price_list(bad: bool) -> list[CurrencyMoney]:
    """Load a list of prices.

    Only CHF is accepted and the database should provide only that, but what if it doesn't?
    Every price is checked, the first one in another currency raises `DifferentCurrencyError`.
    """
    rows = load_database_bad() if bad else load_database()
    return try_convert_all(rows, CHF)


def run() -> None:
    good = price_list(bad=False)
    logger.info(f"Good price list: {[str(price) for price in good]}")

    try:
        price_list(bad=True)
    except DifferentCurrencyError as e:
        logger.info(f"Bad price list: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run()
