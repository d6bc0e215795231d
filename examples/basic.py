from __future__ import annotations

import logging
from pathlib import Path

from monet import CurrencyMoney, Exponent, Money, RateTable, ScaledAmount, load_currencies_csv

logger = logging.getLogger(__name__)

CURRENCIES_CSV = Path(__file__).with_name("currencies.csv")


def run() -> None:
    currencies = load_currencies_csv(CURRENCIES_CSV)

    # Money bound to one currency, amounts in minor units
    money_1 = CurrencyMoney(12345, currencies.get("IMC"))
    logger.info(f"Money 1: {money_1}")
    money_2 = CurrencyMoney(54321, currencies.get("USD"))
    logger.info(f"Money 2: {money_2}")

    # Scaled money evaluated against rates; the result is in the currency of the first term
    rates = RateTable.with_rates({"USD": 1_000_000, "CHF": 1_100_000, "IMC": 250_000})
    owed = Money(ScaledAmount.with_unit(20), "CHF")
    paid = money_1.to_money() + money_2.to_money()
    remaining = (owed - paid / Exponent(2)).execute(rates)
    logger.info(f"Remaining: {remaining} ({remaining:.6})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run()
