from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from monet import CurrencyMoney, load_currencies_csv

logger = logging.getLogger(__name__)

CURRENCIES_CSV = Path(__file__).with_name("currencies.csv")
CHF = load_currencies_csv(CURRENCIES_CSV).get("CHF")


@dataclass(frozen=True)
class Item:
    name: str
    price: CurrencyMoney


# Load items from a database or something
def cart() -> list[Item]:
    return [
        Item(name="Soap", price=CurrencyMoney(500, CHF)),
        Item(name="AMD Ryzen R9 3900x", price=CurrencyMoney(51500, CHF)),
        Item(name="Some Item", price=CurrencyMoney(1850, CHF)),
        Item(name="Bag", price=CurrencyMoney(50, CHF)),
        Item(name="Discount", price=CurrencyMoney(-1500, CHF)),
    ]


def run() -> None:
    items = cart()
    total = sum(item.price for item in items)

    lines = ["Your cart"]
    lines += [f"{str(item.price):20} | {item.name}" for item in items]
    lines += [f"{'TOTAL':-^30}", str(total)]
    logger.info("\n".join(lines))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    run()
