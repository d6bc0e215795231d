"""Load currency definitions into a `CurrencyRegistry`.

Three sources are supported, all describing currencies as (name, code, units):

- an array of tuples: `[("US Dollar", "USD", 2), ("Swiss Franc", "CHF", 2)]`
- a headerless CSV file in the format `Name,Code,DecimalUnits`:

      "US Dollar",USD,2
      "Swiss Franc",CHF,2

- a TOML file with an array of tables named `currency`:

      [[currency]]
      name = "US Dollar"
      code = "USD"
      units = 2

  or the same as an array of inline tables:

      currency = [
          { name = "US Dollar", code = "USD", units = 2 },
      ]
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from monet.domain.monetary.currency import MAX_UNITS, Currency
from monet.domain.monetary.currency_registry import CurrencyRegistry
from monet.errors import CurrencyDefinitionError, MalformedCodeError

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["name", "code", "units"]


def currencies_from_array(entries: Iterable[tuple[str, str, int]]) -> CurrencyRegistry:
    """Build a registry from (name, code, units) tuples.

    Raises:
        CurrencyDefinitionError: If some tuple is malformed, or a code repeats.
    """
    currencies = []
    for idx, entry in enumerate(entries):
        # Raise: every entry must be a (str, str, int) triple
        if not isinstance(entry, (tuple, list)) or len(entry) != 3:
            raise CurrencyDefinitionError(f"Tuple at index {idx} is malformed. The tuple must contain three values: name (str), code (str), units (int)")
        name, code, units = entry
        if not isinstance(name, str) or not isinstance(code, str) or isinstance(units, bool) or not isinstance(units, int):
            raise CurrencyDefinitionError(f"Tuple at index {idx} is malformed. The tuple must contain three values: name (str), code (str), units (int)")

        currencies.append(_create_currency(name, code, units, f"at index {idx}"))

    registry = CurrencyRegistry(currencies)
    logger.debug(f"Created registry with {len(registry)} currency(ies) from array")
    return registry


def load_currencies_csv(path: str | Path) -> CurrencyRegistry:
    """Load currencies from a headerless CSV file with rows `Name,Code,DecimalUnits`.

    Names may be quoted. Every row must have exactly 3 fields.

    Raises:
        CurrencyDefinitionError: If the file cannot be read or parsed, a row is malformed
            (the message names its 1-based line), or a code repeats.
    """
    path = Path(path)
    try:
        df = pd.read_csv(path, header=None, dtype=str, keep_default_na=False, skipinitialspace=True)
    except pd.errors.EmptyDataError:
        df = pd.DataFrame(columns=CSV_COLUMNS)
    except (OSError, pd.errors.ParserError) as e:
        raise CurrencyDefinitionError(f"An error happened while reading the csv file '{path}': {e}") from e

    # Raise: strict format, exactly 3 columns
    if len(df.columns) != len(CSV_COLUMNS):
        raise CurrencyDefinitionError(f"Expected {len(CSV_COLUMNS)} columns (Name,Code,DecimalUnits) in csv file '{path}', found {len(df.columns)}")
    df.columns = CSV_COLUMNS

    currencies = []
    for idx, (name, code, units) in enumerate(df.itertuples(index=False, name=None)):
        line = idx + 1
        if _is_missing(name):
            raise CurrencyDefinitionError(f"Missing name (index 0) on line {line}")
        if _is_missing(code):
            raise CurrencyDefinitionError(f"Missing code (index 1) on line {line}")
        if _is_missing(units):
            raise CurrencyDefinitionError(f"Missing units (index 2) on line {line}")

        try:
            parsed_units = int(units)
        except ValueError as e:
            raise CurrencyDefinitionError(f"Malformed units (index 2) on line {line}: '{units}'") from e

        currencies.append(_create_currency(name, code, parsed_units, f"on line {line}"))

    registry = CurrencyRegistry(currencies)
    logger.info(f"Loaded {len(registry)} currency(ies) from csv file '{path}'")
    return registry


def load_currencies_toml(path: str | Path) -> CurrencyRegistry:
    """Load currencies from a TOML file holding an array named `currency`.

    Each element needs `name` (string), `code` (string) and `units` (integer 0-255).

    Raises:
        CurrencyDefinitionError: If the file cannot be read or parsed, the `currency` array
            is missing, an element is malformed (the message names the field and index), or
            a code repeats.
    """
    path = Path(path)
    try:
        with path.open("rb") as f:
            parsed = tomllib.load(f)
    except OSError as e:
        raise CurrencyDefinitionError(f"Error while reading the path '{path}': {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise CurrencyDefinitionError(f"Error while parsing TOML file '{path}': {e}") from e

    if "currency" not in parsed:
        raise CurrencyDefinitionError('The TOML file must contain an Array of Tables named "currency"')

    array = parsed["currency"]
    if not isinstance(array, list):
        raise CurrencyDefinitionError(f'Expected array named "currency", found {_toml_type_name(array)}')

    currencies = []
    for idx, element in enumerate(array):
        if not isinstance(element, dict):
            raise CurrencyDefinitionError(f"Expected table in array at index {idx}, found {_toml_type_name(element)}")

        name = _require_toml_field(element, "name", str, idx)
        code = _require_toml_field(element, "code", str, idx)
        units = _require_toml_field(element, "units", int, idx)

        currencies.append(_create_currency(name, code, units, f"at index {idx}"))

    registry = CurrencyRegistry(currencies)
    logger.info(f"Loaded {len(registry)} currency(ies) from TOML file '{path}'")
    return registry


# region Helpers


def _create_currency(name: str, code: str, units: int, location: str) -> Currency:
    # Raise: units must fit into 0..=255
    if not 0 <= units <= MAX_UNITS:
        raise CurrencyDefinitionError(f"Units {units} {location} cannot be cast to an integer between 0 and {MAX_UNITS}")

    try:
        return Currency(code, name, units)
    except MalformedCodeError as e:
        raise CurrencyDefinitionError(f"Malformed code '{code}' {location}: a currency code must be exactly 3 characters long") from e
    except ValueError as e:
        raise CurrencyDefinitionError(f"Malformed currency {location}: {e}") from e


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value)) or value == ""


def _require_toml_field(table: dict, field: str, expected_type: type, idx: int):
    if field not in table:
        raise CurrencyDefinitionError(f'Missing field "{field}" at index {idx}')

    value = table[field]
    # bool is an int subclass in Python, but a distinct type in TOML
    if isinstance(value, bool) or not isinstance(value, expected_type):
        expected = "string" if expected_type is str else "integer"
        raise CurrencyDefinitionError(f'Expected {expected} "{field}" at index {idx}, found {_toml_type_name(value)}')
    return value


def _toml_type_name(value) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "table"
    return "datetime"


# endregion
