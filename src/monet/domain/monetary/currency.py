from __future__ import annotations

from monet.domain.monetary.currency_code import CurrencyCode, CurrencyCodeLike, as_currency_code

MAX_UNITS = 255


class Currency:
    """Currency metadata: code, name and minor-unit exponent.

    This is the runtime counterpart of a per-currency marker type. Anything that needs to know
    how a currency is displayed (e.g. `Money.format` or `CurrencyMoney`) reads `code` and
    `units` from here.

    Attributes:
        code (str): Currency code (e.g., "USD", "CHF").
        currency_code (CurrencyCode): The same code, validated.
        name (str): Full currency name.
        units (int): Number of decimal places conventionally displayed (0-255, typically 0-4).
    """

    __slots__ = ("_currency_code", "_name", "_units")

    def __init__(self, code: CurrencyCodeLike, name: str, units: int):
        """Initialize a Currency instance.

        Args:
            code: Currency code (e.g., "USD", "CHF"), exactly 3 bytes.
            name: Full currency name.
            units: Number of decimal places (0-255).

        Raises:
            MalformedCodeError: If $code is not exactly 3 bytes long.
            ValueError: If $name or $units are invalid.
        """
        currency_code = as_currency_code(code)

        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"$name must be a non-empty string, but provided value is: '{name}'")

        if isinstance(units, bool) or not isinstance(units, int) or units < 0 or units > MAX_UNITS:
            raise ValueError(f"$units must be an integer between 0 and {MAX_UNITS}, but provided value is: {units}")

        self._currency_code = currency_code
        self._name = name.strip()
        self._units = units

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._currency_code.as_str()

    @property
    def currency_code(self) -> CurrencyCode:
        return self._currency_code

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    @property
    def units(self) -> int:
        """Get the number of minor-unit decimal places."""
        return self._units

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self._currency_code == other._currency_code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self._currency_code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}', '{self.name}', {self.units})"
