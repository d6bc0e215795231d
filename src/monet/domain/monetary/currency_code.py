from __future__ import annotations

from typing import TypeAlias

from monet.errors import InvalidCodeEncodingError, MalformedCodeError

# Currency codes are stored as exactly this many bytes
CODE_LENGTH = 3


class CurrencyCode:
    """Validated 3-byte currency identifier (ISO-4217 style, e.g. "USD").

    Bytes are stored verbatim, no case normalization happens: "usd" and "USD" are different
    codes. Equality, ordering and hashing use the byte value.
    """

    __slots__ = ("_code",)

    def __init__(self, code: str) -> None:
        """Initialize from a string.

        Args:
            code: The currency code; its UTF-8 encoding must be exactly 3 bytes long.

        Raises:
            TypeError: If $code is not a string.
            MalformedCodeError: If $code is not exactly 3 bytes long.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code!r}")

        encoded = code.encode("utf-8")
        # Raise: invariant is exactly 3 bytes
        if len(encoded) != CODE_LENGTH:
            raise MalformedCodeError(code)

        self._code = encoded

    @classmethod
    def parse(cls, code: str) -> CurrencyCode:
        return cls(code)

    @classmethod
    def from_bytes(cls, raw: bytes) -> CurrencyCode:
        """Build a code from raw bytes without decoding them.

        Raises:
            MalformedCodeError: If $raw is not exactly 3 bytes long.
        """
        raw = bytes(raw)
        if len(raw) != CODE_LENGTH:
            raise MalformedCodeError(raw.decode("utf-8", errors="replace"))

        result = cls.__new__(cls)
        result._code = raw
        return result

    @property
    def bytes(self) -> bytes:
        return self._code

    def as_str(self) -> str:
        """Return the code as a string.

        Raises:
            InvalidCodeEncodingError: If the stored bytes are not valid UTF-8. Only reachable for
                codes built with `from_bytes`.
        """
        try:
            return self._code.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidCodeEncodingError(self._code) from e

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyCode):
            return NotImplemented
        return self._code == other._code

    def __lt__(self, other) -> bool:
        if not isinstance(other, CurrencyCode):
            return NotImplemented
        return self._code < other._code

    def __hash__(self) -> int:
        return hash(self._code)

    def __str__(self) -> str:
        return self._code.decode("utf-8", errors="replace")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"


# Use where optimal type is `CurrencyCode`, but a plain string is also acceptable
CurrencyCodeLike: TypeAlias = CurrencyCode | str


def as_currency_code(value: CurrencyCodeLike) -> CurrencyCode:
    """Convert input to `CurrencyCode`.

    Raises:
        MalformedCodeError: If $value is a string that is not exactly 3 bytes long.
    """
    if isinstance(value, CurrencyCode):
        return value

    return CurrencyCode(value)
