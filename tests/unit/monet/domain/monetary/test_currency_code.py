from __future__ import annotations

import pytest

from monet.domain.monetary.currency_code import CurrencyCode, as_currency_code
from monet.errors import InvalidCodeEncodingError, MalformedCodeError


def test_valid_code_round_trips_to_string() -> None:
    code = CurrencyCode("USD")

    assert code.as_str() == "USD"
    assert str(code) == "USD"
    assert code.bytes == b"USD"
    assert repr(code) == "CurrencyCode('USD')"
    assert CurrencyCode.parse("CHF") == CurrencyCode("CHF")


@pytest.mark.parametrize("value", ["US", "USDT", "", "  USD"])
def test_code_must_be_exactly_three_bytes(value: str) -> None:
    with pytest.raises(MalformedCodeError) as exc_info:
        CurrencyCode(value)

    assert exc_info.value.value == value
    # MalformedCodeError is also a ValueError
    assert isinstance(exc_info.value, ValueError)


def test_length_is_measured_in_bytes() -> None:
    # "€" is encoded as three UTF-8 bytes
    assert CurrencyCode("€").as_str() == "€"

    with pytest.raises(MalformedCodeError):
        CurrencyCode("€€")


def test_no_case_normalization() -> None:
    assert CurrencyCode("usd") != CurrencyCode("USD")
    assert CurrencyCode("usd").as_str() == "usd"


def test_equality_and_hash_by_bytes() -> None:
    codes = {CurrencyCode("USD"), CurrencyCode("USD"), CurrencyCode("CHF")}

    assert len(codes) == 2
    assert CurrencyCode("USD") == CurrencyCode.from_bytes(b"USD")
    assert CurrencyCode("USD") != "USD"
    assert sorted([CurrencyCode("USD"), CurrencyCode("CHF")]) == [CurrencyCode("CHF"), CurrencyCode("USD")]


def test_from_bytes_validates_length() -> None:
    with pytest.raises(MalformedCodeError):
        CurrencyCode.from_bytes(b"US")


def test_reverse_conversion_fails_for_invalid_utf8() -> None:
    code = CurrencyCode.from_bytes(b"\xff\xfe\xfd")

    with pytest.raises(InvalidCodeEncodingError):
        code.as_str()


def test_non_string_is_rejected() -> None:
    with pytest.raises(TypeError):
        CurrencyCode(840)


def test_as_currency_code() -> None:
    code = CurrencyCode("EUR")

    assert as_currency_code(code) is code
    assert as_currency_code("EUR") == code
