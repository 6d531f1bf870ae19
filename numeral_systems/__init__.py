"""Octal, decimal and hexadecimal text for signed 32-bit integers."""

from numeral_systems.converter import (
    DIGITS,
    INT32_MAX,
    INT32_MIN,
    SUPPORTED_BASES,
    InvalidArgumentError,
    convert,
    convert_all,
    positive_decimal,
    positive_hex,
    positive_octal,
    positive_radix,
    signed_radix,
)

__version__ = "1.0.0"

__all__ = [
    "DIGITS", "INT32_MAX", "INT32_MIN", "SUPPORTED_BASES",
    "InvalidArgumentError",
    "convert", "convert_all",
    "positive_decimal", "positive_hex", "positive_octal",
    "positive_radix", "signed_radix",
]
