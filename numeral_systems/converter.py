"""
Integer to text conversion for octal, decimal and hexadecimal bases.
"""

SUPPORTED_BASES = (8, 10, 16)

INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

DIGITS = "0123456789ABCDEF"

_FORMATS = {8: "o", 10: "d", 16: "X"}


class InvalidArgumentError(ValueError):
    pass


def _check_number(number: int) -> None:
    if isinstance(number, bool) or not isinstance(number, int):
        raise InvalidArgumentError(f"Number must be an integer, got {type(number).__name__}.")
    if not INT32_MIN <= number <= INT32_MAX:
        raise InvalidArgumentError(
            f"Number must be between {INT32_MIN} and {INT32_MAX}."
        )


def _check_positive(number: int) -> None:
    _check_number(number)
    if number < 0:
        raise InvalidArgumentError("Number can not be less than zero.")


def _check_radix(radix: int) -> None:
    if radix not in SUPPORTED_BASES:
        raise InvalidArgumentError(
            f"Only these bases are supported: {', '.join(map(str, SUPPORTED_BASES))}."
        )


def _repeated_division(number: int, base: int) -> str:
    # zero produces no digits at all
    digits = []
    while number != 0:
        number, rem = divmod(number, base)
        digits.append(DIGITS[rem])
    digits.reverse()
    return "".join(digits)


def positive_octal(number: int) -> str:
    """Octal digits of a non-negative number. Zero gives an empty string."""
    _check_positive(number)
    return _repeated_division(number, 8)


def positive_decimal(number: int) -> str:
    _check_positive(number)
    return str(number)


def positive_hex(number: int) -> str:
    """Uppercase hex digits of a non-negative number. Zero gives an empty string."""
    _check_positive(number)
    return _repeated_division(number, 16)


def positive_radix(number: int, radix: int) -> str:
    _check_radix(radix)

    if radix == 8:
        return positive_octal(number)
    if radix == 10:
        return positive_decimal(number)
    return positive_hex(number)


def signed_radix(number: int, radix: int) -> str:
    """
    Render any int32 in the given radix with a leading minus for negative
    values. Unlike the positive converters, zero renders as "0".
    """
    _check_radix(radix)
    _check_number(number)

    text = format(abs(number), _FORMATS[radix]).upper()
    return "-" + text if number < 0 else text


def convert(number: int, radix: int, signed: bool = False) -> str:
    if signed:
        return signed_radix(number, radix)
    return positive_radix(number, radix)


def convert_all(number: int, signed: bool = False) -> dict[int, str]:
    return {radix: convert(number, radix, signed) for radix in SUPPORTED_BASES}
