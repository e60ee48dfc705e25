import string

from shamir_recovery.services.errors import InvalidDigit

DIGITS = string.digits + string.ascii_lowercase
DIGIT_VALUES = {c: i for i, c in enumerate(DIGITS)}
DIGIT_VALUES.update((c, i) for i, c in enumerate(string.ascii_uppercase, start=10))
MIN_BASE = 2
MAX_BASE = len(DIGITS)


def _check_base(base: int):
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}")


def digit_value(character: str) -> int:
    """Map a digit character to its value, -1 if it is not a digit in any base."""
    return DIGIT_VALUES.get(character, -1)


def decode(value: str, base: int) -> int:
    """
    Decode `value` written in `base` into an int.
    Digits are 0-9 then a-z (case-insensitive), most significant first.
    """
    _check_base(base)
    if not value:
        raise ValueError("cannot decode an empty value")

    result = 0
    for position, character in enumerate(value):
        digit = digit_value(character)
        if digit < 0 or digit >= base:
            raise InvalidDigit(character, base, position=position)
        result = result * base + digit
    return result


def encode(number: int, base: int) -> str:
    _check_base(base)
    if number < 0:
        raise ValueError("cannot encode a negative number")
    if number == 0:
        return "0"

    digits = []
    while number:
        number, digit = divmod(number, base)
        digits.append(DIGITS[digit])
    return "".join(reversed(digits))
