"""
Base62 key encoding.
Turns bounded non-negative integers into fixed-width keys.
"""

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE = len(ALPHABET)


def max_number_for_width(digits: int) -> int:
    """
    Largest integer representable with the given number of base62 digits.

    Args:
        digits: Key width (must be >= 1).

    Returns:
        62 ** digits - 1
    """
    if digits < 1:
        raise ValueError("Digit width must be at least 1")
    return BASE ** digits - 1


class KeyEncoder:
    """
    Fixed-width base62 encoder.

    The width is set once and never changes. Numbers wider than the
    configured width lose their high-order digits, so callers must keep
    their values within ``max_number``.
    """

    __slots__ = ("_digits", "_max_number")

    def __init__(self, digits: int):
        self._max_number = max_number_for_width(digits)
        self._digits = digits

    @property
    def digits(self) -> int:
        return self._digits

    @property
    def max_number(self) -> int:
        return self._max_number

    def encode(self, number: int) -> str:
        """
        Encode a number into exactly ``digits`` characters, most significant first.

        Raises:
            ValueError: If number is negative.
        """
        if number < 0:
            raise ValueError("Number must be non-negative")

        result = []
        for _ in range(self._digits):
            number, remainder = divmod(number, BASE)
            result.append(ALPHABET[remainder])
        return "".join(reversed(result))

    def decode(self, key: str) -> int:
        """Interpret a key as a base62 number."""
        number = 0
        for char in key:
            position = ALPHABET.find(char)
            if position == -1:
                raise ValueError(f"Invalid key character: {char!r}")
            number = number * BASE + position
        return number

    def __repr__(self) -> str:
        return f"KeyEncoder(digits={self._digits})"
