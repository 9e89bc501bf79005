import string

from shortlink.core.errors import InvalidCodeError

# Digit order is fixed forever: changing it would change every code already issued.
ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
BASE = len(ALPHABET)
_INDEX = {char: value for value, char in enumerate(ALPHABET)}


def encode(number: int) -> str:
    """Encode a non-negative integer as a base62 code.

    0 encodes to "0", 1 to "1", 61 to "Z" and 62 to "10". The output is the
    minimal representation with no leading zero digits.
    """
    if number < 0:
        raise ValueError("Only non-negative integers can be encoded")
    if number == 0:
        return ALPHABET[0]

    digits = []
    while number:
        number, remainder = divmod(number, BASE)
        digits.append(ALPHABET[remainder])
    return "".join(reversed(digits))


def decode(code: str) -> int:
    """Decode a base62 code back to the integer it was produced from."""
    if not code:
        raise InvalidCodeError("Code must not be empty")

    number = 0
    for char in code:
        try:
            number = number * BASE + _INDEX[char]
        except KeyError:
            raise InvalidCodeError(f"Invalid character in code: {char!r}") from None
    return number
