"""ISBN generation and validation.

Generated identifiers are ISBN-13 with the ``978`` prefix, rendered as
``978-d-dddd-dddd-c``. Uniqueness is left to the ``books.isbn`` constraint.
"""

import random
import re

ISBN_PREFIX = "978"
# 13 digits plus the four hyphens of the grouped form
ISBN_MAX_LENGTH = 17

_SEPARATORS = re.compile(r"[\s-]")
_ISBN10 = re.compile(r"^[0-9]{9}[0-9X]$")
_ISBN13 = re.compile(r"^[0-9]{13}$")


def isbn13_check_digit(payload: str) -> int:
    """Check digit for a 12-digit payload, weights 1,3,1,3... from the left."""
    if len(payload) != 12 or not payload.isdigit():
        raise ValueError(f"ISBN-13 payload must be 12 digits, got {payload!r}")
    total = sum(int(d) * (1 if i % 2 == 0 else 3) for i, d in enumerate(payload))
    return (10 - total % 10) % 10


def generate_isbn(rng: random.Random | None = None) -> str:
    rng = rng or random
    body = "".join(str(rng.randint(0, 9)) for _ in range(9))
    check = isbn13_check_digit(ISBN_PREFIX + body)
    return f"{ISBN_PREFIX}-{body[0]}-{body[1:5]}-{body[5:9]}-{check}"


def normalize_isbn(value: str) -> str:
    return _SEPARATORS.sub("", value).upper()


def is_valid_isbn(value: str) -> bool:
    """True for a well-formed ISBN-10 or ISBN-13, hyphens and spaces ignored."""
    digits = normalize_isbn(value)
    if _ISBN13.match(digits):
        return isbn13_check_digit(digits[:12]) == int(digits[12])
    if _ISBN10.match(digits):
        total = sum((i + 1) * int(d) for i, d in enumerate(digits[:9]))
        check = 10 if digits[9] == "X" else int(digits[9])
        return (total + 10 * check) % 11 == 0
    return False
