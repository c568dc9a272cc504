import random
import re

import pytest

from libris.isbn import generate_isbn, is_valid_isbn, isbn13_check_digit, normalize_isbn

FORMAT = re.compile(r"^978-\d-\d{4}-\d{4}-\d$")


def _weighted_check(payload: str) -> int:
    weights = [1, 3] * 6
    return (10 - sum(int(d) * w for d, w in zip(payload, weights)) % 10) % 10


def test_generated_isbn_format():
    for _ in range(200):
        isbn = generate_isbn()
        assert FORMAT.match(isbn), isbn


def test_generated_isbn_checksum():
    for _ in range(200):
        digits = normalize_isbn(generate_isbn())
        assert len(digits) == 13
        payload = digits[:12]
        assert payload.startswith("978")
        assert int(digits[12]) == _weighted_check(payload)


def test_generated_isbn_passes_validation():
    for _ in range(50):
        assert is_valid_isbn(generate_isbn())


def test_generate_with_seeded_rng_is_deterministic():
    assert generate_isbn(random.Random(42)) == generate_isbn(random.Random(42))


def test_check_digit_known_values():
    # 978-0-306-40615-7
    assert isbn13_check_digit("978030640615") == 7
    # 978-3-16-148410-0: weighted sum is 100
    assert isbn13_check_digit("978316148410") == 0


@pytest.mark.parametrize("payload", ["", "97803064061", "9780306406155", "97803064061X"])
def test_check_digit_rejects_bad_payload(payload):
    with pytest.raises(ValueError):
        isbn13_check_digit(payload)


@pytest.mark.parametrize("value", [
    "978-3-16-148410-0",
    "9780306406157",
    "978 0 306 40615 7",
    "0-306-40615-2",
    "0441172717",
    "080442957X",
])
def test_valid_isbns(value):
    assert is_valid_isbn(value)


@pytest.mark.parametrize("value", [
    "978-3-16-148410-1",
    "9780306406158",
    "0-306-40615-3",
    "12345",
    "abcdefghijk",
    "",
])
def test_invalid_isbns(value):
    assert not is_valid_isbn(value)
