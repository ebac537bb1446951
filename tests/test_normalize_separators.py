# tests/test_normalize_separators.py
import pytest

@pytest.mark.parametrize(
    "text,expected",
    [
        ("", ""),
        ("   ", ""),
        (",,,\n\n", ""),
        ("AA,BB", "AA BB"),
        ("AA\nBB", "AA BB"),
        ("AA\r\nBB", "AA BB"),
        ("AA, ,BB", "AA BB"),
        ("  AA \t\t BB  ", "AA BB"),
        ("0xAA,\n  0xBB,\n  0xCC", "0xAA 0xBB 0xCC"),
        ("\ufeffAA\ufeff BB \ufeff", "AA BB"),
        ("\ufeff", ""),
    ],
)
def test_normalize_separators(logic, text, expected):
    assert logic.normalize_separators(text) == expected

@pytest.mark.parametrize(
    "text,expected",
    [
        ("AAFF23", True),
        ("aaff23", True),
        ("AABB", True),
        ("ABC", False),
        ("", False),
        ("AA BB", False),
        ("0xAA", False),
        ("GG", False),
    ],
)
def test_is_contiguous_hex(logic, text, expected):
    assert logic.is_contiguous_hex(text) is expected
