# tests/test_count_hex_bytes.py
import pytest

@pytest.mark.parametrize(
    "text,expected",
    [
        # Nothing to count
        ("", 0),
        ("   ", 0),
        (",,,\n\n", 0),
        ("{}[];", 0),
        # Continuous runs: two digits per byte
        ("AAFF23", 3),
        ("aaff23", 3),
        ("AABB", 2),
        # Odd-length runs are tokenized instead; more than two digits never match
        ("A", 1),
        ("ABC", 0),
        ("ABCDE", 0),
        # Separators keep tokens apart
        ("AA,BB", 2),
        ("AA\nBB", 2),
        ("AA    BB", 2),
        ("AA, BB,\r\nCC", 3),
        # Prefix forms
        ("0xAA 0xBB", 2),
        ("\\xFF \\x0A", 2),
        ("0x1 0xA \\x1 \\xA 1 A", 6),
        ("0xAAA", 0),
        # Comments
        ("AA // 0xBB comment", 1),
        ("AA /* 0xBB */ CC", 2),
        ("A/**/B", 2),
        ("AA /* BB CC", 1),
        # Byte-order mark and Unicode line separators
        ("\ufeffDEADBEEF", 4),
        ("\ufeff0xAA, 0xBB", 2),
        ("// c\u2028AA", 1),
        ("// c\u2029AA BB", 2),
    ],
)
def test_count_hex_bytes(logic, text, expected):
    assert logic.count_hex_bytes(text) == expected

@pytest.mark.parametrize(
    "text,expected",
    [
        ("unsigned char buf[] = { 0x90, 0x90, // nop\n  0xCC /* int3 */ };", 3),
        ('const sc = "\\x90\\x90\\x48"; // payload', 3),
        ('"0xAA" + real_code_BB', 1),
        ('"// AA" BB', 2),
        ('"\\" // AA" BB', 2),
        ('AA "BB // CC', 3),
    ],
)
def test_count_source_fixtures(logic, text, expected):
    assert logic.count_hex_bytes(text) == expected

def test_prose_contributes_nothing(logic):
    assert logic.count_hex_bytes("set reg to 0xFF now") == 1
    assert logic.count_hex_bytes("add 0xFF") == 1

def test_short_hex_looking_words_are_counted(logic):
    # accepted false positives
    assert logic.count_hex_bytes("a b c") == 3

@pytest.mark.parametrize(
    "text",
    ["\\", '"', "'''", "/*", "//", "*/", "0x", "\\x", "\x00\xff�", "`/* '\n", "\\\\\\"],
)
def test_malformed_input_never_raises(logic, text):
    assert logic.count_hex_bytes(text) >= 0

def test_deterministic(logic):
    text = "0xDE, 0xAD, /* skip 0x00 */ 0xBE, 0xEF // tail"
    first = logic.count_hex_bytes(text)
    assert first == 4
    assert all(logic.count_hex_bytes(text) == first for _ in range(5))
