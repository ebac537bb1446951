# hex_byte_counter/logic.py

from __future__ import annotations

import re

STATUS_PREFIX = "Bytes"
HEX_MIN_DIGITS = 2

# Quoted region | block comment | line comment. The first alternative that
# matches at a position wins. Unterminated quotes and block comments run to
# the end of the input.
_NOISE_RE = re.compile(
    r"""(["'`])(?:\\[\s\S]|(?!\1)[^\\])*(?:\1|\\?\Z)"""
    r"|/\*[\s\S]*?(?:\*/|\Z)"
    r"|//[^\r\n\u2028\u2029]*"
)
_SEPARATORS_RE = re.compile(r"[,\r\n]+")
# U+FEFF (BOM) counts as whitespace
_WHITESPACE_RE = re.compile(r"[\s\ufeff]+")
_HEX_RUN_RE = re.compile(r"[0-9a-fA-F]+")

# 0x1, 0xA, 0xAA, \x1, \xA, \xAA or a standalone 1, A, AA.
_BYTE_TOKEN_RE = re.compile(r"(?:\\x|\b(?:0x)?)[0-9a-fA-F]{1,2}\b", re.ASCII)


# ---------------- Pipeline stages ----------------
def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments with a single space.

    String and character literals (``"..."``, ``'...'``, ```...```) are
    kept as they are, so comment markers inside them are not touched and
    hex tokens inside them stay visible.
    """
    return _NOISE_RE.sub(lambda m: m.group(0) if m.group(1) else " ", text)

def normalize_separators(text: str) -> str:
    """Turn commas/line breaks into spaces and collapse whitespace runs.

    "AA,\\nBB   CC" → "AA BB CC"
    """
    s = _SEPARATORS_RE.sub(" ", text)
    return _WHITESPACE_RE.sub(" ", s).strip(" ")

def is_contiguous_hex(text: str) -> bool:
    """True for a non-empty, separator-free run of hex digits of even length."""
    return bool(_HEX_RUN_RE.fullmatch(text)) and len(text) % 2 == 0


# ---------------- Counting ----------------
def count_hex_bytes(text: str) -> int:
    """Estimate how many hex bytes a span of source-like text encodes.

    Accepts:
      - "0xAA, 0xBB" / "\\xAA\\xBB" (prefixed tokens)
      - "AA BB" (bare one or two digit tokens)
      - "AAFF23" (one continuous run, two digits per byte)
      - any of the above mixed with C-style comments and string literals

    Never raises; malformed input degrades to a best-effort count.
    """
    normalized = normalize_separators(strip_comments(text or ""))
    if not normalized:
        return 0

    if is_contiguous_hex(normalized):
        return len(normalized) // 2

    return sum(1 for _ in _BYTE_TOKEN_RE.finditer(normalized))


# ---------------- Display ----------------
def format_byte_count(count: int) -> str:
    """Render a count as ``Bytes: N (0xHH)``, hex padded to two digits."""
    return f"{STATUS_PREFIX}: {count} (0x{count:0{HEX_MIN_DIGITS}x})"

def selection_status(selection: str) -> str | None:
    """Status text for a selection, or None when nothing is selected."""
    if not selection:
        return None
    return format_byte_count(count_hex_bytes(selection))
