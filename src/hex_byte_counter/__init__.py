# hex_byte_counter/__init__.py

"""Hex Byte Counter package.

Re-exports the counting logic for convenient imports in tests or other code.
"""
from .__about__ import (
    __version__,
    APP_NAME,
    APP_TITLE,
    BUNDLE_ID,
    AUTHOR,
    COPYRIGHT,
    COPYRIGHT_YEAR,
    HOMEPAGE,
    about_text,
)

from .logic import (
    HEX_MIN_DIGITS,
    STATUS_PREFIX,
    count_hex_bytes,
    format_byte_count,
    is_contiguous_hex,
    normalize_separators,
    selection_status,
    strip_comments,
)

__all__ = [
    # Metadata
    "__version__", "APP_NAME", "APP_TITLE", "BUNDLE_ID",
    "AUTHOR", "COPYRIGHT", "COPYRIGHT_YEAR", "HOMEPAGE", "about_text",
    # Logic
    "HEX_MIN_DIGITS", "STATUS_PREFIX",
    "count_hex_bytes", "format_byte_count", "is_contiguous_hex",
    "normalize_separators", "selection_status", "strip_comments",
]
