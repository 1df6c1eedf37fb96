#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
uricomponent common constants (lib.py)

Purpose:
• Single place for the unreserved (safe) byte set
• Pre-built lookup tables shared by the encoder
• Constants used by the CLI and logger

Everything here is built once at import time and never mutated.
"""

from __future__ import annotations

import string
from typing import FrozenSet, Tuple

# ─── Unreserved characters ──────────────────────────────────────────────────────────

# A-Z a-z 0-9 - _ . ! ~ * ' ( )
UNRESERVED_MARKS = "-_.!~*'()"
UNRESERVED_CHARS = string.ascii_uppercase + string.ascii_lowercase + string.digits + UNRESERVED_MARKS

SAFE_BYTES: FrozenSet[int] = frozenset(UNRESERVED_CHARS.encode("ascii"))

BYTE_MASK = 0xFF
ESCAPE_PREFIX = b"%"
HEX_DIGITS = b"0123456789ABCDEF"

# ─── Lookup tables (indexed by byte value) ──────────────────────────────────────────


def _build_escape_table() -> Tuple[bytes, ...]:
    table = []
    for value in range(BYTE_MASK + 1):
        if value in SAFE_BYTES:
            table.append(bytes((value,)))
        else:
            table.append(
                ESCAPE_PREFIX + bytes((HEX_DIGITS[value >> 4], HEX_DIGITS[value & 0x0F]))
            )
    return tuple(table)


ESCAPE_TABLE: Tuple[bytes, ...] = _build_escape_table()
SAFE_TABLE: Tuple[bool, ...] = tuple(value in SAFE_BYTES for value in range(BYTE_MASK + 1))

# ─── Misc ───────────────────────────────────────────────────────────────────────────

DEFAULT_TEXT_ERRORS = "surrogatepass"
MAX_VERBOSITY = 5
