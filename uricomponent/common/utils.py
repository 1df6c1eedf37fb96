#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
uricomponent helpers (utils.py)

Byte-view conversion and single-byte escaping shared by the encoder and CLI.
"""

from __future__ import annotations

from typing import Optional, Union

from uricomponent.common.config import conf
from uricomponent.common.lib import BYTE_MASK, SAFE_TABLE

BytesLike = Union[bytes, bytearray, memoryview]


def to_bytes(value: Union[str, BytesLike], errors: Optional[str] = None) -> BytesLike:
    """Return a byte view of value; str is encoded as UTF-8"""
    if isinstance(value, str):
        return value.encode("utf-8", errors or conf.text_errors)
    if isinstance(value, (bytes, bytearray)):
        return value
    if isinstance(value, memoryview):
        # wide formats and several dimensions would not iterate byte by byte
        if value.ndim != 1 or value.format != "B":
            return value.tobytes()
        return value
    raise TypeError(
        f"expected str or a bytes-like object, got {type(value).__name__}"
    )


def hex_escape(value: int) -> bytes:
    """%XX form of one byte value (masked to 8 bits)"""
    return b"%%%02X" % (value & BYTE_MASK)


def is_safe_byte(value: int) -> bool:
    """True if value (masked to 8 bits) passes through unescaped"""
    return SAFE_TABLE[value & BYTE_MASK]
