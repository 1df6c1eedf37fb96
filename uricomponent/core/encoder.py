#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Percent-encoder for URI components (encoder.py)

Every byte outside the unreserved set  A-Z a-z 0-9 - _ . ! ~ * ' ( )
is written as %XX (two uppercase hex digits); unreserved bytes pass through.
Works purely on bytes: UTF-8 is assumed by callers but never validated,
so a code point of N bytes becomes N escapes.

The encoding is deliberately not idempotent: '%' is not unreserved, so
encoding an already-encoded value escapes it again as %25.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Union

from uricomponent.common.lib import ESCAPE_TABLE
from uricomponent.common.utils import BytesLike, is_safe_byte, to_bytes

__all__ = [
    "encode",
    "encode_into",
    "encode_uri_component",
    "iter_encode",
    "is_safe_byte",
]


def _require_bytes(data) -> BytesLike:
    if isinstance(data, str):
        raise TypeError("encode() takes a bytes-like object; use encode_uri_component() for str")
    return to_bytes(data)


def encode(data: BytesLike) -> bytes:
    """Percent-encode a byte sequence, returning a new bytes value"""
    data = _require_bytes(data)
    return b"".join([ESCAPE_TABLE[b] for b in data])


def encode_into(data: BytesLike, sink) -> int:
    """
    Append the encoded form of data to sink.

    sink is a bytearray (extended in place) or any binary writer exposing
    write(). Returns the number of bytes appended.
    """
    if isinstance(sink, bytearray):
        write = sink.extend
    else:
        write = getattr(sink, "write", None)
        if write is None:
            raise TypeError(
                f"sink must be a bytearray or have a write() method, got {type(sink).__name__}"
            )
    # data may be the sink itself; encode fully before appending
    encoded = encode(data)
    write(encoded)
    return len(encoded)


def encode_uri_component(value: Union[str, BytesLike]) -> str:
    """
    encodeURIComponent for Python values.

    str is converted to UTF-8 first (lone surrogates are passed through
    rather than rejected); bytes-like values are encoded as-is.
    The result is always plain ASCII text.
    """
    return encode(to_bytes(value)).decode("ascii")


def iter_encode(chunks: Iterable[BytesLike]) -> Iterator[bytes]:
    """Encode a stream of byte chunks, yielding one encoded chunk per input chunk"""
    for chunk in chunks:
        yield encode(chunk)
