#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""uricomponent – encodeURIComponent-style percent-encoding for byte strings"""

from uricomponent.common.lib import SAFE_BYTES
from uricomponent.core.encoder import (
    encode,
    encode_into,
    encode_uri_component,
    is_safe_byte,
    iter_encode,
)

__version__ = "1.0.0"

__all__ = [
    "SAFE_BYTES",
    "encode",
    "encode_into",
    "encode_uri_component",
    "is_safe_byte",
    "iter_encode",
    "__version__",
]
