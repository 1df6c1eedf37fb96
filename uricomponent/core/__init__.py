from .encoder import encode, encode_into, encode_uri_component, is_safe_byte, iter_encode

__all__ = [
    "encode",
    "encode_into",
    "encode_uri_component",
    "is_safe_byte",
    "iter_encode",
]
