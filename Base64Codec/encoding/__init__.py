"""
Base64 encoding and decoding for Base64Codec.

Handles conversion between byte sequences and Base64 text.
"""

from Base64Codec.encoding.codec import encode, decode, to_bytes
from Base64Codec.encoding.batch import (
    encode_batch,
    decode_batch,
    decode_to_array,
    decode_to_tensor,
)
from Base64Codec.encoding.errors import (
    DecodeError,
    InvalidSymbolError,
    InvalidPaddingError,
)
from Base64Codec.encoding.constants import (
    ALPHABET,
    PADDING,
    BITS_PER_SYMBOL,
    BITS_PER_BYTE,
)

__all__ = [
    "encode",
    "decode",
    "to_bytes",
    "encode_batch",
    "decode_batch",
    "decode_to_array",
    "decode_to_tensor",
    "DecodeError",
    "InvalidSymbolError",
    "InvalidPaddingError",
    "ALPHABET",
    "PADDING",
    "BITS_PER_SYMBOL",
    "BITS_PER_BYTE",
]
