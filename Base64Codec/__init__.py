"""
Base64Codec - Base64 Transfer Encoding Library

Converts arbitrary byte sequences to the standard 64-symbol Base64
alphabet and back, with validating decode and numpy/torch helpers.
"""

from Base64Codec.version import __version__

from Base64Codec.encoding.codec import encode, decode
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
from Base64Codec.interface.codec import Base64Codec
from Base64Codec.config import CodecConfig

from Base64Codec import encoding
from Base64Codec import utils

__all__ = [
    "__version__",
    "encode",
    "decode",
    "encode_batch",
    "decode_batch",
    "decode_to_array",
    "decode_to_tensor",
    "DecodeError",
    "InvalidSymbolError",
    "InvalidPaddingError",
    "Base64Codec",
    "CodecConfig",
    "encoding",
    "utils",
]
