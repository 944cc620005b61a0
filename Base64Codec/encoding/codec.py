"""
Single-item encoding and decoding between byte sequences and Base64 text.
"""

import torch
import numpy as np
from typing import Union, List

from Base64Codec.encoding.constants import (
    ALPHABET,
    PADDING,
    PADDING_BYTE,
    REVERSE_ALPHABET,
    BITS_PER_BYTE,
    BITS_PER_SYMBOL,
    BYTES_PER_BLOCK,
    WINDOW_MASK,
)
from Base64Codec.encoding.errors import InvalidSymbolError, InvalidPaddingError


ByteLike = Union[bytes, bytearray, memoryview, List[int], np.ndarray, torch.Tensor]
TextLike = Union[str, bytes, bytearray]


def to_bytes(data: ByteLike) -> bytes:
    """
    Normalizes any supported byte container to ``bytes``.

    Args:
        data: bytes-like object, list of ints, integer ndarray or tensor

    Returns:
        The same byte values as an immutable ``bytes`` object

    Raises:
        TypeError: If ``data`` is a ``str`` or a scalar
        ValueError: If the values are not integers in range 0..255
    """
    if isinstance(data, str):
        raise TypeError("Expected bytes-like data, got str. Encode the text first.")

    if isinstance(data, (int, np.integer)):
        raise TypeError(f"Expected a byte container, got scalar {type(data).__name__}.")

    if isinstance(data, torch.Tensor):
        data = data.detach().cpu().numpy()

    if isinstance(data, np.ndarray):
        if data.ndim == 0:
            raise TypeError("Expected a byte container, got a 0-d array.")
        if data.dtype.kind not in "ui":
            raise ValueError(f"Expected an integer array, got dtype {data.dtype}.")
        if data.size and (data.min() < 0 or data.max() > 255):
            raise ValueError("Array values must be in range 0..255.")
        return data.astype(np.uint8).ravel().tobytes()

    return bytes(data)


def _collect_six_bits(lower: int, upper: int, offset: int) -> int:
    """
    Extracts 6 bits from the 16-bit window formed by two bytes.

    ``offset`` counts bits from the most significant end of ``lower``,
    so offset 4 picks the last 4 bits of ``lower`` and the first 2 of
    ``upper``.
    """
    combined = (lower << 8) | upper
    return (combined & (WINDOW_MASK >> offset)) >> (16 - BITS_PER_SYMBOL - offset)


def encode(data: ByteLike) -> str:
    """
    Encodes a byte sequence as Base64 text.

    Each output symbol carries 6 bits of the input, read most significant
    bit first. Bits past the end of the input are zero, and the output is
    padded with ``=`` up to a multiple of 4 symbols.

    Args:
        data: Bytes to encode (see ``to_bytes`` for accepted containers)

    Returns:
        Base64 text of length ``ceil(len(data) / 3) * 4``
    """
    data = to_bytes(data)
    length = len(data)

    symbols = []
    bits_encoded = 0

    while bits_encoded // BITS_PER_BYTE < length:
        index = bits_encoded // BITS_PER_BYTE
        lower = data[index]
        upper = data[index + 1] if index + 1 < length else 0

        value = _collect_six_bits(lower, upper, bits_encoded % BITS_PER_BYTE)
        symbols.append(ALPHABET[value])
        bits_encoded += BITS_PER_SYMBOL

    symbols.append(PADDING * (-length % BYTES_PER_BLOCK))
    return "".join(symbols)


def decode(text: TextLike) -> bytes:
    """
    Decodes Base64 text back to bytes.

    Symbols are shifted into a bit buffer 6 bits at a time and a byte is
    emitted whenever 8 bits are pending. Each padding symbol discards the
    2 zero bits the encoder appended to the final group, so a well-formed
    input always ends with no pending bits.

    Args:
        text: Base64 text; a ``str`` is scanned as its UTF-8 bytes
            (lone surrogates included)

    Returns:
        Decoded bytes

    Raises:
        InvalidSymbolError: On a byte outside the alphabet that is not padding
        InvalidPaddingError: If the pending bit count ends non-zero or
            padding arrives with no bits left to discard
    """
    if isinstance(text, str):
        text = text.encode("utf-8", "surrogatepass")

    output = bytearray()
    buffer = 0
    collected_bits = 0

    for byte in text:
        value = REVERSE_ALPHABET.get(byte)
        if value is not None:
            buffer = (buffer << BITS_PER_SYMBOL) | value
            collected_bits += BITS_PER_SYMBOL
        elif byte == PADDING_BYTE:
            if collected_bits < 2:
                raise InvalidPaddingError(collected_bits - 2)
            buffer >>= 2
            collected_bits -= 2
        else:
            raise InvalidSymbolError(byte)

        while collected_bits >= BITS_PER_BYTE:
            collected_bits -= BITS_PER_BYTE
            output.append((buffer >> collected_bits) & 0xFF)
            buffer &= (1 << collected_bits) - 1

    if collected_bits != 0:
        raise InvalidPaddingError(collected_bits)

    return bytes(output)
