"""
Batch and array helpers built on the single-item codec.
"""

import torch
import numpy as np
from typing import List, Optional, Sequence

from Base64Codec.encoding.codec import encode, decode, ByteLike, TextLike
from Base64Codec.utils.device import get_device


def encode_batch(items: Sequence[ByteLike]) -> List[str]:
    """
    Encodes every item of a batch.

    A 2-D ndarray or tensor is treated as a batch of equal-length rows.

    Args:
        items: Sequence of byte containers, or a 2-D array / tensor

    Returns:
        List of Base64 strings, one per item

    Raises:
        TypeError: If ``items`` is a single byte string rather than a batch
        ValueError: If an array or tensor batch is not 2-D
    """
    if isinstance(items, (str, bytes, bytearray, memoryview)):
        raise TypeError(f"Expected a batch of items, got {type(items).__name__}.")

    if isinstance(items, torch.Tensor):
        items = items.detach().cpu().numpy()

    if isinstance(items, np.ndarray) and items.ndim != 2:
        raise ValueError(f"Expected a 2-D array of rows, got {items.ndim}-D.")

    return [encode(item) for item in items]

def decode_batch(texts: Sequence[TextLike]) -> List[bytes]:
    """
    Decodes every string of a batch.

    Fails on the first invalid item with the same errors as ``decode``.
    """
    return [decode(text) for text in texts]

def decode_to_array(text: TextLike) -> np.ndarray:
    """Decodes Base64 text into a 1-D ``uint8`` array."""
    return np.frombuffer(decode(text), dtype=np.uint8).copy()

def decode_to_tensor(
    text: TextLike,
    device: Optional[torch.device] = None
) -> torch.Tensor:
    """
    Decodes Base64 text into a 1-D ``uint8`` tensor.

    Args:
        text: Base64 text
        device: Target device for tensor (default: auto-detect)

    Returns:
        Tensor of shape (decoded_length,)
    """
    if device is None:
        device = get_device()

    return torch.from_numpy(decode_to_array(text)).to(device)
