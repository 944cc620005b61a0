"""
Base64Codec main interface.
"""

from typing import List, Optional, Sequence
import torch

from Base64Codec.config import CodecConfig
from Base64Codec.encoding.codec import encode, decode, to_bytes, ByteLike, TextLike
from Base64Codec.encoding.batch import encode_batch, decode_batch, decode_to_tensor
from Base64Codec.encoding.errors import DecodeError
from Base64Codec.utils.device import resolve_device
from Base64Codec.utils.logging import get_logger


class Base64Codec:
    """
    High-level interface for Base64 encoding.

    Wraps the pure ``encode``/``decode`` functions with a configured
    logger and a target device for tensor output.

    Usage:
        codec = Base64Codec()

        text = codec.encode(b"foo")      # "Zm9v"
        data = codec.decode(text)        # b"foo"

        codec.is_valid("AB#D")           # False
        tensor = codec.decode_to_tensor(text)
    """

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        device: Optional[torch.device] = None,
    ):
        self.config = config or CodecConfig()
        self.logger = get_logger(self.config.logger_name, self.config.log_level)

        self.device = resolve_device(
            device if device is not None else self.config.device,
            force_cpu=self.config.force_cpu,
        )

    @classmethod
    def from_dict(
        cls,
        d: dict,
        device: Optional[torch.device] = None,
    ) -> "Base64Codec":
        """Creates a codec from a config dictionary."""
        return cls(config=CodecConfig.from_dict(d), device=device)

    def encode(self, data: ByteLike) -> str:
        data = to_bytes(data)
        text = encode(data)
        self.logger.debug(f"Encoded {len(data)} bytes into {len(text)} symbols")
        return text

    def decode(self, text: TextLike) -> bytes:
        """
        Decodes Base64 text, logging failures before re-raising them.

        Raises:
            DecodeError: If the text is not valid Base64
        """
        try:
            data = decode(text)
        except DecodeError as e:
            self.logger.codec_failure("decode", e)
            raise
        self.logger.debug(f"Decoded {len(text)} symbols into {len(data)} bytes")
        return data

    def is_valid(self, text: TextLike) -> bool:
        """Checks whether ``text`` decodes without error."""
        try:
            decode(text)
        except DecodeError:
            return False
        return True

    def encode_batch(self, items: Sequence[ByteLike]) -> List[str]:
        texts = encode_batch(items)
        self.logger.debug(f"Encoded batch of {len(texts)} items")
        return texts

    def decode_batch(self, texts: Sequence[TextLike]) -> List[bytes]:
        try:
            items = decode_batch(texts)
        except DecodeError as e:
            self.logger.codec_failure("decode_batch", e)
            raise
        self.logger.debug(f"Decoded batch of {len(items)} items")
        return items

    def decode_to_tensor(self, text: TextLike) -> torch.Tensor:
        try:
            return decode_to_tensor(text, device=self.device)
        except DecodeError as e:
            self.logger.codec_failure("decode_to_tensor", e)
            raise
