from Base64Codec.utils.device import get_device, resolve_device
from Base64Codec.utils.logging import get_logger, Base64CodecLogger

__all__ = [
    "get_device",
    "resolve_device",
    "get_logger",
    "Base64CodecLogger",
]
