from Base64Codec.interface.codec import Base64Codec

__all__ = [
    "Base64Codec",
]
