"""
Codec configuration for Base64Codec.
"""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass
class CodecConfig:
    """
    Configuration parameters for the Base64Codec facade.

    The alphabet is fixed; only logging and tensor placement
    are configurable.
    """

    logger_name: str = "Base64Codec"
    log_level: int = logging.INFO

    device: Optional[str] = None
    force_cpu: bool = False

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "CodecConfig":
        """Creates a CodecConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
