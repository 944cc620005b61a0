import logging
import sys
from typing import Dict, Optional

DEFAULT_LOGGER_NAME = "Base64Codec"


class Base64CodecLogger:
    def __init__(self, name: str = DEFAULT_LOGGER_NAME, level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S"
        )
        handler.setFormatter(formatter)

        if not self.logger.hasHandlers():
            self.logger.addHandler(handler)

    @property
    def name(self) -> str:
        return self.logger.name

    def set_level(self, level: int) -> None:
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def codec_failure(self, operation: str, error: Exception) -> None:
        msg = f"{operation} failed | {type(error).__name__}: {error}"
        self.warning(msg)


_loggers: Dict[str, Base64CodecLogger] = {}

def get_logger(name: Optional[str] = None, level: Optional[int] = None) -> Base64CodecLogger:
    name = name or DEFAULT_LOGGER_NAME
    logger = _loggers.get(name)
    if logger is None:
        logger = Base64CodecLogger(name, level if level is not None else logging.INFO)
        _loggers[name] = logger
    elif level is not None:
        logger.set_level(level)
    return logger
