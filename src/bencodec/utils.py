# src/bencodec/utils.py
import logging
from typing import Any, Optional

from . import config
from .decoder import decode, Buffer
from .encoder import encode
from .value import Value


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Configure a logger for an application embedding the codec.

    Args:
        name (str): logger name, e.g. 'bencodec'
        level (str): level name, defaults to config.LOG_LEVEL

    Returns:
        logging.Logger: the configured logger
    """
    level_name = (level or config.LOG_LEVEL).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def serialize(obj: Any) -> bytes:
    """Encode native Python data (ints, bytes, str, lists, dicts) to bencode."""
    return encode(Value.from_python(obj))


def deserialize(data: Buffer, **options) -> Any:
    """Decode bencode data into native Python objects; strings stay as bytes."""
    return decode(data, **options).to_python()
