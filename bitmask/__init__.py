import logging
import os
from typing import Iterable, List, Optional, Union

from .base import DEFAULT_WIDTH, BitWidth, InvalidIdentifier
from .codec import BitmaskCodec


__all__ = [
    "BitmaskCodec",
    "BitWidth",
    "DEFAULT_WIDTH",
    "InvalidIdentifier",
    "load_codec",
    "encode",
    "decode",
    "has_bit",
    "toggle_bit",
]

__version__ = "1.0.0"

WIDTH_ENV_VAR = "BITMASK_WIDTH"

logger = logging.getLogger(__name__)


def load_codec(width: Optional[Union[BitWidth, int]] = None) -> BitmaskCodec:
    """
    Factory function to build a codec for a given mask width.

    Args:
        width: 32 or 64. If not provided, the BITMASK_WIDTH environment
               variable is used, then DEFAULT_WIDTH.
    """
    if width is not None:
        return BitmaskCodec(width)

    env_width = os.getenv(WIDTH_ENV_VAR, "").strip()
    if env_width:
        try:
            codec = BitmaskCodec(int(env_width))
            logger.debug(f"Using {codec.capacity}-bit masks from {WIDTH_ENV_VAR}")
            return codec
        except ValueError:
            logger.warning(f"Ignoring invalid {WIDTH_ENV_VAR}={env_width!r}, expected 32 or 64")

    return BitmaskCodec(DEFAULT_WIDTH)


_default_codec = BitmaskCodec(DEFAULT_WIDTH)


def encode(ids: Iterable[int]) -> int:
    return _default_codec.encode(ids)


def decode(mask: int) -> List[int]:
    return _default_codec.decode(mask)


def has_bit(mask: int, id: int) -> bool:
    return _default_codec.has_bit(mask, id)


def toggle_bit(mask: int, id: int) -> int:
    return _default_codec.toggle_bit(mask, id)
