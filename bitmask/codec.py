import logging
import operator
from dataclasses import dataclass
from typing import Any, Iterable, List, Union

from .base import DEFAULT_WIDTH, BitWidth, InvalidIdentifier
from .utils import full_mask, iter_set_bits, to_unsigned


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BitmaskCodec:
    """
    Converts between a set of small integer identifiers and a fixed-width bitmask.

    Bit `i` of the mask (counted from the least significant bit) is set if and
    only if identifier `i` is in the set. Masks are returned as unsigned values
    in ``[0, 2**width - 1]``. Identifiers outside ``[0, width - 1]`` are rejected
    with `InvalidIdentifier` before any bit is touched.
    """
    width: Union[BitWidth, int] = DEFAULT_WIDTH

    def __post_init__(self):
        object.__setattr__(self, "width", BitWidth(self.width))

    @property
    def capacity(self) -> int:
        return self.width.value

    @property
    def max_mask(self) -> int:
        return full_mask(self.capacity)

    def encode(self, ids: Iterable[int]) -> int:
        """
        Build a mask with one bit set per identifier.

        Args:
            ids: Identifiers in ``[0, width - 1]``. Duplicates are allowed.

        Raises:
            InvalidIdentifier: if any identifier is out of range. Nothing is
                encoded in that case.
        """
        positions = [self._check(i) for i in ids]

        mask = 0
        for pos in positions:
            mask |= 1 << pos
        return mask

    def decode(self, mask: int) -> List[int]:
        """Return the set bit positions of `mask` in ascending order."""
        return list(iter_set_bits(to_unsigned(mask, self.capacity)))

    def has_bit(self, mask: int, id: int) -> bool:
        pos = self._check(id)
        return (to_unsigned(mask, self.capacity) & (1 << pos)) != 0

    def toggle_bit(self, mask: int, id: int) -> int:
        """Return a new mask with bit `id` flipped and every other bit kept."""
        pos = self._check(id)
        return to_unsigned(mask, self.capacity) ^ (1 << pos)

    def _check(self, identifier: Any) -> int:
        reason = None
        pos = None
        if isinstance(identifier, bool):
            reason = "not an integer"
        else:
            try:
                pos = operator.index(identifier)
            except TypeError:
                reason = "not an integer"

        if reason is None:
            if pos < 0:
                reason = "must not be negative"
            elif pos >= self.capacity:
                reason = f"must be below {self.capacity}"

        if reason is not None:
            logger.debug(f"Rejected identifier {identifier!r}: {reason}")
            raise InvalidIdentifier(identifier, self.capacity, reason)
        return pos
