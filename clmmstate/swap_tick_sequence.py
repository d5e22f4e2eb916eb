"""An ordered run of up to three tick arrays traversed during a swap."""

from __future__ import annotations

from clmmstate.errors import DexError, ErrorCode
from clmmstate.tick import Tick, TickArray, TickUpdate


class SwapTickSequence:
    """The tick arrays a swap walks through, in traversal order.

    The arrays are held by reference, so updates made through the sequence
    are visible on the arrays that were passed in.
    """

    def __init__(
        self,
        ta0: TickArray,
        ta1: TickArray | None = None,
        ta2: TickArray | None = None,
    ) -> None:
        self.arrays: list[TickArray] = [ta for ta in (ta0, ta1, ta2) if ta is not None]

    def __len__(self) -> int:
        return len(self.arrays)

    def _array(self, array_index: int) -> TickArray:
        if not 0 <= array_index < len(self.arrays):
            raise DexError(ErrorCode.TickArrayIndexOutofBounds)
        return self.arrays[array_index]

    def get_tick(self, array_index: int, tick_index: int, tick_spacing: int) -> Tick:
        """The tick stored for ``tick_index`` in the array at ``array_index``."""
        return self._array(array_index).get_tick(tick_index, tick_spacing)

    def update_tick(
        self, array_index: int, tick_index: int, tick_spacing: int, update: TickUpdate
    ) -> None:
        """Apply ``update`` to the tick for ``tick_index`` in the array at ``array_index``."""
        self._array(array_index).update_tick(tick_index, tick_spacing, update)

    def get_tick_offset(self, array_index: int, tick_index: int, tick_spacing: int) -> int:
        """Offset of ``tick_index`` within the array at ``array_index``."""
        return self._array(array_index).tick_offset(tick_index, tick_spacing)