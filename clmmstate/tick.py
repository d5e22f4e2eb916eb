"""Ticks and fixed-size tick arrays of a concentrated-liquidity pool."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from clmmstate.errors import DexError, ErrorCode
from clmmstate.pool import NUM_REWARDS

# Max & min tick index based on sqrt(1.0001) & max/min price of 2^64
MAX_TICK_INDEX = 443636
MIN_TICK_INDEX = -443636

TICK_ARRAY_SIZE = 88

_ZERO_KEY = bytes(32)


def _trunc_rem(a: int, b: int) -> int:
    """Remainder of division truncated toward zero (sign follows the dividend)."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def _zero_growths() -> list[int]:
    return [0] * NUM_REWARDS


@dataclass
class Tick:
    """Liquidity and growth accumulators stored at one tick index."""

    initialized: bool = False
    liquidity_net: int = 0
    liquidity_gross: int = 0
    fee_growth_outside_a: int = 0
    fee_growth_outside_b: int = 0
    reward_growths_outside: list[int] = field(default_factory=_zero_growths)

    LEN: ClassVar[int] = 113

    def update(self, update: TickUpdate) -> None:
        """Copy every value of ``update`` into this tick."""
        self.initialized = update.initialized
        self.liquidity_net = update.liquidity_net
        self.liquidity_gross = update.liquidity_gross
        self.fee_growth_outside_a = update.fee_growth_outside_a
        self.fee_growth_outside_b = update.fee_growth_outside_b
        self.reward_growths_outside = list(update.reward_growths_outside)

    @staticmethod
    def check_is_out_of_bounds(tick_index: int) -> bool:
        """True when the tick index lies outside the supported range."""
        return tick_index > MAX_TICK_INDEX or tick_index < MIN_TICK_INDEX

    @staticmethod
    def check_is_valid_start_tick(tick_index: int, tick_spacing: int) -> bool:
        """True when ``tick_index`` may start a tick array for this tick spacing."""
        ticks_in_array = TICK_ARRAY_SIZE * tick_spacing
        if Tick.check_is_out_of_bounds(tick_index):
            # The left-edge array may start below the minimum tick index.
            if tick_index > MIN_TICK_INDEX:
                return False
            min_array_start_index = MIN_TICK_INDEX - (
                _trunc_rem(MIN_TICK_INDEX, ticks_in_array) + ticks_in_array
            )
            return tick_index == min_array_start_index
        return tick_index % ticks_in_array == 0

    @staticmethod
    def check_is_usable_tick(tick_index: int, tick_spacing: int) -> bool:
        """True when the tick index is in bounds and a multiple of the spacing."""
        if Tick.check_is_out_of_bounds(tick_index):
            return False
        return tick_index % tick_spacing == 0

    @staticmethod
    def bound_tick_index(tick_index: int) -> int:
        """Clamp a tick index to the supported range."""
        return min(max(tick_index, MIN_TICK_INDEX), MAX_TICK_INDEX)


@dataclass
class TickUpdate:
    """New values to apply to a tick."""

    initialized: bool = False
    liquidity_net: int = 0
    liquidity_gross: int = 0
    fee_growth_outside_a: int = 0
    fee_growth_outside_b: int = 0
    reward_growths_outside: list[int] = field(default_factory=_zero_growths)

    @classmethod
    def from_tick(cls, tick: Tick) -> TickUpdate:
        """An update that would reproduce ``tick`` exactly."""
        return cls(
            initialized=tick.initialized,
            liquidity_net=tick.liquidity_net,
            liquidity_gross=tick.liquidity_gross,
            fee_growth_outside_a=tick.fee_growth_outside_a,
            fee_growth_outside_b=tick.fee_growth_outside_b,
            reward_growths_outside=list(tick.reward_growths_outside),
        )


def get_offset(tick_index: int, start_tick_index: int, tick_spacing: int) -> int:
    """Offset of ``tick_index`` from the array start, rounded toward minus infinity."""
    return (tick_index - start_tick_index) // tick_spacing


@dataclass
class TickArray:
    """A run of ``TICK_ARRAY_SIZE`` consecutive usable ticks of one pool."""

    start_tick_index: int = 0
    ticks: list[Tick] = field(default_factory=lambda: [Tick() for _ in range(TICK_ARRAY_SIZE)])
    pool: bytes = _ZERO_KEY

    LEN: ClassVar[int] = 8 + 36 + Tick.LEN * TICK_ARRAY_SIZE

    def get_next_init_tick_index(
        self, tick_index: int, tick_spacing: int, a_to_b: bool
    ) -> int | None:
        """Find the next initialized tick in this array, or None.

        a_to_b searches move left and include the starting tick; b_to_a searches
        move right and exclude it.
        """
        if not self.in_search_range(tick_index, tick_spacing, not a_to_b):
            raise DexError(ErrorCode.InvalidTickArraySequence)

        offset = self.tick_offset(tick_index, tick_spacing)
        if a_to_b:
            offsets = range(offset, -1, -1)
        else:
            offsets = range(offset + 1, TICK_ARRAY_SIZE)

        for curr in offsets:
            if 0 <= curr < TICK_ARRAY_SIZE and self.ticks[curr].initialized:
                return curr * tick_spacing + self.start_tick_index
        return None

    def initialize(self, pool_key: bytes, tick_spacing: int, start_tick_index: int) -> None:
        """Bind the array to a pool at a valid start tick index."""
        if not Tick.check_is_valid_start_tick(start_tick_index, tick_spacing):
            raise DexError(ErrorCode.InvalidStartTick)
        self.pool = pool_key
        self.start_tick_index = start_tick_index

    def _offset_of_usable_tick(self, tick_index: int, tick_spacing: int) -> int:
        if not self.check_in_array_bounds(tick_index, tick_spacing) or not Tick.check_is_usable_tick(
            tick_index, tick_spacing
        ):
            raise DexError(ErrorCode.TickNotFound)
        offset = self.tick_offset(tick_index, tick_spacing)
        if offset < 0:
            raise DexError(ErrorCode.TickNotFound)
        return offset

    def get_tick(self, tick_index: int, tick_spacing: int) -> Tick:
        """The tick stored for ``tick_index``."""
        return self.ticks[self._offset_of_usable_tick(tick_index, tick_spacing)]

    def update_tick(self, tick_index: int, tick_spacing: int, update: TickUpdate) -> None:
        """Apply ``update`` to the tick stored for ``tick_index``."""
        self.ticks[self._offset_of_usable_tick(tick_index, tick_spacing)].update(update)

    def in_search_range(self, tick_index: int, tick_spacing: int, shifted: bool) -> bool:
        """Whether ``tick_index`` lies in this array's (optionally shifted) search range."""
        lower = self.start_tick_index
        upper = self.start_tick_index + TICK_ARRAY_SIZE * tick_spacing
        if shifted:
            lower -= tick_spacing
            upper -= tick_spacing
        return lower <= tick_index < upper

    def check_in_array_bounds(self, tick_index: int, tick_spacing: int) -> bool:
        return self.in_search_range(tick_index, tick_spacing, False)

    def is_min_tick_array(self) -> bool:
        return self.start_tick_index <= MIN_TICK_INDEX

    def is_max_tick_array(self, tick_spacing: int) -> bool:
        return self.start_tick_index + TICK_ARRAY_SIZE * tick_spacing > MAX_TICK_INDEX

    def tick_offset(self, tick_index: int, tick_spacing: int) -> int:
        """Offset into ``ticks`` for ``tick_index``; may fall outside the array."""
        if tick_spacing == 0:
            raise DexError(ErrorCode.InvalidTickSpacing)
        return get_offset(tick_index, self.start_tick_index, tick_spacing)