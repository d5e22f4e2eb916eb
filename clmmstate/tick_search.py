"""Search for the next initialized tick across a swap's tick-array sequence."""

from __future__ import annotations

from clmmstate.errors import DexError, ErrorCode
from clmmstate.swap_tick_sequence import SwapTickSequence
from clmmstate.tick import MAX_TICK_INDEX, MIN_TICK_INDEX, TICK_ARRAY_SIZE


def get_next_initialized_tick_index(
    sequence: SwapTickSequence,
    tick_index: int,
    tick_spacing: int,
    a_to_b: bool,
    start_array_index: int,
) -> tuple[int, int]:
    """Find the next initialized tick, walking the arrays from ``start_array_index``.

    a_to_b searches move left and include the starting tick; b_to_a searches
    move right and exclude it. Returns ``(array_index, tick_index)``. When no
    initialized tick is found, the search stops at the protocol's min/max tick
    if the array reaches it, or otherwise at the edge of the last array.
    """
    ticks_in_array = TICK_ARRAY_SIZE * tick_spacing
    search_index = tick_index
    array_index = start_array_index
    arrays = sequence.arrays

    while True:
        if not 0 <= array_index < len(arrays):
            raise DexError(ErrorCode.TickArraySequenceInvalidIndex)
        array = arrays[array_index]

        next_index = array.get_next_init_tick_index(search_index, tick_spacing, a_to_b)
        if next_index is not None:
            return array_index, next_index

        if a_to_b and array.is_min_tick_array():
            return array_index, MIN_TICK_INDEX
        if not a_to_b and array.is_max_tick_array(tick_spacing):
            return array_index, MAX_TICK_INDEX

        if array_index + 1 == len(arrays):
            if a_to_b:
                return array_index, array.start_tick_index
            return array_index, array.start_tick_index + ticks_in_array - 1

        # Move to the first search position of the next array in sequence.
        if a_to_b:
            search_index = array.start_tick_index - 1
        else:
            search_index = array.start_tick_index + ticks_in_array - 1
        array_index += 1