"""Bundles of positions tracked by a fixed-size bitmap."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from clmmstate.errors import DexError, ErrorCode

POSITION_BITMAP_USIZE = 32
POSITION_BUNDLE_SIZE = 8 * POSITION_BITMAP_USIZE


@dataclass
class PositionBundle:
    """A bundle mint and a bitmap of which bundled positions are open."""

    position_bundle_mint: bytes = bytes(32)
    position_bitmap: bytearray = field(default_factory=lambda: bytearray(POSITION_BITMAP_USIZE))

    LEN: ClassVar[int] = 8 + 32 + 32 + 64

    def initialize(self, position_bundle_mint: bytes) -> None:
        self.position_bundle_mint = position_bundle_mint

    def is_deletable(self) -> bool:
        """True when no bundled position is open."""
        return not any(self.position_bitmap)

    def is_open(self, bundle_index: int) -> bool:
        self._check_index(bundle_index)
        byte_index, offset = divmod(bundle_index, 8)
        return bool(self.position_bitmap[byte_index] & (1 << offset))

    def open_bundled_position(self, bundle_index: int) -> None:
        self._update_bitmap(bundle_index, True)

    def close_bundled_position(self, bundle_index: int) -> None:
        self._update_bitmap(bundle_index, False)

    @staticmethod
    def _check_index(bundle_index: int) -> None:
        if not 0 <= bundle_index < POSITION_BUNDLE_SIZE:
            raise DexError(ErrorCode.InvalidBundleIndex)

    def _update_bitmap(self, bundle_index: int, open_: bool) -> None:
        opened = self.is_open(bundle_index)
        if open_ and opened:
            raise DexError(ErrorCode.BundledPositionAlreadyOpened)
        if not open_ and not opened:
            raise DexError(ErrorCode.BundledPositionAlreadyClosed)
        byte_index, offset = divmod(bundle_index, 8)
        self.position_bitmap[byte_index] ^= 1 << offset