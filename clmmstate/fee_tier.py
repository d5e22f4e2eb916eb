"""Fee tiers: a tick spacing paired with a default fee rate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from clmmstate.errors import DexError, ErrorCode

MAX_FEE_RATE = 30_000


@dataclass
class FeeTier:
    """Default fee rate for pools of one tick spacing under a config."""

    pools_config: bytes = bytes(32)
    tick_spacing: int = 0
    default_fee_rate: int = 0

    LEN: ClassVar[int] = 8 + 32 + 4

    def initialize(self, pools_config: bytes, tick_spacing: int, default_fee_rate: int) -> None:
        self.pools_config = pools_config
        self.tick_spacing = tick_spacing
        self.update_default_fee_rate(default_fee_rate)

    def update_default_fee_rate(self, default_fee_rate: int) -> None:
        if default_fee_rate > MAX_FEE_RATE:
            raise DexError(ErrorCode.FeeRateMaxExceeded)
        self.default_fee_rate = default_fee_rate