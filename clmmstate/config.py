"""Global configuration shared by every pool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from clmmstate.errors import DexError, ErrorCode

MAX_PROTOCOL_FEE_RATE = 2_500


@dataclass
class PoolsConfig:
    """Authorities and the default protocol fee rate for a family of pools."""

    fee_authority: bytes = bytes(32)
    collect_protocol_fees_authority: bytes = bytes(32)
    reward_emissions_super_authority: bytes = bytes(32)
    default_protocol_fee_rate: int = 0

    LEN: ClassVar[int] = 8 + 96 + 4

    def initialize(
        self,
        fee_authority: bytes,
        collect_protocol_fees_authority: bytes,
        reward_emissions_super_authority: bytes,
        default_protocol_fee_rate: int,
    ) -> None:
        self.fee_authority = fee_authority
        self.collect_protocol_fees_authority = collect_protocol_fees_authority
        self.reward_emissions_super_authority = reward_emissions_super_authority
        self.update_default_protocol_fee_rate(default_protocol_fee_rate)

    def update_fee_authority(self, fee_authority: bytes) -> None:
        self.fee_authority = fee_authority

    def update_collect_protocol_fees_authority(self, collect_protocol_fees_authority: bytes) -> None:
        self.collect_protocol_fees_authority = collect_protocol_fees_authority

    def update_reward_emissions_super_authority(self, reward_emissions_super_authority: bytes) -> None:
        self.reward_emissions_super_authority = reward_emissions_super_authority

    def update_default_protocol_fee_rate(self, default_protocol_fee_rate: int) -> None:
        if default_protocol_fee_rate > MAX_PROTOCOL_FEE_RATE:
            raise DexError(ErrorCode.ProtocolFeeRateMaxExceeded)
        self.default_protocol_fee_rate = default_protocol_fee_rate