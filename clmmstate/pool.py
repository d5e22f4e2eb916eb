"""Pool state: prices, liquidity, fees and liquidity-mining rewards."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Iterable

from clmmstate.config import MAX_PROTOCOL_FEE_RATE
from clmmstate.errors import DexError, ErrorCode
from clmmstate.fee_tier import MAX_FEE_RATE

NUM_REWARDS = 3

_ZERO_KEY = bytes(32)


@dataclass(frozen=True)
class PoolRewardInfo:
    """Pool-level state of one liquidity-mining reward."""

    mint: bytes = _ZERO_KEY
    vault: bytes = _ZERO_KEY
    authority: bytes = _ZERO_KEY
    emissions_per_second_x64: int = 0
    growth_global_x64: int = 0

    def initialized(self) -> bool:
        """True once a reward mint has been set; never reverts."""
        return self.mint != _ZERO_KEY

    @staticmethod
    def to_reward_growths(reward_infos: Iterable[PoolRewardInfo]) -> list[int]:
        """The growth accumulators of the given rewards, in order."""
        return [info.growth_global_x64 for info in reward_infos]


@dataclass
class PoolBumps:
    pool_bump: int = 0


def _reward_list(reward_infos: Iterable[PoolRewardInfo]) -> list[PoolRewardInfo]:
    infos = list(reward_infos)
    if len(infos) != NUM_REWARDS:
        raise ValueError(f"expected {NUM_REWARDS} reward infos, got {len(infos)}")
    return infos


def _check_reward_index(index: int) -> None:
    if not 0 <= index < NUM_REWARDS:
        raise DexError(ErrorCode.InvalidRewardIndex)


@dataclass
class Pool:
    """A concentrated-liquidity pool between token a and token b."""

    pools_config: bytes = _ZERO_KEY
    pool_bump: bytes = b"\x00"
    tick_spacing: int = 0
    tick_spacing_seed: bytes = b"\x00\x00"
    fee_rate: int = 0
    protocol_fee_rate: int = 0
    liquidity: int = 0
    sqrt_price: int = 0
    tick_current_index: int = 0
    protocol_fee_owed_a: int = 0
    protocol_fee_owed_b: int = 0
    token_mint_a: bytes = _ZERO_KEY
    token_vault_a: bytes = _ZERO_KEY
    fee_growth_global_a: int = 0
    token_mint_b: bytes = _ZERO_KEY
    token_vault_b: bytes = _ZERO_KEY
    fee_growth_global_b: int = 0
    reward_last_updated_timestamp: int = 0
    reward_infos: list[PoolRewardInfo] = field(
        default_factory=lambda: [PoolRewardInfo() for _ in range(NUM_REWARDS)]
    )

    LEN: ClassVar[int] = 8 + 261 + 384

    def __post_init__(self) -> None:
        self.reward_infos = _reward_list(self.reward_infos)

    def seeds(self) -> list[bytes]:
        """The seeds from which the pool address is derived."""
        return [
            b"pool",
            self.pools_config,
            self.token_mint_a,
            self.token_mint_b,
            self.tick_spacing_seed,
            self.pool_bump,
        ]

    def input_token_mint(self, a_to_b: bool) -> bytes:
        return self.token_mint_a if a_to_b else self.token_mint_b

    def input_token_vault(self, a_to_b: bool) -> bytes:
        return self.token_vault_a if a_to_b else self.token_vault_b

    def output_token_mint(self, a_to_b: bool) -> bytes:
        return self.token_mint_b if a_to_b else self.token_mint_a

    def output_token_vault(self, a_to_b: bool) -> bytes:
        return self.token_vault_b if a_to_b else self.token_vault_a

    def update_rewards(
        self, reward_infos: Iterable[PoolRewardInfo], reward_last_updated_timestamp: int
    ) -> None:
        """Replace all reward infos and record when they were updated."""
        infos = _reward_list(reward_infos)
        self.reward_last_updated_timestamp = reward_last_updated_timestamp
        self.reward_infos = infos

    def update_rewards_and_liquidity(
        self,
        reward_infos: Iterable[PoolRewardInfo],
        liquidity: int,
        reward_last_updated_timestamp: int,
    ) -> None:
        self.update_rewards(reward_infos, reward_last_updated_timestamp)
        self.liquidity = liquidity

    def update_reward_authority(self, index: int, authority: bytes) -> None:
        _check_reward_index(index)
        self.reward_infos[index] = replace(self.reward_infos[index], authority=authority)

    def update_emissions(
        self,
        index: int,
        reward_infos: Iterable[PoolRewardInfo],
        timestamp: int,
        emissions_per_second_x64: int,
    ) -> None:
        _check_reward_index(index)
        self.update_rewards(reward_infos, timestamp)
        self.reward_infos[index] = replace(
            self.reward_infos[index], emissions_per_second_x64=emissions_per_second_x64
        )

    def initialize_reward(self, index: int, mint: bytes, vault: bytes) -> None:
        """Set up the reward at ``index``, which must be the lowest unused slot."""
        _check_reward_index(index)
        lowest_index = next(
            (i for i, info in enumerate(self.reward_infos) if not info.initialized()),
            None,
        )
        if lowest_index is None or lowest_index != index:
            raise DexError(ErrorCode.InvalidRewardIndex)
        self.reward_infos[index] = replace(self.reward_infos[index], mint=mint, vault=vault)

    def update_after_swap(
        self,
        liquidity: int,
        tick_index: int,
        sqrt_price: int,
        fee_growth_global: int,
        reward_infos: Iterable[PoolRewardInfo],
        protocol_fee: int,
        is_token_fee_in_a: bool,
        reward_last_updated_timestamp: int,
    ) -> None:
        infos = _reward_list(reward_infos)
        self.tick_current_index = tick_index
        self.sqrt_price = sqrt_price
        self.liquidity = liquidity
        self.reward_infos = infos
        self.reward_last_updated_timestamp = reward_last_updated_timestamp
        if is_token_fee_in_a:
            self.fee_growth_global_a = fee_growth_global
            self.protocol_fee_owed_a += protocol_fee
        else:
            self.fee_growth_global_b = fee_growth_global
            self.protocol_fee_owed_b += protocol_fee

    def update_fee_rate(self, fee_rate: int) -> None:
        if fee_rate > MAX_FEE_RATE:
            raise DexError(ErrorCode.FeeRateMaxExceeded)
        self.fee_rate = fee_rate

    def update_protocol_fee_rate(self, protocol_fee_rate: int) -> None:
        if protocol_fee_rate > MAX_PROTOCOL_FEE_RATE:
            raise DexError(ErrorCode.ProtocolFeeRateMaxExceeded)
        self.protocol_fee_rate = protocol_fee_rate

    def reset_protocol_fees_owed(self) -> None:
        self.protocol_fee_owed_a = 0
        self.protocol_fee_owed_b = 0