"""Liquidity positions and their owed fees and rewards."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Iterable

from clmmstate.errors import DexError, ErrorCode
from clmmstate.pool import NUM_REWARDS
from clmmstate.tick import Tick

_ZERO_KEY = bytes(32)


@dataclass(frozen=True)
class PositionRewardInfo:
    """Reward growth checkpoint and amount owed for one reward of a position."""

    growth_inside_checkpoint: int = 0
    amount_owed: int = 0


def _default_reward_infos() -> list[PositionRewardInfo]:
    return [PositionRewardInfo() for _ in range(NUM_REWARDS)]


def _reward_list(reward_infos: Iterable[PositionRewardInfo]) -> list[PositionRewardInfo]:
    infos = list(reward_infos)
    if len(infos) != NUM_REWARDS:
        raise ValueError(f"expected {NUM_REWARDS} reward infos, got {len(infos)}")
    return infos


@dataclass
class PositionUpdate:
    """New liquidity, fee and reward values to apply to a position."""

    liquidity: int = 0
    fee_growth_checkpoint_a: int = 0
    fee_owed_a: int = 0
    fee_growth_checkpoint_b: int = 0
    fee_owed_b: int = 0
    reward_infos: list[PositionRewardInfo] = field(default_factory=_default_reward_infos)


@dataclass
class OpenPositionBumps:
    position_bump: int = 0


@dataclass
class OpenPositionWithMetadataBumps:
    position_bump: int = 0
    metadata_bump: int = 0


@dataclass
class Position:
    """A range of liquidity in one pool, with the fees and rewards it has earned."""

    pool: bytes = _ZERO_KEY
    position_mint: bytes = _ZERO_KEY
    liquidity: int = 0
    tick_lower_index: int = 0
    tick_upper_index: int = 0
    fee_growth_checkpoint_a: int = 0
    fee_owed_a: int = 0
    fee_growth_checkpoint_b: int = 0
    fee_owed_b: int = 0
    reward_infos: list[PositionRewardInfo] = field(default_factory=_default_reward_infos)

    LEN: ClassVar[int] = 8 + 136 + 72

    def __post_init__(self) -> None:
        self.reward_infos = _reward_list(self.reward_infos)

    def is_position_empty(self) -> bool:
        """True when the position holds no liquidity and is owed nothing."""
        fees_not_owed = self.fee_owed_a == 0 and self.fee_owed_b == 0
        rewards_not_owed = all(info.amount_owed == 0 for info in self.reward_infos)
        return self.liquidity == 0 and fees_not_owed and rewards_not_owed

    def update(self, update: PositionUpdate) -> None:
        """Copy the values of ``update`` into this position."""
        infos = _reward_list(update.reward_infos)
        self.liquidity = update.liquidity
        self.fee_growth_checkpoint_a = update.fee_growth_checkpoint_a
        self.fee_growth_checkpoint_b = update.fee_growth_checkpoint_b
        self.fee_owed_a = update.fee_owed_a
        self.fee_owed_b = update.fee_owed_b
        self.reward_infos = infos

    def open_position(
        self,
        pool_key: bytes,
        tick_spacing: int,
        position_mint: bytes,
        tick_lower_index: int,
        tick_upper_index: int,
    ) -> None:
        """Bind the position to a pool and a usable, non-empty tick range."""
        if (
            not Tick.check_is_usable_tick(tick_lower_index, tick_spacing)
            or not Tick.check_is_usable_tick(tick_upper_index, tick_spacing)
            or tick_lower_index >= tick_upper_index
        ):
            raise DexError(ErrorCode.InvalidTickIndex)
        self.pool = pool_key
        self.position_mint = position_mint
        self.tick_lower_index = tick_lower_index
        self.tick_upper_index = tick_upper_index

    def reset_fees_owed(self) -> None:
        self.fee_owed_a = 0
        self.fee_owed_b = 0

    def update_reward_owed(self, index: int, amount_owed: int) -> None:
        if not 0 <= index < NUM_REWARDS:
            raise IndexError(f"reward index {index} out of range")
        self.reward_infos[index] = replace(self.reward_infos[index], amount_owed=amount_owed)