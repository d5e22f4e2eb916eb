"""Splitting an instruction's remaining accounts into typed groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Sequence

from clmmstate.errors import DexError, ErrorCode


class AccountsType(Enum):
    """The kinds of account group that may follow an instruction's fixed accounts."""

    TransferHookA = "transfer_hook_a"
    TransferHookB = "transfer_hook_b"
    TransferHookReward = "transfer_hook_reward"
    TransferHookInput = "transfer_hook_input"
    TransferHookIntermediate = "transfer_hook_intermediate"
    TransferHookOutput = "transfer_hook_output"


@dataclass(frozen=True)
class RemainingAccountsSlice:
    """A run of ``length`` consecutive accounts of one type."""

    accounts_type: AccountsType
    length: int

    def __post_init__(self) -> None:
        if not 0 <= self.length <= 0xFF:
            raise ValueError(f"slice length must fit in one byte, got {self.length}")


@dataclass
class RemainingAccountsInfo:
    """The layout of the remaining accounts, slice by slice, in order."""

    slices: list[RemainingAccountsSlice] = field(default_factory=list)


@dataclass
class ParsedRemainingAccounts:
    """Remaining accounts grouped by type; a group is None when absent."""

    transfer_hook_a: list[Any] | None = None
    transfer_hook_b: list[Any] | None = None
    transfer_hook_reward: list[Any] | None = None
    transfer_hook_input: list[Any] | None = None
    transfer_hook_intermediate: list[Any] | None = None
    transfer_hook_output: list[Any] | None = None

    def get(self, accounts_type: AccountsType) -> list[Any] | None:
        """The accounts parsed for ``accounts_type``, if any."""
        return getattr(self, accounts_type.value)

    def _set(self, accounts_type: AccountsType, accounts: list[Any]) -> None:
        if self.get(accounts_type) is not None:
            raise DexError(ErrorCode.RemainingAccountsDuplicatedAccountsType)
        setattr(self, accounts_type.value, accounts)


def parse_remaining_accounts(
    remaining_accounts: Sequence[Any],
    remaining_accounts_info: RemainingAccountsInfo | None,
    valid_accounts_type_list: Iterable[AccountsType],
) -> ParsedRemainingAccounts:
    """Assign the remaining accounts to groups following the declared slices.

    Every slice type must be in ``valid_accounts_type_list``; slices of length
    zero are skipped. Accounts left over after the last slice are ignored.
    """
    parsed = ParsedRemainingAccounts()
    if remaining_accounts_info is None:
        return parsed

    valid_types = set(valid_accounts_type_list)
    accounts_iter = iter(remaining_accounts)

    for slice_ in remaining_accounts_info.slices:
        if slice_.accounts_type not in valid_types:
            raise DexError(ErrorCode.RemainingAccountsInvalidSlice)
        if slice_.length == 0:
            continue

        accounts = []
        for _ in range(slice_.length):
            try:
                accounts.append(next(accounts_iter))
            except StopIteration:
                raise DexError(ErrorCode.RemainingAccountsInsufficient) from None

        parsed._set(slice_.accounts_type, accounts)

    return parsed