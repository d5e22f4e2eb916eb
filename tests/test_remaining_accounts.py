import pytest

from clmmstate.errors import DexError, ErrorCode
from clmmstate.remaining_accounts import (
    AccountsType,
    ParsedRemainingAccounts,
    RemainingAccountsInfo,
    RemainingAccountsSlice,
    parse_remaining_accounts,
)

ACCOUNTS = [f"account-{n}" for n in range(6)]
ALL_TYPES = list(AccountsType)


def info(*pairs):
    return RemainingAccountsInfo(
        slices=[RemainingAccountsSlice(kind, length) for kind, length in pairs]
    )


def test_no_info_gives_empty_result():
    parsed = parse_remaining_accounts(ACCOUNTS, None, ALL_TYPES)
    assert parsed == ParsedRemainingAccounts()
    assert all(parsed.get(kind) is None for kind in AccountsType)


def test_slices_take_accounts_in_order():
    layout = info((AccountsType.TransferHookA, 2), (AccountsType.TransferHookB, 3))
    parsed = parse_remaining_accounts(ACCOUNTS, layout, ALL_TYPES)
    assert parsed.transfer_hook_a == ACCOUNTS[:2]
    assert parsed.transfer_hook_b == ACCOUNTS[2:5]
    assert parsed.transfer_hook_reward is None


def test_get_matches_attributes():
    layout = info(
        (AccountsType.TransferHookInput, 1),
        (AccountsType.TransferHookIntermediate, 1),
        (AccountsType.TransferHookOutput, 1),
    )
    parsed = parse_remaining_accounts(ACCOUNTS, layout, ALL_TYPES)
    assert parsed.get(AccountsType.TransferHookInput) == [ACCOUNTS[0]]
    assert parsed.transfer_hook_intermediate == [ACCOUNTS[1]]
    assert parsed.get(AccountsType.TransferHookOutput) == [ACCOUNTS[2]]


def test_zero_length_slice_is_skipped():
    layout = info((AccountsType.TransferHookA, 0), (AccountsType.TransferHookB, 1))
    parsed = parse_remaining_accounts(ACCOUNTS, layout, ALL_TYPES)
    assert parsed.transfer_hook_a is None
    assert parsed.transfer_hook_b == [ACCOUNTS[0]]


def test_zero_length_slice_does_not_count_as_duplicate():
    layout = info((AccountsType.TransferHookA, 0), (AccountsType.TransferHookA, 2))
    parsed = parse_remaining_accounts(ACCOUNTS, layout, ALL_TYPES)
    assert parsed.transfer_hook_a == ACCOUNTS[:2]


def test_type_not_in_valid_list_is_rejected():
    layout = info((AccountsType.TransferHookReward, 1))
    with pytest.raises(DexError) as excinfo:
        parse_remaining_accounts(
            ACCOUNTS, layout, [AccountsType.TransferHookA, AccountsType.TransferHookB]
        )
    assert excinfo.value.code is ErrorCode.RemainingAccountsInvalidSlice


def test_invalid_type_rejected_even_with_zero_length():
    layout = info((AccountsType.TransferHookOutput, 0))
    with pytest.raises(DexError) as excinfo:
        parse_remaining_accounts(ACCOUNTS, layout, [AccountsType.TransferHookA])
    assert excinfo.value.code is ErrorCode.RemainingAccountsInvalidSlice


def test_insufficient_accounts():
    layout = info((AccountsType.TransferHookA, 4), (AccountsType.TransferHookB, 3))
    with pytest.raises(DexError) as excinfo:
        parse_remaining_accounts(ACCOUNTS, layout, ALL_TYPES)
    assert excinfo.value.code is ErrorCode.RemainingAccountsInsufficient


def test_duplicated_type():
    layout = info((AccountsType.TransferHookA, 1), (AccountsType.TransferHookA, 1))
    with pytest.raises(DexError) as excinfo:
        parse_remaining_accounts(ACCOUNTS, layout, ALL_TYPES)
    assert excinfo.value.code is ErrorCode.RemainingAccountsDuplicatedAccountsType


def test_leftover_accounts_are_ignored():
    layout = info((AccountsType.TransferHookA, 1))
    parsed = parse_remaining_accounts(ACCOUNTS, layout, ALL_TYPES)
    assert parsed.transfer_hook_a == [ACCOUNTS[0]]
    assert sum(len(parsed.get(kind) or []) for kind in AccountsType) == 1


def test_empty_slice_list_gives_empty_result():
    parsed = parse_remaining_accounts(ACCOUNTS, RemainingAccountsInfo(), ALL_TYPES)
    assert parsed == ParsedRemainingAccounts()


@pytest.mark.parametrize("length", [-1, 256])
def test_slice_length_must_fit_in_a_byte(length):
    with pytest.raises(ValueError):
        RemainingAccountsSlice(AccountsType.TransferHookA, length)