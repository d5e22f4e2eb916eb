"""Checks that a signer may act on a position, and timestamp conversion."""

from __future__ import annotations

from dataclasses import dataclass

from clmmstate.errors import DexError, ErrorCode


@dataclass
class TokenAccount:
    """The parts of a position token account that authority checks read."""

    owner: bytes
    delegate: bytes | None = None
    delegated_amount: int = 0


@dataclass
class Signer:
    """An account presented as the acting authority."""

    key: bytes
    is_signer: bool = True


def _validate_owner(expected_owner: bytes, signer: Signer) -> None:
    if expected_owner != signer.key or not signer.is_signer:
        raise DexError(ErrorCode.MissingOrInvalidDelegate)


def verify_position_authority(position_token_account: TokenAccount, position_authority: Signer) -> bytes:
    """Check the signer is the token's owner or its single-token delegate.

    Returns the key that granted the authority.
    """
    delegate = position_token_account.delegate
    if delegate is not None and position_authority.key == delegate:
        _validate_owner(delegate, position_authority)
        if position_token_account.delegated_amount != 1:
            raise DexError(ErrorCode.InvalidPositionTokenAmount)
        return delegate
    _validate_owner(position_token_account.owner, position_authority)
    return position_token_account.owner


def verify_position_bundle_authority(
    position_bundle_token_account: TokenAccount, position_bundle_authority: Signer
) -> bytes:
    """Same rules as for a single position, applied to a bundle token."""
    return verify_position_authority(position_bundle_token_account, position_bundle_authority)


def to_timestamp_u64(t: int) -> int:
    """Convert a signed clock timestamp to an unsigned one."""
    if t < 0:
        raise DexError(ErrorCode.InvalidTimestampConversion)
    return t