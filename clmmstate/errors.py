"""Error codes raised by the pool state objects."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Every failure the pool state objects can report, with its message."""

    InvalidTokenMintOrder = "Token mint a must sort before token mint b"
    SqrtPriceOutOfBounds = "Sqrt price is outside the supported range"
    FeeRateMaxExceeded = "Fee rate is above the maximum"
    ProtocolFeeRateMaxExceeded = "Protocol fee rate is above the maximum"
    InvalidRewardIndex = "Reward index is invalid"
    InvalidBundleIndex = "Bundle index is out of range"
    BundledPositionAlreadyOpened = "Bundled position is already open"
    BundledPositionAlreadyClosed = "Bundled position is already closed"
    InvalidTickIndex = "Tick index is invalid"
    InvalidTickSpacing = "Tick spacing cannot be zero"
    InvalidStartTick = "Start tick index is not valid for this tick spacing"
    TickNotFound = "Tick not found in tick array"
    InvalidTickArraySequence = "Tick arrays are not in the required sequence"
    TickArrayIndexOutofBounds = "Tick array index is out of bounds"
    TickArraySequenceInvalidIndex = "Tick array sequence was given an invalid index"
    InvalidPositionTokenAmount = "Position token amount must be exactly one"
    MissingOrInvalidDelegate = "Owner or delegate is missing or did not sign"
    InvalidTimestampConversion = "Timestamp cannot be negative"
    RemainingAccountsInvalidSlice = "Remaining accounts slice has an invalid type"
    RemainingAccountsInsufficient = "Not enough remaining accounts"
    RemainingAccountsDuplicatedAccountsType = "Remaining accounts type appears twice"
    NoExtraAccountsForTransferHook = "Transfer hook needs extra accounts"
    FeeCalculationFailed = "Fee calculation failed"
    OverflowOrConversion = "Arithmetic overflow or conversion failure"
    TransferFeeCalculationError = "Transfer fee calculation failed"

    @property
    def message(self) -> str:
        return self.value


class DexError(Exception):
    """Raised when an operation on pool state is rejected."""

    def __init__(self, code: ErrorCode, detail: str | None = None) -> None:
        self.code = code
        self.detail = detail
        text = f"{code.name}: {code.message}"
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)