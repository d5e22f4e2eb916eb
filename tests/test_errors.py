import pytest

from clmmstate.errors import DexError, ErrorCode


def test_error_carries_code():
    err = DexError(ErrorCode.TickNotFound)
    assert err.code is ErrorCode.TickNotFound


def test_error_text_names_code():
    err = DexError(ErrorCode.InvalidTickArraySequence)
    assert "InvalidTickArraySequence" in str(err)


def test_error_text_includes_detail():
    err = DexError(ErrorCode.InvalidRewardIndex, "index 7")
    assert "index 7" in str(err)
    assert err.detail == "index 7"


def test_error_is_exception_with_code_and_detail():
    err = DexError(ErrorCode.FeeRateMaxExceeded, "rate 70000")
    assert isinstance(err, Exception)
    assert err.code is ErrorCode.FeeRateMaxExceeded
    assert err.detail == "rate 70000"
    text = str(err)
    assert "FeeRateMaxExceeded" in text
    assert "rate 70000" in text


@pytest.mark.parametrize("code", list(ErrorCode))
def test_every_code_builds_an_error(code):
    err = DexError(code)
    assert err.code is code
    assert code.name in str(err)
    assert code.message == code.value
    assert code.message


def test_codes_are_distinct():
    errors = [DexError(code) for code in ErrorCode]
    assert len({err.code.value for err in errors}) == len(errors)
    assert len({str(err) for err in errors}) == len(errors)