import pytest

from clmmstate.config import MAX_PROTOCOL_FEE_RATE, PoolsConfig
from clmmstate.errors import DexError, ErrorCode


def key(n):
    return bytes([n]) * 32


def test_initialize_sets_all_fields():
    config = PoolsConfig()
    config.initialize(key(1), key(2), key(3), MAX_PROTOCOL_FEE_RATE)
    assert config.fee_authority == key(1)
    assert config.collect_protocol_fees_authority == key(2)
    assert config.reward_emissions_super_authority == key(3)
    assert config.default_protocol_fee_rate == MAX_PROTOCOL_FEE_RATE


def test_initialize_rejects_high_rate_after_setting_authorities():
    config = PoolsConfig()
    with pytest.raises(DexError) as info:
        config.initialize(key(1), key(2), key(3), MAX_PROTOCOL_FEE_RATE + 1)
    assert info.value.code is ErrorCode.ProtocolFeeRateMaxExceeded
    assert config.fee_authority == key(1)
    assert config.default_protocol_fee_rate == 0


def test_update_authorities():
    config = PoolsConfig()
    config.update_fee_authority(key(4))
    config.update_collect_protocol_fees_authority(key(5))
    config.update_reward_emissions_super_authority(key(6))
    assert (
        config.fee_authority,
        config.collect_protocol_fees_authority,
        config.reward_emissions_super_authority,
    ) == (key(4), key(5), key(6))


def test_update_default_rate_keeps_old_value_on_error():
    config = PoolsConfig()
    config.update_default_protocol_fee_rate(100)
    with pytest.raises(DexError) as info:
        config.update_default_protocol_fee_rate(MAX_PROTOCOL_FEE_RATE + 1)
    assert info.value.code is ErrorCode.ProtocolFeeRateMaxExceeded
    assert config.default_protocol_fee_rate == 100


def test_defaults_are_zero_keys():
    config = PoolsConfig()
    assert config.fee_authority == bytes(32)
    assert config.default_protocol_fee_rate == 0