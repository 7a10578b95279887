"""Tests for Bonk layout sizes, field offsets and tagged values."""

import struct

import pytest
from construct import ConstructError

from src.parsers.bonk.constants import (
    BONDING_CURVE_PARAM_SIZE,
    GLOBAL_CONFIG_SIZE,
    PLATFORM_CONFIG_SIZE,
    PLATFORM_CURVE_PARAM_SIZE,
    POOL_STATE_SIZE,
)
from src.parsers.bonk.decoder import (
    curve_params_decode,
    curve_params_encode,
    global_config_encode,
    mint_params_decode,
    mint_params_encode,
    platform_config_encode,
    pool_state_encode,
    vesting_params_decode,
)
from src.parsers.bonk.layouts import (
    AMM_CREATOR_FEE_ON_LAYOUT,
    AMM_FEE_ON_LAYOUT,
    FIXED_LAYOUT_SIZES,
    POOL_STATUS_LAYOUT,
    TRADE_DIRECTION_LAYOUT,
    check_layout_sizes,
)
from src.parsers.bonk.models import (
    AmmCreatorFeeOn,
    AmmFeeOn,
    ConstantCurve,
    CurveKind,
    CurveParams,
    FixedCurve,
    GlobalConfig,
    LinearCurve,
    MintParams,
    PlatformConfig,
    PoolState,
    PoolStatus,
    TradeDirection,
)


def _borsh_str(value: bytes) -> bytes:
    return struct.pack("<I", len(value)) + value


def test_size_constants():
    assert POOL_STATE_SIZE == 421
    assert GLOBAL_CONFIG_SIZE == 363
    assert PLATFORM_CONFIG_SIZE == 932
    assert BONDING_CURVE_PARAM_SIZE == 50
    assert PLATFORM_CURVE_PARAM_SIZE == 491


def test_size_constants_match_layouts():
    check_layout_sizes()
    for name, (layout, size) in FIXED_LAYOUT_SIZES.items():
        assert layout.sizeof() == size, name


def test_default_records_encode_to_fixed_size():
    assert len(pool_state_encode(PoolState())) == POOL_STATE_SIZE
    assert len(global_config_encode(GlobalConfig())) == GLOBAL_CONFIG_SIZE
    assert len(platform_config_encode(PlatformConfig())) == PLATFORM_CONFIG_SIZE


def test_pool_state_field_offsets(pool_state):
    raw = pool_state_encode(pool_state)
    assert struct.unpack_from("<Q", raw, 0)[0] == 812
    assert raw[8:13] == bytes([254, 2, 6, 9, 1])
    assert struct.unpack_from("<Q", raw, 13)[0] == pool_state.supply
    # real_quote is the 6th u64 after the five u8s
    assert struct.unpack_from("<Q", raw, 13 + 5 * 8)[0] == 85_000_000_000
    assert struct.unpack_from("<5Q", raw, 93) == (5, 60, 3600, 1_735_689_600, 7)
    assert raw[133:165] == bytes([1]) * 32  # global_config
    assert raw[325:357] == bytes([7]) * 32  # creator
    assert raw[357] == 1  # token_program_flag
    assert raw[358] == AmmCreatorFeeOn.BOTH_TOKEN
    assert struct.unpack_from("<Q", raw, 359)[0] == 0xFFFF_FFFF_FFFF_FFFF
    assert raw[367:] == bytes(range(54))


def test_global_config_field_offsets(global_config):
    raw = global_config_encode(global_config)
    assert raw[8] == 0
    assert struct.unpack_from("<H", raw, 9)[0] == 513
    assert struct.unpack_from("<Q", raw, 67)[0] == 30_000_000_000  # min_quote_fund_raising
    assert raw[75:107] == bytes([11]) * 32
    assert struct.unpack_from("<16Q", raw, 235) == tuple(range(1, 17))


def test_platform_config_field_offsets(platform_config):
    raw = platform_config_encode(platform_config)
    assert raw[8:40] == bytes([31]) * 32
    assert raw[104:116] == b"letsbonk.fun"
    assert raw[168:188] == b"https://letsbonk.fun"
    assert raw[-108:] == bytes([0xAB]) * 108


@pytest.mark.parametrize(
    ("layout", "enum_cls"),
    [
        (TRADE_DIRECTION_LAYOUT, TradeDirection),
        (POOL_STATUS_LAYOUT, PoolStatus),
        (AMM_FEE_ON_LAYOUT, AmmFeeOn),
        (AMM_CREATOR_FEE_ON_LAYOUT, AmmCreatorFeeOn),
    ],
)
def test_every_defined_tag_decodes(layout, enum_cls):
    for member in enum_cls:
        assert layout.parse(bytes([member.value])) is member
        assert layout.build(member) == bytes([member.value])


@pytest.mark.parametrize(
    ("layout", "first_unknown"),
    [
        (TRADE_DIRECTION_LAYOUT, 2),
        (POOL_STATUS_LAYOUT, 3),
        (AMM_FEE_ON_LAYOUT, 2),
        (AMM_CREATOR_FEE_ON_LAYOUT, 2),
    ],
)
def test_unknown_tags_fail(layout, first_unknown):
    for value in (first_unknown, 0x7F, 0xFF):
        with pytest.raises(ConstructError):
            layout.parse(bytes([value]))


def test_pool_status_property():
    assert PoolState(status=0).pool_status is PoolStatus.FUND
    assert PoolState(status=2).pool_status is PoolStatus.TRADE
    with pytest.raises(ValueError):
        PoolState(status=9).pool_status


def test_curve_params_tag_prefix():
    params = CurveParams(
        kind=CurveKind.FIXED,
        data=FixedCurve(supply=5, total_quote_fund_raising=6, migrate_type=1),
    )
    raw = curve_params_encode(params)
    assert raw == bytes([1]) + struct.pack("<QQB", 5, 6, 1)
    assert curve_params_decode(raw) == params


def test_curve_params_variants_decode():
    constant = curve_params_decode(bytes([0]) + struct.pack("<QQQB", 1, 2, 3, 4))
    assert constant is not None
    assert constant.kind is CurveKind.CONSTANT
    assert constant.data == ConstantCurve(
        supply=1, total_base_sell=2, total_quote_fund_raising=3, migrate_type=4
    )

    linear = curve_params_decode(bytes([2]) + struct.pack("<QQB", 7, 8, 0))
    assert linear is not None
    assert isinstance(linear.data, LinearCurve)
    assert linear.data.supply == 7


def test_curve_params_unknown_tag_or_short_payload():
    assert curve_params_decode(bytes([3]) + bytes(25)) is None
    assert curve_params_decode(bytes([0]) + bytes(10)) is None
    assert curve_params_decode(b"") is None


def test_curve_params_rejects_mismatched_payload():
    with pytest.raises(ValueError):
        CurveParams(kind=CurveKind.LINEAR, data=FixedCurve())


def test_mint_params_decode():
    raw = bytes([6]) + _borsh_str(b"Bonk Dog") + _borsh_str(b"BDOG") + _borsh_str(b"ipfs://x")
    mint = mint_params_decode(raw)
    assert mint == MintParams(decimals=6, name="Bonk Dog", symbol="BDOG", uri="ipfs://x")
    assert mint_params_encode(mint) == raw


def test_mint_params_bad_utf8_or_truncated():
    bad = bytes([6]) + _borsh_str(b"\xff\xfe") + _borsh_str(b"") + _borsh_str(b"")
    assert mint_params_decode(bad) is None
    truncated = bytes([6]) + struct.pack("<I", 100) + b"short"
    assert mint_params_decode(truncated) is None


def test_vesting_params_decode():
    vesting = vesting_params_decode(struct.pack("<3Q", 1, 2, 3))
    assert vesting is not None
    assert (vesting.total_locked_amount, vesting.cliff_period, vesting.unlock_period) == (1, 2, 3)
    assert vesting_params_decode(bytes(23)) is None
