"""Shared test fixtures."""

import pytest
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from src.parsers.bonk.models import (
    AmmCreatorFeeOn,
    BondingCurveParam,
    GlobalConfig,
    PlatformConfig,
    PlatformCurveParam,
    PoolState,
    VestingSchedule,
)
from src.parsers.events import EventMetadata


def _key(n: int) -> Pubkey:
    return Pubkey.from_bytes(bytes([n]) * 32)


@pytest.fixture
def pool_state() -> PoolState:
    """PoolState with every field set to something distinguishable."""
    return PoolState(
        epoch=812,
        auth_bump=254,
        status=2,
        base_decimals=6,
        quote_decimals=9,
        migrate_type=1,
        supply=1_000_000_000_000_000,
        total_base_sell=793_100_000_000_000,
        virtual_base=1_073_025_605_596_382,
        virtual_quote=30_000_852_951,
        real_base=12_345_678_901,
        real_quote=85_000_000_000,
        total_quote_fund_raising=85_000_000_000,
        quote_protocol_fee=212_500_000,
        platform_fee=850_000_000,
        migrate_fee=0,
        vesting_schedule=VestingSchedule(
            total_locked_amount=5,
            cliff_period=60,
            unlock_period=3600,
            start_time=1_735_689_600,
            allocated_share_amount=7,
        ),
        global_config=_key(1),
        platform_config=_key(2),
        base_mint=_key(3),
        quote_mint=_key(4),
        base_vault=_key(5),
        quote_vault=_key(6),
        creator=_key(7),
        token_program_flag=1,
        amm_creator_fee_on=AmmCreatorFeeOn.BOTH_TOKEN,
        platform_vesting_share=0xFFFF_FFFF_FFFF_FFFF,
        padding=bytes(range(54)),
    )


@pytest.fixture
def global_config() -> GlobalConfig:
    return GlobalConfig(
        epoch=812,
        curve_type=0,
        index=513,
        migrate_fee=1,
        trade_fee_rate=2_500,
        max_share_fee_rate=10_000,
        min_base_supply=10_000_000,
        max_lock_rate=300_000,
        min_base_sell_rate=200_000,
        min_base_migrate_rate=200_000,
        min_quote_fund_raising=30_000_000_000,
        quote_mint=_key(11),
        protocol_fee_owner=_key(12),
        migrate_fee_owner=_key(13),
        migrate_to_amm_wallet=_key(14),
        migrate_to_cpswap_wallet=_key(15),
        padding=tuple(range(1, 17)),
    )


@pytest.fixture
def curve_param() -> PlatformCurveParam:
    return PlatformCurveParam(
        epoch=900,
        index=3,
        global_config=_key(21),
        bonding_curve_param=BondingCurveParam(
            migrate_type=1,
            migrate_cpmm_fee_on=1,
            supply=1_000_000_000_000_000,
            total_base_sell=793_100_000_000_000,
            total_quote_fund_raising=85_000_000_000,
            total_locked_amount=0,
            cliff_period=0,
            unlock_period=0,
        ),
        padding=tuple(range(50)),
    )


@pytest.fixture
def platform_config() -> PlatformConfig:
    """PlatformConfig with no curve_params; tests attach their own."""
    return PlatformConfig(
        epoch=812,
        platform_fee_wallet=_key(31),
        platform_nft_wallet=_key(32),
        platform_scale=1_000,
        creator_scale=2_000,
        burn_scale=3_000,
        fee_rate=10_000,
        name=b"letsbonk.fun".ljust(64, b"\x00"),
        web=b"https://letsbonk.fun".ljust(256, b"\x00"),
        img=b"https://letsbonk.fun/logo.png".ljust(256, b"\x00"),
        cpswap_config=_key(33),
        creator_fee_rate=500,
        transfer_fee_extension_auth=_key(34),
        platform_vesting_wallet=_key(35),
        platform_vesting_scale=4_000,
        platform_cp_creator=_key(36),
        padding=bytes([0xAB]) * 108,
    )


@pytest.fixture
def metadata() -> EventMetadata:
    return EventMetadata(signature="5xSig", slot=301_234_567, program_id="LanMV9s")
