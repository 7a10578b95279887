"""Pydantic v2 models for Bonk (Raydium LaunchLab) on-chain accounts.

Field order matches the program's Borsh layout; see layouts.py for widths.
Padding fields are opaque and kept verbatim so a re-encode is byte-identical.
"""

from enum import IntEnum
from typing import Annotated

from pydantic import BaseModel, Field, model_validator
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from src.parsers.bonk.constants import (
    GLOBAL_CONFIG_PADDING_LEN,
    PLATFORM_CONFIG_PADDING_LEN,
    PLATFORM_CURVE_PARAM_PADDING_LEN,
    PLATFORM_IMG_LEN,
    PLATFORM_NAME_LEN,
    PLATFORM_WEB_LEN,
    POOL_STATE_PADDING_LEN,
)

U8 = Annotated[int, Field(ge=0, le=0xFF)]
U16 = Annotated[int, Field(ge=0, le=0xFFFF)]
U64 = Annotated[int, Field(ge=0, le=0xFFFF_FFFF_FFFF_FFFF)]

_RECORD_CONFIG = {"frozen": True, "arbitrary_types_allowed": True}


class TradeDirection(IntEnum):
    BUY = 0
    SELL = 1


class PoolStatus(IntEnum):
    FUND = 0
    MIGRATE = 1
    TRADE = 2


class AmmFeeOn(IntEnum):
    QUOTE_TOKEN = 0
    BOTH_TOKEN = 1


class AmmCreatorFeeOn(IntEnum):
    QUOTE_TOKEN = 0
    BOTH_TOKEN = 1


class CurveKind(IntEnum):
    """Variant tag of CurveParams."""

    CONSTANT = 0
    FIXED = 1
    LINEAR = 2


class VestingSchedule(BaseModel):
    total_locked_amount: U64 = 0
    cliff_period: U64 = 0
    unlock_period: U64 = 0
    start_time: U64 = 0
    allocated_share_amount: U64 = 0

    model_config = _RECORD_CONFIG


class VestingParams(BaseModel):
    total_locked_amount: U64 = 0
    cliff_period: U64 = 0
    unlock_period: U64 = 0

    model_config = _RECORD_CONFIG


class MintParams(BaseModel):
    decimals: U8 = 0
    name: str = ""
    symbol: str = ""
    uri: str = ""

    model_config = _RECORD_CONFIG


class ConstantCurve(BaseModel):
    supply: U64 = 0
    total_base_sell: U64 = 0
    total_quote_fund_raising: U64 = 0
    migrate_type: U8 = 0

    model_config = _RECORD_CONFIG


class FixedCurve(BaseModel):
    supply: U64 = 0
    total_quote_fund_raising: U64 = 0
    migrate_type: U8 = 0

    model_config = _RECORD_CONFIG


class LinearCurve(BaseModel):
    supply: U64 = 0
    total_quote_fund_raising: U64 = 0
    migrate_type: U8 = 0

    model_config = _RECORD_CONFIG


CURVE_DATA_TYPES: dict[CurveKind, type[BaseModel]] = {
    CurveKind.CONSTANT: ConstantCurve,
    CurveKind.FIXED: FixedCurve,
    CurveKind.LINEAR: LinearCurve,
}


class CurveParams(BaseModel):
    """Tagged curve parameters: one of Constant, Fixed, Linear."""

    kind: CurveKind = CurveKind.CONSTANT
    data: ConstantCurve | FixedCurve | LinearCurve = Field(default_factory=ConstantCurve)

    model_config = _RECORD_CONFIG

    @model_validator(mode="after")
    def check_payload_matches_kind(self) -> "CurveParams":
        expected = CURVE_DATA_TYPES[self.kind]
        if type(self.data) is not expected:
            raise ValueError(
                f"{self.kind.name} curve expects {expected.__name__}, "
                f"got {type(self.data).__name__}"
            )
        return self


class BondingCurveParam(BaseModel):
    migrate_type: U8 = 0
    migrate_cpmm_fee_on: U8 = 0
    supply: U64 = 0
    total_base_sell: U64 = 0
    total_quote_fund_raising: U64 = 0
    total_locked_amount: U64 = 0
    cliff_period: U64 = 0
    unlock_period: U64 = 0

    model_config = _RECORD_CONFIG


class PoolState(BaseModel):
    """Bonding-curve pool account."""

    epoch: U64 = 0
    auth_bump: U8 = 0
    status: U8 = 0
    base_decimals: U8 = 0
    quote_decimals: U8 = 0
    migrate_type: U8 = 0
    supply: U64 = 0
    total_base_sell: U64 = 0
    virtual_base: U64 = 0
    virtual_quote: U64 = 0
    real_base: U64 = 0
    real_quote: U64 = 0
    total_quote_fund_raising: U64 = 0
    quote_protocol_fee: U64 = 0
    platform_fee: U64 = 0
    migrate_fee: U64 = 0
    vesting_schedule: VestingSchedule = Field(default_factory=VestingSchedule)
    global_config: Pubkey = Field(default_factory=Pubkey.default)
    platform_config: Pubkey = Field(default_factory=Pubkey.default)
    base_mint: Pubkey = Field(default_factory=Pubkey.default)
    quote_mint: Pubkey = Field(default_factory=Pubkey.default)
    base_vault: Pubkey = Field(default_factory=Pubkey.default)
    quote_vault: Pubkey = Field(default_factory=Pubkey.default)
    creator: Pubkey = Field(default_factory=Pubkey.default)
    token_program_flag: U8 = 0
    amm_creator_fee_on: AmmCreatorFeeOn = AmmCreatorFeeOn.QUOTE_TOKEN
    platform_vesting_share: U64 = 0
    padding: bytes = Field(
        default=bytes(POOL_STATE_PADDING_LEN),
        min_length=POOL_STATE_PADDING_LEN,
        max_length=POOL_STATE_PADDING_LEN,
    )

    model_config = _RECORD_CONFIG

    @property
    def pool_status(self) -> PoolStatus:
        """Raw status byte as PoolStatus. Raises ValueError on unknown values."""
        return PoolStatus(self.status)


class GlobalConfig(BaseModel):
    """Per-curve-type protocol parameters."""

    epoch: U64 = 0
    curve_type: U8 = 0
    index: U16 = 0
    migrate_fee: U64 = 0
    trade_fee_rate: U64 = 0
    max_share_fee_rate: U64 = 0
    min_base_supply: U64 = 0
    max_lock_rate: U64 = 0
    min_base_sell_rate: U64 = 0
    min_base_migrate_rate: U64 = 0
    min_quote_fund_raising: U64 = 0
    quote_mint: Pubkey = Field(default_factory=Pubkey.default)
    protocol_fee_owner: Pubkey = Field(default_factory=Pubkey.default)
    migrate_fee_owner: Pubkey = Field(default_factory=Pubkey.default)
    migrate_to_amm_wallet: Pubkey = Field(default_factory=Pubkey.default)
    migrate_to_cpswap_wallet: Pubkey = Field(default_factory=Pubkey.default)
    padding: tuple[U64, ...] = Field(
        default=(0,) * GLOBAL_CONFIG_PADDING_LEN,
        min_length=GLOBAL_CONFIG_PADDING_LEN,
        max_length=GLOBAL_CONFIG_PADDING_LEN,
    )

    model_config = _RECORD_CONFIG


class PlatformCurveParam(BaseModel):
    epoch: U64 = 0
    index: U8 = 0
    global_config: Pubkey = Field(default_factory=Pubkey.default)
    bonding_curve_param: BondingCurveParam = Field(default_factory=BondingCurveParam)
    padding: tuple[U64, ...] = Field(
        default=(0,) * PLATFORM_CURVE_PARAM_PADDING_LEN,
        min_length=PLATFORM_CURVE_PARAM_PADDING_LEN,
        max_length=PLATFORM_CURVE_PARAM_PADDING_LEN,
    )

    model_config = _RECORD_CONFIG


def _fixed_str(raw: bytes) -> str:
    return raw.rstrip(b"\x00").decode("utf-8", errors="replace")


class PlatformConfig(BaseModel):
    """Platform fee/branding config followed by its curve parameter list."""

    epoch: U64 = 0
    platform_fee_wallet: Pubkey = Field(default_factory=Pubkey.default)
    platform_nft_wallet: Pubkey = Field(default_factory=Pubkey.default)
    platform_scale: U64 = 0
    creator_scale: U64 = 0
    burn_scale: U64 = 0
    fee_rate: U64 = 0
    name: bytes = Field(
        default=bytes(PLATFORM_NAME_LEN), min_length=PLATFORM_NAME_LEN, max_length=PLATFORM_NAME_LEN
    )
    web: bytes = Field(
        default=bytes(PLATFORM_WEB_LEN), min_length=PLATFORM_WEB_LEN, max_length=PLATFORM_WEB_LEN
    )
    img: bytes = Field(
        default=bytes(PLATFORM_IMG_LEN), min_length=PLATFORM_IMG_LEN, max_length=PLATFORM_IMG_LEN
    )
    cpswap_config: Pubkey = Field(default_factory=Pubkey.default)
    creator_fee_rate: U64 = 0
    transfer_fee_extension_auth: Pubkey = Field(default_factory=Pubkey.default)
    platform_vesting_wallet: Pubkey = Field(default_factory=Pubkey.default)
    platform_vesting_scale: U64 = 0
    platform_cp_creator: Pubkey = Field(default_factory=Pubkey.default)
    padding: bytes = Field(
        default=bytes(PLATFORM_CONFIG_PADDING_LEN),
        min_length=PLATFORM_CONFIG_PADDING_LEN,
        max_length=PLATFORM_CONFIG_PADDING_LEN,
    )
    curve_params: tuple[PlatformCurveParam, ...] = ()

    model_config = _RECORD_CONFIG

    @property
    def name_str(self) -> str:
        return _fixed_str(self.name)

    @property
    def web_str(self) -> str:
        return _fixed_str(self.web)

    @property
    def img_str(self) -> str:
        return _fixed_str(self.img)
