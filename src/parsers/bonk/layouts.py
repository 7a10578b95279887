"""Borsh layouts for Bonk (Raydium LaunchLab) accounts, as construct structs.

Each struct is wrapped in a ModelAdapter so parse() returns the pydantic
record from models.py and build() accepts one. Scalars are little-endian,
arrays are copied verbatim, enum tags are a u8 prefix with no padding.
"""

from enum import IntEnum

from construct import (
    Adapter,
    Array,
    Bytes,
    Int8ul,
    Int16ul,
    Int32ul,
    Int64ul,
    MappingError,
    PascalString,
    Struct,
    Switch,
    this,
)
from pydantic import BaseModel
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from src.parsers.bonk.constants import (
    BONDING_CURVE_PARAM_SIZE,
    CONSTANT_CURVE_SIZE,
    FIXED_CURVE_SIZE,
    GLOBAL_CONFIG_PADDING_LEN,
    GLOBAL_CONFIG_SIZE,
    LINEAR_CURVE_SIZE,
    PLATFORM_CONFIG_PADDING_LEN,
    PLATFORM_CONFIG_SIZE,
    PLATFORM_CURVE_PARAM_PADDING_LEN,
    PLATFORM_CURVE_PARAM_SIZE,
    PLATFORM_IMG_LEN,
    PLATFORM_NAME_LEN,
    PLATFORM_WEB_LEN,
    POOL_STATE_PADDING_LEN,
    POOL_STATE_SIZE,
    PUBKEY_SIZE,
    VESTING_PARAMS_SIZE,
    VESTING_SCHEDULE_SIZE,
)
from src.parsers.bonk.models import (
    AmmCreatorFeeOn,
    AmmFeeOn,
    BondingCurveParam,
    ConstantCurve,
    CurveKind,
    CurveParams,
    FixedCurve,
    GlobalConfig,
    LinearCurve,
    MintParams,
    PlatformConfig,
    PlatformCurveParam,
    PoolState,
    PoolStatus,
    TradeDirection,
    VestingParams,
    VestingSchedule,
)


class PubkeyAdapter(Adapter):
    """32 raw bytes <-> solders Pubkey."""

    def __init__(self) -> None:
        super().__init__(Bytes(PUBKEY_SIZE))

    def _decode(self, obj, context, path):
        return Pubkey.from_bytes(obj)

    def _encode(self, obj, context, path):
        return bytes(obj)


class TagAdapter(Adapter):
    """Fixed-width unsigned tag <-> IntEnum. Unknown tags fail."""

    def __init__(self, subcon, enum_cls: type[IntEnum]) -> None:
        super().__init__(subcon)
        self.enum_cls = enum_cls

    def _decode(self, obj, context, path):
        try:
            return self.enum_cls(obj)
        except ValueError:
            raise MappingError(
                f"unknown {self.enum_cls.__name__} tag {obj}", path=path
            ) from None

    def _encode(self, obj, context, path):
        try:
            return int(self.enum_cls(obj))
        except ValueError:
            raise MappingError(
                f"cannot build {self.enum_cls.__name__} from {obj!r}", path=path
            ) from None


class ModelAdapter(Adapter):
    """construct Container <-> pydantic model."""

    def __init__(self, subcon, model_cls: type[BaseModel]) -> None:
        super().__init__(subcon)
        self.model_cls = model_cls

    def _decode(self, obj, context, path):
        # Containers carry construct bookkeeping keys such as _io
        fields = {k: v for k, v in obj.items() if not k.startswith("_")}
        return self.model_cls(**fields)

    def _encode(self, obj, context, path):
        if isinstance(obj, BaseModel):
            return dict(obj)
        return obj


# Standalone tags. Only AMM_CREATOR_FEE_ON_LAYOUT appears in an account
# record; the others are carried by instruction and trade-event payloads.
TRADE_DIRECTION_LAYOUT = TagAdapter(Int8ul, TradeDirection)
POOL_STATUS_LAYOUT = TagAdapter(Int8ul, PoolStatus)
AMM_FEE_ON_LAYOUT = TagAdapter(Int8ul, AmmFeeOn)
AMM_CREATOR_FEE_ON_LAYOUT = TagAdapter(Int8ul, AmmCreatorFeeOn)

BORSH_STRING = PascalString(Int32ul, "utf8")

VESTING_SCHEDULE_LAYOUT = ModelAdapter(
    Struct(
        "total_locked_amount" / Int64ul,
        "cliff_period" / Int64ul,
        "unlock_period" / Int64ul,
        "start_time" / Int64ul,
        "allocated_share_amount" / Int64ul,
    ),
    VestingSchedule,
)

VESTING_PARAMS_LAYOUT = ModelAdapter(
    Struct(
        "total_locked_amount" / Int64ul,
        "cliff_period" / Int64ul,
        "unlock_period" / Int64ul,
    ),
    VestingParams,
)

MINT_PARAMS_LAYOUT = ModelAdapter(
    Struct(
        "decimals" / Int8ul,
        "name" / BORSH_STRING,
        "symbol" / BORSH_STRING,
        "uri" / BORSH_STRING,
    ),
    MintParams,
)

CONSTANT_CURVE_LAYOUT = ModelAdapter(
    Struct(
        "supply" / Int64ul,
        "total_base_sell" / Int64ul,
        "total_quote_fund_raising" / Int64ul,
        "migrate_type" / Int8ul,
    ),
    ConstantCurve,
)

FIXED_CURVE_LAYOUT = ModelAdapter(
    Struct(
        "supply" / Int64ul,
        "total_quote_fund_raising" / Int64ul,
        "migrate_type" / Int8ul,
    ),
    FixedCurve,
)

LINEAR_CURVE_LAYOUT = ModelAdapter(
    Struct(
        "supply" / Int64ul,
        "total_quote_fund_raising" / Int64ul,
        "migrate_type" / Int8ul,
    ),
    LinearCurve,
)

CURVE_PARAMS_LAYOUT = ModelAdapter(
    Struct(
        "kind" / TagAdapter(Int8ul, CurveKind),
        "data"
        / Switch(
            this.kind,
            {
                CurveKind.CONSTANT: CONSTANT_CURVE_LAYOUT,
                CurveKind.FIXED: FIXED_CURVE_LAYOUT,
                CurveKind.LINEAR: LINEAR_CURVE_LAYOUT,
            },
        ),
    ),
    CurveParams,
)

BONDING_CURVE_PARAM_LAYOUT = ModelAdapter(
    Struct(
        "migrate_type" / Int8ul,
        "migrate_cpmm_fee_on" / Int8ul,
        "supply" / Int64ul,
        "total_base_sell" / Int64ul,
        "total_quote_fund_raising" / Int64ul,
        "total_locked_amount" / Int64ul,
        "cliff_period" / Int64ul,
        "unlock_period" / Int64ul,
    ),
    BondingCurveParam,
)

POOL_STATE_LAYOUT = ModelAdapter(
    Struct(
        "epoch" / Int64ul,
        "auth_bump" / Int8ul,
        "status" / Int8ul,
        "base_decimals" / Int8ul,
        "quote_decimals" / Int8ul,
        "migrate_type" / Int8ul,
        "supply" / Int64ul,
        "total_base_sell" / Int64ul,
        "virtual_base" / Int64ul,
        "virtual_quote" / Int64ul,
        "real_base" / Int64ul,
        "real_quote" / Int64ul,
        "total_quote_fund_raising" / Int64ul,
        "quote_protocol_fee" / Int64ul,
        "platform_fee" / Int64ul,
        "migrate_fee" / Int64ul,
        "vesting_schedule" / VESTING_SCHEDULE_LAYOUT,
        "global_config" / PubkeyAdapter(),
        "platform_config" / PubkeyAdapter(),
        "base_mint" / PubkeyAdapter(),
        "quote_mint" / PubkeyAdapter(),
        "base_vault" / PubkeyAdapter(),
        "quote_vault" / PubkeyAdapter(),
        "creator" / PubkeyAdapter(),
        "token_program_flag" / Int8ul,
        "amm_creator_fee_on" / AMM_CREATOR_FEE_ON_LAYOUT,
        "platform_vesting_share" / Int64ul,
        "padding" / Bytes(POOL_STATE_PADDING_LEN),
    ),
    PoolState,
)

GLOBAL_CONFIG_LAYOUT = ModelAdapter(
    Struct(
        "epoch" / Int64ul,
        "curve_type" / Int8ul,
        "index" / Int16ul,
        "migrate_fee" / Int64ul,
        "trade_fee_rate" / Int64ul,
        "max_share_fee_rate" / Int64ul,
        "min_base_supply" / Int64ul,
        "max_lock_rate" / Int64ul,
        "min_base_sell_rate" / Int64ul,
        "min_base_migrate_rate" / Int64ul,
        "min_quote_fund_raising" / Int64ul,
        "quote_mint" / PubkeyAdapter(),
        "protocol_fee_owner" / PubkeyAdapter(),
        "migrate_fee_owner" / PubkeyAdapter(),
        "migrate_to_amm_wallet" / PubkeyAdapter(),
        "migrate_to_cpswap_wallet" / PubkeyAdapter(),
        "padding" / Array(GLOBAL_CONFIG_PADDING_LEN, Int64ul),
    ),
    GlobalConfig,
)

PLATFORM_CURVE_PARAM_LAYOUT = ModelAdapter(
    Struct(
        "epoch" / Int64ul,
        "index" / Int8ul,
        "global_config" / PubkeyAdapter(),
        "bonding_curve_param" / BONDING_CURVE_PARAM_LAYOUT,
        "padding" / Array(PLATFORM_CURVE_PARAM_PADDING_LEN, Int64ul),
    ),
    PlatformCurveParam,
)

# Fixed prefix of PlatformConfig. curve_params is not on this struct: the
# decoder reads it from the remaining bytes, PLATFORM_CURVE_PARAM_SIZE at a time.
PLATFORM_CONFIG_PREFIX_LAYOUT = Struct(
    "epoch" / Int64ul,
    "platform_fee_wallet" / PubkeyAdapter(),
    "platform_nft_wallet" / PubkeyAdapter(),
    "platform_scale" / Int64ul,
    "creator_scale" / Int64ul,
    "burn_scale" / Int64ul,
    "fee_rate" / Int64ul,
    "name" / Bytes(PLATFORM_NAME_LEN),
    "web" / Bytes(PLATFORM_WEB_LEN),
    "img" / Bytes(PLATFORM_IMG_LEN),
    "cpswap_config" / PubkeyAdapter(),
    "creator_fee_rate" / Int64ul,
    "transfer_fee_extension_auth" / PubkeyAdapter(),
    "platform_vesting_wallet" / PubkeyAdapter(),
    "platform_vesting_scale" / Int64ul,
    "platform_cp_creator" / PubkeyAdapter(),
    "padding" / Bytes(PLATFORM_CONFIG_PADDING_LEN),
)

PLATFORM_CONFIG_FIELDS = tuple(
    sc.name for sc in PLATFORM_CONFIG_PREFIX_LAYOUT.subcons
)

# Hand-written size constant -> layout it must match
FIXED_LAYOUT_SIZES = {
    "VestingSchedule": (VESTING_SCHEDULE_LAYOUT, VESTING_SCHEDULE_SIZE),
    "VestingParams": (VESTING_PARAMS_LAYOUT, VESTING_PARAMS_SIZE),
    "ConstantCurve": (CONSTANT_CURVE_LAYOUT, CONSTANT_CURVE_SIZE),
    "FixedCurve": (FIXED_CURVE_LAYOUT, FIXED_CURVE_SIZE),
    "LinearCurve": (LINEAR_CURVE_LAYOUT, LINEAR_CURVE_SIZE),
    "BondingCurveParam": (BONDING_CURVE_PARAM_LAYOUT, BONDING_CURVE_PARAM_SIZE),
    "PlatformCurveParam": (PLATFORM_CURVE_PARAM_LAYOUT, PLATFORM_CURVE_PARAM_SIZE),
    "PoolState": (POOL_STATE_LAYOUT, POOL_STATE_SIZE),
    "GlobalConfig": (GLOBAL_CONFIG_LAYOUT, GLOBAL_CONFIG_SIZE),
    "PlatformConfig": (PLATFORM_CONFIG_PREFIX_LAYOUT, PLATFORM_CONFIG_SIZE),
}


def check_layout_sizes() -> None:
    """Raise RuntimeError if any size constant drifted from its layout."""
    mismatched = [
        f"{name}: constant={size} layout={layout.sizeof()}"
        for name, (layout, size) in FIXED_LAYOUT_SIZES.items()
        if layout.sizeof() != size
    ]
    if mismatched:
        raise RuntimeError("Bonk layout size mismatch: " + "; ".join(mismatched))


check_layout_sizes()
