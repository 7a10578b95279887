"""Length-gated decoders for Bonk (Raydium LaunchLab) account records.

Input is the record bytes with the 8-byte account discriminator already
stripped (see parser.py). Every kind has two entry points:

  *_decode_strict(data)  -> record, raises a BonkDecodeError subclass
  *_decode(data)         -> record or None

Fixed-size kinds read exactly the first SIZE bytes and ignore the rest.
PlatformConfig reads its fixed prefix, then the remaining bytes as
back-to-back PlatformCurveParam records; a partial trailing record rejects
the whole decode. Zero trailing records is a valid, empty collection.
"""

from collections.abc import Callable
from typing import TypeVar

from construct import Construct, ConstructError

from src.parsers.bonk.constants import (
    GLOBAL_CONFIG_SIZE,
    PLATFORM_CONFIG_SIZE,
    PLATFORM_CURVE_PARAM_SIZE,
    POOL_STATE_SIZE,
    VESTING_PARAMS_SIZE,
)
from src.parsers.bonk.exceptions import (
    BonkDecodeError,
    BufferTooShortError,
    FieldDecodeError,
    TrailingMisalignedError,
)
from src.parsers.bonk.layouts import (
    CURVE_PARAMS_LAYOUT,
    GLOBAL_CONFIG_LAYOUT,
    MINT_PARAMS_LAYOUT,
    PLATFORM_CONFIG_FIELDS,
    PLATFORM_CONFIG_PREFIX_LAYOUT,
    PLATFORM_CURVE_PARAM_LAYOUT,
    POOL_STATE_LAYOUT,
    VESTING_PARAMS_LAYOUT,
)
from src.parsers.bonk.models import (
    CurveParams,
    GlobalConfig,
    MintParams,
    PlatformConfig,
    PlatformCurveParam,
    PoolState,
    VestingParams,
)

T = TypeVar("T")


def _parse_window(layout: Construct, data: bytes, size: int, record: str):
    """Parse exactly data[:size] with layout. Shorter input is rejected."""
    if len(data) < size:
        raise BufferTooShortError(record, needed=size, got=len(data))
    try:
        return layout.parse(bytes(data[:size]))
    except (ConstructError, ValueError) as e:
        # ValueError covers pydantic validation and bad UTF-8
        raise FieldDecodeError(record, str(e)) from e


def _parse_prefix(layout: Construct, data: bytes, record: str):
    """Parse a variable-size layout from the start of data."""
    try:
        return layout.parse(bytes(data))
    except (ConstructError, ValueError) as e:
        raise FieldDecodeError(record, str(e)) from e


def _optional(decode_strict: Callable[[bytes], T], data: bytes) -> T | None:
    try:
        return decode_strict(data)
    except BonkDecodeError:
        return None


# --- PoolState ---


def pool_state_decode_strict(data: bytes) -> PoolState:
    return _parse_window(POOL_STATE_LAYOUT, data, POOL_STATE_SIZE, "PoolState")


def pool_state_decode(data: bytes) -> PoolState | None:
    return _optional(pool_state_decode_strict, data)


def pool_state_encode(pool_state: PoolState) -> bytes:
    return POOL_STATE_LAYOUT.build(pool_state)


# --- GlobalConfig ---


def global_config_decode_strict(data: bytes) -> GlobalConfig:
    return _parse_window(GLOBAL_CONFIG_LAYOUT, data, GLOBAL_CONFIG_SIZE, "GlobalConfig")


def global_config_decode(data: bytes) -> GlobalConfig | None:
    return _optional(global_config_decode_strict, data)


def global_config_encode(global_config: GlobalConfig) -> bytes:
    return GLOBAL_CONFIG_LAYOUT.build(global_config)


# --- PlatformConfig ---


def platform_config_decode_strict(data: bytes) -> PlatformConfig:
    """Decode the fixed prefix, then every trailing PlatformCurveParam."""
    data = bytes(data)
    prefix = _parse_window(
        PLATFORM_CONFIG_PREFIX_LAYOUT, data, PLATFORM_CONFIG_SIZE, "PlatformConfig"
    )

    remainder = len(data) - PLATFORM_CONFIG_SIZE
    if remainder % PLATFORM_CURVE_PARAM_SIZE:
        raise TrailingMisalignedError(
            "PlatformConfig", remainder=remainder, item_size=PLATFORM_CURVE_PARAM_SIZE
        )

    curve_params: list[PlatformCurveParam] = []
    offset = PLATFORM_CONFIG_SIZE
    while offset < len(data):
        curve_params.append(
            _parse_window(
                PLATFORM_CURVE_PARAM_LAYOUT,
                data[offset : offset + PLATFORM_CURVE_PARAM_SIZE],
                PLATFORM_CURVE_PARAM_SIZE,
                f"PlatformConfig.curve_params[{len(curve_params)}]",
            )
        )
        offset += PLATFORM_CURVE_PARAM_SIZE

    fields = {k: v for k, v in prefix.items() if not k.startswith("_")}
    try:
        return PlatformConfig(**fields, curve_params=tuple(curve_params))
    except ValueError as e:
        raise FieldDecodeError("PlatformConfig", str(e)) from e


def platform_config_decode(data: bytes) -> PlatformConfig | None:
    return _optional(platform_config_decode_strict, data)


def platform_config_encode(platform_config: PlatformConfig) -> bytes:
    prefix = PLATFORM_CONFIG_PREFIX_LAYOUT.build(
        {name: getattr(platform_config, name) for name in PLATFORM_CONFIG_FIELDS}
    )
    tail = b"".join(
        PLATFORM_CURVE_PARAM_LAYOUT.build(param) for param in platform_config.curve_params
    )
    return prefix + tail


# --- Sub-records ---


def vesting_params_decode(data: bytes) -> VestingParams | None:
    return _optional(
        lambda d: _parse_window(VESTING_PARAMS_LAYOUT, d, VESTING_PARAMS_SIZE, "VestingParams"),
        data,
    )


def curve_params_decode(data: bytes) -> CurveParams | None:
    """Decode a tagged CurveParams value from the start of data."""
    return _optional(lambda d: _parse_prefix(CURVE_PARAMS_LAYOUT, d, "CurveParams"), data)


def curve_params_encode(curve_params: CurveParams) -> bytes:
    return CURVE_PARAMS_LAYOUT.build(curve_params)


def mint_params_decode(data: bytes) -> MintParams | None:
    return _optional(lambda d: _parse_prefix(MINT_PARAMS_LAYOUT, d, "MintParams"), data)


def mint_params_encode(mint_params: MintParams) -> bytes:
    return MINT_PARAMS_LAYOUT.build(mint_params)
