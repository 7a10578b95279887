"""Route Bonk program account updates to the matching parser.

parse_bonk_account() dispatches on the 8-byte Anchor discriminator and is
the normal entry point for the account stream. probe_bonk_account() tries
every parser in turn for callers that have no discriminator to go on.
"""

from collections.abc import Callable
from typing import NamedTuple

from loguru import logger

from config.settings import settings
from src.parsers.bonk.constants import (
    ACCOUNT_DISCRIMINATOR_SIZE,
    GLOBAL_CONFIG_DISCRIMINATOR,
    GLOBAL_CONFIG_SIZE,
    PLATFORM_CONFIG_DISCRIMINATOR,
    PLATFORM_CONFIG_SIZE,
    POOL_STATE_DISCRIMINATOR,
    POOL_STATE_SIZE,
)
from src.parsers.bonk.decoder import (
    global_config_decode_strict,
    platform_config_decode_strict,
    pool_state_decode_strict,
)
from src.parsers.bonk.exceptions import (
    BonkDecodeError,
    BufferTooShortError,
    TrailingMisalignedError,
)
from src.parsers.bonk.parser import (
    global_config_parser,
    platform_config_parser,
    pool_state_parser,
)
from src.parsers.events import AccountPretty, DexEvent, EventMetadata


class AccountKind(NamedTuple):
    name: str
    parser: Callable[[AccountPretty, EventMetadata], DexEvent | None]
    decode_strict: Callable[[bytes], object]
    size: int
    variadic: bool = False


# Probe order is largest record first. A well-formed PlatformConfig is
# claimed before PoolState gets to read its first bytes; one with a
# misaligned tail stops the probe (see probe_bonk_account).
ACCOUNT_KINDS: dict[bytes, AccountKind] = {
    PLATFORM_CONFIG_DISCRIMINATOR: AccountKind(
        "PlatformConfig",
        platform_config_parser,
        platform_config_decode_strict,
        PLATFORM_CONFIG_SIZE,
        variadic=True,
    ),
    POOL_STATE_DISCRIMINATOR: AccountKind(
        "PoolState", pool_state_parser, pool_state_decode_strict, POOL_STATE_SIZE
    ),
    GLOBAL_CONFIG_DISCRIMINATOR: AccountKind(
        "GlobalConfig", global_config_parser, global_config_decode_strict, GLOBAL_CONFIG_SIZE
    ),
}

ACCOUNT_PARSERS = {disc: kind.parser for disc, kind in ACCOUNT_KINDS.items()}


def explain_failure(kind: AccountKind, data: bytes) -> BonkDecodeError | None:
    """Re-run the strict decoder on the parser's window to get the reason.

    Returns None if the data actually decodes.
    """
    end = kind.size + ACCOUNT_DISCRIMINATOR_SIZE
    if len(data) < end:
        return BufferTooShortError(kind.name, needed=end, got=len(data))
    window = data[ACCOUNT_DISCRIMINATOR_SIZE : None if kind.variadic else end]
    try:
        kind.decode_strict(window)
    except BonkDecodeError as e:
        return e
    return None


def parse_bonk_account(
    account: AccountPretty,
    metadata: EventMetadata,
    *,
    program_id: str | None = None,
    verify_owner: bool | None = None,
) -> DexEvent | None:
    """Dispatch a Bonk account update by its discriminator.

    Returns None for accounts owned by another program, unknown
    discriminators, and records that fail to decode.
    """
    program_id = program_id or settings.bonk_program_id
    if verify_owner is None:
        verify_owner = settings.bonk_verify_owner

    if verify_owner and str(account.owner) != program_id:
        return None

    discriminator = bytes(account.data[:ACCOUNT_DISCRIMINATOR_SIZE])
    kind = ACCOUNT_KINDS.get(discriminator)
    if kind is None:
        logger.debug(
            f"[BONK] Unknown discriminator {discriminator.hex()} "
            f"for {str(account.pubkey)[:12]}"
        )
        return None

    event = kind.parser(account, metadata)
    if event is None:
        error = explain_failure(kind, account.data)
        logger.debug(
            f"[BONK] {kind.name} decode failed for {str(account.pubkey)[:12]}: "
            f"{error.reason if error else 'unknown'} ({error})"
        )
    return event


def probe_bonk_account(account: AccountPretty, metadata: EventMetadata) -> DexEvent | None:
    """Try every Bonk parser and return the first event that decodes.

    A payload whose PlatformConfig prefix decodes but whose tail is
    misaligned is a corrupt PlatformConfig, not a smaller record: None.
    """
    for kind in ACCOUNT_KINDS.values():
        event = kind.parser(account, metadata)
        if event is not None:
            return event
        if kind.variadic and isinstance(
            explain_failure(kind, account.data), TrailingMisalignedError
        ):
            return None
    return None
