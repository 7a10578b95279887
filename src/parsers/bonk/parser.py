"""Lift Bonk account snapshots into DexEvents.

The first 8 bytes of account data are the Anchor discriminator. They are
skipped here, not checked: picking the right parser is the router's job.
A None return means "not this account kind", so a dispatcher can try
several parsers on the same snapshot.
"""

from src.parsers.bonk.constants import (
    ACCOUNT_DISCRIMINATOR_SIZE,
    GLOBAL_CONFIG_SIZE,
    PLATFORM_CONFIG_SIZE,
    POOL_STATE_SIZE,
)
from src.parsers.bonk.decoder import (
    global_config_decode,
    platform_config_decode,
    pool_state_decode,
)
from src.parsers.events import (
    AccountPretty,
    BonkGlobalConfigAccountEvent,
    BonkPlatformConfigAccountEvent,
    BonkPoolStateAccountEvent,
    DexEvent,
    EventMetadata,
    EventType,
)


def _account_fields(account: AccountPretty) -> dict:
    return {
        "pubkey": account.pubkey,
        "executable": account.executable,
        "lamports": account.lamports,
        "owner": account.owner,
        "rent_epoch": account.rent_epoch,
    }


def pool_state_parser(account: AccountPretty, metadata: EventMetadata) -> DexEvent | None:
    metadata = metadata.model_copy(update={"event_type": EventType.ACCOUNT_BONK_POOL_STATE})

    end = POOL_STATE_SIZE + ACCOUNT_DISCRIMINATOR_SIZE
    if len(account.data) < end:
        return None
    pool_state = pool_state_decode(account.data[ACCOUNT_DISCRIMINATOR_SIZE:end])
    if pool_state is None:
        return None
    return BonkPoolStateAccountEvent(
        metadata=metadata, pool_state=pool_state, **_account_fields(account)
    )


def global_config_parser(account: AccountPretty, metadata: EventMetadata) -> DexEvent | None:
    metadata = metadata.model_copy(update={"event_type": EventType.ACCOUNT_BONK_GLOBAL_CONFIG})

    end = GLOBAL_CONFIG_SIZE + ACCOUNT_DISCRIMINATOR_SIZE
    if len(account.data) < end:
        return None
    global_config = global_config_decode(account.data[ACCOUNT_DISCRIMINATOR_SIZE:end])
    if global_config is None:
        return None
    return BonkGlobalConfigAccountEvent(
        metadata=metadata, global_config=global_config, **_account_fields(account)
    )


def platform_config_parser(account: AccountPretty, metadata: EventMetadata) -> DexEvent | None:
    """Everything after the discriminator goes to the decoder: the fixed
    prefix plus the trailing curve_params records."""
    metadata = metadata.model_copy(
        update={"event_type": EventType.ACCOUNT_BONK_PLATFORM_CONFIG}
    )

    if len(account.data) < PLATFORM_CONFIG_SIZE + ACCOUNT_DISCRIMINATOR_SIZE:
        return None
    platform_config = platform_config_decode(account.data[ACCOUNT_DISCRIMINATOR_SIZE:])
    if platform_config is None:
        return None
    return BonkPlatformConfigAccountEvent(
        metadata=metadata, platform_config=platform_config, **_account_fields(account)
    )
