"""Account snapshot and event envelope models shared by account parsers.

AccountPretty is what the streaming layer hands over for every account
update; parsers turn it into one of the DexEvent variants below.
"""

import base64
from enum import Enum

from pydantic import BaseModel, Field
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from src.parsers.bonk.models import GlobalConfig, PlatformConfig, PoolState


class EventType(Enum):
    UNKNOWN = "unknown"
    ACCOUNT_BONK_POOL_STATE = "account_bonk_pool_state"
    ACCOUNT_BONK_GLOBAL_CONFIG = "account_bonk_global_config"
    ACCOUNT_BONK_PLATFORM_CONFIG = "account_bonk_platform_config"


class EventMetadata(BaseModel):
    """Correlation fields filled by the stream layer. Parsers only set event_type."""

    event_type: EventType = EventType.UNKNOWN
    signature: str = ""
    slot: int = 0
    block_time: int | None = None
    program_id: str = ""
    recv_us: int = 0

    model_config = {"extra": "ignore"}


class AccountPretty(BaseModel):
    """Point-in-time account snapshot: chain metadata plus raw data."""

    pubkey: Pubkey = Field(default_factory=Pubkey.default)
    executable: bool = False
    owner: Pubkey = Field(default_factory=Pubkey.default)
    lamports: int = 0
    rent_epoch: int = 0
    data: bytes = b""
    slot: int = 0

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @classmethod
    def from_base64(
        cls,
        pubkey: str,
        owner: str,
        data_b64: str,
        *,
        lamports: int = 0,
        rent_epoch: int = 0,
        executable: bool = False,
        slot: int = 0,
    ) -> "AccountPretty":
        """Build from RPC-style base58 keys and base64 account data."""
        return cls(
            pubkey=Pubkey.from_string(pubkey),
            owner=Pubkey.from_string(owner),
            data=base64.b64decode(data_b64),
            lamports=lamports,
            rent_epoch=rent_epoch,
            executable=executable,
            slot=slot,
        )


class _AccountEvent(BaseModel):
    metadata: EventMetadata
    pubkey: Pubkey
    executable: bool
    lamports: int
    owner: Pubkey
    rent_epoch: int

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class BonkPoolStateAccountEvent(_AccountEvent):
    pool_state: PoolState


class BonkGlobalConfigAccountEvent(_AccountEvent):
    global_config: GlobalConfig


class BonkPlatformConfigAccountEvent(_AccountEvent):
    platform_config: PlatformConfig


DexEvent = (
    BonkPoolStateAccountEvent | BonkGlobalConfigAccountEvent | BonkPlatformConfigAccountEvent
)
