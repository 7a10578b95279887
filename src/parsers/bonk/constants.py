"""Bonk (Raydium LaunchLab) program constants."""

LAUNCHLAB_PROGRAM_ID = "LanMV9sAd7wArD4vJFi2qDdfnVhFxYSUg6eADduJ3uj"

# Leading Anchor account discriminator, not part of any record
ACCOUNT_DISCRIMINATOR_SIZE = 8

# sha256("account:<Name>")[:8]
POOL_STATE_DISCRIMINATOR = bytes([247, 237, 227, 245, 215, 195, 222, 70])
GLOBAL_CONFIG_DISCRIMINATOR = bytes([149, 8, 156, 202, 160, 252, 176, 217])
PLATFORM_CONFIG_DISCRIMINATOR = bytes([160, 78, 128, 0, 248, 83, 230, 160])

PUBKEY_SIZE = 32

# Sub-record sizes
VESTING_SCHEDULE_SIZE = 8 * 5
VESTING_PARAMS_SIZE = 8 * 3
CONSTANT_CURVE_SIZE = 8 * 3 + 1
FIXED_CURVE_SIZE = 8 * 2 + 1
LINEAR_CURVE_SIZE = 8 * 2 + 1
BONDING_CURVE_PARAM_SIZE = 1 + 1 + 8 * 6
PLATFORM_CURVE_PARAM_SIZE = 8 + 1 + 32 + BONDING_CURVE_PARAM_SIZE + 8 * 50

# Record sizes (without the discriminator)
POOL_STATE_SIZE = 8 + 1 * 5 + 8 * 10 + VESTING_SCHEDULE_SIZE + 32 * 7 + 1 + 1 + 8 + 54
GLOBAL_CONFIG_SIZE = 8 + 1 + 2 + 8 * 8 + 32 * 5 + 8 * 16
# Fixed prefix only; curve_params trail it
PLATFORM_CONFIG_SIZE = 8 + 32 * 2 + 8 * 4 + 64 + 256 + 256 + 32 + 8 + 32 + 32 + 8 + 32 + 108

# Reserved padding widths
POOL_STATE_PADDING_LEN = 54
GLOBAL_CONFIG_PADDING_LEN = 16
PLATFORM_CONFIG_PADDING_LEN = 108
PLATFORM_CURVE_PARAM_PADDING_LEN = 50

PLATFORM_NAME_LEN = 64
PLATFORM_WEB_LEN = 256
PLATFORM_IMG_LEN = 256
