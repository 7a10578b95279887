class BonkDecodeError(Exception):
    """Base for all Bonk account decode failures."""

    reason = "decode_error"

    def __init__(self, record: str, message: str) -> None:
        super().__init__(f"{record}: {message}")
        self.record = record


class BufferTooShortError(BonkDecodeError):
    reason = "too_short"

    def __init__(self, record: str, needed: int, got: int) -> None:
        super().__init__(record, f"need at least {needed} bytes, got {got}")
        self.needed = needed
        self.got = got


class FieldDecodeError(BonkDecodeError):
    reason = "field_error"


class TrailingMisalignedError(BonkDecodeError):
    reason = "misaligned_trailing"

    def __init__(self, record: str, remainder: int, item_size: int) -> None:
        super().__init__(
            record,
            f"{remainder} trailing bytes are not a multiple of {item_size}",
        )
        self.remainder = remainder
        self.item_size = item_size
