"""Domain errors — each kind maps to a distinct caller-visible outcome."""


class TechDispatchError(Exception):
    """Base class for all service errors."""


class InvalidInputError(TechDispatchError):
    """Submitted payload is empty or malformed. Nothing was stored."""


class InvalidArgumentError(TechDispatchError):
    """A required query argument is missing or empty."""


class NotFoundError(TechDispatchError):
    """A backing store does not exist yet."""

    def __init__(self, key: str):
        super().__init__(f"Store '{key}' does not exist")
        self.key = key


class CorruptStoreError(TechDispatchError):
    """A backing store exists but its content cannot be parsed."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Store '{key}' is corrupt: {reason}")
        self.key = key
        self.reason = reason


class StorageIOError(TechDispatchError):
    """Reading or writing a store failed for reasons other than absence or corruption."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Storage failure on '{key}': {reason}")
        self.key = key
        self.reason = reason
