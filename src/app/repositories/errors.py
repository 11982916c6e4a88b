class StoreError(Exception):
    """Raised by repository adapters when the record store rejects a write or read"""


class DuplicateTokenError(StoreError):
    """A summons with the same token already exists"""
