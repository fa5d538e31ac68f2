"""Identity store interfaces and implementations."""

from teammention.storage.interfaces import IdentityStoreError, IdentityStoreInterface
from teammention.storage.memory import InMemoryIdentityStore

__all__ = [
    "IdentityStoreError",
    "IdentityStoreInterface",
    "InMemoryIdentityStore",
]
