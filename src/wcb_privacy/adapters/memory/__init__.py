"""In-memory adapters – for tests and local runs."""
from wcb_privacy.adapters.memory.store import InMemoryRecordStore, InMemoryUserDirectory

__all__ = ["InMemoryRecordStore", "InMemoryUserDirectory"]
