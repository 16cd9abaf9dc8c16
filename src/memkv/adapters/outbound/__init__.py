"""Outbound adapters - implementations of outbound ports.

These adapters implement the storage the engine runs commands against.
"""

from memkv.adapters.outbound.in_memory_store import InMemoryKeyValueStore

__all__ = [
    "InMemoryKeyValueStore",
]
