"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for the systems the engine depends on,
such as the storage behind the key/value mapping.
"""

from memkv.ports.outbound.key_value_store import KeyValueStore

__all__ = [
    "KeyValueStore",
]
