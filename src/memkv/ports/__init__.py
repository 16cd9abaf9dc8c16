"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: APIs offered to clients (e.g., TransactionStack)
- Outbound ports: Dependencies on external systems (e.g., KeyValueStore)

Adapters implement these ports with concrete functionality.
"""

from memkv.ports.inbound import TransactionStack, TransactionStats
from memkv.ports.outbound import KeyValueStore

__all__ = [
    # Inbound ports
    "TransactionStack",
    "TransactionStats",
    # Outbound ports
    "KeyValueStore",
]
