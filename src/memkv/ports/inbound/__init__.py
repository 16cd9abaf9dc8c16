"""Inbound ports - APIs offered to clients of the domain.

Exports:
    Transaction Stack:
        - TransactionStack: Protocol for nested transaction blocks
        - TransactionStats: Statistics for monitoring
"""

from memkv.ports.inbound.transaction_stack import TransactionStack, TransactionStats

__all__ = [
    "TransactionStack",
    "TransactionStats",
]
