"""Domain services for business logic.

Services implement domain logic that doesn't naturally fit within a
single entity. The transaction stack coordinates undo logs and the
store they are replayed against.
"""

from memkv.domain.services.transaction_stack import NestedTransactionStack

__all__ = [
    "NestedTransactionStack",
]
