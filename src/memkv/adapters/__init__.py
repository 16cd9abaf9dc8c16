"""Adapters layer - implementations of ports.

Adapters connect the domain to the outside world:
- Inbound adapters: Handle incoming requests (command parser, REPL)
- Outbound adapters: Implement outbound ports (in-memory store)
"""

from memkv.adapters.inbound import CommandParser, CommandPlan, Keyword
from memkv.adapters.outbound import InMemoryKeyValueStore

__all__ = [
    # Inbound
    "CommandParser",
    "CommandPlan",
    "Keyword",
    # Outbound
    "InMemoryKeyValueStore",
]
