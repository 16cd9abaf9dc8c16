"""Inbound adapters for the key/value engine.

Inbound adapters handle incoming requests and convert them to
internal domain operations.

Exports:
    Command Parser:
        - CommandParser: Parser that converts lines to command plans
        - CommandPlan: Parsed keyword and arguments
        - Keyword: Accepted command keywords

The REPL lives in memkv.adapters.inbound.cli and is not imported here,
since it depends on the application layer.
"""

from memkv.adapters.inbound.command_parser import CommandParser, CommandPlan, Keyword

__all__ = [
    "CommandParser",
    "CommandPlan",
    "Keyword",
]
