"""Application layer for the key/value engine.

The application layer orchestrates domain logic to fulfill use cases.

Exports:
    Engine:
        - KVEngine: Main entry point, one command line in, one result out
    Dispatcher:
        - CommandDispatcher: Routes parsed commands to the domain
        - ExecutionResult: Result of handling one command line
        - HELP_TEXT: Command reference returned by HELP
"""

from memkv.application.dispatcher import HELP_TEXT, CommandDispatcher, ExecutionResult
from memkv.application.kv_engine import KVEngine

__all__ = [
    "KVEngine",
    "CommandDispatcher",
    "ExecutionResult",
    "HELP_TEXT",
]
