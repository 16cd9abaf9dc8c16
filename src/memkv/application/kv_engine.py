"""Key/value engine - unified entry point for the store.

This module provides the KVEngine class that wires the store, the
transaction stack, the line parser and the dispatcher together behind a
single execute() call.

Usage:
    from memkv.application import KVEngine

    engine = KVEngine()
    engine.execute("SET a 10")
    engine.execute("BEGIN")
    engine.execute("SET a 20")
    engine.execute("ROLLBACK")
    engine.execute("GET a").output      # "10"
    engine.execute("END").terminate     # True

The engine does no I/O of its own: it takes one already-read line and
returns an ExecutionResult. Hosts (the REPL, tests, a service handler)
decide what to print and what END means for them.
"""

from __future__ import annotations

import threading
import time
from typing import Iterable

from memkv.adapters.inbound.command_parser import CommandParser, CommandPlan, Keyword
from memkv.adapters.outbound.in_memory_store import InMemoryKeyValueStore
from memkv.application.dispatcher import CommandDispatcher, ExecutionResult
from memkv.domain.services.transaction_stack import NestedTransactionStack
from memkv.domain.value_objects import CommandError
from memkv.infrastructure.logging import get_logger
from memkv.infrastructure.metrics import MetricsRegistry, get_metrics
from memkv.infrastructure.tracing import trace_span
from memkv.ports.outbound.key_value_store import KeyValueStore

_TRANSACTION_EVENTS = {
    Keyword.BEGIN: "begin",
    Keyword.COMMIT: "commit",
    Keyword.ROLLBACK: "rollback",
}


class KVEngine:
    """Transactional key/value engine driven by text commands.

    Features:
        - GET / SET / UNSET / NUMEQUALTO against an in-memory store
        - Nested BEGIN blocks, ROLLBACK of the innermost block,
          COMMIT of all blocks
        - Non-fatal errors reported in the result
        - END reported as a terminate outcome

    Thread Safety:
        One command runs at a time. A single lock covers parsing,
        dispatch and transaction bookkeeping, since a transaction spans
        several commands that must not interleave with other callers.
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            store: Store to run commands against. A fresh in-memory
                store is created if None.
            metrics: Metrics registry. Uses the global registry if None.
        """
        self._store = store if store is not None else InMemoryKeyValueStore()
        self._transactions = NestedTransactionStack(self._store)
        self._parser = CommandParser()
        self._dispatcher = CommandDispatcher(self._store, self._transactions)
        self._metrics = metrics or get_metrics()
        self._logger = get_logger(__name__)

        self._lock = threading.Lock()
        self._commands_executed = 0

    @property
    def store(self) -> KeyValueStore:
        """Get the store commands run against."""
        return self._store

    @property
    def transactions(self) -> NestedTransactionStack:
        """Get the transaction stack."""
        return self._transactions

    def execute(self, line: str) -> ExecutionResult:
        """Execute one command line.

        Args:
            line: A single line of input.

        Returns:
            ExecutionResult with the printable output, the error if the
            command was rejected, and whether the session should end.
        """
        with self._lock:
            plan: CommandPlan | None = None
            undone_before = self._transactions.get_stats().commands_undone_total
            start = time.perf_counter()

            with trace_span("memkv.execute") as span:
                try:
                    plan = self._parser.parse(line)
                    span.set_attribute("memkv.command", plan.keyword.value or "NOOP")
                    result = self._dispatcher.dispatch(plan)
                except CommandError as e:
                    span.set_attribute("memkv.error", type(e).__name__)
                    result = ExecutionResult(error=e)

            elapsed = time.perf_counter() - start
            self._commands_executed += 1
            self._record(plan, result, elapsed, undone_before)
            return result

    def execute_many(self, lines: Iterable[str]) -> list[ExecutionResult]:
        """Execute several command lines in order.

        Execution stops after a line that asks to terminate; the
        remaining lines are not run.

        Args:
            lines: Command lines.

        Returns:
            One ExecutionResult per line that was run.
        """
        results = []
        for line in lines:
            result = self.execute(line)
            results.append(result)
            if result.terminate:
                break
        return results

    def get_stats(self) -> dict:
        """Get engine statistics.

        Returns:
            Dictionary with store size and transaction counters.
        """
        with self._lock:
            txn_stats = self._transactions.get_stats()
            return {
                "keys": len(self._store),
                "transaction_depth": txn_stats.depth,
                "commands_executed": self._commands_executed,
                "transactions": {
                    "begun": txn_stats.begun_total,
                    "committed": txn_stats.committed_total,
                    "rolled_back": txn_stats.rolled_back_total,
                    "commands_undone": txn_stats.commands_undone_total,
                },
            }

    def _record(
        self,
        plan: CommandPlan | None,
        result: ExecutionResult,
        elapsed: float,
        undone_before: int,
    ) -> None:
        """Log the command and update metrics."""
        command = plan.keyword.value if plan is not None else "UNKNOWN"
        if plan is not None and plan.keyword == Keyword.NOOP:
            return

        status = "success" if result.success else "error"
        self._metrics.commands_total.labels(command=command, status=status).inc()
        self._metrics.command_latency_seconds.labels(command=command).observe(elapsed)
        self._metrics.keys.set(len(self._store))
        self._metrics.transaction_depth.set(self._transactions.depth)

        if not result.success:
            self._logger.warning(
                "command_rejected",
                command=command,
                error=type(result.error).__name__,
                message=result.message,
            )
            return

        self._logger.debug("command_executed", command=str(plan), elapsed_s=elapsed)

        event = _TRANSACTION_EVENTS.get(plan.keyword)
        if event is None:
            return

        self._metrics.transactions_total.labels(status=event).inc()
        undone = self._transactions.get_stats().commands_undone_total - undone_before
        if undone:
            self._metrics.undo_operations_total.inc(undone)
        self._logger.info(
            f"transaction_{event}",
            depth=self._transactions.depth,
            undone=undone,
        )
