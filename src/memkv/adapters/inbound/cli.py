"""Command-line REPL for the key/value engine.

Reads commands from stdin one line at a time, hands each to the engine
and prints the result. The session ends on END or at end of input.

Usage:
    memkv                       # interactive, ">> " prompt
    memkv --no-prompt < cmds    # piped input
    python -m memkv --log-level DEBUG
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from memkv.application import KVEngine
from memkv.infrastructure.config import Config, get_config
from memkv.infrastructure.container import get_container
from memkv.infrastructure.logging import get_logger, setup_logging
from memkv.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from memkv.infrastructure.tracing import setup_tracing


def run_repl(
    engine: KVEngine,
    stdin: TextIO,
    stdout: TextIO,
    prompt: str = ">> ",
    stderr: TextIO | None = None,
) -> int:
    """Run the read-execute-print loop until END or end of input.

    Args:
        engine: The engine to run commands against.
        stdin: Stream to read command lines from.
        stdout: Stream for prompts, results and (by default) errors.
        prompt: Text printed before each line; empty for none.
        stderr: Stream for error messages. Errors go to stdout if None.

    Returns:
        The process exit code.
    """
    errors = stderr or stdout

    while True:
        if prompt:
            stdout.write(prompt)
            stdout.flush()

        line = stdin.readline()
        if not line:
            break

        result = engine.execute(line.strip())

        if result.error is not None:
            print(result.message, file=errors)
        if result.output:
            print(result.output, file=stdout)
        if result.terminate:
            break

    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the memkv command."""
    parser = argparse.ArgumentParser(
        prog="memkv",
        description="In-memory key/value store with nested transactions",
    )
    parser.add_argument(
        "--prompt",
        default=None,
        help="Prompt printed before each command (default from config)",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Do not print a prompt; useful for piped input",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Log level (logs are written to stderr)",
    )
    parser.add_argument(
        "--log-format",
        choices=["json", "console"],
        default=None,
        help="Log format",
    )
    parser.add_argument(
        "--metrics-port",
        type=int,
        default=None,
        metavar="PORT",
        help="Expose Prometheus metrics on this port",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the memkv console script."""
    args = build_parser().parse_args(argv)
    config = get_config()

    obs = config.observability
    setup_logging(
        level=args.log_level or obs.log_level,
        log_format=args.log_format or obs.log_format,
    )
    if obs.otel_endpoint:
        setup_tracing(obs.otel_service_name, otlp_endpoint=obs.otel_endpoint)

    container = get_container()
    container.register_singleton(Config, config)

    metrics_port = args.metrics_port
    if metrics_port is None and config.server.metrics_enabled:
        metrics_port = config.server.metrics_port
    if metrics_port is not None:
        container.register_factory(MetricsRegistry, lambda c: setup_metrics(metrics_port))
    else:
        container.register_factory(MetricsRegistry, lambda c: get_metrics())

    container.register_factory(
        KVEngine, lambda c: KVEngine(metrics=c.resolve(MetricsRegistry))
    )
    engine = container.resolve(KVEngine)

    if args.no_prompt:
        prompt = ""
    elif args.prompt is not None:
        prompt = args.prompt
    else:
        prompt = config.repl.prompt

    logger = get_logger(__name__)
    logger.info("memkv_started", metrics_port=metrics_port)

    stderr = sys.stderr if config.repl.echo_errors_to_stderr else None
    exit_code = run_repl(engine, sys.stdin, sys.stdout, prompt=prompt, stderr=stderr)

    logger.info("memkv_stopped", **engine.get_stats())
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
