"""Allow running the REPL with ``python -m memkv``."""

from memkv.adapters.inbound.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
