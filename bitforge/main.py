"""Command-line entry point that runs the engine loop."""

from __future__ import annotations

import argparse

from .instance import VERSION_STRING, BitforgeInstance
from .logger import flush_logs


def main(argv: list[str] | None = None) -> int:
    """Run the engine until it asks to exit and return its exit code."""
    parser = argparse.ArgumentParser(prog="bitforge", description=f"Bitforge engine {VERSION_STRING}")
    parser.parse_args(argv)

    instance = BitforgeInstance()
    try:
        while not instance.is_exit_requested():
            instance.tick()
    finally:
        instance.shutdown()
        flush_logs()
    return instance.exit_code()


if __name__ == "__main__":
    raise SystemExit(main())