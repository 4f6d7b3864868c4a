#!/usr/bin/env python3
# ABOUTME: Console walkthrough of the shared-object registry
# ABOUTME: Requests keys from a fresh registry, operates on each handle, and reports instance sharing

import argparse
import sys
from typing import List, Optional

from flyweight.config import get_settings, logger_config_from_settings, setup_logging
from flyweight.exceptions import FlyweightException
from flyweight.implementations.memory import InMemorySharedObjectRegistry


def run_demo(keys: List[str], strip_keys: bool = False) -> int:
    """Request each key in order and show which handles share an instance."""
    settings = get_settings()
    registry = InMemorySharedObjectRegistry(
        strip_keys=strip_keys or settings.REGISTRY_STRIP_KEYS,
        max_key_length=settings.REGISTRY_MAX_KEY_LENGTH,
    )

    handles = []
    for index, key in enumerate(keys, start=1):
        try:
            handle = registry.get_or_create(key)
        except FlyweightException as e:
            print(f"❌ Key {key!r} rejected: {e} [{e.code}]")
            return 1
        handle.operate(f"Call {index}")
        handles.append(handle)

    print("-" * 50)
    print(f"Same instance for first and last request: {handles[0] is handles[-1]}")

    stats = registry.get_stats()
    print(f"Distinct objects: {stats.size} | hits: {stats.hits} | misses: {stats.misses}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main function with command line argument parsing."""
    parser = argparse.ArgumentParser(description="Demonstrate shared-object reuse in flyweight-registry")

    parser.add_argument(
        "keys",
        nargs="*",
        default=["A", "B", "A"],
        help="Keys to request, in order (default: A B A)",
    )
    parser.add_argument(
        "--strip-keys",
        action="store_true",
        help="Canonicalize keys by stripping surrounding whitespace",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show registry debug logging regardless of LOG_LEVEL",
    )

    args = parser.parse_args(argv)

    config = logger_config_from_settings()
    if args.verbose:
        config = config.model_copy(update={"console_level": "DEBUG"})
    setup_logging(config)

    return run_demo(args.keys, strip_keys=args.strip_keys)


if __name__ == "__main__":
    sys.exit(main())
