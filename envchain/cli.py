from __future__ import annotations

import argparse
import logging

from .env import Env
from .loader import LOAD_KEYS, InclusionCycleError, load
from .logging import configure_logging

logger = logging.getLogger("envchain.cli")

EXIT_OK = 0
EXIT_LOAD_FAILED = 1
EXIT_MISSING_REQUIRED = 2


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="envchain",
        description="Load a chained .env file and print its variables.",
    )
    parser.add_argument("path", help="Source .env file to load.")
    parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Keep already-set variables when merging included files.",
    )
    parser.add_argument(
        "--require",
        action="append",
        default=[],
        metavar="KEY",
        help="Fail unless KEY is set to a non-empty value. Repeatable.",
    )
    parser.add_argument(
        "--log-level",
        help="Override log level (e.g., DEBUG, INFO).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level)

    try:
        env = load(args.path, overwrite=not args.no_overwrite)
    except (OSError, UnicodeDecodeError, InclusionCycleError) as exc:
        logger.error("Failed to load %s: %s", args.path, exc)
        return EXIT_LOAD_FAILED

    missing = env.check_required(args.require)
    if missing:
        logger.error("Missing required variables: %s", ", ".join(missing))
        return EXIT_MISSING_REQUIRED

    _print_env(env)
    return EXIT_OK


def _print_env(env: Env) -> None:
    # Includes are already merged in; printing the load keys would re-run them.
    for key, value in env.items():
        if key in LOAD_KEYS:
            continue
        print(f'{key} = "{value}"')


if __name__ == "__main__":
    raise SystemExit(main())
