"""Command-line entry point for ynab-vault."""

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from .exceptions import YNABError
from .vault import VaultConfig, run
from .ynab_client import DEFAULT_BASE_URL, YNABClient

TOKEN_ENV_VAR = "YNAB_BEARER_TOKEN"
LOGGER_NAME = "ynab_vault"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ynab-vault",
        description="Download every YNAB budget as a timestamped JSON file.",
    )
    parser.add_argument(
        "--token",
        default="",
        help=f"YNAB API bearer token (or set {TOKEN_ENV_VAR} env var)",
    )
    parser.add_argument("--output", default="budgets", help="Directory to save budget JSON files")
    parser.add_argument("--url", default=DEFAULT_BASE_URL, help="Base API URL for budgets endpoint")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def configure_logging(verbose: bool) -> logging.Logger:
    """Return the package logger, writing to stderr only when verbose.

    When not verbose the logger gets a NullHandler and stops propagating,
    so nothing reaches the root logger either.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = False
    if verbose:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())
    return logger


def resolve_token(flag_value: Optional[str]) -> Optional[str]:
    """Prefer the --token flag, then the environment (including .env)."""
    if flag_value:
        return flag_value
    load_dotenv(find_dotenv(usecwd=True))
    return os.getenv(TOKEN_ENV_VAR) or None


async def _run(args: argparse.Namespace, token: str, logger: logging.Logger) -> int:
    async with YNABClient(token, base_url=args.url, logger=logger) as client:
        config = VaultConfig(
            client=client,
            output_dir=Path(args.output),
            logger=logger,
        )
        return await run(config)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ynab-vault command."""
    args = build_parser().parse_args(argv)

    token = resolve_token(args.token)
    if not token:
        print(
            f"Error: bearer token must be provided via --token or {TOKEN_ENV_VAR} env var",
            file=sys.stderr,
        )
        return 1

    logger = configure_logging(args.verbose)

    try:
        count = asyncio.run(_run(args, token, logger))
    except (YNABError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Processed {count} budgets", file=sys.stderr)
    return 0
