#!/usr/bin/env python3
"""
Command-line interface for demoshop-e2e.

Usage:
    demoshop [OPTIONS] COMMAND

Commands:
    config                  Show the effective suite configuration
    register                Register a throwaway account and store it
    credentials show|clear  Inspect or remove the stored credential record

Options:
    --debug         Enable debug logging
    --version       Show version and exit
    --help          Show this message and exit
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from playwright.async_api import async_playwright

from demoshop import __version__
from demoshop.accounts import register_account
from demoshop.config import Settings, get_settings
from demoshop.credentials import Credentials, CredentialStore
from demoshop.exceptions import DemoShopError

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, level: str = "INFO") -> None:
    """
    Configure logging for the command-line tool.

    Args:
        debug: Enable debug logging, overriding ``level``.
        level: Log level name from the settings.
    """
    log_level = logging.DEBUG if debug else getattr(logging, level, logging.INFO)
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    if not debug:
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="demoshop",
        description="demoshop-e2e - Demo Web Shop browser test tooling",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Show configuration:
        demoshop config

    Create the shared test account before a run:
        PASSWORD=secret demoshop register

    Run the browser suite:
        pytest -m e2e
        """,
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"demoshop-e2e {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("config", help="Show the effective configuration")

    register = subparsers.add_parser(
        "register", help="Register a throwaway account and store its credentials"
    )
    register.add_argument("--first-name", default="Test")
    register.add_argument("--last-name", default="User")
    register.add_argument("--gender", choices=["male", "female"], default="male")
    register.add_argument(
        "--no-save",
        action="store_true",
        help="Print the credentials without writing the credentials file",
    )

    credentials = subparsers.add_parser(
        "credentials", help="Inspect or remove the stored credential record"
    )
    credentials.add_argument("action", choices=["show", "clear"])

    return parser


def cmd_config(settings: Settings) -> int:
    """Print the effective settings."""
    print("Demo Web Shop E2E Configuration")
    print("=" * 50)
    for key, value in settings.summary().items():
        print(f"{key:<22} {value}")
    return 0


async def _register(settings: Settings, args: argparse.Namespace) -> Credentials:
    password = settings.require_password()
    async with async_playwright() as pw:
        browser_type = getattr(pw, settings.browser.name)
        browser = await browser_type.launch(**settings.browser.to_launch_options())
        try:
            context = await browser.new_context(
                **settings.browser.to_context_options(settings.base_url)
            )
            context.set_default_timeout(settings.timeout)
            page = await context.new_page()
            return await register_account(
                page,
                password,
                base_url=settings.base_url,
                first_name=args.first_name,
                last_name=args.last_name,
                gender=args.gender,
            )
        finally:
            await browser.close()


def cmd_register(settings: Settings, args: argparse.Namespace) -> int:
    """Register an account, then store it unless ``--no-save``."""
    settings.require_password()
    credentials = asyncio.run(_register(settings, args))
    if not args.no_save:
        CredentialStore(settings.credentials_file).save(credentials)
    print(credentials.email)
    return 0


def cmd_credentials(settings: Settings, action: str) -> int:
    """Show or clear the stored credential record."""
    store = CredentialStore(settings.credentials_file)
    if action == "clear":
        removed = store.clear()
        print("Removed" if removed else "Nothing to remove", store.path)
        return 0

    credentials = store.load(strict=True)
    if credentials is None:
        print(f"No credentials stored at {store.path}", file=sys.stderr)
        return 1
    print(credentials.email)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the demoshop command.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except (DemoShopError, ValueError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(args.debug, settings.log_level)

    try:
        if args.command == "config":
            return cmd_config(settings)
        if args.command == "register":
            return cmd_register(settings, args)
        return cmd_credentials(settings, args.action)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    except DemoShopError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    except Exception as e:
        logger.exception(f"Command {args.command!r} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
