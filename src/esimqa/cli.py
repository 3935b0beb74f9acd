#!/usr/bin/env python3
"""
Command-line interface for esimqa.

This module provides the ``esimqa`` entry point, a thin runner that
configures logging and hands the selected suite to pytest.

Usage:
    esimqa [SUITE] [OPTIONS] [-- PYTEST_ARGS]

Suites:
    unit    Offline tests only (default)
    web     Storefront purchase flow
    api     Partner API order and eSIM listing suites
    all     Everything

Options:
    --live          Run the live web/API tests instead of skipping them
    --headed        Show the browser window
    --browser NAME  chromium, firefox or webkit
    --debug         Enable debug logging
    --version       Show version and exit
    --help          Show this message and exit
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

import pytest

from esimqa import __version__

SUITE_PATHS = {
    "unit": "",
    "web": "e2e",
    "api": "api",
    "all": "",
}


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for the runner.

    Args:
        debug: Enable debug logging.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )

    if not debug:
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Everything after a literal ``--`` is passed to pytest unchanged.

    Returns:
        Parsed arguments namespace, with ``pytest_args`` set.
    """
    argv = list(sys.argv[1:] if argv is None else argv)
    if "--" in argv:
        split = argv.index("--")
        argv, passthrough = argv[:split], argv[split + 1:]
    else:
        passthrough = []

    parser = argparse.ArgumentParser(
        prog="esimqa",
        description="esimqa - eSIM marketplace regression suite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    Run the offline tests:
        esimqa

    Run the API suites against the sandbox:
        esimqa api --live

    Watch the purchase flow in Firefox:
        esimqa web --live --headed --browser firefox

Environment Variables:
    ESIMQA_API_CLIENT_ID      Partner API client id
    ESIMQA_API_CLIENT_SECRET  Partner API client secret
    ESIMQA_CONFIG_FILE        Optional TOML settings file
        """,
    )

    parser.add_argument(
        "suite",
        nargs="?",
        choices=sorted(SUITE_PATHS),
        default="unit",
        help="Which suite to run (default: unit)",
    )

    parser.add_argument(
        "--tests-dir",
        default="tests",
        help="Root of the test tree (default: tests)",
    )

    parser.add_argument(
        "--live",
        action="store_true",
        help="Run tests that talk to the live storefront and API",
    )

    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window",
    )

    parser.add_argument(
        "--browser",
        choices=["chromium", "firefox", "webkit"],
        default=None,
        help="Browser engine for the web suite",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"esimqa {__version__}",
    )

    args = parser.parse_args(argv)
    args.pytest_args = passthrough
    return args


def build_pytest_args(args: argparse.Namespace) -> list[str]:
    """
    Translate runner options into a pytest argument list.

    Args:
        args: Namespace from parse_args().

    Returns:
        Arguments for pytest.main().
    """
    target = Path(args.tests_dir)
    if SUITE_PATHS[args.suite]:
        target = target / SUITE_PATHS[args.suite]

    pytest_args = [str(target)]
    if args.suite == "unit":
        pytest_args += ["-m", "not live"]
    if args.live:
        pytest_args.append("--live")
    if args.debug:
        pytest_args += ["--log-cli-level", "DEBUG"]
    return pytest_args + list(args.pytest_args)


def apply_environment(args: argparse.Namespace) -> None:
    """Export browser options so the test session's settings pick them up."""
    if args.headed:
        os.environ["ESIMQA_WEB_HEADLESS"] = "false"
    if args.browser:
        os.environ["ESIMQA_WEB_BROWSER"] = args.browser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the esimqa runner.

    Returns:
        pytest's exit code.
    """
    args = parse_args(argv)

    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    logger.info(f"Starting esimqa v{__version__} ({args.suite} suite)")

    apply_environment(args)
    pytest_args = build_pytest_args(args)
    logger.debug(f"pytest arguments: {pytest_args}")

    exit_code = int(pytest.main(pytest_args))
    logger.info(f"pytest exited with code {exit_code}")
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
