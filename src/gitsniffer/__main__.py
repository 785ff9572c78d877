"""gitsniffer CLI entry point.

Usage:
    gitsniffer check [--config PATH] [--env NAME] [--no-tests] [--verbose]
    gitsniffer init [--path DIR] [--force] [--no-hook]
    python -m gitsniffer check [options]
"""

from __future__ import annotations

import argparse
import sys

from gitsniffer.config import SnifferConfig
from gitsniffer.engine import SnifferEngine
from gitsniffer.exceptions import ConfigurationError
from gitsniffer.init_command import init_command
from gitsniffer.runner import ProcessRunner


def check_command(args: argparse.Namespace) -> int:
    """Execute the check command."""
    try:
        config = SnifferConfig.load(args.config)
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if args.env:
        config.app_env = args.env
    if args.no_tests:
        config.run_tests = False

    engine = SnifferEngine(config, runner=ProcessRunner(verbose=args.verbose))
    verdict = engine.run()

    if verdict.skipped:
        if args.verbose:
            print(f"ℹ️  {verdict.messages[0]}", file=sys.stderr)
    elif verdict.passed:
        print("✅ gitsniffer: commit allowed", file=sys.stderr)

    return verdict.exit_code


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gitsniffer",
        description="gitsniffer — PHP_CodeSniffer and ESLint pre-commit gate",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # check subcommand
    check_parser = subparsers.add_parser("check", help="Check staged files before a commit")
    check_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to .gitsniffer.yml config file",
    )
    check_parser.add_argument(
        "--env",
        type=str,
        default=None,
        help="Active environment name (default: app_env from config, then $APP_ENV)",
    )
    check_parser.add_argument(
        "--no-tests",
        action="store_true",
        default=False,
        help="Skip the test suite even if it is enabled in the config",
    )
    check_parser.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Echo every external command before running it",
    )

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Write a .gitsniffer.yml and install the git pre-commit hook",
    )
    init_parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Target directory to initialize (default: current directory)",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        default=False,
        help="Overwrite existing config and hook files",
    )
    init_parser.add_argument(
        "--no-hook",
        action="store_true",
        default=False,
        help="Only write the config file, do not install the git hook",
    )

    return parser


def main() -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "check":
        sys.exit(check_command(args))
    elif args.command == "init":
        sys.exit(init_command(args))
    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":  # pragma: no cover
    main()
