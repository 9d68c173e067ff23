"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .banner import print_banner, print_info
from .config import Config, ConfigError
from .models import DEFAULT_USER_AGENT, DEFAULT_WORDLIST
from .runner import Runner

_CATEGORY_HELP = ("Category of bypass techniques to try (Method, Path, Headers, IP, "
                  "Encoding, Protocol, Traversal, Proxy, Advanced)")


def build_parser() -> argparse.ArgumentParser:
    """Return the parser for the command-line options."""
    parser = argparse.ArgumentParser(
        prog="bypass403",
        description="A tool to bypass 403 Forbidden responses",
        allow_abbrev=False,
    )

    def option(name: str, **kwargs: object) -> None:
        parser.add_argument(f"-{name}", f"--{name}", **kwargs)

    option("u", dest="url", default="", help="URL that returns 403 Forbidden")
    option("t", dest="threads", type=int, default=10,
           help="Number of concurrent threads")
    option("o", dest="output_file", default="", help="Output file to save results")
    option("timeout", dest="timeout", type=int, default=10,
           help="HTTP request timeout in seconds")
    option("v", dest="verbose", action="store_true", help="Verbose mode")
    option("all", dest="all_techniques", action="store_true",
           help="Try all bypass techniques")
    option("c", dest="category", default="", help=_CATEGORY_HELP)
    option("ua", dest="user_agent", default=DEFAULT_USER_AGENT, help="User-Agent to use")
    option("w", dest="wordlist_path", default=DEFAULT_WORDLIST,
           help="Path to wordlist file for bypass attempts")
    option("version", dest="version", action="store_true",
           help="Print version information and exit")
    return parser


def _print_usage(parser: argparse.ArgumentParser) -> None:
    print("403 Bypass - A tool to bypass 403 Forbidden responses")
    print("Usage: bypass403 -u https://example.com/forbidden")
    print("\nOptions:")
    print(parser.format_help())
    print("\nExamples:")
    print("  bypass403 -u https://example.com/admin -v -o results.txt")
    print("  bypass403 -u https://example.com/admin -w payloads/bypasses.txt -all")
    print("\nNote: Successful bypasses are automatically saved to forbidden_bypass.txt")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the options, run the bypass attempts and return an exit status."""
    print_banner()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print_info()
        return 0

    config = Config(**vars(args))
    try:
        config.validate()
    except ConfigError as exc:
        print(f"Error: {exc}")
        _print_usage(parser)
        return 1

    Runner(config).run()
    return 0