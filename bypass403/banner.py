"""Start-up banner and version information."""

from __future__ import annotations

import os
import platform
import sys
from collections.abc import Iterable
from pathlib import Path

from termcolor import colored

VERSION = "v1.0.0"

_BANNER_WIDTH = 55


def _framed(lines: Iterable[str], width: int = _BANNER_WIDTH) -> str:
    rows = [" ╔" + "═" * width + "╗"]
    rows.extend(" ║" + line.center(width) + "║" for line in lines)
    rows.append(" ╚" + "═" * width + "╝")
    return "\n".join(rows)


DEFAULT_BANNER = _framed([
    "",
    "b y p a s s 4 0 3",
    "",
    "FORBIDDEN GATES SHALL FALL BEFORE ME",
    "403 BYPASS TOOLKIT",
    "",
])


def _program_dir() -> Path | None:
    if not sys.argv or not sys.argv[0]:
        return None
    return Path(os.path.realpath(sys.argv[0])).parent


def _default_search_paths() -> list[Path]:
    paths = [Path("banner.txt"), Path("./banner.txt"), Path("../banner.txt")]
    program_dir = _program_dir()
    if program_dir is not None:
        paths.append(program_dir / "banner.txt")
    return paths


def load_banner(search_paths: Iterable[str | Path] | None = None) -> str:
    """Return the first readable banner file's text, or the built-in banner."""
    candidates = _default_search_paths() if search_paths is None else search_paths
    for candidate in candidates:
        try:
            return Path(candidate).read_text(encoding="utf-8", errors="replace")
        except OSError:
            continue
    return DEFAULT_BANNER


def print_banner() -> None:
    """Print the banner in cyan followed by a blank line."""
    print(colored(load_banner(), "cyan"))
    print()


def version() -> str:
    """Return the tool version."""
    return VERSION


def print_info() -> None:
    """Print version and platform information."""
    print(f"bypass403 {version()}")
    print(f"Python version: {platform.python_version()}")
    print(f"OS/Arch: {sys.platform}/{platform.machine()}")
    print()