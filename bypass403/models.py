"""Core value types: bypass results, technique configuration and URLs."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from urllib.parse import unquote

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
DEFAULT_WORDLIST = "payloads/bypasses.txt"

_RESERVED = frozenset("$&+,/:;=?@")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class URLParseError(ValueError):
    """Raised when a URL cannot be parsed."""


@dataclass(frozen=True)
class Result:
    """The outcome of one bypass attempt."""

    url: str
    status_code: int
    method: str
    technique: str


@dataclass(frozen=True)
class BypassConfig:
    """Settings shared by every bypass technique."""

    url: str
    user_agent: str = DEFAULT_USER_AGENT
    wordlist_path: str = DEFAULT_WORDLIST
    verbose: bool = False
    random_ua: bool = False


def _should_escape(char: str, mode: str) -> bool:
    if char.isascii() and char.isalnum():
        return False
    if char in "-_.~":
        return False
    if char in _RESERVED:
        return mode == "path" and char == "?"
    if mode == "fragment" and char in "!()*":
        return False
    return True


def _escape(text: str, mode: str) -> str:
    out = []
    for byte in text.encode("utf-8", "surrogateescape"):
        char = chr(byte)
        out.append(f"%{byte:02X}" if _should_escape(char, mode) else char)
    return "".join(out)


def _unescape(text: str) -> str:
    bad = _BAD_ESCAPE.search(text)
    if bad:
        start = bad.start()
        raise URLParseError(f'invalid URL escape "{text[start:start + 3]}"')
    return unquote(text, errors="surrogateescape")


@dataclass(frozen=True)
class ParsedURL:
    """A parsed URL whose path is held decoded and escaped again on output."""

    scheme: str = ""
    user: str | None = None
    host: str = ""
    path: str = ""
    raw_query: str = ""
    fragment: str = ""
    opaque: str = ""
    force_query: bool = False

    def with_path(self, path: str) -> ParsedURL:
        """Return a copy with the decoded path replaced."""
        return replace(self, path=path)

    def with_query(self, query: str) -> ParsedURL:
        """Return a copy with the raw query replaced."""
        return replace(self, raw_query=query)

    def __str__(self) -> str:
        parts: list[str] = []
        if self.scheme:
            parts.append(self.scheme + ":")
        if self.opaque:
            parts.append(self.opaque)
        else:
            if self.scheme or self.host or self.user is not None:
                if self.host or self.path or self.user is not None:
                    parts.append("//")
                if self.user is not None:
                    parts.append(self.user + "@")
                parts.append(self.host)
            path = _escape(self.path, "path")
            if path and not path.startswith("/") and self.host:
                parts.append("/")
            if not "".join(parts) and ":" in path.partition("/")[0]:
                parts.append("./")
            parts.append(path)
        if self.force_query or self.raw_query:
            parts.append("?" + self.raw_query)
        if self.fragment:
            parts.append("#" + _escape(self.fragment, "fragment"))
        return "".join(parts)


def _split_scheme(raw: str) -> tuple[str, str]:
    for index, char in enumerate(raw):
        if char.isascii() and char.isalpha():
            continue
        if char.isascii() and (char.isdigit() or char in "+-."):
            if index == 0:
                return "", raw
            continue
        if char == ":":
            if index == 0:
                raise URLParseError("missing protocol scheme")
            return raw[:index].lower(), raw[index + 1:]
        return "", raw
    return "", raw


def _valid_port(port: str) -> bool:
    if not port:
        return True
    return port[0] == ":" and all(c in "0123456789" for c in port[1:])


def _parse_host(host: str) -> str:
    if host.startswith("["):
        end = host.find("]")
        if end < 0:
            raise URLParseError("missing ']' in host")
        port = host[end + 1:]
        if not _valid_port(port):
            raise URLParseError(f'invalid port "{port}" after host')
        return host
    colon = host.rfind(":")
    if colon >= 0 and not _valid_port(host[colon:]):
        raise URLParseError(f'invalid port "{host[colon:]}" after host')
    return host


def parse_url(raw: str) -> ParsedURL:
    """Parse an absolute or relative URL, raising URLParseError when malformed."""
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in raw):
        raise URLParseError("invalid control character in URL")
    rest, has_fragment, fragment_raw = raw.partition("#")
    fragment = _unescape(fragment_raw) if has_fragment else ""
    scheme, rest = _split_scheme(rest)

    force_query = False
    if rest.endswith("?") and rest.count("?") == 1:
        force_query = True
        rest, query = rest[:-1], ""
    else:
        rest, _, query = rest.partition("?")

    if not rest.startswith("/"):
        if scheme:
            return ParsedURL(scheme=scheme, opaque=rest, raw_query=query,
                             fragment=fragment, force_query=force_query)
        if ":" in rest.partition("/")[0]:
            raise URLParseError("first path segment in URL cannot contain colon")

    user: str | None = None
    host = ""
    if rest.startswith("//") and (scheme or not rest.startswith("///")):
        authority, slash, remainder = rest[2:].partition("/")
        rest = slash + remainder
        userinfo, at, host_part = authority.rpartition("@")
        if at:
            user = userinfo
        else:
            host_part = authority
        host = _parse_host(host_part)

    return ParsedURL(scheme=scheme, user=user, host=host, path=_unescape(rest),
                     raw_query=query, fragment=fragment, force_query=force_query)


def parse_domain(raw: str) -> str:
    """Return the host (with port) of a URL, or an empty string if it cannot be parsed."""
    try:
        return parse_url(raw).host
    except URLParseError:
        return ""