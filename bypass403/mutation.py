"""Path mutations that produce variants of a forbidden URL."""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import quote

from .models import parse_url

Mutator = Callable[[str], list[str]]

_EXTENSIONS = (
    ".html", ".php", ".asp", ".aspx", ".jsp", ".json", ".xml",
    ".txt", ".bak", ".old", ".swp", "~",
)
_NULL_EXTENSIONS = ("%00.html", "%00.php", "%00.asp")
_SPECIAL_CHARS = (
    "%09", "%0a", "%0d", "%20", "%23", "%25", "%26", "%2b", "%3f", "%5c",
    ";", ":", "!", "$", "^", "*",
)
_PARAMETERS = (
    "?id=1", "?page=1", "?file=index", "?include=true", "?debug=true",
    "?test=1", "?admin=1", "?admin=true", "?access=1", "?access=true",
    "?show=1", "?s=1", "?p=1",
)
_TRAVERSALS = (
    "/..", "/../", "/.././", "/../../", "/../../../",
    "/%2e%2e", "/%2e%2e/", "/%2e%2e%2f",
    "/%252e%252e", "/%252e%252e/", "/%252e%252e%252f",
    "/../%00", "/.%00./",
)


def case_manipulation(path: str) -> list[str]:
    """Return the path as given, upper-cased, lower-cased and in alternating case."""
    mixed = []
    offset = 0
    for char in path:
        mixed.append(char.upper() if offset % 2 == 0 else char.lower())
        offset += len(char.encode("utf-8", "surrogateescape"))
    return [path, path.upper(), path.lower(), "".join(mixed)]


def url_encoding(path: str) -> list[str]:
    """Return percent-encoded variants of the path."""
    escaped = quote(path.encode("utf-8", "surrogateescape"), safe="$&+:=@")
    return [
        path,
        escaped,
        path.replace("/", "%2f"),
        path.replace("/", "%2F"),
        path.replace(".", "%2e"),
        path.replace(".", "%2E"),
    ]


def double_encoding(path: str) -> list[str]:
    """Return double percent-encoded variants of slashes and dots."""
    return [
        path,
        path.replace("/", "%252f"),
        path.replace("/", "%252F"),
        path.replace(".", "%252e"),
        path.replace(".", "%252E"),
    ]


def path_traversal(path: str) -> list[str]:
    """Return the path followed by plain and encoded traversal sequences."""
    return [path, *(path + suffix for suffix in _TRAVERSALS)]


def slash_manipulation(path: str) -> list[str]:
    """Return variants with doubled, tripled and backslashed separators."""
    results = [path, path.replace("/", "//"), path.replace("/", "///")]
    if not path.endswith("/"):
        results.append(path + "/")
    results.extend([
        path.replace("/", "\\"),
        path.replace("/", "\\/"),
        path.replace("/", "/\\"),
    ])
    return results


def extension_addition(path: str) -> list[str]:
    """Return the path with common file extensions appended."""
    return [
        path,
        *(path + ext for ext in _EXTENSIONS),
        *(path + ext for ext in _NULL_EXTENSIONS),
    ]


def special_characters(path: str) -> list[str]:
    """Return the path with special characters appended and inserted after slashes."""
    results = [path]
    for char in _SPECIAL_CHARS:
        results.append(path + char)
        results.append(path.replace("/", "/" + char))
    return results


def parameter_injection(path: str) -> list[str]:
    """Return the path followed by common query parameters."""
    return [path, *(path + param for param in _PARAMETERS)]


def all_mutators() -> dict[str, Mutator]:
    """Return every mutator keyed by its name."""
    return {
        "Case Manipulation": case_manipulation,
        "URL Encoding": url_encoding,
        "Double Encoding": double_encoding,
        "Path Traversal": path_traversal,
        "Slash Manipulation": slash_manipulation,
        "Extension Addition": extension_addition,
        "Special Characters": special_characters,
        "Parameter Injection": parameter_injection,
    }


def mutate_url(url: str) -> list[str]:
    """Apply every mutator to the URL's path and return the resulting URLs.

    Raises URLParseError when the URL cannot be parsed.
    """
    parsed = parse_url(url)
    return [
        str(parsed.with_path(path))
        for mutator in all_mutators().values()
        for path in mutator(parsed.path)
    ]