"""Bypass attempts built from caching and proxy related headers."""

from __future__ import annotations

from datetime import datetime, timedelta

from .client import HttpClient, RequestError
from .models import BypassConfig, Result, parse_domain

_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_Y2K = "Sat, 1 Jan 2000 00:00:00 GMT"


def _rfc1123(moment: datetime) -> str:
    zone = moment.tzname() or "UTC"
    return (f"{_DAYS[moment.weekday()]}, {moment.day:02d} "
            f"{_MONTHS[moment.month - 1]} {moment.year} "
            f"{moment:%H:%M:%S} {zone}")


def _single_headers(base_url: str, domain: str, now: datetime,
                    yesterday: datetime) -> list[tuple[str, str]]:
    return [
        ("X-Host", domain),
        ("X-Forwarded-Server", domain),
        ("X-Forwarded-Server", domain + ":80"),
        ("X-Forwarded-Server", domain + ":443"),
        ("Cache-Control", "no-transform"),
        ("Cache-Control", "no-store, no-cache, must-revalidate"),
        ("Cache-Control", "max-age=0"),
        ("Pragma", "no-cache"),
        ("X-Cache-Key", base_url),
        ("If-Modified-Since", _rfc1123(now)),
        ("If-Modified-Since", _rfc1123(yesterday)),
        ("If-Modified-Since", _Y2K),
        ("If-None-Match", '"12345"'),
        ("If-None-Match", 'W/"12345"'),
        ("If-Range", '"12345"'),
        ("Range", "bytes=0-100"),
        ("Accept-Encoding", "gzip, deflate"),
        ("Accept-Encoding", "identity"),
        ("Via", "1.1 " + domain),
        ("X-Forwarded-For", "127.0.0.1, " + domain),
        ("CDN-Loop", domain),
        ("X-Cache", "HIT"),
        ("X-Cache", "MISS"),
        ("X-Forwarded-CDN-Key", domain),
        ("Connection", "close"),
        ("Connection", "keep-alive"),
        ("X-URL-Scheme", "http"),
        ("X-URL-Scheme", "https"),
        ("X-Real-Proto", "http"),
        ("X-Real-Proto", "https"),
    ]


def _header_sets(yesterday: datetime) -> list[dict[str, str]]:
    return [
        {"Cache-Control": "no-cache", "Pragma": "no-cache"},
        {"Cache-Control": "max-age=0", "If-Modified-Since": _Y2K},
        {"If-None-Match": "*", "If-Modified-Since": _rfc1123(yesterday)},
    ]


def caching_proxy_bypass(base_url: str, client: HttpClient,
                         config: BypassConfig) -> list[Result]:
    """GET the URL with single cache/proxy headers, then with combined sets.

    Failed requests are left out of the results.
    """
    domain = parse_domain(base_url)
    now = datetime.now().astimezone()
    yesterday = now - timedelta(hours=24)

    results = []
    for header, value in _single_headers(base_url, domain, now, yesterday):
        try:
            code = client.status("GET", base_url, {
                "User-Agent": config.user_agent,
                header: value,
            })
        except RequestError:
            continue
        results.append(Result(base_url, code, "GET", "Proxy Cache: " + header))

    for number, header_set in enumerate(_header_sets(yesterday), start=1):
        try:
            code = client.status("GET", base_url,
                                 {"User-Agent": config.user_agent, **header_set})
        except RequestError:
            continue
        results.append(Result(base_url, code, "GET",
                              f"Combined Proxy Headers Set {number}"))
    return results