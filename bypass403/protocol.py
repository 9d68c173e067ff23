"""Bypass attempts that change the URL's scheme or its spelling."""

from __future__ import annotations

from .client import HttpClient, RequestError
from .models import BypassConfig, Result, parse_url

PROTOCOLS = (
    "http://",
    "https://",
    "http:\\\\",
    "https:\\\\",
    "ftp://",
    "ftps://",
    "gopher://",
    "file://",
    "http:/",
    "https:/",
    "//",
)

_FORM_TYPE = "application/x-www-form-urlencoded"


def protocol_bypass(base_url: str, client: HttpClient,
                    config: BypassConfig) -> list[Result]:
    """Request the URL under other schemes with GET and then POST.

    The base URL's own scheme is left out, except the protocol-relative form.
    Raises URLParseError when the base URL cannot be parsed.
    """
    parsed = parse_url(base_url)
    suffix = parsed.host + parsed.path
    if parsed.raw_query:
        suffix += "?" + parsed.raw_query

    results = []
    for protocol in PROTOCOLS:
        if protocol != "//" and base_url.startswith(protocol):
            continue
        url = protocol + suffix
        technique = "Protocol Change: " + protocol
        try:
            code = client.status("GET", url, {"User-Agent": config.user_agent})
        except RequestError:
            continue
        results.append(Result(url, code, "GET", technique))

        try:
            code = client.status("POST", url, {
                "User-Agent": config.user_agent,
                "Content-Type": _FORM_TYPE,
            })
        except RequestError:
            continue
        results.append(Result(url, code, "POST", technique))
    return results