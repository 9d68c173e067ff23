"""Bypass attempts that vary the HTTP request method."""

from __future__ import annotations

from .client import HttpClient, RequestError
from .models import BypassConfig, Result

TECHNIQUE = "Method Manipulation"

# Standard, WebDAV and made-up verbs, tried in this order.
METHODS = tuple(
    """
    GET POST HEAD OPTIONS PUT DELETE TRACE CONNECT PATCH PROPFIND PROPPATCH
    MKCOL COPY MOVE LOCK UNLOCK FAKE-METHOD REPORT CHECKOUT CHECKIN SEARCH
    SUBSCRIBE UNSUBSCRIBE NOTIFY BREW BASELINE-CONTROL ACL VERSION-CONTROL
    MKWORKSPACE UPDATE LABEL MERGE PURGE DEBUG FOO BAR BATMAN ADMIN
    """.split()
)


def method_manipulation(base_url: str, client: HttpClient,
                        config: BypassConfig) -> list[Result]:
    """Request the URL with every method; failed requests are left out."""
    results = []
    for method in METHODS:
        try:
            code = client.status(method, base_url, {"User-Agent": config.user_agent})
        except RequestError:
            continue
        results.append(Result(base_url, code, method, TECHNIQUE))
    return results