"""The registry of bypass techniques and a runner for all of them."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .client import HttpClient
from .methods import method_manipulation
from .models import BypassConfig, Result, URLParseError
from .paths import path_manipulation, path_traversal, url_encoding_bypass
from .protocol import protocol_bypass
from .proxy import caching_proxy_bypass
from .specialized import specialized_payloads
from .spoofing import ip_spoofing_headers
from .wordlist_bypass import combined_bypass, wordlist_path_bypass

TechniqueFunc = Callable[[str, HttpClient, BypassConfig], list[Result]]

DEFAULT_TIMEOUT = 10


@dataclass(frozen=True)
class Technique:
    """A named bypass technique and the category it is selected by."""

    name: str
    test: TechniqueFunc
    category: str


def get_techniques() -> list[Technique]:
    """Return every available technique in running order."""
    return [
        Technique("Method Manipulation", method_manipulation, "Request Method"),
        Technique("URL Path Manipulation", path_manipulation, "URL Path"),
        Technique("IP Spoofing Headers", ip_spoofing_headers, "IP Spoofing"),
        Technique("URL Encoding Bypass", url_encoding_bypass, "URL Encoding"),
        Technique("Protocol Bypass", protocol_bypass, "Protocol"),
        Technique("Path Traversal", path_traversal, "Path Traversal"),
        Technique("Caching Proxy Bypass", caching_proxy_bypass, "Proxy"),
        Technique("Specialized Payloads", specialized_payloads, "Specialized"),
        Technique("Wordlist Path Bypass", wordlist_path_bypass, "Wordlist"),
        Technique("Combined Technique Bypass", combined_bypass, "Combined"),
    ]


def run_all(config: BypassConfig, client: HttpClient | None = None) -> list[Result]:
    """Run every technique concurrently against the configured URL.

    Without a client, one that does not follow redirects is made and closed
    afterwards. Raises URLParseError naming the technique that failed.
    """
    owned = client is None
    http = client or HttpClient(timeout=DEFAULT_TIMEOUT, user_agent=config.user_agent,
                                follow_redirects=False)
    techniques = get_techniques()
    results: list[Result] = []
    errors: list[tuple[Technique, URLParseError]] = []
    try:
        with ThreadPoolExecutor(max_workers=len(techniques)) as pool:
            futures = [(t, pool.submit(t.test, config.url, http, config))
                       for t in techniques]
            for technique, future in futures:
                try:
                    results.extend(future.result())
                except URLParseError as exc:
                    errors.append((technique, exc))
    finally:
        if owned:
            http.close()

    if errors:
        technique, exc = errors[0]
        raise URLParseError(f"error in {technique.name}: {exc}") from exc
    return results