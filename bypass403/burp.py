"""Export of successful bypasses as a Burp Suite items file."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import NamedTuple

from .models import DEFAULT_USER_AGENT, Result

_STATUS_TEXT = {
    200: "OK",
    201: "Created",
    301: "Moved Permanently",
    302: "Found",
    307: "Temporary Redirect",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Internal Server Error",
}

_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


class _URLParts(NamedTuple):
    scheme: str
    host: str
    path: str
    raw_query: str


def _split_url(url: str) -> _URLParts:
    scheme = "http"
    if url.startswith("https://"):
        scheme = "https"
        url = url[len("https://"):]
    elif url.startswith("http://"):
        url = url[len("http://"):]
    host, slash, rest = url.partition("/")
    path = slash + rest if slash else "/"
    path, _, query = path.partition("?")
    return _URLParts(scheme, host, path, query)


def _port(parts: _URLParts) -> str:
    if ":" in parts.host:
        return parts.host.split(":")[1]
    return "443" if parts.scheme == "https" else "80"


def _timestamp() -> str:
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    return stamp.replace("+00:00", "Z")


def _header_name(technique: str) -> str:
    parts = technique.split(":")
    return parts[1].removeprefix(" ") if len(parts) > 1 else ""


def status_text(code: int) -> str:
    """Return the reason phrase of a status code, or "Unknown"."""
    return _STATUS_TEXT.get(code, "Unknown")


def escape_xml(text: str) -> str:
    """Escape the five XML special characters."""
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def raw_request(result: Result) -> str:
    """Return the HTTP/1.1 request text that reproduces a bypass."""
    parts = _split_url(result.url)
    path = parts.path
    if parts.raw_query:
        path += "?" + parts.raw_query
    path = path or "/"

    lines = [f"{result.method} {path} HTTP/1.1", f"Host: {parts.host}"]
    if "Header" in result.technique:
        name = _header_name(result.technique)
        if name == "X-Original-URL":
            lines.append("X-Original-URL: /")
        elif name == "X-Rewrite-URL":
            lines.append("X-Rewrite-URL: /")
        elif "Forwarded-For" in name:
            lines.append(f"{name}: 127.0.0.1")
    lines.extend([
        f"User-Agent: {DEFAULT_USER_AGENT}",
        "Accept: text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language: en-US,en;q=0.5",
        "Connection: close",
        "",
    ])
    return "\r\n".join(lines) + "\r\n"


def burp_item(result: Result) -> str:
    """Return one <item> element describing a bypass."""
    parts = _split_url(result.url)
    response = (f"HTTP/1.1 {result.status_code} "
                f"{status_text(result.status_code)}\r\n\r\n")
    return "".join([
        "  <item>\n",
        f"    <time>{_timestamp()}</time>\n",
        f"    <url>{escape_xml(result.url)}</url>\n",
        f"    <host>{escape_xml(parts.host)}</host>\n",
        f"    <port>{_port(parts)}</port>\n",
        f"    <protocol>{escape_xml(parts.scheme)}</protocol>\n",
        f"    <method>{escape_xml(result.method)}</method>\n",
        f"    <path>{escape_xml(parts.path)}</path>\n",
        f'    <request base64="false">{escape_xml(raw_request(result))}</request>\n',
        f'    <response base64="false">{response}</response>\n',
        f"    <comment>{escape_xml('403 Bypass: ' + result.technique)}</comment>\n",
        "    <highlight>green</highlight>\n",
        "    <tags>\n",
        "      <tag>403 Bypass</tag>\n",
        f"      <tag>{escape_xml(result.technique)}</tag>\n",
        "    </tags>\n",
        "  </item>\n",
    ])


def generate_burp_project(results: Iterable[Result], filename: str | Path) -> Path:
    """Write the successful results to a .burp items file and return its path.

    The .burp suffix is added when missing; OSError is raised when the file
    cannot be written.
    """
    name = str(filename)
    if not name.endswith(".burp"):
        name += ".burp"
    path = Path(name)
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write('<?xml version="1.0" encoding="UTF-8"?>\n')
        handle.write(f'<items burpVersion="2023.1.2" exportTime="{_timestamp()}">\n')
        for result in results:
            if result.status_code not in (403, 404):
                handle.write(burp_item(result))
        handle.write("</items>\n")
    return path