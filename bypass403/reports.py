"""Saving bypass results and rendering reproduction snippets."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from .models import Result

FORBIDDEN_BYPASS_FILE = "forbidden_bypass.txt"

_GOOGLEBOT = "Googlebot/2.1 (+http://www.google.com/bot.html)"
_DAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _rfc1123(moment: datetime) -> str:
    zone = moment.tzname() or "UTC"
    return (f"{_DAYS[moment.weekday()]}, {moment.day:02d} "
            f"{_MONTHS[moment.month - 1]} {moment.year} "
            f"{moment:%H:%M:%S} {zone}")


def _is_bypass(result: Result) -> bool:
    return result.status_code not in (403, 404)


def _header_name(technique: str) -> str:
    parts = technique.split(":")
    return parts[1].removeprefix(" ") if len(parts) > 1 else ""


def _format_result(number: int, result: Result) -> str:
    return (f"{number}. {result.url} ({result.status_code}) - "
            f"Technique: {result.technique}/{result.method}")


def save_forbidden_bypass(url: str, path: str | Path = FORBIDDEN_BYPASS_FILE) -> None:
    """Append a bypass URL to the running list of bypasses."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(url + "\n")


def save_results(results: Iterable[Result], filename: str | Path,
                 target_url: str) -> None:
    """Write a report of the results, with snippets for each real bypass."""
    results = list(results)
    lines = [
        "=== 403 Bypass Results ===",
        f"Target URL: {target_url}",
        f"Date: {_rfc1123(datetime.now().astimezone())}",
        "",
    ]
    lines.extend(_format_result(n, r) for n, r in enumerate(results, start=1))
    lines.extend([
        "",
        "=== Tips ===",
        "1. Check all successful responses manually to confirm they provide actual access",
        "2. Some bypasses might only provide partial access or different content",
        "3. Combine multiple techniques for better results",
        "4. Try advanced mutations and custom wordlists for better coverage",
        "",
        "=== Examples for successful bypasses ===",
    ])
    for result in filter(_is_bypass, results):
        lines.append(f"CURL: {curl_command(result)}")
        lines.append(f"Python: {python_request(result)}")
        lines.append("")
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write("\n".join(lines) + "\n")


def contains_category(technique_category: str, user_category: str) -> bool:
    """Tell whether a technique category matches a user's choice, ignoring case."""
    return user_category.lower() in technique_category.lower()


def curl_command(result: Result) -> str:
    """Return a curl command that repeats the bypass."""
    command = f"curl -X {result.method} '{result.url}'"
    if "Header" in result.technique:
        name = _header_name(result.technique)
        if name == "X-Original-URL":
            command += " -H 'X-Original-URL: /'"
        elif name == "X-Rewrite-URL":
            command += " -H 'X-Rewrite-URL: /'"
        elif "Forwarded-For" in name:
            command += f" -H '{name}: 127.0.0.1'"
        elif name == "User-Agent":
            command += f" -H 'User-Agent: {_GOOGLEBOT}'"
    return command + " -k"


def python_request(result: Result) -> str:
    """Return a short requests script that repeats the bypass."""
    code = "import requests\n\n"
    function = result.method.lower()
    if "Header" in result.technique:
        name = _header_name(result.technique)
        code += "headers = {\n"
        if name == "X-Original-URL":
            code += "    'X-Original-URL': '/',\n"
        elif name == "X-Rewrite-URL":
            code += "    'X-Rewrite-URL': '/',\n"
        elif "Forwarded-For" in name:
            code += f"    '{name}': '127.0.0.1',\n"
        elif name == "User-Agent":
            code += f"    'User-Agent': '{_GOOGLEBOT}',\n"
        code += "}\n\n"
        code += f"response = requests.{function}('{result.url}', headers=headers, verify=False)\n"
    else:
        code += f"response = requests.{function}('{result.url}', verify=False)\n"
    code += "print(response.status_code)\n"
    code += "print(response.text)\n"
    return code