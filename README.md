# bypass403

`bypass403` checks whether a URL that answers **403 Forbidden** can be reached
through a different request: another HTTP method, a rewritten or encoded path,
path traversal sequences, another scheme, spoofed client-address headers, proxy
and cache headers, hand-picked special payloads, paths from a wordlist, and
combinations of these.

Use it only against systems you are authorised to test. TLS certificates are
not verified.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
bypass403 -u https://example.com/admin
```

The tool prints a banner (the contents of a `banner.txt` found in the current
directory, its parent or the program's directory, otherwise a built-in one),
then requests the URL once. If the answer is not 403, or the request fails, it
asks whether to continue; anything but `y` or `Y` ends the run. It then runs
the selected techniques and reports every response whose status is not 403,
404 or 0 as a possible bypass. Requests follow up to 10 redirects.

Options (each may also be given with two dashes, e.g. `--u`):

| Option            | Meaning                                                   | Default                  |
|-------------------|-----------------------------------------------------------|--------------------------|
| `-u URL`          | URL that returns 403 Forbidden (required)                 |                          |
| `-t N`            | number of techniques run at the same time (at least 1)    | 10                       |
| `-o FILE`         | write a report of the bypasses found to FILE              |                          |
| `-timeout SECS`   | request timeout in seconds (at least 1)                   | 10                       |
| `-v`              | verbose: show failed attempts and warnings too            | off                      |
| `-all`            | run every technique, whatever `-c` says                   | off                      |
| `-c CATEGORY`     | run only techniques whose category contains CATEGORY      | all                      |
| `-ua AGENT`       | User-Agent sent with each request                         | a desktop Chrome string  |
| `-w FILE`         | wordlist of path payloads, one per line                   | `payloads/bypasses.txt`  |
| `-version`        | print version and platform information and exit           |                          |

A missing or malformed URL, or a thread count or timeout below 1, prints the
error with usage help and exits with status 1.

Categories are matched case-insensitively as substrings of these technique
categories: `Request Method`, `URL Path`, `IP Spoofing`, `URL Encoding`,
`Protocol`, `Path Traversal`, `Proxy`, `Specialized`, `Wordlist`, `Combined`.
So `-c path` runs both the URL path and the path traversal techniques; a value
that matches no category runs nothing.

Examples:

```
bypass403 -u https://example.com/admin -v -o results.txt
bypass403 -u https://example.com/admin -w payloads/bypasses.txt -all
bypass403 -u https://example.com/admin -c traversal
```

Every bypass found is appended to `forbidden_bypass.txt` in the current
directory. At the end the tool prints a summary together with an example
`curl` command and a Python `requests` snippet for the first bypass. The `-o`
report holds the target, the date, the numbered bypasses, some tips and a
`curl` and Python snippet for each of them.

If the wordlist cannot be read, the wordlist technique is skipped and the
combined technique uses a small built-in set of payloads, unless verbose mode
is on, in which case the longer built-in list from
`bypass403.wordlist.default_payloads()` is used by both. The combined
technique uses at most the first ten payloads.

## Library use

The pieces the command is built from can be used directly. To list path
variations of a URL without sending any request:

```python
from bypass403.mutation import mutate_url

for candidate in mutate_url("https://example.com/admin"):
    print(candidate)
```

To run every technique against a URL and collect all responses (this client
does not follow redirects):

```python
from bypass403.models import BypassConfig
from bypass403.techniques import run_all

for result in run_all(BypassConfig(url="https://example.com/admin")):
    print(result.status_code, result.method, result.technique, result.url)
```

Other useful parts:

- `bypass403.techniques.get_techniques()` lists the techniques with their
  names and categories.
- `bypass403.runner.Runner(config).run()` performs a whole command-line run
  from a `bypass403.config.Config` and returns the bypasses found. `Config`
  also has settings the command line does not offer: `random_user_agent` and
  `user_agent_type` (`chrome`, `firefox`, `safari`, `edge`, `opera`, `mobile`,
  `bot`) pick random User-Agents from `bypass403.useragent`, and `burp_output`
  writes the bypasses to a `.burp` file.
- `bypass403.burp.generate_burp_project()` writes results as a Burp Suite XML
  item export, keeping only those whose status is not 403 or 404.
- `bypass403.reports` holds `save_results()`, `curl_command()` and
  `python_request()`.

## What it does not do

There is no separate technique that only varies general request headers such
as `X-Original-URL` or `Referer` on their own; such headers are tried within
the IP spoofing, specialized and combined techniques. Response bodies are never
read or compared: a bypass is judged by status code alone, so each reported
bypass should be checked by hand.