"""HTTP client used to send bypass attempts."""

from __future__ import annotations

import warnings
from collections.abc import Mapping

import requests
from requests.structures import CaseInsensitiveDict

from .models import DEFAULT_USER_AGENT

MAX_REDIRECTS = 10


class RequestError(Exception):
    """Raised when a request could not be made or answered."""


class NotForbiddenError(Exception):
    """Raised when the target does not answer 403 Forbidden."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"The provided URL returns {status_code}, not 403 Forbidden")
        self.status_code = status_code


class HttpClient:
    """A session that skips TLS verification and reports only status codes."""

    def __init__(self, timeout: int = 10, user_agent: str = DEFAULT_USER_AGENT,
                 follow_redirects: bool = True) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.follow_redirects = follow_redirects
        self._session = requests.Session()
        self._session.verify = False
        self._session.max_redirects = MAX_REDIRECTS

    def status(self, method: str, url: str,
               headers: Mapping[str, str] | None = None) -> int:
        """Send one request with the URL untouched and return the status code.

        The client's User-Agent is sent unless the given headers name one.
        """
        merged: CaseInsensitiveDict[str] = CaseInsensitiveDict({"User-Agent": self.user_agent})
        merged.update(headers or {})
        try:
            prepared = self._session.prepare_request(
                requests.Request(method, url, headers=dict(merged)))
        except (requests.RequestException, ValueError) as exc:
            raise RequestError(str(exc)) from exc
        prepared.url = url

        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            try:
                response = self._session.send(
                    prepared, timeout=self.timeout, stream=True,
                    allow_redirects=self.follow_redirects)
            except requests.TooManyRedirects as exc:
                if exc.response is None:
                    raise RequestError(str(exc)) from exc
                exc.response.close()
                return exc.response.status_code
            except (requests.RequestException, ValueError) as exc:
                raise RequestError(str(exc)) from exc
        response.close()
        return response.status_code

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def verify_url(url: str, client: HttpClient) -> int:
    """Check that the URL answers 403 and return the status code.

    Raises NotForbiddenError for any other status and RequestError on failure.
    """
    code = client.status("GET", url)
    if code != 403:
        raise NotForbiddenError(code)
    return code