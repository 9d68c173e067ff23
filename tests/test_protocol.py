import pytest

from bypass403.client import RequestError
from bypass403.models import BypassConfig, Result, URLParseError
from bypass403.protocol import PROTOCOLS, protocol_bypass

URL = "https://example.com/admin?x=1"
CONFIG = BypassConfig(url=URL, user_agent="probe-agent/1.0")


class FakeClient:
    def __init__(self, answer=None):
        self.calls = []
        self.answer = answer or (lambda method, url, headers: 403)

    def status(self, method, url, headers=None):
        self.calls.append((method, url, dict(headers or {})))
        code = self.answer(method, url, headers)
        if code is None:
            raise RequestError("refused")
        return code


def test_current_scheme_is_skipped_and_others_tried():
    results = protocol_bypass(URL, FakeClient(), CONFIG)
    urls = {r.url for r in results}
    assert "http://example.com/admin?x=1" in urls
    assert "//example.com/admin?x=1" in urls
    assert "https://example.com/admin?x=1" not in urls
    assert "https:/example.com/admin?x=1" not in urls


def test_protocol_relative_form_is_always_tried():
    results = protocol_bypass("//example.com/admin", FakeClient(), CONFIG)
    techniques = {r.technique for r in results}
    assert "Protocol Change: //" in techniques


def test_each_url_gets_get_then_post():
    client = FakeClient()
    results = protocol_bypass(URL, client, CONFIG)
    assert len(results) % 2 == 0
    for get_result, post_result in zip(results[::2], results[1::2]):
        assert get_result.method == "GET"
        assert post_result.method == "POST"
        assert get_result.url == post_result.url
        assert get_result.technique == post_result.technique
    post_headers = [h for m, _, h in client.calls if m == "POST"]
    assert all(h["Content-Type"] == "application/x-www-form-urlencoded" for h in post_headers)
    assert all(h["User-Agent"] == "probe-agent/1.0" for _, _, h in client.calls)


def test_failed_get_skips_post():
    client = FakeClient(lambda m, u, h: None if u.startswith("ftp://") else 403)
    results = protocol_bypass(URL, client, CONFIG)
    ftp_calls = [c for c in client.calls if c[1].startswith("ftp://")]
    assert [c[0] for c in ftp_calls] == ["GET"]
    assert not any(r.url.startswith("ftp://") for r in results)


def test_failed_post_keeps_get_result():
    client = FakeClient(lambda m, u, h: None if m == "POST" else 200)
    results = protocol_bypass(URL, client, CONFIG)
    assert results
    assert all(r.method == "GET" for r in results)
    assert Result("http://example.com/admin?x=1", 200, "GET", "Protocol Change: http://") in results


def test_results_follow_protocol_order():
    results = protocol_bypass(URL, FakeClient(), CONFIG)
    tried = [r.technique.removeprefix("Protocol Change: ") for r in results[::2]]
    assert tried == [p for p in PROTOCOLS if p in tried]


def test_decoded_path_is_used():
    results = protocol_bypass("https://example.com/a%20b", FakeClient(), CONFIG)
    assert results[0].url == "http://example.com/a b"


def test_invalid_url_raises():
    with pytest.raises(URLParseError):
        protocol_bypass("http://example.com/%zz", FakeClient(), CONFIG)