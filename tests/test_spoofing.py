from bypass403.client import RequestError
from bypass403.models import BypassConfig, Result
from bypass403.spoofing import IP_HEADERS, ip_spoofing_headers

URL = "https://example.com/admin"
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


def test_one_request_per_header():
    client = FakeClient()
    results = ip_spoofing_headers(URL, client, CONFIG)
    assert len(results) == len(IP_HEADERS)
    assert len(client.calls) == len(IP_HEADERS)
    assert all(method == "GET" and url == URL for method, url, _ in client.calls)


def test_each_request_carries_user_agent_and_one_header():
    client = FakeClient()
    ip_spoofing_headers(URL, client, CONFIG)
    for (header, value), (_, _, sent) in zip(IP_HEADERS, client.calls):
        assert sent == {"User-Agent": "probe-agent/1.0", header: value}


def test_first_attempt_is_forwarded_for_loopback():
    client = FakeClient()
    results = ip_spoofing_headers(URL, client, CONFIG)
    assert client.calls[0][2]["X-Forwarded-For"] == "127.0.0.1"
    assert results[0] == Result(URL, 403, "GET", "IP Spoofing: X-Forwarded-For")


def test_technique_names_follow_headers():
    results = ip_spoofing_headers(URL, FakeClient(), CONFIG)
    assert [r.technique for r in results] == ["IP Spoofing: " + h for h, _ in IP_HEADERS]


def test_status_codes_are_reported():
    def answer(method, url, headers):
        return 200 if headers.get("X-Real-IP") == "127.0.0.1" else 403

    results = ip_spoofing_headers(URL, FakeClient(answer), CONFIG)
    successes = [r for r in results if r.status_code == 200]
    assert successes == [Result(URL, 200, "GET", "IP Spoofing: X-Real-IP")]


def test_failed_requests_are_skipped():
    def answer(method, url, headers):
        return None if "Via" in headers else 403

    results = ip_spoofing_headers(URL, FakeClient(answer), CONFIG)
    assert "IP Spoofing: Via" not in {r.technique for r in results}
    assert len(results) == len(IP_HEADERS) - 1