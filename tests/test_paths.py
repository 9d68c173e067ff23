import pytest

from bypass403.client import RequestError
from bypass403.models import BypassConfig, URLParseError
from bypass403.paths import (
    mix_encode,
    path_manipulation,
    path_traversal,
    url_encoding_bypass,
)


class FakeClient:
    def __init__(self, code=403, failing=()):
        self.code = code
        self.failing = set(failing)
        self.calls = []

    def status(self, method, url, headers=None):
        self.calls.append((method, url, dict(headers or {})))
        if url in self.failing:
            raise RequestError("connection refused")
        return self.code


CONFIG = BypassConfig(url="http://example.com/admin", user_agent="test-agent")


def test_path_manipulation_first_variant_and_metadata():
    client = FakeClient()
    results = path_manipulation("http://example.com/admin", client, CONFIG)
    assert results[0].url == "http://example.com/admin/"
    assert {r.technique for r in results} == {"URL Path Manipulation"}
    assert {r.method for r in results} == {"GET"}
    assert [r.url for r in results] == [call[1] for call in client.calls]


def test_path_manipulation_sends_user_agent():
    client = FakeClient()
    path_manipulation("http://example.com/admin", client, CONFIG)
    assert all(call[2]["User-Agent"] == "test-agent" for call in client.calls)
    assert all(call[0] == "GET" for call in client.calls)


def test_path_manipulation_escapes_query_and_fragment_marks():
    client = FakeClient()
    results = path_manipulation("http://example.com/admin", client, CONFIG)
    urls = [r.url for r in results]
    assert "http://example.com/admin%3F" in urls
    assert all("?" not in url and "#" not in url for url in urls)


def test_path_manipulation_includes_host_prefixed_and_dotfile_paths():
    client = FakeClient()
    urls = [r.url for r in path_manipulation("http://example.com/admin", client, CONFIG)]
    assert "http://example.com//example.com/admin" in urls
    assert "http://example.com/admin/.git" in urls
    assert "http://example.com/admin/web.config" in urls


def test_path_manipulation_propagates_status():
    client = FakeClient(code=200)
    results = path_manipulation("http://example.com/admin", client, CONFIG)
    assert results
    assert all(r.status_code == 200 for r in results)


def test_path_manipulation_skips_failed_requests():
    client = FakeClient(failing={"http://example.com/admin/"})
    results = path_manipulation("http://example.com/admin", client, CONFIG)
    assert len(results) == len(client.calls) - 1
    assert "http://example.com/admin/" not in [r.url for r in results]


@pytest.mark.parametrize("func", [path_manipulation, url_encoding_bypass, path_traversal])
def test_invalid_url_raises(func):
    client = FakeClient()
    with pytest.raises(URLParseError):
        func("http://[::1", client, CONFIG)
    assert client.calls == []


def test_url_encoding_slashes_are_escaped_again():
    client = FakeClient()
    results = url_encoding_bypass("http://example.com/static/assets", client, CONFIG)
    assert results[0].url.startswith("http://example.com/")
    assert results[0].url.count("%252f") == 2
    assert {r.technique for r in results} == {"URL Encoding"}
    assert len(results) == len(client.calls)


def test_url_encoding_last_variant_is_mixed_encoding():
    client = FakeClient()
    results = url_encoding_bypass("http://example.com/x/y", client, CONFIG)
    # Plain segments are unchanged by mixed encoding.
    assert results[-1].url == "http://example.com/x/y"


def test_url_encoding_skips_failures():
    client = FakeClient(failing={"http://example.com/x/y"})
    results = url_encoding_bypass("http://example.com/x/y", client, CONFIG)
    assert len(results) == len(client.calls) - 1


def test_mix_encode_escapes_even_segments():
    assert mix_encode("a b/c d/e f") == "a+b/c d/e+f"


def test_mix_encode_leaves_plain_paths_alone():
    assert mix_encode("/x/y/z") == "/x/y/z"
    assert mix_encode("") == ""


def test_path_traversal_three_positions():
    client = FakeClient()
    results = path_traversal("http://example.com/a/admin", client, CONFIG)
    urls = [r.url for r in results[:3]]
    assert urls == [
        "http://example.com/..;/admin",
        "http://example.com/a/..;/admin",
        "http://example.com/a/..;/admin",
    ]
    assert len(results) % 3 == 0
    assert {r.technique for r in results} == {"Path Traversal"}


def test_path_traversal_empty_path_uses_root_directory():
    client = FakeClient()
    results = path_traversal("http://example.com", client, CONFIG)
    assert results[1].url == "http://example.com//..;/"


def test_path_traversal_replaces_only_first_occurrence():
    client = FakeClient()
    results = path_traversal("http://example.com/admin/admin", client, CONFIG)
    assert results[2].url == "http://example.com/..;/admin/admin"
    assert results[1].url == "http://example.com/admin/..;/admin"


def test_path_traversal_skips_failures():
    client = FakeClient(failing={"http://example.com/..;/admin"})
    results = path_traversal("http://example.com/a/admin", client, CONFIG)
    assert len(results) == len(client.calls) - 1