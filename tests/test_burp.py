import xml.etree.ElementTree as ET

import pytest

from bypass403.burp import (
    burp_item,
    escape_xml,
    generate_burp_project,
    raw_request,
    status_text,
)
from bypass403.models import Result


@pytest.mark.parametrize("code, text", [
    (200, "OK"),
    (302, "Found"),
    (403, "Forbidden"),
    (404, "Not Found"),
    (500, "Internal Server Error"),
    (418, "Unknown"),
])
def test_status_text(code, text):
    assert status_text(code) == text


def test_escape_xml_all_entities():
    assert escape_xml("<a b=\"c\">&'") == "&lt;a b=&quot;c&quot;&gt;&amp;&apos;"


def test_escape_xml_round_trips_through_parser():
    text = "x < y & \"q\" 'z' > w"
    element = ET.fromstring(f"<v>{escape_xml(text)}</v>")
    assert element.text == text


def test_raw_request_with_query_and_header():
    result = Result("https://example.com:8443/admin?x=1", 200, "GET",
                    "Header: X-Original-URL")
    request = raw_request(result)
    lines = request.split("\r\n")
    assert lines[0] == "GET /admin?x=1 HTTP/1.1"
    assert lines[1] == "Host: example.com:8443"
    assert lines[2] == "X-Original-URL: /"
    assert request.endswith("Connection: close\r\n\r\n")


def test_raw_request_forwarded_header():
    result = Result("http://example.com/a", 200, "POST", "Header: X-Forwarded-For")
    assert "X-Forwarded-For: 127.0.0.1\r\n" in raw_request(result)


def test_raw_request_without_path_uses_root():
    result = Result("http://example.com", 200, "HEAD", "Method Manipulation")
    assert raw_request(result).startswith("HEAD / HTTP/1.1\r\nHost: example.com\r\n")


def test_raw_request_header_technique_without_colon():
    result = Result("http://example.com/a", 200, "GET", "Combined Proxy Headers Set 1")
    request = raw_request(result)
    assert request.startswith("GET /a HTTP/1.1\r\n")
    assert "X-Original-URL" not in request


def test_burp_item_fields():
    result = Result("https://example.com/admin", 200, "GET", "Method Manipulation")
    element = ET.fromstring(burp_item(result))
    assert element.find("url").text == "https://example.com/admin"
    assert element.find("host").text == "example.com"
    assert element.find("port").text == "443"
    assert element.find("protocol").text == "https"
    assert element.find("path").text == "/admin"
    assert element.find("comment").text == "403 Bypass: Method Manipulation"
    tags = [tag.text for tag in element.find("tags")]
    assert tags == ["403 Bypass", "Method Manipulation"]


def test_burp_item_port_from_host_and_default_http():
    explicit = ET.fromstring(burp_item(Result("http://h:8080/x", 200, "GET", "t")))
    implicit = ET.fromstring(burp_item(Result("http://h/x", 200, "GET", "t")))
    assert explicit.find("port").text == "8080"
    assert implicit.find("port").text == "80"


def test_generate_project_adds_suffix_and_filters(tmp_path):
    results = [
        Result("http://example.com/a?x=1&y=<2>", 200, "GET", "Header: X-Rewrite-URL"),
        Result("http://example.com/b", 403, "GET", "t"),
        Result("http://example.com/c", 404, "GET", "t"),
        Result("http://example.com/d", 302, "POST", "t"),
    ]
    path = generate_burp_project(results, tmp_path / "project")
    assert path == tmp_path / "project.burp"
    root = ET.parse(path).getroot()
    assert root.tag == "items"
    urls = [item.find("url").text for item in root.findall("item")]
    assert urls == ["http://example.com/a?x=1&y=<2>", "http://example.com/d"]


def test_generate_project_keeps_existing_suffix(tmp_path):
    target = tmp_path / "out.burp"
    path = generate_burp_project([], target)
    assert path == target
    assert ET.parse(path).getroot().findall("item") == []