import pytest

from bypass403.models import URLParseError
from bypass403.mutation import (
    all_mutators,
    case_manipulation,
    double_encoding,
    extension_addition,
    mutate_url,
    parameter_injection,
    path_traversal,
    slash_manipulation,
    special_characters,
    url_encoding,
)


def test_every_mutator_starts_with_original_path():
    for name, mutator in all_mutators().items():
        assert mutator("/admin/panel")[0] == "/admin/panel", name


def test_all_mutators_names():
    assert list(all_mutators()) == [
        "Case Manipulation",
        "URL Encoding",
        "Double Encoding",
        "Path Traversal",
        "Slash Manipulation",
        "Extension Addition",
        "Special Characters",
        "Parameter Injection",
    ]


def test_case_manipulation_variants():
    original, upper, lower, mixed = case_manipulation("/Admin")
    assert original == "/Admin"
    assert upper == "/ADMIN"
    assert lower == "/admin"
    assert mixed == "/aDmIn"


def test_url_encoding_full_escape_and_replacements():
    results = url_encoding("/a b.c")
    assert results[1] == "%2Fa%20b.c"
    assert "%2fa b.c" in results
    assert "/a b%2ec" in results
    assert "/a b%2Ec" in results


def test_double_encoding_replaces_slashes_and_dots():
    results = double_encoding("/x.y")
    assert "%252fx.y" in results
    assert "%252Fx.y" in results
    assert "/x%252ey" in results
    assert "/x%252Ey" in results


def test_path_traversal_appends_sequences():
    results = path_traversal("/admin")
    assert "/admin/.." in results
    assert "/admin/%252e%252e%252f" in results
    assert "/admin/.%00./" in results
    assert all(item.startswith("/admin") for item in results)


def test_slash_manipulation_adds_trailing_slash_only_when_missing():
    with_slash = slash_manipulation("/x/")
    without_slash = slash_manipulation("/x")
    assert "/x/" in without_slash
    assert len(without_slash) == len(with_slash) + 1
    assert "\\x\\" in with_slash


def test_extension_addition_appends_extensions():
    results = extension_addition("/admin")
    assert "/admin.php" in results
    assert "/admin~" in results
    assert results[-1] == "/admin%00.asp"


def test_special_characters_appends_and_inserts():
    results = special_characters("/a/b")
    assert "/a/b%09" in results
    assert "/%09a/%09b" in results
    assert "/;a/;b" in results
    assert len(results) % 2 == 1


def test_parameter_injection_appends_parameters():
    results = parameter_injection("/admin")
    assert "/admin?id=1" in results
    assert "/admin?admin=true" in results
    assert all(item == "/admin" or item.startswith("/admin?") for item in results)


def test_mutate_url_covers_every_mutator():
    results = mutate_url("https://example.com/admin")
    expected_count = sum(len(m("/admin")) for m in all_mutators().values())
    assert len(results) == expected_count
    assert all(item.startswith("https://example.com") for item in results)
    assert "https://example.com/admin/.." in results


def test_mutate_url_escapes_injected_query_into_path():
    results = mutate_url("https://example.com/admin")
    assert "https://example.com/admin%3Fid=1" in results


def test_mutate_url_rejects_invalid_url():
    with pytest.raises(URLParseError):
        mutate_url("http://example.com/%zz")