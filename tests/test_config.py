import pytest

from bypass403.config import Config, ConfigError


def test_defaults():
    config = Config()
    assert config.threads == 10
    assert config.timeout == 10
    assert config.wordlist_path == "payloads/bypasses.txt"
    assert config.random_user_agent is False


def test_valid_config_returns_itself():
    config = Config(url="https://example.com/admin")
    assert config.validate() is config


def test_version_without_url_is_valid():
    config = Config(version=True)
    assert config.validate() is config


def test_missing_url():
    with pytest.raises(ConfigError, match="URL is required"):
        Config().validate()


def test_invalid_url():
    with pytest.raises(ConfigError, match="invalid URL format"):
        Config(url="http://example.com:abc/").validate()


def test_threads_must_be_positive():
    with pytest.raises(ConfigError, match="threads must be at least 1"):
        Config(url="http://example.com/", threads=0).validate()


def test_timeout_must_be_positive():
    with pytest.raises(ConfigError, match="timeout must be at least 1 second"):
        Config(url="http://example.com/", timeout=0).validate()


def test_url_checked_before_threads():
    with pytest.raises(ConfigError, match="URL is required"):
        Config(threads=0).validate()