"""Run-time configuration of the tool."""

from __future__ import annotations

from dataclasses import dataclass

from .models import DEFAULT_USER_AGENT, DEFAULT_WORDLIST, URLParseError, parse_url


class ConfigError(ValueError):
    """Raised when a configuration is not usable."""


@dataclass
class Config:
    """All options that control a bypass run."""

    url: str = ""
    threads: int = 10
    output_file: str = ""
    timeout: int = 10
    verbose: bool = False
    all_techniques: bool = False
    category: str = ""
    user_agent: str = DEFAULT_USER_AGENT
    wordlist_path: str = DEFAULT_WORDLIST
    random_user_agent: bool = False
    user_agent_type: str = ""
    burp_output: str = ""
    version: bool = False

    def validate(self) -> Config:
        """Check the options, raising ConfigError on the first problem."""
        if not self.url and not self.version:
            raise ConfigError("URL is required")
        if self.url:
            try:
                parse_url(self.url)
            except URLParseError as exc:
                raise ConfigError("invalid URL format") from exc
        if self.threads < 1:
            raise ConfigError("threads must be at least 1")
        if self.timeout < 1:
            raise ConfigError("timeout must be at least 1 second")
        return self