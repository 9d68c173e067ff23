"""A catalogue of User-Agent strings with random selection."""

from __future__ import annotations

import random
from itertools import chain

_WINDOWS = "Windows NT 10.0; Win64; x64"
_MAC = "Macintosh; Intel Mac OS X 10_15_7"


def _chrome(platform: str, version: str, suffix: str = "", mobile: bool = False) -> str:
    mobile_part = "Mobile " if mobile else ""
    return (f"Mozilla/5.0 ({platform}) AppleWebKit/537.36 (KHTML, like Gecko) "
            f"Chrome/{version} {mobile_part}Safari/537.36{suffix}")


def _firefox(platform: str) -> str:
    return f"Mozilla/5.0 ({platform}; rv:89.0) Gecko/20100101 Firefox/89.0"


def _safari(platform: str, version: str, tail: str) -> str:
    return (f"Mozilla/5.0 ({platform}) AppleWebKit/605.1.15 (KHTML, like Gecko) "
            f"Version/{version} {tail}")


def _bot(name: str, info: str) -> str:
    return f"Mozilla/5.0 (compatible; {name}; +{info})"


_IOS_TAIL = "Mobile/15E148 Safari/604.1"
_CHROME_STABLE = "91.0.4472.124"

_BY_CATEGORY = {
    "chrome": (
        _chrome(_WINDOWS, _CHROME_STABLE),
        _chrome(_WINDOWS, "92.0.4515.107"),
        _chrome(_MAC, "91.0.4472.114"),
        _chrome("X11; Linux x86_64", "91.0.4472.101"),
    ),
    "firefox": (
        _firefox(_WINDOWS),
        _firefox("Macintosh; Intel Mac OS X 10.15"),
        _firefox("X11; Linux i686"),
    ),
    "safari": (
        _safari(_MAC, "14.1.1", "Safari/605.1.15"),
        _safari("iPad; CPU OS 14_6 like Mac OS X", "14.0", _IOS_TAIL),
    ),
    "edge": (_chrome(_WINDOWS, _CHROME_STABLE, " Edg/91.0.864.59"),),
    "opera": (_chrome(_WINDOWS, _CHROME_STABLE, " OPR/77.0.4054.254"),),
    "mobile": (
        _safari("iPhone; CPU iPhone OS 14_6 like Mac OS X", "14.0", _IOS_TAIL),
        _chrome("Linux; Android 11; SM-G991B", "91.0.4472.120", mobile=True),
    ),
    "bot": (
        _bot("Googlebot/2.1", "http://www.google.com/bot.html"),
        _bot("bingbot/2.0", "http://www.bing.com/bingbot.htm"),
        _bot("YandexBot/3.0", "http://yandex.com/bots"),
    ),
}

_UNCATEGORISED = (
    _chrome(_WINDOWS, _CHROME_STABLE, " Vivaldi/4.0"),
    "Mozilla/5.0 (Windows NT 10.0; WOW64; Trident/7.0; rv:11.0) like Gecko",
    _chrome("X11; CrOS x86_64 13982.82.0", "92.0.4515.130"),
    "Mozilla/5.0 (Nintendo Switch; WebApplet) AppleWebKit/609.4 (KHTML, like Gecko) "
    "NF/6.0.1.19.3 NintendoBrowser/5.1.0.20869",
)

_USER_AGENTS = tuple(chain(*_BY_CATEGORY.values(), _UNCATEGORISED))


def get_random() -> str:
    """Return a random User-Agent from the whole catalogue."""
    return random.choice(_USER_AGENTS)


def get_all() -> list[str]:
    """Return every known User-Agent."""
    return list(_USER_AGENTS)


def get_by_category(category: str) -> list[str]:
    """Return the User-Agents of a category; unknown categories give all of them."""
    agents = _BY_CATEGORY.get(category)
    if agents is None:
        return get_all()
    return list(agents)


def get_random_by_category(category: str) -> str:
    """Return a random User-Agent from a category."""
    return random.choice(get_by_category(category))