"""Browser-like request headers for upstream calls.

The upstream site expects traffic that looks like its own web client: a
wildcard `Accept`, a Chinese-first `Accept-Language`, matching
`Origin`/`Referer`, and the caller's session cookie. A fresh user-agent is
drawn for every call.

Determinism:
    Header assembly is deterministic except for `User-Agent`, which is sampled
    from a pool of realistic desktop and mobile browser strings.
"""

import random

from banana_adapter.config import BANANA_BASE_URL

ACCEPT_LANGUAGE = "zh-CN,zh;q=0.9,en;q=0.8"

_DESKTOP_PLATFORMS = (
    "Windows NT 10.0; Win64; x64",
    "Macintosh; Intel Mac OS X 10_15_7",
    "X11; Linux x86_64",
)

_CHROME_VERSIONS = ("128.0.0.0", "129.0.0.0", "130.0.0.0", "131.0.0.0", "132.0.0.0")
_FIREFOX_VERSIONS = ("131.0", "132.0", "133.0", "134.0")
_SAFARI_VERSIONS = ("17.6", "18.0", "18.1", "18.2")
_IOS_VERSIONS = ("17_6", "18_0", "18_1", "18_2")


def _chrome(platform: str) -> str:
    version = random.choice(_CHROME_VERSIONS)
    return (
        f"Mozilla/5.0 ({platform}) AppleWebKit/537.36 (KHTML, like Gecko) "
        f"Chrome/{version} Safari/537.36"
    )


def _edge(platform: str) -> str:
    version = random.choice(_CHROME_VERSIONS)
    return f"{_chrome(platform)} Edg/{version}"


def _firefox(platform: str) -> str:
    version = random.choice(_FIREFOX_VERSIONS)
    if platform.startswith("Macintosh"):
        platform = "Macintosh; Intel Mac OS X 10.15"
    return f"Mozilla/5.0 ({platform}; rv:{version}) Gecko/20100101 Firefox/{version}"


def _safari(_platform: str) -> str:
    version = random.choice(_SAFARI_VERSIONS)
    return (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
        f"(KHTML, like Gecko) Version/{version} Safari/605.1.15"
    )


def _mobile_safari(_platform: str) -> str:
    ios = random.choice(_IOS_VERSIONS)
    version = ios.replace("_", ".")
    return (
        f"Mozilla/5.0 (iPhone; CPU iPhone OS {ios} like Mac OS X) "
        f"AppleWebKit/605.1.15 (KHTML, like Gecko) Version/{version} "
        "Mobile/15E148 Safari/604.1"
    )


_BUILDERS = (_chrome, _chrome, _chrome, _edge, _firefox, _safari, _mobile_safari)


def random_user_agent() -> str:
    """Return a plausible browser user-agent string."""
    builder = random.choice(_BUILDERS)
    return builder(random.choice(_DESKTOP_PLATFORMS))


def build_headers(session_token: str, json_body: bool = True) -> dict:
    """Build the header set for one upstream call.

    Args:
        session_token: Bearer token forwarded as the `session` cookie.
        json_body: Include `Content-Type: application/json`. Status polls
            send no body and must omit it.

    Returns:
        Header dictionary for `httpx`.
    """
    headers = {
        "accept": "*/*",
        "accept-language": ACCEPT_LANGUAGE,
        "origin": BANANA_BASE_URL,
        "referer": f"{BANANA_BASE_URL}/",
        "user-agent": random_user_agent(),
        "cookie": f"session={session_token}",
    }
    if json_body:
        headers["content-type"] = "application/json"
    return headers
