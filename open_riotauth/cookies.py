# cookies.py
"""
MFA continuation cookies.

Between the credential PUT and the MFA-code PUT the browser leaves our server
(redirect back to the login page), so the two correlation cookies the provider
issued (`clid`, `asid`) travel with it as one opaque token:

    base64( JSON({"clid": "...", "asid": "..."}) )

encode/decode are pure; the jar helpers are the only code touching cookies.
"""

from __future__ import annotations
import base64
import json
from typing import Optional

from requests.cookies import RequestsCookieJar

from .exceptions import MalformedContinuationState, ProviderRequestFailed
from .models import ContinuationCookies

CONTINUATION_COOKIE_NAMES = ("clid", "asid")

# Real tokens are a few hundred characters; anything far beyond is not ours
MAX_TOKEN_LENGTH = 8192


# ------------------------------- codec ------------------------------------ #

def encode_continuation_cookies(cookies: ContinuationCookies) -> str:
    payload = json.dumps({"clid": cookies.clid, "asid": cookies.asid}, separators=(",", ":"))
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_continuation_cookies(token: Optional[str]) -> ContinuationCookies:
    """
    Reverse of encode_continuation_cookies.
    Anything that is not our own encoding raises MalformedContinuationState.
    """
    if not token:
        raise MalformedContinuationState("Empty continuation token")
    if len(token) > MAX_TOKEN_LENGTH:
        raise MalformedContinuationState("Continuation token is too long")
    try:
        raw = base64.b64decode(token.strip(), validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (ValueError, TypeError, RecursionError) as e:
        raise MalformedContinuationState("Continuation token is not base64 JSON") from e

    if not isinstance(data, dict):
        raise MalformedContinuationState("Continuation token is not a JSON object")
    clid, asid = data.get("clid"), data.get("asid")
    if not isinstance(clid, str) or not isinstance(asid, str):
        raise MalformedContinuationState("Continuation token lacks clid/asid strings")
    return ContinuationCookies(clid=clid, asid=asid)


# ---------------------------- jar helpers --------------------------------- #

def extract_continuation_cookies(jar: RequestsCookieJar) -> ContinuationCookies:
    """
    Pick `clid` and `asid` out of everything the provider has set so far.
    Cookies are matched by name substring; the last match wins.
    """
    found = {}
    for c in jar:
        for name in CONTINUATION_COOKIE_NAMES:
            if name in c.name and c.value:
                found[name] = c.value

    missing = [n for n in CONTINUATION_COOKIE_NAMES if n not in found]
    if missing:
        raise ProviderRequestFailed(
            f"Multifactor response did not set continuation cookies: {', '.join(missing)}"
        )
    return ContinuationCookies(clid=found["clid"], asid=found["asid"])


def seed_continuation_cookies(
    jar: RequestsCookieJar,
    cookies: ContinuationCookies,
    domain: str,
) -> RequestsCookieJar:
    """Put `clid`/`asid` into a jar, scoped to the provider's auth domain."""
    jar.set("clid", cookies.clid, domain=domain, path="/")
    jar.set("asid", cookies.asid, domain=domain, path="/")
    return jar


__all__ = [
    "encode_continuation_cookies",
    "decode_continuation_cookies",
    "extract_continuation_cookies",
    "seed_continuation_cookies",
]
