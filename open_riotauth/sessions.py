# sessions.py
"""
HTTP session factory for the login flows.

Each login attempt gets its own requests.Session bound to its own cookie jar,
so concurrent attempts never see each other's cookies. The MFA step is the one
place a jar is handed in pre-seeded (see cookies.seed_continuation_cookies).
"""

from __future__ import annotations
from typing import Dict, Optional, Tuple

import requests
from requests.cookies import RequestsCookieJar

from .config import ProviderConfig

_STD_UA = (
    "RiotClient/63.0.9.4909983.4789131 rso-auth (Windows;10;;Professional, x64)"
)


def _std_headers(cfg: ProviderConfig) -> Dict[str, str]:
    # JSON in, JSON out; the auth endpoint rejects browser-style form posts
    return {
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": cfg.language.replace("_", "-"),
        "Content-Type": "application/json",
        "User-Agent": _STD_UA,
    }


def new_login_session(
    jar: Optional[RequestsCookieJar] = None,
    cfg: Optional[ProviderConfig] = None,
) -> Tuple[requests.Session, RequestsCookieJar]:
    """
    Return (session, jar). A fresh empty jar is created when none is supplied;
    cookies set by any response are kept for the following requests.
    """
    cfg = cfg or ProviderConfig()
    jar = jar if jar is not None else RequestsCookieJar()

    sess = requests.Session()
    sess.cookies = jar
    sess.headers.update(_std_headers(cfg))
    return sess, jar


def authorization_header(access_token: str) -> Dict[str, str]:
    """Bearer header for the entitlement and userinfo calls."""
    return {"Authorization": f"Bearer {access_token}"}


__all__ = [
    "new_login_session",
    "authorization_header",
]
