from __future__ import annotations

import logging
import urllib.parse as urlparse
from typing import Optional

from .exceptions import MissingAccessToken
from .models import TokenPair

logger = logging.getLogger(__name__)


def _first(params: dict, name: str) -> Optional[str]:
    value = (params.get(name) or [None])[0]
    return value or None


def extract_tokens(redirect_uri: str) -> TokenPair:
    """
    Pull the implicit-grant tokens out of a redirect URI.

    The provider puts them in the fragment, e.g.
        https://playvalorant.com/opt_in#access_token=...&id_token=...&expires_in=3600
    The query string is ignored.
    """
    if not isinstance(redirect_uri, str):
        raise MissingAccessToken("Redirect uri is not a string")
    fragment = urlparse.urlparse(redirect_uri).fragment
    params = urlparse.parse_qs(fragment)

    access_token = _first(params, "access_token")
    if not access_token:
        raise MissingAccessToken("No access token in redirect fragment")

    id_token = _first(params, "id_token")
    if not id_token:
        logger.info("There is no id token in the authorization response")

    expires_in = _first(params, "expires_in")
    try:
        ttl = int(expires_in) if expires_in else None
    except ValueError:
        ttl = None

    return TokenPair(
        access_token=access_token,
        id_token=id_token,
        expires_in=ttl,
        token_type=_first(params, "token_type"),
    )


__all__ = ["extract_tokens"]
