from __future__ import annotations
from typing import Any, Dict, Tuple
import requests

from .config import ProviderConfig
from .exceptions import ProviderRequestFailed
from .models import AccessMaterial, UserProfile
from .sessions import authorization_header


def request_json(sess: requests.Session, method: str, url: str, cfg: ProviderConfig, **kwargs) -> Dict[str, Any]:
    """
    One provider call. Transport errors, non-2xx answers and non-JSON bodies
    all become ProviderRequestFailed.
    """
    kwargs.setdefault("timeout", cfg.timeout)
    try:
        r = sess.request(method, url, **kwargs)
        r.raise_for_status()
        data = r.json()
    except requests.RequestException as e:
        raise ProviderRequestFailed(f"{method} {url} failed: {e}") from e
    except ValueError as e:
        raise ProviderRequestFailed(f"{method} {url} returned a non-JSON body") from e
    if not isinstance(data, dict):
        raise ProviderRequestFailed(f"{method} {url} returned unexpected JSON")
    return data


def fetch_entitlement_token(sess: requests.Session, cfg: ProviderConfig, access_token: str) -> str:
    data = request_json(
        sess, "POST", cfg.entitlements_url, cfg,
        json={}, headers=authorization_header(access_token),
    )
    token = data.get("entitlements_token")
    if not token or not isinstance(token, str):
        raise ProviderRequestFailed("Entitlement response has no entitlements_token")
    return token


def fetch_user_profile(sess: requests.Session, cfg: ProviderConfig, access_token: str) -> UserProfile:
    """
    GET /userinfo. Only `sub` is required; the Riot ID lives under `acct`.
    """
    data = request_json(
        sess, "GET", cfg.userinfo_url, cfg,
        headers=authorization_header(access_token),
    )
    sub = data.get("sub")
    if not sub or not isinstance(sub, str):
        raise ProviderRequestFailed("Userinfo response has no subject id")
    acct = data.get("acct") or {}
    if not isinstance(acct, dict):
        raise ProviderRequestFailed("Userinfo response has a malformed 'acct' field")
    return UserProfile(
        subject_id=sub,
        display_name=acct.get("game_name"),
        tag_line=acct.get("tag_line"),
        country=data.get("country"),
        raw=data,
    )


def fetch_access_material(
    sess: requests.Session,
    cfg: ProviderConfig,
    access_token: str,
) -> Tuple[AccessMaterial, UserProfile]:
    """
    Post-login steps shared by both flows: entitlement token, then profile.
    """
    entitlement = fetch_entitlement_token(sess, cfg, access_token)
    profile = fetch_user_profile(sess, cfg, access_token)
    return AccessMaterial(access_token=access_token, entitlement_token=entitlement), profile


__all__ = [
    "request_json",
    "fetch_entitlement_token",
    "fetch_user_profile",
    "fetch_access_material",
]
