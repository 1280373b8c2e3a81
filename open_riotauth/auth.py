from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import requests
from requests.cookies import RequestsCookieJar

from .api import fetch_access_material, request_json
from .config import ProviderConfig
from .cookies import (
    decode_continuation_cookies,
    encode_continuation_cookies,
    extract_continuation_cookies,
    seed_continuation_cookies,
)
from .exceptions import (
    CookieSeedFailed,
    MissingAccessToken,
    MissingMfaCode,
    MissingPassword,
    MissingUsername,
    ProviderRejected,
    ProviderRequestFailed,
    RiotAuthError,
)
from .models import (
    Authenticated,
    AuthorizationOutcome,
    Failed,
    MfaRequired,
    MultifactorChallenge,
)
from .sessions import new_login_session
from .tokens import extract_tokens

logger = logging.getLogger(__name__)


# =========================
# Response helpers
# =========================
def _raise_for_error(data: Dict[str, Any]) -> None:
    # auth_failure, rate_limited, multifactor_attempt_failed, ...
    error = data.get("error")
    if error:
        raise ProviderRejected(str(error))


def _redirect_uri(data: Dict[str, Any]) -> str:
    try:
        uri = data["response"]["parameters"]["uri"]
    except (KeyError, TypeError):
        raise MissingAccessToken("Authorization response carries no redirect uri") from None
    if not isinstance(uri, str):
        raise MissingAccessToken("Authorization response redirect uri is not a string")
    return uri


def _as_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _build_challenge(data: Dict[str, Any], jar: RequestsCookieJar) -> MultifactorChallenge:
    mf = data.get("multifactor")
    if mf is None:
        mf = {}
    if not isinstance(mf, dict):
        raise ProviderRequestFailed("Multifactor response has a malformed 'multifactor' field")
    methods = mf.get("methods") or ()
    if not isinstance(methods, (list, tuple)):
        methods = ()
    token = encode_continuation_cookies(extract_continuation_cookies(jar))
    return MultifactorChallenge(
        continuation_cookies=token,
        method=mf.get("method"),
        methods=tuple(methods),
        code_length=_as_int(mf.get("multiFactorCodeLength")),
        version=mf.get("mfaVersion"),
        email=mf.get("email"),
    )


def _failed(e: RiotAuthError, flow: str) -> Failed:
    logger.warning("%s authorization failed: %s (%s)", flow, e.reason.value, e)
    return Failed(reason=e.reason, detail=str(e))


# =========================
# Flow steps
# =========================
def _seed_auth_cookies(sess: requests.Session, cfg: ProviderConfig) -> None:
    """
    POST the fixed client identity so the provider sets its anonymous
    session cookies on our jar. The body is not used.
    """
    try:
        r = sess.post(cfg.authorization_url, json=cfg.init_payload, timeout=cfg.timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise CookieSeedFailed(f"Requesting auth cookies failed: {e}") from e


def _submit_credentials(sess: requests.Session, cfg: ProviderConfig, username: str, password: str) -> Dict[str, Any]:
    return request_json(sess, "PUT", cfg.authorization_url, cfg, json={
        "type": "auth",
        "username": username,
        "password": password,
        "remember": True,
        "language": cfg.language,
    })


def _submit_mfa_code(sess: requests.Session, cfg: ProviderConfig, code: str) -> Dict[str, Any]:
    return request_json(sess, "PUT", cfg.authorization_url, cfg, json={
        "type": "multifactor",
        "code": code,
        "rememberDevice": True,
    })


def _complete(sess: requests.Session, cfg: ProviderConfig, data: Dict[str, Any]) -> Authenticated:
    """Token response -> access token -> entitlement + profile."""
    if data.get("type") != "response":
        raise ProviderRequestFailed(f"Unexpected authorization response type: {data.get('type')!r}")

    tokens = extract_tokens(_redirect_uri(data))
    material, profile = fetch_access_material(sess, cfg, tokens.access_token)
    logger.info("Auth successful for subject %s", profile.subject_id)
    return Authenticated(
        access_token=material.access_token,
        entitlement_token=material.entitlement_token,
        user_profile=profile,
    )


# =========================
# Public flows
# =========================
def authorize_primary(
    username: str,
    password: str,
    *,
    cfg: Optional[ProviderConfig] = None,
) -> AuthorizationOutcome:
    """
    First login pass:
      - seed anonymous auth cookies (best-effort)
      - PUT credentials
      - multifactor answer -> MfaRequired with the encoded clid/asid token
      - token answer -> entitlement + userinfo -> Authenticated
    Never raises; every failure comes back as Failed.
    """
    cfg = cfg or ProviderConfig()
    try:
        if not username:
            raise MissingUsername("No username specified")
        if not password:
            raise MissingPassword("No password specified")

        sess, jar = new_login_session(cfg=cfg)
        with sess:
            try:
                _seed_auth_cookies(sess, cfg)
            except CookieSeedFailed as e:
                logger.warning("There was an error requesting auth cookies: %s", e)

            data = _submit_credentials(sess, cfg, username, password)
            _raise_for_error(data)

            if data.get("type") == "multifactor":
                logger.info("Provider requested a second factor")
                return MfaRequired(challenge=_build_challenge(data, jar))

            return _complete(sess, cfg, data)
    except RiotAuthError as e:
        return _failed(e, "Primary")


def authorize_with_mfa(
    code: str,
    continuation_cookies: Optional[str],
    *,
    cfg: Optional[ProviderConfig] = None,
) -> AuthorizationOutcome:
    """
    Second login pass: rebuild the jar from the continuation token and submit
    the MFA code. A wrong code is a Failed outcome; the caller may retry with
    the same continuation token. Never returns MfaRequired.
    """
    cfg = cfg or ProviderConfig()
    try:
        code = (code or "").strip()
        if not code:
            raise MissingMfaCode("No MFA code provided")

        cookies = decode_continuation_cookies(continuation_cookies)
        jar = seed_continuation_cookies(RequestsCookieJar(), cookies, cfg.cookie_domain)

        sess, _ = new_login_session(jar, cfg)
        with sess:
            data = _submit_mfa_code(sess, cfg, code)
            _raise_for_error(data)
            return _complete(sess, cfg, data)
    except RiotAuthError as e:
        return _failed(e, "MFA")


# =========================
# Full Login (creds + MFA)
# =========================
def login_interactive(
    username: str,
    password: str,
    *,
    get_code: Optional[Callable[[str], str]] = None,
    cfg: Optional[ProviderConfig] = None,
) -> AuthorizationOutcome:
    """
    Both passes in one call, asking for the MFA code through `get_code`
    (defaults to input()) when the provider wants one.
    """
    cfg = cfg or ProviderConfig()
    outcome = authorize_primary(username, password, cfg=cfg)
    if not isinstance(outcome, MfaRequired):
        return outcome

    ch = outcome.challenge
    prompt = f"Enter the MFA code sent to {ch.email or 'your e-mail'}: "
    code = (get_code(prompt) if get_code else input(prompt)).strip()
    return authorize_with_mfa(code, ch.continuation_cookies, cfg=cfg)


__all__ = [
    "authorize_primary",
    "authorize_with_mfa",
    "login_interactive",
]
