# signin.py
"""
Boundary between the login flows and whatever issues the signed-in session.

authorize() picks the flow for one attempt and maps its outcome to one of:

    SignedIn       -> identity record to put into the session
    MfaPrompt      -> no session; send the browser back to the login page with
                      ?mfa=true&cookies=<opaque token> so it can ask for the code
    SignInFailed   -> no session; a generic message safe to show the user

Reasons and provider details are logged, never shown.
"""

from __future__ import annotations
import logging
import urllib.parse as urlparse
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from .auth import authorize_primary, authorize_with_mfa
from .config import ProviderConfig
from .models import Authenticated, Credentials, FailureReason, MfaRequired

logger = logging.getLogger(__name__)

LOGIN_FAILED = "Login failed"
INVALID_CODE = "Invalid code"

# Redirect query keys carrying the MFA continuation
MFA_QUERY_KEY = "mfa"
COOKIES_QUERY_KEY = "cookies"


@dataclass(frozen=True)
class SignedIn:
    subject_id: str
    display_name: Optional[str]
    access_token: str = field(repr=False)
    entitlement_token: str = field(repr=False)


@dataclass(frozen=True)
class MfaPrompt:
    continuation_cookies: str = field(repr=False)

    @property
    def query_params(self) -> Dict[str, str]:
        return {MFA_QUERY_KEY: "true", COOKIES_QUERY_KEY: self.continuation_cookies}

    def redirect_url(self, login_url: str) -> str:
        """`login_url` with the MFA parameters merged into its query string."""
        parts = urlparse.urlsplit(login_url)
        params = self.query_params
        query = [
            (k, v) for k, v in urlparse.parse_qsl(parts.query, keep_blank_values=True)
            if k not in params
        ]
        query.extend(params.items())
        return urlparse.urlunsplit(parts._replace(query=urlparse.urlencode(query)))


@dataclass(frozen=True)
class SignInFailed:
    message: str
    reason: FailureReason


SignInResult = Union[SignedIn, MfaPrompt, SignInFailed]


def authorize(
    credentials: Credentials,
    mfa_code: Optional[str] = None,
    continuation_cookies: Optional[str] = None,
    mfa_required: bool = False,
    *,
    cfg: Optional[ProviderConfig] = None,
) -> SignInResult:
    """
    Run one sign-in attempt. Never raises.
    """
    if mfa_required:
        if not mfa_code:
            logger.warning("MFA continuation attempted without a code")
            return SignInFailed(INVALID_CODE, FailureReason.MISSING_MFA_CODE)
        outcome = authorize_with_mfa(mfa_code, continuation_cookies, cfg=cfg)
        failure_message = INVALID_CODE
    else:
        outcome = authorize_primary(credentials.username, credentials.password, cfg=cfg)
        failure_message = LOGIN_FAILED

    if isinstance(outcome, MfaRequired):
        return MfaPrompt(continuation_cookies=outcome.challenge.continuation_cookies)

    if isinstance(outcome, Authenticated):
        profile = outcome.user_profile
        return SignedIn(
            subject_id=profile.subject_id,
            display_name=profile.display_name,
            access_token=outcome.access_token,
            entitlement_token=outcome.entitlement_token,
        )

    logger.info("Sign-in rejected: %s", outcome.reason.value)
    return SignInFailed(failure_message, outcome.reason)


def _first_value(value: Any) -> Optional[str]:
    # parse_qs-style mappings hold lists
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    return value if value is None else str(value)


def _flag_set(query: Mapping[str, Any], key: str) -> bool:
    # the bare key (`?mfa&cookies=...`) counts as set
    if key not in query:
        return False
    value = (_first_value(query[key]) or "").strip().lower()
    return value not in ("false", "0", "no")


def authorize_request(
    form: Mapping[str, Any],
    query: Mapping[str, Any],
    *,
    cfg: Optional[ProviderConfig] = None,
) -> SignInResult:
    """
    Adapter for a login form post: `form` has username / password /
    multifactorCode, `query` is the re-entry redirect's query (mfa, cookies).
    """
    credentials = Credentials(
        username=_first_value(form.get("username")) or "",
        password=_first_value(form.get("password")) or "",
    )
    return authorize(
        credentials,
        mfa_code=_first_value(form.get("multifactorCode")),
        continuation_cookies=_first_value(query.get(COOKIES_QUERY_KEY)),
        mfa_required=_flag_set(query, MFA_QUERY_KEY),
        cfg=cfg,
    )


__all__ = [
    "SignedIn",
    "MfaPrompt",
    "SignInFailed",
    "SignInResult",
    "authorize",
    "authorize_request",
    "LOGIN_FAILED",
    "INVALID_CODE",
]
