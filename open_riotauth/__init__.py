# __init__.py
"""
Public, easy-to-use entry points for Riot account sign-in.

Quick start
-----------
from open_riotauth import Credentials, sign_in, MfaPrompt, SignedIn

# 1) First attempt: username + password
result = sign_in(Credentials("user", "hunter2"))

# 2) Provider wants a code: send the browser back with result.query_params,
#    then finish with the code and the opaque token that came back
if isinstance(result, MfaPrompt):
    result = sign_in(Credentials("", ""), mfa_code="123456",
                     continuation_cookies=result.continuation_cookies,
                     mfa_required=True)

if isinstance(result, SignedIn):
    print(result.subject_id, result.display_name)
"""

from __future__ import annotations
from typing import Optional

from .config import ProviderConfig, DEFAULT_CLIENT_ID
from .auth import (
    authorize_primary,
    authorize_with_mfa,
    login_interactive,
)
from .cookies import encode_continuation_cookies, decode_continuation_cookies
from .exceptions import RiotAuthError, MalformedContinuationState, MissingAccessToken
from .models import (
    Credentials,
    ContinuationCookies,
    MultifactorChallenge,
    UserProfile,
    Authenticated,
    MfaRequired,
    Failed,
    FailureReason,
)
from .signin import (
    authorize as _authorize,
    authorize_request,
    SignedIn,
    MfaPrompt,
    SignInFailed,
    SignInResult,
)
from .tokens import extract_tokens


# -------- Top-level convenience functions (stable public surface) -------- #

def sign_in(
    credentials: Credentials,
    *,
    mfa_code: Optional[str] = None,
    continuation_cookies: Optional[str] = None,
    mfa_required: bool = False,
    cfg: Optional[ProviderConfig] = None,
) -> SignInResult:
    """
    One sign-in attempt for the session layer.
    Returns SignedIn, MfaPrompt (ask for a code, no session yet) or SignInFailed.
    """
    return _authorize(
        credentials,
        mfa_code=mfa_code,
        continuation_cookies=continuation_cookies,
        mfa_required=mfa_required,
        cfg=cfg,
    )


# What we expose as public API
__all__ = [
    "sign_in",
    "authorize_request",
    "authorize_primary",
    "authorize_with_mfa",
    "login_interactive",
    "extract_tokens",
    "encode_continuation_cookies",
    "decode_continuation_cookies",
    "Credentials",
    "ContinuationCookies",
    "MultifactorChallenge",
    "UserProfile",
    "Authenticated",
    "MfaRequired",
    "Failed",
    "FailureReason",
    "SignedIn",
    "MfaPrompt",
    "SignInFailed",
    "SignInResult",
    "RiotAuthError",
    "MalformedContinuationState",
    "MissingAccessToken",
    "ProviderConfig",
    "DEFAULT_CLIENT_ID",
]
