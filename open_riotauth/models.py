# models.py
"""
Value types passed between the login flows and their callers.

An authorization attempt always ends in exactly one AuthorizationOutcome:

    Authenticated  -> tokens + profile, ready for session issuance
    MfaRequired    -> the provider wants a second factor; carries the opaque
                      continuation token needed to resume
    Failed         -> reason code (for logs) and a short detail string
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


class FailureReason(str, Enum):
    MISSING_USERNAME = "missing_username"
    MISSING_PASSWORD = "missing_password"
    MISSING_MFA_CODE = "missing_mfa_code"
    MALFORMED_CONTINUATION_STATE = "malformed_continuation_state"
    MISSING_ACCESS_TOKEN = "missing_access_token"
    PROVIDER_REQUEST_FAILED = "provider_request_failed"
    PROVIDER_REJECTED = "provider_rejected"
    COOKIE_SEED_FAILED = "cookie_seed_failed"


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class ContinuationCookies:
    """Raw `clid` / `asid` cookie values from the first login pass."""

    clid: str = field(repr=False)
    asid: str = field(repr=False)


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    id_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None


@dataclass(frozen=True)
class AccessMaterial:
    access_token: str
    entitlement_token: str


@dataclass(frozen=True)
class UserProfile:
    subject_id: str
    display_name: Optional[str] = None
    tag_line: Optional[str] = None
    country: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class MultifactorChallenge:
    """
    Second-factor demand from the provider.

    `continuation_cookies` is the encoded token from cookies.encode_continuation_cookies;
    raw cookie values are never stored here.
    """

    continuation_cookies: str
    method: Optional[str] = None
    methods: Tuple[str, ...] = ()
    code_length: Optional[int] = None
    version: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class Authenticated:
    access_token: str
    entitlement_token: str
    user_profile: UserProfile


@dataclass(frozen=True)
class MfaRequired:
    challenge: MultifactorChallenge


@dataclass(frozen=True)
class Failed:
    reason: FailureReason
    detail: str = ""


AuthorizationOutcome = Union[Authenticated, MfaRequired, Failed]


__all__ = [
    "FailureReason",
    "Credentials",
    "ContinuationCookies",
    "TokenPair",
    "AccessMaterial",
    "UserProfile",
    "MultifactorChallenge",
    "Authenticated",
    "MfaRequired",
    "Failed",
    "AuthorizationOutcome",
]
