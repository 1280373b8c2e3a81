# exceptions.py
"""
Errors raised inside the login flows.

Every error carries the FailureReason it collapses to; the flows in auth.py
catch RiotAuthError and turn it into a Failed outcome, so none of these cross
into the session layer.
"""

from __future__ import annotations

from .models import FailureReason


class RiotAuthError(RuntimeError):
    reason: FailureReason = FailureReason.PROVIDER_REQUEST_FAILED


class MissingUsername(RiotAuthError):
    reason = FailureReason.MISSING_USERNAME


class MissingPassword(RiotAuthError):
    reason = FailureReason.MISSING_PASSWORD


class MissingMfaCode(RiotAuthError):
    reason = FailureReason.MISSING_MFA_CODE


class MalformedContinuationState(RiotAuthError):
    """The continuation token was truncated, tampered with, or never issued by us."""

    reason = FailureReason.MALFORMED_CONTINUATION_STATE


class MissingAccessToken(RiotAuthError):
    reason = FailureReason.MISSING_ACCESS_TOKEN


class ProviderRequestFailed(RiotAuthError):
    """Network/HTTP failure, or a response body we could not make sense of."""

    reason = FailureReason.PROVIDER_REQUEST_FAILED


class ProviderRejected(RiotAuthError):
    """The provider answered with an explicit error (auth_failure, rate_limited, ...)."""

    reason = FailureReason.PROVIDER_REJECTED

    def __init__(self, error: str):
        super().__init__(error)
        self.error = error


class CookieSeedFailed(RiotAuthError):
    reason = FailureReason.COOKIE_SEED_FAILED


__all__ = [
    "RiotAuthError",
    "MissingUsername",
    "MissingPassword",
    "MissingMfaCode",
    "MalformedContinuationState",
    "MissingAccessToken",
    "ProviderRequestFailed",
    "ProviderRejected",
    "CookieSeedFailed",
]
