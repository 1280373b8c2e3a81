# config.py
"""
Configuration and environment defaults for open_riotauth.

This file defines ProviderConfig, a lightweight container for the Riot
authorization endpoints and the fixed client identity the web login presents.
It reads defaults from environment variables (a .env file is honoured) and
exposes the endpoints the login flows talk to.

Environment variables
---------------------
RIOT_CLIENT_ID        : str   # client identity for the init request, "play-valorant-web-prod"
RIOT_AUTH_LANGUAGE    : str   # language sent with the credentials, "en_US"
RIOT_REQUEST_TIMEOUT  : float # per-request timeout in seconds, 30
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Dict
from dotenv import load_dotenv

# Load environment variables from a .env file if present
load_dotenv()

# Default fallbacks
DEFAULT_CLIENT_ID = os.getenv("RIOT_CLIENT_ID", "play-valorant-web-prod")
DEFAULT_LANGUAGE = os.getenv("RIOT_AUTH_LANGUAGE", "en_US")
DEFAULT_TIMEOUT = float(os.getenv("RIOT_REQUEST_TIMEOUT", "30"))

# Where the provider sends the browser after the implicit grant
DEFAULT_REDIRECT_URI = "https://playvalorant.com/opt_in"


@dataclass(frozen=True)
class ProviderConfig:
    """
    Holds the endpoints and client parameters used by the login flows.
    """

    client_id: str = DEFAULT_CLIENT_ID
    language: str = DEFAULT_LANGUAGE
    timeout: float = DEFAULT_TIMEOUT
    redirect_uri: str = DEFAULT_REDIRECT_URI

    # -------------------- Auth endpoints -------------------- #

    @property
    def auth_base(self) -> str:
        """Base URL for authorization endpoints."""
        return "https://auth.riotgames.com"

    @property
    def cookie_domain(self) -> str:
        """Domain the continuation cookies are scoped to."""
        return "auth.riotgames.com"

    @property
    def authorization_url(self) -> str:
        """Cookie seeding (POST), credential and MFA submission (PUT)."""
        return f"{self.auth_base}/api/v1/authorization"

    @property
    def userinfo_url(self) -> str:
        return f"{self.auth_base}/userinfo"

    # -------------------- Entitlements ---------------------- #

    @property
    def entitlements_url(self) -> str:
        """Exchanges an access token for an entitlement token."""
        return "https://entitlements.auth.riotgames.com/api/token/v1"

    # -------------------- Request payloads ------------------ #

    @property
    def init_payload(self) -> Dict[str, object]:
        """Fixed client identity sent to seed the anonymous auth cookies."""
        return {
            "client_id": self.client_id,
            "nonce": 1,
            "redirect_uri": self.redirect_uri,
            "response_type": "token id_token",
            "scope": "account openid",
        }


__all__ = [
    "ProviderConfig",
    "DEFAULT_CLIENT_ID",
    "DEFAULT_LANGUAGE",
    "DEFAULT_TIMEOUT",
]
