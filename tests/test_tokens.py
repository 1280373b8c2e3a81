"""Unit tests for redirect-fragment token extraction."""

import logging

import pytest

from open_riotauth.exceptions import MissingAccessToken
from open_riotauth.tokens import extract_tokens

from payloads import REDIRECT_URI


class TestExtractTokens:
    def test_full_fragment(self):
        tokens = extract_tokens(REDIRECT_URI)
        assert tokens.access_token == "AT1"
        assert tokens.id_token == "ID1"
        assert tokens.expires_in == 3600
        assert tokens.token_type == "Bearer"

    @pytest.mark.parametrize(
        "fragment,expected",
        [
            ("access_token=X", "X"),
            ("id_token=I&access_token=X", "X"),
            ("access_token=eyJ.a-b_c%3D&expires_in=3600", "eyJ.a-b_c="),
            ("scope=account+openid&access_token=tok&token_type=Bearer", "tok"),
        ],
    )
    def test_access_token_from_fragment(self, fragment, expected):
        assert extract_tokens(f"https://playvalorant.com/opt_in#{fragment}").access_token == expected

    @pytest.mark.parametrize(
        "uri",
        [
            "https://playvalorant.com/opt_in",
            "https://playvalorant.com/opt_in#",
            "https://playvalorant.com/opt_in#id_token=I&expires_in=3600",
            "https://playvalorant.com/opt_in#access_token=",
            # query string is not the fragment
            "https://playvalorant.com/opt_in?access_token=X#id_token=I",
            "",
        ],
    )
    def test_missing_access_token(self, uri):
        with pytest.raises(MissingAccessToken):
            extract_tokens(uri)

    def test_missing_id_token_is_tolerated_and_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="open_riotauth.tokens"):
            tokens = extract_tokens("https://playvalorant.com/opt_in#access_token=X")
        assert tokens.access_token == "X"
        assert tokens.id_token is None
        assert "no id token" in caplog.text

    def test_bad_expires_in_is_ignored(self):
        tokens = extract_tokens("https://playvalorant.com/opt_in#access_token=X&expires_in=soon")
        assert tokens.expires_in is None

    @pytest.mark.parametrize("uri", [None, 123, ["https://playvalorant.com/opt_in#access_token=X"]])
    def test_non_string_uri(self, uri):
        with pytest.raises(MissingAccessToken):
            extract_tokens(uri)
