"""Unit tests for the MFA continuation cookie codec and jar helpers."""

import base64
import json

import pytest
from requests.cookies import RequestsCookieJar

from open_riotauth.cookies import (
    decode_continuation_cookies,
    encode_continuation_cookies,
    extract_continuation_cookies,
    seed_continuation_cookies,
)
from open_riotauth.exceptions import MalformedContinuationState, ProviderRequestFailed
from open_riotauth.models import ContinuationCookies


def _b64(text):
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class TestCodec:
    @pytest.mark.parametrize(
        "clid,asid",
        [
            ("c1", "a1"),
            ("ec1", "Gn0Zl1aQ3xk-h5Rl.Uq8Ew=="),
            ("", ""),
            ('with "quotes" and \\slashes', "spaces and ; semicolons"),
            ("ünïcødé", "日本語"),
        ],
    )
    def test_round_trip(self, clid, asid):
        cookies = ContinuationCookies(clid=clid, asid=asid)
        assert decode_continuation_cookies(encode_continuation_cookies(cookies)) == cookies

    def test_wire_format_is_base64_json(self):
        token = encode_continuation_cookies(ContinuationCookies(clid="c1", asid="a1"))
        assert json.loads(base64.b64decode(token)) == {"clid": "c1", "asid": "a1"}

    def test_decodes_foreign_key_order(self):
        token = _b64('{"asid": "a1", "clid": "c1"}')
        assert decode_continuation_cookies(token) == ContinuationCookies(clid="c1", asid="a1")

    @pytest.mark.parametrize(
        "token",
        [
            None,
            "",
            "not base64 at all!!",
            "%%%%",
            _b64("not json"),
            _b64("[1, 2]"),
            _b64('"just a string"'),
            _b64('{"clid": "c1"}'),
            _b64('{"clid": 1, "asid": "a1"}'),
            base64.b64encode(b"\xff\xfe\xfd").decode("ascii"),
            _b64('{"clid": "c1", "asid": "a1"}')[:-4],
            # deeply nested arrays, short enough to reach the JSON parser
            _b64("[" * 6000),
            # far beyond any token we issue
            _b64("[" * 100000),
            _b64('{"clid": "c1", "asid": "a1", "pad": "' + "x" * 10000 + '"}'),
        ],
    )
    def test_rejects_malformed(self, token):
        with pytest.raises(MalformedContinuationState):
            decode_continuation_cookies(token)


class TestJarHelpers:
    def test_extract_matches_by_name(self):
        jar = RequestsCookieJar()
        jar.set("tdid", "t1", domain="auth.riotgames.com", path="/")
        jar.set("clid", "c1", domain="auth.riotgames.com", path="/")
        jar.set("asid", "a1", domain="auth.riotgames.com", path="/")
        assert extract_continuation_cookies(jar) == ContinuationCookies(clid="c1", asid="a1")

    def test_extract_requires_both(self):
        jar = RequestsCookieJar()
        jar.set("clid", "c1", domain="auth.riotgames.com", path="/")
        with pytest.raises(ProviderRequestFailed, match="asid"):
            extract_continuation_cookies(jar)

    def test_seed_scopes_to_domain(self):
        jar = seed_continuation_cookies(
            RequestsCookieJar(), ContinuationCookies(clid="c1", asid="a1"), "auth.riotgames.com"
        )
        assert jar.get("clid", domain="auth.riotgames.com") == "c1"
        assert jar.get("asid", domain="auth.riotgames.com") == "a1"
