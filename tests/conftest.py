"""
Shared fixtures for the sign-in tests.

The provider is never contacted: every test runs against a `responses`
mock of requests, and unregistered URLs raise ConnectionError.
"""

import pytest
import responses

from open_riotauth.config import ProviderConfig

from payloads import ENTITLEMENT_TOKEN, userinfo_response


@pytest.fixture
def cfg():
    return ProviderConfig(timeout=5)


@pytest.fixture
def mocked_responses():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def post_auth(mocked_responses, cfg):
    """Register the entitlement + userinfo endpoints with fixed fixtures."""

    def _register(entitlement=ENTITLEMENT_TOKEN):
        mocked_responses.add(
            responses.POST,
            cfg.entitlements_url,
            json={"entitlements_token": entitlement},
        )
        mocked_responses.add(responses.GET, cfg.userinfo_url, json=userinfo_response())

    return _register
