"""Tests for SDK auth and profile functions."""

import pytest

from fitonex_mcp.sdk import auth
from fitonex_mcp.sdk.errors import ApiDecodeError, ApiHTTPError
from tests.conftest import USER


class TestLogin:
    def test_login_success_stores_credential(self, sdk_client):
        sdk_client.make_request.return_value = {"token": "new_token", "user": USER}

        result = auth.login(sdk_client, "test@test.com", "pass123")

        assert result.user.name == "TestUser"
        assert sdk_client.session.get_credential() == "new_token"
        assert sdk_client.is_logged_in is True

        call = sdk_client.make_request.call_args
        assert call.args == ("POST", "v1/auth/login")
        assert call.kwargs["json_data"] == {"email": "test@test.com", "password": "pass123"}

    def test_login_missing_credentials(self, sdk_client):
        with pytest.raises(ValueError, match="Missing credentials"):
            auth.login(sdk_client, "", "x")
        sdk_client.make_request.assert_not_called()

    def test_failed_login_keeps_prior_credential(self, sdk_client):
        sdk_client.session.set_credential("prior")
        sdk_client.make_request.side_effect = ApiHTTPError(401, "invalid credentials", "Unauthorized")

        with pytest.raises(ApiHTTPError):
            auth.login(sdk_client, "test@test.com", "wrong")

        assert sdk_client.session.get_credential() == "prior"

    def test_malformed_login_response_keeps_session(self, sdk_client):
        sdk_client.make_request.return_value = {"user": USER}
        with pytest.raises(ApiDecodeError):
            auth.login(sdk_client, "test@test.com", "pass")
        assert sdk_client.is_logged_in is False


class TestRegister:
    def test_register_stores_credential(self, sdk_client):
        sdk_client.make_request.return_value = {"token": "reg_token", "user": USER}

        result = auth.register(sdk_client, "test@test.com", "pass123", "TestUser")

        assert result.token == "reg_token"
        assert sdk_client.session.get_credential() == "reg_token"
        assert sdk_client.make_request.call_args.kwargs["json_data"]["name"] == "TestUser"

    def test_register_requires_name(self, sdk_client):
        with pytest.raises(ValueError):
            auth.register(sdk_client, "a@b.c", "pw", "")


class TestLogout:
    def test_logout_clears_credential(self, sdk_client):
        sdk_client.session.set_credential("tok")
        auth.logout(sdk_client)
        assert sdk_client.session.get_credential() is None
        assert sdk_client.is_logged_in is False
        sdk_client.make_request.assert_not_called()


class TestProfile:
    def test_get_profile(self, sdk_client):
        sdk_client.make_request.return_value = USER
        user = auth.get_profile(sdk_client)
        assert user.id == "u-1"
        sdk_client.make_request.assert_called_once_with("GET", "v1/profile")

    def test_update_profile_sends_only_given_fields(self, sdk_client):
        sdk_client.make_request.return_value = {**USER, "name": "New"}
        user = auth.update_profile(sdk_client, name="New")
        assert user.name == "New"
        assert sdk_client.make_request.call_args.kwargs["json_data"] == {"name": "New"}

    def test_update_profile_requires_a_field(self, sdk_client):
        with pytest.raises(ValueError, match="Nothing to update"):
            auth.update_profile(sdk_client)
