"""
Auth and profile Resource Clients.

login/register are the only operations that write the session credential,
and only after a successful response.
"""

from fitonex_mcp.api.base import ResourceClient
from fitonex_mcp.sdk import auth as sdk_auth
from fitonex_mcp.sdk.models import AuthResponse, User
from fitonex_mcp.sdk.result import Outcome


class AuthClient(ResourceClient):
    """Register, login and logout."""

    def register(self, email: str, password: str, name: str) -> Outcome[AuthResponse]:
        return self._run("Registration", sdk_auth.register, email, password, name)

    def login(self, email: str, password: str) -> Outcome[AuthResponse]:
        return self._run("Login", sdk_auth.login, email, password)

    def logout(self) -> Outcome[None]:
        return self._run("Logout", sdk_auth.logout)

    @property
    def is_logged_in(self) -> bool:
        return self._client.is_logged_in


class ProfileClient(ResourceClient):
    """The signed-in user's profile."""

    def get_profile(self) -> Outcome[User]:
        return self._run("Fetch profile", sdk_auth.get_profile)

    def update_profile(self, name: str = None, email: str = None) -> Outcome[User]:
        return self._run("Update profile", sdk_auth.update_profile, name=name, email=email)
