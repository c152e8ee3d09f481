"""
FitONEX authentication and profile SDK functions.
"""

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.models import AuthResponse, User


def login(client: FitonexClient, email: str, password: str) -> AuthResponse:
    """
    Authenticate with FitONEX.

    POST v1/auth/login

    Stores the returned token in the client's session only once the
    response has been decoded; a failed login leaves the session untouched.

    Returns:
        AuthResponse with token and user

    Raises:
        ValueError: If credentials are missing
    """
    if not email or not password:
        raise ValueError("Missing credentials")

    data = client.make_request(
        "POST",
        "v1/auth/login",
        json_data={"email": email, "password": password},
    )
    auth = AuthResponse.from_dict(data)
    client.session.set_credential(auth.token)
    return auth


def register(client: FitonexClient, email: str, password: str, name: str) -> AuthResponse:
    """
    Create an account and start a session.

    POST v1/auth/register

    Returns:
        AuthResponse with token and the new user
    """
    if not email or not password or not name:
        raise ValueError("email, password, and name are required")

    data = client.make_request(
        "POST",
        "v1/auth/register",
        json_data={"email": email, "password": password, "name": name},
    )
    auth = AuthResponse.from_dict(data)
    client.session.set_credential(auth.token)
    return auth


def logout(client: FitonexClient) -> None:
    """Forget the stored credential. No request is made."""
    client.session.clear_credential()


def get_profile(client: FitonexClient) -> User:
    """
    Get the signed-in user.

    GET v1/profile
    """
    return User.from_dict(client.make_request("GET", "v1/profile"))


def update_profile(client: FitonexClient, name: str = None, email: str = None) -> User:
    """
    Update name and/or email of the signed-in user.

    PUT v1/profile
    """
    payload = {}
    if name is not None:
        payload["name"] = name
    if email is not None:
        payload["email"] = email
    if not payload:
        raise ValueError("Nothing to update: provide name or email")

    return User.from_dict(client.make_request("PUT", "v1/profile", json_data=payload))
