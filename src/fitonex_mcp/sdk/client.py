"""
FitONEX HTTP Client.

Handles HTTP transport, bearer authentication and error translation.
All domain-specific logic lives in the sibling modules (auth, gyms, etc.).
"""

import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from fitonex_mcp.sdk.errors import ApiConnectionError, ApiDecodeError, ApiHTTPError
from fitonex_mcp.sdk.session import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:8080"


def default_api_url() -> str:
    """Base URL from FITONEX_API_URL, read fresh so containers can override it."""
    return os.environ.get("FITONEX_API_URL", DEFAULT_API_URL)


def default_timeout() -> Optional[float]:
    raw = os.environ.get("FITONEX_TIMEOUT")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric FITONEX_TIMEOUT={raw!r}")
        return None


class FitonexClient:
    """
    FitONEX HTTP transport.

    Attaches the session's bearer credential to every request and turns
    transport, status and JSON failures into typed errors.
    Endpoint calls are in sibling modules (sdk.auth, sdk.gyms, etc.).
    """

    def __init__(
        self,
        base_url: str = None,
        session: SessionStore = None,
        timeout: Optional[float] = None,
    ):
        self._api_url = (base_url or default_api_url()).rstrip("/")
        self._session_store = session if session is not None else SessionStore()
        self._timeout = timeout if timeout is not None else default_timeout()
        self._http = requests.Session()

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def session(self) -> SessionStore:
        return self._session_store

    @property
    def is_logged_in(self) -> bool:
        return self._session_store.is_authenticated

    def auth_headers(self) -> Dict[str, str]:
        """Outbound transform: bearer header when a credential is present."""
        token = self._session_store.get_credential()
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    def build_url(self, path: str, path_params: Dict[str, Any] = None) -> str:
        if path_params:
            path = path.format(**{k: quote(str(v), safe="") for k, v in path_params.items()})
        return f"{self._api_url}/{path.lstrip('/')}"

    def make_request(
        self,
        method: str,
        path: str,
        path_params: Dict[str, Any] = None,
        params: Dict[str, Any] = None,
        json_data: Any = None,
    ) -> Any:
        """
        Make an API request.

        Args:
            method: HTTP method (GET/POST/PUT/DELETE)
            path: Path template relative to the base URL (e.g. "v1/gyms/{id}")
            path_params: Values substituted into the path template
            params: Query parameters; None values are dropped
            json_data: JSON body data

        Returns:
            Parsed JSON body, or None for an empty body

        Raises:
            ApiConnectionError: If no response was obtained
            ApiHTTPError: If the server answered with a non-2xx status
            ApiDecodeError: If the body is not valid JSON
        """
        url = self.build_url(path, path_params)
        query = {k: v for k, v in (params or {}).items() if v is not None}

        headers = {"Accept": "application/json"}
        headers.update(self.auth_headers())

        try:
            response = self._http.request(
                method.upper(),
                url,
                headers=headers,
                params=query or None,
                json=json_data,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.debug(f"{method.upper()} {url} -> no response: {e}")
            raise ApiConnectionError(f"Could not reach {self._api_url}: {e}") from e

        logger.debug(f"{method.upper()} {url} -> {response.status_code}")

        if not 200 <= response.status_code < 300:
            message, code = _error_details(response)
            raise ApiHTTPError(response.status_code, message, code)

        if not response.content or not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiDecodeError(f"Invalid JSON from {path}: {e}") from e


def _error_details(response: requests.Response):
    """
    Extract (message, code) from an error response.

    The API uses {"error": {"code": ..., "message": ...}}; a few handlers
    answer with plain text instead.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"], error.get("code")
        if isinstance(error, str) and error:
            return error, None
        if body.get("message"):
            return body["message"], body.get("code")

    text = (response.text or "").strip()
    return text or response.reason or "Unknown API error", None
