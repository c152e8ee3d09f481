"""
FitONEX session store.

Holds the single bearer credential used for authenticated requests.
The credential is persisted as {"token": "..."} in a JSON file, or kept
in memory when no path is given.
"""

import json
import logging
from pathlib import Path
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class SessionStore:
    """
    Single source of truth for the current bearer credential.

    The authenticated signal changes only through set_credential() and
    clear_credential(). Subscribers are called with the new value when it
    flips.
    """

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else None
        self._token: Optional[str] = None
        self._subscribers: List[Callable[[bool], None]] = []
        self._authenticated = self.get_credential() is not None

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    def get_credential(self) -> Optional[str]:
        """Read the persisted credential, or None when logged out."""
        if self._path is None:
            return self._token
        return self._load().get(TOKEN_KEY)

    def set_credential(self, token: str) -> None:
        """Persist the credential and mark the session authenticated."""
        if not token:
            raise ValueError("Credential must be a non-empty string")
        if self._path is None:
            self._token = token
        else:
            data = self._load()
            data[TOKEN_KEY] = token
            self._save(data)
        self._publish(True)

    def clear_credential(self) -> None:
        """Erase the credential and mark the session logged out."""
        if self._path is None:
            self._token = None
        elif self._path.exists():
            self._path.unlink()
        self._publish(False)

    def subscribe(self, callback: Callable[[bool], None]) -> Callable[[], None]:
        """
        Register a callback for authenticated-signal changes.

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, value: bool) -> None:
        if value == self._authenticated:
            return
        self._authenticated = value
        for callback in list(self._subscribers):
            callback(value)

    def _load(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Unreadable session file {self._path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w") as f:
            json.dump(data, f)
