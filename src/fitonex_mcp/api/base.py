"""
Shared plumbing for Resource Clients.

Every Resource Client method runs one SDK call through ResourceClient._run,
which converts any failure into Outcome.fail so nothing escapes to the caller.
"""

import logging
from typing import Any, Callable

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.errors import FitonexApiError
from fitonex_mcp.sdk.result import Outcome

logger = logging.getLogger(__name__)


class ResourceClient:
    """Base class: holds the transport and normalizes failures."""

    def __init__(self, client: FitonexClient):
        self._client = client

    @property
    def client(self) -> FitonexClient:
        return self._client

    def _run(self, action: str, call: Callable[..., Any], *args, **kwargs) -> Outcome:
        try:
            value = call(self._client, *args, **kwargs)
        except (FitonexApiError, ValueError) as e:
            logger.warning(f"{action} failed: {e}")
            return Outcome.from_error(action, e)
        except Exception as e:
            logger.exception(f"{action} failed unexpectedly")
            return Outcome.from_error(action, e)
        return Outcome.ok(value)
