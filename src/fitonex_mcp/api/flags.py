"""
Feature flag Resource Client.
"""

from typing import Dict

from fitonex_mcp.api.base import ResourceClient
from fitonex_mcp.sdk import flags as sdk_flags
from fitonex_mcp.sdk.result import Outcome


class FeatureFlagClient(ResourceClient):

    def get_feature_flags(self) -> Outcome[Dict[str, bool]]:
        return self._run("Fetch feature flags", sdk_flags.get_feature_flags)
