"""
FitONEX feature flag SDK function.
"""

from typing import Dict

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.errors import ApiDecodeError


def get_feature_flags(client: FitonexClient) -> Dict[str, bool]:
    """
    Feature flags as evaluated for the caller (rollouts depend on the user).

    GET v1/flags

    Returns:
        Mapping of flag name to enabled
    """
    data = client.make_request("GET", "v1/flags")
    flags = data.get("flags") if isinstance(data, dict) else None
    if not isinstance(flags, dict) or not all(isinstance(v, bool) for v in flags.values()):
        raise ApiDecodeError("get_feature_flags: expected {flags: {name: bool}}")
    return flags
