"""
FitONEX machine catalog SDK functions.
"""

from typing import List, Optional

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.errors import ApiDecodeError
from fitonex_mcp.sdk.models import Machine, decode_list


def search_machines(
    client: FitonexClient,
    query: Optional[str] = None,
    body_part: Optional[str] = None,
    limit: int = 20,
) -> List[Machine]:
    """
    Search the machine catalog by name and/or body part.

    GET v1/machines

    Returns:
        List of Machine (unwrapped from {machines: [...]})
    """
    data = client.make_request(
        "GET",
        "v1/machines",
        params={"query": query or None, "body_part": body_part or None, "limit": limit},
    )
    if not isinstance(data, dict):
        raise ApiDecodeError("search_machines: expected {machines: [...]}")
    return decode_list(Machine, data.get("machines") or [])


def get_machine(client: FitonexClient, machine_id: str) -> Machine:
    """
    GET v1/machines/{id}
    """
    return Machine.from_dict(client.make_request("GET", "v1/machines/{id}", path_params={"id": machine_id}))


def get_body_parts(client: FitonexClient) -> List[str]:
    """
    List the body-part categories used by the catalog.

    GET v1/machines/body-parts
    """
    data = client.make_request("GET", "v1/machines/body-parts")
    if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
        raise ApiDecodeError("get_body_parts: expected a list of strings")
    return data
