"""
Machine catalog Resource Client.
"""

from typing import List, Optional

from fitonex_mcp.api.base import ResourceClient
from fitonex_mcp.sdk import machines as sdk_machines
from fitonex_mcp.sdk.models import Machine
from fitonex_mcp.sdk.result import Outcome


class MachineClient(ResourceClient):

    def search_machines(
        self,
        query: Optional[str] = None,
        body_part: Optional[str] = None,
        limit: int = 20,
    ) -> Outcome[List[Machine]]:
        return self._run(
            "Search machines", sdk_machines.search_machines,
            query=query, body_part=body_part, limit=limit,
        )

    def get_machine(self, machine_id: str) -> Outcome[Machine]:
        return self._run("Fetch machine", sdk_machines.get_machine, machine_id)

    def get_body_parts(self) -> Outcome[List[str]]:
        return self._run("Fetch body parts", sdk_machines.get_body_parts)
