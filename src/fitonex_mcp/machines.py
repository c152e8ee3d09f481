"""
Machine catalog tools for FitONEX MCP server.
"""

from fastmcp import Context

from fitonex_mcp.api import machines as api_machines
from fitonex_mcp.client_factory import get_client, render


def register_tools(app):
    """Register machine catalog tools with the MCP app."""

    @app.tool()
    async def search_machines(
        ctx: Context,
        query: str = None,
        body_part: str = None,
        limit: int = 20,
    ) -> str:
        """
        Search the machine catalog.

        Args:
            query: Text to match against machine names (optional)
            body_part: Body-part category, see list_body_parts (optional)
            limit: Maximum number of results (default: 20)

        Returns:
            JSON list of machines
        """
        client = get_client(ctx)
        outcome = api_machines.MachineClient(client).search_machines(query=query, body_part=body_part, limit=limit)
        return render(outcome, client)

    @app.tool()
    async def get_machine(machine_id: str, ctx: Context) -> str:
        """
        Get a machine from the catalog.

        Args:
            machine_id: Machine id
        """
        client = get_client(ctx)
        return render(api_machines.MachineClient(client).get_machine(machine_id), client)

    @app.tool()
    async def list_body_parts(ctx: Context) -> str:
        """
        List the body-part categories machines are filed under.
        """
        client = get_client(ctx)
        return render(api_machines.MachineClient(client).get_body_parts(), client)

    return app
