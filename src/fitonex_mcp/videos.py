"""
Instruction video tools for FitONEX MCP server.

Browse videos per machine, upload flow, likes.
"""

from fastmcp import Context

from fitonex_mcp.api import videos as api_videos
from fitonex_mcp.client_factory import get_client, render

MAX_PAGE_SIZE = 50


def register_tools(app):
    """Register video tools with the MCP app."""

    @app.tool()
    async def list_videos(machine_id: str, ctx: Context, limit: int = 20, cursor: str = None) -> str:
        """
        List instruction videos for a machine.

        Args:
            machine_id: Machine id
            limit: Page size (default: 20, max: 50)
            cursor: next_cursor from a previous call

        Returns:
            JSON page {items, next_cursor, has_more}
        """
        client = get_client(ctx)
        outcome = api_videos.VideoClient(client).list_videos(
            machine_id, limit=min(limit, MAX_PAGE_SIZE), cursor=cursor,
        )
        return render(outcome, client)

    @app.tool()
    async def get_video(video_id: str, ctx: Context) -> str:
        """
        Get one instruction video with like count and liked flag.

        Args:
            video_id: Video id
        """
        client = get_client(ctx)
        return render(api_videos.VideoClient(client).get_video(video_id), client)

    @app.tool()
    async def request_video_upload(
        machine_id: str,
        title: str,
        content_type: str,
        size_bytes: int,
        ctx: Context,
        description: str = "",
    ) -> str:
        """
        Get pre-signed URLs to upload a video (and thumbnail).

        PUT the file to upload_url, then call finalize_video with video_key.

        Args:
            machine_id: Machine the video demonstrates
            title: Video title
            content_type: MIME type, e.g. "video/mp4"
            size_bytes: File size in bytes
            description: Optional description

        Returns:
            JSON {upload_url, video_key, thumb_upload_url, thumb_key}
        """
        client = get_client(ctx)
        outcome = api_videos.VideoClient(client).request_upload_slot(
            machine_id, title, description, content_type, size_bytes,
        )
        return render(outcome, client)

    @app.tool()
    async def finalize_video(
        machine_id: str,
        title: str,
        video_key: str,
        duration_sec: int,
        ctx: Context,
        description: str = "",
        thumb_key: str = None,
    ) -> str:
        """
        Register an uploaded video.

        Args:
            machine_id: Machine the video demonstrates
            title: Video title
            video_key: Key returned by request_video_upload
            duration_sec: Video length in seconds
            description: Optional description
            thumb_key: Thumbnail key, if a thumbnail was uploaded
        """
        client = get_client(ctx)
        outcome = api_videos.VideoClient(client).finalize_video(
            machine_id, title, description, video_key, duration_sec, thumb_key=thumb_key,
        )
        return render(outcome, client)

    @app.tool()
    async def like_video(video_id: str, ctx: Context) -> str:
        """
        Like a video. Call get_video to see the updated count.

        Args:
            video_id: Video id
        """
        client = get_client(ctx)
        return render(api_videos.VideoClient(client).like_video(video_id), client)

    @app.tool()
    async def unlike_video(video_id: str, ctx: Context) -> str:
        """
        Remove a like from a video.

        Args:
            video_id: Video id
        """
        client = get_client(ctx)
        return render(api_videos.VideoClient(client).unlike_video(video_id), client)

    return app
