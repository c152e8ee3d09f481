"""
Instruction video Resource Client.

like_video/unlike_video change server state only; callers refetch to see
the new like_count.
"""

from typing import Optional

from fitonex_mcp.api.base import ResourceClient
from fitonex_mcp.sdk import videos as sdk_videos
from fitonex_mcp.sdk.models import InstructionVideo, Page, UploadTarget
from fitonex_mcp.sdk.pagination import CursorPager
from fitonex_mcp.sdk.result import Outcome


class VideoClient(ResourceClient):

    def list_videos(self, machine_id: str, limit: int = 20, cursor: Optional[str] = None) -> Outcome[Page[InstructionVideo]]:
        return self._run("Fetch videos", sdk_videos.get_videos, machine_id, limit=limit, cursor=cursor)

    def get_video(self, video_id: str) -> Outcome[InstructionVideo]:
        return self._run("Fetch video", sdk_videos.get_video, video_id)

    def request_upload_slot(
        self,
        machine_id: str,
        title: str,
        description: str,
        content_type: str,
        size_bytes: int,
    ) -> Outcome[UploadTarget]:
        return self._run(
            "Get upload URL", sdk_videos.request_upload_url,
            machine_id, title, description, content_type, size_bytes,
        )

    def finalize_video(
        self,
        machine_id: str,
        title: str,
        description: str,
        video_key: str,
        duration_sec: int,
        thumb_key: Optional[str] = None,
    ) -> Outcome[InstructionVideo]:
        return self._run(
            "Finalize video", sdk_videos.finalize_video,
            machine_id, title, description, video_key, duration_sec, thumb_key=thumb_key,
        )

    def like_video(self, video_id: str) -> Outcome[bool]:
        return self._run("Like video", sdk_videos.like_video, video_id)

    def unlike_video(self, video_id: str) -> Outcome[bool]:
        return self._run("Unlike video", sdk_videos.unlike_video, video_id)

    def videos_pager(self, machine_id: str, limit: int = 20) -> CursorPager[InstructionVideo]:
        return CursorPager(lambda cursor: self.list_videos(machine_id, limit=limit, cursor=cursor))
