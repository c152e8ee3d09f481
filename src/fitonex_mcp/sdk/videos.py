"""
FitONEX instruction video SDK functions.

Uploading is a three step flow: request_upload_url() returns pre-signed
URLs, the caller PUTs the bytes to storage, then finalize_video()
registers the asset with the returned keys.
"""

from typing import Optional

from fitonex_mcp.sdk.client import FitonexClient
from fitonex_mcp.sdk.models import InstructionVideo, Page, UploadTarget


def get_videos(
    client: FitonexClient,
    machine_id: str,
    limit: int = 20,
    cursor: Optional[str] = None,
) -> Page[InstructionVideo]:
    """
    List instruction videos for a machine.

    GET v1/videos
    """
    data = client.make_request(
        "GET",
        "v1/videos",
        params={"machine_id": machine_id, "limit": limit, "cursor": cursor},
    )
    return Page.from_dict(data, InstructionVideo.from_dict)


def get_video(client: FitonexClient, video_id: str) -> InstructionVideo:
    """
    GET v1/videos/{id}
    """
    return InstructionVideo.from_dict(
        client.make_request("GET", "v1/videos/{id}", path_params={"id": video_id})
    )


def request_upload_url(
    client: FitonexClient,
    machine_id: str,
    title: str,
    description: str,
    content_type: str,
    size_bytes: int,
) -> UploadTarget:
    """
    Reserve storage for a new video.

    POST v1/videos/upload-url

    Returns:
        UploadTarget {upload_url, video_key, thumb_upload_url, thumb_key}
    """
    if size_bytes <= 0:
        raise ValueError("bytes must be greater than 0")

    data = client.make_request(
        "POST",
        "v1/videos/upload-url",
        json_data={
            "machine_id": machine_id,
            "title": title,
            "description": description or "",
            "content_type": content_type,
            "bytes": size_bytes,
        },
    )
    return UploadTarget.from_dict(data)


def finalize_video(
    client: FitonexClient,
    machine_id: str,
    title: str,
    description: str,
    video_key: str,
    duration_sec: int,
    thumb_key: Optional[str] = None,
) -> InstructionVideo:
    """
    Register an uploaded video.

    POST v1/videos/finalize
    """
    data = client.make_request(
        "POST",
        "v1/videos/finalize",
        json_data={
            "machine_id": machine_id,
            "title": title,
            "description": description or "",
            "video_key": video_key,
            "thumb_key": thumb_key,
            "duration_sec": duration_sec,
        },
    )
    return InstructionVideo.from_dict(data)


def like_video(client: FitonexClient, video_id: str) -> bool:
    """
    POST v1/videos/{id}/like

    Returns:
        True once the server acknowledged the like
    """
    client.make_request("POST", "v1/videos/{id}/like", path_params={"id": video_id})
    return True


def unlike_video(client: FitonexClient, video_id: str) -> bool:
    """
    DELETE v1/videos/{id}/like
    """
    client.make_request("DELETE", "v1/videos/{id}/like", path_params={"id": video_id})
    return True
