"""Video stream lookup and a plain HTTP fetch helper."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qs, unquote, urlencode
from urllib.request import urlopen

from havenapi.util import format_byte_size

VIDEO_INFO_ENDPOINT = "https://www.youtube.com/get_video_info"


@dataclass(frozen=True)
class VideoFormat:
    """One downloadable stream of a video."""

    size: int
    size_formatted: str
    url: str
    mime_type: str
    quality: str


@dataclass
class VideoInfo:
    """A video's title, thumbnail and available streams."""

    results: list[VideoFormat] = field(default_factory=list)
    thumbnail: str = ""
    title: str = ""


def _parse_format(raw: dict[str, Any]) -> VideoFormat:
    duration = int(raw.get("approxDurationMs", ""))
    size = raw.get("bitrate", 0) * duration // 8
    return VideoFormat(
        size=size,
        size_formatted=format_byte_size(size // 1024),
        url=unquote(raw.get("url", "")),
        mime_type=raw.get("mimeType", ""),
        quality=raw.get("qualityLabel", ""),
    )


def parse_video_info(data: str | bytes) -> VideoInfo:
    """Parse a URL-encoded video info response into a ``VideoInfo``."""
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    query = parse_qs(data, keep_blank_values=True)
    player_response = query.get("player_response", [""])[0]
    response = json.loads(player_response) or {}
    formats = (response.get("streamingData") or {}).get("formats") or []
    details = response.get("videoDetails") or {}
    thumbnails = (details.get("thumbnail") or {}).get("thumbnails") or []
    if not thumbnails:
        raise ValueError("video info has no thumbnails")
    return VideoInfo(
        results=[_parse_format(f) for f in formats],
        thumbnail=thumbnails[-1].get("url", ""),
        title=details.get("title", "").replace("+", " "),
    )


def http_get(url: str) -> bytes:
    """Fetch ``url`` and return the response body."""
    with urlopen(url) as response:
        return response.read()


def fetch_video_info(video_id: str) -> VideoInfo:
    """Download and parse the stream information for ``video_id``."""
    params = urlencode(
        {
            "video_id": video_id,
            "el": "detailpage",
            "ps": "default",
            "html5": "1",
            "c": "TVHTML5",
            "cver": "6.20180913",
        }
    )
    return parse_video_info(http_get(f"{VIDEO_INFO_ENDPOINT}?{params}"))