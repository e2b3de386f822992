import itertools
import logging
import threading
from typing import Dict, List, Optional

from videoup.models import Video, VideoBase

logger = logging.getLogger(__name__)


def data_url_base(host: str, port: Optional[int]) -> str:
    """Externally visible base URL of the server, without the default port."""
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"   # IPv6 literal
    if port is None or port == 80:
        return f"http://{host}"
    return f"http://{host}:{port}"


def data_url(base_url: str, video_id: int) -> str:
    return f"{base_url.rstrip('/')}/video/{video_id}/data"


class VideoRegistry:
    """In-memory video metadata, keyed by identifier.

    Identifiers start at 1 and are never reused for the lifetime of the
    registry. Records are returned in the order they were added.
    """

    def __init__(self):
        self.videos: Dict[int, Video] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def list(self) -> List[Video]:
        return list(self.videos.values())

    def add(self, video: VideoBase, base_url: str) -> Video:
        with self._lock:
            video_id = next(self._ids)
            stored = Video(
                **video.model_dump(include={"title", "duration", "contentType"}),
                id=video_id,
                dataUrl=data_url(base_url, video_id),
            )
            self.videos[video_id] = stored

        logger.info(f"Registered video {video_id}: {stored.title!r} ({stored.contentType})")
        return stored

    def get(self, video_id: int) -> Optional[Video]:
        return self.videos.get(video_id)

    def __contains__(self, video_id: int) -> bool:
        return video_id in self.videos

    def __len__(self) -> int:
        return len(self.videos)
