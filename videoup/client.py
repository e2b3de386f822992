"""
HTTP client for the video service.

Works against a running server (``base_url``) or any ``httpx.Client``
passed in, such as FastAPI's ``TestClient``.
"""
import logging
from typing import List, Optional

import httpx

from videoup.models import Video, VideoBase, VideoStatus
from videoup.routes import DATA_PARAMETER, VIDEO_DATA_PATH, VIDEO_SVC_PATH

logger = logging.getLogger(__name__)


class VideoSvcClient:

    def __init__(self, base_url: Optional[str] = None, http: Optional[httpx.Client] = None, timeout: float = 60.0):
        if http is None and base_url is None:
            raise ValueError("Either base_url or http must be given")
        self._owns_http = http is None
        self.http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)

    def get_video_list(self) -> List[Video]:
        r = self.http.get(VIDEO_SVC_PATH)
        r.raise_for_status()
        return [Video.model_validate(v) for v in r.json()]

    def add_video(self, video: VideoBase) -> Video:
        r = self.http.post(VIDEO_SVC_PATH, json=video.model_dump(include={"title", "duration", "contentType"}))
        r.raise_for_status()
        return Video.model_validate(r.json())

    def set_video_data(self, video_id: int, data: bytes, filename: str = "video.mpg",
                       content_type: str = "application/octet-stream") -> VideoStatus:
        url = VIDEO_DATA_PATH.format(video_id=video_id)
        r = self.http.post(url, files={DATA_PARAMETER: (filename, data, content_type)})
        r.raise_for_status()
        return VideoStatus.model_validate(r.json())

    def get_data(self, video_id: int) -> bytes:
        r = self.http.get(VIDEO_DATA_PATH.format(video_id=video_id))
        r.raise_for_status()
        logger.debug(f"Downloaded {len(r.content)} bytes for video {video_id}")
        return r.content

    def close(self):
        if self._owns_http:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
