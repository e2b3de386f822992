class VideoSvcError(Exception):
    """Base class for video service errors."""


class VideoNotFound(VideoSvcError):
    """No video metadata is registered under the identifier."""

    def __init__(self, video_id: int):
        super().__init__(f"Video {video_id} not found")
        self.video_id = video_id


class PayloadNotFound(VideoSvcError):
    """The video is registered but no data has been uploaded for it."""

    def __init__(self, video_id: int):
        super().__init__(f"No data uploaded for video {video_id}")
        self.video_id = video_id


class StorageError(VideoSvcError):
    """Reading or writing video data failed."""
