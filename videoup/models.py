from enum import Enum

from sqlmodel import SQLModel, Field


class VideoBase(SQLModel):
    title: str
    duration: int = Field(ge=0)   # seconds
    contentType: str


class Video(VideoBase):
    id: int
    dataUrl: str                  # public URL of the video data


class VideoState(str, Enum):
    READY = "READY"


class VideoStatus(SQLModel):
    videoState: VideoState
