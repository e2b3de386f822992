import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import HTMLResponse, StreamingResponse
from fastapi.templating import Jinja2Templates

from videoup import config
from videoup.errors import PayloadNotFound, VideoNotFound
from videoup.models import Video, VideoBase, VideoState, VideoStatus
from videoup.services.video_file_store import VideoFileStore
from videoup.services.video_registry import VideoRegistry, data_url_base

logger = logging.getLogger(__name__)

VIDEO_SVC_PATH = "/video"
VIDEO_DATA_PATH = VIDEO_SVC_PATH + "/{video_id}/data"
DATA_PARAMETER = "data"

router = APIRouter()
templates = Jinja2Templates(directory=config.TEMPLATES_DIR)


def get_registry(request: Request) -> VideoRegistry:
    return request.app.state.registry


def get_store(request: Request) -> VideoFileStore:
    return request.app.state.store


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    registry: VideoRegistry = Depends(get_registry),
    store: VideoFileStore = Depends(get_store),
):
    videos = [
        {"video": v, "has_data": store.exists(v.id)}
        for v in registry.list()
    ]
    return templates.TemplateResponse(request, "index.html", {"videos": videos})


@router.get(VIDEO_SVC_PATH, response_model=list[Video])
def get_video_list(registry: VideoRegistry = Depends(get_registry)):
    return registry.list()


@router.post(VIDEO_SVC_PATH, response_model=Video)
def add_video(
    video: VideoBase,
    request: Request,
    registry: VideoRegistry = Depends(get_registry),
):
    # host/port of the inbound request become part of the data URL
    base_url = data_url_base(request.url.hostname, request.url.port)
    return registry.add(video, base_url)


@router.post(VIDEO_DATA_PATH, response_model=VideoStatus)
def set_video_data(
    video_id: int,
    data: UploadFile = File(...),
    registry: VideoRegistry = Depends(get_registry),
    store: VideoFileStore = Depends(get_store),
):
    if registry.get(video_id) is None:
        raise VideoNotFound(video_id)

    try:
        store.write(video_id, data.file)
    finally:
        data.file.close()

    return VideoStatus(videoState=VideoState.READY)


@router.get(VIDEO_DATA_PATH)
def get_data(
    video_id: int,
    registry: VideoRegistry = Depends(get_registry),
    store: VideoFileStore = Depends(get_store),
):
    video = registry.get(video_id)
    if video is None:
        raise VideoNotFound(video_id)
    if not store.exists(video_id):
        raise PayloadNotFound(video_id)

    # size and open handle are resolved before any header is sent
    size = store.size(video_id)
    chunks = store.read(video_id)

    return StreamingResponse(
        chunks,
        media_type=video.contentType,
        headers={"Content-Length": str(size)},
    )
