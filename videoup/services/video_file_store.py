import logging
import os
import shutil
import tempfile
from typing import BinaryIO, Iterator

from videoup import config
from videoup.errors import PayloadNotFound, StorageError

logger = logging.getLogger(__name__)


class VideoFileStore:
    """Video data on the local file system, one file per video id.

    Only data written through this instance counts as stored: files left in
    the directory by an earlier process belong to ids that no longer exist.
    """

    def __init__(self, directory: str = config.DATA_DIR, chunk_size: int = config.CHUNK_SIZE):
        self.directory = directory
        self.chunk_size = chunk_size
        self._stored = set()
        os.makedirs(self.directory, exist_ok=True)

    def path_for(self, video_id: int) -> str:
        return os.path.join(self.directory, f"video{video_id}.mpg")

    def exists(self, video_id: int) -> bool:
        return video_id in self._stored and os.path.isfile(self.path_for(video_id))

    def size(self, video_id: int) -> int:
        if video_id not in self._stored:
            raise PayloadNotFound(video_id)
        try:
            return os.path.getsize(self.path_for(video_id))
        except FileNotFoundError:
            raise PayloadNotFound(video_id)
        except OSError as e:
            raise StorageError(f"Could not stat data for video {video_id}: {e}") from e

    def write(self, video_id: int, stream: BinaryIO) -> int:
        """
        Copy the whole stream to disk, replacing any previous data.

        The data lands in a temporary file first so a failed upload never
        leaves a truncated payload behind.

        Returns:
            Number of bytes written
        """
        target = self.path_for(video_id)
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb", dir=self.directory, prefix=f".video{video_id}-", suffix=".part", delete=False
            ) as out:
                tmp_path = out.name
                shutil.copyfileobj(stream, out, self.chunk_size)
                written = out.tell()
            os.replace(tmp_path, target)
            tmp_path = None
        except OSError as e:
            raise StorageError(f"Could not save data for video {video_id}: {e}") from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.remove(tmp_path)

        self._stored.add(video_id)
        logger.info(f"Saved {written} bytes for video {video_id} -> {target}")
        return written

    def read(self, video_id: int) -> Iterator[bytes]:
        """
        Open the stored data and return an iterator over its chunks.

        The file is opened here, so a missing payload raises PayloadNotFound
        before any byte is produced. The handle is closed once the iterator
        is exhausted or closed.
        """
        if video_id not in self._stored:
            raise PayloadNotFound(video_id)
        try:
            f = open(self.path_for(video_id), "rb")
        except FileNotFoundError:
            raise PayloadNotFound(video_id)
        except OSError as e:
            raise StorageError(f"Could not open data for video {video_id}: {e}") from e
        return self._iter_file(video_id, f)

    def _iter_file(self, video_id: int, f: BinaryIO) -> Iterator[bytes]:
        with f:
            while True:
                try:
                    chunk = f.read(self.chunk_size)
                except OSError as e:
                    raise StorageError(f"Could not read data for video {video_id}: {e}") from e
                if not chunk:
                    break
                yield chunk

    def copy(self, video_id: int, destination: BinaryIO) -> int:
        copied = 0
        for chunk in self.read(video_id):
            destination.write(chunk)
            copied += len(chunk)
        return copied
