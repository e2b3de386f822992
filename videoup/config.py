import os

# Project root (/project/videoup -> /project)
BASE_DIR = os.path.dirname(os.path.dirname(__file__))

# Folder where uploaded video data is stored
DATA_DIR = os.getenv("VIDEOUP_DATA_DIR", os.path.join(BASE_DIR, "videos"))

HOST = os.getenv("VIDEOUP_HOST", "0.0.0.0")
PORT = int(os.getenv("VIDEOUP_PORT", 8080))
LOG_LEVEL = os.getenv("VIDEOUP_LOG_LEVEL", "INFO").upper()

# Chunk size used when copying payloads to and from disk
CHUNK_SIZE = int(os.getenv("VIDEOUP_CHUNK_SIZE", 1024 * 1024))

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")
