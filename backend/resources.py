import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")

_TEXT_CACHE = {}


class ResourceNotFoundError(FileNotFoundError):
    pass


def _resolve(name: str, data_dir: str) -> str:
    if not name or os.path.isabs(name):
        raise ValueError(f"Invalid resource name: {name!r}")
    root = os.path.abspath(data_dir)
    path = os.path.abspath(os.path.join(root, name))
    if os.path.commonpath([root, path]) != root:
        raise ValueError(f"Resource name escapes data directory: {name!r}")
    return path


def load_text(name: str, data_dir: Optional[str] = None) -> str:
    """
    Return the content of a bundled text resource.

    Files are read once per (directory, name) and served from memory after
    that, so callers can resolve resources at startup and stay I/O free.
    """
    data_dir = data_dir or DATA_DIR
    key = (os.path.abspath(data_dir), name)
    if key in _TEXT_CACHE:
        logger.debug("Text resource %s served from cache", name)
        return _TEXT_CACHE[key]

    path = _resolve(name, data_dir)
    if not os.path.isfile(path):
        logger.error("Text resource %s not found in %s", name, data_dir)
        raise ResourceNotFoundError(f"Text resource {name!r} not found in {data_dir}")

    # newline="" keeps the asset byte-for-byte, line endings included
    with open(path, "r", encoding="utf-8", newline="") as f:
        text = f.read()
    _TEXT_CACHE[key] = text
    logger.info("Loaded text resource %s (%d bytes)", name, len(text.encode("utf-8")))
    return text


def clear_cache():
    _TEXT_CACHE.clear()
