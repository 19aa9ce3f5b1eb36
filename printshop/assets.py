import logging
from pathlib import Path

from .config import Artwork

logger = logging.getLogger(__name__)


def ensure_dirs(*dirs: Path) -> None:
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)


def find_artwork(artwork: Artwork, input_dir: Path) -> Path:
    """Path of the artwork's `file_name` inside the input folder."""
    path = input_dir / artwork.file_name
    if not path.is_file():
        logger.error("Artwork %r not found in %s", artwork.file_name, input_dir)
        raise FileNotFoundError(path)
    return path


def slugify(text: str) -> str:
    slug = "".join(ch.lower() if ch.isalnum() else "-" for ch in text)
    while "--" in slug:
        slug = slug.replace("--", "-")
    return slug.strip("-") or "item"
