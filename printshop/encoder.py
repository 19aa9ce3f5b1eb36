import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union

from PIL import Image

from .config import DEFAULT_MAX_BYTES


logger = logging.getLogger(__name__)

PIL_FORMATS: Dict[str, str] = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "webp": "WEBP",
    "png": "PNG",
}

EXTENSIONS: Dict[str, str] = {
    "JPEG": "jpg",
    "WEBP": "webp",
    "PNG": "png",
}


@dataclass
class Written:
    path: Path
    size: int
    quality: int


@dataclass
class ExceededBudget:
    best_size: int
    # Lowest quality actually encoded.
    floor_quality: int


EncodeResult = Union[Written, ExceededBudget]


def pil_format(fmt: str) -> str:
    try:
        return PIL_FORMATS[fmt.lower()]
    except KeyError:
        raise ValueError(f"Unsupported output format: {fmt!r}") from None


def extension_for(fmt: str) -> str:
    return EXTENSIONS[pil_format(fmt)]


def encode(image: Image.Image, fmt: str, quality: int) -> bytes:
    """Encode `image` in memory. JPEG output is flattened onto white."""
    target = pil_format(fmt)
    if target == "JPEG" and image.mode != "RGB":
        rgba = image.convert("RGBA")
        flat = Image.new("RGB", rgba.size, (255, 255, 255))
        flat.paste(rgba, (0, 0), rgba)
        image = flat

    buf = io.BytesIO()
    if target == "PNG":
        image.save(buf, format=target, optimize=True)
    else:
        image.save(buf, format=target, quality=quality)
    return buf.getvalue()


def encode_within_budget(
    image: Image.Image,
    output_path: Path,
    fmt: str,
    max_bytes: int = DEFAULT_MAX_BYTES,
    start_quality: int = 100,
    step: int = 10,
    floor_quality: int = 10,
) -> EncodeResult:
    """
    Re-encode `image` at decreasing quality until it fits in `max_bytes`.

    Qualities `start_quality`, `start_quality - step`, ... down to
    `floor_quality` are tried in turn; the first encoding that fits is
    written to `output_path`. Nothing is written when none fits.
    """
    best_size = None
    tried = quality = start_quality
    while quality >= floor_quality:
        tried = quality
        data = encode(image, fmt, quality)
        size = len(data)
        best_size = size if best_size is None else min(best_size, size)
        if size <= max_bytes:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(data)
            logger.info("Optimized image saved at: %s", output_path)
            logger.info("File size: %.2f MB (quality %d)", size / (1024 * 1024), quality)
            return Written(path=output_path, size=size, quality=quality)
        logger.debug("Quality %d gives %d bytes, over %d", quality, size, max_bytes)
        if pil_format(fmt) == "PNG":
            # Lossless; lower quality settings give the same bytes.
            break
        quality -= step

    logger.warning(
        "%s does not fit %.2f MB even at quality %d (%.2f MB). Consider reducing dimensions.",
        output_path.name,
        max_bytes / (1024 * 1024),
        tried,
        (best_size or 0) / (1024 * 1024),
    )
    return ExceededBudget(best_size=best_size or 0, floor_quality=tried)
