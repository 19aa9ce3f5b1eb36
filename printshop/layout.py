import logging
from typing import Dict, Optional, Tuple

Size = Tuple[float, float]

logger = logging.getLogger(__name__)

MAX_CANVAS_FRACTION = 0.8

# Fraction of the free space (canvas minus artwork) placed before the artwork.
ANCHORS: Dict[str, Tuple[float, float]] = {
    "center": (0.5, 0.5),
    "top": (0.5, 0.0),
    "bottom": (0.5, 1.0),
    "left": (0.0, 0.5),
    "right": (1.0, 0.5),
    "top-left": (0.0, 0.0),
    "top-right": (1.0, 0.0),
    "bottom-left": (0.0, 1.0),
    "bottom-right": (1.0, 1.0),
}


def pixels_per_inch(canvas_height: int, wall_height_inches: float) -> float:
    if wall_height_inches <= 0:
        raise ValueError("wall_height_inches must be positive")
    return canvas_height / wall_height_inches


def fit_artwork(
    image_size: Size,
    canvas_size: Size,
    ppi: Optional[float] = None,
    physical_size: Optional[Size] = None,
    max_fraction: float = MAX_CANVAS_FRACTION,
) -> Tuple[float, float]:
    """
    Compute the draw size of the artwork on the canvas.

    With `ppi` and `physical_size` (width, height in inches) the artwork is
    contained in its real-world box; otherwise it fills the largest box that
    `max_fraction` of the canvas allows. Either way the native aspect ratio
    of the pixels is kept and the result never exceeds `max_fraction` of the
    canvas on either axis.
    """
    img_w, img_h = image_size
    if img_w <= 0 or img_h <= 0:
        raise ValueError(f"Invalid artwork size: {image_size}")
    aspect_ratio = img_w / img_h

    max_w = canvas_size[0] * max_fraction
    max_h = canvas_size[1] * max_fraction

    if ppi is not None and physical_size is not None:
        box_w = min(physical_size[0] * ppi, max_w)
        box_h = min(physical_size[1] * ppi, max_h)
    else:
        box_w, box_h = max_w, max_h

    width = box_w
    height = width / aspect_ratio
    if height > box_h:
        height = box_h
        width = height * aspect_ratio
    return width, height


def resolve_origin(
    canvas_size: Size,
    artwork_size: Size,
    position: str = "center",
    x_offset: float = 0,
    y_offset: float = 0,
) -> Tuple[int, int]:
    """Top-left draw origin for the artwork, anchor plus pixel offsets."""
    anchor = ANCHORS.get(position)
    if anchor is None:
        logger.warning("Unknown position %r, falling back to top-left", position)
        anchor = ANCHORS["top-left"]

    fx, fy = anchor
    x = (canvas_size[0] - artwork_size[0]) * fx + x_offset
    y = (canvas_size[1] - artwork_size[1]) * fy + y_offset
    return int(round(x)), int(round(y))
