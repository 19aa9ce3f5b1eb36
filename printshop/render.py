import logging
from pathlib import Path
from typing import List, Tuple, Union

from PIL import Image, ImageDraw, ImageFilter, UnidentifiedImageError

from .config import Artwork, RenderConfig
from .layout import fit_artwork, pixels_per_inch, resolve_origin
from .shadows import ShadowLayer, box_shadows


logger = logging.getLogger(__name__)

Box = Tuple[int, int, int, int]


def load_image(path: Path) -> Image.Image:
    """Open an image file fully into memory as RGBA."""
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except (OSError, UnidentifiedImageError) as e:
        logger.error("Failed to load image %s: %s", path, e)
        raise


def draw_gradient(
    size: Tuple[int, int],
    start: Union[str, Tuple[int, int, int]] = "#FFFFFF",
    end: Union[str, Tuple[int, int, int]] = "#D3D3D3",
) -> Image.Image:
    """
    Two-stop linear gradient running from the top-left corner (start colour)
    to the bottom-right corner (end colour).
    """
    w, h = size
    vertical = Image.linear_gradient("L").resize((w, h), Image.BILINEAR)
    horizontal = (
        Image.linear_gradient("L")
        .transpose(Image.Transpose.ROTATE_90)
        .resize((w, h), Image.BILINEAR)
    )
    # Projection onto the (w, h) diagonal: (x*w + y*h) / (w^2 + h^2).
    mask = Image.blend(horizontal, vertical, (h * h) / (w * w + h * h))

    start_img = Image.new("RGBA", (w, h), _parse_color(start) + (255,))
    end_img = Image.new("RGBA", (w, h), _parse_color(end) + (255,))
    return Image.composite(end_img, start_img, mask)


def load_wall(path: Path, size: Tuple[int, int]) -> Image.Image:
    """Wall texture stretched to the canvas size."""
    wall = load_image(path)
    if wall.size != size:
        wall = wall.resize(size, Image.LANCZOS)
    return wall


def draw_shadows(canvas: Image.Image, box: Box, layers: List[ShadowLayer]) -> Image.Image:
    """
    Composite each shadow layer onto the canvas: a black rectangle the size of
    `box` grown by the layer spread, moved by the layer offset and blurred.
    """
    x0, y0, x1, y1 = box
    black = Image.new("RGBA", canvas.size, (0, 0, 0, 255))
    for layer in layers:
        mask = Image.new("L", canvas.size, 0)
        draw = ImageDraw.Draw(mask)
        draw.rectangle(
            [
                x0 + layer.x_offset - layer.spread,
                y0 + layer.y_offset - layer.spread,
                x1 + layer.x_offset + layer.spread,
                y1 + layer.y_offset + layer.spread,
            ],
            fill=int(round(layer.alpha * 255)),
        )
        # CSS blur radius is twice the Gaussian standard deviation.
        if layer.blur > 0:
            mask = mask.filter(ImageFilter.GaussianBlur(layer.blur / 2))
        shadow = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        shadow.paste(black, (0, 0), mask)
        canvas = Image.alpha_composite(canvas, shadow)
    return canvas


def draw_background(render: RenderConfig) -> Image.Image:
    if render.background == "gradient":
        return draw_gradient(render.canvas_size, render.gradient_start, render.gradient_end)
    if render.background == "image":
        return load_wall(render.wall_image_path, render.canvas_size)
    return Image.new("RGBA", render.canvas_size, (0, 0, 0, 0))


def compose(art_img: Image.Image, artwork: Artwork, render: RenderConfig) -> Image.Image:
    """
    Render the artwork onto the configured background with a layered drop
    shadow underneath. Returns an RGBA canvas of `render.canvas_size`.
    """
    canvas = draw_background(render)

    if render.background == "image":
        ppi = pixels_per_inch(render.canvas_height, render.wall_height_inches)
        width, height = fit_artwork(
            art_img.size,
            render.canvas_size,
            ppi=ppi,
            physical_size=(artwork.width_inches, artwork.height_inches),
        )
    else:
        width, height = fit_artwork(art_img.size, render.canvas_size)

    size = (max(1, int(round(width))), max(1, int(round(height))))
    x, y = resolve_origin(
        render.canvas_size, size, render.position, render.x_offset, render.y_offset
    )
    logger.debug("Placing %s at (%d, %d) size %dx%d", artwork.title, x, y, *size)

    layers = box_shadows(render.shadow_layers, render.shadow)
    canvas = draw_shadows(canvas, (x, y, x + size[0], y + size[1]), layers)

    art = art_img.convert("RGBA").resize(size, Image.LANCZOS)
    layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
    layer.paste(art, (x, y))
    return Image.alpha_composite(canvas, layer)


def _parse_color(color: Union[str, Tuple[int, int, int]]) -> Tuple[int, int, int]:
    """
    Parse hex color strings like '#FF0000' or 'FF0000' into RGB tuple.
    Tuples are passed through.
    """
    if not isinstance(color, str):
        return tuple(int(c) for c in color[:3])
    s = color.strip().lstrip("#")
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    if len(s) != 6:
        raise ValueError(f"Invalid color: {color!r}")
    return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
