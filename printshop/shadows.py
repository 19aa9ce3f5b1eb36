import math
from dataclasses import dataclass
from typing import List, Optional

from .config import ShadowOptions
from .easing import CubicBezier


ALPHA_EASING = CubicBezier(0.1, 0.5, 0.9, 0.5)
OFFSET_EASING = CubicBezier(0.7, 0.1, 0.9, 0.3)
BLUR_EASING = CubicBezier(0.7, 0.1, 0.9, 0.3)


@dataclass
class ShadowLayer:
    x_offset: float
    y_offset: float
    blur: float
    spread: float
    alpha: float


def box_shadows(num_layers: int, options: Optional[ShadowOptions] = None) -> List[ShadowLayer]:
    """
    Build a layered drop shadow.

    Each layer `i` in 1..N samples the alpha, offset and blur curves at
    `i / N`; the offset is projected along `options.angle` (0 deg points
    straight down, positive angles swing right).
    """
    if num_layers < 1:
        raise ValueError("num_layers must be at least 1")
    options = options or ShadowOptions()
    radians = math.radians(options.angle)

    layers: List[ShadowLayer] = []
    for i in range(1, num_layers + 1):
        fraction = i / num_layers
        offset = OFFSET_EASING(fraction)
        layers.append(
            ShadowLayer(
                x_offset=offset * math.sin(radians) * options.length,
                y_offset=offset * math.cos(radians) * options.length,
                blur=BLUR_EASING(fraction) * options.final_blur,
                spread=options.spread,
                alpha=ALPHA_EASING(fraction) * options.final_transparency,
            )
        )
    return layers


def to_css(layers: List[ShadowLayer]) -> str:
    """Render the layers as a CSS `box-shadow` value."""
    return ",\n".join(
        f"{layer.x_offset}px {layer.y_offset}px {layer.blur}px {layer.spread}px "
        f"rgba(0, 0, 0, {layer.alpha})"
        for layer in layers
    )
