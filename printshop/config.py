import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from dotenv import load_dotenv


Color = Tuple[int, int, int]

DEFAULT_MAX_BYTES = 19 * 1024 * 1024

BACKGROUND_MODES = ("gradient", "image", "transparent")


@dataclass
class Artwork:
    id: str
    title: str
    height_inches: float
    width_inches: float
    file_name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Artwork":
        return cls(
            id=str(data["id"]),
            title=data.get("title", str(data["id"])),
            height_inches=float(data["height_inches"]),
            width_inches=float(data["width_inches"]),
            file_name=data["file_name"],
        )


@dataclass
class ShadowOptions:
    angle: float = 40
    length: float = 150
    final_blur: float = 100
    spread: float = 0
    final_transparency: float = 0.2


@dataclass
class RenderConfig:
    format: str = "jpeg"
    canvas_width: int = 2048
    canvas_height: int = 2048
    background: str = "gradient"
    wall_image_path: Optional[Path] = None
    wall_height_inches: Optional[float] = None
    position: str = "center"
    x_offset: int = 0
    y_offset: int = 0
    input_dir: Path = Path("static/art-images")
    output_dir: Path = Path("static/output-images")
    output_name: str = "product-image"
    max_bytes: int = DEFAULT_MAX_BYTES
    shadow: ShadowOptions = field(default_factory=lambda: ShadowOptions(final_blur=300))
    shadow_layers: int = 7
    gradient_start: Union[str, Color] = "#FFFFFF"
    gradient_end: Union[str, Color] = "#D3D3D3"

    def __post_init__(self) -> None:
        if self.background not in BACKGROUND_MODES:
            raise ValueError(
                f"Unknown background {self.background!r}; expected one of {BACKGROUND_MODES}"
            )
        if self.background == "image":
            if self.wall_image_path is None:
                raise ValueError("background 'image' requires wall_image_path")
            if not self.wall_height_inches or self.wall_height_inches <= 0:
                raise ValueError("background 'image' requires a positive wall_height_inches")

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return (self.canvas_width, self.canvas_height)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RenderConfig":
        data = dict(data)
        # A wall image wins over the gradient unless a mode is given explicitly.
        if "background" not in data:
            data["background"] = "image" if data.get("wall_image_path") else "gradient"
        for key in ("wall_image_path", "input_dir", "output_dir"):
            if data.get(key) is not None:
                data[key] = Path(data[key])
        if "shadow" in data:
            data["shadow"] = ShadowOptions(**data["shadow"])
        for key in ("gradient_start", "gradient_end"):
            if isinstance(data.get(key), list):
                data[key] = tuple(data[key])
        return cls(**data)


@dataclass
class RenderJob:
    artwork: Artwork
    render: RenderConfig


@dataclass
class ShopifyConfig:
    """
    Credentials and addressing for one Shopify store.

    Built once at process start and handed to each transport client.
    """

    access_token: Optional[str]
    shop_name: Optional[str]
    api_version: str = "2024-07"

    @property
    def shop_domain(self) -> str:
        shop = (self.shop_name or "").strip()
        for prefix in ("https://", "http://"):
            if shop.startswith(prefix):
                shop = shop[len(prefix):]
        shop = shop.rstrip("/")
        if shop and "." not in shop:
            shop = f"{shop}.myshopify.com"
        return shop

    @property
    def base_url(self) -> str:
        return f"https://{self.shop_domain}/admin/api/{self.api_version}"

    @classmethod
    def from_env(cls, dotenv_path: Optional[Path] = None) -> "ShopifyConfig":
        load_dotenv(dotenv_path)
        return cls(
            access_token=os.getenv("SHOPIFY_ACCESS_TOKEN"),
            shop_name=os.getenv("SHOPIFY_SHOP_NAME"),
            api_version=os.getenv("SHOPIFY_API_VERSION") or "2024-07",
        )
