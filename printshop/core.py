import json
import logging
from pathlib import Path
from typing import List, Optional

from .assets import slugify, ensure_dirs, find_artwork
from .config import Artwork, RenderConfig, RenderJob
from .encoder import EncodeResult, encode_within_budget, extension_for
from .render import compose, load_image


logger = logging.getLogger(__name__)


def load_jobs(path: Path) -> List[RenderJob]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("jobs", [])

    return [
        RenderJob(
            artwork=Artwork.from_dict(entry["artwork"]),
            render=RenderConfig.from_dict(entry.get("render", {})),
        )
        for entry in data
    ]


def output_path_for(artwork: Artwork, render: RenderConfig) -> Path:
    ext = extension_for(render.format)
    filename = f"{render.output_name}_{slugify(artwork.id)}_{slugify(artwork.title)}.{ext}"
    return render.output_dir / filename


class ProductImagePipeline:
    """
    Orchestrates product image generation:
    - locate and load the artwork
    - compose it onto the background with a layered drop shadow
    - re-encode within the file-size budget and save under output_dir
    """

    def __init__(self, max_bytes: Optional[int] = None) -> None:
        # Overrides the per-job budget when set.
        self.max_bytes = max_bytes

    def render(self, artwork: Artwork, render: RenderConfig) -> EncodeResult:
        ensure_dirs(render.input_dir, render.output_dir)

        art_path = find_artwork(artwork, render.input_dir)
        logger.info("Rendering '%s' (%s) from %s", artwork.title, artwork.id, art_path.name)
        art_img = load_image(art_path)

        canvas = compose(art_img, artwork, render)
        return encode_within_budget(
            canvas,
            output_path_for(artwork, render),
            render.format,
            max_bytes=self.max_bytes or render.max_bytes,
        )

    def run(self, jobs: List[RenderJob]) -> List[EncodeResult]:
        return [self.render(job.artwork, job.render) for job in jobs]
