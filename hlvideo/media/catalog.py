"""Video placements on the landing page: the hero showreel and the work cases."""
from typing import Dict, List, Optional

from pydantic import BaseModel

from .variants import MediaVariantSet, PresenterOptions


class MediaPlacement(BaseModel):
    slug: str
    title: str
    variants: MediaVariantSet


def _work(slug: str, title: str) -> MediaPlacement:
    # work cases do not autoplay on slow networks
    return MediaPlacement(
        slug=slug,
        title=title,
        variants=MediaVariantSet(
            efficient_codec_source=f"/work/{slug}/1080p-h265.mp4",
            high_quality_source=f"/work/{slug}/1080p.mp4",
            low_bandwidth_source=f"/work/{slug}/720p.mp4",
            alternate_container_source=f"/work/{slug}/1080p.webm",
        ),
    )


SHOWREEL = MediaPlacement(
    slug="showreel",
    title="Шоурил High Level Video",
    variants=MediaVariantSet(
        efficient_codec_source="/reel-1080p-h265.mp4",
        high_quality_source="/reel-1080p.mp4",
        low_bandwidth_source="/reel-720p.mp4",
        alternate_container_source="/reel.webm",
        options=PresenterOptions(
            restrict_autoplay_on_constrained_network=False,
            synthesize_poster=True,
            poster_capture_time=0.3,
        ),
    ),
)

WORKS: List[MediaPlacement] = [
    _work("aurora", "Корпоративное видео — Aurora"),
    _work("nova", "Товарная реклама — Nova"),
    _work("pulse", "Рендер товаров — Pulse"),
]

PLACEMENTS: Dict[str, MediaPlacement] = {p.slug: p for p in [SHOWREEL, *WORKS]}


def get_placement(slug: str) -> Optional[MediaPlacement]:
    return PLACEMENTS.get(slug)
