from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONSTRAINED_CONNECTION_TYPES = frozenset({"slow-2g", "2g"})


class PresenterOptions(BaseModel):
    """Playback flags for one video placement."""

    model_config = ConfigDict(frozen=True)

    autoplay: bool = True
    loop: bool = True
    muted: bool = True
    prefer_low_bandwidth_on_small_viewport: bool = True
    restrict_autoplay_on_constrained_network: bool = True
    synthesize_poster: bool = False
    poster_capture_time: float = Field(default=0.2, ge=0.0)


class MediaVariantSet(BaseModel):
    """The encodings of one playable asset.

    ``high_quality_source`` (H.264 1080p) and ``low_bandwidth_source`` (720p)
    are mandatory; the HEVC and WebM variants only add candidates.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    high_quality_source: str = Field(..., min_length=1)
    low_bandwidth_source: str = Field(..., min_length=1)
    efficient_codec_source: Optional[str] = None
    alternate_container_source: Optional[str] = None
    poster_image: Optional[str] = None
    options: PresenterOptions = Field(default_factory=PresenterOptions)

    @field_validator("efficient_codec_source", "alternate_container_source", "poster_image")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None


class PlaybackEnvironment(BaseModel):
    """What the client reports about itself: viewport, codecs, network."""

    model_config = ConfigDict(frozen=True)

    viewport_width: int = Field(default=1280, ge=0)
    # progressive MP4 is always playable and need not be listed
    supported_types: FrozenSet[str] = frozenset()
    save_data: bool = False
    effective_connection_type: Optional[str] = None
    intersection_observer_available: bool = True

    @field_validator("supported_types", mode="before")
    @classmethod
    def normalize_types(cls, v):
        if v is None:
            return frozenset()
        return frozenset(_normalize_mime(t) for t in v)

    def is_small_viewport(self, breakpoint: int) -> bool:
        return self.viewport_width <= breakpoint

    def is_constrained_network(self) -> bool:
        return self.save_data or (self.effective_connection_type or "").lower() in CONSTRAINED_CONNECTION_TYPES

    def can_play(self, mime_type: str) -> bool:
        mime = _normalize_mime(mime_type)
        return mime == "video/mp4" or mime in self.supported_types


def _normalize_mime(mime_type: str) -> str:
    parts = [p.strip() for p in str(mime_type).lower().split(";") if p.strip()]
    return "; ".join(parts)
