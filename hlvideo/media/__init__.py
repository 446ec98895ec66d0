from .catalog import PLACEMENTS, SHOWREEL, WORKS, MediaPlacement, get_placement
from .poster import CancellationToken, CaptureCancelled, FrameCaptureSession, PosterCapturer, encode_raster
from .presenter import (
    AdaptiveMediaPresenter,
    MediaOutcome,
    PresenterState,
    VideoElement,
    VisibilityState,
    autoplay_in_effect,
    render_video_attributes,
)
from .sources import (
    HEVC_MIME,
    MP4_MIME,
    WEBM_MIME,
    SourceCandidate,
    build_candidates,
    poster_capture_source,
    render_source_tags,
    select_source,
)
from .variants import MediaVariantSet, PlaybackEnvironment, PresenterOptions

__all__ = [
    "PLACEMENTS",
    "SHOWREEL",
    "WORKS",
    "MediaPlacement",
    "get_placement",
    "CancellationToken",
    "CaptureCancelled",
    "FrameCaptureSession",
    "PosterCapturer",
    "encode_raster",
    "AdaptiveMediaPresenter",
    "MediaOutcome",
    "PresenterState",
    "VideoElement",
    "VisibilityState",
    "autoplay_in_effect",
    "render_video_attributes",
    "HEVC_MIME",
    "MP4_MIME",
    "WEBM_MIME",
    "SourceCandidate",
    "build_candidates",
    "poster_capture_source",
    "render_source_tags",
    "select_source",
    "MediaVariantSet",
    "PlaybackEnvironment",
    "PresenterOptions",
]
