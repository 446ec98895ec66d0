"""Ordered source candidates for a video placement.

Candidates are evaluated top to bottom and the first whose predicate holds is
used. The order is the bandwidth preference: 720p on small screens, then HEVC,
then H.264 (always playable), then WebM.
"""
from dataclasses import dataclass
from typing import Callable, Dict, List

from ..exceptions import ConfigurationException
from .variants import MediaVariantSet, PlaybackEnvironment

MP4_MIME = "video/mp4"
HEVC_MIME = "video/mp4; codecs=hev1"
WEBM_MIME = "video/webm"
DEFAULT_BREAKPOINT = 768


@dataclass(frozen=True)
class SourceCandidate:
    role: str
    ref: str
    mime_type: str
    media_query: str
    predicate: Callable[[PlaybackEnvironment], bool]

    def matches(self, environment: PlaybackEnvironment) -> bool:
        return self.predicate(environment)

    def to_tag(self) -> Dict[str, str]:
        """Attributes of the matching ``<source>`` element."""
        return {"src": self.ref, "type": self.mime_type, "media": self.media_query}


def build_candidates(variants: MediaVariantSet, breakpoint: int = DEFAULT_BREAKPOINT) -> List[SourceCandidate]:
    small_query = f"(max-width: {breakpoint}px)"
    large_query = f"(min-width: {breakpoint + 1}px)"

    def small(env: PlaybackEnvironment) -> bool:
        return env.is_small_viewport(breakpoint)

    def large(env: PlaybackEnvironment) -> bool:
        return not env.is_small_viewport(breakpoint)

    candidates: List[SourceCandidate] = []
    if variants.options.prefer_low_bandwidth_on_small_viewport:
        candidates.append(SourceCandidate(
            "low_bandwidth", variants.low_bandwidth_source, MP4_MIME, small_query, small,
        ))
    if variants.efficient_codec_source:
        candidates.append(SourceCandidate(
            "efficient_codec", variants.efficient_codec_source, HEVC_MIME, large_query,
            lambda env: large(env) and env.can_play(HEVC_MIME),
        ))
    candidates.append(SourceCandidate(
        "high_quality", variants.high_quality_source, MP4_MIME, large_query, large,
    ))
    if variants.alternate_container_source:
        candidates.append(SourceCandidate(
            "alternate_container", variants.alternate_container_source, WEBM_MIME, large_query,
            lambda env: large(env) and env.can_play(WEBM_MIME),
        ))
    return candidates


def select_source(
    variants: MediaVariantSet,
    environment: PlaybackEnvironment,
    breakpoint: int = DEFAULT_BREAKPOINT,
) -> SourceCandidate:
    """Pick the source a browser would play for ``environment``.

    A small viewport without the low-bandwidth preference gets the
    large-viewport chain, filtered by codec support only.
    """
    candidates = build_candidates(variants, breakpoint)
    for candidate in candidates:
        if candidate.matches(environment):
            return candidate
    for candidate in candidates:
        if candidate.role != "low_bandwidth" and environment.can_play(candidate.mime_type):
            return candidate
    # high_quality is always a candidate and video/mp4 is always playable
    raise ConfigurationException("No playable source candidate", error_code="NO_PLAYABLE_SOURCE")


def render_source_tags(variants: MediaVariantSet, breakpoint: int = DEFAULT_BREAKPOINT) -> List[Dict[str, str]]:
    return [candidate.to_tag() for candidate in build_candidates(variants, breakpoint)]


def poster_capture_source(variants: MediaVariantSet) -> str:
    """The lightest source worth decoding for a poster frame."""
    if variants.options.prefer_low_bandwidth_on_small_viewport:
        return variants.low_bandwidth_source
    return variants.efficient_codec_source or variants.high_quality_source
