import asyncio
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from loguru import logger

from ..config.settings import MediaConfig
from .poster import CancellationToken, CaptureCancelled, PosterCapturer
from .sources import poster_capture_source, render_source_tags, select_source
from .variants import MediaVariantSet, PlaybackEnvironment

FALLBACK_TEXT = "Ваш браузер не поддерживает воспроизведение видео."


class PresenterState(str, Enum):
    IDLE = "idle"
    ACTIVE_PLAYING = "active_playing"
    ACTIVE_PAUSED = "active_paused"
    DISPOSED = "disposed"


class MediaOutcome(str, Enum):
    """Internal result of a play or capture attempt; failures never propagate."""
    OK = "ok"
    POLICY_REJECTED = "policy_rejected"
    CAPTURE_FAILED = "capture_failed"
    CANCELLED = "cancelled"
    SKIPPED = "skipped"


class VideoElement(ABC):
    """The video element a presenter drives.

    ``play`` raises (typically PlaybackPolicyException) when the platform
    refuses to start playback.
    """

    preload: str = "none"
    poster: Optional[str] = None

    @property
    @abstractmethod
    def paused(self) -> bool:
        pass

    @abstractmethod
    async def play(self) -> None:
        pass

    @abstractmethod
    def pause(self) -> None:
        pass


@dataclass
class VisibilityState:
    is_intersecting: bool = False
    is_playing: bool = False
    poster: Optional[str] = None
    preload: str = "none"
    disposed_at: Optional[float] = None


def autoplay_in_effect(variants: MediaVariantSet, environment: PlaybackEnvironment) -> bool:
    options = variants.options
    if not options.autoplay:
        return False
    if options.restrict_autoplay_on_constrained_network and environment.is_constrained_network():
        return False
    return True


def render_video_attributes(
    variants: MediaVariantSet,
    environment: PlaybackEnvironment,
    config: Optional[MediaConfig] = None,
    poster: Optional[str] = None,
    preload: str = "none",
) -> Dict[str, Any]:
    """Declarative description of the ``<video>`` element for a rendering layer."""
    config = config or MediaConfig()
    breakpoint = config.small_viewport_max_width
    return {
        "attributes": {
            "playsinline": True,
            "muted": variants.options.muted,
            "loop": variants.options.loop,
            "autoplay": autoplay_in_effect(variants, environment),
            "preload": preload,
            "poster": poster if poster is not None else variants.poster_image,
            "disablepictureinpicture": True,
            "controls": False,
        },
        "sources": render_source_tags(variants, breakpoint),
        "selected": select_source(variants, environment, breakpoint).to_tag(),
        "root_margin": config.root_margin,
        "fallback_text": FALLBACK_TEXT,
    }


class AdaptiveMediaPresenter:
    """One video placement: source choice, visibility-driven playback and poster synthesis.

    Visibility events are applied in arrival order under a per-instance lock.
    After ``dispose()`` nothing on the instance or its element changes.
    """

    def __init__(
        self,
        element: VideoElement,
        variants: MediaVariantSet,
        environment: Optional[PlaybackEnvironment] = None,
        config: Optional[MediaConfig] = None,
        capturer: Optional[PosterCapturer] = None,
    ):
        self.element = element
        self.variants = variants
        self.environment = environment or PlaybackEnvironment()
        self.config = config or MediaConfig()
        self.capturer = capturer or PosterCapturer(self.config)

        self.state = PresenterState.IDLE
        self.visibility = VisibilityState(poster=variants.poster_image)
        self.last_mutation_at: Optional[float] = None
        self.poster_task: Optional[asyncio.Task] = None

        self._lock = asyncio.Lock()
        self._token = CancellationToken()
        self._mounted = False
        self._poster_attempted = False

    @property
    def disposed(self) -> bool:
        return self.state is PresenterState.DISPOSED

    @property
    def autoplay(self) -> bool:
        return autoplay_in_effect(self.variants, self.environment)

    def render(self) -> Dict[str, Any]:
        return render_video_attributes(
            self.variants,
            self.environment,
            self.config,
            poster=self.visibility.poster,
            preload=self.visibility.preload,
        )

    def _touch(self):
        self.last_mutation_at = time.monotonic()

    async def mount(self) -> MediaOutcome:
        """Attach to the element. Without an intersection signal, try to play once."""
        if self.disposed or self._mounted:
            return MediaOutcome.SKIPPED
        self._mounted = True
        self.element.preload = self.visibility.preload
        if self.visibility.poster:
            self.element.poster = self.visibility.poster
        self._touch()

        self._schedule_poster()

        if not self.environment.intersection_observer_available and self.autoplay:
            async with self._lock:
                return await self._attempt_play()
        return MediaOutcome.OK

    async def on_visibility_change(self, is_intersecting: bool) -> MediaOutcome:
        async with self._lock:
            if self.disposed:
                return MediaOutcome.SKIPPED
            if is_intersecting:
                return await self._enter_viewport()
            return self._leave_viewport()

    async def _enter_viewport(self) -> MediaOutcome:
        if self.visibility.is_intersecting:
            return MediaOutcome.SKIPPED
        self.visibility.is_intersecting = True
        # metadata only; the full file is fetched by play()
        self.visibility.preload = "metadata"
        self.element.preload = "metadata"
        self._touch()

        if self.autoplay and self.element.paused:
            return await self._attempt_play()
        self.state = PresenterState.ACTIVE_PAUSED if self.element.paused else PresenterState.ACTIVE_PLAYING
        return MediaOutcome.SKIPPED

    def _leave_viewport(self) -> MediaOutcome:
        was_intersecting = self.visibility.is_intersecting
        self.visibility.is_intersecting = False
        if not self.element.paused:
            self.element.pause()
        self.visibility.is_playing = False
        if self.state is not PresenterState.IDLE:
            self.state = PresenterState.ACTIVE_PAUSED
        self._touch()
        return MediaOutcome.OK if was_intersecting else MediaOutcome.SKIPPED

    async def _attempt_play(self) -> MediaOutcome:
        try:
            await self.element.play()
        except Exception as e:
            if self.disposed:
                return MediaOutcome.CANCELLED
            logger.debug(f"Play attempt rejected: {e}")
            self.visibility.is_playing = False
            self.state = PresenterState.ACTIVE_PAUSED
            self._touch()
            return MediaOutcome.POLICY_REJECTED
        if self.disposed:
            # dispose() ran while play() was pending and saw a paused element
            self.element.pause()
            return MediaOutcome.CANCELLED
        self.visibility.is_playing = True
        self.state = PresenterState.ACTIVE_PLAYING
        self._touch()
        return MediaOutcome.OK

    def _schedule_poster(self):
        if not self._poster_wanted():
            return
        self.poster_task = asyncio.ensure_future(self.synthesize_poster())

    def _poster_wanted(self) -> bool:
        return (
            self.variants.options.synthesize_poster
            and not self.variants.poster_image
            and not self.visibility.poster
            and not self._poster_attempted
        )

    async def synthesize_poster(self) -> MediaOutcome:
        """Capture a frame and use it as the poster. At most once per set of inputs."""
        if self.disposed:
            return MediaOutcome.CANCELLED
        if not self._poster_wanted():
            return MediaOutcome.SKIPPED
        self._poster_attempted = True

        token = self._token
        source = poster_capture_source(self.variants)
        try:
            data_url = await self.capturer.capture(source, self.variants.options.poster_capture_time, token)
        except CaptureCancelled:
            return MediaOutcome.CANCELLED
        except Exception as e:
            logger.debug(f"Poster capture failed for {source}: {e}")
            return MediaOutcome.CAPTURE_FAILED

        if token.cancelled or self.disposed:
            return MediaOutcome.CANCELLED
        if not data_url:
            return MediaOutcome.CAPTURE_FAILED
        self.visibility.poster = data_url
        self.element.poster = data_url
        self._touch()
        return MediaOutcome.OK

    async def update_variants(self, variants: MediaVariantSet) -> bool:
        """Swap the variant set; re-arms poster synthesis when its inputs changed."""
        if self.disposed:
            return False
        previous = self.variants
        self.variants = variants
        self._touch()

        poster_inputs_changed = (
            poster_capture_source(previous) != poster_capture_source(variants)
            or previous.options.poster_capture_time != variants.options.poster_capture_time
            or previous.options.synthesize_poster != variants.options.synthesize_poster
            or previous.poster_image != variants.poster_image
        )
        if not poster_inputs_changed:
            return False

        # the in-flight capture, if any, belongs to the old inputs
        self._token.cancel()
        self._token = CancellationToken()
        self._poster_attempted = False
        self.visibility.poster = variants.poster_image
        self.element.poster = variants.poster_image
        if self._mounted:
            self._schedule_poster()
        return True

    def dispose(self):
        """Unmount: stop playback, discard any in-flight capture, freeze the instance."""
        if self.disposed:
            return
        self._token.cancel()
        if self.poster_task is not None:
            self.poster_task.cancel()
        if not self.element.paused:
            self.element.pause()
        self.visibility.is_playing = False
        self.visibility.is_intersecting = False
        self._touch()
        self.state = PresenterState.DISPOSED
        self.visibility.disposed_at = time.monotonic()
