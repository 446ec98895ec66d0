import asyncio
import base64
import os
from typing import Optional, Tuple

import cv2
import numpy as np
from loguru import logger

from ..config.settings import MediaConfig
from ..exceptions import CaptureException

# seeking to exactly 0 tends to return a blank leading frame
MIN_CAPTURE_TIME = 0.001


class CaptureCancelled(Exception):
    """The owning presenter was disposed while a capture was in flight."""


class CancellationToken:
    def __init__(self):
        self._cancelled = False

    def cancel(self):
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def checkpoint(self):
        if self._cancelled:
            raise CaptureCancelled()


class FrameCaptureSession:
    """A detached, muted decode of one video source (OpenCV, blocking calls)."""

    def __init__(self, source: str):
        self.source = source
        self.capture: Optional[cv2.VideoCapture] = None
        self.frame: Optional[np.ndarray] = None

    def open(self) -> Tuple[int, int]:
        """Open the source and return its native (width, height); 0 when unknown."""
        self.capture = cv2.VideoCapture(self.source)
        if not self.capture.isOpened():
            raise CaptureException(f"Cannot open video: {self.source}")
        width = int(self.capture.get(cv2.CAP_PROP_FRAME_WIDTH) or 0)
        height = int(self.capture.get(cv2.CAP_PROP_FRAME_HEIGHT) or 0)
        return width, height

    def seek(self, seconds: float) -> np.ndarray:
        if self.capture is None:
            raise CaptureException("Session is not open")
        self.capture.set(cv2.CAP_PROP_POS_MSEC, max(MIN_CAPTURE_TIME, seconds) * 1000.0)
        ok, frame = self.capture.read()
        if not ok or frame is None:
            raise CaptureException(f"Cannot decode frame at {seconds:.3f}s of {self.source}")
        self.frame = frame
        return frame

    def draw(self, width: int, height: int) -> np.ndarray:
        """Copy the decoded frame into a BGR raster of ``width`` x ``height``."""
        if self.frame is None:
            raise CaptureException("No decoded frame to draw")
        frame = self.frame
        if frame.shape[1] != width or frame.shape[0] != height:
            frame = cv2.resize(frame, (width, height), interpolation=cv2.INTER_AREA)
        return np.ascontiguousarray(frame)

    def close(self):
        if self.capture is not None:
            self.capture.release()
            self.capture = None
        self.frame = None


def encode_raster(raster: np.ndarray, webp_quality: float = 0.82) -> str:
    """Encode a raster as a data URL: WebP, or PNG when WebP encoding fails."""
    try:
        ok, buffer = cv2.imencode(".webp", raster, [cv2.IMWRITE_WEBP_QUALITY, int(round(webp_quality * 100))])
        if not ok:
            raise CaptureException("WebP encoder returned no data")
        mime = "image/webp"
    except Exception as e:
        logger.debug(f"WebP encode failed, falling back to PNG: {e}")
        ok, buffer = cv2.imencode(".png", raster)
        if not ok:
            raise CaptureException("PNG encoder returned no data")
        mime = "image/png"
    return f"data:{mime};base64,{base64.b64encode(buffer.tobytes()).decode('ascii')}"


class PosterCapturer:
    """Grabs one frame of a video and turns it into a poster data URL.

    Every step runs in a worker thread; the cancellation token is checked
    after each one so a disposed presenter never receives a result.
    """

    def __init__(self, config: Optional[MediaConfig] = None):
        self.config = config or MediaConfig()

    def resolve(self, source: str) -> str:
        """Map a site path like ``/reel-720p.mp4`` onto the static root when the file exists there."""
        if "://" in source:
            return source
        candidate = os.path.join(self.config.static_root, source.lstrip("/"))
        if os.path.exists(candidate):
            return candidate
        return source

    async def capture(self, source: str, at_seconds: float, token: CancellationToken) -> str:
        session = FrameCaptureSession(self.resolve(source))
        pending: Optional[asyncio.Future] = None

        async def in_worker(step, *args):
            nonlocal pending
            pending = asyncio.ensure_future(asyncio.to_thread(step, *args))
            # a cancelled caller must not release the handle under a running step
            return await asyncio.shield(pending)

        def release(step: asyncio.Future):
            if not step.cancelled():
                step.exception()
            session.close()

        try:
            width, height = await in_worker(session.open)
            token.checkpoint()

            frame = await in_worker(session.seek, max(MIN_CAPTURE_TIME, at_seconds))
            token.checkpoint()

            width = width or frame.shape[1] or self.config.poster_fallback_width
            height = height or frame.shape[0] or self.config.poster_fallback_height
            raster = session.draw(width, height)
            data_url = await in_worker(encode_raster, raster, self.config.poster_webp_quality)
            token.checkpoint()
            return data_url
        except (CaptureCancelled, CaptureException):
            raise
        except Exception as e:
            raise CaptureException(f"Poster capture failed for {source}: {e}") from e
        finally:
            if pending is not None and not pending.done():
                pending.add_done_callback(release)
            else:
                session.close()
