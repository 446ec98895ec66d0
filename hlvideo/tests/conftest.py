"""Shared test doubles for the brief relay and the media presenter."""

from __future__ import annotations

import asyncio
import time
from typing import Any, Dict, List, Optional

import pytest
from loguru import logger

from hlvideo.config.settings import MailConfig, MediaConfig
from hlvideo.exceptions import PlaybackPolicyException
from hlvideo.media.poster import CancellationToken
from hlvideo.media.presenter import VideoElement
from hlvideo.providers.base import EmailProvider


class FakeEmailProvider(EmailProvider):
    """Records every email instead of sending it."""

    def __init__(self, error: Optional[Exception] = None) -> None:
        self.sent: List[Dict[str, Any]] = []
        self.error = error

    async def send_email(self, sender: str, to: str, subject: str, html: str, **kwargs) -> Dict[str, Any]:
        self.sent.append({"from": sender, "to": to, "subject": subject, "html": html})
        if self.error is not None:
            raise self.error
        return {"id": f"fake-{len(self.sent)}"}

    async def close(self) -> None:
        return None


class FakeVideoElement(VideoElement):
    """In-memory video element logging each mutation with a monotonic timestamp."""

    def __init__(self, reject_play: bool = False, play_gate: Optional[asyncio.Event] = None) -> None:
        self._paused = True
        self._preload = "none"
        self._poster: Optional[str] = None
        self.reject_play = reject_play
        self.play_gate = play_gate
        self.play_calls = 0
        self.pause_calls = 0
        self.events: List[tuple] = []

    def _log(self, name: str, value: Any = None) -> None:
        self.events.append((time.monotonic(), name, value))

    @property
    def paused(self) -> bool:
        return self._paused

    @property
    def preload(self) -> str:
        return self._preload

    @preload.setter
    def preload(self, value: str) -> None:
        self._preload = value
        self._log("preload", value)

    @property
    def poster(self) -> Optional[str]:
        return self._poster

    @poster.setter
    def poster(self, value: Optional[str]) -> None:
        self._poster = value
        self._log("poster", value)

    async def play(self) -> None:
        self.play_calls += 1
        self._log("play")
        if self.play_gate is not None:
            await self.play_gate.wait()
        if self.reject_play:
            raise PlaybackPolicyException("autoplay blocked")
        self._paused = False

    def pause(self) -> None:
        self.pause_calls += 1
        self._paused = True
        self._log("pause")


class FakeCapturer:
    """Poster capturer that returns a fixed data URL, optionally after a gate opens."""

    def __init__(
        self,
        result: str = "data:image/webp;base64,AAAA",
        error: Optional[Exception] = None,
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.result = result
        self.error = error
        self.gate = gate
        self.calls: List[tuple] = []

    async def capture(self, source: str, at_seconds: float, token: CancellationToken) -> str:
        self.calls.append((source, at_seconds))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def mail_config() -> MailConfig:
    return MailConfig(
        provider="local",
        mail_to="studio@example.com",
        mail_from="High Level Video <no-reply@example.com>",
    )


@pytest.fixture
def media_config(tmp_path) -> MediaConfig:
    return MediaConfig(static_root=str(tmp_path))


@pytest.fixture
def error_logs():
    """Collect loguru ERROR records emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="ERROR")
    yield messages
    logger.remove(handler_id)
