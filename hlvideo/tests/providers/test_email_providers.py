"""Tests for the email providers and the provider factory."""

from __future__ import annotations

import json
import time
from types import SimpleNamespace

import pytest

from hlvideo.config.settings import MailConfig
from hlvideo.exceptions import ConfigurationException, DeliveryException
from hlvideo.providers.custom_providers import LocalMailboxProvider
from hlvideo.providers.factory import ProviderFactory
from hlvideo.providers.resend_providers import ResendEmailProvider


async def test_local_mailbox_writes_body_and_envelope(tmp_path) -> None:
    provider = LocalMailboxProvider({"mailbox_path": str(tmp_path)})

    result = await provider.send_email("from@example.com", "to@example.com", "Subject", "<p>Hi</p>")

    body_files = list(tmp_path.glob("*.html"))
    envelope_files = list(tmp_path.glob("*.json"))
    assert len(body_files) == 1
    assert len(envelope_files) == 1
    assert body_files[0].read_text(encoding="utf-8") == "<p>Hi</p>"
    envelope = json.loads(envelope_files[0].read_text(encoding="utf-8"))
    assert envelope["to"] == "to@example.com"
    assert envelope["id"] == result["id"]
    assert result["provider"] == "local"


def test_resend_requires_api_key() -> None:
    with pytest.raises(ConfigurationException):
        ResendEmailProvider({"api_key": None})


async def test_resend_sends_params_through_sdk() -> None:
    provider = ResendEmailProvider({"api_key": "re_test"})
    calls = []

    def fake_send(params):
        calls.append(params)
        return {"id": "email-1"}

    provider.client = SimpleNamespace(send=fake_send)

    result = await provider.send_email("Studio <no-reply@example.com>", "to@example.com", "Subj", "<p>x</p>")

    assert result == {"id": "email-1", "provider": "resend"}
    assert calls == [{
        "from": "Studio <no-reply@example.com>",
        "to": ["to@example.com"],
        "subject": "Subj",
        "html": "<p>x</p>",
    }]


async def test_resend_failure_becomes_delivery_exception() -> None:
    provider = ResendEmailProvider({"api_key": "re_test"})

    def fake_send(params):
        raise RuntimeError("invalid api key")

    provider.client = SimpleNamespace(send=fake_send)

    with pytest.raises(DeliveryException) as exc_info:
        await provider.send_email("a@example.com", "b@example.com", "s", "h")

    assert exc_info.value.details["provider"] == "resend"


async def test_resend_timeout_is_enforced_when_configured() -> None:
    provider = ResendEmailProvider({"api_key": "re_test", "timeout": 0.05})

    def slow_send(params):
        time.sleep(0.5)
        return {"id": "late"}

    provider.client = SimpleNamespace(send=slow_send)

    with pytest.raises(DeliveryException):
        await provider.send_email("a@example.com", "b@example.com", "s", "h")


def test_factory_creates_configured_provider(tmp_path) -> None:
    config = MailConfig(provider="local", mailbox_path=str(tmp_path))

    provider = ProviderFactory.create_email_provider(config=config)

    assert isinstance(provider, LocalMailboxProvider)


def test_factory_rejects_unknown_provider() -> None:
    with pytest.raises(ConfigurationException):
        ProviderFactory.create_email_provider("carrier-pigeon", config=MailConfig(provider="local"))


def test_factory_lists_email_providers() -> None:
    assert ProviderFactory.get_supported_providers() == {"email": ["resend", "local"]}
