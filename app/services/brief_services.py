from typing import Any

from fastapi import Request
from loguru import logger

from hlvideo.brief import BriefRelay, BriefResult
from hlvideo.providers.factory import ProviderFactory
from app.utilities import ExecutionTimer


def get_brief_relay(request: Request) -> BriefRelay:
    """Relay built once per process from the app's configuration."""
    relay = getattr(request.app.state, "brief_relay", None)
    if relay is None:
        mail_config = request.app.state.config.mail
        provider = ProviderFactory.create_email_provider(config=mail_config)
        relay = BriefRelay(mail_config, provider)
        request.app.state.brief_relay = relay
    return relay


async def process_brief(body: Any, relay: BriefRelay) -> BriefResult:
    with ExecutionTimer() as timer:
        result = await relay.submit(body)
    logger.info(f"Brief handled: status={result.status_code} in {timer.get_execution_time():.3f}s")
    return result


def get_contact_info(request: Request) -> dict:
    mail_config = request.app.state.config.mail
    return {
        "email": mail_config.fallback_contact_email,
        "phone": mail_config.fallback_contact_phone,
    }
