import html
import re
from typing import Optional

from .models import BriefPayload

_LINE_BREAK = re.compile(r"\r\n|\r|\n")

NOTIFICATION_TEMPLATE = """
<h2>Новая заявка с сайта</h2>
<p><b>Имя:</b> {name}</p>
<p><b>Компания:</b> {company}</p>
<p><b>Email:</b> {email}</p>
<p><b>Телефон:</b> {phone}</p>
<p><b>Сообщение:</b><br/>{message}</p>
<hr/>
<p style="color:#888">Отправлено автоматически с highlevelvideo</p>
"""


def escape_html(value: object) -> str:
    """Escape ``&``, ``<`` and ``>``."""
    return html.escape(str(value), quote=False)


def _field(value: Optional[str]) -> str:
    return escape_html(value or "-")


def render_subject(payload: BriefPayload) -> str:
    subject = f"Новая заявка — {payload.name}"
    if payload.company:
        subject += f" ({payload.company})"
    return subject


def render_notification(payload: BriefPayload) -> str:
    """Render the HTML notification body; line breaks in the message become <br/>."""
    return NOTIFICATION_TEMPLATE.format(
        name=escape_html(payload.name),
        company=_field(payload.company),
        email=_field(payload.email),
        phone=escape_html(payload.phone),
        message=_LINE_BREAK.sub("<br/>", _field(payload.message)),
    )
