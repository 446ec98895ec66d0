from .models import REQUIRED_FIELDS_ERROR, BriefPayload, parse_brief
from .relay import BriefRelay, BriefResult
from .template import escape_html, render_notification, render_subject

__all__ = [
    "REQUIRED_FIELDS_ERROR",
    "BriefPayload",
    "parse_brief",
    "BriefRelay",
    "BriefResult",
    "escape_html",
    "render_notification",
    "render_subject",
]
