"""Tests for the brief notification template."""

from __future__ import annotations

from hlvideo.brief.models import BriefPayload
from hlvideo.brief.template import escape_html, render_notification, render_subject


def test_escape_html_escapes_markup_characters() -> None:
    assert escape_html("a & <b>") == "a &amp; &lt;b&gt;"


def test_escape_html_keeps_quotes() -> None:
    assert escape_html('"quoted"') == '"quoted"'


def test_render_notification_escapes_user_fields() -> None:
    payload = BriefPayload(name="<script>", phone="1", company="A&B")

    html = render_notification(payload)

    assert "&lt;script&gt;" in html
    assert "<script>" not in html
    assert "A&amp;B" in html


def test_render_notification_converts_line_breaks_after_escaping() -> None:
    payload = BriefPayload(name="Ann", phone="1", message="line1\nline2\r\nline3\r<i>")

    html = render_notification(payload)

    assert "line1<br/>line2<br/>line3<br/>&lt;i&gt;" in html


def test_render_notification_marks_missing_optional_fields() -> None:
    payload = BriefPayload(name="Ann", phone="79990000000")

    html = render_notification(payload)

    assert "<p><b>Компания:</b> -</p>" in html
    assert "<p><b>Email:</b> -</p>" in html
    assert "<p><b>Телефон:</b> 79990000000</p>" in html


def test_render_subject_appends_company_when_present() -> None:
    assert render_subject(BriefPayload(name="Ann", phone="1")) == "Новая заявка — Ann"
    assert render_subject(BriefPayload(name="Ann", phone="1", company="Nova")) == "Новая заявка — Ann (Nova)"
