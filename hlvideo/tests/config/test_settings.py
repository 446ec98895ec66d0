"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from hlvideo.config.settings import DEFAULT_MAIL_FROM, DEFAULT_MAIL_TO, HLVConfig, LoggingConfig, MailConfig, MediaConfig

MAIL_ENV = ["MAIL_PROVIDER", "RESEND_API_KEY", "MAIL_TO", "MAIL_FROM", "MAIL_TIMEOUT"]
LOG_ENV = ["LOG_LEVEL", "LOG_FILE", "LOG_ENABLE_JSON", "LOG_ENABLE_FILE", "LOG_MAX_FILE_SIZE", "LOG_RETENTION_DAYS"]


@pytest.fixture
def clean_mail_env(monkeypatch):
    for name in MAIL_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_mail_defaults(clean_mail_env) -> None:
    config = MailConfig()

    assert config.mail_to == DEFAULT_MAIL_TO == "oleq.prok@yandex.ru"
    assert config.mail_from == DEFAULT_MAIL_FROM == "High Level Video <no-reply@highlevel.video>"
    assert config.provider == "resend"
    assert config.timeout is None


def test_mail_reads_environment(clean_mail_env) -> None:
    clean_mail_env.setenv("MAIL_TO", "inbox@example.com")
    clean_mail_env.setenv("RESEND_API_KEY", "re_123")
    clean_mail_env.setenv("MAIL_TIMEOUT", "2.5")

    config = MailConfig()

    assert config.mail_to == "inbox@example.com"
    assert config.api_key == "re_123"
    assert config.timeout == 2.5


def test_empty_mail_to_falls_back_to_default(clean_mail_env) -> None:
    clean_mail_env.setenv("MAIL_TO", "")

    assert MailConfig().mail_to == DEFAULT_MAIL_TO


def test_explicit_values_skip_environment(clean_mail_env) -> None:
    clean_mail_env.setenv("MAIL_TO", "env@example.com")

    assert MailConfig(mail_to="explicit@example.com").mail_to == "explicit@example.com"


def test_media_defaults() -> None:
    config = MediaConfig(static_root="./public")

    assert config.small_viewport_max_width == 768
    assert config.root_margin == "200px"
    assert config.poster_webp_quality == pytest.approx(0.82)


def test_main_config_caches_sub_configs(clean_mail_env) -> None:
    config = HLVConfig()

    assert config.mail is config.mail
    assert config.media is config.media


@pytest.fixture
def clean_log_env(monkeypatch):
    for name in LOG_ENV:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_logging_defaults(clean_log_env) -> None:
    config = LoggingConfig()

    assert config.level == "INFO"
    assert config.log_file is None
    assert config.enable_file_logging is False
    assert config.retention_days == 7


def test_logging_reads_environment(clean_log_env, tmp_path) -> None:
    clean_log_env.setenv("LOG_LEVEL", "DEBUG")
    clean_log_env.setenv("LOG_ENABLE_FILE", "true")
    clean_log_env.setenv("LOG_FILE", str(tmp_path / "hlvideo.log"))
    clean_log_env.setenv("LOG_ENABLE_JSON", "1")
    clean_log_env.setenv("LOG_RETENTION_DAYS", "30")

    config = LoggingConfig()

    assert config.level == "DEBUG"
    assert config.enable_file_logging is True
    assert config.log_file == str(tmp_path / "hlvideo.log")
    assert config.enable_json is True
    assert config.retention_days == 30
