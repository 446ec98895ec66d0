from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, PrivateAttr
from typing import Optional
from dotenv import load_dotenv, find_dotenv
import os


DEFAULT_MAIL_TO = "oleq.prok@yandex.ru"
DEFAULT_MAIL_FROM = "High Level Video <no-reply@highlevel.video>"


class MailConfig(BaseSettings):
    """Outbound email configuration for brief notifications."""

    provider: str = Field(default="resend", env="MAIL_PROVIDER")
    api_key: Optional[str] = Field(default=None, env="RESEND_API_KEY")
    mail_to: str = Field(default=DEFAULT_MAIL_TO, env="MAIL_TO")
    mail_from: str = Field(default=DEFAULT_MAIL_FROM, env="MAIL_FROM")
    # None leaves the provider client's own default in charge
    timeout: Optional[float] = Field(default=None, env="MAIL_TIMEOUT")
    mailbox_path: str = Field(default="./local_mailbox", env="MAIL_MAILBOX_PATH")
    fallback_contact_email: str = Field(default="cormarketinq@yandex.ru", env="FALLBACK_CONTACT_EMAIL")
    fallback_contact_phone: str = Field(default="+7 926 794-35-37", env="FALLBACK_CONTACT_PHONE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )

    def __init__(self, **kwargs):
        # Force load environment variables before validation
        load_dotenv(find_dotenv())

        # If no explicit values provided, use environment variables
        if not kwargs:
            kwargs = {
                'provider': os.getenv("MAIL_PROVIDER", "resend"),
                'api_key': os.getenv("RESEND_API_KEY"),
                # empty values fall back to the defaults, same as unset
                'mail_to': os.getenv("MAIL_TO") or DEFAULT_MAIL_TO,
                'mail_from': os.getenv("MAIL_FROM") or DEFAULT_MAIL_FROM,
                'timeout': os.getenv("MAIL_TIMEOUT") or None,
                'mailbox_path': os.getenv("MAIL_MAILBOX_PATH", "./local_mailbox"),
                'fallback_contact_email': os.getenv("FALLBACK_CONTACT_EMAIL", "cormarketinq@yandex.ru"),
                'fallback_contact_phone': os.getenv("FALLBACK_CONTACT_PHONE", "+7 926 794-35-37"),
            }
            # Remove None values
            kwargs = {k: v for k, v in kwargs.items() if v is not None}

        super().__init__(**kwargs)


class MediaConfig(BaseSettings):
    """Adaptive media presenter configuration."""

    small_viewport_max_width: int = Field(default=768, env="MEDIA_SMALL_VIEWPORT_MAX_WIDTH")
    root_margin: str = Field(default="200px", env="MEDIA_ROOT_MARGIN")
    poster_webp_quality: float = Field(default=0.82, ge=0.0, le=1.0, env="MEDIA_POSTER_WEBP_QUALITY")
    poster_fallback_width: int = Field(default=1280, env="MEDIA_POSTER_FALLBACK_WIDTH")
    poster_fallback_height: int = Field(default=720, env="MEDIA_POSTER_FALLBACK_HEIGHT")
    static_root: str = Field(default="./public", env="MEDIA_STATIC_ROOT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )

    def __init__(self, **kwargs):
        load_dotenv(find_dotenv())

        if not kwargs:
            kwargs = {
                'small_viewport_max_width': int(os.getenv("MEDIA_SMALL_VIEWPORT_MAX_WIDTH", "768")),
                'root_margin': os.getenv("MEDIA_ROOT_MARGIN", "200px"),
                'poster_webp_quality': float(os.getenv("MEDIA_POSTER_WEBP_QUALITY", "0.82")),
                'poster_fallback_width': int(os.getenv("MEDIA_POSTER_FALLBACK_WIDTH", "1280")),
                'poster_fallback_height': int(os.getenv("MEDIA_POSTER_FALLBACK_HEIGHT", "720")),
                'static_root': os.getenv("MEDIA_STATIC_ROOT", "./public"),
            }

        super().__init__(**kwargs)


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: str = Field(default="INFO", env="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, env="LOG_FILE")
    enable_json: bool = Field(default=False, env="LOG_ENABLE_JSON")
    enable_file_logging: bool = Field(default=False, env="LOG_ENABLE_FILE")
    max_file_size: str = Field(default="10 MB", env="LOG_MAX_FILE_SIZE")
    retention_days: int = Field(default=7, env="LOG_RETENTION_DAYS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )

    def __init__(self, **kwargs):
        load_dotenv(find_dotenv())

        if not kwargs:
            kwargs = {
                'level': os.getenv("LOG_LEVEL", "INFO"),
                'log_file': os.getenv("LOG_FILE") or None,
                'enable_json': os.getenv("LOG_ENABLE_JSON", "false"),
                'enable_file_logging': os.getenv("LOG_ENABLE_FILE", "false"),
                'max_file_size': os.getenv("LOG_MAX_FILE_SIZE", "10 MB"),
                'retention_days': os.getenv("LOG_RETENTION_DAYS", "7"),
            }

        super().__init__(**kwargs)


class HLVConfig(BaseSettings):
    """Main configuration class."""

    # Application settings
    app_name: str = Field(default="High Level Video", env="APP_NAME")
    app_version: str = Field(default="1.0.0", env="APP_VERSION")
    debug: bool = Field(default=False, env="DEBUG")
    environment: str = Field(default="development", env="ENVIRONMENT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        case_sensitive=False
    )

    # Cached sub-configurations, built on first access
    _mail: Optional[MailConfig] = PrivateAttr(default=None)
    _media: Optional[MediaConfig] = PrivateAttr(default=None)
    _logging: Optional[LoggingConfig] = PrivateAttr(default=None)

    def __init__(self, **kwargs):
        # Force load environment variables before initializing
        load_dotenv(find_dotenv())
        super().__init__(**kwargs)

    @property
    def mail(self) -> MailConfig:
        if self._mail is None:
            load_dotenv(find_dotenv(), override=True)
            self._mail = MailConfig()
        return self._mail

    @property
    def media(self) -> MediaConfig:
        if self._media is None:
            load_dotenv(find_dotenv(), override=True)
            self._media = MediaConfig()
        return self._media

    @property
    def logging(self) -> LoggingConfig:
        if self._logging is None:
            load_dotenv(find_dotenv(), override=True)
            self._logging = LoggingConfig()
        return self._logging
