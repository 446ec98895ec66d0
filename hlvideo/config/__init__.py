from .settings import HLVConfig, LoggingConfig, MailConfig, MediaConfig

__all__ = ["HLVConfig", "LoggingConfig", "MailConfig", "MediaConfig"]
