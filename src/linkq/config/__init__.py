"""Configuration layer — layered settings and structlog setup."""

from linkq.config.logging import configure_logging
from linkq.config.settings import LinkqSettings, get_settings

__all__ = ["LinkqSettings", "configure_logging", "get_settings"]
