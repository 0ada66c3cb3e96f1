"""Configuration for the i3 workspace delegate.

Settings come from the environment, the same way the project daemons read
LOG_LEVEL, and are validated with pydantic.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

SOCKET_ENV = "I3WM_DELEGATE_SOCKET"
LOG_LEVEL_ENV = "LOG_LEVEL"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class DelegateConfig(BaseModel):
    """Connection and logging settings for a WorkspaceDelegate."""

    # None lets i3ipc discover the socket (I3SOCK, SWAYSOCK, X11 root atom)
    socket_path: Optional[str] = Field(default=None)
    log_level: str = Field(default="INFO")

    @field_validator('socket_path')
    @classmethod
    def socket_path_not_blank(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty socket path as unset."""
        if v is not None and not v.strip():
            return None
        return v

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v} (expected one of {', '.join(_LOG_LEVELS)})")
        return level

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "DelegateConfig":
        """Build configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ

        Returns:
            Validated DelegateConfig
        """
        env = os.environ if environ is None else environ
        config = cls(
            socket_path=env.get(SOCKET_ENV),
            log_level=env.get(LOG_LEVEL_ENV, "INFO"),
        )
        logger.debug(f"Loaded configuration: {config.model_dump()}")
        return config
