"""Shared configuration, logging and error types."""

from .config import Config, GoogleConfig, ServerConfig
from .exceptions import (
    AuthError,
    ConfigError,
    ConflictError,
    DiaryBackendError,
    UpstreamError,
    ValidationError,
)
from .logger import setup_logger

__all__ = [
    "Config",
    "GoogleConfig",
    "ServerConfig",
    "AuthError",
    "ConfigError",
    "ConflictError",
    "DiaryBackendError",
    "UpstreamError",
    "ValidationError",
    "setup_logger",
]
