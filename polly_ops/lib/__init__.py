"""Shared utilities and configuration."""

from polly_ops.lib.config import PollyConfig, get_polly_config, reset_all_configs
from polly_ops.lib.exceptions import (
    PollyOpsError,
    ConfigError,
    ResponseDecodeError,
)

__all__ = [
    "PollyConfig",
    "get_polly_config",
    "reset_all_configs",
    "PollyOpsError",
    "ConfigError",
    "ResponseDecodeError",
]
