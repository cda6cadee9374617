"""Core infrastructure components for bundlesplit."""

from .config import Config, SplitterConfig, get_config
from .exceptions import BundleSplitError, ConfigurationError
from .logging import get_logger, setup_logging, splitting_context

__all__ = [
    "Config",
    "SplitterConfig",
    "get_config",
    "BundleSplitError",
    "ConfigurationError",
    "get_logger",
    "setup_logging",
    "splitting_context",
]
