"""Settings models and loaders for dofpath."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, dump_example_config, load_config
from .models import DofPathConfig, LayoutConfig, LoggingConfig, NamingConfig, ShortcutConfig

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "DofPathConfig",
    "LayoutConfig",
    "LoggingConfig",
    "NamingConfig",
    "ShortcutConfig",
    "dump_example_config",
    "load_config",
]
