"""
Soulscape configuration module.
"""

from soulscape.config.settings import (
    LOG_FORMAT,
    SoulscapeConfig,
    get_config,
    reset_config,
)
from soulscape.config.tables import (
    EmotionTables,
    TablesConfigError,
    default_tables,
    load_tables,
)

__all__ = [
    "LOG_FORMAT",
    "SoulscapeConfig",
    "get_config",
    "reset_config",
    "EmotionTables",
    "TablesConfigError",
    "default_tables",
    "load_tables",
]
