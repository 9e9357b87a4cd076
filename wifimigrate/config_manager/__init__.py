from wifimigrate.config_manager.config_manager import (
    ConfigManager,
    DeviceConfig,
    LegacyStoreConfig,
    LoggingConfig,
    MigrationConfig,
    TransferConfig,
)
from wifimigrate.config_manager.path_resolver import PathResolver

__all__ = [
    "ConfigManager",
    "MigrationConfig",
    "DeviceConfig",
    "LegacyStoreConfig",
    "TransferConfig",
    "LoggingConfig",
    "PathResolver",
]
