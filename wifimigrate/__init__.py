"""
wifimigrate - one-time hand-over of legacy Wi-Fi config store data and settings.
"""

__version__ = "0.1.0"

from wifimigrate.errors import (
    InvalidArgumentError,
    MalformedTransferDataError,
    MigrationError,
    SettingsUnavailableError,
)
from wifimigrate.legacy_store import YamlConfigStoreSource
from wifimigrate.migration import (
    ConfigMigrationSnapshot,
    DefaultMigrationSource,
    MigrationConsumer,
    MigrationEnvironment,
    MigrationOutcome,
    MigrationSource,
    SettingsMigrationSnapshot,
    TransferCodec,
    read_transfer,
    write_transfer,
)
from wifimigrate.records import (
    AccessPointRecord,
    Band,
    MeteredOverride,
    NetworkRecord,
    SecurityType,
)
from wifimigrate.settings_provider import (
    AdbSettingsProvider,
    InMemorySettingsProvider,
    SettingsProvider,
)

__all__ = [
    # Snapshots
    "ConfigMigrationSnapshot",
    "SettingsMigrationSnapshot",
    # Records
    "NetworkRecord",
    "AccessPointRecord",
    "SecurityType",
    "MeteredOverride",
    "Band",
    # Transfer
    "TransferCodec",
    "write_transfer",
    "read_transfer",
    # Sources and consumer
    "MigrationSource",
    "DefaultMigrationSource",
    "YamlConfigStoreSource",
    "MigrationEnvironment",
    "MigrationConsumer",
    "MigrationOutcome",
    # Settings providers
    "SettingsProvider",
    "InMemorySettingsProvider",
    "AdbSettingsProvider",
    # Errors
    "MigrationError",
    "InvalidArgumentError",
    "MalformedTransferDataError",
    "SettingsUnavailableError",
]
