from wifimigrate.migration.codec import (
    TransferCodec,
    read_transfer,
    read_transfer_payloads,
    write_transfer,
)
from wifimigrate.migration.config_snapshot import ConfigMigrationSnapshot
from wifimigrate.migration.consumer import MigrationConsumer, MigrationOutcome
from wifimigrate.migration.settings_snapshot import (
    SETTING_DEFAULTS,
    SETTING_FIELDS,
    SettingField,
    SettingsMigrationSnapshot,
)
from wifimigrate.migration.source import (
    DefaultMigrationSource,
    MigrationEnvironment,
    MigrationSource,
    load_settings_from_provider,
)

__all__ = [
    "ConfigMigrationSnapshot",
    "SettingsMigrationSnapshot",
    "SettingField",
    "SETTING_FIELDS",
    "SETTING_DEFAULTS",
    "TransferCodec",
    "write_transfer",
    "read_transfer",
    "read_transfer_payloads",
    "MigrationSource",
    "DefaultMigrationSource",
    "MigrationEnvironment",
    "load_settings_from_provider",
    "MigrationConsumer",
    "MigrationOutcome",
]
