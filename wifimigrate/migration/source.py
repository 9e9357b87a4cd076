import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from wifimigrate.migration.config_snapshot import ConfigMigrationSnapshot
from wifimigrate.migration.settings_snapshot import SETTING_FIELDS, SettingsMigrationSnapshot
from wifimigrate.settings_provider import SettingsProvider

logger = logging.getLogger("wifimigrate")


@dataclass(frozen=True)
class MigrationEnvironment:
    """What a migration source may read from while loading settings."""

    settings: SettingsProvider
    device_serial: Optional[str] = None


class MigrationSource(ABC):
    """
    One-time hooks through which a legacy Wi-Fi stack hands over its data.

    The consumer calls both loaders once per boot, sequentially, from a single
    initialization point. Only the first boot after upgrading from a legacy
    implementation is meant to carry data:

    - ``load_config_snapshot`` must return None on every other boot. Once the
      snapshot has been handed over (``commit``), the implementation should
      delete its legacy store so that later boots return None.
    - ``load_settings_snapshot`` never returns None. Outside the migration boot
      it should report the live settings, which the consumer owns from then on.

    The consumer does not enforce any of this.
    """

    def commit(self) -> None:
        """
        Called after both snapshots have been taken over by the consumer.

        Sources that delete their legacy store do it here, never while loading,
        so a failed hand-over leaves the store in place for the next attempt.
        """
        pass

    @abstractmethod
    def load_config_snapshot(self) -> Optional[ConfigMigrationSnapshot]:
        """
        Load data from the legacy config store.

        Returns:
            Snapshot to migrate, or None if no migration is necessary
        """
        pass

    @abstractmethod
    def load_settings_snapshot(self, environment: MigrationEnvironment) -> SettingsMigrationSnapshot:
        """
        Load the global Wi-Fi settings.

        Args:
            environment: Access to the settings provider

        Returns:
            Fully built snapshot; fields with no stored value hold their defaults
        """
        pass


def load_settings_from_provider(settings: SettingsProvider) -> SettingsMigrationSnapshot:
    """Build a settings snapshot from the seven global keys, applying defaults."""
    builder = SettingsMigrationSnapshot.Builder()
    for field in SETTING_FIELDS:
        if field.default is None or isinstance(field.default, str):
            value = settings.get_string(field.key)
        else:
            value = settings.get_int(field.key, 1 if field.default else 0) == 1
        getattr(builder, f"set_{field.name}")(value)
    snapshot = builder.build()
    logger.debug(f"Loaded settings snapshot: {snapshot}")
    return snapshot


class DefaultMigrationSource(MigrationSource):
    """Source for a device whose stack already uses the current formats."""

    def load_config_snapshot(self) -> Optional[ConfigMigrationSnapshot]:
        return None

    def load_settings_snapshot(self, environment: MigrationEnvironment) -> SettingsMigrationSnapshot:
        return load_settings_from_provider(environment.settings)
