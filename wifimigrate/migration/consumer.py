"""
Consumer side of the migration: the single point that pulls snapshots at boot.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from wifimigrate.errors import MalformedTransferDataError, MigrationError
from wifimigrate.migration.codec import TransferCodec
from wifimigrate.migration.config_snapshot import ConfigMigrationSnapshot
from wifimigrate.migration.settings_snapshot import SettingsMigrationSnapshot
from wifimigrate.migration.source import MigrationEnvironment, MigrationSource
from wifimigrate.records import AccessPointRecord, NetworkRecord

logger = logging.getLogger("wifimigrate")


@dataclass(frozen=True)
class MigrationOutcome:
    """What the consumer received from one migration attempt."""

    config: Optional[ConfigMigrationSnapshot] = None
    settings: Optional[SettingsMigrationSnapshot] = None
    errors: Tuple[str, ...] = ()

    @property
    def needs_config_migration(self) -> bool:
        return self.config is not None

    @property
    def networks_to_migrate(self) -> Tuple[NetworkRecord, ...]:
        if self.config is None or self.config.saved_networks is None:
            return ()
        return self.config.saved_networks

    @property
    def ap_configuration(self) -> Optional[AccessPointRecord]:
        return None if self.config is None else self.config.ap_configuration

    @property
    def changed_settings(self) -> List[str]:
        """Settings that differ from their defaults."""
        if self.settings is None:
            return []
        return self.settings.non_default_fields()


class MigrationConsumer:
    """
    Pulls migration data once per boot.

    Usage:
        consumer = MigrationConsumer(source, MigrationEnvironment(settings=provider))
        outcome = consumer.run()
    """

    def __init__(
        self,
        source: Optional[MigrationSource] = None,
        environment: Optional[MigrationEnvironment] = None,
        codec: Optional[TransferCodec] = None,
    ):
        self.source = source
        self.environment = environment
        self.codec = codec or TransferCodec()
        self._consumed = False

    def _claim(self) -> None:
        if self._consumed:
            raise MigrationError("migration data was already consumed for this boot")
        self._consumed = True

    def run(self) -> MigrationOutcome:
        """
        Call both loaders of the source exactly once, config first.

        The source is committed only after both loaders returned.
        """
        if self.source is None or self.environment is None:
            raise MigrationError("run() needs both a migration source and an environment")
        self._claim()

        config = self.source.load_config_snapshot()
        if config is None:
            logger.info("No config store migration needed")
        else:
            self._log_config(config)

        settings = self.source.load_settings_snapshot(self.environment)
        self._log_settings(settings)
        self.source.commit()
        return MigrationOutcome(config=config, settings=settings)

    def receive(self, config_bytes: bytes, settings_bytes: bytes) -> MigrationOutcome:
        """
        Decode snapshots transferred from another process.

        A malformed payload is not retried: that part of the migration is
        dropped and the failure is recorded in the outcome.
        """
        self._claim()
        errors = []

        config = None
        try:
            config = self.codec.decode_config(config_bytes)
        except MalformedTransferDataError as e:
            logger.error(f"Dropping config migration, malformed transfer data: {e}")
            errors.append(f"config: {e}")
        else:
            if config is None:
                logger.info("No config store migration needed")
            else:
                self._log_config(config)

        settings = None
        try:
            settings = self.codec.decode_settings(settings_bytes)
        except MalformedTransferDataError as e:
            logger.error(f"Dropping settings migration, malformed transfer data: {e}")
            errors.append(f"settings: {e}")
        else:
            self._log_settings(settings)

        return MigrationOutcome(config=config, settings=settings, errors=tuple(errors))

    @staticmethod
    def _log_config(config: ConfigMigrationSnapshot) -> None:
        if config.saved_networks is None:
            logger.info("Saved networks: nothing to migrate")
        else:
            logger.info(f"Saved networks to migrate: {len(config.saved_networks)}")
        if config.ap_configuration is None:
            logger.info("Soft AP configuration: nothing to migrate")
        else:
            logger.info("Soft AP configuration to migrate")

    @staticmethod
    def _log_settings(settings: SettingsMigrationSnapshot) -> None:
        changed = settings.non_default_fields()
        if changed:
            logger.info(f"Settings differing from defaults: {', '.join(changed)}")
        else:
            logger.info("All settings at defaults")
