"""
Reference OEM migration source backed by a YAML legacy store.

Store layout (every top-level key is optional)::

    networks:
      - ssid: HomeNet
        security: wpa2-psk
        pre_shared_key: "hunter22"
    softap:
      ssid: MyHotspot
      passphrase: "secret123"
      band: 5ghz
    settings:
      verbose_logging_enabled: true

A missing ``networks`` or ``softap`` key means that field needs no migration.
The store file is kept while loading and deleted by ``commit()`` once the
snapshots have been handed over.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from wifimigrate.errors import MigrationError
from wifimigrate.migration.config_snapshot import ConfigMigrationSnapshot
from wifimigrate.migration.settings_snapshot import SETTING_DEFAULTS, SettingsMigrationSnapshot
from wifimigrate.migration.source import DefaultMigrationSource, MigrationEnvironment, MigrationSource
from wifimigrate.records import AccessPointRecord, NetworkRecord

logger = logging.getLogger("wifimigrate")


class YamlConfigStoreSource(MigrationSource):
    """Migration source that reads a legacy store written as YAML."""

    def __init__(
        self,
        store_path: Union[str, Path],
        fallback: Optional[MigrationSource] = None,
    ):
        self.store_path = Path(store_path)
        self.fallback = fallback or DefaultMigrationSource()
        self._store: Optional[Dict[str, Any]] = None
        self._snapshot_taken = False

    def _read_store(self) -> Optional[Dict[str, Any]]:
        if self._store is not None:
            return self._store
        if not self.store_path.exists():
            return None

        try:
            with open(self.store_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise MigrationError(f"Cannot parse legacy store {self.store_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise MigrationError(
                f"Legacy store {self.store_path} must be a mapping, got {type(data).__name__}"
            )
        self._store = data
        return data

    def load_config_snapshot(self) -> Optional[ConfigMigrationSnapshot]:
        if self._snapshot_taken:
            return None
        store = self._read_store()
        if store is None:
            logger.debug(f"No legacy store at {self.store_path}")
            return None

        builder = ConfigMigrationSnapshot.Builder()
        try:
            if "networks" in store:
                networks = [NetworkRecord(**entry) for entry in store["networks"] or []]
                builder.set_saved_networks(networks)
            if store.get("softap") is not None:
                builder.set_ap_configuration(AccessPointRecord(**store["softap"]))
        except (ValidationError, TypeError) as e:
            raise MigrationError(f"Invalid record in legacy store {self.store_path}: {e}") from e

        snapshot = builder.build()
        self._snapshot_taken = True
        logger.debug(f"Loaded legacy store {self.store_path}")
        return snapshot

    def commit(self) -> None:
        """Delete the legacy store once its snapshot has been handed over."""
        if not self._snapshot_taken or not self.store_path.exists():
            return
        self.store_path.unlink()
        logger.info(f"Migrated and removed legacy store {self.store_path}")

    def load_settings_snapshot(self, environment: MigrationEnvironment) -> SettingsMigrationSnapshot:
        store = self._read_store()
        stored = (store or {}).get("settings")
        if not stored:
            return self.fallback.load_settings_snapshot(environment)
        if not isinstance(stored, dict):
            raise MigrationError(f"Legacy store settings must be a mapping, got {type(stored).__name__}")

        unknown = set(stored) - set(SETTING_DEFAULTS)
        if unknown:
            raise MigrationError(f"Unknown settings in legacy store: {sorted(unknown)}")

        builder = SettingsMigrationSnapshot.Builder()
        for name, value in stored.items():
            getattr(builder, f"set_{name}")(value)
        return builder.build()
