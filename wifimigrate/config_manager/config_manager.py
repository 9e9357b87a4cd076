from __future__ import annotations

import logging
import os
import threading
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

import yaml

from wifimigrate.config_manager.path_resolver import PathResolver

logger = logging.getLogger("wifimigrate")


# ---------- Config Schema ----------
@dataclass
class DeviceConfig:
    """Device to read live settings from."""

    serial: Optional[str] = None


@dataclass
class LegacyStoreConfig:
    """Location of the legacy config store."""

    path: str = "legacy_store.yaml"


@dataclass
class TransferConfig:
    """Where transfer files are written."""

    output_dir: str = "transfer"
    file_name: str = "migration.bin"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    debug: bool = False
    rich_text: bool = True


@dataclass
class MigrationConfig:
    """Complete wifimigrate configuration schema."""

    device: DeviceConfig = field(default_factory=DeviceConfig)
    legacy_store: LegacyStoreConfig = field(default_factory=LegacyStoreConfig)
    transfer: TransferConfig = field(default_factory=TransferConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MigrationConfig":
        return cls(
            device=DeviceConfig(**data.get("device", {})),
            legacy_store=LegacyStoreConfig(**data.get("legacy_store", {})),
            transfer=TransferConfig(**data.get("transfer", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )

    @classmethod
    def from_yaml(cls, path: str) -> "MigrationConfig":
        """
        Create config from YAML file.

        Args:
            path: Path to YAML config file

        Returns:
            MigrationConfig instance; defaults when the file is empty or invalid

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if not data:
            logger.warning(f"Empty config file at {path}, using defaults")
            return cls()
        try:
            return cls.from_dict(data)
        except (TypeError, AttributeError) as e:
            logger.warning(f"Failed to parse config from {path}, using defaults: {e}")
            return cls()


# ---------- ConfigManager ----------
class ConfigManager:
    """
    Thread-safe singleton holding the typed configuration.

    Resolution order for the config file:
    1) Explicit path arg
    2) WIFIMIGRATE_CONFIG env var
    3) "wifimigrate.yaml" (working dir, then project dir)
    """

    _instance: Optional["ConfigManager"] = None
    _instance_lock = threading.Lock()

    def __new__(cls, path: Optional[str] = None):
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._initialized = False
        return cls._instance

    def __init__(self, path: Optional[str] = None):
        if getattr(self, "_initialized", False):
            return

        self._lock = threading.RLock()
        env = os.environ.get("WIFIMIGRATE_CONFIG")
        self.path = PathResolver.resolve(path or env or "wifimigrate.yaml")

        self._config = MigrationConfig()
        self._ensure_file_exists()
        self.load_config()

        self._initialized = True

    # ---------------- Typed property access ----------------
    @property
    def config(self) -> MigrationConfig:
        with self._lock:
            return self._config

    @property
    def device(self) -> DeviceConfig:
        with self._lock:
            return self._config.device

    @property
    def legacy_store(self) -> LegacyStoreConfig:
        with self._lock:
            return self._config.legacy_store

    @property
    def transfer(self) -> TransferConfig:
        with self._lock:
            return self._config.transfer

    @property
    def logging(self) -> LoggingConfig:
        with self._lock:
            return self._config.logging

    # ---------------- I/O ----------------
    def _ensure_file_exists(self) -> None:
        """Create default config file if it doesn't exist."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self._write(MigrationConfig())

    def _write(self, config: MigrationConfig) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.dump(config.to_dict(), f, sort_keys=False, default_flow_style=False)

    def load_config(self) -> None:
        """Load YAML from file into memory, falling back to defaults on parse failure."""
        with self._lock:
            if not self.path.exists():
                self._ensure_file_exists()
                self._config = MigrationConfig()
                return
            self._config = MigrationConfig.from_yaml(str(self.path))

    def save(self) -> None:
        """Persist current in-memory config to YAML file."""
        with self._lock:
            self._write(self._config)

    def reload(self) -> None:
        self.load_config()

    # useful for tests to reset singleton state
    @classmethod
    def _reset_instance_for_testing(cls) -> None:
        with cls._instance_lock:
            cls._instance = None

    def __repr__(self) -> str:
        return f"<ConfigManager path={self.path!s}>"
