"""Legacy config store readers."""

from wifimigrate.legacy_store.yaml_store import YamlConfigStoreSource

__all__ = ["YamlConfigStoreSource"]
