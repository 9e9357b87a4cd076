"""Tests for the YAML configuration manager."""

import yaml

from wifimigrate.config_manager import ConfigManager, MigrationConfig, PathResolver


class TestMigrationConfig:
    def test_defaults(self):
        config = MigrationConfig()
        assert config.device.serial is None
        assert config.legacy_store.path == "legacy_store.yaml"
        assert config.transfer.output_dir == "transfer"
        assert config.logging.debug is False

    def test_dict_round_trip(self):
        config = MigrationConfig.from_dict(
            {"device": {"serial": "emulator-5554"}, "logging": {"debug": True}}
        )
        assert MigrationConfig.from_dict(config.to_dict()) == config

    def test_from_yaml_with_unknown_key_uses_defaults(self, tmp_path):
        path = tmp_path / "cfg.yaml"
        path.write_text("device:\n  colour: red\n", encoding="utf-8")
        assert MigrationConfig.from_yaml(str(path)) == MigrationConfig()


class TestConfigManager:
    def test_creates_default_file(self, tmp_path):
        path = tmp_path / "nested" / "wifimigrate.yaml"
        manager = ConfigManager(str(path))

        assert path.exists()
        assert yaml.safe_load(path.read_text(encoding="utf-8")) == MigrationConfig().to_dict()
        assert manager.config == MigrationConfig()

    def test_loads_existing_file(self, tmp_path):
        path = tmp_path / "wifimigrate.yaml"
        path.write_text(
            "device:\n  serial: R58M\nlegacy_store:\n  path: /data/misc/wifi/store.yaml\n",
            encoding="utf-8",
        )
        manager = ConfigManager(str(path))
        assert manager.device.serial == "R58M"
        assert manager.legacy_store.path == "/data/misc/wifi/store.yaml"

    def test_env_var_selects_file(self, tmp_path, monkeypatch):
        path = tmp_path / "from_env.yaml"
        path.write_text("logging:\n  debug: true\n", encoding="utf-8")
        monkeypatch.setenv("WIFIMIGRATE_CONFIG", str(path))
        assert ConfigManager().logging.debug is True

    def test_singleton(self, tmp_path):
        first = ConfigManager(str(tmp_path / "a.yaml"))
        second = ConfigManager(str(tmp_path / "b.yaml"))
        assert first is second
        assert second.path == tmp_path / "a.yaml"

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "wifimigrate.yaml"
        manager = ConfigManager(str(path))
        manager.transfer.output_dir = "/tmp/out"
        manager.save()
        manager.reload()
        assert manager.transfer.output_dir == "/tmp/out"

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "wifimigrate.yaml"
        path.write_text("", encoding="utf-8")
        assert ConfigManager(str(path)).config == MigrationConfig()


class TestPathResolver:
    def test_absolute_path_unchanged(self, tmp_path):
        assert PathResolver.resolve(tmp_path / "x.yaml") == tmp_path / "x.yaml"

    def test_relative_path_prefers_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert PathResolver.resolve("transfer", create_if_missing=True) == tmp_path / "transfer"
