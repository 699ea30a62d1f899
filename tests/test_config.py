"""Tests for configuration loading."""

from pathlib import Path

from edith.config import Config, ConfigModel, get_config, get_config_path, load_config, save_config


class TestConfigModel:
    """Test the configuration model."""

    def test_defaults(self):
        config = ConfigModel()

        assert config.bot_name == "Edith"
        assert config.show_welcome is True
        assert config.log_level == "WARNING"
        assert config.log_file is None

    def test_yaml_round_trip(self):
        config = ConfigModel(bot_name="Friday", no_color=True, log_level="debug")

        restored = ConfigModel.from_yaml(config.to_yaml())

        assert restored.bot_name == "Friday"
        assert restored.no_color is True
        assert restored.log_level == "DEBUG"

    def test_unknown_keys_ignored(self):
        config = ConfigModel.from_yaml("bot_name: Jarvis\ntheme_name: dark\n")
        assert config.bot_name == "Jarvis"

    def test_empty_yaml(self):
        assert ConfigModel.from_yaml("") == ConfigModel()


class TestConfigManager:
    """Test loading and saving through Config."""

    def test_env_var_overrides_path(self, tmp_path):
        assert get_config_path() == tmp_path / "config.yaml"

    def test_missing_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.yaml")

        assert config == ConfigModel()
        assert not (tmp_path / "missing.yaml").exists()

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "nested" / "config.yaml"
        save_config(ConfigModel(bot_name="Friday"), path)

        assert load_config(path).bot_name == "Friday"

    def test_invalid_file_falls_back(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")

        assert load_config(path) == ConfigModel()

    def test_get_caches_instance(self):
        first = get_config()
        assert get_config() is first

    def test_reload(self, tmp_path):
        first = get_config()
        Path(tmp_path / "config.yaml").write_text("bot_name: Karen\n")

        reloaded = Config.reload()

        assert reloaded is not first
        assert reloaded.bot_name == "Karen"
