"""
Tests for voidmullvad.config — timeout loading with safe fallbacks.
"""

from voidmullvad.config import DEFAULTS, load_config


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path):
        missing = tmp_path / "nonexistent" / "config.toml"
        assert load_config(path=missing) == DEFAULTS

    def test_valid_toml_overrides_timeouts(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("download_timeout = 300\ncommand_timeout = 30.5\n")
        assert load_config(path=cfg) == {"download_timeout": 300.0, "command_timeout": 30.5}

    def test_partial_file_keeps_other_default(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("download_timeout = 10\n")
        result = load_config(path=cfg)
        assert result["download_timeout"] == 10.0
        assert result["command_timeout"] == DEFAULTS["command_timeout"]

    def test_malformed_toml_returns_defaults(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("download_timeout = [not valid toml\n")
        assert load_config(path=cfg) == DEFAULTS

    def test_non_numeric_value_ignored(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('download_timeout = "soon"\n')
        assert load_config(path=cfg) == DEFAULTS

    def test_boolean_value_ignored(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("command_timeout = true\n")
        assert load_config(path=cfg) == DEFAULTS

    def test_non_positive_value_ignored(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("download_timeout = 0\ncommand_timeout = -5\n")
        assert load_config(path=cfg) == DEFAULTS

    def test_unknown_keys_ignored(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('download_url = "https://example.test"\n')
        assert load_config(path=cfg) == DEFAULTS

    def test_defaults_not_mutated(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("download_timeout = 5\n")
        load_config(path=cfg)
        assert DEFAULTS["download_timeout"] == 60.0
