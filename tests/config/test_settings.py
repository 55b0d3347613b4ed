"""Tests for ValchainSettings — unified settings with TOML source."""

from pathlib import Path

import pytest

from valchain.config.settings import ValchainSettings
from valchain.errors import ConfigError


class TestValchainSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = ValchainSettings.load(start=tmp_path)
        assert settings.config_path is None
        assert settings.log.verbose is False
        assert settings.log.log_json is False
        assert settings.rules.email.check_deliverability is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ValchainSettings.load(start=tmp_path)
        with pytest.raises(Exception):
            settings.config_path = tmp_path  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "valchain.toml"
        toml.write_text("[rules.email]\nallow_display_name = false\n[log]\nlog_json = true\n")
        settings = ValchainSettings.load(start=tmp_path)
        assert settings.config_path == toml
        assert settings.rules.email.allow_display_name is False
        assert settings.log.log_json is True
        assert settings.log.verbose is False  # default preserved

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "valchain.toml").write_text("")
        settings = ValchainSettings.load(start=tmp_path)
        assert settings.rules.email.allow_display_name is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[log]\nverbose = true\n")
        settings = ValchainSettings.load(config_path=str(custom))
        assert settings.log.verbose is True
        assert settings.config_path == custom

    def test_missing_explicit_path_falls_back_to_defaults(self, tmp_path: Path) -> None:
        settings = ValchainSettings.load(config_path=tmp_path / "nope.toml")
        assert settings.config_path is None
        assert settings.log.verbose is False

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "valchain.toml").write_text("not = [valid")
        with pytest.raises(ConfigError):
            ValchainSettings.load(start=tmp_path)


class TestOverrides:
    def test_init_overrides_toml(self, tmp_path: Path) -> None:
        (tmp_path / "valchain.toml").write_text("[log]\nverbose = true\n")
        settings = ValchainSettings.load(start=tmp_path, log={"verbose": False})
        assert settings.log.verbose is False


class TestEnvVars:
    def test_nested_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VALCHAIN_LOG__VERBOSE", "true")
        settings = ValchainSettings.load(start=tmp_path)
        assert settings.log.verbose is True

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "valchain.toml").write_text("[rules.email]\nallow_display_name = true\n")
        monkeypatch.setenv("VALCHAIN_RULES__EMAIL__ALLOW_DISPLAY_NAME", "false")
        settings = ValchainSettings.load(start=tmp_path)
        assert settings.rules.email.allow_display_name is False
