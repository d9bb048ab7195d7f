"""Tests for TzcSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from tzc.config.settings import TzcSettings
from tzc.domain.zones import DEFAULT_ZONES


class TestTzcSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = TzcSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.no_interact is False
        assert settings.zones.defaults == dict(DEFAULT_ZONES)
        assert settings.prompt.columns == 3

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TzcSettings.from_cli(search_from=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tzc.toml").write_text(
            '[zones.defaults]\nBER = "Europe/Berlin"\nUTC = "UTC"\n[prompt]\nshow_list = false\n'
        )
        settings = TzcSettings.from_cli(search_from=tmp_path)
        assert settings.zones.defaults == {"BER": "Europe/Berlin", "UTC": "UTC"}
        assert list(settings.zones.defaults) == ["BER", "UTC"]
        assert settings.prompt.show_list is False
        assert settings.prompt.columns == 3  # default preserved
        assert settings.config_path == tmp_path / "tzc.toml"

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "tzc.toml").write_text("")
        settings = TzcSettings.from_cli(search_from=tmp_path)
        assert settings.zones.defaults == dict(DEFAULT_ZONES)

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[zones]\nfallback = ["Europe/Berlin"]\n')
        settings = TzcSettings.from_cli(config_path=str(custom))
        assert settings.zones.fallback == ["Europe/Berlin"]
        assert settings.config_path == custom

    def test_missing_explicit_path_ignored(self, tmp_path: Path) -> None:
        settings = TzcSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tzc.toml").write_text("[zones\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TzcSettings.from_cli(search_from=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = TzcSettings.from_cli(
            search_from=tmp_path, json_output=True, quiet=True, verbose=True
        )
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "tzc.toml").write_text("[prompt]\ncolumns = 2\n")
        monkeypatch.setenv("TZC_PROMPT__COLUMNS", "5")
        settings = TzcSettings.from_cli(search_from=tmp_path)
        assert settings.prompt.columns == 5

    def test_env_flag(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TZC_NO_INTERACT", "true")
        assert TzcSettings.from_cli(search_from=tmp_path).no_interact is True


class TestInvalidValues:
    def test_empty_defaults_table(self, tmp_path: Path) -> None:
        (tmp_path / "tzc.toml").write_text("[zones]\ndefaults = {}\n")
        with pytest.raises(click.ClickException, match="must name at least one zone"):
            TzcSettings.from_cli(search_from=tmp_path)

    def test_message_names_file_and_field(self, tmp_path: Path) -> None:
        (tmp_path / "tzc.toml").write_text("[prompt]\ncolumns = 0\n")
        with pytest.raises(click.ClickException) as info:
            TzcSettings.from_cli(search_from=tmp_path)
        message = info.value.message
        assert message.startswith(f"Invalid configuration in {tmp_path / 'tzc.toml'}")
        assert "prompt.columns" in message

    def test_non_string_default_zone(self, tmp_path: Path) -> None:
        (tmp_path / "tzc.toml").write_text("[zones.defaults]\nX = 5\n")
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            TzcSettings.from_cli(search_from=tmp_path)

    def test_bad_env_value(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TZC_PROMPT__COLUMNS", "abc")
        with pytest.raises(click.ClickException, match="Invalid configuration: prompt.columns"):
            TzcSettings.from_cli(search_from=tmp_path)
