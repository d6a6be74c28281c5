import os

import pytest

from phosphor_icons.core.exceptions import ConfigurationError
from phosphor_icons.core.models import IconStyle
from phosphor_icons.utils.config import IconSettings, load_settings, validate_settings


def test_defaults():
    settings = load_settings()

    assert settings == IconSettings()
    assert settings.namespace == "phosphor_icons.assets"
    assert settings.extension == "svg"
    assert settings.style is IconStyle.REGULAR
    assert settings.default_color == "#000000"
    assert settings.icon_size == 16


def test_settings_file_with_comments(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(
        """{
            // icon defaults
            "icons": {
                "default_style": "bold",
                "icon_size": 24,
            },
        }""",
        encoding="utf-8",
    )

    settings = load_settings(settings_file=str(settings_file))

    assert settings.style is IconStyle.BOLD
    assert settings.icon_size == 24


def test_environment_overrides_settings_file(tmp_path, monkeypatch):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text('{"icons": {"default_style": "bold"}}', encoding="utf-8")
    monkeypatch.setenv("PHOSPHOR_ICONS_SETTINGS", str(settings_file))
    monkeypatch.setenv("PHOSPHOR_ICONS_DEFAULT_STYLE", "thin")
    monkeypatch.setenv("PHOSPHOR_ICONS_SIZE", "32")

    settings = load_settings()

    assert settings.style is IconStyle.THIN
    assert settings.icon_size == 32


def test_env_file_is_loaded(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PHOSPHOR_ICONS_DEFAULT_COLOR=#ff0000\n", encoding="utf-8")

    settings = load_settings(env_file=str(env_file))

    assert settings.default_color == "#ff0000"


def test_env_file_is_not_loaded_implicitly(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("PHOSPHOR_ICONS_DEFAULT_COLOR=#ff0000\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings.default_color == "#000000"
    assert "PHOSPHOR_ICONS_DEFAULT_COLOR" not in os.environ


def test_missing_settings_file_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        load_settings(settings_file=str(tmp_path / "missing.json"))


def test_invalid_json_raises(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("{icons: [", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        load_settings(settings_file=str(settings_file))


def test_settings_file_must_hold_an_object(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text("[1]", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="must hold an object"):
        load_settings(settings_file=str(settings_file))


def test_unknown_setting_raises(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text('{"icons": {"theme": "dark"}}', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Unknown settings: theme"):
        load_settings(settings_file=str(settings_file))


def test_non_integer_size_raises(monkeypatch):
    monkeypatch.setenv("PHOSPHOR_ICONS_SIZE", "large")

    with pytest.raises(ConfigurationError, match="icon_size"):
        load_settings()


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"default_style": "heavy"}, "Unsupported style variant"),
        ({"default_color": "#nothex"}, "Invalid default color"),
        ({"icon_size": 0}, "icon_size must be positive"),
        ({"extension": ".svg"}, "Invalid resource extension"),
        ({"namespace": ""}, "Invalid resource namespace"),
        ({"log_level": "LOUD"}, "Invalid log level"),
        ({"icons_dir": "/nonexistent/icons"}, "Icons directory not found"),
    ],
)
def test_validate_settings_rejects_invalid_values(overrides, message):
    with pytest.raises(ConfigurationError, match=message):
        validate_settings(IconSettings(**overrides))


def test_round_trips_through_dict():
    settings = IconSettings(default_style="fill", icon_size=20)

    assert IconSettings.from_dict(settings.to_dict()) == settings
