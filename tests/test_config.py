import json
import logging

from libris.presentation.cli.config import CliConfig, configure_logging, get_default_config_path, load_config


def test_missing_config_uses_defaults(tmp_path) -> None:
    config = load_config(tmp_path / "config.json")
    assert config == CliConfig()
    assert config.text_display_mode == "typewriter"
    assert config.typing_delay_ms == 50
    assert config.sound_cues is False


def test_config_values_are_loaded(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"text_display_mode": "instant", "typing_delay_ms": 10, "sound_cues": True}),
        encoding="utf-8",
    )

    assert load_config(path) == CliConfig(text_display_mode="instant", typing_delay_ms=10, sound_cues=True)


def test_invalid_values_fall_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"text_display_mode": "fancy", "typing_delay_ms": -5, "sound_cues": "yes"}),
        encoding="utf-8",
    )

    assert load_config(path) == CliConfig()


def test_malformed_config_is_ignored(tmp_path, caplog) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        config = load_config(path)

    assert config == CliConfig()
    assert "Ignoring unreadable config" in caplog.text


def test_non_object_config_is_ignored(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_config(path) == CliConfig()


def test_default_config_path_lives_in_user_data_dir(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))
    path = get_default_config_path()
    assert path.name == "config.json"
    assert str(path).startswith(str(tmp_path))


def test_configure_logging_accepts_unknown_level(monkeypatch) -> None:
    monkeypatch.setenv("LIBRIS_LOG_LEVEL", "chatty")
    configure_logging()
