from __future__ import annotations

from pathlib import Path

import pytest

from pleasant_path import ConfigError
from pleasant_path.config import (
    IOConfig,
    apply_env_overrides,
    get_config,
    load_config,
    reset_config_cache,
    validate_config,
)
from pleasant_path.data import get_data_path, read_yaml as read_data_yaml


def test_bundled_data_files_exist() -> None:
    assert get_data_path("config", "defaults.yaml").is_file()
    assert get_data_path("schemas", "config.schema.yaml").is_file()
    assert get_data_path("config").is_dir()
    assert get_data_path("config", "defaults.yaml").parent == get_data_path("config")


def test_defaults_are_loaded() -> None:
    cfg = load_config()

    assert isinstance(cfg, IOConfig)
    assert cfg.encoding == "utf-8"
    assert cfg.json_options == {
        "indent": 2,
        "sort_keys": False,
        "ensure_ascii": False,
        "allow_nan": True,
    }
    assert cfg.yaml_options["sort_keys"] is False
    assert cfg.available_name_format == "{name}_{i}{ext}"
    assert cfg.available_name_start == 1


def test_get_config_is_cached_until_reset() -> None:
    first = get_config()
    assert get_config() is first

    reset_config_cache()
    assert get_config() is not first


def test_env_read_once_until_cache_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    get_config()
    monkeypatch.setenv("PLEASANT_PATH_JSON__INDENT", "4")

    assert get_config().json_options["indent"] == 2

    reset_config_cache()
    assert get_config().json_options["indent"] == 4


def test_explicit_arguments_beat_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    from pleasant_path import available_name, read_text, write_json, write_text

    monkeypatch.setenv("PLEASANT_PATH_IO__ENCODING", "utf-16")
    monkeypatch.setenv("PLEASANT_PATH_JSON__INDENT", "4")
    monkeypatch.setenv("PLEASANT_PATH_AVAILABLE_NAME__FORMAT", "{name}-{i}{ext}")
    reset_config_cache()

    write_text("plain.txt", "x", encoding="utf-8")
    assert Path("plain.txt").read_bytes() == b"x"
    assert read_text("plain.txt", encoding="utf-8") == "x"

    write_json("compact.json", [1], indent=None, encoding="utf-8")
    assert Path("compact.json").read_bytes() == b"[1]"

    assert available_name("plain.txt", "{name}_{i}{ext}", i=1) == Path("plain_1.txt")


def test_env_overrides_are_typed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLEASANT_PATH_JSON__INDENT", "4")
    monkeypatch.setenv("PLEASANT_PATH_JSON__SORT_KEYS", "true")
    monkeypatch.setenv("PLEASANT_PATH_YAML__WIDTH", "120")

    cfg = load_config()

    assert cfg.json_options["indent"] == 4
    assert cfg.json_options["sort_keys"] is True
    assert cfg.yaml_options["width"] == 120


def test_env_null_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLEASANT_PATH_JSON__INDENT", "null")
    assert load_config().json_options["indent"] is None


def test_env_overrides_do_not_leak_into_bundled_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLEASANT_PATH_JSON__INDENT", "8")
    load_config()

    assert read_data_yaml("config", "defaults.yaml")["json"]["indent"] == 2


def test_overlay_file_is_merged(tmp_path: Path) -> None:
    overlay = tmp_path / "overlay.yaml"
    overlay.write_text("json:\n  indent: 0\navailable_name:\n  format: '{name}.{i}{ext}'\n")

    cfg = load_config(overlay)

    assert cfg.json_options["indent"] == 0
    assert cfg.json_options["ensure_ascii"] is False
    assert cfg.available_name_format == "{name}.{i}{ext}"
    assert cfg.available_name_start == 1


def test_env_beats_overlay(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    overlay = tmp_path / "overlay.yaml"
    overlay.write_text("io:\n  encoding: latin-1\n")
    monkeypatch.setenv("PLEASANT_PATH_IO__ENCODING", "ascii")

    assert load_config(overlay).encoding == "ascii"


def test_overlay_must_be_mapping(tmp_path: Path) -> None:
    overlay = tmp_path / "list.yaml"
    overlay.write_text("- a\n- b\n")

    with pytest.raises(ConfigError):
        load_config(overlay)


def test_empty_overlay_is_ignored(tmp_path: Path) -> None:
    overlay = tmp_path / "empty.yaml"
    overlay.write_text("")

    assert load_config(overlay) == load_config()


def test_missing_overlay_raises() -> None:
    with pytest.raises(FileNotFoundError):
        load_config("missing.yaml")


def test_invalid_value_reports_location(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLEASANT_PATH_AVAILABLE_NAME__FORMAT", "{name}-copy")

    with pytest.raises(ConfigError) as excinfo:
        load_config()

    assert excinfo.value.context["location"] == "available_name.format"


def test_unknown_section_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLEASANT_PATH_BOGUS__KEY", "1")

    with pytest.raises(ConfigError):
        load_config()


def test_malformed_env_key_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLEASANT_PATH_JSON____INDENT", "4")

    with pytest.raises(ConfigError) as excinfo:
        apply_env_overrides({})

    assert excinfo.value.context["key"] == "PLEASANT_PATH_JSON____INDENT"


def test_validate_config_accepts_defaults() -> None:
    validate_config(read_data_yaml("config", "defaults.yaml"))


def test_dump_option_helpers_apply_overrides() -> None:
    cfg = get_config()

    opts = cfg.json_dump_options(indent=None)

    assert opts["indent"] is None
    assert cfg.json_options["indent"] == 2
    assert cfg.yaml_dump_options(width=80)["width"] == 80
