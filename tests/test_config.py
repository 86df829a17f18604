import json
from pathlib import Path

import pytest

from dirtree.config import CONFIG_ENV, DEFAULT_CONFIG, load_config, with_output_name


def test_defaults_without_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    assert load_config(None) == DEFAULT_CONFIG
    assert load_config(tmp_path / "missing.json") == DEFAULT_CONFIG
    assert DEFAULT_CONFIG.output_name == "directory-tree.html"
    assert DEFAULT_CONFIG.follow_symlinks is True


def test_load_partial_file_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "dirtree.json"
    path.write_text(json.dumps({"follow_symlinks": False, "log_level": "debug"}), encoding="utf-8")

    config = load_config(path)

    assert config.follow_symlinks is False
    assert config.log_level == "DEBUG"
    assert config.output_name == DEFAULT_CONFIG.output_name
    assert config.progress_every == DEFAULT_CONFIG.progress_every


def test_env_variable_supplies_path(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"output_name": "tree.html", "progress_every": 0}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(path))

    config = load_config(None)

    assert config.output_name == "tree.html"
    assert config.progress_every == 1


def test_output_name_must_be_plain_file_name(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"output_name": "../escape.html"}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)
    with pytest.raises(ValueError):
        with_output_name(DEFAULT_CONFIG, "sub/out.html")
    assert with_output_name(DEFAULT_CONFIG, "out.html").output_name == "out.html"


@pytest.mark.parametrize("value", ["false", 0, None, "no"])
def test_follow_symlinks_must_be_boolean(tmp_path: Path, value: object) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"follow_symlinks": value}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)


@pytest.mark.parametrize("value", ["100", True, 2.5])
def test_progress_every_must_be_integer(tmp_path: Path, value: object) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"progress_every": value}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(path)
