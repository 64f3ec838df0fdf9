"""Tests for loading settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from docperiod.config import Settings, load_settings
from docperiod.engine import ElementClass, classify
from docperiod.errors import ConfigError


def test_defaults_without_config_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)
    assert load_settings() == Settings()
    assert Settings().extensions == (".cs",)


def test_config_file_in_working_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    (tmp_path / ".docperiod.yaml").write_text(
        "extensions: [.cs, .vb]\ninline_tags: kbd\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)

    settings = load_settings()
    assert settings.extensions == (".cs", ".vb")
    assert settings.inline_tags == ("kbd",)
    assert classify("kbd", {}, False, settings.tag_table()) is (
        ElementClass.INLINE
    )


def test_json_config(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text('{"opaque_tags": ["pre"]}', encoding="utf-8")

    settings = load_settings(path)
    assert settings.opaque_tags == ("pre",)


def test_empty_config_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == Settings()


@pytest.mark.parametrize(
    "content",
    [
        "unknown_key: 1\n",
        "- just\n- a list\n",
        "extensions: [unclosed\n",
        "extensions: 3\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(path)


def test_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_settings(tmp_path / "missing.yaml")
