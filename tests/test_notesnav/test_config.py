"""Unit tests for notesnav.config."""

import textwrap
from pathlib import Path

import pytest

from notesnav.config import NavConfig, load_config


class TestNavConfig:
    def test_defaults(self):
        config = NavConfig()
        assert config.channel_name == "utils/Url"
        assert config.notes_root == "notes"
        assert config.blob_origin == "null"

    def test_from_dict_with_section(self):
        config = NavConfig.from_dict({"navigation": {"notes_root": "n"}})
        assert config.notes_root == "n"
        assert config.channel_name == "utils/Url"

    def test_from_flat_dict(self):
        assert NavConfig.from_dict({"channel_name": "x"}).channel_name == "x"

    def test_unknown_keys_warn(self, capsys):
        config = NavConfig.from_dict({"navigation": {"colour": "blue"}})
        assert config == NavConfig()
        assert "colour" in capsys.readouterr().err

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("NOTESNAV_CHANNEL", "env/Url")
        config = NavConfig(channel_name="file/Url", notes_root="n").with_env()
        assert config.channel_name == "env/Url"
        assert config.notes_root == "n"


class TestLoadConfig:
    def test_toml(self, tmp_path: Path):
        path = tmp_path / "nav.toml"
        path.write_text(
            textwrap.dedent("""\
                [navigation]
                channel_name = "app/Url"
                blob_origin  = "https://notes.example.com"
            """),
            encoding="utf-8",
        )
        config = load_config(path)
        assert config.channel_name == "app/Url"
        assert config.blob_origin == "https://notes.example.com"

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "nav.yaml"
        path.write_text("navigation:\n  notes_root: items\n", encoding="utf-8")
        assert load_config(path).notes_root == "items"

    def test_empty_yaml(self, tmp_path: Path):
        path = tmp_path / "nav.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == NavConfig()

    def test_env_beats_file(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "nav.toml"
        path.write_text('notes_root = "file"\n', encoding="utf-8")
        monkeypatch.setenv("NOTESNAV_NOTES_ROOT", "env")
        assert load_config(path).notes_root == "env"

    def test_no_path(self, monkeypatch):
        monkeypatch.setenv("NOTESNAV_BLOB_ORIGIN", "https://x")
        assert load_config().blob_origin == "https://x"

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "nav.ini"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="Unsupported"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.toml")
