"""Tests for the configuration module."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from safe_rm.config import (
    DEFAULT_CONFIG_TEMPLATE,
    GLOBAL_CONFIG_FILE,
    ConfigPaths,
    get_config_paths,
    get_home,
    get_xdg_config_home,
    load_config_file,
)
from safe_rm.errors import ConfigError
from safe_rm.safety.protected import DEFAULT_PROTECTED_DIRS


class TestGetHome:
    """Tests for get_home."""

    def test_from_environ(self):
        assert get_home({"HOME": "/home/alice"}) == "/home/alice"

    def test_unset_is_empty(self):
        assert get_home({}) == ""


class TestGetXdgConfigHome:
    """Tests for get_xdg_config_home."""

    def test_default_path(self):
        assert get_xdg_config_home({"HOME": "/home/alice"}) == "/home/alice/.config"

    def test_custom_xdg(self):
        env = {"HOME": "/home/alice", "XDG_CONFIG_HOME": "/custom/config"}
        assert get_xdg_config_home(env) == "/custom/config"

    def test_empty_xdg_ignored(self):
        env = {"HOME": "/home/alice", "XDG_CONFIG_HOME": ""}
        assert get_xdg_config_home(env) == "/home/alice/.config"

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv("XDG_CONFIG_HOME", "/from/env")
        assert get_xdg_config_home() == "/from/env"


class TestGetConfigPaths:
    """Tests for get_config_paths."""

    def test_load_order(self):
        paths = get_config_paths({"HOME": "/home/alice"})
        assert list(paths) == [
            GLOBAL_CONFIG_FILE,
            Path("/home/alice/.safe-rm"),
            Path("/home/alice/.config/safe-rm"),
        ]

    def test_global_path(self):
        assert GLOBAL_CONFIG_FILE == Path("/etc/safe-rm.conf")

    def test_xdg_override(self):
        paths = get_config_paths({"HOME": "/home/alice", "XDG_CONFIG_HOME": "/xdg"})
        assert paths.user_file == Path("/xdg/safe-rm")
        assert paths.legacy_file == Path("/home/alice/.safe-rm")

    def test_home_unset_degenerate(self):
        paths = get_config_paths({})
        assert paths.legacy_file == Path("/.safe-rm")
        assert paths.user_file == Path("/.config/safe-rm")

    def test_labelled(self):
        paths = ConfigPaths(Path("/g"), Path("/l"), Path("/u"))
        assert paths.labelled() == [
            ("Global", Path("/g")),
            ("Legacy", Path("/l")),
            ("User", Path("/u")),
        ]


class TestLoadConfigFile:
    """Tests for load_config_file."""

    def test_missing_file(self, temp_dir: Path, caplog):
        with caplog.at_level(logging.WARNING):
            assert load_config_file(temp_dir / "missing") == []
        assert caplog.records == []

    def test_unreadable_file_reported(self, temp_dir: Path, caplog):
        # A directory cannot be opened as a file, even by root
        config_dir = temp_dir / "config-dir"
        config_dir.mkdir()
        with caplog.at_level(logging.WARNING):
            assert load_config_file(config_dir) == []
        assert "Could not open configuration file" in caplog.text

    def test_literal_and_glob(self, temp_dir: Path, alice_tree: Path):
        config = temp_dir / "safe-rm.conf"
        config.write_text(f"{alice_tree / 'docs'}\n{alice_tree / 'tmp' / '*'}\n")

        result = load_config_file(config)

        assert sorted(result) == [
            str(alice_tree / "docs"),
            str(alice_tree / "tmp" / "a.txt"),
            str(alice_tree / "tmp" / "b.txt"),
        ]
        assert str(alice_tree / "tmp" / "*") not in result

    def test_trailing_whitespace_trimmed(self, temp_dir: Path):
        config = temp_dir / "safe-rm.conf"
        config.write_bytes(b"/srv/data \t\r\n/srv/other\t\n")
        assert load_config_file(config) == ["/srv/data", "/srv/other"]

    def test_leading_whitespace_kept(self, temp_dir: Path):
        config = temp_dir / "safe-rm.conf"
        config.write_text("  /srv/data\n")
        assert load_config_file(config) == ["  /srv/data"]

    def test_blank_lines_ignored(self, temp_dir: Path):
        config = temp_dir / "safe-rm.conf"
        config.write_text("\n   \n/srv/data\n\n")
        assert load_config_file(config) == ["/srv/data"]

    def test_last_line_without_newline(self, temp_dir: Path):
        config = temp_dir / "safe-rm.conf"
        config.write_text("/srv/a\n/srv/b")
        assert load_config_file(config) == ["/srv/a", "/srv/b"]

    def test_unmatched_glob_contributes_nothing(self, temp_dir: Path):
        config = temp_dir / "safe-rm.conf"
        config.write_text(f"{temp_dir / 'nothing-here' / '*'}\n")
        assert load_config_file(config) == []

    def test_unterminated_bracket_is_not_fatal(self, temp_dir: Path):
        config = temp_dir / "safe-rm.conf"
        config.write_text(f"{temp_dir / '[draft'}\n/srv/ok\n")
        assert load_config_file(config) == ["/srv/ok"]

    def test_broken_pattern_is_fatal(self, temp_dir: Path):
        config = temp_dir / "safe-rm.conf"
        config.write_text("/srv/ok\n/srv/\0broken\n")
        with pytest.raises(ConfigError, match="safe-rm.conf"):
            load_config_file(config)


class TestDefaultConfigTemplate:
    """Tests for DEFAULT_CONFIG_TEMPLATE."""

    def test_template_loads_to_defaults(self, temp_dir: Path):
        config = temp_dir / "safe-rm"
        config.write_text(DEFAULT_CONFIG_TEMPLATE)
        assert load_config_file(config) == list(DEFAULT_PROTECTED_DIRS)
