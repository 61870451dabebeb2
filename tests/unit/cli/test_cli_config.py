"""Unit tests for textfind CLI configuration management.

This module tests configuration file discovery, loading of the supported
formats, priority handling and conversion into find settings.
"""

import argparse
import json

import pytest
import yaml

from textfind.cli.config import (
    _load_pyproject_textfind_section,
    discover_config_file,
    find_config_in_parents,
    get_config_search_paths,
    load_config_file,
    load_config_with_priority,
    settings_from_config,
)
from textfind.options.settings import FindSettings


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point the home directory and cwd at empty temporary directories."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return home, work


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test configuration file discovery functionality."""

    def test_find_config_in_current_dir(self, tmp_path):
        """Test finding a dedicated config file in the start directory."""
        config = tmp_path / ".textfind.toml"
        config.write_text("[find]\nregex = true\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == config.resolve()

    def test_find_config_in_parent_dir(self, tmp_path):
        """Test walking up to a parent directory."""
        config = tmp_path / ".textfind.json"
        config.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config.resolve()

    def test_toml_has_priority_over_yaml(self, tmp_path):
        """Test dedicated file priority order within one directory."""
        (tmp_path / ".textfind.yaml").write_text("find: {}\n", encoding="utf-8")
        toml_path = tmp_path / ".textfind.toml"
        toml_path.write_text("[find]\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == toml_path.resolve()

    def test_pyproject_without_section_is_skipped(self, tmp_path):
        """Test that pyproject.toml only counts when it has [tool.textfind]."""
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
        config = tmp_path / ".textfind.toml"
        config.write_text("[find]\n", encoding="utf-8")
        assert find_config_in_parents(project) == config.resolve()

    def test_pyproject_with_section_is_found(self, tmp_path):
        """Test that pyproject.toml with [tool.textfind] is discovered."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.textfind.find]\nregex = true\n", encoding="utf-8")
        assert find_config_in_parents(tmp_path) == pyproject.resolve()

    def test_invalid_pyproject_is_skipped(self, tmp_path):
        """Test that a broken pyproject.toml does not stop the search."""
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text("[tool.textfind\n", encoding="utf-8")
        config = tmp_path / ".textfind.yml"
        config.write_text("find: {}\n", encoding="utf-8")
        assert find_config_in_parents(project) == config.resolve()

    def test_discover_falls_back_to_home(self, isolated_home):
        """Test discovery in the home directory."""
        home, _ = isolated_home
        config = home / ".textfind.yaml"
        config.write_text("find:\n  regex: true\n", encoding="utf-8")
        discovered = discover_config_file()
        assert discovered is not None
        assert discovered.name == ".textfind.yaml"

    def test_get_config_search_paths(self, isolated_home):
        """Test the representative search path list."""
        home, work = isolated_home
        paths = get_config_search_paths()
        assert paths[0] == work / ".textfind.toml"
        assert work / "pyproject.toml" in paths
        assert paths[-1] == home / ".textfind.json"


@pytest.mark.unit
@pytest.mark.cli
class TestConfigLoading:
    """Test loading configuration files of each format."""

    def test_load_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[find]\ncase_sensitive = true\nmax_history = 5\n", encoding="utf-8")
        assert load_config_file(path) == {"find": {"case_sensitive": True, "max_history": 5}}

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"find": {"regex": True}}), encoding="utf-8")
        assert load_config_file(str(path)) == {"find": {"regex": True}}

    def test_load_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"find": {"preserve_case": True}}), encoding="utf-8")
        assert load_config_file(path) == {"find": {"preserve_case": True}}

    def test_load_pyproject_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool.textfind.find]\nwhole_words_only = true\n", encoding="utf-8")
        assert load_config_file(path) == {"find": {"whole_words_only": True}}
        assert _load_pyproject_textfind_section(path) == {"find": {"whole_words_only": True}}

    def test_pyproject_section_must_be_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text("[tool]\ntextfind = 3\n", encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match="must be a table"):
            load_config_file(path)

    @pytest.mark.parametrize(
        "name,content,message",
        [
            ("bad.toml", "[find\n", "Invalid TOML"),
            ("bad.json", "{not json", "Invalid JSON"),
            ("list.json", "[1, 2]", "must contain an object"),
            ("bad.yaml", "find: [unclosed\n", "Invalid YAML"),
            ("list.yaml", "- a\n- b\n", "must contain a mapping"),
            ("config.ini", "[find]\n", "Unsupported config file format"),
        ],
    )
    def test_invalid_files(self, tmp_path, name, content, message):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(argparse.ArgumentTypeError, match=message):
            load_config_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "missing.toml")

    def test_directory_is_rejected(self, tmp_path):
        with pytest.raises(argparse.ArgumentTypeError, match="not a file"):
            load_config_file(tmp_path)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigPriority:
    """Test explicit, environment and discovered configuration priority."""

    def test_explicit_path_wins(self, tmp_path, isolated_home):
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"find": {"regex": true}}', encoding="utf-8")
        env = tmp_path / "env.json"
        env.write_text('{"find": {"regex": false}}', encoding="utf-8")
        assert load_config_with_priority(str(explicit), str(env)) == {"find": {"regex": True}}

    def test_env_path_used_without_explicit(self, tmp_path, isolated_home):
        env = tmp_path / "env.json"
        env.write_text('{"find": {"regex": false}}', encoding="utf-8")
        assert load_config_with_priority(None, str(env)) == {"find": {"regex": False}}

    def test_discovered_config(self, isolated_home):
        _, work = isolated_home
        (work / ".textfind.toml").write_text("[find]\nregex = true\n", encoding="utf-8")
        assert load_config_with_priority() == {"find": {"regex": True}}

    def test_nothing_found(self, isolated_home):
        assert load_config_with_priority() == {}


@pytest.mark.unit
@pytest.mark.cli
class TestSettingsFromConfig:
    """Test conversion of the [find] table."""

    def test_missing_section(self):
        assert settings_from_config({}) == FindSettings()

    def test_section_values(self):
        settings = settings_from_config({"find": {"case_sensitive": True, "max_history": 3}})
        assert settings.case_sensitive
        assert settings.max_history == 3

    def test_section_must_be_mapping(self):
        with pytest.raises(argparse.ArgumentTypeError, match="must be a table"):
            settings_from_config({"find": ["regex"]})

    def test_invalid_values(self):
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid \\[find\\] configuration"):
            settings_from_config({"find": {"regex": "sometimes"}})
