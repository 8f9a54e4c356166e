#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for configuration file discovery and loading."""

import json

import pytest
import yaml

from html2tbl.config import find_config_in_parents, load_config_file, load_options, options_from_dict
from html2tbl.exceptions import ConfigError
from html2tbl.options import TableOptions


@pytest.mark.unit
class TestLoadConfigFile:
    """Tests for reading configuration files."""

    def test_toml(self, tmp_path):
        path = tmp_path / ".html2tbl.toml"
        path.write_text('column_separator = "#"\nexpand-marker = ""\n', encoding="utf-8")

        assert load_config_file(path) == {"column_separator": "#", "expand-marker": ""}

    def test_yaml(self, tmp_path):
        path = tmp_path / ".html2tbl.yaml"
        path.write_text(yaml.safe_dump({"fail_on_table_errors": False}), encoding="utf-8")

        assert load_config_file(path) == {"fail_on_table_errors": False}

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / ".html2tbl.yml"
        path.write_text("", encoding="utf-8")

        assert load_config_file(path) == {}

    def test_json(self, tmp_path):
        path = tmp_path / ".html2tbl.json"
        path.write_text(json.dumps({"column_separator": "@"}), encoding="utf-8")

        assert load_config_file(path) == {"column_separator": "@"}

    def test_pyproject_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.html2tbl]\nexpand_marker = ""\n', encoding="utf-8")

        assert load_config_file(path) == {"expand_marker": ""}

    def test_pyproject_without_section(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")

        assert load_config_file(path) == {}

    def test_pyproject_tool_not_a_table(self, tmp_path):
        path = tmp_path / "pyproject.toml"
        path.write_text("tool = 1\n", encoding="utf-8")

        with pytest.raises(ConfigError, match=r"\[tool\]") as exc_info:
            load_config_file(path)

        assert exc_info.value.config_path == str(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[x]\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Unsupported"):
            load_config_file(path)

    @pytest.mark.parametrize(
        "filename,content",
        [
            ("bad.toml", "column_separator = \n"),
            ("bad.json", "{not json"),
            ("bad.yaml", "key: [unclosed"),
            ("list.json", "[1, 2]"),
            ("list.yaml", "- a\n- b\n"),
        ],
    )
    def test_malformed_files(self, tmp_path, filename, content):
        path = tmp_path / filename
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config_file(path)

        assert exc_info.value.config_path == str(path)


@pytest.mark.unit
class TestOptionsFromConfig:
    """Tests for turning configuration into TableOptions."""

    def test_dashes_and_underscores(self):
        options = options_from_dict({"column-separator": "#", "expand_marker": ""})

        assert options == TableOptions(column_separator="#", expand_marker="")

    def test_base_options_preserved(self):
        base = TableOptions(fail_on_table_errors=False)

        options = options_from_dict({"column_separator": "#"}, base=base)

        assert options.fail_on_table_errors is False
        assert options.column_separator == "#"

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown option"):
            options_from_dict({"border": "double"})

    def test_invalid_value(self):
        with pytest.raises(ConfigError, match="column_separator"):
            options_from_dict({"column_separator": "||"})

    def test_find_config_in_parents(self, tmp_path):
        config = tmp_path / ".html2tbl.json"
        config.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == config.resolve()

    def test_find_prefers_pyproject_with_section(self, tmp_path):
        outer = tmp_path / ".html2tbl.toml"
        outer.write_text('column_separator = "#"\n', encoding="utf-8")
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text("[tool.html2tbl]\nexpand_marker = ''\n", encoding="utf-8")

        assert find_config_in_parents(project) == (project / "pyproject.toml").resolve()

    def test_find_skips_pyproject_without_section(self, tmp_path):
        outer = tmp_path / ".html2tbl.toml"
        outer.write_text('column_separator = "#"\n', encoding="utf-8")
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")

        assert find_config_in_parents(project) == outer.resolve()

    def test_find_skips_pyproject_with_scalar_tool(self, tmp_path):
        outer = tmp_path / ".html2tbl.toml"
        outer.write_text('column_separator = "#"\n', encoding="utf-8")
        project = tmp_path / "project"
        project.mkdir()
        (project / "pyproject.toml").write_text("tool = 1\n", encoding="utf-8")

        assert find_config_in_parents(project) == outer.resolve()

    def test_load_options_from_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("column_separator: '#'\nescape_control_lines: false\n", encoding="utf-8")

        options = load_options(path)

        assert options.column_separator == "#"
        assert options.escape_control_lines is False

    def test_load_options_discovered(self, tmp_path, monkeypatch):
        (tmp_path / ".html2tbl.toml").write_text('expand_marker = ""\n', encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert load_options().expand_marker == ""

    def test_load_options_reports_path(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text('{"colour": "red"}', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_options(path)

        assert exc_info.value.config_path == str(path)
