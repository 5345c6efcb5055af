import json
import logging

from java_format_cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def test_cli_show_help():
    result = runner.invoke(app, ["show", "--help"])
    assert result.exit_code == 0
    assert "Show the resolved formatter options" in result.stdout


def test_cli_show_defaults(tmp_path):
    result = runner.invoke(app, ["show", "--config-file", str(tmp_path / "none.toml")])
    assert result.exit_code == 0
    assert "style: google" in result.stdout
    assert "indentation_multiplier: 1" in result.stdout
    assert "format_javadoc: True" in result.stdout
    assert "single_line_javadoc_style: single-line" in result.stdout
    assert "space_inside_empty_block: False" in result.stdout


def test_cli_show_flags(tmp_path):
    result = runner.invoke(
        app,
        [
            "show",
            "--config-file",
            str(tmp_path / "none.toml"),
            "--aosp",
            "--skip-javadoc-formatting",
            "--single-line-javadoc-style",
            "multi-line",
            "--space-inside-empty-block",
            "--json",
        ],
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "style": "aosp",
        "indentation_multiplier": 2,
        "format_javadoc": False,
        "single_line_javadoc_style": "multi-line",
        "space_inside_empty_block": True,
    }


def test_cli_flags_override_config(tmp_path):
    config = tmp_path / ".java-format.toml"
    config.write_text(
        '[tool.java-format]\nsingle-line-javadoc-style = "multi-line"\nspace-inside-empty-block = true\n',
        encoding="utf-8",
    )
    result = runner.invoke(
        app,
        ["show", "--config-file", str(config), "--single-line-javadoc-style", "single-line", "--json"],
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["single_line_javadoc_style"] == "single-line"
    assert data["space_inside_empty_block"] is True
    assert data["style"] == "google"


def test_cli_rejects_unknown_javadoc_style(tmp_path):
    result = runner.invoke(
        app,
        ["show", "--config-file", str(tmp_path / "none.toml"), "--single-line-javadoc-style", "sideways"],
    )
    assert result.exit_code != 0


def test_cli_styles():
    result = runner.invoke(app, ["styles"])
    assert result.exit_code == 0
    assert "google: indentation multiplier 1" in result.stdout
    assert "aosp: indentation multiplier 2" in result.stdout


def test_cli_flags_reverse_config(tmp_path):
    config = tmp_path / ".java-format.toml"
    config.write_text(
        '[tool.java-format]\nstyle = "aosp"\nformat-javadoc = false\nspace-inside-empty-block = true\n',
        encoding="utf-8",
    )
    result = runner.invoke(
        app,
        [
            "show",
            "--config-file",
            str(config),
            "--no-aosp",
            "--format-javadoc",
            "--no-space-inside-empty-block",
            "--json",
        ],
    )
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["style"] == "google"
    assert data["indentation_multiplier"] == 1
    assert data["format_javadoc"] is True
    assert data["space_inside_empty_block"] is False


def test_cli_config_values_kept_without_flags(tmp_path):
    config = tmp_path / ".java-format.toml"
    config.write_text('[tool.java-format]\nstyle = "aosp"\n', encoding="utf-8")
    result = runner.invoke(app, ["show", "--config-file", str(config), "--json"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["style"] == "aosp"


def test_cli_malformed_config_uses_defaults(tmp_path):
    config = tmp_path / ".java-format.toml"
    config.write_text("tool = 1\n", encoding="utf-8")
    result = runner.invoke(app, ["show", "--config-file", str(config)])
    assert result.exit_code == 0
    assert "style: google" in result.stdout
    assert "indentation_multiplier: 1" in result.stdout


def test_cli_verbose_logs_loaded_config(tmp_path, caplog):
    config = tmp_path / ".java-format.toml"
    config.write_text('[tool.java-format]\nstyle = "aosp"\n', encoding="utf-8")
    with caplog.at_level(logging.DEBUG, logger="java_format_cli.config"):
        result = runner.invoke(app, ["show", "--config-file", str(config), "--verbose"])
    assert result.exit_code == 0
    assert "style: aosp" in result.stdout
    assert "Loaded java-format options" in caplog.text
