"""Tests for the CLI entry points."""

import json

from click.testing import CliRunner

from rpmspec_parser.cli.main import cli


class TestCLI:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "RPM Spec Parser" in result.output

    def test_parse_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", "--help"])
        assert result.exit_code == 0
        assert "--json" in result.output
        assert "--output-dir" in result.output
        assert "--format" in result.output

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_parse_table(self, widgets_spec):
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", str(widgets_spec)])
        assert result.exit_code == 0
        assert "widgets" in result.output

    def test_parse_json(self, widgets_spec):
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", str(widgets_spec), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["main_package"] == "widgets"
        assert "%files" in data["sections"]["widgets-doc"]

    def test_parse_export(self, widgets_spec, tmp_path):
        runner = CliRunner()
        out = tmp_path / "out"
        result = runner.invoke(cli, ["parse", str(widgets_spec), "-o", str(out), "--json"])
        assert result.exit_code == 0
        assert sorted(p.name for p in out.iterdir()) == [
            "python3-widgets.json",
            "widgets-doc.json",
            "widgets.json",
        ]

    def test_parse_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", str(tmp_path / "nope.spec")])
        assert result.exit_code == 1
        assert "No such file" in result.output

    def test_parse_undecodable_file(self, tmp_path):
        path = tmp_path / "latin1.spec"
        path.write_bytes(b"Name: w\nSummary: caf\xe9\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", str(path)])
        assert result.exit_code == 1
        assert "Failed to decode" in result.output

    def test_parse_invalid_spec(self, write_spec):
        runner = CliRunner()
        result = runner.invoke(cli, ["parse", str(write_spec("%package doc\n"))])
        assert result.exit_code == 1
        assert "main package name" in result.output

    def test_tag(self, widgets_spec):
        runner = CliRunner()
        result = runner.invoke(cli, ["tag", str(widgets_spec), "Version"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.0"

    def test_tag_for_subpackage(self, widgets_spec):
        runner = CliRunner()
        result = runner.invoke(cli, ["tag", str(widgets_spec), "Summary", "-p", "widgets-doc"])
        assert result.exit_code == 0
        assert result.output.strip() == "Documentation for widgets"

    def test_tag_missing(self, widgets_spec):
        runner = CliRunner()
        result = runner.invoke(cli, ["tag", str(widgets_spec), "Epoch"])
        assert result.exit_code == 1

    def test_expand(self, widgets_spec):
        runner = CliRunner()
        result = runner.invoke(cli, ["expand", str(widgets_spec), "%{name}-%{ver}.tar.gz"])
        assert result.exit_code == 0
        assert result.output.strip() == "widgets-1.0.tar.gz"
