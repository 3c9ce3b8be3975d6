# -*- coding: utf-8 -*-
"""Location: ./tests/unit/configalchemy/test_cli.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0
Authors: ConfigAlchemy Contributors

Tests for the command line interface.
"""

# Standard
import io
from unittest.mock import patch

# Third-Party
import pytest

# First-Party
from configalchemy import __version__
from configalchemy import cli


class TestParser:
    def test_convert_arguments(self):
        args = cli.create_parser().parse_args(["convert", "in.yaml", "-f", "yaml", "-t", "lua", "-o", "out.lua"])
        assert (args.input_file, args.source, args.target, args.output) == ("in.yaml", "yaml", "lua", "out.lua")
        assert args.func is cli.convert_command

    def test_stdin_default(self):
        args = cli.create_parser().parse_args(["convert", "--from", "json", "--to", "toml"])
        assert args.input_file == "-"

    def test_unknown_format_rejected(self, capsys):
        with pytest.raises(SystemExit):
            cli.create_parser().parse_args(["convert", "--from", "xml", "--to", "json"])

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["--version"])
        assert __version__ in capsys.readouterr().out


class TestConvertCommand:
    def test_file_to_stdout(self, tmp_path, capsys):
        source = tmp_path / "app.yaml"
        source.write_text("database:\n  host: localhost\n  port: 5432\n", encoding="utf-8")
        assert cli.main(["convert", str(source), "--from", "yaml", "--to", "lua"]) == 0
        assert capsys.readouterr().out == 'return { ["database"] = { ["host"] = "localhost", ["port"] = 5432 } }\n'

    def test_stdin_to_file(self, tmp_path, monkeypatch):
        target = tmp_path / "out.toml"
        monkeypatch.setattr("sys.stdin", io.StringIO('{"server": {"port": 8080}}'))
        assert cli.main(["convert", "--from", "json", "--to", "toml", "-o", str(target)]) == 0
        assert target.read_text(encoding="utf-8") == "[server]\nport = 8080\n"

    def test_parse_error_reported(self, tmp_path, capsys):
        source = tmp_path / "bad.toml"
        source.write_text("invalid = ", encoding="utf-8")
        assert cli.main(["convert", str(source), "--from", "toml", "--to", "json"]) == 1
        err = capsys.readouterr().err
        assert "Error [PARSE_TOML_FAILED]" in err
        assert "Hint:" in err

    def test_lua_source_refused(self, tmp_path, capsys):
        source = tmp_path / "in.lua"
        source.write_text("return {}", encoding="utf-8")
        assert cli.main(["convert", str(source), "--from", "lua", "--to", "json"]) == 1
        assert "UNSUPPORTED_FROM_LUA" in capsys.readouterr().err

    def test_empty_input_refused(self, tmp_path, capsys):
        source = tmp_path / "empty.json"
        source.write_text("", encoding="utf-8")
        assert cli.main(["convert", str(source), "--from", "json", "--to", "yaml"]) == 1
        assert "INVALID_CONTENT" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert cli.main(["convert", str(tmp_path / "nope.json"), "--from", "json", "--to", "yaml"]) == 1
        assert "Cannot read" in capsys.readouterr().err

    def test_verbose_reports_write(self, tmp_path, capsys):
        source = tmp_path / "in.json"
        source.write_text("[1]", encoding="utf-8")
        target = tmp_path / "out.yaml"
        assert cli.main(["convert", str(source), "-f", "json", "-t", "yaml", "-o", str(target), "-v"]) == 0
        assert "Wrote" in capsys.readouterr().err
        assert target.read_text(encoding="utf-8") == "- 1\n"


class TestServeCommand:
    def test_serve_runs_uvicorn(self):
        with patch("configalchemy.cli.uvicorn.run") as run:
            assert cli.main(["serve", "--host", "0.0.0.0", "--port", "9999"]) == 0
        run.assert_called_once()
        assert run.call_args.args == ("configalchemy.main:app",)
        assert run.call_args.kwargs["host"] == "0.0.0.0"
        assert run.call_args.kwargs["port"] == 9999
        assert run.call_args.kwargs["reload"] is False

    def test_serve_defaults_from_settings(self, app_settings):
        with patch("configalchemy.cli.uvicorn.run") as run:
            cli.main(["serve"])
        assert run.call_args.kwargs["port"] == app_settings.port


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()
