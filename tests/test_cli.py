"""Tests for the marshalkit command-line interface."""

import json
import logging

import pytest

from marshalkit.cli import cli, format_value, parse_value, validate_document


class TestFormat:
    """Tests for the format subcommand."""

    @pytest.mark.parametrize(
        "kind,raw,want",
        [
            ("bytes", "1048576", "1.0MB"),
            ("bytes", "12288", "12kB"),
            ("duration", "-1", "-1ns"),
            ("duration", "72000000000000", "20h0m0s"),
            ("mode", "0o644", "644"),
            ("mode", "420", "644"),
            ("checkbox", "true", "on"),
            ("checkbox", "False", "off"),
            ("url", "http://localhost:8080/status", "http://localhost:8080/status"),
        ],
    )
    def test_format(self, capsys, kind, raw, want):
        assert cli(["format", kind, raw]) == 0
        assert capsys.readouterr().out == want + "\n"

    @pytest.mark.parametrize(
        "kind,raw",
        [("mode", "512"), ("mode", "-1"), ("bytes", "-1"), ("bytes", "1kB"), ("checkbox", "maybe")],
    )
    def test_format_error(self, kind, raw):
        assert cli(["format", kind, raw]) == 1

    def test_format_value(self):
        assert format_value("duration", "1500000000") == "1.5s"


class TestParse:
    """Tests for the parse subcommand."""

    @pytest.mark.parametrize(
        "kind,text,want",
        [
            ("bytes", "250kB", "256000"),
            ("duration", "1m30s", "90000000000"),
            ("mode", "644", "0o644"),
            ("checkbox", "on", "true"),
            ("checkbox", "off", "false"),
            ("url", "https://resenje.org/", "https://resenje.org/"),
        ],
    )
    def test_parse(self, capsys, kind, text, want):
        assert cli(["parse", kind, text]) == 0
        assert capsys.readouterr().out == want + "\n"

    def test_parse_error_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="marshalkit"):
            assert cli(["parse", "duration", "a"]) == 1
        assert "time: invalid duration a" in caplog.text

    def test_parse_value(self):
        assert parse_value("mode", "0") == "0o0"


class TestValidate:
    """Tests for the validate subcommand."""

    def test_validate_prints_canonical_document(self, tmp_path, capsys):
        path = tmp_path / "values.json"
        path.write_text(
            json.dumps(
                {
                    "bytes": ["1024B", "12kB"],
                    "duration": "20h",
                    "checkbox": False,
                    "mode": "644",
                    "url": "https://resenje.org/",
                }
            )
        )

        assert cli(["validate", str(path)]) == 0
        assert json.loads(capsys.readouterr().out) == {
            "bytes": ["1.0kB", "12kB"],
            "duration": "20h0m0s",
            "checkbox": False,
            "mode": "644",
            "url": "https://resenje.org/",
        }

    def test_validate_document_returns_values(self, tmp_path):
        path = tmp_path / "values.json"
        path.write_text('{"checkbox": "on"}')

        result = validate_document(str(path))
        assert result["checkbox"].bool() is True

    @pytest.mark.parametrize(
        "content",
        [
            '{"bytes": 1024}',
            '{"duration": ""}',
            '{"size": "1kB"}',
            '["1kB"]',
            "not json",
        ],
    )
    def test_validate_rejects_bad_documents(self, tmp_path, content):
        path = tmp_path / "values.json"
        path.write_text(content)

        assert cli(["validate", str(path)]) == 1

    def test_validate_missing_file(self, tmp_path):
        assert cli(["validate", str(tmp_path / "missing.json")]) == 1


def test_unknown_kind_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        cli(["format", "speed", "1"])
    assert exc.value.code == 2


def test_no_command_prints_help(capsys):
    assert cli([]) == 0
    assert "usage: marshalkit" in capsys.readouterr().out
