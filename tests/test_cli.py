"""Tests for perch.cli: CLI entrypoint and subcommands."""

import json
import logging

import pytest

from perch.cli import main
from perch.cli._build import parse_assignments


@pytest.fixture(autouse=True)
def _restore_logger_level():
    logger = logging.getLogger("perch")
    previous = logger.level
    yield
    logger.setLevel(previous)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PERCH_JSON", raising=False)
    monkeypatch.delenv("PERCH_LOG_LEVEL", raising=False)


class TestCLIHelp:
    @pytest.mark.parametrize("command", [[], ["match"], ["extract"], ["build"], ["inspect"]])
    def test_help_exits_zero(self, command: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([*command, "--help"])
        assert exc_info.value.code == 0

    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "perch" in capsys.readouterr().out


class TestCLIMissingArgs:
    @pytest.mark.parametrize(
        "argv",
        [["match"], ["match", "/a"], ["extract", "/a"], ["build"], ["inspect"]],
    )
    def test_exits_two(self, argv: list[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
        assert exc_info.value.code == 2

    def test_bad_log_level(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "loud", "match", "/a", "/a"])
        assert exc_info.value.code == 2


class TestMatch:
    def test_match(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "/users/{id}", "/users/42"])
        assert capsys.readouterr().out.strip() == "true"

    def test_no_match_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/plain", "/plainx"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().out.strip() == "false"

    def test_invalid_pattern(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/bad:path", "/bad"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "/bad:path" in err


class TestExtract:
    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["extract", "/a/{x}/{y}", "/a/1/2"])
        assert capsys.readouterr().out.splitlines() == ["x=1", "y=2"]

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["extract", "/a/{x}/{y}", "/a/1/2", "--json"])
        assert json.loads(capsys.readouterr().out) == {"x": "1", "y": "2"}

    def test_json_from_env(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PERCH_JSON", "1")
        main(["extract", "/files/*", "/files/a/b.txt"])
        assert json.loads(capsys.readouterr().out) == {}

    def test_mismatch_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["extract", "/users/{id}", "/posts/1"])
        assert exc_info.value.code == 1
        assert "does not match" in capsys.readouterr().err


class TestBuild:
    def test_build(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["build", "/users/{id}", "id=7"])
        assert capsys.readouterr().out.strip() == "/users/7"

    def test_repeated_name(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["build", "/a/{x}/{x}", "x=5"])
        assert capsys.readouterr().out.strip() == "/a/5/5"

    def test_wildcard_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "/files/*"])
        assert exc_info.value.code == 1
        assert "Path has wildcards or different parameters: 0/0" in capsys.readouterr().err

    def test_wrong_count_exits_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "/a/{x}/{y}", "x=1"])
        assert exc_info.value.code == 1
        assert "2/1" in capsys.readouterr().err

    def test_malformed_assignment(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["build", "/users/{id}", "id"])
        assert exc_info.value.code == 1
        assert "Expected name=value" in capsys.readouterr().err


class TestParseAssignments:
    def test_pairs(self) -> None:
        assert parse_assignments(["a=1", "b="]) == [("a", "1"), ("b", "")]

    def test_value_with_equals(self) -> None:
        assert parse_assignments(["q=a=b"]) == [("q", "a=b")]

    @pytest.mark.parametrize("item", ["novalue", "=1"])
    def test_rejects(self, item: str) -> None:
        with pytest.raises(ValueError):
            parse_assignments([item])


class TestInspect:
    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["inspect", "/api/*/{id}", "--json"])
        info = json.loads(capsys.readouterr().out)
        assert info == {
            "pattern": "/api/*/{id}",
            "has_wildcard": True,
            "has_parameters": True,
            "parameter_names": ["", "id"],
            "segments": ["/api/", "/", ""],
            "regex": "/api/(.*?)/(.+?)$",
        }

    def test_plain_has_no_regex(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["inspect", "/plain", "--json"])
        assert json.loads(capsys.readouterr().out)["regex"] is None

    def test_text(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["inspect", "/users/{id}"])
        out = capsys.readouterr().out
        assert "parameter_names" in out
        assert "('id',)" not in out
        assert "['id']" in out


class TestLogLevel:
    def test_verbose_sets_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--verbose", "match", "/a", "/a"])
        assert logging.getLogger("perch").level == logging.DEBUG

    def test_log_level_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--log-level", "error", "match", "/a", "/a"])
        assert logging.getLogger("perch").level == logging.ERROR

    def test_log_level_from_env(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PERCH_LOG_LEVEL", "info")
        main(["match", "/a", "/a"])
        assert logging.getLogger("perch").level == logging.INFO

    def test_flag_overrides_bad_env_level(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PERCH_LOG_LEVEL", "loud")
        main(["--log-level", "error", "match", "/a", "/a"])
        assert capsys.readouterr().out.strip() == "true"
        assert logging.getLogger("perch").level == logging.ERROR

    def test_verbose_overrides_bad_env_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PERCH_LOG_LEVEL", "loud")
        main(["--verbose", "match", "/a", "/a"])
        assert logging.getLogger("perch").level == logging.DEBUG

    def test_bad_env_level_exits_one(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PERCH_LOG_LEVEL", "loud")
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/a", "/a"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "Unknown log level 'loud'" in err
