"""End-to-end tests for the unmark command line."""

import io
import json
import sys
from pathlib import Path

import pytest

from unmark.main import main, read_input
from unmark.processor.exceptions import InputReadError


@pytest.fixture(autouse=True)
def _isolated_env(clean_env: None) -> None:
    pass


def _write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "input.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> tuple[int, str]:
    code = main(argv)
    return code, capsys.readouterr().out


class TestJsonReport:
    def test_reports_detection_and_cleaned_text(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str], watermarked_text: str
    ) -> None:
        code, out = _run([_write(tmp_path, watermarked_text)], capsys)
        payload = json.loads(out)

        assert code == 0
        assert payload["success"] is True
        assert payload["original"] == watermarked_text
        assert payload["cleaned"] == "The quick brown fox jumps over\nthe lazy dog."
        stats = payload["stats"]
        assert stats["originalLength"] == 47
        assert stats["cleanedLength"] == 44
        assert stats["charactersRemoved"] == 6
        assert stats["watermarksDetected"] is True
        assert [w["unicode"] for w in stats["detectedWatermarks"]] == [
            "U+200B",
            "U+FEFF",
            "U+2060",
            "U+202F",
            "U+00A0",
            "U+2029",
        ]

    def test_clean_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = _run([_write(tmp_path, "no watermarks here")], capsys)
        payload = json.loads(out)
        assert code == 0
        assert payload["cleaned"] == "no watermarks here"
        assert payload["stats"]["watermarksDetected"] is False
        assert payload["stats"]["detectedWatermarks"] == []

    def test_empty_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = _run([_write(tmp_path, "")], capsys)
        stats = json.loads(out)["stats"]
        assert code == 0
        assert stats["originalLength"] == 0
        assert stats["cleanedLength"] == 0

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        stdin = io.TextIOWrapper(io.BytesIO("hello\u200bworld".encode("utf-8")))
        monkeypatch.setattr(sys, "stdin", stdin)
        code, out = _run([], capsys)
        assert code == 0
        assert json.loads(out)["cleaned"] == "helloworld"

    def test_indent_from_settings(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("OUTPUT_INDENT", "4")
        _, out = _run([_write(tmp_path, "x")], capsys)
        assert '\n    "success": true' in out


class TestCleanedOnly:
    def test_prints_cleaned_text_only(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code, out = _run([_write(tmp_path, "para1\u2029para2"), "--cleaned-only"], capsys)
        assert code == 0
        assert out == "para1\npara2"


class TestBoundaryPolicy:
    def test_policy_flag(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, "hello\u200bworld")
        code, out = _run([path, "--policy", "insert_space_at_word_boundary"], capsys)
        assert code == 0
        assert json.loads(out)["cleaned"] == "hello world"

    def test_policy_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("BOUNDARY_POLICY", "insert_space_at_word_boundary")
        _, out = _run([_write(tmp_path, "hello\u200bworld"), "--cleaned-only"], capsys)
        assert out == "hello world"

    def test_unknown_policy_in_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("BOUNDARY_POLICY", "guess")
        code, out = _run([_write(tmp_path, "x")], capsys)
        payload = json.loads(out)
        assert code == 1
        assert payload["success"] is False
        assert "Unknown boundary policy" in payload["error"]

    def test_unknown_policy_flag_is_rejected_by_parser(self) -> None:
        with pytest.raises(SystemExit):
            main(["--policy", "guess"])


class TestFailures:
    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code, out = _run([str(tmp_path / "missing.txt")], capsys)
        payload = json.loads(out)
        assert code == 1
        assert payload == {"success": False, "error": payload["error"]}
        assert payload["error"].startswith("Failed to read input")

    def test_undecodable_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"caf\xe9")
        code, out = _run([str(path)], capsys)
        assert code == 1
        assert json.loads(out)["error"].startswith("Failed to decode input as utf-8")


class TestReadInput:
    def test_reads_file(self, tmp_path: Path) -> None:
        assert read_input(_write(tmp_path, "abc"), "utf-8") == "abc"

    def test_unknown_encoding(self, tmp_path: Path) -> None:
        with pytest.raises(InputReadError, match="Failed to decode"):
            read_input(_write(tmp_path, "abc"), "no-such-codec")

    def test_dash_means_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"from stdin")))
        assert read_input("-", "utf-8") == "from stdin"
