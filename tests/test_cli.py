from __future__ import annotations

from pathlib import Path

import pytest

from envchain import LOAD_KEY, cli, load
from envchain.cli import EXIT_LOAD_FAILED, EXIT_MISSING_REQUIRED, EXIT_OK, main


def test_prints_loaded_variables(fixtures_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["noComments.env"]) == EXIT_OK
    out = capsys.readouterr().out.splitlines()
    assert out == [
        'key1 = "test1"',
        'key2 = "test2"',
        'key3 = "test3"',
        'key4 = "test4"',
    ]


def test_no_overwrite_flag(fixtures_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["chaining.env", "--no-overwrite"]) == EXIT_OK
    assert 'key1 = "test1"' in capsys.readouterr().out.splitlines()


def test_overwrite_by_default(fixtures_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["chaining.env"]) == EXIT_OK
    assert 'key1 = "test1-overwrite"' in capsys.readouterr().out.splitlines()


def test_missing_required_variables(fixtures_dir: Path, capsys: pytest.CaptureFixture[str]):
    code = main(["undef.env", "--require", "key3", "--require", "key1"])
    assert code == EXIT_MISSING_REQUIRED
    assert capsys.readouterr().out == ""


def test_load_failure(fixtures_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["invalidChain.env"]) == EXIT_LOAD_FAILED
    assert capsys.readouterr().out == ""


def test_cycle_is_a_load_failure(fixtures_dir: Path):
    assert main(["cycleA.env"]) == EXIT_LOAD_FAILED


def test_load_keys_are_not_printed(fixtures_dir: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["chaining.env"]) == EXIT_OK
    out = capsys.readouterr().out
    assert LOAD_KEY not in out
    assert 'key3 = "test3"' in out.splitlines()


def test_printed_output_reloads_to_the_same_variables(
    fixtures_dir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
):
    assert main(["chaining.env", "--no-overwrite"]) == EXIT_OK
    flattened = tmp_path / "flat.env"
    flattened.write_text(capsys.readouterr().out, encoding="utf-8")

    expected = {k: v for k, v in load("chaining.env", False).items() if k != LOAD_KEY}
    assert load(flattened).to_dict() == expected


def test_non_utf8_file_still_loads(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    source = tmp_path / "latin1.env"
    source.write_bytes(b'# caf\xe9\nKEY = "v"\n')

    assert main([str(source)]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ['KEY = "v"']


def test_decode_error_is_a_load_failure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    def failing_load(path, overwrite=True):
        raise UnicodeDecodeError("utf-8", b"\xe9", 0, 1, "invalid continuation byte")

    monkeypatch.setattr(cli, "load", failing_load)

    assert main([str(tmp_path / "any.env")]) == EXIT_LOAD_FAILED
    assert capsys.readouterr().out == ""
