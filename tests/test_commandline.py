from __future__ import annotations

from pathlib import Path

import pytest

from fixmixedtabs import cli, config

MIXED = "def f():\r\n\treturn 1\r\n        pass\r\n"


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_bytes(content.encode("utf-8"))
    return path


def test_check_reports_mixed_files(tmp_path, capsys):
    mixed = _write(tmp_path, "mixed.py", MIXED)
    clean = _write(tmp_path, "clean.py", "def f():\n    return 1\n")

    status = cli.main(["check", str(mixed), str(clean), "--tab-width", "4"])

    assert status == cli.EXIT_MIXED
    out = capsys.readouterr().out
    assert f"mixed: {mixed}" in out
    assert str(clean) not in out


def test_check_clean_files_exit_ok(tmp_path, capsys):
    clean = _write(tmp_path, "clean.py", "\tfoo\n  bar\n")

    assert cli.main(["check", str(clean), "--tab-width", "4"]) == cli.EXIT_OK
    assert capsys.readouterr().out == ""


def test_untabify_rewrites_in_place_and_keeps_line_endings(tmp_path):
    path = _write(tmp_path, "mixed.py", MIXED)

    assert cli.main(["untabify", str(path), "--tab-width", "4"]) == cli.EXIT_OK

    assert path.read_bytes() == b"def f():\r\n    return 1\r\n        pass\r\n"


def test_tabify_rewrites_in_place(tmp_path, capsys):
    path = _write(tmp_path, "mixed.py", MIXED)

    assert cli.main(["tabify", str(path), "--tab-width", "4"]) == cli.EXIT_OK

    assert path.read_bytes() == b"def f():\r\n\treturn 1\r\n\t\tpass\r\n"
    assert "changed (1 lines)" in capsys.readouterr().out


def test_dry_run_leaves_file_alone(tmp_path, capsys):
    path = _write(tmp_path, "mixed.py", MIXED)

    assert cli.main(["untabify", "-n", str(path), "--tab-width", "4"]) == cli.EXIT_OK

    assert path.read_bytes() == MIXED.encode("utf-8")
    assert "would change" in capsys.readouterr().out


def test_tab_width_defaults_to_config(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "APP_DIR", str(tmp_path / "conf"))
    monkeypatch.setattr(config, "CONFIG_PATH", str(tmp_path / "conf" / "config.json"))
    config.save_config({**config.DEFAULTS, "tab_width": 8})
    path = _write(tmp_path, "mixed.py", "\tfoo\n    bar\n")

    assert cli.main(["check", str(path)]) == cli.EXIT_OK


@pytest.mark.parametrize("width", ["0", "-2"])
def test_invalid_tab_width_is_an_error(tmp_path, capsys, width):
    path = _write(tmp_path, "mixed.py", MIXED)

    assert cli.main(["check", str(path), "--tab-width", width]) == cli.EXIT_ERROR
    assert "Tab width must be a positive integer" in capsys.readouterr().err


def test_missing_file_is_an_error(tmp_path, capsys):
    assert cli.main(["check", str(tmp_path / "nope.py"), "--tab-width", "4"]) == cli.EXIT_ERROR
    assert "error:" in capsys.readouterr().err
