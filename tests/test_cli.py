"""Tests for the command line entry point."""

import json
import logging
from pathlib import Path
from typing import Any

import pytest

from seasonrenamer.renamer import main


@pytest.fixture(autouse=True)
def _info_logs(caplog: Any) -> None:
    caplog.set_level(logging.INFO, logger="seasonrenamer")


def test_missing_root_exits_non_zero(tmp_path: Path, caplog: Any) -> None:
    missing = tmp_path / "nope"
    assert main([str(missing)]) == 1
    assert str(missing) in caplog.text


def test_rename(make_show, listing) -> None:
    root = make_show({"Season 1": ["a.mkv", "a.srt"]})

    assert main([str(root)]) == 0
    assert listing(root / "Season 1") == ["S001E001.en.srt", "S001E001.mkv"]


def test_dry_run(make_show, listing, caplog: Any) -> None:
    root = make_show({"Season 1": ["a.mkv", "b.mkv"]})

    assert main([str(root), "--dry-run"]) == 0
    assert listing(root / "Season 1") == ["a.mkv", "b.mkv"]
    assert "This is just a dry run." in caplog.text
    assert "Would rename: 2 files" in caplog.text


def test_summary_counts_unchanged_files(make_show, caplog: Any) -> None:
    root = make_show({"Season 1": ["S001E001.mkv", "b.mkv"]})

    assert main([str(root)]) == 0
    assert "Renamed: 1 | Unchanged: 1" in caplog.text


def test_ignore_filename_flag(make_show, listing) -> None:
    root = make_show({"Season 1": ["a - E04.mkv"]})

    assert main([str(root), "--ignore-filename"]) == 0
    assert listing(root / "Season 1") == ["S001E001.mkv"]


def test_ordering_violation_exits_non_zero(make_show, caplog: Any) -> None:
    root = make_show({"Season 1": ["a.mkv", "b.mkv", "c - E01.mkv"]})

    assert main([str(root)]) == 1
    assert "c - E01.mkv" in caplog.text


def test_collision_exits_non_zero(make_show, listing, caplog: Any) -> None:
    root = make_show({"Season 1": ["a.mkv"]})
    (root / "Season 1" / "S001E001.mkv").mkdir()

    assert main([str(root)]) == 1
    assert "S001E001.mkv" in caplog.text
    assert "a.mkv" in listing(root / "Season 1")


def test_config_file_is_used(make_show, listing, tmp_path: Path) -> None:
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"dry_run": True, "default_subtitle_language": "de"}))
    root = make_show({"Season 1": ["a.mkv", "a.srt"]})

    assert main([str(root), "--config", str(config)]) == 0
    assert listing(root / "Season 1") == ["a.mkv", "a.srt"]


def test_bad_config_exits_non_zero(make_show, tmp_path: Path) -> None:
    config = tmp_path / "settings.json"
    config.write_text("{not json")
    root = make_show({"Season 1": ["a.mkv"]})

    assert main([str(root), "--config", str(config)]) == 1


def test_path_is_required(capsys: Any) -> None:
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_bad_setting_type_exits_non_zero(make_show, listing, tmp_path: Path, caplog: Any) -> None:
    config = tmp_path / "settings.json"
    config.write_text(json.dumps({"media_extensions": ".mkv"}))
    root = make_show({"Season 1": ["a.mkv"]})

    assert main([str(root), "--config", str(config)]) == 1
    assert "media_extensions" in caplog.text
    assert listing(root / "Season 1") == ["a.mkv"]


@pytest.mark.parametrize("flag", ["--path", "-p"])
def test_path_option(make_show, listing, flag: str) -> None:
    root = make_show({"Season 1": ["a.mkv"]})

    assert main([flag, str(root)]) == 0
    assert listing(root / "Season 1") == ["S001E001.mkv"]


def test_path_given_twice(make_show, capsys: Any) -> None:
    root = make_show({"Season 1": ["a.mkv"]})

    with pytest.raises(SystemExit) as exc:
        main([str(root), "--path", str(root)])
    assert exc.value.code == 2
