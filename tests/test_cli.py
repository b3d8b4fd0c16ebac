"""Smoke tests for the music-tab CLI."""

import json
from pathlib import Path

import pytest
from loguru import logger
from rich.console import Console

from music_tab import cli
from music_tab.domain.audio.sound_ids import PRAYER_ACTIVATE_PIETY, TELEPORT_VWOOP
from music_tab.domain.tracks import TrackStatus


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("MUSIC_TAB_LOG_LEVEL", raising=False)
    yield
    logger.remove()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(
        "[mute]\nmute_other_area_sounds = true\nmute_prayer_sounds = true\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def tracks_file(tmp_path: Path) -> Path:
    path = tmp_path / "tracks.json"
    path.write_text(
        json.dumps(
            [
                {"label": "Harmony", "color": TrackStatus.FOUND.color, "y": 15, "height": 15},
                {"label": "Newbie Melody", "color": TrackStatus.FOUND.color, "y": 0, "height": 15},
                {"label": "Harmony 2", "color": TrackStatus.NOT_FOUND.color, "y": 30, "height": 15},
            ]
        ),
        encoding="utf-8",
    )
    return path


def test_filter_prints_visible_tracks(
    tracks_file: Path, config_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = cli.main(
        ["--config", str(config_file), "filter", str(tracks_file), "-q", "harm", "-s", "found"]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "Harmony" in out
    assert "Newbie Melody" not in out
    assert "1/3 visible" in out
    assert "content height 21" in out


def test_filter_scales_scroll(
    tracks_file: Path, config_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = cli.main(
        ["--config", str(config_file), "filter", str(tracks_file), "--scroll", "40", "100"]
    )
    assert code == 0
    assert "scroll offset 20" in capsys.readouterr().out


def test_filter_reports_bad_file(tmp_path: Path, config_file: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text('{"label": "x"}', encoding="utf-8")
    assert cli.main(["--config", str(config_file), "filter", str(bad)]) == 1
    assert cli.main(["--config", str(config_file), "filter", str(tmp_path / "missing.json")]) == 1


@pytest.mark.parametrize(
    "track",
    [
        {"label": "x", "y": 0, "height": "tall"},
        {"label": "x", "color": "0xff0000", "y": 0, "height": 15},
        {"label": "x", "y": None, "height": 15},
    ],
)
def test_filter_reports_non_numeric_fields(
    tmp_path: Path,
    config_file: Path,
    track: dict,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(cli, "console", Console(width=500))
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps([track]), encoding="utf-8")
    assert cli.main(["--config", str(config_file), "filter", str(bad)]) == 1
    assert "must be an integer" in capsys.readouterr().out


def test_classify_area(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(
        ["--config", str(config_file), "classify", "area", "--source", "none", str(TELEPORT_VWOOP)]
    )
    assert code == 0
    assert "SUPPRESS" in capsys.readouterr().out


def test_classify_area_allowed(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--config", str(config_file), "classify", "area", "--source", "npc", "5"])
    assert code == 0
    assert "ALLOW" in capsys.readouterr().out


def test_classify_global(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(
        ["--config", str(config_file), "classify", "global", str(PRAYER_ACTIVATE_PIETY)]
    )
    assert code == 0
    assert "SUPPRESS" in capsys.readouterr().out


def test_config_lists_flags(config_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["--config", str(config_file), "config"]) == 0
    out = capsys.readouterr().out
    assert "mute_prayer_sounds" in out


def test_config_titles_table_with_given_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(cli, "console", Console(width=500))
    path = tmp_path / "custom-settings.toml"
    path.write_text("[mute]\nmute_npc_area_sounds = true\n", encoding="utf-8")
    assert cli.main(["--config", str(path), "config"]) == 0
    assert str(path) in capsys.readouterr().out


def test_config_with_unknown_log_level_uses_defaults(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    path = tmp_path / "config.toml"
    path.write_text('[logging]\nlevel = "LOUD"\n', encoding="utf-8")
    assert cli.main(["--config", str(path), "config"]) == 0
    assert "INFO" in capsys.readouterr().out


def test_unknown_env_log_level_does_not_crash(
    config_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("MUSIC_TAB_LOG_LEVEL", "loud")
    assert cli.main(["--config", str(config_file), "classify", "global", "5"]) == 0
