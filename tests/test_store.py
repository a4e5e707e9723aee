import logging
import os
import stat

import pytest

from yorkle.errors import StatsStoreError
from yorkle.stats import PlayerStats
from yorkle.store import load_stats, save_stats


def test_missing_file_gives_empty_stats(tmp_path):
    stats = load_stats(str(tmp_path / "stats.txt"))
    assert stats == PlayerStats.empty()


def test_save_format(tmp_path):
    path = tmp_path / "stats.txt"
    save_stats(str(path), PlayerStats(wins=(0, 3, 17, 21, 6, 8), losses=2))
    assert path.read_text() == "0 3 17 21 6 8 2\n"


def test_save_then_load(tmp_path):
    path = tmp_path / "stats.txt"
    stats = PlayerStats(wins=(1, 0, 4, 2, 0, 9), losses=3)
    save_stats(str(path), stats)
    assert load_stats(str(path)) == stats


def test_save_overwrites_and_leaves_no_temp_files(tmp_path):
    path = tmp_path / "stats.txt"
    path.write_text("9 9 9 9 9 9 9\n")
    save_stats(str(path), PlayerStats.empty())
    assert path.read_text() == "0 0 0 0 0 0 0\n"
    assert [p.name for p in tmp_path.iterdir()] == ["stats.txt"]


@pytest.mark.parametrize(
    "content",
    [
        "",
        "1 2 3\n",
        "1 2 3 4 5 6 7 8\n",
        "1 2 x 4 5 6 7\n",
        "1 2 3 4 5 6 -1\n",
        "1 2 3 4 5 6 7\n1 2 3 4 5 6 7\n",
        "1\n2\n3\n4\n5\n6\n7\n",
    ],
)
def test_malformed_file_resets_with_warning(tmp_path, caplog, content):
    path = tmp_path / "stats.txt"
    path.write_text(content)
    with caplog.at_level(logging.WARNING, logger="yorkle.store"):
        stats = load_stats(str(path))
    assert stats == PlayerStats.empty()
    assert "resetting stats to zero" in caplog.text


def test_unwritable_location_raises(tmp_path):
    path = tmp_path / "no_such_dir" / "stats.txt"
    with pytest.raises(StatsStoreError):
        save_stats(str(path), PlayerStats.empty())


def test_save_keeps_existing_permissions(tmp_path):
    path = tmp_path / "stats.txt"
    path.write_text("0 0 0 0 0 0 0\n")
    os.chmod(path, 0o644)
    save_stats(str(path), PlayerStats(wins=(1, 0, 0, 0, 0, 0), losses=0))
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


def test_new_file_gets_umask_default_permissions(tmp_path):
    path = tmp_path / "stats.txt"
    umask = os.umask(0o022)
    try:
        save_stats(str(path), PlayerStats.empty())
    finally:
        os.umask(umask)
    assert stat.S_IMODE(path.stat().st_mode) == 0o644
