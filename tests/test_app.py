from pathlib import Path

import pytest

from mclipboard.app import (
    DEFAULT_POLL_INTERVAL,
    build_parser,
    default_database_path,
    main,
)
from mclipboard.store import DEFAULT_HISTORY_LIMIT


def test_default_database_path_names_the_database_file():
    path = default_database_path()
    assert path.name == "MClipboard.db"
    assert path.is_absolute()


def test_default_database_path_lives_under_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    path = default_database_path()
    assert tmp_path.resolve() in path.parents


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.poll_interval == DEFAULT_POLL_INTERVAL
    assert args.limit == DEFAULT_HISTORY_LIMIT == 200
    assert args.database == default_database_path()


def test_parser_explicit_values(tmp_path):
    target = tmp_path / "clips.db"
    args = build_parser().parse_args(
        ["--database", str(target), "--poll-interval", "250", "--limit", "5"]
    )
    assert args.database == Path(str(target))
    assert args.poll_interval == 250
    assert args.limit == 5


@pytest.mark.parametrize("value", ["0", "-10", "abc"])
def test_parser_rejects_bad_poll_interval(value):
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--poll-interval", value])
    assert excinfo.value.code == 2


def test_parser_rejects_non_integer_limit():
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--limit", "many"])
    assert excinfo.value.code == 2


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "--database" in out
    assert "--poll-interval" in out


def test_main_rejects_bad_arguments_before_creating_database(tmp_path):
    target = tmp_path / "sub" / "clips.db"
    with pytest.raises(SystemExit) as excinfo:
        main(["--database", str(target), "--poll-interval", "0"])
    assert excinfo.value.code == 2
    assert not target.parent.exists()