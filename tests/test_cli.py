"""
Tests for the Click CLI.
"""
import json
import sqlite3
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from cursor_recent.cli import cli


@pytest.fixture
def state_db(tmp_path):
    """State database with three recent folders and one file."""
    db_path = tmp_path / "state.vscdb"
    conn = sqlite3.connect(str(db_path))
    conn.execute("CREATE TABLE ItemTable (key TEXT, value BLOB)")
    conn.execute(
        "INSERT INTO ItemTable (key, value) VALUES (?, ?)",
        (
            "history.recentlyOpenedPathsList",
            json.dumps(
                {
                    "entries": [
                        {"folderUri": "file:///srv/api-server"},
                        {"fileUri": "file:///srv/readme.md"},
                        {"folderUri": "file:///srv/web%20site"},
                        {"folderUri": "file:///srv/server-tools"},
                    ]
                }
            ),
        ),
    )
    conn.commit()
    conn.close()
    return db_path


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_popen():
    with patch("cursor_recent.services.launcher.subprocess.Popen") as popen:
        process = MagicMock()
        process.pid = 1
        process.returncode = 0
        process.communicate.return_value = ("", "")
        popen.return_value = process
        yield popen


def test_list(runner, state_db):
    result = runner.invoke(cli, ["list", "--db-path", str(state_db)])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 3
    assert "api-server" in lines[0]
    assert "web site" in lines[1]
    assert "server-tools" in lines[2]


def test_list_json(runner, state_db):
    result = runner.invoke(cli, ["list", "--db-path", str(state_db), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [item["title"] for item in data] == ["api-server", "web site", "server-tools"]


def test_list_missing_database(runner, tmp_path):
    result = runner.invoke(cli, ["list", "--db-path", str(tmp_path / "missing.vscdb")])

    assert result.exit_code == 0
    assert "No recent folders found" in result.output


def test_search(runner, state_db):
    result = runner.invoke(cli, ["search", "server", "--db-path", str(state_db)])

    assert result.exit_code == 0
    assert "Found 2 folders" in result.output
    assert "web site" not in result.output


def test_search_no_match_aborts(runner, state_db):
    result = runner.invoke(cli, ["search", "Server", "--db-path", str(state_db)])

    assert result.exit_code != 0
    assert "No recent folders matching 'Server'" in result.output


def test_open_by_index(runner, state_db, mock_popen):
    result = runner.invoke(cli, ["open", "3", "--db-path", str(state_db)])

    assert result.exit_code == 0
    mock_popen.assert_called_once()
    argv = mock_popen.call_args[0][0]
    assert argv[0] == "cursor"
    assert argv[1].endswith("server-tools")


def test_open_by_path_with_command(runner, mock_popen):
    result = runner.invoke(cli, ["open", "/tmp/project", "--command", "code"])

    assert result.exit_code == 0
    assert mock_popen.call_args[0][0] == ["code", "/tmp/project"]


def test_open_index_out_of_range(runner, state_db, mock_popen):
    result = runner.invoke(cli, ["open", "9", "--db-path", str(state_db)])

    assert result.exit_code != 0
    mock_popen.assert_not_called()


def test_export_csv(runner, state_db, tmp_path):
    output = tmp_path / "recent.csv"

    result = runner.invoke(
        cli, ["export", "--db-path", str(state_db), "--format", "csv", "-o", str(output)]
    )

    assert result.exit_code == 0
    assert "Exported 3 folders" in result.output
    assert output.read_text(encoding="utf-8").splitlines()[0] == "title,path"


def test_info(runner, state_db):
    result = runner.invoke(cli, ["info", "--db-path", str(state_db)])

    assert result.exit_code == 0
    assert str(state_db) in result.output
    assert "Found" in result.output
