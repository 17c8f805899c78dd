from __future__ import annotations

"""
Integration tests for the CLI application controller.

Runs main() end to end against real zip files; logging setup and the
network client are patched out.
"""

import json
from unittest.mock import patch

import pytest

from archivetree.domain.errors import ArchiveFetchError
from archivetree.interface.cli.app import main


@pytest.fixture(autouse=True)
def no_logging_setup():
    with patch("archivetree.interface.cli.app.configure_logging"):
        yield


def test_text_output_shows_initial_expansion(profile_zip_path, capsys):
    code = main([profile_zip_path, "--use-defaults"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[1:] == [
        "├── profile_tresize/",
        "│   ├── tresize/",
        "│   │   ├── cycle_0.profile",
        "│   │   └── cycle_1.profile",
        "│   └── README.txt",
        "└── summary.json",
    ]


def test_json_output(profile_zip_path, capsys):
    code = main([profile_zip_path, "--use-defaults", "--json", "--origin", "https://v.example"])

    report = json.loads(capsys.readouterr().out)
    assert code == 0
    assert report["roots"] == [0, 5]
    assert report["expanded"] == [0, 5, 1]
    assert report["max_depth"] == 2

    nodes = report["nodes"]
    assert nodes[1] == {
        "index": 1,
        "path": "profile_tresize/tresize",
        "name": "tresize",
        "depth": 1,
        "parent": 0,
        "is_file": False,
        "url": None,
    }
    assert nodes[5]["parent"] == -1
    assert nodes[5]["url"].startswith("https://v.example/from-url/")
    assert nodes[5]["url"].endswith("/calltree/?file=summary.json")


def test_zero_budget_keeps_roots_only(profile_zip_path, capsys):
    main([profile_zip_path, "--use-defaults", "--json", "--max-expanded", "0"])

    assert json.loads(capsys.readouterr().out)["expanded"] == [0, 5]


def test_missing_archive_exits_with_2(tmp_path, capsys):
    code = main([str(tmp_path / "nope.zip"), "--use-defaults"])

    assert code == 2
    assert "ERROR" in capsys.readouterr().err


def test_remote_source_is_fetched(profile_zip_bytes, capsys):
    with patch(
        "archivetree.interface.cli.app.fetch_archive_bytes",
        return_value=profile_zip_bytes,
    ) as mock_fetch:
        code = main(["https://storage.example/p.zip", "--use-defaults", "--json"])

    assert code == 0
    mock_fetch.assert_called_once_with("https://storage.example/p.zip")
    assert json.loads(capsys.readouterr().out)["archive"] == "https://storage.example/p.zip"


def test_fetch_failure_exits_with_2(capsys):
    with patch(
        "archivetree.interface.cli.app.fetch_archive_bytes",
        side_effect=ArchiveFetchError("boom"),
    ):
        code = main(["https://storage.example/p.zip", "--use-defaults"])

    assert code == 2
    assert "boom" in capsys.readouterr().err


def test_expand_all_shows_every_directory(profile_zip_path, capsys):
    code = main([profile_zip_path, "--use-defaults", "--json", "--expand-all"])

    report = json.loads(capsys.readouterr().out)
    assert code == 0
    assert report["expanded"] == [0, 1]
