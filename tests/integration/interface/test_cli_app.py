from __future__ import annotations

"""
Integration tests for the CLI Application Controller.

Runs 'main()' in-process against temporary directories and checks the exit
codes, the human and JSON renderings and the filesystem side effects of
each subcommand.
"""

import json
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest

from treeutil.interface.cli.app import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_USAGE,
    main,
)


def run(args: List[str]) -> int:
    """Run the CLI with saved configuration ignored."""
    return main(["--use-defaults"] + args)

# -----------------------------------------------------------------------------
# PATH DECOMPOSITION AND SIZES
# -----------------------------------------------------------------------------

def test_name_command_prints_components(capsys) -> None:
    """TC-01: base name, extension and stem are printed one per line."""
    assert run(["name", "dir/sub/archive.tar.gz"]) == EXIT_OK

    out = capsys.readouterr().out.splitlines()
    assert out == ["base_name: archive.tar.gz", "extension: gz", "stem: dir/sub/archive.tar"]


def test_parse_size_command(capsys) -> None:
    """TC-02: A valid literal prints the byte count."""
    assert run(["parse-size", "1.5KB"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "1536"


def test_parse_size_malformed_is_usage_error(capsys) -> None:
    """TC-03: A malformed literal maps to exit code 2."""
    assert run(["parse-size", "1.5B"]) == EXIT_USAGE
    assert "ERROR:" in capsys.readouterr().err


def test_size_command(sample_tree: Path, capsys) -> None:
    """TC-04: Tree size is printed in bytes and human form."""
    assert run(["size", str(sample_tree)]) == EXIT_OK
    assert capsys.readouterr().out.strip() == f"60\t60B\t{sample_tree}"


def test_size_of_missing_path(tmp_path: Path, capsys) -> None:
    """TC-05: A missing path is reported and exits with 2."""
    assert run(["size", str(tmp_path / "ghost")]) == EXIT_USAGE
    assert "does not exist" in capsys.readouterr().err

# -----------------------------------------------------------------------------
# MUTATING COMMANDS
# -----------------------------------------------------------------------------

def test_mkdir_and_touch(tmp_path: Path) -> None:
    """TC-06: mkdir and touch materialize missing ancestors."""
    assert run(["mkdir", str(tmp_path / "a" / "b")]) == EXIT_OK
    assert (tmp_path / "a" / "b").is_dir()

    assert run(["touch", str(tmp_path / "c" / "d.txt")]) == EXIT_OK
    assert (tmp_path / "c" / "d.txt").is_file()


def test_mkdir_over_file_fails(tmp_path: Path, capsys) -> None:
    """TC-07: A file in the way is an operation failure."""
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")

    assert run(["mkdir", str(blocker)]) == EXIT_FAILURE
    assert "a file is in the way" in capsys.readouterr().err


def test_copy_then_move_then_delete(sample_tree: Path, tmp_path: Path, tree_snapshot) -> None:
    """TC-08: A full copy, move and delete cycle through the CLI."""
    expected = tree_snapshot(sample_tree)
    copy_dst = tmp_path / "copy"
    move_dst = tmp_path / "moved"

    assert run(["--chunk-size", "4B", "copy", str(sample_tree), str(copy_dst)]) == EXIT_OK
    assert tree_snapshot(copy_dst) == expected

    assert run(["move", str(copy_dst), str(move_dst)]) == EXIT_OK
    assert not copy_dst.exists()
    assert tree_snapshot(move_dst) == expected

    assert run(["delete", str(move_dst), "--keep-root"]) == EXIT_OK
    assert move_dst.is_dir()
    assert list(move_dst.iterdir()) == []

    assert run(["delete", str(move_dst)]) == EXIT_OK
    assert not move_dst.exists()


def test_copy_missing_source(tmp_path: Path) -> None:
    """TC-09: Copying a missing source exits with 2 and creates nothing."""
    assert run(["copy", str(tmp_path / "ghost"), str(tmp_path / "dst")]) == EXIT_USAGE
    assert not (tmp_path / "dst").exists()


def test_copy_into_itself_is_usage_error(sample_tree: Path) -> None:
    """TC-10: A destination inside the source is rejected."""
    assert run(["copy", str(sample_tree), str(sample_tree / "inner")]) == EXIT_USAGE
    assert not (sample_tree / "inner").exists()


def test_delete_missing_path_reports_nothing(tmp_path: Path, capsys) -> None:
    """TC-11: Deleting a missing path succeeds as a no-op."""
    assert run(["delete", str(tmp_path / "ghost")]) == EXIT_OK
    assert "Nothing to delete" in capsys.readouterr().out

# -----------------------------------------------------------------------------
# OUTPUT MODES AND CONTROL FLOW
# -----------------------------------------------------------------------------

def test_json_output(sample_tree: Path, capsys) -> None:
    """TC-12: --json prints the serialized OperationResult."""
    assert run(["--json", "size", str(sample_tree)]) == EXIT_OK

    data = json.loads(capsys.readouterr().out)
    assert data["ok"] is True
    assert data["command"] == "size"
    assert data["payload"] == {"bytes": 60, "human": "60B"}


def test_dump_config_applies_overrides(capsys) -> None:
    """TC-13: The effective configuration reflects the command-line flags."""
    assert run(["--strict", "--no-rollback", "--chunk-size", "1K", "--dump-config"]) == EXIT_OK

    conf = json.loads(capsys.readouterr().out)
    assert conf["strict"] is True
    assert conf["rollback_move"] is False
    assert conf["chunk_size"] == 1024


def test_config_file_is_read(tmp_path: Path, capsys) -> None:
    """TC-14: --config loads settings from the given JSON file."""
    cfg_file = tmp_path / "custom.json"
    cfg_file.write_text(json.dumps({"chunk_size": "512K", "strict": True}), encoding="utf-8")

    assert main(["--config", str(cfg_file), "--dump-config"]) == EXIT_OK

    conf = json.loads(capsys.readouterr().out)
    assert conf["chunk_size"] == 512 * 1024
    assert conf["strict"] is True


def test_missing_command_is_usage_error(capsys) -> None:
    """TC-15: Running without a subcommand prints usage and exits with 2."""
    assert run([]) == EXIT_USAGE
    assert "a command is required" in capsys.readouterr().err


def test_keyboard_interrupt_maps_to_130(sample_tree: Path) -> None:
    """TC-16: Ctrl+C during an operation exits with 130."""
    with patch("treeutil.interface.cli.app.directory_size", side_effect=KeyboardInterrupt):
        assert run(["size", str(sample_tree)]) == EXIT_INTERRUPTED


@pytest.mark.parametrize("flag", ["--strict", None])
def test_delete_failures_are_listed(sample_tree: Path, capsys, flag) -> None:
    """TC-17: Undeletable nodes make the command fail in both modes."""
    args = [flag] if flag else []
    with patch("treeutil.core.deleter.os.remove", side_effect=PermissionError(13, "Permission denied")):
        assert run(args + ["delete", str(sample_tree)]) == EXIT_FAILURE

    assert "Permission denied" in capsys.readouterr().err
    assert sample_tree.exists()
