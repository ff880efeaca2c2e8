from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (global options plus one subcommand per
engine operation) and translates the parsed namespace into configuration
overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treeutil CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treeutil",
        description="Copy, move, measure and delete files and directory trees.",
    )

    # --- Failure Policy ---
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unreadable directories and undeletable nodes instead of skipping them.",
    )
    p.add_argument(
        "--no-rollback",
        action="store_true",
        help="Keep a partially copied destination when a move fails.",
    )
    p.add_argument(
        "--chunk-size",
        dest="chunk_size",
        default=None,
        help="Copy window as a size literal, e.g. 512K or 4MB (default: 2MB).",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="Read settings from this JSON file instead of the user config.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any saved configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the operation result as JSON.",
    )

    # --- Operations ---
    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    name_p = sub.add_parser("name", help="Show base name, extension and stem of a path.")
    name_p.add_argument("path")

    mkdir_p = sub.add_parser("mkdir", help="Create a directory and missing ancestors.")
    mkdir_p.add_argument("path")

    touch_p = sub.add_parser("touch", help="Create an empty file and missing parents.")
    touch_p.add_argument("path")

    copy_p = sub.add_parser("copy", help="Copy a file or directory tree.")
    copy_p.add_argument("src")
    copy_p.add_argument("dst")

    move_p = sub.add_parser("move", help="Move a file or directory tree (copy, then delete).")
    move_p.add_argument("src")
    move_p.add_argument("dst")

    size_p = sub.add_parser("size", help="Total size of a file or directory tree.")
    size_p.add_argument("path")

    parse_p = sub.add_parser("parse-size", help="Convert a size literal such as 1.5KB to bytes.")
    parse_p.add_argument("literal")

    delete_p = sub.add_parser("delete", help="Delete a file or directory tree.")
    delete_p.add_argument("path")
    delete_p.add_argument(
        "--keep-root",
        action="store_true",
        help="Empty the directory but keep the directory itself.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only options the user actually set are returned, so saved settings are
    not clobbered by argparse defaults.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.strict:
        overrides["strict"] = True
    if args.no_rollback:
        overrides["rollback_move"] = False
    if args.chunk_size is not None:
        overrides["chunk_size"] = args.chunk_size
    if args.log_file is not None:
        overrides["log_file"] = args.log_file
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
