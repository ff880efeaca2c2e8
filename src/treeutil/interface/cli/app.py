from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, configuration resolution
(defaults, saved settings and CLI overrides), logging bootstrap, dispatch
of the selected tree operation and rendering of the result.
"""

import json
import logging
import sys
from dataclasses import asdict
from typing import Any, Callable, Dict, List, Optional, Tuple

from treeutil.core.copier import copy_tree
from treeutil.core.deleter import delete
from treeutil.core.materialize import ensure_directory, ensure_file
from treeutil.core.mover import move
from treeutil.core.nodes import classify
from treeutil.core.paths import (
    base_name,
    extension,
    extension_index,
    last_separator_index,
    stem,
)
from treeutil.core.sizing import directory_size, format_size, parse_size_literal
from treeutil.core.validator import validate_config
from treeutil.domain.config import get_default_config, load_config
from treeutil.domain.errors import (
    InvalidArgumentError,
    MalformedInputError,
    TreeUtilError,
)
from treeutil.domain.models import NodeKind
from treeutil.domain.operation_models import (
    OperationResult,
    create_error_result,
    create_success_result,
)
from treeutil.infra.fs import normalize_path
from treeutil.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from treeutil.interface.cli import args as cli_args

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

CommandHandler = Callable[[Any, Dict[str, Any]], Tuple[OperationResult, int]]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 operation failure, 2 usage
             error or missing input, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Resolve configuration (defaults vs saved state) and merge overrides
    if args.use_defaults:
        base_conf = get_default_config()
    else:
        base_conf = load_config(normalize_path(args.config_path))
    raw_conf = dict(base_conf)
    raw_conf.update(cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(
        LoggingConfig(level=conf["log_level"], console=True, log_file=conf["log_file"] or None),
        force=True,
    )

    try:
        for w in warnings:
            logger.warning(f"Configuration: {w}")

        if args.dump_config:
            print(json.dumps(conf, ensure_ascii=False, indent=2))
            return EXIT_OK

        if not args.command:
            parser.print_usage(sys.stderr)
            print("ERROR: a command is required", file=sys.stderr)
            return EXIT_USAGE

        result, code = _dispatch(args, conf)

        if args.json_output:
            print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
        else:
            _print_human_summary(result)
        return code
    finally:
        shutdown_logging()

# -----------------------------------------------------------------------------
# COMMAND DISPATCH
# -----------------------------------------------------------------------------

def _dispatch(args: Any, conf: Dict[str, Any]) -> Tuple[OperationResult, int]:
    """
    Run the selected command and translate engine errors into exit codes.

    Returns:
        Tuple[OperationResult, int]: The result and the process exit code.
    """
    handler = _COMMANDS[args.command]
    target = str(getattr(args, "path", None) or getattr(args, "src", None)
                 or getattr(args, "literal", ""))
    logger.debug(f"Dispatching '{args.command}' on '{target}' with config {conf}")

    try:
        return handler(args, conf)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return create_error_result(args.command, target, "interrupted"), EXIT_INTERRUPTED
    except (InvalidArgumentError, MalformedInputError) as e:
        logger.error(str(e))
        return create_error_result(args.command, target, str(e)), EXIT_USAGE
    except TreeUtilError as e:
        logger.error(str(e), exc_info=logger.isEnabledFor(logging.DEBUG))
        return create_error_result(args.command, target, str(e)), EXIT_FAILURE


def _cmd_name(args: Any, conf: Dict[str, Any]) -> Tuple[OperationResult, int]:
    path = args.path
    payload = {
        "base_name": base_name(path),
        "extension": extension(path),
        "stem": stem(path),
        "last_separator_index": last_separator_index(path),
        "extension_index": extension_index(path),
    }
    return create_success_result("name", path, payload), EXIT_OK


def _cmd_mkdir(args: Any, conf: Dict[str, Any]) -> Tuple[OperationResult, int]:
    path = normalize_path(args.path)
    if not ensure_directory(path):
        return create_error_result("mkdir", args.path, "a file is in the way"), EXIT_FAILURE
    return create_success_result("mkdir", path), EXIT_OK


def _cmd_touch(args: Any, conf: Dict[str, Any]) -> Tuple[OperationResult, int]:
    path = ensure_file(normalize_path(args.path))
    kind = classify(path)
    return create_success_result("touch", path, {"kind": kind.value}), EXIT_OK


def _cmd_copy(args: Any, conf: Dict[str, Any]) -> Tuple[OperationResult, int]:
    src, dst = normalize_path(args.src), normalize_path(args.dst)
    copied = copy_tree(src, dst, strict=conf["strict"], chunk_size=conf["chunk_size"])
    if copied < 0:
        return _missing("copy", args.src)
    payload = {"destination": dst, "bytes": copied, "human": format_size(copied)}
    return create_success_result("copy", src, payload), EXIT_OK


def _cmd_move(args: Any, conf: Dict[str, Any]) -> Tuple[OperationResult, int]:
    src, dst = normalize_path(args.src), normalize_path(args.dst)
    moved = move(
        src,
        dst,
        strict=conf["strict"],
        rollback=conf["rollback_move"],
        chunk_size=conf["chunk_size"],
    )
    if moved < 0:
        return _missing("move", args.src)
    payload = {"destination": dst, "bytes": moved, "human": format_size(moved)}
    return create_success_result("move", src, payload), EXIT_OK


def _cmd_size(args: Any, conf: Dict[str, Any]) -> Tuple[OperationResult, int]:
    path = normalize_path(args.path)
    size = directory_size(path, strict=conf["strict"])
    if size < 0:
        return _missing("size", args.path)
    payload = {"bytes": size, "human": format_size(size)}
    return create_success_result("size", path, payload), EXIT_OK


def _cmd_parse_size(args: Any, conf: Dict[str, Any]) -> Tuple[OperationResult, int]:
    size = parse_size_literal(args.literal)
    return create_success_result("parse-size", args.literal, {"bytes": size}), EXIT_OK


def _cmd_delete(args: Any, conf: Dict[str, Any]) -> Tuple[OperationResult, int]:
    path = normalize_path(args.path)
    existed = classify(path) is not NodeKind.ABSENT
    report = delete(path, delete_self=not args.keep_root, strict=conf["strict"])
    payload = {
        "existed": existed,
        "files_removed": report.files_removed,
        "dirs_removed": report.dirs_removed,
        "failures": [asdict(f) for f in report.failures],
    }
    if not report.ok:
        error = f"{len(report.failures)} node(s) could not be deleted"
        return create_error_result("delete", path, error, payload), EXIT_FAILURE
    return create_success_result("delete", path, payload), EXIT_OK


def _missing(command: str, path: str) -> Tuple[OperationResult, int]:
    """Result for a source path that does not exist."""
    msg = f"Path does not exist: {path}"
    logger.error(msg)
    return create_error_result(command, path, msg), EXIT_USAGE


_COMMANDS: Dict[str, CommandHandler] = {
    "name": _cmd_name,
    "mkdir": _cmd_mkdir,
    "touch": _cmd_touch,
    "copy": _cmd_copy,
    "move": _cmd_move,
    "size": _cmd_size,
    "parse-size": _cmd_parse_size,
    "delete": _cmd_delete,
}

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: OperationResult) -> None:
    """
    Print an operation result for a terminal user.

    Failures go to stderr; successes print one line per payload value.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        for failure in result.payload.get("failures", []):
            print(f"  - {failure['path']}: {failure['error']}", file=sys.stderr)
        return

    payload = result.payload
    if result.command == "name":
        for key in ("base_name", "extension", "stem"):
            print(f"{key}: {payload[key]}")
    elif result.command in ("copy", "move"):
        print(f"{result.command}: {result.target} -> {payload['destination']} "
              f"({payload['bytes']} bytes, {payload['human']})")
    elif result.command == "size":
        print(f"{payload['bytes']}\t{payload['human']}\t{result.target}")
    elif result.command == "parse-size":
        print(payload["bytes"])
    elif result.command == "delete":
        if not payload["existed"]:
            print(f"Nothing to delete: {result.target}")
        else:
            print(f"Deleted {payload['files_removed']} file(s) and "
                  f"{payload['dirs_removed']} director(ies) under {result.target}")
    else:
        print(f"{result.command}: {result.target}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
