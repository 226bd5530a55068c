from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates a one-shot CLI run: logging bootstrap, configuration merging
(defaults, JSON file, command-line overrides), the initial population pass
over the project, replay of the changed files and result rendering.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from importtracker.core.extraction.parser import DependencyParser
from importtracker.core.scanner import yield_project_files
from importtracker.core.tracker.tracker import DependencyTracker
from importtracker.domain.config import get_default_config, load_config_file
from importtracker.domain.errors import ConfigurationError, ImportTrackerError
from importtracker.infra.fs import format_for_display, read_file_bytes, read_file_if_exists, resolve_path
from importtracker.infra.logging import LoggingConfig, configure_logging, get_logger
from importtracker.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 bad input, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Configuration file (before logging, it may carry the level)
    file_conf: Dict[str, Any] = {"parsers": {}, "logging": {}}
    config_error: Optional[str] = None
    if args.config_file:
        try:
            file_conf = load_config_file(args.config_file)
        except ConfigurationError as e:
            config_error = str(e)

    conf = get_default_config()
    if file_conf["logging"].get("level"):
        conf["log_level"] = str(file_conf["logging"]["level"])
    conf["parsers"] = file_conf["parsers"]
    conf = _merge_config(conf, cli_args.args_to_overrides(args))

    # 2. Logging bootstrap (console on stderr)
    configure_logging(LoggingConfig(level=conf["log_level"], console=True, log_file=args.log_file))

    if config_error:
        return _fail(config_error, 2)

    # 3. Pre-flight input verification
    root = resolve_path(conf["root_path"], os.getcwd())
    if not os.path.isdir(root):
        return _fail(f"Input directory does not exist: {root}", 2)

    try:
        tracker = DependencyTracker(DependencyParser(conf["parsers"]))
    except ConfigurationError as e:
        return _fail(f"Invalid parser configuration: {e}", 2)

    display_base = root if conf["relative_output"] else None

    # 4. Population pass and replay of changed files
    try:
        count = populate_tracker(tracker, root, conf["exclude_patterns"])
        logger.info(f"Tracked {count} file(s) under {root}")

        results: Dict[str, Optional[List[str]]] = {}
        for changed in args.changed:
            path = resolve_path(changed, root)
            dependents = tracker.update(path, read_file_if_exists(path))
            results[path] = None if dependents is None else [d.path for d in dependents]
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except ConfigurationError as e:
        return _fail(str(e), 2)
    except (OSError, ImportTrackerError) as e:
        logger.critical(f"Dependency tracking failed: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 5. Output rendering
    if args.json_output:
        payload = {
            format_for_display(k, display_base): (
                None if v is None else [format_for_display(p, display_base) for p in v]
            )
            for k, v in results.items()
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_human_summary(results, display_base)

    for target in args.show_dependents:
        print(tracker.format_dependents(resolve_path(target, root), True, display_base))

    if args.show_map:
        print(tracker.format_dependency_map(display_base))

    return 0


def populate_tracker(
        tracker: DependencyTracker,
        root: str,
        exclude_patterns: Optional[List[str]] = None,
) -> int:
    """
    Feed every tracked file under root through the tracker once.

    Args:
        tracker: Fresh session tracker.
        root: Project root directory.
        exclude_patterns: Name regexes to skip.

    Returns:
        int: Number of files processed.
    """
    count = 0
    extensions = list(tracker.parser.config)
    for file_path in yield_project_files(root, extensions, exclude_patterns):
        tracker.update(file_path, read_file_bytes(file_path))
        count += 1
    return count

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of known, non-None override values into the base.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in ("root_path", "exclude_patterns", "relative_output", "log_level"):
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------


def _print_human_summary(
        results: Dict[str, Optional[List[str]]],
        base_path: Optional[str],
) -> None:
    for changed, dependents in results.items():
        label = format_for_display(changed, base_path)
        if dependents is None:
            print(f"{label}: not tracked before, nothing to rebuild")
            continue

        print(f"{label}: {len(dependents)} dependent(s)")
        for dependent in dependents:
            print(f"  - {format_for_display(dependent, base_path)}")


def _fail(msg: str, code: int) -> int:
    logger.error(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return code

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
