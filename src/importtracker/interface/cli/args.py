from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the importtracker CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="importtracker",
        description=(
            "Scan a stylesheet project, build its import graph and list the "
            "files that must be rebuilt when some files change."
        ),
    )

    # --- Inputs ---
    p.add_argument(
        "-i", "--input",
        dest="root_path",
        default=None,
        help="Project root to scan (default: current directory).",
    )
    p.add_argument(
        "-c", "--config",
        dest="config_file",
        default=None,
        help="JSON file with parser overrides and logging settings.",
    )
    p.add_argument(
        "--changed",
        dest="changed",
        action="append",
        default=[],
        metavar="PATH",
        help="File that changed; may be repeated. Relative paths start at the root.",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes of directory or file names to skip.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--show-map",
        action="store_true",
        help="Print the dependency map after processing.",
    )
    p.add_argument(
        "--show-dependents",
        dest="show_dependents",
        action="append",
        default=[],
        metavar="PATH",
        help="Print the recursive dependents tree of a file; may be repeated.",
    )
    p.add_argument(
        "--absolute",
        action="store_true",
        help="Print absolute paths instead of paths relative to the root.",
    )

    # --- Output / Runtime ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the dependents of changed files as JSON.",
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

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_path"] = args.root_path

    if args.exclude_patterns is not None:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.absolute:
        overrides["relative_output"] = False
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------


def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Convert a comma-separated string into a list of trimmed, non-empty items."""
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
