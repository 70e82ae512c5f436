"""CLI entrypoint for frontbrain scans."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .summary import render_summary


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frontbrain",
        description="Inventory frontend components and snapshot the source tree.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the frontend project root (defaults to current directory).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the summary without writing the memory and structure artifacts.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a single frontbrain run."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()
    try:
        if args.dry_run:
            outcome = orchestrator.build(args.path)
        else:
            outcome = orchestrator.run(args.path)
    except (ConfigError, ValueError) as exc:
        parser.exit(1, f"frontbrain: invalid configuration: {exc}\n")
    except OSError as exc:
        parser.exit(1, f"frontbrain scan failed: {exc}\nRun with --verbose for more details.\n")

    print(
        render_summary(
            outcome.memory,
            outcome.structure,
            memory_path=_relativize(outcome.memory_path) if outcome.memory_path else None,
            structure_path=_relativize(outcome.structure_path) if outcome.structure_path else None,
        )
    )


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
