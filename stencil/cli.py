"""Command-line entry point.

Usage::

    stencil my-app
    python -m stencil.cli my-app
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from stencil.config import Config
from stencil.errors import ScaffoldError, UsageError
from stencil.scaffolder import ProjectGenerator
from stencil.utils import format_duration, print_error, print_success, print_summary_table


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the single project-name argument."""
    parser = argparse.ArgumentParser(
        prog="stencil",
        description="Create a new project from the bundled template and install its dependencies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment:\n"
            "  STENCIL_TEMPLATE_DIR     template directory to copy\n"
            "  STENCIL_INSTALL_COMMAND  install command (default: npm install)\n"
        ),
    )
    # Optional by arity so a missing name exits 1 instead of argparse's 2.
    parser.add_argument(
        "project_name",
        nargs="?",
        help="Name of the project folder to create in the current directory",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``stencil``."""
    args = build_parser().parse_args(argv)

    try:
        if not args.project_name:
            raise UsageError("Please provide a project name.")
        config = Config.from_env()
        generator = ProjectGenerator(config)
        result = asyncio.run(generator.generate(args.project_name, Path.cwd()))
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_success("Project created successfully!")
    print_summary_table(
        {
            "Project": str(result.project_root),
            "Files copied": str(len(result.files)),
            "Install command": result.install_command,
            "Duration": format_duration(result.duration),
        },
        title="Stencil",
    )


if __name__ == "__main__":
    main()
