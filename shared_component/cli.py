"""Command-line entry point.

Usage::

    create-shared-component Button
    create-shared-component --typescript -f -p forms/Input forms/Select
    python -m shared_component --notest --scss Header
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import time

from pydantic import ValidationError

from shared_component import __version__
from shared_component.config import GenerationOptions, Settings
from shared_component.errors import ScaffoldError
from shared_component.scaffolder import ComponentGenerator
from shared_component.utils import (
    check_latest_version,
    console,
    create_progress,
    format_duration,
    print_error,
    print_file_tree,
    print_info,
    print_success,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-shared-component",
        description="Creates React components shared between web and React Native",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-shared-component Button\n"
            "  create-shared-component -f -p components/Button components/Card\n"
            "  create-shared-component --typescript --createindex Header Footer\n"
        ),
    )
    parser.add_argument("names", nargs="*", metavar="NAME", help="Component name, optionally prefixed by a path")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--typescript", action="store_true", help="Creates Typescript component and files")
    parser.add_argument("--nocss", action="store_true", help="No style file")
    parser.add_argument("--notest", action="store_true", help="No test file")
    parser.add_argument("--reactnative", action="store_true", help="Creates React Native components only")
    parser.add_argument(
        "--createindex", action="store_true", help="Creates index file for multiple component imports"
    )
    parser.add_argument(
        "-f", "--functional", action="store_true", help="Creates React stateless functional component"
    )
    parser.add_argument("-j", "--jsx", action="store_true", help="Creates the component file with .jsx extension")
    parser.add_argument("-l", "--less", action="store_true", help="Adds .less file to component")
    parser.add_argument("-s", "--scss", action="store_true", help="Adds .scss file to component")
    parser.add_argument("-p", "--proptypes", action="store_true", help="Adds prop-types to component")
    parser.add_argument("-u", "--uppercase", action="store_true", help="Component files start on uppercase letter")
    parser.add_argument(
        "--no-version-check", action="store_true", help="Skip checking the package index for a newer release"
    )
    return parser


async def run(names: list[str], options: GenerationOptions, settings: Settings) -> int:
    """Scaffold *names* and report the outcome.  Returns the exit code."""
    started = time.monotonic()
    version_check = None
    if settings.check_version:
        version_check = asyncio.create_task(
            check_latest_version(__version__, settings.version_url, settings.version_timeout)
        )

    generator = ComponentGenerator(options, settings.cwd)
    try:
        requests = await generator.prepare(names)
        with create_progress() as progress:
            progress.add_task("Creating components files...", total=None)
            result = await generator.materialize(requests)
    except ScaffoldError as exc:
        print_error(str(exc))
        await _report_version(version_check)
        return 1

    print_info(f"Created new React components at: {', '.join(names)}")
    print_file_tree(settings.cwd, result.files)
    for path in result.skipped_indexes:
        print_warning(f"Index already exists, left untouched: {path}")
    console.print(f"✨  Finished in {format_duration(time.monotonic() - started)}")
    print_success("Success!")
    await _report_version(version_check)
    return 0


async def _report_version(version_check: asyncio.Task | None) -> None:
    if version_check is None:
        return
    latest = await version_check
    if latest:
        print_warning(
            f"A newer version is available: {__version__} -> {latest}. "
            "Run `pip install -U create-shared-component` to update."
        )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-shared-component``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        fields = ", ".join(str(error["loc"][0]) for error in exc.errors())
        print_error(f"Invalid settings in the environment: {fields}")
        sys.exit(1)
    if args.no_version_check:
        settings = settings.model_copy(update={"check_version": False})

    options = GenerationOptions.from_flags(args)
    sys.exit(asyncio.run(run(args.names, options, settings)))


if __name__ == "__main__":
    main()
