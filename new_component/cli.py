"""CLI entry point for ``new-component``.

Usage::

    new-component Button
    new-component Card --lang ts --scss-module false
    python -m new_component Button -d src/ui
"""

from __future__ import annotations

import argparse
import asyncio
import re
import sys
import traceback
from collections.abc import Callable

from rich.markup import escape

from new_component import __version__
from new_component.config import (
    BOOL_PATTERN,
    LANG_PATTERN,
    ComponentConfig,
    ConfigError,
    MissingArgumentError,
    load_config,
    resolve_options,
)
from new_component.formatter import build_formatter
from new_component.pipeline import ComponentAlreadyExistsError, scaffold_component
from new_component.utils import console, print_error, print_warning


def _matching(pattern: re.Pattern[str], label: str) -> Callable[[str], str]:
    """Build an argparse ``type`` that accepts values matching *pattern*."""

    def _check(value: str) -> str:
        if not pattern.match(value):
            raise argparse.ArgumentTypeError(f"invalid {label}: {value!r}")
        return value

    return _check


def build_parser(config: ComponentConfig) -> argparse.ArgumentParser:
    """Build the argument parser, showing *config* values as defaults."""
    parser = argparse.ArgumentParser(
        prog="new-component",
        description="Scaffold a React component: component file, index and SCSS module.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  new-component Button\n"
            "  new-component Card --lang ts --scss-module false\n"
        ),
    )
    parser.add_argument("component_name", nargs="?", help="Name of the component")
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-l", "--lang",
        type=_matching(LANG_PATTERN, "language"),
        default=None,
        help=f'Which language to use, js or ts (default: "{config.lang}")',
    )
    parser.add_argument(
        "-d", "--dir",
        dest="directory",
        default=None,
        help=f'Path to the "components" directory (default: "{config.dir}")',
    )
    parser.add_argument(
        "-s", "--scss-module",
        type=_matching(BOOL_PATTERN, "value, expected true or false"),
        default=None,
        help=f'Include SCSS module (default: "{config.scss_module}")',
    )
    parser.add_argument(
        "--no-format",
        action="store_true",
        help="Write files without running prettier",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    config_error: ConfigError | None = None
    try:
        config = load_config()
    except ConfigError as exc:
        # --help and --version still work; the parser shows built-in defaults.
        config_error = exc
        config = ComponentConfig()

    args = build_parser(config).parse_args(argv)
    if config_error is not None:
        print_error(str(config_error))
        return 1
    if args.no_format:
        config = config.model_copy(update={"format": False})

    try:
        options = resolve_options(
            args.component_name,
            config,
            lang=args.lang,
            directory=args.directory,
            scss_module=args.scss_module,
        )
    except MissingArgumentError as exc:
        print_error(str(exc))
        return 0
    except ConfigError as exc:
        print_error(str(exc))
        return 1

    if not config.format:
        print_warning("Formatting disabled: files are written exactly as rendered.")

    formatter = build_formatter(config)
    try:
        asyncio.run(scaffold_component(args.component_name, options, formatter))
    except ComponentAlreadyExistsError as exc:
        print_error(str(exc))
        return 0
    except Exception as exc:
        print_error(f"{type(exc).__name__}: {exc}")
        console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        return 1
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
