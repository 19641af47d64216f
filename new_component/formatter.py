"""Source formatting for generated files.

Formatting is delegated to the ``prettier`` CLI, run as an async subprocess.
A formatter is built once per invocation by ``build_formatter`` and handed to
the pipeline, which calls ``await formatter.format(text, path)`` for every
JavaScript/TypeScript file it writes.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any, Protocol

from new_component.config import ComponentConfig
from new_component.utils import run_command, write_file

DEFAULT_PRETTIER_COMMAND: tuple[str, ...] = ("npx", "--no-install", "prettier")
PRETTIER_CONFIG_NAME = ".prettierrc.json"


class FormatError(Exception):
    """Raised when the formatter cannot format a file."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Could not format {path}: {message}")


class Formatter(Protocol):
    async def format(self, text: str, path: Path) -> str: ...


class PassthroughFormatter:
    """Returns text unchanged.  Used when formatting is switched off."""

    async def format(self, text: str, path: Path) -> str:
        return text


class PrettierFormatter:
    """Formats source through ``prettier --stdin-filepath``.

    The target path is passed only so prettier can infer the parser from the
    file extension (``.js`` → babel, ``.ts``/``.tsx`` → typescript); nothing
    is read from or written to it.

    The options object is written as JSON to a temporary ``--config`` file,
    so lists and nested ``overrides`` reach prettier unchanged and project rc
    files are not consulted.  ``plugins`` are passed as ``--plugin`` flags so
    they resolve from the working directory.
    """

    def __init__(
        self,
        options: dict[str, Any] | None = None,
        command: tuple[str, ...] = DEFAULT_PRETTIER_COMMAND,
        timeout: int = 60,
    ) -> None:
        self.options = dict(options or {})
        self.command = tuple(command)
        self.timeout = timeout

    @property
    def plugins(self) -> list[str]:
        return [str(plugin) for plugin in self.options.get("plugins") or []]

    def config_document(self) -> str:
        """Return the JSON written to the ``--config`` file."""
        options = {key: value for key, value in self.options.items() if key != "plugins"}
        return json.dumps(options, indent=2)

    def build_args(self, path: Path, config_path: Path) -> list[str]:
        """Return the full prettier command line for formatting *path*."""
        args = [*self.command, "--config", str(config_path)]
        for plugin in self.plugins:
            args.extend(["--plugin", plugin])
        args.extend(["--stdin-filepath", str(path)])
        return args

    async def format(self, text: str, path: Path) -> str:
        """Format *text* as if it were the contents of *path*.

        Raises:
            FormatError: If prettier is missing, times out or exits non-zero.
        """
        with tempfile.TemporaryDirectory(prefix="new-component-") as tmp:
            config_path = await write_file(
                Path(tmp) / PRETTIER_CONFIG_NAME, self.config_document()
            )
            try:
                returncode, stdout, stderr = await run_command(
                    self.build_args(path, config_path), timeout=self.timeout, stdin=text
                )
            except FileNotFoundError as exc:
                raise FormatError(path, f"{self.command[0]} not found") from exc

        if returncode != 0:
            raise FormatError(path, stderr or f"prettier exited with {returncode}")
        return stdout


def build_formatter(config: ComponentConfig) -> Formatter:
    """Create the formatter used for the whole run."""
    if not config.format:
        return PassthroughFormatter()
    return PrettierFormatter(config.prettier_config)
