"""new-component configuration.

Two layers of typed configuration, both Pydantic v2 models:

* ``ComponentConfig`` -- the *discovered* defaults.  Built-in values are
  overridden by ``~/.new-component-config.json`` and then by
  ``./.new-component-config.json``.  Keys use the camelCase spelling of the
  JSON files (``scssModule``, ``prettierConfig``).
* ``Options`` -- the frozen, fully resolved option set for one invocation,
  produced by ``resolve_options`` from CLI flags layered over a
  ``ComponentConfig``.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

CONFIG_FILENAME = ".new-component-config.json"

LANG_PATTERN = re.compile(r"^(js|ts)$", re.IGNORECASE)
BOOL_PATTERN = re.compile(r"^(true|false)$", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when a config file or option value is invalid."""


class MissingArgumentError(Exception):
    """Raised when no component name was supplied."""

    def __init__(self) -> None:
        super().__init__(
            "Sorry, you need to specify a name for your component like this: "
            "new-component <name>"
        )


# ---------------------------------------------------------------------------
# Discovered configuration
# ---------------------------------------------------------------------------


class ComponentConfig(BaseModel):
    """Defaults for every invocation, as read from the config files."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    lang: str = Field(default="js", description="Default language, js or ts")
    dir: str = Field(default="src/components", description="Parent directory for components")
    scss_module: str = Field(
        default="true",
        alias="scssModule",
        description='Whether to generate a SCSS module ("true" or "false")',
    )
    prettier_config: dict[str, Any] = Field(
        default_factory=dict,
        alias="prettierConfig",
        description="Options handed to prettier when formatting generated files",
    )
    format: bool = Field(default=True, description="Run generated files through prettier")

    @field_validator("lang")
    @classmethod
    def _check_lang(cls, value: str) -> str:
        if not LANG_PATTERN.match(value):
            raise ValueError(f'lang must be "js" or "ts", got {value!r}')
        return value.lower()

    @field_validator("scss_module", mode="before")
    @classmethod
    def _check_scss_module(cls, value: Any) -> str:
        # JSON files commonly hold a real boolean here.
        if isinstance(value, bool):
            return "true" if value else "false"
        if not isinstance(value, str) or not BOOL_PATTERN.match(value):
            raise ValueError(f'scssModule must be "true" or "false", got {value!r}')
        return value.lower()

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration as a JSON config file.

        Args:
            path: Destination file, usually ``<project>/.new-component-config.json``.

        Returns:
            The path that was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2, by_alias=True), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ComponentConfig":
        """Load a single config file on top of the built-in defaults."""
        return cls.model_validate(_read_overrides(Path(path)))


def _read_overrides(path: Path) -> dict[str, Any]:
    """Read one JSON override file.

    Returns an empty mapping when the file does not exist.

    Raises:
        ConfigError: If the file is not valid JSON or not a JSON object.
    """
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a JSON object")
    return data


def load_config(cwd: Path | None = None, home: Path | None = None) -> ComponentConfig:
    """Discover the configuration for this invocation.

    Built-in defaults are overridden key-by-key by the global file in *home*,
    which is in turn overridden by the project-local file in *cwd*.

    Args:
        cwd: Project directory (defaults to the current working directory).
        home: User home directory (defaults to ``Path.home()``).

    Raises:
        ConfigError: If a config file is unreadable or holds invalid values.
    """
    cwd = Path.cwd() if cwd is None else Path(cwd)
    home = Path.home() if home is None else Path(home)

    merged: dict[str, Any] = {}
    for source in (home / CONFIG_FILENAME, cwd / CONFIG_FILENAME):
        merged.update(_read_overrides(source))

    try:
        return ComponentConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc


# ---------------------------------------------------------------------------
# Resolved options
# ---------------------------------------------------------------------------


class Options(BaseModel):
    """The resolved option set for a single run.  Never mutated."""

    model_config = ConfigDict(frozen=True)

    language: Literal["js", "ts"]
    target_dir: Path
    stylesheet_enabled: bool


def resolve_options(
    component_name: str | None,
    config: ComponentConfig,
    *,
    lang: str | None = None,
    directory: str | None = None,
    scss_module: str | None = None,
) -> Options:
    """Merge CLI flags over *config* into an ``Options`` value.

    Flags that are ``None`` were not given on the command line and fall back
    to the configured value.

    Raises:
        MissingArgumentError: If *component_name* is missing or empty.
        ConfigError: If the language or stylesheet flag has an invalid value.
    """
    if not component_name:
        raise MissingArgumentError()

    language = lang if lang is not None else config.lang
    if not LANG_PATTERN.match(language):
        raise ConfigError(f'--lang must be "js" or "ts", got {language!r}')

    scss = scss_module if scss_module is not None else config.scss_module
    if not BOOL_PATTERN.match(scss):
        raise ConfigError(f'--scss-module must be "true" or "false", got {scss!r}')

    return Options(
        language=language.lower(),
        target_dir=Path(directory if directory is not None else config.dir),
        stylesheet_enabled=scss.lower() == "true",
    )
