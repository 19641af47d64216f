"""Shared utility functions for new-component.

Provides async command execution, async file-system helpers and Rich-based
progress reporting.  All user-facing output goes through the module-level
``console`` so tests can capture it in one place.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    timeout: int = 60,
    stdin: str | None = None,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously, optionally feeding *stdin*.

    Args:
        cmd: List of arguments; the first item is the executable.
        timeout: Maximum wall-clock seconds before the process is killed.
        stdin: Text written to the child's standard input.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  Output is returned without
        stripping, since formatted source must keep its trailing newline.

    Raises:
        FileNotFoundError: If the executable cannot be found.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdin=asyncio.subprocess.PIPE if stdin is not None else None,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        env=merged_env,
    )

    input_bytes = stdin.encode("utf-8") if stdin is not None else None
    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(input_bytes), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace")
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


async def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object.
    """
    dir_path = Path(path)
    await asyncio.to_thread(dir_path.mkdir, parents=True, exist_ok=True)
    return dir_path


async def make_dir(path: str | Path) -> Path:
    """Create a single directory, failing if it already exists."""
    dir_path = Path(path)
    await asyncio.to_thread(dir_path.mkdir)
    return dir_path


async def write_file(path: str | Path, content: str = "") -> Path:
    """Write *content* to *path* in a worker thread.

    The parent directory must already exist.
    """
    file_path = Path(path)
    await asyncio.to_thread(file_path.write_text, content, "utf-8")
    return file_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_intro(name: str, directory: str | Path, lang: str, scss_module: bool) -> None:
    """Print the banner shown before a component is generated."""
    console.print()
    console.print(
        Panel(
            f"[bold bright_cyan]Creating a new React component[/bold bright_cyan]\n"
            f"Name      : {escape(name)}\n"
            f"Directory : {escape(str(directory))}\n"
            f"Language  : {lang}\n"
            f"SCSS      : {'yes' if scss_module else 'no'}",
            title="[bold]new-component[/bold]",
            border_style="bright_cyan",
        )
    )


def print_item_completion(message: str) -> None:
    """Print a checkmarked progress line."""
    console.print(f"  [green]✓[/green] {message}")


def print_conclusion() -> None:
    """Print the final success panel."""
    console.print()
    console.print(
        Panel(
            "[bold green]Component created![/bold green]\n"
            "Thanks for using new-component.",
            border_style="bold green",
        )
    )


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
