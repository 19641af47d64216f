"""Output path planning for a single component."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from new_component.config import Options

COMPONENT_EXTENSIONS: dict[str, str] = {"js": "js", "ts": "tsx"}
INDEX_EXTENSIONS: dict[str, str] = {"js": "js", "ts": "ts"}


class FilePlan(BaseModel):
    """Every path the pipeline touches for one component."""

    model_config = ConfigDict(frozen=True)

    component_dir: Path
    component_file_path: Path
    index_file_path: Path
    stylesheet_file_path: Path


def plan_files(component_name: str, options: Options) -> FilePlan:
    """Derive the output paths for *component_name*.

    The name is used verbatim as both the directory name and the file stem.
    """
    component_dir = options.target_dir / component_name
    component_ext = COMPONENT_EXTENSIONS[options.language]
    index_ext = INDEX_EXTENSIONS[options.language]

    return FilePlan(
        component_dir=component_dir,
        component_file_path=component_dir / f"{component_name}.{component_ext}",
        index_file_path=component_dir / f"index.{index_ext}",
        stylesheet_file_path=component_dir / f"{component_name}.module.scss",
    )
