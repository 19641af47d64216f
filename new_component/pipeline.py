"""Component scaffolding pipeline.

Runs the fixed sequence of stages that turns a component name and resolved
options into files on disk:

VALIDATED         -- name and options resolved, paths planned.
DIR_PLANNED       -- target directory exists, component directory is free.
DIR_CREATED       -- component directory created.
TEMPLATE_RENDERED -- component source filled in and formatted.
FILES_WRITTEN     -- component, stylesheet and index files written.
DONE              -- conclusion reported.

Each stage starts only after the previous one finished.  The first exception
stops the run; files already written stay on disk.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from new_component.config import Options
from new_component.formatter import Formatter
from new_component.scaffolder.planner import FilePlan, plan_files
from new_component.scaffolder.templates import TemplateRenderer
from new_component.utils import (
    ensure_dir,
    make_dir,
    print_conclusion,
    print_intro,
    print_item_completion,
    write_file,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ComponentAlreadyExistsError(Exception):
    """Raised when the component directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Looks like this component already exists! There's already a "
            f"component at {path}.\nPlease delete this directory and try again."
        )


# ---------------------------------------------------------------------------
# Stages and result
# ---------------------------------------------------------------------------


class Stage(str, Enum):
    VALIDATED = "validated"
    DIR_PLANNED = "dir_planned"
    DIR_CREATED = "dir_created"
    TEMPLATE_RENDERED = "template_rendered"
    FILES_WRITTEN = "files_written"
    DONE = "done"


class ScaffoldResult(BaseModel):
    """What a pipeline run produced."""

    plan: FilePlan
    stage: Stage = Stage.VALIDATED
    written: list[Path] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class ComponentPipeline:
    """Scaffolds one component.

    Attributes:
        component_name: The raw component name, used verbatim everywhere.
        options: Resolved options for this run.
        formatter: Formatter applied to the component and index sources.
        renderer: Template loader/renderer.
        result: Progress of the current run.
    """

    def __init__(
        self,
        component_name: str,
        options: Options,
        formatter: Formatter,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.component_name = component_name
        self.options = options
        self.formatter = formatter
        self.renderer = renderer or TemplateRenderer()
        self.result = ScaffoldResult(plan=plan_files(component_name, options))

    @property
    def plan(self) -> FilePlan:
        return self.result.plan

    async def run(self) -> ScaffoldResult:
        """Execute every stage in order.

        Raises:
            ComponentAlreadyExistsError: If the component directory exists.
                Nothing has been written when this is raised.
        """
        print_intro(
            name=self.component_name,
            directory=self.plan.component_dir,
            lang=self.options.language,
            scss_module=self.options.stylesheet_enabled,
        )

        await self._prepare_directories()
        self.result.stage = Stage.DIR_PLANNED

        await make_dir(self.plan.component_dir)
        self.result.stage = Stage.DIR_CREATED
        print_item_completion("Directory created.")

        component_source = await self._render_component()
        self.result.stage = Stage.TEMPLATE_RENDERED

        await self._write_files(component_source)
        self.result.stage = Stage.FILES_WRITTEN

        print_conclusion()
        self.result.stage = Stage.DONE
        return self.result

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    async def _prepare_directories(self) -> None:
        """Create the parent directory and make sure the component is new."""
        await ensure_dir(self.options.target_dir)
        if self.plan.component_dir.exists():
            raise ComponentAlreadyExistsError(self.plan.component_dir)

    async def _render_component(self) -> str:
        template = self.renderer.load_component_template(self.options.language)
        source = self.renderer.render_component(
            template, self.component_name, self.options.stylesheet_enabled
        )
        return await self.formatter.format(source, self.plan.component_file_path)

    async def _write_files(self, component_source: str) -> None:
        await self._write(self.plan.component_file_path, component_source)
        print_item_completion("Component built and saved to disk.")

        # The stylesheet is intentionally left empty.
        if self.options.stylesheet_enabled:
            await self._write(self.plan.stylesheet_file_path, "")
            print_item_completion("SCSS module file built and saved to disk.")

        index_source = await self.formatter.format(
            self.renderer.render_index(self.component_name),
            self.plan.index_file_path,
        )
        await self._write(self.plan.index_file_path, index_source)
        print_item_completion("Index file built and saved to disk.")

    async def _write(self, path: Path, content: str) -> None:
        await write_file(path, content)
        self.result.written.append(path)


async def scaffold_component(
    component_name: str,
    options: Options,
    formatter: Formatter,
) -> ScaffoldResult:
    """Convenience wrapper: build a ``ComponentPipeline`` and run it."""
    return await ComponentPipeline(component_name, options, formatter).run()
