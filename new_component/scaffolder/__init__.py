"""Path planning and template rendering for a single component.

Quick usage::

    from new_component.scaffolder import TemplateRenderer, plan_files

    plan = plan_files("Button", options)
    renderer = TemplateRenderer()
    source = renderer.render_component(
        renderer.load_component_template("js"), "Button", stylesheet_enabled=True
    )
"""

from new_component.scaffolder.planner import FilePlan, plan_files
from new_component.scaffolder.templates import TemplateRenderer

__all__ = [
    "FilePlan",
    "TemplateRenderer",
    "plan_files",
]
