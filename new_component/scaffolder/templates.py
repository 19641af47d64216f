"""Template loading and rendering for component scaffolding.

Component templates (``js.js`` and ``ts.tsx``) are plain source files read
through the Jinja2 loader and filled in by literal replacement of the
``COMPONENT_NAME`` token, so JSX braces never collide with Jinja syntax.
The index re-export file is a real Jinja2 template (``index.j2``).
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

PLACEHOLDER = "COMPONENT_NAME"

COMPONENT_TEMPLATES: dict[str, str] = {
    "js": "js.js",
    "ts": "ts.tsx",
}

INDEX_TEMPLATE = "index.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Loads and renders the component and index templates.

    Rendering is pure string work; writing the result is left to the caller.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
        )

    # -- Component file ----------------------------------------------------

    def load_component_template(self, language: str) -> str:
        """Return the raw text of the component template for *language*.

        Raises:
            jinja2.TemplateNotFound: If the template file is missing.
        """
        name = COMPONENT_TEMPLATES[language]
        source, _filename, _uptodate = self.env.loader.get_source(self.env, name)
        return source

    def render_component(
        self,
        template: str,
        component_name: str,
        stylesheet_enabled: bool,
    ) -> str:
        """Fill in *template* for *component_name*.

        Every ``COMPONENT_NAME`` token is replaced verbatim.  With the
        stylesheet disabled, the exact line
        ``import styles from './<name>.module.scss';`` is removed; an import
        written any other way is left alone.
        """
        rendered = template.replace(PLACEHOLDER, component_name)
        if not stylesheet_enabled:
            rendered = rendered.replace(
                f"import styles from './{component_name}.module.scss';", "", 1
            )
        return rendered

    # -- Index file --------------------------------------------------------

    def render_index(self, component_name: str) -> str:
        """Render the two-line re-export module for *component_name*."""
        template = self.env.get_template(INDEX_TEMPLATE)
        return template.render(component_name=component_name)
