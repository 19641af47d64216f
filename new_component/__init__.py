"""new-component -- scaffold React component boilerplate.

Quick usage::

    import asyncio
    from new_component.config import load_config, resolve_options
    from new_component.formatter import build_formatter
    from new_component.pipeline import scaffold_component

    config = load_config()
    options = resolve_options("Button", config, lang="ts")
    asyncio.run(scaffold_component("Button", options, build_formatter(config)))
"""

__version__ = "1.0.0"
