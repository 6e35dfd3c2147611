"""Router component scaffold for projects using the generated routes module."""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from litestar_file_router.codegen import write_if_changed
from litestar_file_router.codegen._utils import ts_string_literal

if TYPE_CHECKING:
    from litestar_file_router.config import FileRouterConfig

__all__ = ("ROUTER_TEMPLATE", "TEMPLATES_PATH", "render_router", "routes_import_path", "write_router_scaffold")

logger = logging.getLogger("litestar_file_router")

TEMPLATES_PATH = Path(__file__).parent / "templates"
ROUTER_TEMPLATE = "Router.tsx.j2"


def routes_import_path(router: Path, routes_module: Path) -> str:
    """Import specifier of ``routes_module`` as seen from ``router``.

    Returns:
        A ``./`` or ``../`` relative specifier without the file extension.
    """
    relative = Path(os.path.relpath(routes_module.resolve().with_suffix(""), router.resolve().parent)).as_posix()
    return relative if relative.startswith(".") else f"./{relative}"


def render_router(routes_import: str) -> str:
    """Render the router component importing the routes from ``routes_import``.

    Templates are rendered with autoescaping disabled because the output is
    TypeScript, not HTML.

    Returns:
        The component source.
    """
    from jinja2 import Environment, FileSystemLoader

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_PATH)),
        keep_trailing_newline=True,
        autoescape=False,  # noqa: S701
    )
    context: dict[str, Any] = {"routes_import": ts_string_literal(routes_import)}
    return env.get_template(ROUTER_TEMPLATE).render(**context)


def write_router_scaffold(
    config: "FileRouterConfig",
    output: "Path | None" = None,
    *,
    overwrite: bool = False,
    use_module_name: bool = False,
) -> bool:
    """Write the router component unless it already exists.

    Args:
        config: The file router configuration.
        output: Path of the component. Defaults to ``config.router_path``.
        overwrite: Replace an existing component.
        use_module_name: Import ``config.module_name`` instead of the path of
            the generated routes module.

    Returns:
        True if the file was written, False if it was left in place.
    """
    path = Path(output or config.router_path)
    if path.exists() and not overwrite:
        logger.debug("Router component %s exists, skipping", path)
        return False
    routes_import = config.module_name if use_module_name else routes_import_path(path, Path(config.output))
    return write_if_changed(path, render_router(routes_import))
