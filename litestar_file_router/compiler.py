"""Compile the pages directory of a project into generated route files."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from litestar_file_router.codegen import (
    append_not_found,
    build_route_tree,
    encode_deterministic_json,
    generate_module_declaration,
    generate_routes_json,
    serialize_route_tree,
    write_if_changed,
)
from litestar_file_router.discovery import discover_route_files

if TYPE_CHECKING:
    from litestar_file_router.codegen import GeneratedModule, RouteNode
    from litestar_file_router.config import FileRouterConfig

__all__ = (
    "compile_route_tree",
    "compile_routes_module",
    "export_routes_json",
    "write_module_declaration",
    "write_routes_module",
)

logger = logging.getLogger("litestar_file_router")


def compile_route_tree(config: "FileRouterConfig") -> "list[RouteNode]":
    """Discover view files and build the route tree, including the catch-all route.

    Returns:
        The top-level route nodes.
    """
    root_dir = config.root_dir
    files = discover_route_files(root_dir, config.extensions, exclude=config.exclude)
    logger.debug("Discovered %d view files under %s", len(files), root_dir)
    tree = build_route_tree(
        files,
        root=root_dir.as_posix(),
        extensions=config.extensions,
        on_duplicate=config.on_duplicate,
    )
    if config.not_found is not None:
        tree = append_not_found(tree, config.not_found)
    return tree


def compile_routes_module(config: "FileRouterConfig") -> "GeneratedModule":
    """Compile the pages directory into a routes module.

    Returns:
        The generated module.
    """
    return serialize_route_tree(
        compile_route_tree(config),
        binding_prefix=config.binding_prefix,
        fallback=config.fallback,
    )


def write_routes_module(
    config: "FileRouterConfig",
    output: "Path | None" = None,
    *,
    module: "GeneratedModule | None" = None,
) -> bool:
    """Write the routes module, compiling it unless ``module`` is given.

    Returns:
        True if the file was written, False if it was already up to date.
    """
    path = Path(output or config.output)
    if module is None:
        module = compile_routes_module(config)
    changed = write_if_changed(path, module.source)
    if not changed:
        logger.debug("Routes module %s is up to date", path)
    return changed


def write_module_declaration(config: "FileRouterConfig", output: "Path | None" = None) -> bool:
    """Write the ambient declaration of the routes module.

    Raises:
        ValueError: If neither ``output`` nor ``config.declarations_path`` is set.

    Returns:
        True if the file was written, False if it was already up to date.
    """
    target = output or config.declarations_path
    if target is None:
        msg = "No declarations path configured."
        raise ValueError(msg)
    return write_if_changed(Path(target), generate_module_declaration(config.module_name))


def export_routes_json(config: "FileRouterConfig", output: Path) -> bool:
    """Write the compiled route tree as JSON.

    Returns:
        True if the file was written, False if it was already up to date.
    """
    return write_if_changed(output, encode_deterministic_json(generate_routes_json(compile_route_tree(config))))
