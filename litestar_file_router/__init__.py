"""Litestar-File-Router: file based routes for Vite + React frontends.

This package compiles a pages directory into a generated React Router module
where every view is loaded lazily, and keeps it in sync from a Litestar app.

Basic usage:
    from litestar import Litestar
    from litestar_file_router import FileRouterPlugin, FileRouterConfig

    app = Litestar(
        plugins=[FileRouterPlugin(config=FileRouterConfig(root="web/src/pages"))],
    )

Using the compiler directly:
    from litestar_file_router import build_route_tree, serialize_route_tree

    tree = build_route_tree(files, root="/app/web/src/pages")
    source = serialize_route_tree(tree).source
"""

from litestar_file_router.codegen import (
    GeneratedModule,
    RouteNode,
    append_not_found,
    build_route_tree,
    serialize_route_tree,
)
from litestar_file_router.config import FileRouterConfig
from litestar_file_router.discovery import discover_route_files
from litestar_file_router.plugin import FileRouterPlugin

__all__ = (
    "FileRouterConfig",
    "FileRouterPlugin",
    "GeneratedModule",
    "RouteNode",
    "append_not_found",
    "build_route_tree",
    "discover_route_files",
    "serialize_route_tree",
)
