"""Public code generation API.

This package provides the route compiler:

- Route tree construction from view file paths (``build_route_tree``)
- Serialization into a lazily loaded React Router module (``serialize_route_tree``)
- Ambient module declarations and JSON export of the tree

Path normalization and escaping helpers are kept in private submodules.
"""

from litestar_file_router.codegen._declarations import DEFAULT_MODULE_NAME, generate_module_declaration
from litestar_file_router.codegen._module import (
    DEFAULT_BINDING_PREFIX,
    GeneratedModule,
    serialize_route_tree,
)
from litestar_file_router.codegen._tree import (
    CATCH_ALL_PATH,
    DEFAULT_EXTENSIONS,
    DuplicatePolicy,
    RouteNode,
    append_not_found,
    build_route_tree,
    count_route_nodes,
    iter_route_nodes,
    validate_options,
)
from litestar_file_router.codegen._utils import (
    encode_deterministic_json,
    escape_ts_string,
    generate_routes_json,
    write_if_changed,
)

__all__ = (
    "CATCH_ALL_PATH",
    "DEFAULT_BINDING_PREFIX",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_MODULE_NAME",
    "DuplicatePolicy",
    "GeneratedModule",
    "RouteNode",
    "append_not_found",
    "build_route_tree",
    "count_route_nodes",
    "encode_deterministic_json",
    "escape_ts_string",
    "generate_module_declaration",
    "generate_routes_json",
    "iter_route_nodes",
    "serialize_route_tree",
    "validate_options",
    "write_if_changed",
)
