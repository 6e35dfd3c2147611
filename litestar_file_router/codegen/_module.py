"""Route tree serialization into a lazily loaded React Router module."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from litestar_file_router.codegen._tree import ROOT_PATH, RouteNode, count_route_nodes
from litestar_file_router.codegen._utils import ts_string_literal
from litestar_file_router.exceptions import SerializationMismatchError

DEFAULT_BINDING_PREFIX = "FileRoute"
FALLBACK_COMPONENT = "FileRouteFallback"

_MODULE_HEADER = "// AUTO-GENERATED by litestar-file-router. Do not edit.\n/* eslint-disable */"


def _str_list_factory() -> list[str]:
    return []


@dataclass
class GeneratedModule:
    """Generated routes module.

    ``bindings`` holds one declaration per tree node in pre-order; ``routes``
    is the nested route-object literal referencing them by the same order.
    """

    imports: list[str] = field(default_factory=_str_list_factory)
    bindings: list[str] = field(default_factory=_str_list_factory)
    routes: str = ""

    @property
    def source(self) -> str:
        """The complete module text.

        Returns:
            The module source.
        """
        parts = [_MODULE_HEADER, "\n".join(self.imports)]
        if self.bindings:
            parts.append("\n".join(self.bindings))
        parts.append(f"export default [\n{self.routes}\n];\n" if self.routes else "export default [];\n")
        return "\n\n".join(parts)

    def __str__(self) -> str:
        return self.source


def route_object_path(path: str) -> str:
    """Strip the leading slash of a route path; ``/`` and ``*`` stay as-is.

    Returns:
        The path as React Router expects it on a nested route.
    """
    if path == ROOT_PATH:
        return path
    return path.removeprefix("/")


def _binding_declaration(name: str, node: RouteNode) -> str:
    if node.import_path is None:
        return f"const {name} = React.Fragment;"
    return f"const {name} = React.lazy(() => import({ts_string_literal(node.import_path)}));"


def _route_object(name: str, node: RouteNode, fallback: str, children: str, depth: int) -> str:
    pad = "  " * (1 + 2 * depth)
    lines = [
        f"{pad}{{",
        f"{pad}  path: {ts_string_literal(route_object_path(node.path))},",
        f"{pad}  element: (",
        f"{pad}    <React.Suspense fallback={{{fallback}}}>",
        f"{pad}      <{name} />",
        f"{pad}    </React.Suspense>",
    ]
    if children:
        lines.extend((f"{pad}  ),", f"{pad}  children: [", children, f"{pad}  ]"))
    else:
        lines.append(f"{pad}  )")
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def _emit(
    nodes: Sequence[RouteNode],
    bindings: list[str],
    *,
    prefix: str,
    fallback: str,
    depth: int,
) -> str:
    # bindings doubles as the counter: a node's identifier is its pre-order index.
    items: list[str] = []
    for node in nodes:
        name = f"{prefix}{len(bindings)}"
        bindings.append(_binding_declaration(name, node))
        children = ""
        if node.children:
            children = _emit(node.children, bindings, prefix=prefix, fallback=fallback, depth=depth + 1)
        items.append(_route_object(name, node, fallback, children, depth))
    return ",\n".join(items)


def serialize_route_tree(
    tree: Sequence[RouteNode],
    *,
    binding_prefix: str = DEFAULT_BINDING_PREFIX,
    fallback: "str | None" = None,
) -> GeneratedModule:
    """Serialize a route tree into a React Router module.

    Bindings and route objects are produced by one pre-order walk, so the
    n-th binding always backs the n-th route object.

    Args:
        tree: Top-level route nodes, including any catch-all node.
        binding_prefix: Prefix of the generated component identifiers.
        fallback: Optional import reference of a component rendered while a
            view is loading.

    Raises:
        SerializationMismatchError: If the binding count differs from the node count.

    Returns:
        The generated module.
    """
    imports = ["import React from 'react';"]
    if fallback is not None:
        imports.append(f"import {FALLBACK_COMPONENT} from {ts_string_literal(fallback)};")
    fallback_element = f"<{FALLBACK_COMPONENT} />" if fallback is not None else "<></>"

    bindings: list[str] = []
    routes = _emit(tree, bindings, prefix=binding_prefix, fallback=fallback_element, depth=0)

    expected = count_route_nodes(tree)
    if len(bindings) != expected:
        raise SerializationMismatchError(expected, len(bindings))
    return GeneratedModule(imports=imports, bindings=bindings, routes=routes)
