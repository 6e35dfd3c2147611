"""Route tree construction from view file paths."""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any, Literal

from litestar_file_router.codegen._paths import (
    normalize_extensions,
    normalize_path,
    relative_route_path,
    split_segments,
    strip_extension,
)
from litestar_file_router.exceptions import AmbiguousLeafError, InvalidOptionsError

logger = logging.getLogger("litestar_file_router")

DEFAULT_EXTENSIONS: tuple[str, ...] = ("tsx", "jsx")
INDEX_SEGMENT = "index"
ROOT_PATH = "/"
CATCH_ALL_PATH = "*"

DuplicatePolicy = Literal["error", "last_wins"]
DUPLICATE_POLICIES: tuple[str, ...] = ("error", "last_wins")


@dataclass
class RouteNode:
    """A single node of the compiled route tree.

    ``children`` is either ``None`` or a non-empty list once the tree has been
    returned by :func:`build_route_tree`.
    """

    path: str
    import_path: "str | None" = None
    children: "list[RouteNode] | None" = None

    def to_dict(self) -> dict[str, Any]:
        """Render the node in its serialized shape, omitting absent keys.

        Returns:
            A ``{"path", "importPath"?, "children"?}`` mapping.
        """
        data: dict[str, Any] = {"path": self.path}
        if self.import_path is not None:
            data["importPath"] = self.import_path
        if self.children:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass
class _PendingNode:
    path: str
    import_path: "str | None" = None
    source: "str | None" = None
    children: "list[_PendingNode]" = field(default_factory=list)


def validate_options(root: "str | PurePath | None", extensions: Sequence[str]) -> tuple[str, tuple[str, ...]]:
    """Check the builder options before any file is processed.

    Raises:
        InvalidOptionsError: If ``root`` is empty or no usable extension is given.

    Returns:
        The root as a string and the normalized extensions.
    """
    root_str = str(root) if root is not None else ""
    if not root_str.strip():
        msg = "A pages root directory is required."
        raise InvalidOptionsError(msg)
    cleaned = normalize_extensions(extensions)
    if not cleaned:
        msg = "At least one view file extension is required."
        raise InvalidOptionsError(msg)
    return root_str, cleaned


def _find_or_create(siblings: "list[_PendingNode]", path: str) -> _PendingNode:
    for node in siblings:
        if node.path == path:
            return node
    node = _PendingNode(path=path)
    siblings.append(node)
    return node


def _assign(node: _PendingNode, import_path: str, source: str, on_duplicate: DuplicatePolicy) -> None:
    if node.import_path is not None:
        if on_duplicate == "error":
            raise AmbiguousLeafError(node.path, node.source or node.import_path, source)
        logger.warning("Route %r from %s replaced by %s", node.path, node.source, source)
    node.import_path = import_path
    node.source = source


def _insert(
    roots: "list[_PendingNode]",
    segments: list[str],
    import_path: str,
    source: str,
    on_duplicate: DuplicatePolicy,
) -> None:
    siblings = roots
    parent: "_PendingNode | None" = None
    last = len(segments) - 1
    for position, segment in enumerate(segments):
        if segment == INDEX_SEGMENT and position == last:
            target = parent if parent is not None else _find_or_create(roots, ROOT_PATH)
            _assign(target, import_path, source, on_duplicate)
            return
        route_path = ROOT_PATH if segment == INDEX_SEGMENT else f"/{segment}"
        node = _find_or_create(siblings, route_path)
        if position == last:
            _assign(node, import_path, source, on_duplicate)
            return
        parent = node
        siblings = node.children


def prune_route_tree(nodes: "Sequence[_PendingNode | RouteNode]") -> list[RouteNode]:
    """Rebuild nodes dropping empty ``children`` collections.

    Returns:
        A new list of pruned route nodes.
    """
    pruned: list[RouteNode] = []
    for node in nodes:
        children = prune_route_tree(node.children) if node.children else []
        pruned.append(RouteNode(path=node.path, import_path=node.import_path, children=children or None))
    return pruned


def build_route_tree(
    files: Sequence[str],
    *,
    root: "str | PurePath",
    extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    on_duplicate: DuplicatePolicy = "error",
) -> list[RouteNode]:
    """Create a nested route tree from a list of view file paths.

    Sibling order follows the order of ``files``. A trailing ``index`` segment
    is folded into its parent directory's node, or into the ``/`` node at the
    top level, and ``[param]`` tokens become ``:param`` segments.

    Args:
        files: View file paths located below ``root``.
        root: The pages directory the route paths are relative to.
        extensions: View file extensions stripped from the route paths.
        on_duplicate: ``"error"`` to reject two files mapping to one route,
            ``"last_wins"`` to keep the later file.

    Raises:
        InvalidOptionsError: If the options are unusable.

    Returns:
        The top-level route nodes.
    """
    root_str, cleaned_extensions = validate_options(root, extensions)
    if on_duplicate not in DUPLICATE_POLICIES:
        msg = f"Unknown duplicate route policy {on_duplicate!r}, expected one of {DUPLICATE_POLICIES!r}."
        raise InvalidOptionsError(msg)

    roots: list[_PendingNode] = []
    for file_path in files:
        relative = relative_route_path(str(file_path), root_str)
        segments = split_segments(strip_extension(relative, cleaned_extensions))
        _insert(roots, segments, normalize_path(str(file_path)), str(file_path), on_duplicate)
    return prune_route_tree(roots)


def append_not_found(tree: Sequence[RouteNode], import_ref: str) -> list[RouteNode]:
    """Return a copy of ``tree`` with a trailing catch-all route.

    Returns:
        The top-level nodes followed by the ``*`` node.
    """
    return [*tree, RouteNode(path=CATCH_ALL_PATH, import_path=import_ref)]


def iter_route_nodes(tree: Sequence[RouteNode], depth: int = 0) -> Iterator[tuple[int, RouteNode]]:
    """Walk the tree in pre-order.

    Yields:
        ``(depth, node)`` pairs, parents before their children.
    """
    for node in tree:
        yield depth, node
        if node.children:
            yield from iter_route_nodes(node.children, depth + 1)


def count_route_nodes(tree: Sequence[RouteNode]) -> int:
    return sum(1 for _ in iter_route_nodes(tree))
