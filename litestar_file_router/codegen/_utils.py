"""Utilities for deterministic code generation and file output."""

import hashlib
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from litestar_file_router.codegen._tree import RouteNode

_TS_STRING_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_TS_STRING_TRANSLATION = str.maketrans(_TS_STRING_ESCAPES)


def escape_ts_string(s: str) -> str:
    """Escape a string for use in TypeScript string literals.

    Every path and import reference written into generated code goes through
    this helper, so file names containing quotes, backslashes or line
    terminators cannot break out of the literal.

    Returns:
        The escaped string.
    """
    return s.translate(_TS_STRING_TRANSLATION)


def ts_string_literal(s: str) -> str:
    """Quote ``s`` as a single-quoted TypeScript string literal.

    Returns:
        The quoted literal.
    """
    return f"'{escape_ts_string(s)}'"


def deep_sort_dict(obj: Any) -> Any:
    """Recursively sort all dictionary keys for deterministic JSON output.

    Args:
        obj: Any Python object (dict, list, or primitive).

    Returns:
        The object with all nested dict keys sorted.
    """
    if isinstance(obj, dict):
        return {k: deep_sort_dict(v) for k, v in sorted(obj.items())}  # pyright: ignore[reportUnknownVariableType,reportUnknownArgumentType]
    if isinstance(obj, list):
        return [deep_sort_dict(item) for item in obj]  # pyright: ignore[reportUnknownVariableType]
    return obj


def generate_routes_json(tree: "Sequence[RouteNode]") -> dict[str, Any]:
    """Render a route tree as a JSON-ready payload.

    List order is the tree's sibling order; only mapping keys are sorted on
    encoding.

    Returns:
        A ``{"routes": [...]}`` dictionary.
    """
    return {"routes": [node.to_dict() for node in tree]}


def write_if_changed(path: Path, content: "bytes | str", *, encoding: str = "utf-8") -> bool:
    """Write ``content`` to ``path`` unless the file already holds it.

    Generated files are compared by hash first so an unchanged routes module
    keeps its mtime and bundler watchers stay quiet. A trailing newline is
    added when missing.

    Returns:
        True if the file was written, False if it was already up to date.
    """
    data = content.encode(encoding) if isinstance(content, str) else content
    if not data.endswith(b"\n"):
        data += b"\n"

    if path.is_file():
        try:
            if hashlib.md5(path.read_bytes()).digest() == hashlib.md5(data).digest():  # noqa: S324
                return False
        except OSError:
            pass

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return True


def encode_deterministic_json(data: dict[str, Any], *, indent: int = 2) -> bytes:
    """Encode ``data`` as indented JSON with every mapping's keys sorted.

    Returns:
        The formatted JSON document, newline terminated.
    """
    import msgspec
    from litestar.serialization import encode_json

    content = msgspec.json.format(encode_json(deep_sort_dict(data)), indent=indent)
    return content if content.endswith(b"\n") else content + b"\n"
