"""Path normalization helpers shared by the route tree builder."""

import posixpath
import re
from collections.abc import Sequence

from litestar_file_router.exceptions import PathOutsideRootError

_DYNAMIC_SEGMENT_PATTERN = re.compile(r"\[([^\]]+)\]")


def normalize_path(raw_path: str) -> str:
    """Normalize a filesystem path to forward slashes without outer slashes.

    Returns:
        The normalized path string.
    """
    return raw_path.replace("\\", "/").strip("/")


def normalize_extensions(extensions: Sequence[str]) -> tuple[str, ...]:
    """Drop leading dots and blanks from configured extensions.

    Returns:
        The cleaned extensions, in configured order.
    """
    cleaned = (ext.strip().lstrip(".") for ext in extensions)
    return tuple(ext for ext in cleaned if ext)


def relative_route_path(file_path: str, root: str) -> str:
    """Compute the normalized path of ``file_path`` relative to ``root``.

    Raises:
        PathOutsideRootError: If the file is not strictly below ``root``.

    Returns:
        The relative path using forward slashes, without outer slashes.
    """
    file_posix = posixpath.normpath(file_path.replace("\\", "/"))
    root_posix = posixpath.normpath(root.replace("\\", "/"))
    if posixpath.isabs(file_posix) != posixpath.isabs(root_posix):
        raise PathOutsideRootError(file_path, root)
    relative = posixpath.relpath(file_posix, root_posix)
    if relative == "." or relative == ".." or relative.startswith("../"):
        raise PathOutsideRootError(file_path, root)
    return normalize_path(relative)


def strip_extension(path: str, extensions: Sequence[str]) -> str:
    """Remove a trailing ``.ext`` matching one of ``extensions``.

    Returns:
        The path without its view extension.
    """
    if not extensions:
        return path
    pattern = re.compile(r"\.(" + "|".join(re.escape(ext) for ext in extensions) + r")$")
    return pattern.sub("", path)


def rewrite_dynamic_segment(segment: str) -> str:
    """Rewrite every ``[name]`` token of a segment to ``:name``.

    Returns:
        The rewritten segment.
    """
    return _DYNAMIC_SEGMENT_PATTERN.sub(r":\1", segment)


def split_segments(path: str) -> list[str]:
    """Split a relative route path into rewritten segments.

    Returns:
        The list of segments.
    """
    return [rewrite_dynamic_segment(segment) for segment in path.split("/")]
