"""View file discovery under the pages directory."""

from collections.abc import Sequence
from fnmatch import fnmatch
from pathlib import Path, PurePath

from litestar_file_router.codegen._paths import normalize_extensions
from litestar_file_router.exceptions import InvalidOptionsError

__all__ = ("discover_route_files",)


def _is_hidden(relative: PurePath) -> bool:
    return any(part.startswith(".") for part in relative.parts)


def _is_excluded(relative: str, exclude: Sequence[str]) -> bool:
    return any(fnmatch(relative, pattern) for pattern in exclude)


def discover_route_files(
    root: "str | Path",
    extensions: Sequence[str],
    *,
    exclude: Sequence[str] = (),
) -> list[str]:
    """List view files below ``root``.

    Files and directories whose name starts with a dot are skipped. Files are
    returned sorted by their POSIX path so the route tree built from
    them is the same on every run and platform.

    Args:
        root: The pages directory.
        extensions: View file extensions, with or without the leading dot.
        exclude: ``fnmatch`` patterns matched against the root-relative POSIX path.

    Raises:
        InvalidOptionsError: If ``root`` is not an existing directory.

    Returns:
        Absolute file paths in POSIX form.
    """
    root_dir = Path(root).resolve()
    if not root_dir.is_dir():
        msg = f"Pages directory {str(root_dir)!r} does not exist."
        raise InvalidOptionsError(msg)

    suffixes = tuple(f".{ext}" for ext in normalize_extensions(extensions))
    found: list[str] = []
    for candidate in root_dir.rglob("*"):
        if not candidate.is_file() or not candidate.name.endswith(suffixes):
            continue
        relative = candidate.relative_to(root_dir)
        if _is_hidden(relative) or _is_excluded(relative.as_posix(), exclude):
            continue
        found.append(candidate.as_posix())
    return sorted(found)
