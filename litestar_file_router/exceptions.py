"""Litestar-File-Router exception classes."""

__all__ = [
    "AmbiguousLeafError",
    "FileRouterError",
    "InvalidOptionsError",
    "PathOutsideRootError",
    "SerializationMismatchError",
]


class FileRouterError(Exception):
    """Base exception for Litestar-File-Router related errors."""


class InvalidOptionsError(FileRouterError):
    """Raised when the compiler options are unusable."""


class PathOutsideRootError(FileRouterError):
    """Raised when a view file does not live under the pages root."""

    def __init__(self, file_path: str, root: str) -> None:
        super().__init__(f"File {file_path!r} is not located under the pages root {root!r}.")
        self.file_path = file_path
        self.root = root


class AmbiguousLeafError(FileRouterError):
    """Raised when two view files resolve to the same route."""

    def __init__(self, route: str, first: str, second: str) -> None:
        super().__init__(
            f"Route {route!r} is defined by both {first!r} and {second!r}. "
            "Remove one of the files or set on_duplicate='last_wins'."
        )
        self.route = route
        self.first = first
        self.second = second


class SerializationMismatchError(FileRouterError):
    """Raised when the emitted bindings do not line up with the route tree."""

    def __init__(self, expected: int, emitted: int) -> None:
        super().__init__(f"Route tree has {expected} nodes but {emitted} bindings were emitted.")
        self.expected = expected
        self.emitted = emitted
