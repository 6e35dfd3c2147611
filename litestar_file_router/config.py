"""Configuration for Litestar-File-Router."""

import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from litestar_file_router.codegen import (
    DEFAULT_BINDING_PREFIX,
    DEFAULT_EXTENSIONS,
    DEFAULT_MODULE_NAME,
    DuplicatePolicy,
    validate_options,
)
from litestar_file_router.codegen._tree import DUPLICATE_POLICIES
from litestar_file_router.exceptions import InvalidOptionsError

__all__ = ("TRUE_VALUES", "FileRouterConfig")

TRUE_VALUES = {"True", "true", "1", "yes", "Y", "T"}


@dataclass
class FileRouterConfig:
    """File router configuration.

    Attributes:
        root: The pages directory scanned for view files.
        extensions: View file extensions, with or without the leading dot.
        exclude: ``fnmatch`` patterns, relative to ``root``, of files that are not routes.
        not_found: Import reference of the view rendered for unmatched URLs.
            Adds a trailing ``*`` route when set.
        fallback: Import reference of the component shown while a view loads.
        output: Path of the generated routes module.
        declarations_path: Path of the generated ``.d.ts`` module declaration.
            No declaration is written when ``None``.
        router_path: Path of the router component written by ``file-routes init``.
        module_name: Module specifier used in the declaration.
        binding_prefix: Prefix of the generated component identifiers.
        on_duplicate: ``"error"`` rejects two files resolving to the same route;
            ``"last_wins"`` keeps the file that comes later in discovery order.
        generate_on_startup: Regenerate the routes module when the Litestar app starts.
    """

    root: "str | Path" = field(default_factory=lambda: os.getenv("FILE_ROUTER_ROOT", "src/pages"))
    extensions: Sequence[str] = DEFAULT_EXTENSIONS
    exclude: Sequence[str] = ()
    not_found: "str | None" = None
    fallback: "str | None" = None
    output: "str | Path" = field(default_factory=lambda: Path("src/generated/routes.tsx"))
    declarations_path: "str | Path | None" = None
    router_path: "str | Path" = field(default_factory=lambda: Path("src/Router.tsx"))
    module_name: str = DEFAULT_MODULE_NAME
    binding_prefix: str = DEFAULT_BINDING_PREFIX
    on_duplicate: DuplicatePolicy = "error"
    generate_on_startup: bool = field(
        default_factory=lambda: os.getenv("FILE_ROUTER_GENERATE", "True") in TRUE_VALUES
    )

    def __post_init__(self) -> None:
        """Normalize path types and validate the compiler options.

        Raises:
            InvalidOptionsError: If the root is empty, no usable extension is
                configured or the duplicate policy is unknown.
        """
        _, self.extensions = validate_options(self.root, self.extensions)
        self.root = Path(self.root)
        if isinstance(self.output, str):
            self.output = Path(self.output)
        if isinstance(self.declarations_path, str):
            self.declarations_path = Path(self.declarations_path)
        if isinstance(self.router_path, str):
            self.router_path = Path(self.router_path)
        self.exclude = tuple(self.exclude)

        if self.on_duplicate not in DUPLICATE_POLICIES:
            msg = f"Unknown duplicate route policy {self.on_duplicate!r}, expected one of {DUPLICATE_POLICIES!r}."
            raise InvalidOptionsError(msg)

    @property
    def root_dir(self) -> Path:
        """The pages directory as an absolute path.

        Returns:
            The resolved root directory.
        """
        return Path(self.root).resolve()
