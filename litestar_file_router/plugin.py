"""File Router Plugin for Litestar.

This module provides the FileRouterPlugin class which keeps the generated
routes module of a Vite + React frontend in sync with its pages directory.
The plugin handles:

- Route module generation when the application starts
- Optional ``.d.ts`` declaration for the routes module
- Registration of the ``file-routes`` CLI commands

Example::

    from litestar import Litestar
    from litestar_file_router import FileRouterConfig, FileRouterPlugin

    app = Litestar(
        plugins=[FileRouterPlugin(config=FileRouterConfig(root="web/src/pages"))],
    )
"""

import logging
from typing import TYPE_CHECKING

from litestar.plugins import CLIPlugin, InitPluginProtocol

from litestar_file_router.compiler import write_module_declaration, write_routes_module
from litestar_file_router.exceptions import FileRouterError
from litestar_file_router.utils import log_fail, log_success

if TYPE_CHECKING:
    from click import Group
    from litestar.config.app import AppConfig

    from litestar_file_router.config import FileRouterConfig

logger = logging.getLogger("litestar_file_router")


class FileRouterPlugin(InitPluginProtocol, CLIPlugin):
    """File router plugin for Litestar.

    Example::

        from litestar import Litestar
        from litestar_file_router import FileRouterPlugin, FileRouterConfig

        app = Litestar(
            plugins=[
                FileRouterPlugin(config=FileRouterConfig(not_found="src/pages/404.tsx"))
            ],
        )
    """

    __slots__ = ("_config",)

    def __init__(self, config: "FileRouterConfig | None" = None) -> None:
        """Initialize the file router plugin.

        Args:
            config: File router configuration. Defaults to FileRouterConfig() if not provided.
        """
        from litestar_file_router.config import FileRouterConfig

        if config is None:
            config = FileRouterConfig()
        self._config = config

    @property
    def config(self) -> "FileRouterConfig":
        """Get the file router configuration.

        Returns:
            The FileRouterConfig instance.
        """
        return self._config

    def generate(self) -> bool:
        """Write the routes module and, when configured, its declaration.

        Returns:
            True if any file changed on disk.
        """
        changed = write_routes_module(self._config)
        if self._config.declarations_path is not None:
            changed = write_module_declaration(self._config) or changed
        return changed

    def _generate_on_startup(self) -> None:
        try:
            changed = self.generate()
        except FileRouterError as e:
            log_fail(f"Route generation failed: {e!s}")
            raise
        if changed:
            log_success(f"Routes generated → {self._config.output}")
        else:
            logger.debug("Routes module already up to date")

    def on_cli_init(self, cli: "Group") -> None:
        """Register CLI commands.

        Args:
            cli: The Click command group to add commands to.
        """
        from litestar_file_router.cli import file_routes_group

        cli.add_command(file_routes_group)

    def on_app_init(self, app_config: "AppConfig") -> "AppConfig":
        """Register route generation as a startup hook.

        Args:
            app_config: The Litestar application configuration.

        Returns:
            The modified application configuration.
        """
        if self._config.generate_on_startup:
            app_config.on_startup.append(self._generate_on_startup)
        else:
            logger.debug("Route generation on startup is disabled")
        return app_config
