"""Tests for FileRouterPlugin functionality and integration."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import Mock

import pytest
from click import Group
from litestar.config.app import AppConfig
from litestar.testing import create_test_client

from litestar_file_router.config import FileRouterConfig
from litestar_file_router.exceptions import AmbiguousLeafError
from litestar_file_router.plugin import FileRouterPlugin


class TestFileRouterPlugin:
    """Test FileRouterPlugin core functionality."""

    def test_plugin_initialization_default_config(self) -> None:
        plugin = FileRouterPlugin()

        assert isinstance(plugin.config, FileRouterConfig)

    def test_plugin_initialization_custom_config(self, tmp_path: Path) -> None:
        config = FileRouterConfig(root=tmp_path, not_found="src/pages/404.tsx")
        plugin = FileRouterPlugin(config=config)

        assert plugin.config is config

    def test_on_app_init_registers_startup_hook(self, tmp_path: Path) -> None:
        plugin = FileRouterPlugin(config=FileRouterConfig(root=tmp_path))
        app_config = AppConfig()

        result = plugin.on_app_init(app_config)

        assert result is app_config
        assert len(app_config.on_startup) == 1

    def test_on_app_init_startup_generation_disabled(self, tmp_path: Path) -> None:
        plugin = FileRouterPlugin(config=FileRouterConfig(root=tmp_path, generate_on_startup=False))
        app_config = AppConfig()

        plugin.on_app_init(app_config)

        assert list(app_config.on_startup) == []

    def test_on_cli_init_adds_command_group(self) -> None:
        plugin = FileRouterPlugin()
        cli = Mock(spec=Group)

        plugin.on_cli_init(cli)

        cli.add_command.assert_called_once()
        assert cli.add_command.call_args.args[0].name == "file-routes"


class TestRouteGeneration:
    """Test route module generation through the plugin."""

    def test_generate_writes_module_and_declaration(self, create_pages: Callable[..., Path], tmp_path: Path) -> None:
        pages = create_pages("index.tsx", "about.tsx")
        config = FileRouterConfig(
            root=pages,
            output=tmp_path / "routes.tsx",
            declarations_path=tmp_path / "routes.d.ts",
        )
        plugin = FileRouterPlugin(config=config)

        assert plugin.generate() is True
        assert "FileRoute1" in (tmp_path / "routes.tsx").read_text()
        assert "declare module" in (tmp_path / "routes.d.ts").read_text()
        assert plugin.generate() is False

    def test_generate_on_startup(self, create_pages: Callable[..., Path], tmp_path: Path) -> None:
        pages = create_pages("index.tsx", "blog/[slug].tsx")
        output = tmp_path / "generated" / "routes.tsx"
        plugin = FileRouterPlugin(config=FileRouterConfig(root=pages, output=output))

        with create_test_client(route_handlers=[], plugins=[plugin]):
            assert output.exists()

        source = output.read_text()
        assert "path: 'blog'" in source
        assert "path: ':slug'" in source

    def test_startup_failure_is_reported_and_raised(self, create_pages: Callable[..., Path], tmp_path: Path) -> None:
        pages = create_pages("about.tsx", "about/index.tsx")
        plugin = FileRouterPlugin(config=FileRouterConfig(root=pages, output=tmp_path / "routes.tsx"))

        with pytest.raises(AmbiguousLeafError):
            plugin._generate_on_startup()

        assert not (tmp_path / "routes.tsx").exists()
