from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from click import Path as ClickPath
from click import echo, group, option
from litestar.cli._utils import LitestarGroup  # pyright: ignore[reportPrivateImportUsage]
from rich.markup import escape

if TYPE_CHECKING:
    from litestar import Litestar
    from rich.tree import Tree

    from litestar_file_router.codegen import RouteNode
    from litestar_file_router.config import FileRouterConfig


@group(cls=LitestarGroup, name="file-routes")
def file_routes_group() -> None:
    """Manage file based routes."""


def _get_config(app: "Litestar") -> "FileRouterConfig":
    from litestar_file_router.plugin import FileRouterPlugin

    return app.plugins.get(FileRouterPlugin).config


def _add_tree_nodes(parent: "Tree", nodes: "list[RouteNode]") -> None:
    for node in nodes:
        label = f"[bold]{escape(node.path)}[/]"
        if node.import_path is not None:
            label += f" [dim]{escape(node.import_path)}[/]"
        branch = parent.add(label)
        if node.children:
            _add_tree_nodes(branch, node.children)


@file_routes_group.command(
    name="generate",
    help="Generate the routes module from the pages directory.",
)
@option(
    "--output",
    type=ClickPath(dir_okay=False, path_type=Path),
    help="The path of the generated routes module.  Defaults to the configured output.",
    default=None,
    required=False,
)
@option(
    "--declarations",
    type=ClickPath(dir_okay=False, path_type=Path),
    help="Also write the module declaration to this path.  Defaults to the configured declarations path.",
    default=None,
    required=False,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
def generate_routes(
    app: "Litestar",
    output: "Optional[Path]",
    declarations: "Optional[Path]",
    verbose: "bool",
) -> None:
    """Generate the routes module.

    Args:
        app: The Litestar application instance.
        output: The path of the routes module. Uses FileRouterConfig if not provided.
        declarations: The path of the module declaration. Uses FileRouterConfig if not provided.
        verbose: Whether to enable verbose output.

    Raises:
        LitestarCLIException: If the routes cannot be compiled or written.
    """
    from litestar.cli._utils import LitestarCLIException, console  # pyright: ignore[reportPrivateImportUsage]

    from litestar_file_router.compiler import compile_routes_module, write_module_declaration, write_routes_module
    from litestar_file_router.exceptions import FileRouterError
    from litestar_file_router.utils import log_info, log_success

    if verbose:
        app.debug = True
    config = _get_config(app)
    output = output or Path(config.output)

    console.rule(f"[yellow]Generating routes from {escape(str(config.root))}[/]", align="left")
    try:
        module = compile_routes_module(config)
        if verbose:
            console.print(f"[dim]  {len(module.bindings)} route bindings[/]")
        if write_routes_module(config, output, module=module):
            log_success(f"Routes module written to {output}")
        else:
            log_info(f"Routes module {output} is up to date")

        declarations = declarations or config.declarations_path  # type: ignore[assignment]
        if declarations is not None:
            if write_module_declaration(config, Path(declarations)):
                log_success(f"Module declaration written to {declarations}")
            else:
                log_info(f"Module declaration {declarations} is up to date")
    except FileRouterError as e:
        raise LitestarCLIException(str(e)) from e
    except OSError as e:  # pragma: no cover
        msg = f"Failed to write routes to path {output}"
        raise LitestarCLIException(msg) from e


@file_routes_group.command(
    name="tree",
    help="Show the route tree compiled from the pages directory.",
)
@option("--json", "as_json", type=bool, help="Print the tree as JSON.", default=False, is_flag=True)
@option(
    "--output",
    type=ClickPath(dir_okay=False, path_type=Path),
    help="Write the JSON tree to this path instead of printing it.",
    default=None,
    required=False,
)
def show_tree(app: "Litestar", as_json: "bool", output: "Optional[Path]") -> None:
    """Show the compiled route tree.

    Args:
        app: The Litestar application instance.
        as_json: Print JSON instead of a rich tree.
        output: Write the JSON tree to a file.

    Raises:
        LitestarCLIException: If the routes cannot be compiled.
    """
    from litestar.cli._utils import LitestarCLIException, console  # pyright: ignore[reportPrivateImportUsage]
    from rich.tree import Tree

    from litestar_file_router.codegen import count_route_nodes, encode_deterministic_json, generate_routes_json
    from litestar_file_router.compiler import compile_route_tree, export_routes_json
    from litestar_file_router.exceptions import FileRouterError
    from litestar_file_router.utils import log_info, log_success

    config = _get_config(app)
    try:
        if output is not None:
            if export_routes_json(config, output):
                log_success(f"Route tree exported to {output}")
            else:
                log_info(f"Route tree {output} is up to date")
            return
        tree = compile_route_tree(config)
    except FileRouterError as e:
        raise LitestarCLIException(str(e)) from e

    if as_json:
        payload: dict[str, Any] = generate_routes_json(tree)
        echo(encode_deterministic_json(payload).decode(), nl=False)
        return

    root = Tree(f"[yellow]{escape(str(config.root))}[/]")
    _add_tree_nodes(root, tree)
    console.print(root)
    console.print(f"[dim]  {count_route_nodes(tree)} routes[/]")


@file_routes_group.command(
    name="types",
    help="Generate the TypeScript declaration of the routes module.",
)
@option(
    "--output",
    type=ClickPath(dir_okay=False, path_type=Path),
    help="The path of the declaration file.  Defaults to the configured declarations path.",
    default=None,
    required=False,
)
def generate_types(app: "Litestar", output: "Optional[Path]") -> None:
    """Generate the routes module declaration.

    Args:
        app: The Litestar application instance.
        output: The path of the declaration file.

    Raises:
        LitestarCLIException: If no path is configured or the file cannot be written.
    """
    from litestar.cli._utils import LitestarCLIException  # pyright: ignore[reportPrivateImportUsage]

    from litestar_file_router.compiler import write_module_declaration
    from litestar_file_router.utils import log_info, log_success

    config = _get_config(app)
    target = output or config.declarations_path
    if target is None:
        msg = "No declarations path configured. Pass --output or set FileRouterConfig.declarations_path."
        raise LitestarCLIException(msg)
    try:
        if write_module_declaration(config, Path(target)):
            log_success(f"Module declaration written to {target}")
        else:
            log_info(f"Module declaration {target} is up to date")
    except OSError as e:  # pragma: no cover
        msg = f"Failed to write module declaration to path {target}"
        raise LitestarCLIException(msg) from e


@file_routes_group.command(
    name="init",
    help="Write a router component that renders the generated routes.",
)
@option(
    "--output",
    type=ClickPath(dir_okay=False, path_type=Path),
    help="The path of the router component.  Defaults to the configured router path.",
    default=None,
    required=False,
)
@option("--overwrite", type=bool, help="Overwrite an existing router component.", default=False, is_flag=True)
@option(
    "--use-module-name",
    type=bool,
    help="Import the routes from the configured module name instead of the generated file.",
    default=False,
    is_flag=True,
)
def init_router(app: "Litestar", output: "Optional[Path]", overwrite: "bool", use_module_name: "bool") -> None:
    """Scaffold the router component.

    Args:
        app: The Litestar application instance.
        output: The path of the router component. Uses FileRouterConfig if not provided.
        overwrite: Whether to replace an existing component.
        use_module_name: Whether to import ``module_name`` instead of the routes module path.

    Raises:
        LitestarCLIException: If the component cannot be written.
    """
    from litestar.cli._utils import LitestarCLIException, console  # pyright: ignore[reportPrivateImportUsage]

    from litestar_file_router.scaffolding import write_router_scaffold
    from litestar_file_router.utils import log_info, log_success

    config = _get_config(app)
    target = Path(output or config.router_path)

    console.rule("[yellow]Initializing router component[/]", align="left")
    if target.exists() and not overwrite:
        console.print(f"[yellow]Skipping {escape(str(target))} (exists)[/]")
        return
    try:
        if write_router_scaffold(config, target, overwrite=overwrite, use_module_name=use_module_name):
            log_success(f"Router component written to {target}")
        else:
            log_info(f"Router component {target} is up to date")
    except OSError as e:  # pragma: no cover
        msg = f"Failed to write router component to path {target}"
        raise LitestarCLIException(msg) from e
