"""Console output helpers shared by the plugin and the CLI."""

from litestar.cli._utils import console  # pyright: ignore[reportPrivateImportUsage]

__all__ = (
    "console",
    "log_fail",
    "log_info",
    "log_success",
)

_TICK = "[bold green]✓[/]"
_INFO = "[cyan]•[/]"
_FAIL = "[red]x[/]"


def log_success(message: str) -> None:
    """Print a success message with consistent styling."""

    console.print(f"{_TICK} {message}")


def log_info(message: str) -> None:
    """Print an informational message with consistent styling."""

    console.print(f"{_INFO} {message}")


def log_fail(message: str) -> None:
    """Print an error message with consistent styling."""

    console.print(f"{_FAIL} {message}")
