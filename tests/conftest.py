from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Environment variables that may affect test behavior - clear before each test
_FILE_ROUTER_ENV_VARS = [
    "FILE_ROUTER_ROOT",
    "FILE_ROUTER_GENERATE",
]


@pytest.fixture(autouse=True)
def clean_file_router_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear file router environment variables before each test for isolation."""
    for var in _FILE_ROUTER_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def create_pages(tmp_path: Path) -> Callable[..., Path]:
    """Create view files below ``tmp_path / "pages"`` and return the pages directory."""

    def _create(*relative_paths: str) -> Path:
        pages = tmp_path / "pages"
        pages.mkdir(parents=True, exist_ok=True)
        for relative in relative_paths:
            file_path = pages / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text("export default function Page() { return null }\n")
        return pages

    return _create
