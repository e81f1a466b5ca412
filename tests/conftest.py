"""Test configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Optional

import pytest

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def asdfrc() -> str:
    """Path to an asdfrc with every setting changed from its default."""
    return str(TESTDATA / "asdfrc")


@pytest.fixture
def empty_asdfrc() -> str:
    """Path to an empty asdfrc."""
    return str(TESTDATA / "empty-asdfrc")


@pytest.fixture
def make_env() -> Callable[..., Callable[[str], Optional[str]]]:
    """Build an environment lookup from keyword arguments."""

    def _make_env(**variables: str) -> Callable[[str], Optional[str]]:
        variables.setdefault("HOME", "/home/tester")
        return variables.get

    return _make_env


@pytest.fixture(autouse=True)
def clean_asdf_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's asdf variables out of the tests."""
    for name in (
        "ASDF_DATA_DIR",
        "ASDF_CONFIG_FILE",
        "ASDF_CONCURRENCY",
        "ASDF_DEFAULT_TOOL_VERSIONS_FILENAME",
    ):
        monkeypatch.delenv(name, raising=False)
