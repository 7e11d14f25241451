from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_configure() -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def parse_all() -> Callable[..., list]:
    from loosever import parse

    def _parse_all(texts: list[str]) -> list:
        return [parse(text) for text in texts]

    return _parse_all
