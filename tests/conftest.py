from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from mdpages.logging import reset_logging
from tests._fixtures.content_builder import ContentBuilder


@pytest.fixture
def content_builder(tmp_path: Path) -> ContentBuilder:
    """Provide a reusable content builder rooted at the pytest tmp_path."""
    return ContentBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_mdpages_logger() -> Iterator[None]:
    """Drop handlers installed by CLI runs so later tests start clean."""
    yield
    reset_logging()
