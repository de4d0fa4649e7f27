from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Tuple

import pytest

from resizer.logging_config import LOGGER_NAME
from tests.helpers import gradient_image


@pytest.fixture(autouse=True)
def reset_resizer_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def workdir(tmp_path, monkeypatch) -> Path:
    """Рабочая папка теста; `output/` создаётся относительно неё."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_image(tmp_path) -> Callable[..., Path]:
    def _make(
        name: str = "sample.png",
        size: Tuple[int, int] = (64, 48),
        mode: str = "RGB",
        fmt: Optional[str] = None,
    ) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        gradient_image(size, mode).save(path, format=fmt)
        return path

    return _make
