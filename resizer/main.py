"""Точка входа в приложение."""
from __future__ import annotations

from typing import Optional, Sequence

from resizer.app import ResizerApp
from resizer.constants import EXIT_USAGE
from resizer.models.errors import MalformedArguments


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Создаёт приложение, выполняет один запуск и возвращает код выхода."""
    app = ResizerApp()
    try:
        return app.run(argv)
    except MalformedArguments:
        # message and help are already printed
        return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
