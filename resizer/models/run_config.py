"""Параметры одного запуска, собранные из командной строки."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from resizer.models.image_model import Dimensions


class OutputFormat(Enum):
    """Формат вывода из `--format`. Проверяется, но запись всегда идёт в PNG."""
    PNG = "png"
    JPG = "jpg"
    GIF = "gif"

    @classmethod
    def from_token(cls, token: str) -> Optional["OutputFormat"]:
        try:
            return cls(token.lower())
        except ValueError:
            return None


class ScalingHint(Enum):
    """Подсказка алгоритма масштабирования из `--scalinghint`; не влияет на результат."""
    NEAREST = "n"
    BICUBIC = "b"

    @classmethod
    def from_token(cls, token: str) -> Optional["ScalingHint"]:
        try:
            return cls(token.lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class RunConfiguration:
    """Неизменяемая конфигурация запуска.

    Fields:
        dimensions: Целевой размер.
        input_paths: Пути к файлам в порядке командной строки (без дедупликации).
        output_format: Запрошенный формат; принят, но не применяется.
        scaling_hint: Подсказка масштабирования; принята, но не применяется.
        output_dir_option: Значение `--output`; выходная папка всегда `output/`.
        verbose: Подробное логирование.
    """
    dimensions: Dimensions
    input_paths: Tuple[str, ...] = ()
    output_format: Optional[OutputFormat] = None
    scaling_hint: Optional[ScalingHint] = None
    output_dir_option: Optional[str] = None
    verbose: bool = False


@dataclass(frozen=True)
class RunReport:
    """Итоги запуска: сколько файлов запрошено, загружено и записано."""
    requested: int
    loaded: int
    written: int
    skipped_load: Tuple[str, ...] = ()
    skipped_write: Tuple[str, ...] = ()
