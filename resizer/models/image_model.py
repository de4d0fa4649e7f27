"""Модели данных для изображений.

Принципы:
- SRP: только структуры данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image


@dataclass(frozen=True)
class Dimensions:
    """Целевой размер в пикселях; обе стороны строго положительные."""
    width: int
    height: int

    def as_tuple(self) -> Tuple[int, int]:
        return self.width, self.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL (режим исходного файла сохраняется).
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGB", "P" или "L".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]


@dataclass(frozen=True)
class LoadResult:
    """Результат загрузки одного файла: либо `image`, либо `error`."""
    path: str
    image: Optional[ImageData] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.image is not None


@dataclass(frozen=True)
class WriteResult:
    """Результат записи одного изображения: путь к выходному файлу или ошибка."""
    path: str
    output_path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.output_path is not None
