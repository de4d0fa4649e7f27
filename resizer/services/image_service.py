"""Загрузка изображений с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за загрузку и базовое извлечение свойств.
- Ошибки отдельных файлов не прерывают пакет: они возвращаются как `LoadResult`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from PIL import Image, UnidentifiedImageError

from resizer.models.errors import FileDecodeFailure
from resizer.models.image_model import ImageData, LoadResult

logger = logging.getLogger(__name__)


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Файл читается полностью и закрывается сразу, режим пикселей не меняется.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image`, размерами, режимом и размером файла.

        Raises:
            FileDecodeFailure: если файла нет, он не читается или не распознан как изображение.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileDecodeFailure(str(file_path), "file not found")

        try:
            with Image.open(path) as opened:
                opened.load()
                pil_image = opened.copy()
        except UnidentifiedImageError as exc:
            raise FileDecodeFailure(str(file_path), "not an image") from exc
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            raise FileDecodeFailure(str(file_path), str(exc)) from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            size_bytes=size_bytes,
        )

    def load_images(self, file_paths: Iterable[str]) -> List[LoadResult]:
        """Загружает файлы по порядку; каждый неудачный файл логируется и пропускается."""
        results: List[LoadResult] = []
        for file_path in file_paths:
            try:
                image_data = self.load_image(file_path)
            except FileDecodeFailure as exc:
                logger.warning("File %s missing, corrupted or not supported, ignoring...", file_path)
                logger.debug("Decode failure: %s", exc)
                results.append(LoadResult(path=file_path, error=exc.reason or str(exc)))
                continue
            logger.debug(
                "Loaded %s (%dx%d, %s, %s bytes)",
                file_path,
                image_data.width,
                image_data.height,
                image_data.mode,
                "?" if image_data.size_bytes is None else image_data.size_bytes,
            )
            results.append(LoadResult(path=file_path, image=image_data))
        return results

    @staticmethod
    def build_registry(results: Iterable[LoadResult]) -> Dict[str, ImageData]:
        """Собирает словарь путь -> изображение из успешных результатов.

        Повторный путь перезаписывает предыдущее значение.
        """
        registry: Dict[str, ImageData] = {}
        for result in results:
            if result.image is not None:
                registry[result.path] = result.image
        return registry
