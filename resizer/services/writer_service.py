"""Запись масштабированных изображений в выходную папку.

Принципы:
- SRP: сервис знает только про выходную папку, имена файлов и кодирование PNG.
- Масштабирование делегируется `ProcessService`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Mapping, Optional

from PIL import Image

from resizer.constants import OUTPUT_DIR, OUTPUT_ENCODING, OUTPUT_SUFFIX
from resizer.models.errors import FileWriteFailure, OutputDirectoryCreationFailure
from resizer.models.image_model import Dimensions, ImageData, WriteResult
from resizer.services.process_service import ProcessService

logger = logging.getLogger(__name__)

# PNG can't hold these modes directly
_CONVERT_TO_RGB = ("CMYK", "YCbCr", "LAB", "HSV")


class WriterService:
    def __init__(self, output_dir: Path = OUTPUT_DIR, process_service: Optional[ProcessService] = None) -> None:
        self.output_dir = Path(output_dir)
        self._process_service = process_service or ProcessService()

    def ensure_output_dir(self) -> Path:
        """Создаёт выходную папку (вместе с родительскими), если её нет.

        Raises:
            OutputDirectoryCreationFailure: если папку создать нельзя.
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputDirectoryCreationFailure(f"Cannot create output folder {self.output_dir}: {exc}") from exc
        return self.output_dir

    @staticmethod
    def output_file_name(file_path: str, dimensions: Dimensions) -> str:
        """`"{w}_x_{h} {имя исходного файла}.png"`; расширение исходника остаётся в имени."""
        return f"{dimensions.width}_x_{dimensions.height} {Path(file_path).name}{OUTPUT_SUFFIX}"

    def output_path(self, file_path: str, dimensions: Dimensions) -> Path:
        return self.output_dir / self.output_file_name(file_path, dimensions)

    def write_image(self, key: str, image_data: ImageData, dimensions: Dimensions) -> Path:
        """Масштабирует изображение и сохраняет его как PNG.

        Raises:
            FileWriteFailure: если файл не удалось закодировать или записать.
        """
        target = self.output_path(key, dimensions)
        scaled = self._process_service.scale_to(image_data.pil_image, dimensions)
        if scaled.mode in _CONVERT_TO_RGB:
            scaled = scaled.convert("RGB")
        try:
            scaled.save(target, format=OUTPUT_ENCODING)
        except (OSError, ValueError) as exc:
            raise FileWriteFailure(key, str(exc)) from exc
        return target

    def write_images(self, registry: Mapping[str, ImageData], dimensions: Dimensions) -> List[WriteResult]:
        """Записывает все изображения реестра; ошибки отдельных файлов логируются и пропускаются.

        Совпадающие имена не проверяются: более поздняя запись перезаписывает файл.
        """
        results: List[WriteResult] = []
        if not registry:
            return results

        self.ensure_output_dir()
        for key, image_data in registry.items():
            try:
                target = self.write_image(key, image_data, dimensions)
            except FileWriteFailure as exc:
                logger.warning("Cannot write %s to output folder. Ignoring...", key)
                logger.debug("Write failure: %s", exc)
                results.append(WriteResult(path=key, error=exc.reason or str(exc)))
                continue
            logger.debug("Wrote %s", target)
            results.append(WriteResult(path=key, output_path=target))
        return results
