"""Контроллер приложения: оркестрация сервисов загрузки, масштабирования и записи.

SOLID:
- SRP: класс управляет последовательностью шагов (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конкретные реализации подставляются снаружи.
Clean Code:
- Никакого глобального состояния: конфигурация и реестр передаются явно.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

from resizer.models.image_model import ImageData
from resizer.models.run_config import RunConfiguration, RunReport
from resizer.services.image_service import ImageService
from resizer.services.writer_service import WriterService

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает шаги запуска: загрузка -> масштабирование -> запись.

    Ответственности:
    - Загрузка изображений через `ImageService` и сборка реестра.
    - Масштабирование и запись через `WriterService`.
    - Подсчёт итогов запуска (`RunReport`).
    """
    image_service: ImageService = field(default_factory=ImageService)
    writer_service: WriterService = field(default_factory=WriterService)

    def run(self, config: RunConfiguration) -> RunReport:
        """Выполняет запуск по готовой конфигурации.

        Raises:
            OutputDirectoryCreationFailure: если выходную папку создать нельзя.
        """
        registry = self.load(config)
        write_results = self.writer_service.write_images(registry, config.dimensions)

        report = RunReport(
            requested=len(config.input_paths),
            loaded=len(registry),
            written=sum(1 for result in write_results if result.ok),
            skipped_load=tuple(p for p in config.input_paths if p not in registry),
            skipped_write=tuple(result.path for result in write_results if not result.ok),
        )
        if report.requested:
            logger.info(
                "Resized %d of %d image(s) into %s",
                report.written,
                report.requested,
                self.writer_service.output_dir,
            )
        return report

    # ---- Helpers ----
    def load(self, config: RunConfiguration) -> Dict[str, ImageData]:
        results = self.image_service.load_images(config.input_paths)
        return self.image_service.build_registry(results)
