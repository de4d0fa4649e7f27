from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from resizer.constants import EXIT_FAILURE, EXIT_OK, OUTPUT_DIR
from resizer.controllers.app_controller import AppController
from resizer.logging_config import configure_logging
from resizer.models.errors import OutputDirectoryCreationFailure
from resizer.models.run_config import RunReport
from resizer.services.argument_service import ArgumentService
from resizer.services.image_service import ImageService
from resizer.services.process_service import ProcessService
from resizer.services.writer_service import WriterService


class ResizerApp:
    def __init__(self, output_dir: Path = OUTPUT_DIR) -> None:
        self._logger = configure_logging()

        self._arguments = ArgumentService()
        self._controller = AppController(
            image_service=ImageService(),
            writer_service=WriterService(output_dir=output_dir, process_service=ProcessService()),
        )
        self.last_report: Optional[RunReport] = None

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        # MalformedArguments propagates to the entry point
        outcome = self._arguments.parse(argv)
        if not outcome.should_run:
            return outcome.exit_code

        config = outcome.config
        if config.verbose:
            self._logger = configure_logging(verbose=True)

        try:
            self.last_report = self._controller.run(config)
        except OutputDirectoryCreationFailure as exc:
            self._logger.error(str(exc))
            return EXIT_FAILURE
        return EXIT_OK
