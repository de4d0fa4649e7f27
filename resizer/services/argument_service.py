"""Разбор командной строки и сборка `RunConfiguration`.

Ошибки конфигурации печатают сообщение и справку и возвращают ненулевой код
выхода; работа с изображениями в этом случае не начинается. Синтаксические
ошибки argparse поднимаются как `MalformedArguments`.
"""
from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

from resizer.constants import (
    ARG_DIMENSIONS,
    ARG_DIMENSIONS_SHORT,
    ARG_FORMAT,
    ARG_FORMAT_SHORT,
    ARG_HELP,
    ARG_HELP_SHORT,
    ARG_HINT,
    ARG_HINT_SHORT,
    ARG_IMAGES,
    ARG_OUTPUT,
    ARG_OUTPUT_SHORT,
    ARG_VERBOSE,
    ARG_VERBOSE_SHORT,
    ARG_VERSION,
    EXIT_FAILURE,
    EXIT_OK,
    OUTPUT_IMAGE_FORMATS,
    SUPPORTED_SCALING_HINTS,
    USAGE,
    VERSION,
)
from resizer.models.errors import (
    InvalidDimensions,
    InvalidFormat,
    MalformedArguments,
    MissingFileListArgument,
    MissingRequiredOption,
)
from resizer.models.image_model import Dimensions
from resizer.models.run_config import OutputFormat, RunConfiguration, ScalingHint

logger = logging.getLogger(__name__)

DIMENSIONS_SEPARATOR = "x"
PATH_SEPARATOR = ","


def parse_dimensions(value: str) -> Dimensions:
    """Разбирает строку вида "1280x720".

    Raises:
        InvalidDimensions: нет разделителя `x`, частей не две или часть не положительное целое.
    """
    parts = value.split(DIMENSIONS_SEPARATOR)
    if len(parts) != 2:
        raise InvalidDimensions(f"Expected WIDTHxHEIGHT, got {value!r}")
    numbers: List[int] = []
    for part in parts:
        if not part.isdecimal():
            raise InvalidDimensions(f"Not a positive integer: {part!r} in {value!r}")
        try:
            number = int(part)
        except ValueError as exc:
            raise InvalidDimensions(f"Not a positive integer: {part!r} in {value!r}") from exc
        if number <= 0:
            raise InvalidDimensions(f"Dimensions must be positive, got {value!r}")
        numbers.append(number)
    return Dimensions(width=numbers[0], height=numbers[1])


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise MalformedArguments(message)


@dataclass(frozen=True)
class ParseOutcome:
    """Итог разбора: конфигурация для запуска или код выхода без запуска."""
    config: Optional[RunConfiguration]
    exit_code: int = EXIT_OK

    @property
    def should_run(self) -> bool:
        return self.config is not None


class ArgumentService:
    def __init__(self) -> None:
        # "-d/--dimensions" style names of the options that take a value
        self._value_options: Set[str] = set()
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        parser = _ArgumentParser(
            prog="resizer",
            usage=USAGE,
            description="Resizes a list of images and saves them to the output folder.",
            add_help=False,
            exit_on_error=False,
        )
        # required
        dimensions = parser.add_argument(
            f"-{ARG_DIMENSIONS_SHORT}", f"--{ARG_DIMENSIONS}", metavar="WxH",
            help="Target image dimensions in pixels (e.g 1280x720)",
        )
        # optional
        output_format = parser.add_argument(
            f"-{ARG_FORMAT_SHORT}", f"--{ARG_FORMAT}", metavar="FORMAT",
            help=f"Image output format ({','.join(OUTPUT_IMAGE_FORMATS)})",
        )
        output = parser.add_argument(
            f"-{ARG_OUTPUT_SHORT}", f"--{ARG_OUTPUT}", metavar="DIR",
            help="Image output folder",
        )
        hint = parser.add_argument(
            f"-{ARG_HINT_SHORT}", f"--{ARG_HINT}", metavar="HINT",
            help=f"Scaling hint ({', '.join(SUPPORTED_SCALING_HINTS)})",
        )
        parser.add_argument(
            f"-{ARG_HELP_SHORT}", f"--{ARG_HELP}", action="store_true",
            help="Shows this help message.",
        )
        parser.add_argument(
            f"-{ARG_VERBOSE_SHORT}", f"--{ARG_VERBOSE}", action="store_true",
            help="Verbose output.",
        )
        parser.add_argument(
            f"--{ARG_VERSION}", action="store_true",
            help="Shows the version and exits.",
        )
        parser.add_argument(
            ARG_IMAGES, nargs="*", metavar="IMAGES",
            help="Comma-separated list of image files",
        )
        self._value_options = {"/".join(action.option_strings) for action in (dimensions, output_format, output, hint)}
        return parser

    def print_help(self) -> None:
        self.parser.print_help()

    def _abort(self, message: str) -> ParseOutcome:
        logger.error(message)
        self.print_help()
        return ParseOutcome(config=None, exit_code=EXIT_FAILURE)

    def _report_malformed(self) -> None:
        logger.error("There was a problem parsing the command line arguments, please check your command.")
        self.print_help()

    def parse(self, argv: Optional[Sequence[str]] = None) -> ParseOutcome:
        """Разбирает аргументы и возвращает `ParseOutcome`.

        Raises:
            MalformedArguments: синтаксическая ошибка командной строки (неизвестная опция и т.п.).
        """
        try:
            namespace = self.parser.parse_args(None if argv is None else list(argv))
        except argparse.ArgumentError as exc:
            if exc.argument_name in self._value_options:
                # option given without its value
                return self._abort(str(exc))
            self._report_malformed()
            raise MalformedArguments(str(exc)) from exc
        except MalformedArguments:
            self._report_malformed()
            raise

        if namespace.help:
            self.print_help()
            return ParseOutcome(config=None, exit_code=EXIT_OK)

        if namespace.version:
            print(f"{self.parser.prog} {VERSION}")
            return ParseOutcome(config=None, exit_code=EXIT_OK)

        try:
            if namespace.dimensions is None:
                raise MissingRequiredOption(f"Missing required option: {ARG_DIMENSIONS_SHORT}")

            try:
                input_paths = self._input_paths(namespace.images)
            except MissingFileListArgument as exc:
                # not fatal: the run goes on with nothing to load
                logger.warning(str(exc))
                self.print_help()
                input_paths = ()

            try:
                dimensions = parse_dimensions(namespace.dimensions)
            except InvalidDimensions as exc:
                logger.debug("Invalid dimensions: %s", exc)
                raise InvalidDimensions("Dimension argument was not correct!") from exc

            if namespace.output is not None:
                logger.info("Output folder not implemented!")

            output_format = None
            if namespace.format is not None:
                output_format = OutputFormat.from_token(namespace.format)
                if output_format is None:
                    raise InvalidFormat("Error: Wrong output image format!")

            scaling_hint = None
            if namespace.scalinghint is not None:
                logger.info("Scaling hint not implemented!")
                scaling_hint = ScalingHint.from_token(namespace.scalinghint)
        except (MissingRequiredOption, InvalidDimensions, InvalidFormat) as exc:
            return self._abort(str(exc))

        config = RunConfiguration(
            dimensions=dimensions,
            input_paths=input_paths,
            output_format=output_format,
            scaling_hint=scaling_hint,
            output_dir_option=namespace.output,
            verbose=namespace.verbose,
        )
        logger.debug("Run configuration: %s", config)
        return ParseOutcome(config=config)

    @staticmethod
    def _input_paths(images: List[str]) -> Tuple[str, ...]:
        if not images:
            raise MissingFileListArgument("Missing argument: comma-separated list of images!")
        if len(images) > 1:
            logger.warning("Ignoring extra arguments: %s", " ".join(images[1:]))
        return tuple(path for path in images[0].split(PATH_SEPARATOR) if path)
