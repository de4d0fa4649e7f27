"""Константы утилиты: версия, допустимые значения опций и имена аргументов CLI."""
from __future__ import annotations

from pathlib import Path

VERSION = "0.0.2"

OUTPUT_IMAGE_FORMATS = ("png", "jpg", "gif")
SUPPORTED_SCALING_HINTS = ("n", "b")

# results are always written here, relative to the working directory
OUTPUT_DIR = Path("output")
OUTPUT_ENCODING = "PNG"
OUTPUT_SUFFIX = ".png"

USAGE = "resizer [options ...] [/folder/image1,/folder/image2 ...]"

# command line arguments
ARG_DIMENSIONS_SHORT = "d"
ARG_OUTPUT_SHORT = "o"
ARG_FORMAT_SHORT = "f"
ARG_HINT_SHORT = "s"
ARG_HELP_SHORT = "h"
ARG_VERBOSE_SHORT = "v"

ARG_DIMENSIONS = "dimensions"
ARG_OUTPUT = "output"
ARG_FORMAT = "format"
ARG_HINT = "scalinghint"
ARG_HELP = "help"
ARG_VERBOSE = "verbose"
ARG_VERSION = "version"
ARG_IMAGES = "images"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
