"""Иерархия ошибок утилиты.

Ошибки конфигурации (опции, размеры, формат) прерывают запуск до начала работы
с изображениями. Ошибки отдельных файлов (`FileDecodeFailure`,
`FileWriteFailure`) перехватываются сервисами и превращаются в результаты.
"""
from __future__ import annotations


class ResizerError(Exception):
    """Базовая ошибка утилиты."""


class MissingRequiredOption(ResizerError):
    pass


class InvalidDimensions(ResizerError):
    pass


class InvalidFormat(ResizerError):
    pass


class MissingFileListArgument(ResizerError):
    pass


class MalformedArguments(ResizerError):
    """Синтаксическая ошибка командной строки; завершает процесс."""


class FileDecodeFailure(ResizerError):
    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"{path}: {reason}" if reason else path)
        self.path = path
        self.reason = reason


class FileWriteFailure(ResizerError):
    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f"{path}: {reason}" if reason else path)
        self.path = path
        self.reason = reason


class OutputDirectoryCreationFailure(ResizerError):
    pass
