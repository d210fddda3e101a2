"""Ошибки предметной области.

Ошибки валидации (`UnknownLayout`, `InvalidFaceSize`, `RegionOutOfBounds`)
прерывают запуск до извлечения граней. Ошибки чтения и записи отдельной
грани (`SourceUnreadable`, `WriteFailure`) попадают в её `ExtractionResult`.
"""
from __future__ import annotations

from typing import Iterable, Optional


class SkyboxError(Exception):
    """Базовая ошибка приложения."""


class UnknownLayout(SkyboxError, ValueError):
    def __init__(self, layout_id: object) -> None:
        super().__init__(f"Неизвестная раскладка: {layout_id!r}")
        self.layout_id = layout_id


class InvalidFaceSize(SkyboxError, ValueError):
    def __init__(self, face_size: object) -> None:
        super().__init__(f"Размер грани должен быть целым положительным числом, получено: {face_size!r}")
        self.face_size = face_size


class SourceUnreadable(SkyboxError, OSError):
    def __init__(self, path: object, reason: Optional[str] = None) -> None:
        message = f"Не удалось прочитать изображение: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


class RegionOutOfBounds(SkyboxError, ValueError):
    """Область обрезки выходит за пределы исходного изображения.

    Fields:
        faces: Имена граней, чьи области не помещаются.
        width: Ширина исходного изображения, px.
        height: Высота исходного изображения, px.
    """

    def __init__(self, faces: Iterable[str], width: int, height: int) -> None:
        self.faces = tuple(faces)
        self.width = width
        self.height = height
        super().__init__(
            f"Грани {', '.join(self.faces)} выходят за пределы изображения {width}x{height}"
        )


class WriteFailure(SkyboxError, OSError):
    def __init__(self, path: object, reason: Optional[str] = None) -> None:
        message = f"Не удалось сохранить грань: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path
