"""Задание на нарезку и результаты извлечения граней.

Все модели неизменяемы: `Job` собирается один раз из проверенных данных
и передаётся на этап извлечения как значение.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Integral
from pathlib import Path
from typing import Optional, Tuple

from skybox_slicer.config import FACE_NAMES
from skybox_slicer.models.errors import InvalidFaceSize, SkyboxError
from skybox_slicer.models.image_model import writable_extension
from skybox_slicer.models.layout_model import Layout, parse_layout


def validate_face_size(face_size: object) -> int:
    """Проверяет размер грани и возвращает его как `int`.

    Raises:
        InvalidFaceSize: для `bool`, нецелых и неположительных значений.
    """
    if isinstance(face_size, bool) or not isinstance(face_size, Integral):
        raise InvalidFaceSize(face_size)
    if face_size <= 0:
        raise InvalidFaceSize(face_size)
    return int(face_size)


@dataclass(frozen=True)
class CropRegion:
    """Прямоугольник обрезки в пикселях."""
    width: int
    height: int
    left: int
    top: int

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """Кортеж `(left, upper, right, lower)` в формате `Image.crop`."""
        return self.left, self.top, self.left + self.width, self.top + self.height


@dataclass(frozen=True)
class Job:
    """Полностью заданные параметры одного запуска.

    Fields:
        source: Путь к текстуре скайбокса.
        face_size: Сторона грани, px.
        output_dir: Каталог для шести файлов граней.
        layout: Раскладка граней в текстуре.

    Raises:
        InvalidFaceSize: при недопустимом размере грани.
        UnknownLayout: при неизвестной раскладке.
    """
    source: Path
    face_size: int
    output_dir: Path
    layout: Layout

    def __post_init__(self) -> None:
        # frozen: нормализованные значения выставляются в обход __setattr__
        object.__setattr__(self, "source", Path(self.source))
        object.__setattr__(self, "face_size", validate_face_size(self.face_size))
        object.__setattr__(self, "output_dir", Path(self.output_dir))
        object.__setattr__(self, "layout", parse_layout(self.layout))

    @property
    def extension(self) -> str:
        return writable_extension(self.source.suffix)

    def output_path(self, face: str) -> Path:
        return self.output_dir / f"{face}{self.extension}"

    @property
    def output_paths(self) -> Tuple[Path, ...]:
        return tuple(self.output_path(face) for face in FACE_NAMES)


@dataclass(frozen=True)
class ExtractionResult:
    """Итог извлечения одной грани: путь к файлу либо причина отказа."""
    face: str
    region: CropRegion
    path: Optional[Path] = None
    error: Optional[SkyboxError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.path is not None


@dataclass(frozen=True)
class BatchResult:
    results: Tuple[ExtractionResult, ...]
    elapsed: float = field(default=0.0, compare=False)

    @property
    def ok(self) -> bool:
        return len(self.results) == len(FACE_NAMES) and all(r.ok for r in self.results)

    @property
    def failures(self) -> Tuple[ExtractionResult, ...]:
        return tuple(r for r in self.results if not r.ok)

    @property
    def written(self) -> Tuple[Path, ...]:
        return tuple(r.path for r in self.results if r.path is not None)
