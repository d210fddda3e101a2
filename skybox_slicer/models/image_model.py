"""Модель исходной текстуры.

Принципы:
- SRP: только структура данных, без логики обработки.
- Неизменяемость (`frozen=True`): сведения о файле читаются один раз до извлечения.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from skybox_slicer.config import DEFAULT_EXTENSION


def writable_extension(suffix: str) -> str:
    """Возвращает `suffix`, если Pillow умеет сохранять в этот формат, иначе `DEFAULT_EXTENSION`.

    Часть форматов (например, PSD) Pillow только читает.
    """
    image_format = Image.registered_extensions().get(suffix.lower())
    if image_format is None or image_format not in Image.SAVE:
        return DEFAULT_EXTENSION
    return suffix


@dataclass(frozen=True)
class ImageData:
    """Метаданные исходного изображения.

    Fields:
        path: Путь к исходному файлу.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGBA".
        format: Формат, определённый PIL ("PNG", "JPEG"...), если известен.
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    width: int
    height: int
    mode: str
    format: Optional[str]
    size_bytes: Optional[int]

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height
