"""Чтение исходной текстуры с диска.

Принципы:
- SRP: класс отвечает только за открытие файла и извлечение его свойств.
- Ошибки Pillow и ОС приводятся к `SourceUnreadable`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from skybox_slicer.config import MAX_IMAGE_PIXELS
from skybox_slicer.models.errors import SourceUnreadable
from skybox_slicer.models.image_model import ImageData

logger = logging.getLogger(__name__)

Image.MAX_IMAGE_PIXELS = MAX_IMAGE_PIXELS


class ImageService:
    def open_image(self, file_path: str | Path) -> Image.Image:
        """Открывает изображение с диска и загружает пиксели.

        Возвращённый объект не связан с файлом: исходник можно перезаписать,
        не испортив уже загруженные пиксели.

        Raises:
            SourceUnreadable: если файла нет или он не распознан как изображение.
        """
        path = self._existing_file(file_path)
        try:
            with Image.open(path) as image:
                image.load()
                # copy() отвязывает пиксели от закрываемого файла
                return image.copy()
        except UnidentifiedImageError as exc:
            raise SourceUnreadable(path, "файл не является изображением") from exc
        except Image.DecompressionBombError as exc:
            raise SourceUnreadable(path, str(exc)) from exc
        except OSError as exc:
            raise SourceUnreadable(path, str(exc)) from exc

    def probe(self, file_path: str | Path) -> ImageData:
        """Читает размеры и формат без декодирования пикселей.

        Returns:
            `ImageData` с размерами, режимом, форматом и размером файла.

        Raises:
            SourceUnreadable: если файла нет или он не распознан как изображение.
        """
        path = self._existing_file(file_path)
        try:
            with Image.open(path) as image:
                width, height = image.size
                mode = image.mode
                image_format = image.format
        except UnidentifiedImageError as exc:
            raise SourceUnreadable(path, "файл не является изображением") from exc
        except Image.DecompressionBombError as exc:
            raise SourceUnreadable(path, str(exc)) from exc
        except OSError as exc:
            raise SourceUnreadable(path, str(exc)) from exc

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.debug("Probed %s: %dx%d %s %s", path, width, height, mode, image_format)
        return ImageData(
            path=path,
            width=width,
            height=height,
            mode=mode,
            format=image_format,
            size_bytes=size_bytes,
        )

    def _existing_file(self, file_path: str | Path) -> Path:
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise SourceUnreadable(path, "файл не найден")
        return path

