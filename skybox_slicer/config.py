"""Константы приложения.

Файла конфигурации и переменных окружения нет: всё, что может меняться
от запуска к запуску, задаётся аргументами командной строки.
"""
from __future__ import annotations

from typing import Optional, Tuple

APP_NAME = "Skybox Slicer"

# Порядок граней фиксирован: по нему индексируются ячейки раскладки и имена файлов.
FACE_NAMES: Tuple[str, ...] = ("Left", "Front", "Right", "Back", "Top", "Bottom")

# Расширение результата, если у исходного файла его нет.
DEFAULT_EXTENSION = ".png"

# По одному потоку на грань.
MAX_WORKERS = len(FACE_NAMES)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

# Предел Pillow против decompression bomb. Крест 4x3 с гранями 8192 px
# (32768x24576) должен открываться; None снимает ограничение полностью.
MAX_IMAGE_PIXELS: Optional[int] = 32768 * 24576
