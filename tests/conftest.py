from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest
from PIL import Image

from skybox_slicer.ui.console import Console


def cell_color(column: int, row: int) -> Tuple[int, int, int]:
    return column * 60 + 10, row * 100 + 20, 200


def make_skybox(path: Path, face_size: int, columns: int = 4, rows: int = 3) -> Path:
    """Сетка columns x rows, каждая ячейка залита своим цветом."""
    image = Image.new("RGB", (columns * face_size, rows * face_size))
    for column in range(columns):
        for row in range(rows):
            cell = Image.new("RGB", (face_size, face_size), cell_color(column, row))
            image.paste(cell, (column * face_size, row * face_size))
    image.save(path)
    return path


@pytest.fixture
def skybox(tmp_path: Path) -> Path:
    return make_skybox(tmp_path / "sky.png", 32)


@pytest.fixture
def make_console() -> Callable[[Iterable[str]], Tuple[Console, io.StringIO]]:
    def factory(answers: Iterable[str]) -> Tuple[Console, io.StringIO]:
        pending = iter(answers)
        stream = io.StringIO()

        def fake_input(prompt: str) -> str:
            stream.write(prompt)
            try:
                return next(pending)
            except StopIteration:
                raise EOFError from None

        return Console(input_func=fake_input, stream=stream), stream

    return factory
