"""Раскладки граней в текстуре скайбокса.

Текстура рассматривается как сетка квадратных ячеек. Раскладка задаёт для
каждой грани ячейку `(column, row)` в фиксированном порядке `FACE_NAMES`.
Обе встроенные раскладки — крест 4x3: Left, Front, Right, Back идут в средней
строке, а Top и Bottom стоят над и под столбцом Front либо Right.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple, Union

from skybox_slicer.models.errors import UnknownLayout

Cell = Tuple[int, int]

_SIDE_CELLS: Tuple[Cell, ...] = ((0, 1), (1, 1), (2, 1), (3, 1))


class Layout(Enum):
    TOP_BOTTOM_FRONT = "front"
    TOP_BOTTOM_RIGHT = "right"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: Dict[Layout, str] = {
    Layout.TOP_BOTTOM_FRONT: "Top над гранью Front, Bottom под гранью Front",
    Layout.TOP_BOTTOM_RIGHT: "Top над гранью Right, Bottom под гранью Right",
}

_CELLS: Dict[Layout, Tuple[Cell, ...]] = {
    Layout.TOP_BOTTOM_FRONT: _SIDE_CELLS + ((1, 0), (1, 2)),
    Layout.TOP_BOTTOM_RIGHT: _SIDE_CELLS + ((2, 0), (2, 2)),
}


def parse_layout(layout_id: Union[Layout, str]) -> Layout:
    """Приводит идентификатор к `Layout`.

    Принимает сам член перечисления, его значение (`"front"`) или имя
    (`"TOP_BOTTOM_FRONT"`) без учёта регистра.

    Raises:
        UnknownLayout: если идентификатор не соответствует ни одной раскладке.
    """
    if isinstance(layout_id, Layout):
        return layout_id
    if isinstance(layout_id, str):
        key = layout_id.strip()
        for layout in Layout:
            if key.lower() == layout.value or key.upper() == layout.name:
                return layout
    raise UnknownLayout(layout_id)


def resolve(layout_id: Union[Layout, str]) -> Tuple[Cell, ...]:
    """Возвращает шесть ячеек `(column, row)` в порядке `FACE_NAMES`."""
    return _CELLS[parse_layout(layout_id)]


def grid_shape(layout_id: Union[Layout, str]) -> Tuple[int, int]:
    """Размер неявной сетки `(columns, rows)`, занятой раскладкой."""
    cells = resolve(layout_id)
    columns = max(column for column, _row in cells) + 1
    rows = max(row for _column, row in cells) + 1
    return columns, rows


def suggest_face_size(width: int, height: int, layout_id: Union[Layout, str]) -> int:
    """Наибольший размер грани, при котором раскладка помещается в изображение."""
    columns, rows = grid_shape(layout_id)
    return min(width // columns, height // rows)
