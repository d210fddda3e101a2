from __future__ import annotations

from typing import Iterable, Sequence, Tuple

import numpy as np

from skybox_slicer.config import FACE_NAMES
from skybox_slicer.models.errors import RegionOutOfBounds
from skybox_slicer.models.job_model import CropRegion, validate_face_size
from skybox_slicer.models.layout_model import Cell


class RegionService:
    def compute_regions(self, face_size: int, cells: Iterable[Cell]) -> Tuple[CropRegion, ...]:
        """
        Переводит ячейки сетки `(column, row)` в прямоугольники обрезки:
        left = column * face_size, top = row * face_size, стороны равны face_size.
        """
        size = validate_face_size(face_size)
        # object: целые Python без переполнения int64 при огромных размерах
        grid = np.asarray(list(cells), dtype=object).reshape(-1, 2)
        offsets = grid * size
        return tuple(
            CropRegion(width=size, height=size, left=int(left), top=int(top))
            for left, top in offsets
        )

    def check_bounds(
        self,
        regions: Sequence[CropRegion],
        width: int,
        height: int,
        faces: Sequence[str] = FACE_NAMES,
    ) -> None:
        """
        Проверяет, что все области лежат внутри изображения width x height.
        Бросает `RegionOutOfBounds` со списком всех неподходящих граней.
        """
        if not regions:
            return
        # (N, 4): left, top, right, lower
        boxes = np.array([region.box for region in regions], dtype=object)
        outside = (
            (boxes[:, 0] < 0)
            | (boxes[:, 1] < 0)
            | (boxes[:, 2] > width)
            | (boxes[:, 3] > height)
        ).astype(bool)
        if outside.any():
            raise RegionOutOfBounds(
                [faces[i] for i in np.flatnonzero(outside)], width=width, height=height
            )
