"""Пакетное извлечение граней.

Исходник декодируется один раз до запуска пула, поэтому грань, чьё имя
совпадает с исходным файлом, не испортит остальные. Каждая грань затем
обрабатывается отдельной задачей: обрезать и сохранить. Задачи не зависят
друг от друга, ошибка одной грани записывается в её результат и не отменяет
остальные. Итог собирается только после завершения всех задач.
"""
from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Sequence, Tuple

from PIL import Image

from skybox_slicer.config import FACE_NAMES, MAX_WORKERS
from skybox_slicer.models.errors import SourceUnreadable, WriteFailure
from skybox_slicer.models.image_model import writable_extension
from skybox_slicer.models.job_model import BatchResult, CropRegion, ExtractionResult, Job
from skybox_slicer.services.image_service import ImageService

logger = logging.getLogger(__name__)


class ExtractService:
    def __init__(self, image_service: Optional[ImageService] = None, max_workers: int = MAX_WORKERS) -> None:
        self._image_service = image_service or ImageService()
        self._max_workers = max_workers

    def extract(
        self,
        source: str | Path,
        output_dir: str | Path,
        regions: Sequence[CropRegion],
        faces: Sequence[str] = FACE_NAMES,
        extension: Optional[str] = None,
    ) -> BatchResult:
        """Извлекает грани и возвращает результаты в порядке `faces`.

        Args:
            source: Путь к текстуре.
            output_dir: Каталог результата; создаётся при необходимости.
            regions: Области обрезки, параллельно `faces`.
            faces: Имена граней, они же имена файлов.
            extension: Расширение файлов; по умолчанию берётся у `source`.
                Формат, который Pillow не умеет сохранять, заменяется на DEFAULT_EXTENSION.
        """
        if len(regions) != len(faces):
            raise ValueError(f"Ожидалось {len(faces)} областей, получено {len(regions)}")

        source = Path(source)
        output_dir = Path(output_dir)
        suffix = writable_extension(extension or source.suffix)
        self._prepare_output_dir(output_dir)

        started = time.perf_counter()
        try:
            image = self._image_service.open_image(source)
        except SourceUnreadable as exc:
            logger.error("%s", exc)
            results = tuple(
                ExtractionResult(face=face, region=region, error=exc)
                for face, region in zip(faces, regions)
            )
        else:
            with image:
                results = self._run_tasks(image, output_dir, suffix, regions, faces)
        elapsed = time.perf_counter() - started

        batch = BatchResult(results=results, elapsed=elapsed)
        logger.info(
            "Extracted %d/%d faces in %.3fs", len(batch.written), len(results), elapsed
        )
        return batch

    def extract_job(self, job: Job, regions: Sequence[CropRegion]) -> BatchResult:
        return self.extract(job.source, job.output_dir, regions, FACE_NAMES, extension=job.extension)

    def _run_tasks(
        self,
        image: Image.Image,
        output_dir: Path,
        suffix: str,
        regions: Sequence[CropRegion],
        faces: Sequence[str],
    ) -> Tuple[ExtractionResult, ...]:
        workers = max(1, min(self._max_workers, len(faces)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="face") as pool:
            futures = [
                pool.submit(self._extract_face, image, output_dir / f"{face}{suffix}", face, region)
                for face, region in zip(faces, regions)
            ]
            # futures в порядке граней, порядок завершения не важен
            return tuple(future.result() for future in futures)

    def _extract_face(self, image: Image.Image, target: Path, face: str, region: CropRegion) -> ExtractionResult:
        try:
            image.crop(region.box).save(target)
        except (OSError, ValueError, KeyError) as exc:
            # KeyError: у Pillow нет записи для формата
            error = WriteFailure(target, str(exc))
            error.__cause__ = exc
            logger.error("%s: %s", face, error)
            return ExtractionResult(face=face, region=region, error=error)

        logger.debug("%s saved to %s", face, target)
        return ExtractionResult(face=face, region=region, path=target)

    @staticmethod
    def _prepare_output_dir(output_dir: Path) -> None:
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            # грани всё равно обрабатываются, каждая получит свой WriteFailure
            logger.warning("Cannot create output directory %s: %s", output_dir, exc)
