"""Контроллер приложения: оркестрация консоли и сервисов.

Запуск проходит состояния
`COLLECTING -> CONFIRMING -> EXTRACTING -> COMPLETED | FAILED`,
либо заканчивается `ABORTED`, если пользователь не подтвердил параметры.
Ошибки валидации (`SkyboxError`) поднимаются до извлечения и обрабатываются
вызывающим кодом.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from skybox_slicer.models.job_model import BatchResult, Job
from skybox_slicer.models.layout_model import Layout, resolve, suggest_face_size
from skybox_slicer.services.extract_service import ExtractService
from skybox_slicer.services.image_service import ImageService
from skybox_slicer.services.region_service import RegionService
from skybox_slicer.ui.console import Console

logger = logging.getLogger(__name__)


class RunState(Enum):
    COLLECTING = "collecting"
    CONFIRMING = "confirming"
    EXTRACTING = "extracting"
    COMPLETED = "completed"
    FAILED = "failed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class RunOutcome:
    state: RunState
    job: Optional[Job] = None
    batch: Optional[BatchResult] = None

    @property
    def ok(self) -> bool:
        return self.state is RunState.COMPLETED


@dataclass
class AppController:
    """Связывает консоль с прикладной логикой.

    Ответственности:
    - Сбор недостающих параметров через `Console`.
    - Сборка `Job` и расчёт областей через `RegionService`.
    - Проверка областей по реальным размерам исходника (`ImageService.probe`).
    - Запуск `ExtractService` и вывод итога.
    """
    console: Console
    image_service: ImageService = field(default_factory=ImageService)
    region_service: RegionService = field(default_factory=RegionService)
    extract_service: Optional[ExtractService] = None
    state: RunState = RunState.COLLECTING

    def __post_init__(self) -> None:
        if self.extract_service is None:
            self.extract_service = ExtractService(self.image_service)

    def run(
        self,
        source: Union[str, Path, None] = None,
        face_size: Optional[int] = None,
        output_dir: Union[str, Path, None] = None,
        layout: Union[Layout, str, None] = None,
        assume_yes: bool = False,
    ) -> RunOutcome:
        """Выполняет один запуск; аргументы, равные None, запрашиваются у пользователя."""
        self.state = RunState.COLLECTING
        if source is None:
            source = self.console.ask_path()
        image = self.image_service.probe(source)

        if face_size is None:
            face_size = self.console.ask_face_size(
                default=suggest_face_size(image.width, image.height, layout or Layout.TOP_BOTTOM_FRONT) or None
            )
        if output_dir is None:
            output_dir = self.console.ask_save_dir()
        if layout is None:
            layout = self.console.ask_layout()

        job = Job(source=image.path, face_size=face_size, output_dir=output_dir, layout=layout)
        regions = self.region_service.compute_regions(job.face_size, resolve(job.layout))
        self.region_service.check_bounds(regions, image.width, image.height)
        logger.info("Job: %s", job)

        self.state = RunState.CONFIRMING
        self.console.show_parameters(job)
        if not assume_yes and not self.console.ask_confirmation():
            self.state = RunState.ABORTED
            self.console.show_aborted()
            return RunOutcome(state=self.state, job=job)

        self.state = RunState.EXTRACTING
        self.console.show_processing()
        batch = self.extract_service.extract_job(job, regions)

        if batch.ok:
            self.state = RunState.COMPLETED
            self.console.show_success(job, batch)
        else:
            self.state = RunState.FAILED
            self.console.show_failure(batch)
        return RunOutcome(state=self.state, job=job, batch=batch)
