"""Консольный интерфейс: вопросы пользователю и вывод итогов.

Принципы:
- SRP: только ввод/вывод, без логики нарезки.
- Источник ввода и поток вывода передаются снаружи, что позволяет
  подменять их в тестах.
"""
from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from skybox_slicer.config import APP_NAME
from skybox_slicer.models.errors import InvalidFaceSize, SkyboxError
from skybox_slicer.models.job_model import BatchResult, Job
from skybox_slicer.models.layout_model import Layout

_YES = ("y", "yes", "д", "да")
_NO = ("n", "no", "н", "нет")


class Console:
    def __init__(self, input_func: Callable[[str], str] = input, stream: Optional[TextIO] = None) -> None:
        self._input = input_func
        self._stream = stream if stream is not None else sys.stdout

    # ---- Вопросы ----
    def ask_path(self) -> str:
        return self._ask("Путь к текстуре скайбокса: ")

    def ask_face_size(self, default: Optional[int] = None) -> int:
        """Запрашивает размер грани; пустой ввод принимает `default`.

        Raises:
            InvalidFaceSize: если введено не целое положительное число.
        """
        hint = f" [{default}]" if default else ""
        text = self._ask(f"Размер грани, px{hint}: ")
        if not text and default:
            return default
        try:
            value = int(text)
        except ValueError as exc:
            raise InvalidFaceSize(text) from exc
        if value <= 0:
            raise InvalidFaceSize(value)
        return value

    def ask_save_dir(self) -> str:
        return self._ask("Каталог для сохранения граней: ")

    def ask_layout(self) -> Layout:
        """Выбор раскладки из пронумерованного списка; повторяет вопрос до корректного ответа."""
        layouts = list(Layout)
        self.print("Раскладка текстуры:")
        for number, layout in enumerate(layouts, start=1):
            self.print(f"  {number}) {layout.label}")
        while True:
            text = self._ask(f"Выберите раскладку [1-{len(layouts)}]: ")
            if text.isdigit() and 1 <= int(text) <= len(layouts):
                return layouts[int(text) - 1]
            self.print("Введите номер из списка.")

    def ask_confirmation(self) -> bool:
        while True:
            text = self._ask("Все параметры верны? [Y/n]: ").lower()
            if not text or text in _YES:
                return True
            if text in _NO:
                return False
            self.print("Ответьте y или n.")

    # ---- Вывод ----
    def print(self, text: str = "") -> None:
        self._stream.write(f"{text}\n")
        self._stream.flush()

    def show_welcome(self) -> None:
        self.print(APP_NAME)
        self.print("Нарезка текстуры скайбокса на шесть граней.")
        self.print()

    def show_parameters(self, job: Job) -> None:
        self.print("Параметры обработки:")
        self.print(f"• Путь: {job.source}")
        self.print(f"• Размер грани: {job.face_size}")
        self.print(f"• Каталог сохранения: {job.output_dir}")
        self.print(f"• Раскладка: {job.layout.label}")

    def show_processing(self) -> None:
        self.print("Обработка, не прерывайте...")

    def show_aborted(self) -> None:
        self.print("Отмена.")

    def show_success(self, job: Job, batch: BatchResult) -> None:
        self.print(f"Готово за {batch.elapsed:.2f} с. Грани сохранены в {job.output_dir}")

    def show_failure(self, batch: BatchResult) -> None:
        self.print(f"Не удалось обработать скайбокс: ошибок {len(batch.failures)} из {len(batch.results)}")
        for result in batch.failures:
            self.print(f"• {result.face}: {result.error}")

    def show_error(self, error: SkyboxError) -> None:
        self.print(f"Ошибка: {error}")

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()
