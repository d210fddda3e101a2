from __future__ import annotations

import argparse
from typing import Optional

from skybox_slicer.controllers.app_controller import AppController, RunOutcome
from skybox_slicer.ui.console import Console


class SkyboxSlicerApp:
    def __init__(self, console: Optional[Console] = None) -> None:
        self._console = console or Console()
        self._controller = AppController(console=self._console)

    @property
    def console(self) -> Console:
        return self._console

    def run(self, args: argparse.Namespace) -> RunOutcome:
        if not args.yes:
            self._console.show_welcome()
        return self._controller.run(
            source=args.source,
            face_size=args.face_size,
            output_dir=args.output,
            layout=args.layout,
            assume_yes=args.yes,
        )
