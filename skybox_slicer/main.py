"""Точка входа в приложение."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from skybox_slicer.app import SkyboxSlicerApp
from skybox_slicer.config import APP_NAME
from skybox_slicer.logging_config import setup_logging
from skybox_slicer.models.errors import SkyboxError
from skybox_slicer.models.layout_model import Layout
from skybox_slicer.ui.console import Console

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skybox-slicer",
        description=f"{APP_NAME}: нарезает текстуру скайбокса на грани Left, Front, Right, Back, Top, Bottom.",
    )
    parser.add_argument("source", nargs="?", help="путь к текстуре скайбокса")
    parser.add_argument("-s", "--face-size", type=int, help="размер грани, px")
    parser.add_argument("-o", "--output", help="каталог для сохранения граней")
    parser.add_argument(
        "-l", "--layout",
        choices=[layout.value for layout in Layout],
        help="front: Top/Bottom у грани Front; right: Top/Bottom у грани Right",
    )
    parser.add_argument("-y", "--yes", action="store_true", help="не спрашивать подтверждение")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="подробный журнал (-vv для отладки)")
    parser.add_argument("--log-file", help="дополнительно писать журнал в файл")
    return parser


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """Разбирает аргументы, запускает нарезку и возвращает код завершения."""
    args = build_parser().parse_args(argv)
    setup_logging(level=_log_level(args.verbose), log_file=args.log_file)

    app = SkyboxSlicerApp(console)
    try:
        outcome = app.run(args)
    except SkyboxError as exc:
        app.console.show_error(exc)
        return EXIT_INVALID
    except EOFError:
        app.console.show_aborted()
        return EXIT_FAILED
    except KeyboardInterrupt:
        app.console.show_aborted()
        return EXIT_INTERRUPTED
    return EXIT_OK if outcome.ok else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
