# main.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from rubik_engine import InvalidMove, apply_moves, create_solved, print_cube, to_json

logging.basicConfig()
logger = logging.getLogger("rubik_engine")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Cubo Rubik 3x3: visor y utilidades.")
    parser.add_argument(
        "--print",
        dest="sequence",
        metavar="SEQUENCE",
        help="Aplica SEQUENCE al cubo resuelto e imprime el resultado (sin abrir la UI).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Con --print, imprime el estado en JSON en vez del net.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Logging en nivel DEBUG.")
    return parser


def run_print(sequence: str, as_json: bool) -> int:
    """Imprime el estado del cubo resuelto tras aplicar `sequence`.

    Returns:
        Código de salida: 0 si la secuencia es válida, 2 si no.
    """
    try:
        cube = apply_moves(create_solved(), sequence)
    except InvalidMove as exc:
        logger.error("%s", exc)
        return 2

    print(to_json(cube) if as_json else print_cube(cube))
    return 0


def run_gui() -> int:
    """Crea la `QApplication`, muestra la ventana principal y ejecuta el loop de Qt."""
    from PySide6.QtWidgets import QApplication

    from rubik_engine.app.main_window import MainWindow

    app = QApplication(sys.argv)
    w = MainWindow()
    w.show()
    return app.exec()


def main(argv: Optional[List[str]] = None) -> int:
    """Punto de entrada de la aplicación.

    Args:
        argv: Argumentos de línea de comandos (por defecto `sys.argv[1:]`).

    Returns:
        Código de salida del proceso.
    """
    args = build_parser().parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    if args.sequence is not None:
        return run_print(args.sequence, args.json)
    return run_gui()


if __name__ == "__main__":
    sys.exit(main())
