# rubik_engine/app/net_widget.py
from __future__ import annotations

from typing import Dict, Optional, Tuple

from PySide6.QtCore import QRectF, QSize, Qt
from PySide6.QtGui import QColor, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QWidget

from rubik_engine.core.cube_model import Cube, Face

# Posición (columna, fila) de cada cara en una grilla de 4x3 bloques
NET_LAYOUT: Dict[Face, Tuple[int, int]] = {
    "U": (1, 0),
    "L": (0, 1),
    "F": (1, 1),
    "R": (2, 1),
    "B": (3, 1),
    "D": (1, 2),
}

PALETTE: Dict[str, QColor] = {
    "W": QColor(245, 245, 245),
    "Y": QColor(255, 213, 0),
    "O": QColor(255, 88, 0),
    "R": QColor(183, 18, 52),
    "G": QColor(0, 155, 72),
    "B": QColor(0, 70, 173),
}


class CubeNetWidget(QWidget):
    """Vista 2D del cubo desplegado (net), dibujada con QPainter.

    No contiene lógica del cubo: solo pinta el `Cube` que recibe en `set_cube`.
    """

    def __init__(self, cube: Cube, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._cube: Cube = cube
        self.setMinimumSize(360, 270)

    def set_cube(self, cube: Cube) -> None:
        """Reemplaza el cubo mostrado y repinta."""
        self._cube = cube
        self.update()

    def sizeHint(self) -> QSize:
        return QSize(600, 450)

    def paintEvent(self, event: QPaintEvent) -> None:
        # 12 stickers de ancho x 9 de alto, centrado en el widget
        cell = min(self.width() / 12.0, self.height() / 9.0)
        ox = (self.width() - cell * 12) / 2.0
        oy = (self.height() - cell * 9) / 2.0

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(40, 40, 40))
        painter.setPen(QPen(Qt.GlobalColor.black, 2))

        for face, (bx, by) in NET_LAYOUT.items():
            stickers = self._cube.face(face)
            for i, color in enumerate(stickers):
                r, c = divmod(i, 3)
                rect = QRectF(
                    ox + (bx * 3 + c) * cell,
                    oy + (by * 3 + r) * cell,
                    cell,
                    cell,
                )
                painter.setBrush(PALETTE[color])
                painter.drawRect(rect.adjusted(1, 1, -1, -1))

        painter.end()
