# rubik_engine/app/main_window.py
from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from rubik_engine.app.net_widget import CubeNetWidget
from rubik_engine.core.cube_model import Cube
from rubik_engine.logic.errors import InvalidMove
from rubik_engine.logic.moves import apply_move
from rubik_engine.logic.parser import parse_sequence
from rubik_engine.logic.scramble import generate_scramble

logger = logging.getLogger("rubik_engine.app")


class MainWindow(QMainWindow):
    """Ventana principal del visor del cubo.

    Esta clase coordina:
    - El estado actual (`Cube`, inmutable)
    - La vista 2D del net (`CubeNetWidget`)
    - El historial (undo/redo), guardando los estados anteriores tal cual
    """

    def __init__(self, cube: Optional[Cube] = None) -> None:
        """Inicializa la ventana, crea la UI y conecta señales.

        Args:
            cube: Estado inicial; por defecto el cubo resuelto.
        """
        super().__init__()
        self.setWindowTitle("Rubik 3x3 - PySide6")

        # --- Estado + vista ---
        self.cube: Cube = cube if cube is not None else Cube.solved()
        self.net_widget: CubeNetWidget = CubeNetWidget(self.cube, self)

        # --- Historial: pares (movimiento, estado previo) ---
        self.history: List[tuple[str, Cube]] = []
        self.redo_stack: List[str] = []

        # --- UI ---
        root = QWidget()
        root_layout = QHBoxLayout(root)
        root_layout.addWidget(self.net_widget, 1)

        panel = QWidget()
        panel_layout = QVBoxLayout(panel)
        panel.setFixedWidth(300)

        self.lbl_state = QLabel("")
        panel_layout.addWidget(self.lbl_state)

        row_main = QHBoxLayout()
        self.btn_reset = QPushButton("Reset")
        self.btn_undo = QPushButton("Undo")
        self.btn_redo = QPushButton("Redo")
        row_main.addWidget(self.btn_reset)
        row_main.addWidget(self.btn_undo)
        row_main.addWidget(self.btn_redo)
        panel_layout.addLayout(row_main)

        panel_layout.addWidget(QLabel("Scramble (mezclar)"))
        row_scr = QHBoxLayout()
        self.spin_scramble = QSpinBox()
        self.spin_scramble.setRange(1, 200)
        self.spin_scramble.setValue(25)
        self.btn_scramble = QPushButton("Scramble")
        row_scr.addWidget(self.spin_scramble, 1)
        row_scr.addWidget(self.btn_scramble, 1)
        panel_layout.addLayout(row_scr)

        panel_layout.addWidget(QLabel("Aplicar secuencia (ej: R U R' U')"))
        self.txt_seq = QLineEdit()
        self.txt_seq.setPlaceholderText("Ej: R U R' U'")
        panel_layout.addWidget(self.txt_seq)
        self.btn_apply = QPushButton("Aplicar")
        panel_layout.addWidget(self.btn_apply)

        panel_layout.addWidget(QLabel("Historial de movimientos"))
        self.list_history = QListWidget()
        panel_layout.addWidget(self.list_history, 1)

        root_layout.addWidget(panel)
        self.setCentralWidget(root)

        # --- Conexiones ---
        self.btn_reset.clicked.connect(self.on_reset)
        self.btn_scramble.clicked.connect(self.on_scramble)
        self.btn_apply.clicked.connect(self.on_apply_sequence)
        self.txt_seq.returnPressed.connect(self.on_apply_sequence)
        self.btn_undo.clicked.connect(self.on_undo)
        self.btn_redo.clicked.connect(self.on_redo)

        # Atajos
        self.btn_undo.setShortcut("Ctrl+Z")
        self.btn_redo.setShortcut("Ctrl+Y")
        self.btn_reset.setShortcut("Ctrl+R")

        self._refresh()

    # -------------------
    # Helpers UI
    # -------------------
    def _refresh(self) -> None:
        """Repinta el net y actualiza el label de estado y los botones."""
        self.net_widget.set_cube(self.cube)
        self.lbl_state.setText(
            "Estado: resuelto ✅" if self.cube.is_solved() else "Estado: mezclado 🔄"
        )
        self.btn_undo.setEnabled(bool(self.history))
        self.btn_redo.setEnabled(bool(self.redo_stack))

    def _play(self, moves: List[str]) -> None:
        """Aplica movimientos ya validados registrando cada uno en el historial."""
        for mv in moves:
            self.history.append((mv, self.cube))
            self.list_history.addItem(mv)
            self.cube = apply_move(self.cube, mv)
        self.list_history.scrollToBottom()
        self._refresh()

    # -------------------
    # Botones
    # -------------------
    def on_reset(self) -> None:
        """Vuelve al cubo resuelto y limpia el historial."""
        self.cube = Cube.solved()
        self.history.clear()
        self.redo_stack.clear()
        self.list_history.clear()
        self._refresh()

    def on_undo(self) -> None:
        """Restaura el estado anterior al último movimiento."""
        if not self.history:
            return
        mv, previous = self.history.pop()
        self.list_history.takeItem(self.list_history.count() - 1)
        self.redo_stack.append(mv)
        self.cube = previous
        self._refresh()

    def on_redo(self) -> None:
        """Re-aplica el último movimiento deshecho."""
        if not self.redo_stack:
            return
        self._play([self.redo_stack.pop()])

    def on_apply_sequence(self) -> None:
        """Aplica la secuencia ingresada por el usuario (ej: 'R U R' U'')."""
        seq = self.txt_seq.text().strip()
        if not seq:
            return

        # Se valida todo antes de tocar el estado: una secuencia inválida no aplica nada
        try:
            moves = parse_sequence(seq)
        except InvalidMove as exc:
            logger.warning("Secuencia inválida: %s", exc)
            QMessageBox.warning(self, "Secuencia inválida", str(exc))
            return

        self.redo_stack.clear()
        self._play(moves)

    def on_scramble(self) -> None:
        """Mezcla el cubo aplicando una secuencia aleatoria de N movimientos."""
        n = int(self.spin_scramble.value())
        self.redo_stack.clear()
        self._play(parse_sequence(generate_scramble(n)))
