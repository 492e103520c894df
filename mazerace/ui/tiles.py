"""Grid tile graphics items for the maze race."""

from PySide6.QtWidgets import QGraphicsRectItem
from PySide6.QtGui import QBrush, QPen, QColor
from PySide6.QtCore import Qt

from ..domain.types import CellKind


class GridTile(QGraphicsRectItem):
    """Graphics item representing a single maze cell."""

    # Color scheme for the cell classifications
    COLORS = {
        "open": QColor(240, 240, 240),           # Light gray
        "wall": QColor(48, 48, 64),              # Slate
        "start": QColor(0, 200, 83),             # Green
        "end": QColor(255, 215, 0),              # Gold
        "player": QColor(33, 150, 243),          # Blue
        "computer": QColor(229, 57, 53),         # Red
        "player-path": QColor(144, 202, 249),    # Light blue
        "computer-path": QColor(239, 154, 154),  # Light red
        "solver-path": QColor(255, 245, 157),    # Pale yellow
    }

    def __init__(self, row: int, col: int, size: float, kind: CellKind = "open"):
        super().__init__(0, 0, size, size)
        self.row = row
        self.col = col
        self.size = size
        self.kind: CellKind = kind

        self.setPos(col * size, row * size)
        self.update_appearance()

    def set_kind(self, kind: CellKind):
        """Change the classification, repainting only when it differs."""
        if kind != self.kind:
            self.kind = kind
            self.update_appearance()

    def update_appearance(self):
        """Update the tile appearance based on its classification."""
        color = self.COLORS.get(self.kind, self.COLORS["open"])
        self.setBrush(QBrush(color))

        if self.kind == "wall":
            self.setPen(QPen(color, 0))
        else:
            self.setPen(QPen(Qt.gray, 0.5))
