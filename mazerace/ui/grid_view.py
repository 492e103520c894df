"""Grid view rendering the current race session."""

from typing import Dict, Tuple
from PySide6.QtWidgets import QGraphicsView, QGraphicsScene
from PySide6.QtGui import QPainter
from PySide6.QtCore import Qt

from ..app.controller import RaceController
from ..domain.session import classify_cell
from .tiles import GridTile


class GridView(QGraphicsView):
    """Graphics view showing the maze, both racers and their trails."""

    def __init__(self, controller: RaceController):
        super().__init__()

        self.controller = controller
        self.scene = QGraphicsScene()
        self.setScene(self.scene)

        self.tiles: Dict[Tuple[int, int], GridTile] = {}
        self.tile_size = 28.0
        self._grid = None

        self.setRenderHint(QPainter.Antialiasing)
        self.setFocusPolicy(Qt.NoFocus)

        self.controller.session_updated.connect(self.update_grid)
        self.update_grid()

    def update_grid(self):
        """Update the visual grid from the controller's session."""
        session = self.controller.session
        if session is None:
            self.scene.clear()
            self.tiles.clear()
            self._grid = None
            return

        grid = session.maze.grid
        # Rebuild tiles only when a new maze arrives
        if self._grid is not grid:
            self._rebuild(grid.rows, grid.cols)
            self._grid = grid

        for (row, col), tile in self.tiles.items():
            tile.set_kind(classify_cell(session, (row, col)))

    def _rebuild(self, rows: int, cols: int):
        self.scene.clear()
        self.tiles.clear()
        self.scene.setSceneRect(0, 0, cols * self.tile_size, rows * self.tile_size)

        for row in range(rows):
            for col in range(cols):
                tile = GridTile(row, col, self.tile_size)
                self.scene.addItem(tile)
                self.tiles[(row, col)] = tile

        self.fit_in_view()

    def fit_in_view(self):
        """Fit the entire grid in the view."""
        if self.scene.items():
            self.fitInView(self.scene.itemsBoundingRect(), Qt.KeepAspectRatio)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.fit_in_view()
