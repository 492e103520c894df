"""Main window for the maze race."""

from PySide6.QtWidgets import (
    QMainWindow, QVBoxLayout, QHBoxLayout, QGridLayout, QWidget, QPushButton,
    QLabel, QLineEdit, QListWidget, QGroupBox, QStatusBar, QMessageBox
)
from PySide6.QtCore import Qt

from ..app.controller import RaceController
from ..app.fsm import RacePhase
from ..domain.scoring import RaceResult
from ..domain.types import UP, DOWN, LEFT, RIGHT
from .grid_view import GridView

# Keyboard bindings for player movement
MOVE_KEYS = {
    Qt.Key_Up: UP, Qt.Key_W: UP,
    Qt.Key_Down: DOWN, Qt.Key_S: DOWN,
    Qt.Key_Left: LEFT, Qt.Key_A: LEFT,
    Qt.Key_Right: RIGHT, Qt.Key_D: RIGHT,
}


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self, controller: RaceController):
        super().__init__()
        self.controller = controller

        self.setWindowTitle("Maze Race")
        self.setMinimumSize(900, 700)
        self.setFocusPolicy(Qt.StrongFocus)

        self._create_ui()
        self._setup_connections()
        self._on_phase_changed(self.controller.phase)
        self.controller.refresh_leaderboard()

    def _create_ui(self):
        """Create the user interface."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QHBoxLayout(central_widget)

        # Maze and status
        left_layout = QVBoxLayout()
        self.phase_label = QLabel()
        self.phase_label.setAlignment(Qt.AlignCenter)
        self.phase_label.setStyleSheet("font-size: 20px; font-weight: bold;")
        left_layout.addWidget(self.phase_label)

        self.grid_view = GridView(self.controller)
        left_layout.addWidget(self.grid_view, 1)

        self.stats_label = QLabel()
        self.stats_label.setAlignment(Qt.AlignCenter)
        left_layout.addWidget(self.stats_label)
        left_layout.addWidget(self._create_arrow_buttons())
        main_layout.addLayout(left_layout, 3)

        # Side panel
        side_layout = QVBoxLayout()

        player_group = QGroupBox("Player")
        player_layout = QVBoxLayout(player_group)
        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Your name")
        self.name_edit.setMaxLength(40)
        self.start_btn = QPushButton("Start")
        self.reset_btn = QPushButton("Play Again")
        self.solution_btn = QPushButton("Show Solution")
        for button in (self.start_btn, self.reset_btn, self.solution_btn):
            button.setFocusPolicy(Qt.NoFocus)
        for widget in (self.name_edit, self.start_btn, self.reset_btn, self.solution_btn):
            player_layout.addWidget(widget)
        side_layout.addWidget(player_group)

        results_group = QGroupBox("Results")
        results_layout = QVBoxLayout(results_group)
        self.results_label = QLabel()
        self.results_label.setWordWrap(True)
        self.results_label.setTextFormat(Qt.RichText)
        results_layout.addWidget(self.results_label)
        side_layout.addWidget(results_group)

        leaderboard_group = QGroupBox("Leaderboard")
        leaderboard_layout = QVBoxLayout(leaderboard_group)
        self.leaderboard_list = QListWidget()
        self.leaderboard_list.setFocusPolicy(Qt.NoFocus)
        leaderboard_layout.addWidget(self.leaderboard_list)
        side_layout.addWidget(leaderboard_group, 1)

        main_layout.addLayout(side_layout, 1)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Arrows/WASD to move | Enter or Space to start/reset | "
                                    "Ctrl+L to toggle the solution after a race")

    def _create_arrow_buttons(self) -> QWidget:
        """On-screen direction buttons."""
        widget = QWidget()
        layout = QGridLayout(widget)
        self.arrow_buttons = {}
        for label, direction, row, col in (("↑", UP, 0, 1), ("←", LEFT, 1, 0),
                                           ("↓", DOWN, 1, 1), ("→", RIGHT, 1, 2)):
            button = QPushButton(label)
            button.setFocusPolicy(Qt.NoFocus)
            button.clicked.connect(lambda _=False, d=direction: self.controller.move_player(d))
            layout.addWidget(button, row, col)
            self.arrow_buttons[direction] = button
        return widget

    def _setup_connections(self):
        """Setup signal connections."""
        self.start_btn.clicked.connect(self._on_start_clicked)
        self.reset_btn.clicked.connect(self.controller.reset_game)
        self.solution_btn.clicked.connect(self.controller.toggle_solution)
        self.name_edit.returnPressed.connect(self._on_start_clicked)

        self.controller.phase_changed.connect(self._on_phase_changed)
        self.controller.countdown_changed.connect(self._on_countdown_changed)
        self.controller.session_updated.connect(self._update_statistics_display)
        self.controller.race_finished.connect(self._on_race_finished)
        self.controller.leaderboard_updated.connect(self._on_leaderboard_updated)
        self.controller.error_occurred.connect(self._on_error)

    def _on_start_clicked(self):
        if self.controller.start_game(self.name_edit.text()):
            self.setFocus()

    def _on_phase_changed(self, phase: RacePhase):
        """Update controls for the new phase."""
        idle = phase == RacePhase.IDLE
        playing = phase == RacePhase.PLAYING

        self.phase_label.setText(self.controller.phase_description)
        self.name_edit.setEnabled(idle)
        self.start_btn.setVisible(idle)
        self.reset_btn.setVisible(phase in (RacePhase.ENDED, RacePhase.ERROR))
        self.solution_btn.setEnabled(phase == RacePhase.ENDED)
        for button in self.arrow_buttons.values():
            button.setEnabled(playing)

        if idle:
            self.results_label.clear()
        self._update_statistics_display()

    def _on_countdown_changed(self, seconds: int):
        self.phase_label.setText(str(seconds))

    def _update_statistics_display(self):
        stats = self.controller.get_statistics()
        self.stats_label.setText(
            f"You: {stats['player_moves']} moves, {stats['player_time']}s   |   "
            f"Computer: {stats['computer_moves']} moves, {stats['computer_time']}s"
        )

    def _on_race_finished(self, result: RaceResult):
        lines = "<br>".join(result.summary())
        self.results_label.setText(
            f"<b>Your Score:</b> {result.score}<br><br>"
            f"<b>Path Length:</b><br>"
            f"Your Path: {result.player_moves} cells<br>"
            f"Computer's Path: {result.computer_moves} cells<br><br>"
            f"<b>Time Taken:</b><br>"
            f"Your Time: {result.player_time}s<br>"
            f"Computer's Time: {result.computer_time}s<br><br>"
            f"{lines}"
        )

    def _on_leaderboard_updated(self, entries: list):
        self.leaderboard_list.clear()
        for index, entry in enumerate(entries, start=1):
            self.leaderboard_list.addItem(f"{index}. {entry['name']}: {float(entry['score']):.2f}")

    def _on_error(self, message: str):
        QMessageBox.warning(self, "Maze Race", message)

    def keyPressEvent(self, event):
        """Handle movement, start/reset and solution keys."""
        key = event.key()
        phase = self.controller.phase

        if key in MOVE_KEYS and phase == RacePhase.PLAYING:
            self.controller.move_player(MOVE_KEYS[key])
        elif key in (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space):
            if phase == RacePhase.IDLE:
                self._on_start_clicked()
            elif phase in (RacePhase.ENDED, RacePhase.ERROR):
                self.controller.reset_game()
        elif key == Qt.Key_L and event.modifiers() & Qt.ControlModifier and phase == RacePhase.ENDED:
            self.controller.toggle_solution()
        else:
            super().keyPressEvent(event)
