"""Race controller driving one player-vs-computer round."""

import logging
from collections import deque
from typing import Callable, Deque, List, Optional, Tuple

from PySide6.QtCore import QObject, QThread, QTimer, Signal, Slot

from ..domain.types import Cell, Direction, MazeConfig
from ..domain.astar import find_path
from ..domain.movement import ComputerRun, computer_pause_ms, plan_computer_run, resolve_run
from ..domain.scoring import RaceResult
from ..domain.session import GameSession
from ..leaderboard.client import LeaderboardClient
from ..utils.maze_factory import create_maze
from ..utils.rng import RandomSource, default_rng
from .config import RaceConfig
from .fsm import RacePhase, RaceStateMachine

logger = logging.getLogger(__name__)

PLAYER = "player"
COMPUTER = "computer"

# How long shutdown waits for an in-flight leaderboard request
LEADERBOARD_SHUTDOWN_MS = 3000


class LeaderboardWorker(QObject):
    """Runs leaderboard requests one at a time on its own thread."""

    finished = Signal(list)  # ranking entries
    error_occurred = Signal(str)

    @Slot(object)
    def run(self, request: Callable[[], List[dict]]):
        try:
            entries = request()
        except Exception as e:
            logger.error("Leaderboard request failed: %s", e)
            self.error_occurred.emit(str(e))
            return
        self.finished.emit(entries)


class RaceController(QObject):
    """
    Controller that owns the current GameSession and drives the race.

    Signals:
        phase_changed: Emitted with the new RacePhase
        session_updated: Emitted whenever the session snapshot changes
        countdown_changed: Emitted with the seconds left before play starts
        race_finished: Emitted with the RaceResult once both parties finish
        leaderboard_updated: Emitted with the latest ranking entries
        error_occurred: Emitted when an error occurs
    """

    phase_changed = Signal(object)  # RacePhase
    session_updated = Signal()
    countdown_changed = Signal(int)
    race_finished = Signal(object)  # RaceResult
    leaderboard_updated = Signal(list)
    error_occurred = Signal(str)

    # Carries a leaderboard request to the worker thread
    _leaderboard_requested = Signal(object)

    def __init__(self, maze_config: Optional[MazeConfig] = None,
                 race_config: Optional[RaceConfig] = None,
                 rng: Optional[RandomSource] = None,
                 leaderboard: Optional[LeaderboardClient] = None):
        super().__init__()

        self._maze_config = maze_config or MazeConfig()
        self._race_config = race_config or RaceConfig()
        self._rng = rng or default_rng
        self._leaderboard = leaderboard
        self._state_machine = RaceStateMachine()

        self._session: Optional[GameSession] = None
        self._result: Optional[RaceResult] = None
        self._player_name = ""
        self._countdown_remaining = 0
        self._computer_index = 0
        self._round_id = 0

        # Cells waiting to be revealed, one per animation frame
        self._pending: Deque[Cell] = deque()
        self._animating_party: Optional[str] = None

        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(self._race_config.tick_interval_ms)
        self._tick_timer.timeout.connect(self.tick)

        self._countdown_timer = QTimer(self)
        self._countdown_timer.setInterval(self._race_config.tick_interval_ms)
        self._countdown_timer.timeout.connect(self.countdown_tick)

        self._frame_timer = QTimer(self)
        self._frame_timer.timeout.connect(self.advance_frame)

        # Started on the first leaderboard request
        self._leaderboard_thread: Optional[QThread] = None
        self._leaderboard_worker: Optional[LeaderboardWorker] = None

        self._setup_phase_callbacks()

    def _setup_phase_callbacks(self):
        """Setup callbacks for state machine transitions."""
        self._state_machine.on_phase_enter(RacePhase.IDLE, self._on_idle_entered)
        self._state_machine.on_phase_enter(RacePhase.COUNTDOWN, self._on_countdown_entered)
        self._state_machine.on_phase_enter(RacePhase.PLAYING, self._on_playing_entered)
        self._state_machine.on_phase_enter(RacePhase.COMPUTER_TURN, self._on_computer_turn_entered)
        self._state_machine.on_phase_enter(RacePhase.ENDED, self._on_ended_entered)
        self._state_machine.on_phase_enter(RacePhase.ERROR, self._on_error_entered)

    # Properties

    @property
    def session(self) -> Optional[GameSession]:
        """Get the current round's session."""
        return self._session

    @property
    def phase(self) -> RacePhase:
        return self._state_machine.current_phase

    @property
    def phase_description(self) -> str:
        return self._state_machine.get_phase_description()

    @property
    def player_name(self) -> str:
        return self._player_name

    @property
    def result(self) -> Optional[RaceResult]:
        """Result of the last finished race."""
        return self._result

    @property
    def countdown_remaining(self) -> int:
        return self._countdown_remaining

    @property
    def is_animating(self) -> bool:
        return self._animating_party is not None

    # Round management

    def start_game(self, name: str) -> bool:
        """Validate the player name, build a solvable round and start the countdown."""
        name = name.strip()
        if not name:
            self.error_occurred.emit("Please enter your name before starting the game.")
            return False
        if not self._state_machine.is_idle():
            return False

        try:
            session = self._build_session()
        except RuntimeError as e:
            logger.error("Failed to build a round: %s", e)
            self.error_occurred.emit(f"Failed to generate maze: {e}")
            self._state_machine.transition_to(RacePhase.ERROR)
            return False

        self._player_name = name
        self._session = session
        self._result = None
        self._round_id += 1
        self.session_updated.emit()
        return self._state_machine.transition_to(RacePhase.COUNTDOWN)

    def _build_session(self) -> GameSession:
        """
        Generate mazes until one can be solved.

        Raises:
            RuntimeError: If no solvable maze was produced within the attempt limit
        """
        attempts = self._race_config.max_generation_attempts
        for attempt in range(1, attempts + 1):
            maze = create_maze(self._maze_config, self._rng)
            result = find_path(maze.grid, maze.start, maze.goal)
            # goal must differ from start so the computer takes at least one step
            if result.success and result.moves > 0:
                return GameSession.new(maze, result.path)
            logger.warning("Maze %d/%d has no path to goal %s, regenerating",
                           attempt, attempts, maze.goal)
        raise RuntimeError(f"no solvable maze after {attempts} attempts")

    def reset_game(self) -> bool:
        """Abandon or close the current round and go back to IDLE."""
        if self._state_machine.is_idle():
            return False
        return self._state_machine.transition_to(RacePhase.IDLE)

    def toggle_solution(self):
        """Show or hide the computer's solution path."""
        if self._session is None:
            return
        self._session = self._session.toggle_solution()
        self.session_updated.emit()

    def refresh_leaderboard(self):
        """Fetch the ranking in the background; leaderboard_updated carries the result."""
        if self._leaderboard is None:
            return
        self._request_leaderboard(self._leaderboard.top)

    def _request_leaderboard(self, request: Callable[[], List[dict]]):
        """Hand a blocking leaderboard call to the worker thread."""
        if self._leaderboard_thread is None:
            self._leaderboard_thread = QThread()
            self._leaderboard_thread.setObjectName("MazeRace-LeaderboardThread")
            self._leaderboard_worker = LeaderboardWorker()
            self._leaderboard_worker.moveToThread(self._leaderboard_thread)

            self._leaderboard_requested.connect(self._leaderboard_worker.run)
            self._leaderboard_worker.finished.connect(self._on_leaderboard_result)
            self._leaderboard_worker.error_occurred.connect(self._on_leaderboard_error)
            self._leaderboard_thread.finished.connect(self._leaderboard_worker.deleteLater)
            self._leaderboard_thread.start()

        self._leaderboard_requested.emit(request)

    @Slot(list)
    def _on_leaderboard_result(self, entries: list):
        self.leaderboard_updated.emit(entries)

    @Slot(str)
    def _on_leaderboard_error(self, message: str):
        self.error_occurred.emit(f"Leaderboard unavailable: {message}")

    # Clock

    def countdown_tick(self):
        """Called once per second while counting down."""
        if self.phase != RacePhase.COUNTDOWN:
            return
        self._countdown_remaining -= 1
        if self._countdown_remaining > 0:
            self.countdown_changed.emit(self._countdown_remaining)
        else:
            self._countdown_timer.stop()
            self._state_machine.transition_to(RacePhase.PLAYING)

    def tick(self):
        """Called once per second; advances the active party's elapsed time."""
        if self._session is None:
            return
        if self._state_machine.is_playing():
            self._session = self._session.with_player(self._session.player.tick())
        elif self._state_machine.is_computer_turn():
            self._session = self._session.with_computer(self._session.computer.tick())
        else:
            return
        self.session_updated.emit()

    # Movement

    def move_player(self, direction: Direction) -> bool:
        """
        Move the player one run in `direction`.
        Returns False when the move is ignored or blocked.
        """
        if not self._state_machine.is_playing() or self.is_animating or self._session is None:
            return False
        if self._session.player.finished:
            return False

        maze = self._session.maze
        run = resolve_run(maze.grid, self._session.player.position, direction, maze.goal)
        if not run:
            return False

        self._begin_run(PLAYER, run)
        return True

    def _begin_run(self, party: str, cells) -> None:
        """Queue a run for per-frame reveal."""
        self._pending.extend(cells)
        self._animating_party = party
        interval = max(1, self._race_config.animation_ms // max(1, len(self._pending)))
        self._frame_timer.start(interval)

    def advance_frame(self):
        """Reveal the next queued cell of the running animation."""
        if self._animating_party is None or self._session is None:
            self._frame_timer.stop()
            return

        party = self._animating_party
        if self._pending:
            cell = self._pending.popleft()
            if party == PLAYER:
                self._session = self._session.with_player(self._session.player.step_to(cell))
            else:
                self._session = self._session.with_computer(self._session.computer.step_to(cell))
            self.session_updated.emit()

        if not self._pending:
            self._frame_timer.stop()
            self._animating_party = None
            self._on_run_finished(party)

    def _on_run_finished(self, party: str):
        if party == PLAYER:
            if self._session.player_at_goal:
                self._session = self._session.with_player(self._session.player.finish())
                self.session_updated.emit()
                self._schedule(self._race_config.finish_delay_ms, self._finish_player_turn)
        else:
            self.computer_step()

    def _finish_player_turn(self):
        self._state_machine.transition_to(RacePhase.COMPUTER_TURN)

    def computer_step(self):
        """Plan the computer's next run, or end the race when it has arrived."""
        if not self._state_machine.is_computer_turn() or self._session is None:
            return

        if self._session.computer_at_goal:
            self._session = self._session.with_computer(self._session.computer.finish())
            self.session_updated.emit()
            self._state_machine.transition_to(RacePhase.ENDED)
            return

        maze = self._session.maze
        run = plan_computer_run(
            maze.grid, self._session.solution, self._computer_index,
            maze.goal, self._race_config.computer_lookahead,
        )
        pause = computer_pause_ms(maze.grid.count_open_neighbors(run.end), run.straight, self._rng)
        self._schedule(pause, lambda: self._take_computer_run(run))

    def _take_computer_run(self, run: ComputerRun):
        self._computer_index += len(run.cells)
        self._begin_run(COMPUTER, run.cells)

    def _schedule(self, delay_ms: float, callback: Callable[[], None]):
        """Run callback after a delay unless the round has been reset meanwhile."""
        round_id = self._round_id

        def fire():
            if round_id == self._round_id:
                callback()

        QTimer.singleShot(int(delay_ms), fire)

    def shutdown(self):
        """Stop timers, drop pending callbacks and stop the leaderboard thread."""
        self._round_id += 1
        self._stop_timers()

        thread = self._leaderboard_thread
        if thread is not None:
            self._leaderboard_thread = None
            thread.quit()
            if not thread.wait(LEADERBOARD_SHUTDOWN_MS):
                logger.warning("Leaderboard thread still busy after %d ms, terminating",
                               LEADERBOARD_SHUTDOWN_MS)
                thread.terminate()
                thread.wait()

    def _stop_timers(self):
        self._tick_timer.stop()
        self._countdown_timer.stop()
        self._frame_timer.stop()
        self._pending.clear()
        self._animating_party = None

    # State Machine Callbacks

    def _on_idle_entered(self, context):
        """Called when entering IDLE state."""
        self._stop_timers()
        self._round_id += 1
        self._session = None
        self._computer_index = 0
        self.session_updated.emit()
        self.phase_changed.emit(RacePhase.IDLE)
        self.refresh_leaderboard()

    def _on_countdown_entered(self, context):
        """Called when entering COUNTDOWN state."""
        self._countdown_remaining = self._race_config.countdown_seconds
        self.phase_changed.emit(RacePhase.COUNTDOWN)
        if self._countdown_remaining > 0:
            self.countdown_changed.emit(self._countdown_remaining)
            self._countdown_timer.start()
        else:
            self._state_machine.transition_to(RacePhase.PLAYING)

    def _on_playing_entered(self, context):
        """Called when entering PLAYING state."""
        self._tick_timer.start()
        self.phase_changed.emit(RacePhase.PLAYING)

    def _on_computer_turn_entered(self, context):
        """Called when entering COMPUTER_TURN state."""
        self._computer_index = 0
        self.phase_changed.emit(RacePhase.COMPUTER_TURN)
        self.computer_step()

    def _on_ended_entered(self, context):
        """Called when entering ENDED state."""
        self._tick_timer.stop()
        self._result = self._session.race_result()
        self.phase_changed.emit(RacePhase.ENDED)
        self.race_finished.emit(self._result)
        self._submit_score(self._result)

    def _on_error_entered(self, context):
        """Called when entering ERROR state."""
        self._stop_timers()
        self.phase_changed.emit(RacePhase.ERROR)

    def _submit_score(self, result: RaceResult):
        if self._leaderboard is None:
            return
        name, score, leaderboard = self._player_name, result.score, self._leaderboard
        self._request_leaderboard(lambda: leaderboard.submit(name, score))

    # Utility methods

    def get_statistics(self) -> dict:
        """Current move counts and times for both parties."""
        if self._session is None:
            return {"player_moves": 0, "player_time": 0,
                    "computer_moves": 0, "computer_time": 0,
                    "phase": self.phase.value}
        return {
            "player_moves": self._session.player.moves,
            "player_time": self._session.player.elapsed_seconds,
            "computer_moves": self._session.computer.moves,
            "computer_time": self._session.computer.elapsed_seconds,
            "phase": self.phase.value,
        }

    def positions(self) -> Tuple[Optional[Cell], Optional[Cell]]:
        """Current (player, computer) positions."""
        if self._session is None:
            return None, None
        return self._session.player.position, self._session.computer.position
