"""Finite State Machine for the phases of a race."""

from enum import Enum
from typing import Callable, Optional, Set


class RacePhase(Enum):
    """Phases of one race round."""
    IDLE = "idle"
    COUNTDOWN = "countdown"
    PLAYING = "playing"
    COMPUTER_TURN = "computer_turn"
    ENDED = "ended"
    ERROR = "error"


class RaceStateMachine:
    """
    Finite State Machine for managing race phases.

    State Transitions:
    IDLE -> COUNTDOWN (when the player starts a game)
    COUNTDOWN -> PLAYING (when the countdown runs out)
    PLAYING -> COMPUTER_TURN (when the player reaches the goal)
    COMPUTER_TURN -> ENDED (when the computer reaches the goal)
    ENDED -> IDLE (when reset is pressed)
    COUNTDOWN, PLAYING, COMPUTER_TURN -> IDLE (when the round is abandoned)
    any active phase -> ERROR (when the round cannot continue)
    ERROR -> IDLE (when reset is pressed)
    """

    def __init__(self):
        self._current_phase = RacePhase.IDLE
        self._phase_callbacks = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> dict[RacePhase, Set[RacePhase]]:
        """Build the valid phase transition map."""
        return {
            RacePhase.IDLE: {RacePhase.COUNTDOWN, RacePhase.ERROR},
            RacePhase.COUNTDOWN: {RacePhase.PLAYING, RacePhase.IDLE, RacePhase.ERROR},
            RacePhase.PLAYING: {RacePhase.COMPUTER_TURN, RacePhase.IDLE, RacePhase.ERROR},
            RacePhase.COMPUTER_TURN: {RacePhase.ENDED, RacePhase.IDLE, RacePhase.ERROR},
            RacePhase.ENDED: {RacePhase.IDLE},
            RacePhase.ERROR: {RacePhase.IDLE},
        }

    @property
    def current_phase(self) -> RacePhase:
        """Get the current phase."""
        return self._current_phase

    def can_transition_to(self, target: RacePhase) -> bool:
        """Check if transition to target phase is valid."""
        return target in self._valid_transitions.get(self._current_phase, set())

    def transition_to(self, target: RacePhase, context: Optional[dict] = None) -> bool:
        """
        Attempt to transition to the target phase.

        Args:
            target: The phase to transition to
            context: Optional context data for the entry callback

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target):
            return False

        self._current_phase = target

        if target in self._phase_callbacks:
            self._phase_callbacks[target](context)

        return True

    def on_phase_enter(self, phase: RacePhase, callback: Callable[[Optional[dict]], None]):
        """Register a callback for when entering a specific phase."""
        self._phase_callbacks[phase] = callback

    def reset(self):
        """Force the machine back to IDLE without running callbacks."""
        self._current_phase = RacePhase.IDLE

    def is_idle(self) -> bool:
        return self._current_phase == RacePhase.IDLE

    def is_playing(self) -> bool:
        return self._current_phase == RacePhase.PLAYING

    def is_computer_turn(self) -> bool:
        return self._current_phase == RacePhase.COMPUTER_TURN

    def is_finished(self) -> bool:
        """Check if the round is over (ended or failed)."""
        return self._current_phase in (RacePhase.ENDED, RacePhase.ERROR)

    def get_phase_description(self) -> str:
        """Get a human-readable description of the current phase."""
        descriptions = {
            RacePhase.IDLE: "Enter your name and press Start",
            RacePhase.COUNTDOWN: "Get ready...",
            RacePhase.PLAYING: "Find your way to the end",
            RacePhase.COMPUTER_TURN: "Computer's turn",
            RacePhase.ENDED: "Race finished",
            RacePhase.ERROR: "Something went wrong",
        }
        return descriptions.get(self._current_phase, "Unknown phase")
