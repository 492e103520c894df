from mazerace.app.fsm import RacePhase, RaceStateMachine


def test_starts_idle():
    fsm = RaceStateMachine()
    assert fsm.current_phase == RacePhase.IDLE
    assert fsm.is_idle()
    assert fsm.get_phase_description() == "Enter your name and press Start"


def test_full_round():
    fsm = RaceStateMachine()
    for phase in (RacePhase.COUNTDOWN, RacePhase.PLAYING,
                  RacePhase.COMPUTER_TURN, RacePhase.ENDED, RacePhase.IDLE):
        assert fsm.transition_to(phase)
        assert fsm.current_phase == phase


def test_invalid_transitions_are_refused():
    fsm = RaceStateMachine()
    assert not fsm.transition_to(RacePhase.PLAYING)
    assert not fsm.transition_to(RacePhase.ENDED)
    assert fsm.is_idle()

    fsm.transition_to(RacePhase.COUNTDOWN)
    fsm.transition_to(RacePhase.PLAYING)
    assert not fsm.transition_to(RacePhase.ENDED)
    assert fsm.is_playing()


def test_abandon_and_error_paths():
    fsm = RaceStateMachine()
    fsm.transition_to(RacePhase.COUNTDOWN)
    assert fsm.transition_to(RacePhase.IDLE)
    assert fsm.transition_to(RacePhase.ERROR)
    assert fsm.is_finished()
    assert not fsm.transition_to(RacePhase.COUNTDOWN)
    assert fsm.transition_to(RacePhase.IDLE)


def test_entry_callbacks_see_new_phase():
    fsm = RaceStateMachine()
    seen = []
    fsm.on_phase_enter(RacePhase.COUNTDOWN, lambda context: seen.append((fsm.current_phase, context)))
    fsm.transition_to(RacePhase.COUNTDOWN, {"round": 1})
    assert seen == [(RacePhase.COUNTDOWN, {"round": 1})]


def test_reset_skips_callbacks():
    fsm = RaceStateMachine()
    seen = []
    fsm.on_phase_enter(RacePhase.IDLE, seen.append)
    fsm.transition_to(RacePhase.COUNTDOWN)
    fsm.reset()
    assert fsm.is_idle()
    assert seen == []
