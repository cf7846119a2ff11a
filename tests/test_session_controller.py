from libris.domain.session import SessionFlags
from libris.domain.state import new_game_state
from libris.services import SessionController
from libris.services.ending_resolver import CREDIT_LINE, FAREWELL_LINE, REPLAY_PROMPT
from libris.services.session_controller import CHOICE_PROMPT, INVALID_NAME_MESSAGE, NAME_PROMPT


def _named_controller(name: str = "Ada") -> SessionController:
    controller = SessionController()
    controller.start()
    controller.submit(name)
    return controller


def _finished_story(controller: SessionController) -> None:
    for answer in ["call", "avoid", "turn back", "accept"]:
        controller.submit(answer)


def test_session_starts_by_asking_for_a_name() -> None:
    controller = SessionController()
    turn = controller.start()

    assert turn.segments == []
    assert controller.phase == "naming_player"
    assert controller.expects_input is True
    assert controller.input_prompt == NAME_PROMPT


def test_blank_name_is_rejected() -> None:
    controller = SessionController()
    controller.start()

    turn = controller.submit("   ")

    assert turn.segments == [INVALID_NAME_MESSAGE]
    assert controller.phase == "naming_player"
    assert controller.session.state.player_name == ""


def test_name_is_trimmed_and_story_begins() -> None:
    controller = SessionController()
    controller.start()

    turn = controller.submit("  Ada Lovelace ")

    assert controller.session.state.player_name == "Ada Lovelace"
    assert controller.phase == "playing"
    assert controller.input_prompt == CHOICE_PROMPT
    assert "Your name is Ada Lovelace" in turn.segments[0]


def test_closing_sequence_runs_in_order() -> None:
    controller = _named_controller()
    _finished_story(controller)

    assert controller.session.flags.is_game_over is True
    assert controller.expects_input is False
    assert controller.submit("accept").segments == []

    shown = controller.advance()
    assert shown.segments == [CREDIT_LINE, REPLAY_PROMPT]
    assert controller.phase == "ending_shown"
    assert controller.expects_input is False

    controller.advance()
    assert controller.phase == "awaiting_restart"
    assert controller.expects_input is True

    assert controller.advance().segments == []
    assert controller.phase == "awaiting_restart"


def test_yes_restarts_with_a_fresh_state() -> None:
    controller = _named_controller()
    _finished_story(controller)
    controller.advance()
    controller.advance()

    turn = controller.submit("Yes!")

    assert turn.segments == []
    assert controller.phase == "naming_player"
    assert controller.session.state == new_game_state()
    assert controller.session.flags == SessionFlags()
    assert controller.session.scene_id is None
    assert controller.session.ending is None

    controller.submit("Bea")
    assert controller.session.state.player_name == "Bea"
    assert controller.session.scene_id == "opening"


def test_anything_else_ends_the_session_for_good() -> None:
    controller = _named_controller()
    _finished_story(controller)
    controller.advance()
    controller.advance()

    turn = controller.submit("no thanks")

    assert turn.segments == [FAREWELL_LINE]
    assert controller.is_over is True
    assert controller.expects_input is False
    assert controller.submit("yes").segments == []
    assert controller.advance().segments == []
    assert controller.start().segments == []
    assert controller.phase == "fully_over"


def test_input_during_ending_display_is_ignored() -> None:
    controller = _named_controller()
    _finished_story(controller)
    controller.advance()

    assert controller.submit("yes").segments == []
    assert controller.phase == "ending_shown"
