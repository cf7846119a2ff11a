from libris.domain.session import Session, SessionFlags
from libris.domain.state import VISITED_SCENE_TAGS, GameState, new_game_state


def test_new_game_state_initial_values() -> None:
    state = new_game_state()

    assert state.player_name == ""
    assert state.clues_found == []
    assert state.inventory == []
    assert state.trusted_shadows == 0
    assert state.avoided_shadows == 0
    assert state.path_taken == ""
    assert state.visited_scenes == {tag: False for tag in VISITED_SCENE_TAGS}
    assert set(state.visited_scenes) == {
        "aisle",
        "orbRoom",
        "mirrors",
        "sanctuary",
        "journalFound",
        "shadowEncountered",
    }


def test_new_game_states_do_not_share_containers() -> None:
    first = new_game_state()
    second = new_game_state()
    first.clues_found.append("ancientKey")
    first.visited_scenes["aisle"] = True

    assert second.clues_found == []
    assert second.visited_scenes["aisle"] is False


def test_session_reset_restores_initial_values() -> None:
    session = Session()
    session.state = GameState(player_name="Ada", clues_found=["ancientKey"], trusted_shadows=2)
    session.flags.is_game_over = True
    session.flags.ending_message_displayed = True
    session.phase = "awaiting_restart"
    session.scene_id = "final_confrontation"
    session.ending = "acceptance"

    session.reset()

    assert session.state == new_game_state()
    assert session.flags == SessionFlags()
    assert session.phase == "naming_player"
    assert session.scene_id is None
    assert session.ending is None


def test_closing_stage_follows_flags() -> None:
    flags = SessionFlags()
    assert flags.closing_stage == "not_started"
    flags.ending_message_displayed = True
    assert flags.closing_stage == "ending_shown"
    flags.awaiting_restart_choice = True
    assert flags.closing_stage == "awaiting_restart"
    flags.game_fully_over = True
    assert flags.closing_stage == "fully_over"
