import io

import pytest

from libris.presentation.cli import app
from libris.presentation.cli.render import InputCollector, TextPresenter
from libris.services import SessionController
from libris.services.ending_resolver import CREDIT_LINE, FAREWELL_LINE


def _run_scripted(answers: list[str], *, sound_cues: bool = False) -> tuple[SessionController, str]:
    output = io.StringIO()
    presenter = TextPresenter(
        mode="instant", width=10_000, sound_cues=sound_cues, input_fn=lambda _: "", output=output
    )
    remaining = iter(answers)
    collector = InputCollector(input_fn=lambda _: next(remaining))
    controller = SessionController()
    app.run_session(controller, presenter, collector)
    return controller, output.getvalue()


def test_scripted_playthrough_reaches_farewell() -> None:
    controller, text = _run_scripted(["", "Ada", "explore", "pick up", "enter", "take", "enter", "no"])

    assert controller.is_over is True
    assert "Please enter a valid name." in text
    assert "Your name is Ada" in text
    assert "the ancient key, the glowing orb, forbidden knowledge" in text
    assert "The End" in text
    assert CREDIT_LINE in text
    assert FAREWELL_LINE in text


def test_scripted_restart_plays_again_with_new_name() -> None:
    controller, text = _run_scripted(
        ["Ada", "explore", "ignore", "keep moving", "rest", "yes", "Bea", "call", "avoid", "turn back", "reject", "no"]
    )

    assert controller.is_over is True
    assert controller.session.state.player_name == "Bea"
    assert controller.session.ending == "rejection"
    assert "Your name is Bea" in text
    assert text.count(CREDIT_LINE) == 2


def test_ominous_moments_ring_the_bell_when_enabled() -> None:
    _, text = _run_scripted(["Ada", "call", "avoid", "turn back", "accept", "no"], sound_cues=True)
    assert text.count("\a") == 2


def test_debug_lines_show_events(monkeypatch) -> None:
    monkeypatch.setenv("LIBRIS_DEBUG", "1")
    _, text = _run_scripted(["Ada", "explore", "pick up", "enter", "take", "stay", "no"])

    assert "[debug] clue found: ancientKey (total 1)" in text
    assert "[debug] ending: stay" in text


def test_validate_flag_reports_clean_graph(capsys) -> None:
    app.main(["--validate"])
    assert "Scene graph OK" in capsys.readouterr().out


def test_closed_input_says_goodbye(monkeypatch, capsys, tmp_path) -> None:
    def closed(_prompt: str = "") -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", closed)

    app.main(["--instant", "--config", str(tmp_path / "missing.json")])

    assert "Goodbye!" in capsys.readouterr().out


def test_unknown_flag_exits(capsys) -> None:
    with pytest.raises(SystemExit):
        app.main(["--no-such-flag"])


def test_narrow_terminal_wraps_narration_without_losing_words() -> None:
    output = io.StringIO()
    presenter = TextPresenter(mode="instant", width=30, input_fn=lambda _: "", output=output)
    answers = iter(["Ada", "call", "avoid", "turn back", "accept", "no"])
    app.run_session(SessionController(), presenter, InputCollector(input_fn=lambda _: next(answers)))

    text = output.getvalue()
    assert all(len(line) <= 30 for line in text.splitlines() if " " in line)
    assert "Your name is Ada" in " ".join(text.split())
