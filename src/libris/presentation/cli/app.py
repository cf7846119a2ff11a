"""Console-driven loop for Libris."""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from libris.data import START_SCENE_ID
from libris.data.repositories import SceneRepository
from libris.domain.clues import CLUE_DESCRIPTIONS
from libris.presentation.cli.config import CliConfig, load_config
from libris.presentation.cli.render import InputCollector, TextPresenter, debug_enabled
from libris.services import (
    ClueFoundEvent,
    GameEndedEvent,
    ItemAcquiredEvent,
    OminousCueEvent,
    PathChosenEvent,
    SessionController,
    ShadowAvoidedEvent,
    ShadowTrustedEvent,
    StoryEvent,
    StoryService,
    Turn,
)
from libris.services.scene_graph_validator import EntryRoot, format_issue, has_errors, validate_scene_graph

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the interactive CLI session."""
    args = _parse_args(argv)
    scene_repo = SceneRepository()
    if args.validate:
        if not _run_validation(scene_repo):
            raise SystemExit(1)
        return
    config = load_config(args.config)
    if args.instant:
        config.text_display_mode = "instant"
    presenter = _build_presenter(config)
    controller = SessionController(StoryService(scene_repo))
    try:
        run_session(controller, presenter, InputCollector())
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed; leaving the session in phase '%s'.", controller.phase)
        print("\nGoodbye!")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="libris", description="A story told in a library of lost memories.")
    parser.add_argument("--instant", action="store_true", help="show each passage at once instead of typing it")
    parser.add_argument("--config", default=None, help="path to a JSON config file")
    parser.add_argument("--validate", action="store_true", help="check the scene graph and exit")
    return parser.parse_args(argv)


def _build_presenter(config: CliConfig) -> TextPresenter:
    return TextPresenter(
        mode=config.text_display_mode,
        delay_ms=config.typing_delay_ms,
        sound_cues=config.sound_cues,
    )


def _run_validation(scene_repo: SceneRepository) -> bool:
    issues = validate_scene_graph(
        scene_repo.all(),
        [EntryRoot(scene_id=START_SCENE_ID, source_type="story_start", source_id="start_story")],
        clue_descriptions=CLUE_DESCRIPTIONS,
    )
    for issue in issues:
        print(format_issue(issue))
    if not issues:
        print(f"Scene graph OK ({len(scene_repo.all())} scenes).")
    return not has_errors(issues)


def run_session(controller: SessionController, presenter: TextPresenter, collector: InputCollector) -> None:
    """Alternate between presenting text and collecting input until the session ends."""
    turn = controller.start()
    while True:
        _present_turn(controller, presenter, turn)
        if controller.is_over:
            return
        if not controller.expects_input:
            turn = controller.advance()
            continue
        if controller.phase == "naming_player":
            presenter.reveal(controller.input_prompt)
            turn = controller.submit(collector.collect_name())
        else:
            turn = controller.submit(collector.collect_choice(controller.input_prompt))


def _present_turn(controller: SessionController, presenter: TextPresenter, turn: Turn) -> None:
    if any(isinstance(event, OminousCueEvent) for event in turn.events):
        presenter.cue()
    if debug_enabled() and (turn.events or turn.segments):
        lines = [_describe_event(event) for event in turn.events]
        if controller.session.scene_id:
            lines.append(f"scene: {controller.session.scene_id}")
        presenter.render_debug(lines)
    presenter.present(turn.segments)


def _describe_event(event: StoryEvent) -> str:
    if isinstance(event, ClueFoundEvent):
        return f"clue found: {event.clue_id} (total {event.total_clues})"
    if isinstance(event, ItemAcquiredEvent):
        return f"item acquired: {event.item_id}"
    if isinstance(event, ShadowTrustedEvent):
        return f"shadows trusted: {event.total}"
    if isinstance(event, ShadowAvoidedEvent):
        return f"shadows avoided: {event.total}"
    if isinstance(event, PathChosenEvent):
        return f"path taken: {event.path}"
    if isinstance(event, OminousCueEvent):
        return "ominous cue"
    if isinstance(event, GameEndedEvent):
        return f"ending: {event.ending}"
    return str(event)
