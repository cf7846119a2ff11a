from libris.data import build_scenes
from libris.domain import clues
from libris.domain.clues import CLUE_DESCRIPTIONS, describe_clues, summarize_clues


def _clues_pushed_by_scenes() -> set[str]:
    pushed: set[str] = set()
    for scene in build_scenes():
        effects = list(scene.effects)
        for choice in scene.choices:
            effects.extend(choice.effects)
        for effect in effects:
            if effect.type == "add_clue":
                pushed.add(effect.data["clue_id"])
    return pushed


def test_every_clue_pushed_by_a_scene_has_a_description() -> None:
    missing = sorted(_clues_pushed_by_scenes() - set(CLUE_DESCRIPTIONS))
    assert missing == []


def test_every_described_clue_is_reachable_in_some_scene() -> None:
    assert set(CLUE_DESCRIPTIONS) == _clues_pushed_by_scenes()
    assert len(CLUE_DESCRIPTIONS) == 19


def test_summary_uses_discovery_order() -> None:
    summary = summarize_clues([clues.ANCIENT_KEY, clues.GLOWING_ORB, clues.FORBIDDEN_KNOWLEDGE])
    assert summary == "the ancient key, the glowing orb, forbidden knowledge"


def test_describe_clues_skips_unknown_and_repeated_ids() -> None:
    phrases = describe_clues([clues.SANCTUARY, "notAClue", clues.SANCTUARY, clues.MIRROR_MEMORY])
    assert phrases == ["the sanctuary", "a memory from the mirror"]


def test_threshold_is_three() -> None:
    assert clues.CLUE_THRESHOLD == 3
