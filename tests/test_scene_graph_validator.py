from libris.data import START_SCENE_ID, build_scenes
from libris.domain.clues import CLUE_DESCRIPTIONS
from libris.domain.defs import SceneChoiceDef, SceneDef, SceneEffectDef
from libris.services.scene_graph_validator import (
    EntryRoot,
    Issue,
    format_issue,
    has_errors,
    validate_scene_graph,
)


def _codes(issues: list[Issue]) -> set[str]:
    return {issue.code for issue in issues}


def _ending_scene(scene_id: str = "end") -> SceneDef:
    return SceneDef(id=scene_id, prompt="?", choices=[SceneChoiceDef(keywords=("rest",), ending="rest")])


def test_story_scene_graph_is_clean() -> None:
    issues = validate_scene_graph(build_scenes(), [START_SCENE_ID], clue_descriptions=CLUE_DESCRIPTIONS)
    assert [format_issue(issue) for issue in issues] == []


def test_missing_references_and_roots_are_errors() -> None:
    scenes = [
        SceneDef(id="start", prompt="?", choices=[SceneChoiceDef(keywords=("go",), next_scene_id="nowhere")]),
        _ending_scene(),
    ]

    issues = validate_scene_graph(scenes, [EntryRoot("missing", "story_start", "start_story"), "start"])

    assert {"MISSING_SCENE_REF", "MISSING_ENTRY_ROOT"} <= _codes(issues)
    assert has_errors(issues)


def test_dead_end_and_unreachable_scenes_are_reported() -> None:
    scenes = [
        SceneDef(id="start", prompt="?", choices=[SceneChoiceDef(keywords=("go",), next_scene_id="end")]),
        _ending_scene(),
        SceneDef(id="orphan", text="Nothing here."),
    ]

    issues = validate_scene_graph(scenes, ["start"])

    dead_ends = [issue for issue in issues if issue.code == "DEAD_END"]
    unreachable = [issue for issue in issues if issue.code == "UNREACHABLE_SCENE"]
    assert [issue.context["scene_id"] for issue in dead_ends] == ["orphan"]
    assert [issue.context["scene_id"] for issue in unreachable] == ["orphan"]
    assert unreachable[0].severity == "WARN"


def test_loop_without_an_ending_is_an_error() -> None:
    scenes = [
        SceneDef(id="a", prompt="?", choices=[SceneChoiceDef(keywords=("left",), next_scene_id="b")]),
        SceneDef(id="b", prompt="?", choices=[SceneChoiceDef(keywords=("right",), next_scene_id="a")]),
    ]

    issues = validate_scene_graph(scenes, ["a"])

    no_exit = sorted(issue.context["scene_id"] for issue in issues if issue.code == "NO_ENDING_PATH")
    assert no_exit == ["a", "b"]


def test_auto_advance_cycle_is_detected() -> None:
    scenes = [
        SceneDef(id="a", text="A", next_scene_id="b"),
        SceneDef(id="b", text="B", next_scene_id="a"),
    ]

    issues = validate_scene_graph(scenes, ["a"])

    cycles = [issue for issue in issues if issue.code == "AUTOADVANCE_CYCLE"]
    assert len(cycles) == 1
    assert cycles[0].context["cycle"] == "a -> b -> a"


def test_branch_targets_are_followed() -> None:
    gate = SceneDef(
        id="gate",
        effects=[
            SceneEffectDef(
                type="branch_on_clue_count",
                data={"threshold": 3, "next_on_true": "end", "next_on_false": "missing"},
            )
        ],
    )

    issues = validate_scene_graph([gate, _ending_scene()], ["gate"])

    assert [issue.context.get("referenced_id") for issue in issues if issue.code == "MISSING_SCENE_REF"] == ["missing"]
    assert "UNREACHABLE_SCENE" not in _codes(issues)


def test_malformed_branch_is_an_error() -> None:
    gate = SceneDef(
        id="gate",
        effects=[SceneEffectDef(type="branch_on_clue_count", data={"threshold": "three", "next_on_true": "end"})],
        next_scene_id="end",
    )

    issues = validate_scene_graph([gate, _ending_scene()], ["gate"])

    assert [issue.code for issue in issues].count("INVALID_BRANCH_ON_CLUE_COUNT") == 2


def test_choice_problems_are_reported() -> None:
    scene = SceneDef(
        id="start",
        prompt="?",
        choices=[
            SceneChoiceDef(keywords=("go",), next_scene_id="start", ending="rest"),
            SceneChoiceDef(keywords=(), ending="rest"),
        ],
    )

    issues = validate_scene_graph([scene], ["start"])

    assert {"INVALID_CHOICE_TARGET", "EMPTY_KEYWORDS"} <= _codes(issues)


def test_warnings_do_not_count_as_errors() -> None:
    scene = SceneDef(
        id="start",
        prompt="?",
        effects=[
            SceneEffectDef(type="summon_owl"),
            SceneEffectDef(type="add_clue", data={"clue_id": "mysteryClue"}),
        ],
        choices=[
            SceneChoiceDef(keywords=("look",), ending="rest"),
            SceneChoiceDef(keywords=("look closer",), ending="stay"),
        ],
    )

    issues = validate_scene_graph([scene], ["start"], clue_descriptions=CLUE_DESCRIPTIONS)

    assert _codes(issues) == {"UNKNOWN_EFFECT_TYPE", "SHADOWED_KEYWORD", "UNDESCRIBED_CLUE"}
    assert not has_errors(issues)


def test_format_issue_includes_context() -> None:
    issue = Issue(severity="ERROR", code="DEAD_END", message="Stuck.", context={"scene_id": "a"})
    assert format_issue(issue) == "[ERROR] DEAD_END: Stuck. (scene_id=a)"
