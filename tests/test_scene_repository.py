import pytest

from libris.data import DataError, DataValidationError, START_SCENE_ID
from libris.data.repositories import SceneRepository
from libris.domain.defs import SceneChoiceDef, SceneDef


def test_scene_repository_loads_scenes() -> None:
    repo = SceneRepository()
    scene = repo.get(START_SCENE_ID)

    assert scene.prompt
    assert [choice.keywords for choice in scene.choices] == [("explore",), ("call",)]
    assert len(repo.all()) >= 30


def test_scene_repository_all_is_sorted() -> None:
    ids = [scene.id for scene in SceneRepository().all()]
    assert ids == sorted(ids)


def test_scene_repository_unknown_id_raises_key_error() -> None:
    repo = SceneRepository()
    with pytest.raises(KeyError):
        repo.get("no_such_scene")


def test_duplicate_scene_ids_are_rejected() -> None:
    repo = SceneRepository(lambda: [SceneDef(id="a", next_scene_id="a"), SceneDef(id="a", next_scene_id="a")])
    with pytest.raises(DataValidationError):
        repo.get("a")


def test_choice_must_lead_to_exactly_one_target() -> None:
    scene = SceneDef(
        id="a",
        prompt="?",
        choices=[SceneChoiceDef(keywords=("go",), next_scene_id="b", ending="rest")],
    )
    repo = SceneRepository(lambda: [scene])
    with pytest.raises(DataValidationError):
        repo.all()


def test_keywords_must_be_normalized() -> None:
    scene = SceneDef(id="a", prompt="?", choices=[SceneChoiceDef(keywords=("Go",), next_scene_id="a")])
    repo = SceneRepository(lambda: [scene])
    with pytest.raises(DataValidationError):
        repo.all()


def test_scene_with_choices_needs_a_prompt() -> None:
    scene = SceneDef(id="a", choices=[SceneChoiceDef(keywords=("go",), next_scene_id="a")])
    repo = SceneRepository(lambda: [scene])
    with pytest.raises(DataValidationError):
        repo.all()


def test_validation_errors_are_data_errors() -> None:
    repo = SceneRepository(lambda: [SceneDef(id="")])
    with pytest.raises(DataError):
        repo.all()
