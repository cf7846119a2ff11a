def test_import_libris_package() -> None:
    import importlib

    module = importlib.import_module("libris")
    assert module is not None


def test_import_story_service_no_side_effects() -> None:
    from libris.services import StoryService

    service = StoryService()
    assert service.start_scene_id == "opening"
