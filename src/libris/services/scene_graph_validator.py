"""Static scene graph validation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, MutableMapping, Sequence

from libris.domain.defs import SceneChoiceDef, SceneDef, SceneEffectDef


Severity = str

_KNOWN_EFFECT_TYPES = {
    "add_clue",
    "add_item",
    "trust_shadow",
    "avoid_shadow",
    "set_path",
    "mark_visited",
    "ominous_cue",
    "branch_on_clue_count",
}


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


@dataclass(frozen=True, slots=True)
class EntryRoot:
    scene_id: str
    source_type: str
    source_id: str


@dataclass(frozen=True, slots=True)
class SceneInfo:
    scene_id: str
    next_scene_id: str | None
    choice_next_ids: list[str]
    branch_targets: list[str]
    has_choices: bool
    has_ending_choice: bool
    clue_ids: list[str]

    def successors(self) -> list[str]:
        targets = list(self.choice_next_ids) + list(self.branch_targets)
        if self.next_scene_id and not self.branch_targets:
            targets.append(self.next_scene_id)
        return targets


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def has_errors(issues: Sequence[Issue]) -> bool:
    return any(issue.severity == "ERROR" for issue in issues)


def validate_scene_graph(
    scenes: Mapping[str, SceneDef] | Sequence[SceneDef],
    entry_roots: Sequence[EntryRoot] | Sequence[str],
    *,
    clue_descriptions: Mapping[str, str] | None = None,
) -> list[Issue]:
    issues: list[Issue] = []
    scene_map, duplicate_ids = _coerce_scenes(scenes)
    for scene_id in duplicate_ids:
        issues.append(
            Issue(
                severity="ERROR",
                code="DUPLICATE_SCENE_ID",
                message="Duplicate scene id detected.",
                context={"scene_id": scene_id},
            )
        )

    infos: dict[str, SceneInfo] = {}
    for scene_id, scene in scene_map.items():
        infos[scene_id] = _build_scene_info(scene, issues)
    scene_ids = set(infos.keys())

    roots = _coerce_entry_roots(entry_roots)
    for entry in roots:
        if entry.scene_id not in scene_ids:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_ENTRY_ROOT",
                    message="Entry root references missing scene.",
                    context={
                        "source_type": entry.source_type,
                        "source_id": entry.source_id,
                        "referenced_id": entry.scene_id,
                    },
                )
            )

    for info in infos.values():
        _validate_scene_references(info, scene_ids, issues)
        _validate_dead_end(info, issues)

    _validate_reachability(infos, roots, issues)
    _validate_ending_paths(infos, issues)
    _validate_auto_advance_cycles(infos, issues)
    if clue_descriptions is not None:
        _validate_clue_descriptions(infos, clue_descriptions, issues)
    return issues


def _coerce_scenes(
    scenes: Mapping[str, SceneDef] | Sequence[SceneDef],
) -> tuple[dict[str, SceneDef], list[str]]:
    if isinstance(scenes, Mapping):
        return dict(scenes), []
    scene_map: dict[str, SceneDef] = {}
    duplicates: list[str] = []
    for scene in scenes:
        if scene.id in scene_map:
            duplicates.append(scene.id)
            continue
        scene_map[scene.id] = scene
    return scene_map, duplicates


def _coerce_entry_roots(entry_roots: Sequence[EntryRoot] | Sequence[str]) -> list[EntryRoot]:
    roots: list[EntryRoot] = []
    for entry in entry_roots:
        if isinstance(entry, EntryRoot):
            roots.append(entry)
        else:
            roots.append(EntryRoot(scene_id=str(entry), source_type="unknown", source_id="unknown"))
    return roots


def _build_scene_info(scene: SceneDef, issues: list[Issue]) -> SceneInfo:
    branch_targets: list[str] = []
    clue_ids: list[str] = []
    _inspect_effects(scene.id, scene.effects, "effects", branch_targets, clue_ids, issues)
    choice_next_ids: list[str] = []
    has_ending_choice = False
    for index, choice in enumerate(scene.choices):
        path = f"choices[{index}]"
        _validate_choice(scene.id, choice, path, issues)
        _inspect_effects(scene.id, choice.effects, f"{path}.effects", branch_targets, clue_ids, issues)
        if choice.next_scene_id is not None:
            choice_next_ids.append(choice.next_scene_id)
        if choice.ending is not None:
            has_ending_choice = True
    _warn_on_shadowed_keywords(scene, issues)
    return SceneInfo(
        scene_id=scene.id,
        next_scene_id=scene.next_scene_id,
        choice_next_ids=choice_next_ids,
        branch_targets=branch_targets,
        has_choices=bool(scene.choices),
        has_ending_choice=has_ending_choice,
        clue_ids=clue_ids,
    )


def _inspect_effects(
    scene_id: str,
    effects: Sequence[SceneEffectDef],
    context: str,
    branch_targets: list[str],
    clue_ids: list[str],
    issues: list[Issue],
) -> None:
    for index, effect in enumerate(effects):
        effect_path = f"{context}[{index}]"
        if effect.type not in _KNOWN_EFFECT_TYPES:
            issues.append(
                Issue(
                    severity="WARN",
                    code="UNKNOWN_EFFECT_TYPE",
                    message="Effect type is not recognized by runtime and will be ignored.",
                    context={"scene_id": scene_id, "field_path": effect_path},
                )
            )
            continue
        if effect.type == "add_clue" and isinstance(effect.data.get("clue_id"), str):
            clue_ids.append(effect.data["clue_id"])  # type: ignore[arg-type]
        if effect.type == "branch_on_clue_count":
            for key in ("next_on_true", "next_on_false"):
                target = effect.data.get(key)
                if not isinstance(target, str):
                    issues.append(
                        Issue(
                            severity="ERROR",
                            code="INVALID_BRANCH_ON_CLUE_COUNT",
                            message=f"branch_on_clue_count.{key} must be a string.",
                            context={"scene_id": scene_id, "field_path": f"{effect_path}.{key}"},
                        )
                    )
                    continue
                branch_targets.append(target)
            if not isinstance(effect.data.get("threshold"), int):
                issues.append(
                    Issue(
                        severity="ERROR",
                        code="INVALID_BRANCH_ON_CLUE_COUNT",
                        message="branch_on_clue_count.threshold must be an integer.",
                        context={"scene_id": scene_id, "field_path": f"{effect_path}.threshold"},
                    )
                )


def _validate_choice(scene_id: str, choice: SceneChoiceDef, path: str, issues: list[Issue]) -> None:
    if not choice.keywords or any(not keyword for keyword in choice.keywords):
        issues.append(
            Issue(
                severity="ERROR",
                code="EMPTY_KEYWORDS",
                message="Choice must list non-empty keywords.",
                context={"scene_id": scene_id, "field_path": f"{path}.keywords"},
            )
        )
    if (choice.next_scene_id is None) == (choice.ending is None):
        issues.append(
            Issue(
                severity="ERROR",
                code="INVALID_CHOICE_TARGET",
                message="Choice must lead to exactly one of a scene or an ending.",
                context={"scene_id": scene_id, "field_path": path},
            )
        )


def _warn_on_shadowed_keywords(scene: SceneDef, issues: list[Issue]) -> None:
    earlier: list[str] = []
    for index, choice in enumerate(scene.choices):
        for keyword in choice.keywords:
            blocker = next((seen for seen in earlier if seen and seen in keyword), None)
            if blocker is not None:
                issues.append(
                    Issue(
                        severity="WARN",
                        code="SHADOWED_KEYWORD",
                        message="Keyword always matches an earlier keyword first.",
                        context={
                            "scene_id": scene.id,
                            "field_path": f"choices[{index}].keywords",
                            "keyword": keyword,
                            "shadowed_by": blocker,
                        },
                    )
                )
        earlier.extend(choice.keywords)


def _validate_scene_references(info: SceneInfo, scene_ids: set[str], issues: list[Issue]) -> None:
    if info.next_scene_id and info.next_scene_id not in scene_ids:
        issues.append(
            Issue(
                severity="ERROR",
                code="MISSING_SCENE_REF",
                message="Scene references missing next scene.",
                context={"scene_id": info.scene_id, "field_path": "next_scene_id", "referenced_id": info.next_scene_id},
            )
        )
    for index, next_id in enumerate(info.choice_next_ids):
        if next_id not in scene_ids:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_SCENE_REF",
                    message="Choice references missing scene.",
                    context={
                        "scene_id": info.scene_id,
                        "field_path": f"choices[{index}].next_scene_id",
                        "referenced_id": next_id,
                    },
                )
            )
    for target in info.branch_targets:
        if target not in scene_ids:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_SCENE_REF",
                    message="branch_on_clue_count references missing scene.",
                    context={"scene_id": info.scene_id, "referenced_id": target},
                )
            )


def _validate_dead_end(info: SceneInfo, issues: list[Issue]) -> None:
    if info.has_choices or info.next_scene_id or info.branch_targets:
        return
    issues.append(
        Issue(
            severity="ERROR",
            code="DEAD_END",
            message="Scene has no choices, no next scene and no branch.",
            context={"scene_id": info.scene_id},
        )
    )


def _validate_reachability(
    infos: Mapping[str, SceneInfo],
    entry_roots: Sequence[EntryRoot],
    issues: list[Issue],
) -> None:
    scene_ids = set(infos.keys())
    reachable: set[str] = set()
    stack = [entry.scene_id for entry in entry_roots if entry.scene_id in scene_ids]
    while stack:
        scene_id = stack.pop()
        if scene_id in reachable:
            continue
        reachable.add(scene_id)
        stack.extend(target for target in infos[scene_id].successors() if target in scene_ids)
    for scene_id in sorted(scene_ids - reachable):
        issues.append(
            Issue(
                severity="WARN",
                code="UNREACHABLE_SCENE",
                message="Scene is unreachable from story roots.",
                context={"scene_id": scene_id},
            )
        )


def _validate_ending_paths(infos: Mapping[str, SceneInfo], issues: list[Issue]) -> None:
    predecessors: dict[str, set[str]] = {scene_id: set() for scene_id in infos}
    for scene_id, info in infos.items():
        for target in info.successors():
            if target in predecessors:
                predecessors[target].add(scene_id)
    can_end: set[str] = set()
    stack = [scene_id for scene_id, info in infos.items() if info.has_ending_choice]
    while stack:
        scene_id = stack.pop()
        if scene_id in can_end:
            continue
        can_end.add(scene_id)
        stack.extend(predecessors[scene_id])
    for scene_id in sorted(set(infos.keys()) - can_end):
        issues.append(
            Issue(
                severity="ERROR",
                code="NO_ENDING_PATH",
                message="No sequence of choices leads from this scene to an ending.",
                context={"scene_id": scene_id},
            )
        )


def _validate_auto_advance_cycles(infos: Mapping[str, SceneInfo], issues: list[Issue]) -> None:
    adjacency: MutableMapping[str, list[str]] = {}
    for scene_id, info in infos.items():
        if info.has_choices:
            continue
        targets = info.branch_targets or ([info.next_scene_id] if info.next_scene_id else [])
        adjacency[scene_id] = [
            target for target in targets if target in infos and not infos[target].has_choices
        ]

    visited: set[str] = set()
    stack: list[str] = []
    stack_set: set[str] = set()
    cycles: list[list[str]] = []

    def dfs(current: str) -> None:
        visited.add(current)
        stack.append(current)
        stack_set.add(current)
        for next_scene in adjacency.get(current, []):
            if next_scene not in visited:
                dfs(next_scene)
            elif next_scene in stack_set:
                cycles.append(stack[stack.index(next_scene) :])
        stack.pop()
        stack_set.remove(current)

    for scene_id in sorted(adjacency):
        if scene_id not in visited:
            dfs(scene_id)

    for cycle in cycles:
        cycle_path = " -> ".join(cycle + [cycle[0]])
        issues.append(
            Issue(
                severity="ERROR",
                code="AUTOADVANCE_CYCLE",
                message="Auto-advance cycle detected.",
                context={"cycle": cycle_path},
            )
        )


def _validate_clue_descriptions(
    infos: Mapping[str, SceneInfo],
    clue_descriptions: Mapping[str, str],
    issues: list[Issue],
) -> None:
    reported: set[str] = set()
    for scene_id in sorted(infos):
        for clue_id in infos[scene_id].clue_ids:
            if clue_id in clue_descriptions or clue_id in reported:
                continue
            reported.add(clue_id)
            issues.append(
                Issue(
                    severity="WARN",
                    code="UNDESCRIBED_CLUE",
                    message="Clue has no description and will be left out of the revelation summary.",
                    context={"scene_id": scene_id, "clue_id": clue_id},
                )
            )
