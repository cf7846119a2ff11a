"""Hand-authored scene graph for the library of lost memories.

Each scene presents its text followed by its prompt, then waits for a line of
input. Choices are tested in the order listed here and the first keyword found
inside the player's answer wins. Scenes without choices either branch through
an effect or auto-advance to ``next_scene_id``.
"""
from __future__ import annotations

from typing import List

from libris.core.types import EndingKind
from libris.domain import clues
from libris.domain.defs import SceneChoiceDef, SceneDef, SceneEffectDef

START_SCENE_ID = "opening"
ENDING_GATE_SCENE_ID = "check_for_ending"


def _effect(effect_type: str, **data: object) -> SceneEffectDef:
    return SceneEffectDef(type=effect_type, data=dict(data))


def _choice(
    *keywords: str,
    narration: List[str] | None = None,
    effects: List[SceneEffectDef] | None = None,
    next_scene_id: str | None = None,
    ending: EndingKind | None = None,
) -> SceneChoiceDef:
    return SceneChoiceDef(
        keywords=tuple(keywords),
        narration=list(narration or []),
        effects=list(effects or []),
        next_scene_id=next_scene_id,
        ending=ending,
    )


def _add_clue(clue_id: str) -> SceneEffectDef:
    return _effect("add_clue", clue_id=clue_id)


def _door_of_truth_choices() -> List[SceneChoiceDef]:
    return [
        _choice(
            "enter",
            narration=[
                "With a heavy heart, you push open the door. A torrent of memories floods back—the accident, "
                "the guilt, the unbearable grief. You realize you've been trapped within your own mind, hiding "
                "from the pain of losing someone you loved.\n\n"
                "Tears stream down your face as you confront the reality you've been avoiding. The library "
                "begins to dissolve around you, the shelves fading into a bright light.\n\n"
                "You understand now that to heal, you must face the sorrow and allow yourself to grieve.\n\n"
                "**The End**"
            ],
            ending="acceptance",
        ),
        _choice(
            "stay",
            narration=[
                "You step back from the door, unable to face the painful truth. The library offers solace in "
                "its endless corridors and forgotten memories.\n\n"
                "Perhaps, in time, you'll find the courage to confront what lies beyond.\n\n"
                "**To be continued...**"
            ],
            ending="stay",
        ),
    ]


def _opening_scenes() -> List[SceneDef]:
    return [
        SceneDef(
            id=START_SCENE_ID,
            text=(
                "You awaken to the soft rustling of pages and the faint scent of aged paper. As your eyes adjust "
                "to the dim light, towering bookshelves come into focus, stretching infinitely in every "
                "direction. A profound silence envelops you, broken only by the distant echo of a closing "
                "book.\n\n"
                "You have no recollection of how you arrived here. Your name is {player_name}, but beyond that, "
                "your memories are shrouded in fog."
            ),
            prompt="Do you choose to 'explore' the library or 'call out' for someone?",
            retry_text="Uncertain, you hesitate. Do you 'explore' the library or 'call out' for someone?",
            choices=[
                _choice(
                    "explore",
                    narration=[
                        "You decide to explore. As you walk deeper into the labyrinth of shelves, the books seem "
                        "to whisper, their voices just beyond comprehension. The dim light casts long shadows, "
                        "and you can't shake the feeling of being watched."
                    ],
                    effects=[_effect("mark_visited", scene_tag="aisle"), _effect("set_path", path="explore")],
                    next_scene_id="aisle_key",
                ),
                _choice(
                    "call",
                    narration=[
                        "You call out into the vastness, your voice echoing endlessly. For a moment, there's "
                        "only silence. Then, a faint whisper responds, \"We've been waiting for you...\" A chill "
                        "runs down your spine."
                    ],
                    effects=[_effect("set_path", path="call")],
                    next_scene_id="shadow_librarian",
                ),
            ],
        ),
    ]


def _explore_scenes() -> List[SceneDef]:
    return [
        SceneDef(
            id="aisle_key",
            text=(
                "As you navigate the winding aisles, a glint catches your eye. A key lies on the floor, ornate "
                "and ancient."
            ),
            prompt="Do you 'pick up' the key or 'ignore' it?",
            retry_text="The key lies on the floor. Do you 'pick up' the key or 'ignore' it?",
            choices=[
                _choice(
                    "pick up",
                    narration=[
                        "You pick up the key, feeling its cold weight in your hand. It seems to hum with a faint "
                        "energy."
                    ],
                    effects=[_effect("add_item", item_id=clues.ANCIENT_KEY), _add_clue(clues.ANCIENT_KEY)],
                    next_scene_id="aisle_door",
                ),
                _choice(
                    "ignore",
                    narration=[
                        "You decide to leave the key. As you walk away, you hear a soft click behind you, but see "
                        "nothing when you turn."
                    ],
                    next_scene_id="shadow_aisle",
                ),
            ],
        ),
        SceneDef(
            id="aisle_door",
            text=(
                "You notice a door at the end of the aisle, one that wasn't there before. It's slightly ajar, "
                "darkness spilling out."
            ),
            prompt="Do you 'enter' the door or 'continue' down the aisle?",
            retry_text="Do you 'enter' the door or 'continue' down the aisle?",
            choices=[
                _choice(
                    "enter",
                    narration=[
                        "You push the door open and step into a circular room filled with floating books. In the "
                        "center, a pedestal holds a glowing orb."
                    ],
                    effects=[_effect("mark_visited", scene_tag="orbRoom"), _add_clue(clues.GLOWING_ORB)],
                    next_scene_id="orb_chamber",
                ),
                _choice(
                    "continue",
                    narration=[
                        "You continue down the aisle, the atmosphere growing heavier. The whispers of the books "
                        "grow louder."
                    ],
                    next_scene_id="shadow_blocking",
                ),
            ],
        ),
        SceneDef(
            id="orb_chamber",
            text='A voice echoes: "The knowledge you seek comes with a price."',
            prompt="Do you 'take' the orb or 'leave' it?",
            retry_text='The voice echoes: "Choose wisely." Do you \'take\' the orb or \'leave\' it?',
            choices=[
                _choice(
                    "take",
                    narration=[
                        "As you grasp the orb, a surge of memories floods your mind—some joyful, others painful. "
                        "The weight of knowledge is overwhelming.",
                        "The room begins to dissolve, and you find yourself back in the library, but everything "
                        "feels different.",
                    ],
                    effects=[_add_clue(clues.FORBIDDEN_KNOWLEDGE)],
                    next_scene_id=ENDING_GATE_SCENE_ID,
                ),
                _choice(
                    "leave",
                    narration=[
                        "You decide it's best not to disturb the orb. As you turn to leave, the floating books "
                        "rearrange themselves, forming a pathway."
                    ],
                    next_scene_id="book_path",
                ),
            ],
        ),
        SceneDef(
            id="book_path",
            prompt="Do you 'follow' the book path or 'return' to the aisle?",
            retry_text="Do you 'follow' the book path or 'return' to the aisle?",
            choices=[
                _choice(
                    "follow",
                    narration=[
                        "You follow the path of books, which leads you to a hidden chamber filled with artifacts "
                        "from your past."
                    ],
                    effects=[_add_clue(clues.PERSONAL_ARTIFACTS)],
                    next_scene_id="artifact_chamber",
                ),
                _choice(
                    "return",
                    narration=[
                        "You decide to return to the aisle, but the door has vanished. You're trapped.",
                        "A shadowy figure appears, blocking your path.",
                    ],
                    effects=[_effect("ominous_cue")],
                    next_scene_id="final_confrontation",
                ),
            ],
        ),
        SceneDef(
            id="artifact_chamber",
            text="You feel a deep connection to this place, as if it's a part of you.",
            prompt="Do you 'examine' the artifacts or 'move on'?",
            retry_text="The artifacts wait in the half-light. Do you 'examine' them or 'move on'?",
            choices=[
                _choice(
                    "examine",
                    narration=[
                        "You lift the objects one by one: a faded ticket stub, a child's drawing, a scarf that "
                        "still smells faintly of someone's perfume. Each one tugs at a memory just out of reach."
                    ],
                    effects=[_add_clue(clues.HIDDEN_ARTIFACTS)],
                    next_scene_id="artifact_music_box",
                ),
                _choice(
                    "move on",
                    narration=["You leave the chamber as it was, carrying the feeling of it with you."],
                    next_scene_id=ENDING_GATE_SCENE_ID,
                ),
            ],
        ),
        SceneDef(
            id="artifact_music_box",
            text="At the back of the chamber sits a small wooden music box, its lid painted with tiny stars.",
            prompt="Do you 'wind' the music box or 'set it down'?",
            retry_text="The music box sits silent in your hands. Do you 'wind' it or 'set it down'?",
            choices=[
                _choice(
                    "wind",
                    narration=[
                        "You turn the little key. A gentle lullaby spills out, and with it the memory of a voice "
                        "humming along, warm and close."
                    ],
                    effects=[_add_clue(clues.ARTIFACT_MEMORIES)],
                    next_scene_id=ENDING_GATE_SCENE_ID,
                ),
                _choice(
                    "set",
                    narration=[
                        "You set the music box down gently. Some memories, you sense, are not ready to be heard."
                    ],
                    next_scene_id=ENDING_GATE_SCENE_ID,
                ),
            ],
        ),
        SceneDef(
            id="shadow_blocking",
            text="Suddenly, a shadow blocks your path, its eyes gleaming.",
            prompt="Do you 'confront' the shadow or 'retreat'?",
            retry_text="Do you 'confront' the shadow or 'retreat'?",
            choices=[
                _choice(
                    "confront",
                    narration=[
                        "You gather your courage and step toward the shadow. \"What do you want?\" you demand. "
                        "The shadow smiles, \"Only to help you remember.\""
                    ],
                    effects=[_effect("trust_shadow")],
                    next_scene_id="shadow_doorway",
                ),
                _choice(
                    "retreat",
                    narration=[
                        "Fear overtakes you, and you turn to run. The shadows around you deepen, and you become "
                        "hopelessly lost.",
                        "Exhausted, you collapse to the floor. When you awaken, you find yourself back at the "
                        "entrance of the library.",
                    ],
                    effects=[_effect("avoid_shadow"), _effect("ominous_cue")],
                    next_scene_id="crossroads",
                ),
            ],
        ),
        SceneDef(
            id="shadow_doorway",
            text='The shadow gestures, and a doorway appears. "Through there lies your truth."',
            prompt="Do you 'enter' the doorway or 'stay' where you are?",
            retry_text="Do you 'enter' the doorway or 'stay' where you are?",
            choices=[
                _choice(
                    "enter",
                    narration=[
                        "You step through the doorway and find yourself in a room filled with mirrors reflecting "
                        "different moments of your life."
                    ],
                    effects=[_effect("mark_visited", scene_tag="mirrors"), _add_clue(clues.MIRROR_ROOM)],
                    next_scene_id="mirror_room",
                ),
                _choice(
                    "stay",
                    narration=[
                        "You decide not to enter. The doorway closes, and the shadow sighs, \"Perhaps another "
                        "time.\""
                    ],
                    next_scene_id="shadow_fading",
                ),
            ],
        ),
        SceneDef(
            id="shadow_fading",
            text="The shadow begins to fade, its outline thinning like smoke.",
            prompt="Do you 'reconsider' and call it back, or 'let it go'?",
            retry_text="The shadow is almost gone. Do you 'reconsider' or 'let it go'?",
            choices=[
                _choice(
                    "reconsider",
                    narration=[
                        "\"Wait!\" you call out. The shadow pauses, and the doorway shimmers back into view."
                    ],
                    effects=[_effect("trust_shadow")],
                    next_scene_id="shadow_doorway",
                ),
                _choice(
                    "let",
                    narration=["The shadow fades away, leaving you alone."],
                    next_scene_id="crossroads",
                ),
            ],
        ),
        SceneDef(
            id="mirror_room",
            text="As you gaze into the mirrors, you begin to understand the fragments of your past.",
            prompt="Do you 'study' your reflections or 'step back'?",
            retry_text="The mirrors shimmer. Do you 'study' your reflections or 'step back'?",
            choices=[
                _choice(
                    "study",
                    narration=[
                        "You linger before each mirror in turn. A birthday candle, a rain-streaked window, a hand "
                        "held tightly in a hospital corridor. The recollections settle into place."
                    ],
                    effects=[_add_clue(clues.MIRROR_RECOLLECTIONS)],
                    next_scene_id=ENDING_GATE_SCENE_ID,
                ),
                _choice(
                    "step back",
                    narration=["You step back from the mirrors. What you have seen is enough for now."],
                    next_scene_id=ENDING_GATE_SCENE_ID,
                ),
            ],
        ),
        SceneDef(
            id="shadow_aisle",
            text="The aisle stretches endlessly. Shadows seem to move just out of sight.",
            prompt="Do you 'investigate' the shadows or 'keep moving'? You could also 'go back' the way you came.",
            retry_text="Do you 'investigate' the shadows, 'keep moving', or 'go back' the way you came?",
            choices=[
                _choice(
                    "investigate",
                    narration=[
                        "You follow the moving shadows, which lead you to a hidden alcove. Inside, you find a "
                        "journal with your name on it."
                    ],
                    effects=[_add_clue(clues.PERSONAL_JOURNAL), _effect("mark_visited", scene_tag="journalFound")],
                    next_scene_id="journal",
                ),
                _choice(
                    "keep moving",
                    narration=[
                        "You decide not to follow the shadows. The library seems to shift around you, and you "
                        "find yourself back at the entrance.",
                        "A sense of déjà vu washes over you.",
                    ],
                    next_scene_id="crossroads",
                ),
                _choice(
                    "go back",
                    narration=["You retrace your steps between the shelves, back the way you came."],
                    next_scene_id="aisle_key",
                ),
            ],
        ),
        SceneDef(
            id="journal",
            prompt="Do you 'read' the journal or 'put it away'?",
            retry_text="Do you 'read' the journal or 'put it away'?",
            choices=[
                _choice(
                    "read",
                    narration=[
                        "You open the journal, and as you read, memories flood back. You remember why you're "
                        "here.",
                        "A doorway appears, glowing softly.",
                    ],
                    effects=[_add_clue(clues.MEMORY_RESTORATION)],
                    next_scene_id="journal_doorway",
                ),
                _choice(
                    "put",
                    narration=[
                        "You place the journal back. A feeling of regret lingers.",
                        "The shadows envelop you, and you become disoriented.",
                    ],
                    next_scene_id="crossroads",
                ),
            ],
        ),
        SceneDef(
            id="journal_doorway",
            prompt="Do you 'enter' the doorway or 'stay' and explore more?",
            retry_text="The choice is yours. Do you 'enter' to confront the truth or 'stay' in the library?",
            choices=_door_of_truth_choices(),
        ),
    ]


def _call_scenes() -> List[SceneDef]:
    return [
        SceneDef(
            id="shadow_librarian",
            text=(
                "A figure emerges from the shadows—a tall silhouette draped in tattered robes. \"Lost souls "
                "wander here,\" it whispers. \"Do you seek answers or solace?\""
            ),
            prompt="Do you 'engage' with the shadow or 'avoid' it?",
            retry_text="The shadow waits silently. Do you 'engage' with the shadow or 'avoid' it?",
            effects=[_effect("mark_visited", scene_tag="shadowEncountered")],
            choices=[
                _choice(
                    "engage",
                    narration=[
                        "You nod hesitantly. \"I seek the truth,\" you say. The shadow extends a skeletal hand, "
                        "pointing deeper into the library. \"Truth is hidden where memories reside,\" it murmurs "
                        "before dissolving into mist."
                    ],
                    effects=[_effect("trust_shadow")],
                    next_scene_id="mirror_hall",
                ),
                _choice(
                    "avoid",
                    narration=[
                        "You step back, fear gripping you. The shadow's eyes glow briefly before it vanishes. The "
                        "air grows colder, and the silence becomes oppressive."
                    ],
                    effects=[_effect("avoid_shadow"), _effect("ominous_cue")],
                    next_scene_id="lost_wandering",
                ),
            ],
        ),
        SceneDef(
            id="mirror_hall",
            text=(
                "Following the shadow's direction, you arrive at a grand hall filled with ornate mirrors. Each "
                "reflection shows you at different ages, wearing expressions of joy, sorrow, and anger."
            ),
            prompt="Do you 'approach' a mirror or 'look away'?",
            retry_text="The mirrors reflect countless versions of you. Do you 'approach' a mirror or 'look away'?",
            choices=[
                _choice(
                    "approach",
                    narration=[
                        "You step toward a mirror where your reflection smiles warmly. As you touch the glass, a "
                        "memory unfolds—a cherished moment with a loved one. Tears well in your eyes as you "
                        "realize how much you've forgotten."
                    ],
                    effects=[_add_clue(clues.MIRROR_MEMORY), _effect("mark_visited", scene_tag="mirrors")],
                    next_scene_id="mirror_reflection",
                ),
                _choice(
                    "look away",
                    narration=[
                        "Unnerved by the reflections, you turn away. The feeling of disconnection deepens, and "
                        "you question what you might be missing.",
                        "You leave the hall of mirrors behind.",
                    ],
                    next_scene_id="staircase",
                ),
            ],
        ),
        SceneDef(
            id="mirror_reflection",
            text="The memory lingers in the glass, as if it is waiting for you.",
            prompt="Do you 'look deeper' into the mirror or 'let go' of the memory?",
            retry_text="Your reflection waits. Do you 'look deeper' or 'let go'?",
            choices=[
                _choice(
                    "look deeper",
                    narration=[
                        "You press your palm flat against the glass. The scene shifts: the same loved one, older "
                        "now, calling your name from a doorway you can't quite reach.",
                        "You leave the hall of mirrors behind.",
                    ],
                    effects=[_add_clue(clues.DEEPER_MEMORIES)],
                    next_scene_id="staircase",
                ),
                _choice(
                    "let go",
                    narration=[
                        "You let the memory slip back into the glass. Its warmth stays with you a moment longer.",
                        "You leave the hall of mirrors behind.",
                    ],
                    next_scene_id="staircase",
                ),
            ],
        ),
        SceneDef(
            id="staircase",
            text=(
                "A narrow staircase spirals upward out of the gloom. A faint melody drifts from above—a song you "
                "vaguely remember."
            ),
            prompt="Do you 'ascend' the staircase or 'stay' where you are?",
            retry_text="The choice weighs on you. Do you 'ascend' the staircase or 'stay' where you are?",
            choices=[
                _choice(
                    "ascend",
                    narration=[
                        "You climb the staircase, each step resonating with the melody. At the top, you enter a "
                        "cozy room filled with familiar objects—a journal, a musical instrument, photographs. It's "
                        "as if you've stepped into a personal sanctuary."
                    ],
                    effects=[_add_clue(clues.SANCTUARY), _effect("mark_visited", scene_tag="sanctuary")],
                    next_scene_id="sanctuary",
                ),
                _choice(
                    "stay",
                    narration=[
                        "You decide not to ascend, and the melody fades away, leaving you with an unsettling "
                        "silence."
                    ],
                    next_scene_id="crossroads",
                ),
            ],
        ),
        SceneDef(
            id="sanctuary",
            text="An old upright piano stands in the corner, its lid raised as if someone just stepped away.",
            prompt="Do you 'play' the instrument or 'sit' quietly for a while?",
            retry_text="The room is patient. Do you 'play' the instrument or 'sit' quietly?",
            choices=[
                _choice(
                    "play",
                    narration=[
                        "Your fingers find the keys as if they had never left them. The melody from the stairs "
                        "pours out, and you remember who taught it to you."
                    ],
                    effects=[_add_clue(clues.MUSICAL_MEMORIES)],
                    next_scene_id=ENDING_GATE_SCENE_ID,
                ),
                _choice(
                    "sit",
                    narration=["You sit among the familiar objects and let the quiet settle around you."],
                    next_scene_id=ENDING_GATE_SCENE_ID,
                ),
            ],
        ),
        SceneDef(
            id="lost_wandering",
            text=(
                "Without guidance, you wander deeper into the library. The shelves twist and turn, leading you "
                "to a dead-end."
            ),
            next_scene_id="obstacle_door",
        ),
        SceneDef(
            id="obstacle_door",
            text="A heavy door stands before you, adorned with intricate symbols.",
            prompt="Do you 'open' the door, 'examine' the symbols, or 'turn back'?",
            retry_text="Time is running out. Do you 'open' the door, 'examine' the symbols, or 'turn back'?",
            choices=[
                _choice(
                    "open",
                    narration=[
                        "You push the door open and enter a dimly lit chamber. The walls are lined with portraits "
                        "whose eyes seem to follow you. In the center stands a pedestal with an open book "
                        "emitting a soft glow."
                    ],
                    next_scene_id="portrait_chamber",
                ),
                _choice(
                    "examine",
                    narration=[
                        "You trace the symbols with your fingertips. They are not letters, but they feel like "
                        "words you once knew: a house, a winding road, a pair of interlocking rings."
                    ],
                    effects=[_add_clue(clues.SYMBOL_MEMORIES)],
                    next_scene_id="door_symbols",
                ),
                _choice(
                    "turn",
                    narration=[
                        "You decide not to enter, but as you turn, the path behind you has vanished. You're "
                        "trapped."
                    ],
                    effects=[_effect("ominous_cue")],
                    next_scene_id="final_confrontation",
                ),
            ],
        ),
        SceneDef(
            id="door_symbols",
            text="One symbol is worn smoother than the others, as though it has been touched a thousand times.",
            prompt="Do you 'trace' it further or 'step back' from the door?",
            retry_text="The worn symbol glints. Do you 'trace' it further or 'step back'?",
            choices=[
                _choice(
                    "trace",
                    narration=[
                        "As your finger follows the worn groove, you remember drawing the same shape on a foggy "
                        "car window, someone laughing beside you."
                    ],
                    effects=[_add_clue(clues.DEEPER_SYMBOL_MEMORIES)],
                    next_scene_id="obstacle_door",
                ),
                _choice(
                    "step back",
                    narration=["You step back. The symbols dim, keeping the rest of their meaning to themselves."],
                    next_scene_id="obstacle_door",
                ),
            ],
        ),
        SceneDef(
            id="portrait_chamber",
            prompt="Do you 'study' the portraits or 'approach' the glowing book?",
            retry_text="The painted eyes watch you. Do you 'study' the portraits or 'approach' the book?",
            choices=[
                _choice(
                    "study",
                    narration=[
                        "You walk slowly along the wall. The faces are strangers at first, then not: a teacher, "
                        "a neighbor, a friend from long ago."
                    ],
                    effects=[_add_clue(clues.PORTRAIT_MEMORIES)],
                    next_scene_id="portrait_gaze",
                ),
                _choice(
                    "approach",
                    narration=[
                        "You step toward the pedestal. The pages of the book turn by themselves, and the light "
                        "inside them gathers into a shape."
                    ],
                    next_scene_id="final_confrontation",
                ),
            ],
        ),
        SceneDef(
            id="portrait_gaze",
            text="One portrait hangs apart from the rest, draped in a thin black veil.",
            prompt="Do you 'look closer' or 'turn away'?",
            retry_text="The veil stirs. Do you 'look closer' or 'turn away'?",
            choices=[
                _choice(
                    "look closer",
                    narration=[
                        "You lift the veil. The face beneath is one you have loved, painted as it was on the last "
                        "day you saw it. Your breath catches."
                    ],
                    effects=[_add_clue(clues.DEEPER_PORTRAIT_MEMORIES)],
                    next_scene_id="final_confrontation",
                ),
                _choice(
                    "turn away",
                    narration=["You let the veil fall and turn away, but the face stays with you."],
                    next_scene_id="final_confrontation",
                ),
            ],
        ),
    ]


def _ending_scenes() -> List[SceneDef]:
    return [
        SceneDef(
            id="final_confrontation",
            text=(
                "A shadowy figure materializes before you, its form shifting and ethereal. \"You cannot run from "
                "yourself,\" it whispers. \"I am the embodiment of all you've forgotten and all you've tried to "
                "escape.\"\n\n"
                "Memories of the accident surface—the moments you tried so hard to suppress."
            ),
            prompt="Do you choose to 'accept' this part of yourself or 'reject' it?",
            retry_text="The shadow waits silently. Do you 'accept' this part of yourself or 'reject' it?",
            choices=[
                _choice(
                    "accept",
                    narration=[
                        "You step forward and embrace the shadow. A profound sadness washes over you as you allow "
                        "yourself to feel the grief you've been avoiding.\n\n"
                        "\"I'm so sorry,\" you whisper, tears falling freely.\n\n"
                        "The shadow merges with you, and the library transforms into scenes from your life—both "
                        "joyful and sorrowful.\n\n"
                        "You understand that healing begins with acceptance.\n\n"
                        "**You have become whole.**\n\n"
                        "**The End**"
                    ],
                    ending="acceptance",
                ),
                _choice(
                    "reject",
                    narration=[
                        "You turn away, refusing to acknowledge the shadow. The weight of unspoken grief bears "
                        "down on you, and the library's walls close in.\n\n"
                        "You find yourself back at the beginning, destined to wander until you're ready to face "
                        "the truth.\n\n"
                        "**To be continued...**"
                    ],
                    effects=[_effect("ominous_cue")],
                    ending="rejection",
                ),
            ],
        ),
        SceneDef(
            id=ENDING_GATE_SCENE_ID,
            effects=[
                _effect(
                    "branch_on_clue_count",
                    threshold=clues.CLUE_THRESHOLD,
                    next_on_true="revelation",
                    next_on_false="incomplete",
                )
            ],
        ),
        SceneDef(
            id="revelation",
            text=(
                "As you piece together the fragments of your journey—{clue_summary}—a realization begins to take "
                "shape. This library isn't just a physical place; it's a labyrinth of your own mind, housing your "
                "memories, emotions, and experiences.\n\n"
                "Fragments of a traumatic event flash before your eyes—a blinding light, screeching tires, "
                "shattered glass. The weight of sorrow presses upon you as you recall the loss of someone dear.\n\n"
                "You find yourself before a grand door inscribed with your name. The air is thick with "
                "anticipation."
            ),
            prompt="Do you 'enter' to confront the truth or 'stay' in the familiarity of the library?",
            retry_text="The choice is yours. Do you 'enter' to confront the truth or 'stay' in the library?",
            choices=_door_of_truth_choices(),
        ),
        SceneDef(
            id="incomplete",
            text=(
                "Despite your efforts, the mysteries of the library remain unsolved. You feel a persistent "
                "emptiness, a yearning to understand more.\n\n"
                "You find yourself back at the entrance of the library. The endless aisles stretch out before "
                "you, inviting yet daunting."
            ),
            next_scene_id="crossroads",
        ),
        SceneDef(
            id="crossroads",
            prompt="Do you wish to 'explore' further or 'rest' here?",
            retry_text="The choice is yours. Do you wish to 'explore' further or 'rest' here?",
            choices=[
                _choice(
                    "explore",
                    narration=[
                        "Determined to uncover the secrets of this place, you venture back into the labyrinth of "
                        "bookshelves. Perhaps with time, you'll find the answers you seek."
                    ],
                    next_scene_id="wander_stacks",
                ),
                _choice(
                    "rest",
                    narration=[
                        "You decide to rest, allowing the silence of the library to envelop you. Maybe in "
                        "stillness, the answers will come."
                    ],
                    ending="rest",
                ),
            ],
        ),
        SceneDef(
            id="wander_stacks",
            text=(
                "The aisles rearrange themselves around you. From somewhere above comes a faint melody. Nearby, "
                "a wooden card catalog stands with one drawer ajar, and at the edge of your vision, shadows stir."
            ),
            prompt="Do you follow the 'melody', search the 'catalog', or chase the 'shadows'?",
            retry_text="The library waits. Do you follow the 'melody', search the 'catalog', or chase the 'shadows'?",
            choices=[
                _choice(
                    "melody",
                    narration=[
                        "You follow the melody between the shelves until the music seems to fall from directly "
                        "overhead."
                    ],
                    next_scene_id="staircase",
                ),
                _choice(
                    "catalog",
                    narration=["You cross to the card catalog and pull the open drawer toward you."],
                    next_scene_id="card_catalog",
                ),
                _choice(
                    "shadow",
                    narration=["You chase the flickering shadows into a long, unfamiliar aisle."],
                    next_scene_id="shadow_aisle",
                ),
            ],
        ),
        SceneDef(
            id="card_catalog",
            text="The drawer is labeled with your name in faded ink.",
            prompt="Do you 'read' the cards or 'close' the drawer?",
            retry_text="The cards rustle. Do you 'read' them or 'close' the drawer?",
            choices=[
                _choice(
                    "read",
                    narration=[
                        "The cards record a life in small entries: a first library card, a borrowed book about "
                        "the sea, a note in a familiar hand that says 'come home soon.'"
                    ],
                    effects=[_add_clue(clues.PERSONAL_HISTORY)],
                    next_scene_id=ENDING_GATE_SCENE_ID,
                ),
                _choice(
                    "close",
                    narration=["You slide the drawer shut. The name on the label seems to fade a little."],
                    next_scene_id=ENDING_GATE_SCENE_ID,
                ),
            ],
        ),
    ]


def build_scenes() -> List[SceneDef]:
    """Return a fresh list of every scene in the story."""
    return [*_opening_scenes(), *_explore_scenes(), *_call_scenes(), *_ending_scenes()]
