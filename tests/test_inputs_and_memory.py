import threading

import pytest

from creative_direction.framework.memory import (
    AntiRepetitionMemory,
    HistoryStore,
    SelectionHistory,
)
from creative_direction.framework.types import (
    ConceptInput,
    UserContext,
    extract_user_features,
)


def test_user_from_mapping_accepts_camel_case_aliases():
    user = UserContext.from_mapping(
        {
            "triggerWord": " ohwx ",
            "gender": "woman",
            "personalStyles": ["glam", " ", "classic"],
            "preferredMoods": ["Romantic Warm", "Nordic Clean"],
            "loraWeight": 1,
            "colorPalette": "black",
            "physicalPreferences": ["green eyes", "freckles"],
        }
    )

    assert user.trigger_word == "ohwx"
    assert user.personal_styles == ("glam", "classic")
    assert user.preferred_mood == "Romantic Warm"
    assert user.model_weight == 1.0
    assert user.color_palette == ("black",)
    assert extract_user_features(user) == ("green eyes", "freckles")


def test_user_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValueError, match=r"Unknown keys under user: shoe_size"):
        UserContext.from_mapping({"shoe_size": 38})


@pytest.mark.parametrize(
    "raw,match",
    [
        ({"gender": 5}, r"user\.gender must be a string"),
        ({"model_weight": "heavy"}, r"user\.model_weight must be a number"),
        ({"model_weight": True}, r"user\.model_weight must be a number"),
        ({"personal_styles": [1]}, r"user\.personal_styles\[0\] must be a string"),
    ],
)
def test_user_from_mapping_type_errors(raw, match):
    with pytest.raises(TypeError, match=match):
        UserContext.from_mapping(raw)


def test_empty_user_is_valid():
    assert UserContext.from_mapping(None) == UserContext()
    assert UserContext.from_mapping({}) == UserContext()


def test_extract_user_features_splits_on_separators():
    user = UserContext(physical_preferences="green eyes; freckles,\n dimples,,")
    assert extract_user_features(user) == ("green eyes", "freckles", "dimples")
    assert extract_user_features(UserContext()) == ()


def test_concept_from_string_and_mapping():
    assert ConceptInput.from_mapping("rooftop at dusk") == ConceptInput(text="rooftop at dusk")

    concept = ConceptInput.from_mapping(
        {"text": "gym", "mood": " Nordic Clean ", "emotionalTone": "calm", "lighting": ""}
    )
    assert concept.mood == "Nordic Clean"
    assert concept.emotional_tone == "calm"
    assert concept.lighting is None
    assert concept.overrides() == {"mood": "Nordic Clean", "emotional_tone": "calm"}


def test_concept_from_mapping_errors():
    with pytest.raises(ValueError, match=r"Unknown keys under concept: camera"):
        ConceptInput.from_mapping({"text": "x", "camera": "35mm"})
    with pytest.raises(TypeError, match=r"concept\.text must be a string"):
        ConceptInput.from_mapping({"text": 3})
    with pytest.raises(TypeError, match=r"concept must be a mapping or a string"):
        ConceptInput.from_mapping(["x"])


def test_memory_is_a_bounded_fifo():
    memory = AntiRepetitionMemory(limit=3)
    for key in ("a", "b", "c", "d"):
        memory = memory.remember(key)

    assert memory.recent == ("b", "c", "d")
    assert memory.excludes("d")
    assert not memory.excludes("a")
    assert len(memory.with_limit(2)) == 2


def test_memory_rejects_non_positive_limit():
    with pytest.raises(ValueError, match="limit must be >= 1"):
        AntiRepetitionMemory(limit=0)


def test_selection_history_update_and_dict():
    history = SelectionHistory().updated("fashion", AntiRepetitionMemory(recent=("athleisure",)))

    assert history.memory_for("fashion").recent == ("athleisure",)
    assert history.to_dict() == {"fashion": ["athleisure"], "pose": []}
    with pytest.raises(ValueError):
        history.memory_for("mood")


def test_history_store_is_keyed_and_thread_safe():
    store = HistoryStore()
    assert store.get("nobody") == SelectionHistory()

    def worker(name: str) -> None:
        for idx in range(50):
            history = store.get(name)
            store.put(name, history.updated("pose", history.pose.remember(f"p{idx}")))

    threads = [threading.Thread(target=worker, args=(f"user{n}",)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.keys() == ("user0", "user1", "user2", "user3")
    assert store.get("user2").pose.recent[-1] == "p49"

    store.clear("user0")
    assert "user0" not in store.keys()
    store.clear()
    assert store.keys() == ()


def test_history_store_update_does_not_lose_concurrent_writes():
    store = HistoryStore()

    def remember(history: SelectionHistory) -> tuple[int, SelectionHistory]:
        memory = history.fashion.with_limit(1000)
        memory = memory.remember(f"c{len(memory)}")
        return len(memory), history.updated("fashion", memory)

    def worker() -> None:
        for _ in range(25):
            store.update("shared", remember)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.get("shared").fashion) == 200
    assert store.update("shared", lambda history: ("seen", history)) == "seen"


def test_history_store_update_starts_from_an_empty_history():
    store = HistoryStore()

    size = store.update("fresh", lambda history: (len(history.fashion), history))

    assert size == 0
    assert store.keys() == ("fresh",)
