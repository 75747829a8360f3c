from creative_direction.engine.fashion import (
    override_fashion,
    palette_matches,
    score_fashion,
    select_fashion,
)
from creative_direction.engine.matching import candidate_keys, overlaps, windowed_memory
from creative_direction.engine.pose import score_pose, select_pose
from creative_direction.framework.config import DimensionRepetitionPolicy
from creative_direction.framework.memory import AntiRepetitionMemory
from creative_direction.library.fashion import FASHION_CATALOG
from creative_direction.library.pose import DEFAULT_POSE_KEY, POSE_CATALOG

ENABLED = DimensionRepetitionPolicy(enabled=True, window=8)
DISABLED = DimensionRepetitionPolicy(enabled=False, window=8)


def test_overlaps_is_bidirectional_and_ignores_empty():
    assert overlaps("gym", "gym-mirror-bay")
    assert overlaps("Gym-Mirror-Bay", "gym")
    assert not overlaps("", "gym")
    assert not overlaps("  ", "gym")


def test_pose_scoring_adds_affinity_and_keyword_points():
    block = POSE_CATALOG["gym-set-rest"]
    assert score_pose(block, "gym-mirror-bay", ["gym", "workout"]) == 5 + 2 * 2
    assert score_pose(block, "cafe", []) == 0


def test_pose_picks_best_scenario_match():
    selection, _memory = select_pose("gym-mirror-bay", ["gym", "workout"])

    assert selection.key == "gym-set-rest"
    assert selection.mode == "scored"


def test_pose_all_zero_uses_default_pose():
    selection, memory = select_pose("zzz", ["qqq"])

    assert selection.key == DEFAULT_POSE_KEY
    assert selection.mode == "default"
    assert selection.score == 0
    assert memory is None


def test_pose_memory_untouched_when_policy_disabled():
    memory = AntiRepetitionMemory(recent=("the-sip",))

    selection, returned = select_pose("cafe", ["coffee"], memory=memory, policy=DISABLED)

    assert selection.key == "the-sip"
    assert returned is memory


def test_pose_memory_excludes_recent_when_enabled():
    memory = AntiRepetitionMemory(recent=("the-sip",))

    selection, returned = select_pose("cafe", ["coffee"], memory=memory, policy=ENABLED)

    assert selection.key != "the-sip"
    assert returned.recent == ("the-sip", selection.key)


def test_fashion_scoring():
    athleisure = FASHION_CATALOG["athleisure"]
    # affinity "gym" + keyword "gym" against the affinity list
    assert score_fashion(athleisure, "gym-lifestyle", ["gym"]) == 5 + 2
    assert score_fashion(athleisure, "cafe", [], ["sage"]) == 3


def test_palette_matching_is_case_insensitive_substring():
    assert palette_matches(["Camel"], "camel, oatmeal and soft black")
    assert not palette_matches(["", " "], "camel")
    assert not palette_matches(["teal"], "camel")


def test_fashion_picks_scenario_category():
    selection, _memory = select_fashion("gym-lifestyle", ["gym"])
    assert selection.key == "athleisure"


def test_fashion_all_zero_takes_first_candidate():
    selection, _memory = select_fashion("zzz", ["qqq"])
    assert selection.key == "elevated-basics"
    assert selection.score == 0


def test_fashion_never_repeats_within_window():
    memory = AntiRepetitionMemory()
    picks: list[str] = []
    for _ in range(30):
        selection, memory = select_fashion("gym-lifestyle", ["gym"], memory=memory, policy=ENABLED)
        assert selection.key not in picks[-8:]
        picks.append(selection.key)

    assert len(memory) == 8
    assert memory.recent == tuple(picks[-8:])


def test_fashion_without_policy_repeats_the_winner():
    memory = AntiRepetitionMemory(recent=("athleisure",))
    for _ in range(3):
        selection, returned = select_fashion("gym-lifestyle", ["gym"], memory=memory, policy=DISABLED)
        assert selection.key == "athleisure"
        assert returned is memory


def test_fashion_window_resizes_memory():
    memory = AntiRepetitionMemory(recent=tuple(FASHION_CATALOG.keys())[:6], limit=8)
    policy = DimensionRepetitionPolicy(enabled=True, window=2)

    _selection, returned = select_fashion("cafe", [], memory=memory, policy=policy)

    assert returned.limit == 2
    assert len(returned) == 2


def test_fashion_override_is_remembered():
    memory = AntiRepetitionMemory()

    selection, returned = override_fashion("Evening Glam", memory=memory, policy=ENABLED)

    assert selection.key == "evening-glam"
    assert selection.overridden
    assert returned.recent == ("evening-glam",)


def test_candidate_pool_never_empty():
    everything = AntiRepetitionMemory(recent=FASHION_CATALOG.keys(), limit=len(FASHION_CATALOG))
    assert candidate_keys(FASHION_CATALOG, everything) == list(FASHION_CATALOG.keys())
    assert candidate_keys(FASHION_CATALOG, None) == list(FASHION_CATALOG.keys())


def test_windowed_memory_is_none_when_disabled():
    memory = AntiRepetitionMemory(recent=("a",))
    assert windowed_memory(memory, DISABLED) is None
    assert windowed_memory(memory, None) is None
    assert windowed_memory(None, ENABLED) is None
    assert windowed_memory(memory, ENABLED).recent == ("a",)
