import pytest

from creative_direction.engine.concept import analyze, detect_energy, first_match, tokenize
from creative_direction.framework.types import DEFAULT_ENVIRONMENT, DEFAULT_TIME_OF_DAY


def test_cozy_bed_brief_reads_as_bedroom_not_cafe():
    profile = analyze("cozy morning coffee in bed with a book")

    assert profile.core_scene == "bedroom"
    assert profile.environment == "cozy-interior"
    assert profile.time_of_day == "morning"
    assert "coffee" in profile.objects


def test_hotel_wins_over_bathroom_when_both_are_named():
    profile = analyze("hotel bathroom mirror selfie")

    assert profile.core_scene == "hotel"
    assert profile.environment == "luxury-suite"


def test_dramatic_elevator_night_brief():
    profile = analyze("dramatic elevator selfie at night")

    assert profile.core_scene == "elevator"
    assert profile.environment == "indoors-metal"
    assert profile.time_of_day == "night"
    assert profile.energy == ("dramatic", "confident")
    assert profile.objects == ("elevator",)


def test_rooftop_sunset_paris_brief():
    profile = analyze("Mysterious rooftop at sunset in Paris wearing sunglasses")

    assert profile.core_scene == "rooftop"
    assert profile.environment == "outdoors-urban"
    assert profile.time_of_day == "golden-hour"
    assert "mysterious" in profile.energy
    assert profile.location == "paris"
    assert "sunglasses" in profile.objects
    assert profile.raw_keywords[0] == "mysterious"
    assert profile.raw_input.startswith("Mysterious")


@pytest.mark.parametrize("text", ["", "   ", None])
def test_empty_brief_gives_defaults(text):
    profile = analyze(text)

    assert profile.core_scene is None
    assert profile.environment == DEFAULT_ENVIRONMENT
    assert profile.time_of_day == DEFAULT_TIME_OF_DAY
    assert profile.energy == ()
    assert profile.aesthetic == ()
    assert profile.location is None


def test_environment_rules_apply_without_known_scene():
    assert analyze("a luxury penthouse").environment == "luxury-interior"
    assert analyze("walking outside in the park").environment == "outdoors-natural"


def test_known_scene_environment_wins_over_keyword_rules():
    # "luxury" would read as luxury-interior, but the gym scene decides.
    assert analyze("luxury gym session").environment == "modern-fitness"


def test_multi_valued_fields_are_unique_and_in_rule_order():
    profile = analyze("dark moody cinematic film, dark and mysterious")

    assert profile.aesthetic == ("moody", "cinematic")
    assert profile.energy.count("mysterious") == 1


def test_energy_rows_can_emit_several_values():
    assert detect_energy("powerful boss energy") == ("dramatic", "confident")


def test_first_match_respects_table_order():
    rules = (("a", ("x",)), ("b", ("x", "y")))
    assert first_match("xy", rules) == "a"
    assert first_match("zz", rules, "fallback") == "fallback"


def test_tokenize_lowercases_and_splits_on_whitespace():
    assert tokenize("  Golden  Hour\tGlow ") == ("golden", "hour", "glow")
    assert tokenize("") == ()


def test_to_dict_is_json_ready():
    payload = analyze("night street in nyc").to_dict()

    assert payload["location"] == "new york"
    assert isinstance(payload["energy"], list)
    assert payload["raw_input"] == "night street in nyc"
