import pytest

from app.recommendation import classifier


def test_exact_label_beats_name_keywords():
    # "Leg Press" would read as chest/legs by name, but the label is authoritative
    assert classifier.classify("chest", "Leg Press") == "chest"


def test_exact_label_records_the_label_strategy_and_own_keyword():
    result = classifier.resolve("chest", "Leg Press")

    assert result.strategy == "label"
    assert result.keyword == "press"


def test_exact_label_is_case_and_whitespace_insensitive():
    assert classifier.classify("  Shoulders ", None) == "shoulders"


def test_exact_label_without_name_has_no_keyword():
    result = classifier.resolve("cardio", None)

    assert result.category == "cardio"
    assert result.keyword is None


@pytest.mark.parametrize(
    "label, expected",
    [
        ("pecs", "chest"),
        ("lats", "back"),
        ("delts", "shoulders"),
        ("Deltoids", "shoulders"),
        ("biceps", "arms"),
        ("triceps", "arms"),
        ("quads", "legs"),
        ("quadriceps", "legs"),
        ("hamstrings", "legs"),
        ("calves", "legs"),
        ("abs", "core"),
        ("abdominals", "core"),
        ("glute", "glutes"),
        ("gluteus", "glutes"),
    ],
)
def test_alias_labels_resolve_to_canonical_groups(label, expected):
    assert classifier.classify(label, None) == expected


def test_alias_resolution_ignores_the_name():
    result = classifier.resolve("quads", "Some Exercise")

    assert result.category == "legs"
    assert result.strategy == "alias"
    assert result.keyword is None


def test_name_keyword_used_when_no_label():
    result = classifier.resolve(None, "Bench Press")

    assert result.category == "chest"
    assert result.strategy == "keyword"
    assert result.keyword == "press"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Hammer Curl", "arms"),
        ("Plank", "core"),
        ("Treadmill Sprint", "cardio"),
        ("Barbell Row", "back"),
        ("Power Clean", "full_body"),
    ],
)
def test_name_keyword_scans_categories_in_catalog_order(name, expected):
    assert classifier.classify(None, name) == expected


def test_unknown_label_falls_through_to_name():
    assert classifier.classify("forearms", "Plank") == "core"


@pytest.mark.parametrize(
    "label, name",
    [(None, None), ("", ""), ("forearms", "Mystery Move"), ("   ", "???")],
)
def test_unrecognised_input_defaults_to_full_body(label, name):
    result = classifier.resolve(label, name)

    assert result.category == "full_body"
    assert result.strategy == "default"
    assert result.keyword is None


def test_classify_exercise_uses_descriptor_fields(exercise_factory):
    result = classifier.classify_exercise(exercise_factory("Squat", "quads"))
    assert result.category == "legs"
