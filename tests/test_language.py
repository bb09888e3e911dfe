from havenapi.language import Section, breakdown, hellaify


def test_breakdown_names_known_tags():
    result = breakdown([("The", "DT"), ("cat", "NN"), ("runs", "VBZ")])
    assert result == [
        Section("Determiner", "The"),
        Section("Noun, Singular or Mass", "cat"),
        Section("Verb, 3rd Person Singular Present", "runs"),
    ]


def test_breakdown_unknown_tag():
    assert breakdown([("zzz", "NOPE")]) == [Section("UNKNOWN", "zzz")]


def test_breakdown_punctuation_passes_through():
    assert [s.part for s in breakdown([(".", "."), (",", ",")])] == [".", ","]


def test_breakdown_empty():
    assert breakdown([]) == []


def test_hellaify_prefixes_adjective():
    assert hellaify("big dog", [("big", "JJ"), ("dog", "NN")]) == "hella-big dog"


def test_hellaify_only_first_of_each_kind():
    tokens = [("big", "JJ"), ("red", "JJ"), ("dog", "NN")]
    result = hellaify("big red dog", tokens)
    assert "hella-big" in result
    assert "hella-red" not in result


def test_hellaify_replaces_all_occurrences_and_kinds():
    tokens = [("big", "JJ"), ("bigger", "JJR")]
    result = hellaify("big bigger", tokens)
    assert result.count("hella-") == 3


def test_hellaify_leaves_text_without_adjectives():
    assert hellaify("go home", [("go", "VB"), ("home", "NN")]) == "go home"