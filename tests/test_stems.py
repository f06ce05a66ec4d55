"""
Tests for stems.py - stem mutation.
"""

import pytest

from conjugador.dataset import Dataset, ExceptionRule
from conjugador.stems import (
    apply_stem_change,
    apply_yo_marker,
    fix_stem,
    is_subjunctive_like,
    replace_last,
)


@pytest.fixture
def empty_rules(dataset):
    """The bundled endings with no exception rules or o-ue verbs."""
    return Dataset(
        endings=dataset.endings,
        auxiliaries=dataset.auxiliaries,
        exception_rules={},
        diphthong_verbs=frozenset(),
        overrides={},
    )


class TestReplaceLast:

    def test_replaces_last_only(self):
        assert replace_last("repet", "e", "i") == "repit"

    def test_multi_character_replacement(self):
        assert replace_last("pens", "e", "ie") == "piens"

    def test_absent(self):
        assert replace_last("habl", "e", "i") == "habl"

    def test_empty(self):
        assert replace_last("", "e", "i") == ""


class TestMarkers:

    def test_go(self):
        assert apply_yo_marker("ten", "-go") == "teng"

    def test_io(self):
        assert apply_yo_marker("envi", "-ío") == "enví"

    def test_jo(self):
        assert apply_yo_marker("correg", "-jo") == "corrij"

    def test_no_marker(self):
        assert apply_yo_marker("habl", None) == "habl"

    def test_e_i_changes_first_vowel(self):
        assert apply_stem_change("serv", "e-i") == "sirv"
        assert apply_stem_change("repet", "e-i") == "ripet"

    def test_e_ie_changes_last_vowel(self):
        assert apply_stem_change("defend", "e-ie") == "defiend"

    def test_i_accent(self):
        assert apply_stem_change("chirri", "i-í") == "chirrí"


class TestSubjunctiveLike:

    @pytest.mark.parametrize("mood,person,number,positivity,expected", [
        ("subjunctive", "first", "singular", "affirmative", True),
        ("indicative", "third", "singular", "affirmative", False),
        ("imperative", "second", "singular", "negative", True),
        ("imperative", "third", "singular", "affirmative", True),
        ("imperative", "first", "plural", "affirmative", True),
        ("imperative", "second", "singular", "affirmative", False),
        ("imperative", "second", "plural", "affirmative", False),
    ])
    def test_contexts(self, mood, person, number, positivity, expected):
        assert is_subjunctive_like(mood, person, number, positivity) is expected


class TestFixStem:
    """Ordered stem mutation against the bundled dataset."""

    def test_regular_unchanged(self):
        assert fix_stem("habl", "ar", "o") == "habl"

    def test_yo_go(self):
        assert fix_stem("ten", "er", "o", {"person": "first"}) == "teng"

    def test_stem_change_third(self):
        assert fix_stem("ten", "er", "e", {"person": "third"}) == "tien"

    def test_future_stem(self):
        assert fix_stem("ven", "ir", "iré", {"tense": "future"}) == "vendr"

    def test_preterite_third_only(self):
        assert fix_stem("ped", "ir", "ió", {"tense": "preterite", "person": "third"}) == "pid"
        assert fix_stem("ped", "ir", "í", {"tense": "preterite", "person": "first"}) == "ped"

    def test_subjunctive_ir_plural(self):
        options = {"mood": "subjunctive", "person": "first", "number": "plural"}
        assert fix_stem("sent", "ir", "amos", options) == "sint"

    def test_diphthong_then_h(self):
        assert fix_stem("ol", "er", "o") == "huel"

    def test_diphthong_skips_plural(self):
        assert fix_stem("cont", "ar", "amos", {"number": "plural"}) == "cont"

    def test_ar_spelling(self):
        assert fix_stem("busc", "ar", "é", {"tense": "preterite"}) == "busqu"
        assert fix_stem("pag", "ar", "e", {"mood": "subjunctive"}) == "pagu"
        assert fix_stem("cruz", "ar", "e", {"mood": "subjunctive"}) == "cruc"

    def test_ar_spelling_needs_front_vowel(self):
        assert fix_stem("busc", "ar", "ó", {"tense": "preterite", "person": "third"}) == "busc"

    def test_er_spelling(self):
        assert fix_stem("conoc", "er", "o") == "conozc"
        assert fix_stem("conoc", "er", "es", {"person": "second"}) == "conoc"

    def test_ir_spelling_without_rule(self, empty_rules):
        assert fix_stem("conduc", "ir", "o", dataset=empty_rules) == "conduzc"
        assert fix_stem("dirig", "ir", "a", {"mood": "subjunctive"}, empty_rules) == "dirij"

    def test_ir_spelling_skipped_with_rule(self, empty_rules):
        rules = dict(empty_rules.exception_rules)
        rules["fingir"] = ExceptionRule(infinitive="fingir")
        dataset = Dataset(
            endings=empty_rules.endings,
            auxiliaries=empty_rules.auxiliaries,
            exception_rules=rules,
            diphthong_verbs=frozenset(),
            overrides={},
        )
        assert fix_stem("fing", "ir", "o", dataset=dataset) == "fing"

    def test_custom_diphthong_list(self, empty_rules):
        dataset = Dataset(
            endings=empty_rules.endings,
            auxiliaries=empty_rules.auxiliaries,
            exception_rules={},
            diphthong_verbs=frozenset({"colgar"}),
            overrides={},
        )
        assert fix_stem("colg", "ar", "a", {"person": "third"}, dataset) == "cuelg"
        assert fix_stem("colg", "ar", "e", {"mood": "subjunctive"}, dataset) == "cuelgu"
