"""
Tests for conjugate.py - full paradigms.
"""

import pytest
from pydantic import ValidationError

from conjugador.conjugate import conjugate_form, conjugate_verb, iter_cells
from conjugador.models import ConjugateOptions


class TestReferenceParadigms:
    """Whole paradigms against the reference forms."""

    @pytest.mark.parametrize("verb", ["amar", "partir", "comer", "agrandar", "apestar"])
    def test_regular(self, verb, reference_paradigms):
        expected = reference_paradigms["regular"][verb]
        assert conjugate_verb(verb, {"verbOnly": True}) == expected

    @pytest.mark.parametrize("verb", [
        "estar", "acertar", "conferir", "confesar", "encender",
        "venir", "chirriar", "contener", "corregir", "oler",
    ])
    def test_irregular(self, verb, reference_paradigms):
        expected = reference_paradigms["irregular"][verb]
        assert conjugate_verb(verb, {"verbOnly": True}) == expected


class TestShape:

    def test_no_first_singular_imperative(self):
        conjugation = conjugate_verb("amar", {"verbOnly": True})
        for positivity in ("affirmative", "negative"):
            assert "first" not in conjugation["imperative"][positivity]["singular"]
            assert "first" in conjugation["imperative"][positivity]["plural"]

    def test_mood_order(self):
        conjugation = conjugate_verb("amar", {"verbOnly": True})
        assert list(conjugation) == ["indicative", "subjunctive", "conditional", "imperative"]

    def test_cell_count(self):
        # 18 tenses and 2 positivities, 6 cells each, minus 2 imperative cells
        assert len(list(iter_cells())) == 20 * 6 - 2


class TestFilters:
    """Options restrict the iterated axes."""

    def test_single_cell(self):
        options = {"mood": "indicative", "tense": "present", "number": "singular", "person": "first"}
        assert conjugate_verb("hablar", options) == {"indicative": {"present": {"singular": {"first": "hablo"}}}}

    def test_mood_only(self):
        conjugation = conjugate_verb("hablar", {"mood": "conditional"})
        assert list(conjugation) == ["conditional"]
        assert list(conjugation["conditional"]) == ["present", "perfect", "future"]

    def test_tense_skips_moods_without_it(self):
        conjugation = conjugate_verb("hablar", {"tense": "preterite"})
        assert list(conjugation) == ["indicative"]

    def test_tense_shared_by_moods(self):
        conjugation = conjugate_verb("hablar", {"tense": "perfect", "person": "first", "number": "singular"})
        assert conjugation == {
            "indicative": {"perfect": {"singular": {"first": "he hablado"}}},
            "subjunctive": {"perfect": {"singular": {"first": "haya hablado"}}},
            "conditional": {"perfect": {"singular": {"first": "habría hablado"}}},
        }

    def test_positivity(self):
        conjugation = conjugate_verb("hablar", {"mood": "imperative", "positivity": "negative", "verbOnly": True})
        assert conjugation == {
            "imperative": {
                "negative": {
                    "singular": {"second": "hables", "third": "hable"},
                    "plural": {"first": "hablemos", "second": "habléis", "third": "hablen"},
                },
            },
        }

    def test_first_singular_imperative_is_empty(self):
        options = {"mood": "imperative", "person": "first", "number": "singular"}
        assert conjugate_verb("hablar", options) == {}

    def test_model_options(self):
        options = ConjugateOptions(mood="indicative", tense="future", person="third", number="plural")
        assert conjugate_verb("vivir", options) == {"indicative": {"future": {"plural": {"third": "vivirán"}}}}

    def test_rejects_unknown_values(self):
        with pytest.raises(ValidationError):
            conjugate_verb("hablar", {"mood": "optative"})

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValidationError):
            conjugate_verb("hablar", {"tiempo": "present"})


class TestFormatting:
    """Pronouns and imperative punctuation."""

    def test_imperative_affirmative(self):
        assert conjugate_form("hablar", "imperative", "affirmative", "singular", "second") == "¡Habla!"

    def test_imperative_negative(self):
        assert conjugate_form("hablar", "imperative", "negative", "plural", "second") == "¡No habléis!"

    def test_imperative_with_pronoun(self):
        form = conjugate_form("hablar", "imperative", "negative", "singular", "third", {"usePronouns": True})
        assert form == "¡Él no hable!"

    def test_verb_only_imperative(self):
        form = conjugate_form("hablar", "imperative", "affirmative", "plural", "second", {"verbOnly": True})
        assert form == "hablad"

    def test_pronoun_prefix(self):
        form = conjugate_form("hablar", "indicative", "present", "singular", "first", {"usePronouns": True})
        assert form == "Yo hablo"

    def test_pronoun_prefix_accented(self):
        form = conjugate_form("hablar", "indicative", "present", "singular", "second", {"usePronouns": True})
        assert form == "Tú hablas"

    def test_feminine_pronoun(self):
        options = {"usePronouns": True, "gender": "feminine"}
        assert conjugate_form("hablar", "indicative", "present", "plural", "first", options) == "Nosotras hablamos"

    def test_no_pronoun_by_default(self):
        assert conjugate_form("hablar", "indicative", "present", "singular", "first") == "hablo"

    def test_style_reaches_engine_and_pronoun(self):
        options = {"usePronouns": True, "style": "rioplatense"}
        assert conjugate_form("hablar", "indicative", "present", "singular", "second", options) == "Vos hablás"
        assert conjugate_form("hablar", "indicative", "present", "plural", "second", options) == "Ustedes hablan"

    def test_reflection_does_not_change_forms(self):
        plain = conjugate_verb("lavar", {"mood": "indicative", "verbOnly": True})
        reflexive = conjugate_verb("lavar", {"mood": "indicative", "verbOnly": True, "reflection": True})
        assert plain == reflexive
