"""
Tests for pronouns.py - subject pronoun resolution.
"""

import pytest

from conjugador.models import InflectOptions
from conjugador.pronouns import get_pronoun


class TestDefaultStyle:

    @pytest.mark.parametrize("options,expected", [
        ({}, "yo"),
        ({"person": "first", "number": "plural"}, "nosotros"),
        ({"person": "first", "number": "plural", "gender": "feminine"}, "nosotras"),
        ({"person": "second"}, "tú"),
        ({"person": "second", "formality": "formal"}, "usted"),
        ({"person": "second", "number": "plural"}, "vosotros"),
        ({"person": "second", "number": "plural", "formality": "formal"}, "ustedes"),
        ({"person": "third"}, "él"),
        ({"person": "third", "gender": "feminine"}, "ella"),
        ({"person": "third", "gender": "inanimate"}, "ello"),
        ({"person": "third", "number": "plural", "gender": "feminine"}, "ellas"),
    ])
    def test_table(self, options, expected):
        assert get_pronoun(options) == expected

    def test_formality_ignored_outside_second_person(self):
        assert get_pronoun({"person": "third", "formality": "formal"}) == "él"

    def test_model_options(self):
        assert get_pronoun(InflectOptions(person="second", formality="formal")) == "usted"

    def test_no_options(self):
        assert get_pronoun() == "yo"


class TestStyles:
    """Regional overrides of the pronoun table."""

    def test_voseo_singular(self):
        assert get_pronoun({"person": "second", "style": "rioplatense"}) == "vos"

    def test_voseo_formal(self):
        assert get_pronoun({"person": "second", "formality": "formal", "style": "rioplatense"}) == "usted"

    def test_voseo_plural(self):
        assert get_pronoun({"person": "second", "number": "plural", "style": "centroamericano"}) == "ustedes"

    def test_ustedes_plural(self):
        assert get_pronoun({"person": "second", "number": "plural", "style": "mexicano"}) == "ustedes"

    def test_tuteo(self):
        assert get_pronoun({"person": "second", "formality": "formal", "style": "caribeno"}) == "tú"

    def test_third_person_ignores_voseo(self):
        assert get_pronoun({"person": "third", "number": "plural", "style": "rioplatense"}) == "ellos"

    def test_castillano_explicit(self):
        assert get_pronoun({"person": "second", "number": "plural", "style": "castillano"}) == "vosotros"
