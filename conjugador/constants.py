"""
Grammatical axes used throughout conjugador.

The order of each tuple is the order in which the paradigm driver
iterates over that axis.
"""

from typing import Dict, Tuple

# =============================================================================
# Axes
# =============================================================================

PERSONS: Tuple[str, ...] = ("first", "second", "third")
NUMBERS: Tuple[str, ...] = ("singular", "plural")
GENDERS: Tuple[str, ...] = ("masculine", "feminine", "inanimate")
FORMALITIES: Tuple[str, ...] = ("formal", "informal")
POSITIVITIES: Tuple[str, ...] = ("affirmative", "negative")

INDICATIVE = "indicative"
SUBJUNCTIVE = "subjunctive"
CONDITIONAL = "conditional"
IMPERATIVE = "imperative"

MOODS: Tuple[str, ...] = (INDICATIVE, SUBJUNCTIVE, CONDITIONAL, IMPERATIVE)

# Tenses (or positivities, for the imperative) of each mood
MOOD_TENSES: Dict[str, Tuple[str, ...]] = {
    INDICATIVE: (
        "present",
        "imperfect",
        "preterite",
        "future",
        "perfect",
        "pluperfect",
        "future perfect",
        "preterite perfect",
    ),
    SUBJUNCTIVE: (
        "present",
        "imperfect -ra",
        "imperfect -se",
        "future",
        "perfect",
        "pluperfect",
        "future perfect",
    ),
    CONDITIONAL: (
        "present",
        "perfect",
        "future",
    ),
    IMPERATIVE: POSITIVITIES,
}

# Every tense name across all non-imperative moods, in first-seen order
TENSES: Tuple[str, ...] = tuple(dict.fromkeys(
    tense
    for mood in (INDICATIVE, SUBJUNCTIVE, CONDITIONAL)
    for tense in MOOD_TENSES[mood]
))

# Tenses built from an auxiliary (haber) plus a past participle
COMPOUND_TENSES = frozenset({
    "perfect",
    "pluperfect",
    "future perfect",
    "preterite perfect",
})

# Infinitive endings that can be inflected
ENDING_CLASSES: Tuple[str, ...] = ("ar", "er", "ir")

# Yo-form irregularity markers
YO_GO = "-go"
YO_IO = "-ío"
YO_JO = "-jo"

# Preterite sentinel: e->i only in the third person
PRETERITE_THIRD_E_I = "3rd e-i"

# Defaults applied to any option left unset
DEFAULT_PERSON = "first"
DEFAULT_NUMBER = "singular"
DEFAULT_MOOD = INDICATIVE
DEFAULT_TENSE = "present"
DEFAULT_POSITIVITY = "affirmative"
DEFAULT_GENDER = "masculine"
DEFAULT_FORMALITY = "formal"
