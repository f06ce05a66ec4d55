"""
Stem mutation for regular-ending forms.

fix_stem() takes the bare stem of an infinitive and returns the stem that
goes in front of a given suffix, applying in order:
1. the verb's own exception rule (stem changes, irregular yo, subjunctive,
   future and preterite stems)
2. o -> ue diphthongization
3. spelling shifts that keep the consonant sound (c -> qu, g -> j, ...)
4. h before a stem that now starts with u (oler -> huelo)
"""

from typing import Mapping, Optional

from conjugador.constants import (
    DEFAULT_MOOD, DEFAULT_NUMBER, DEFAULT_PERSON, DEFAULT_POSITIVITY,
    DEFAULT_TENSE, IMPERATIVE, INDICATIVE, PRETERITE_THIRD_E_I,
    SUBJUNCTIVE, YO_GO, YO_IO, YO_JO,
)
from conjugador.dataset import Dataset, ExceptionRule, get_dataset

# Suffix initials that trigger each spelling shift
FRONT_VOWELS = ("e", "é")
BACK_VOWELS = ("a", "á", "o")


def replace_last(text: str, old: str, new: str) -> str:
    """Replace the last occurrence of old in text, or return text unchanged."""
    index = text.rfind(old)
    if index < 0:
        return text
    return text[:index] + new + text[index + len(old):]


def apply_yo_marker(stem: str, marker: Optional[str]) -> str:
    """
    Apply a yo-form irregularity to a stem.

    -go appends g (ten -> teng), -ío accents the last i (envi -> enví),
    -jo raises the last e and turns the final consonant into j
    (correg -> corrij).
    """
    if marker == YO_GO:
        return stem + "g"
    if marker == YO_IO:
        return replace_last(stem, "i", "í")
    if marker == YO_JO:
        stem = replace_last(stem, "e", "i")
        return stem[:-1] + "j"
    return stem


def apply_stem_change(stem: str, change: Optional[str]) -> str:
    if change == "e-ie":
        return replace_last(stem, "e", "ie")
    if change == "e-i":
        return stem.replace("e", "i", 1)
    if change == "i-í":
        return replace_last(stem, "i", "í")
    return stem


def is_subjunctive_like(mood: str, person: str, number: str, positivity: str) -> bool:
    """Whether a form takes its stem from the present subjunctive."""
    if mood == SUBJUNCTIVE:
        return True
    if mood != IMPERATIVE:
        return False
    return (
        positivity == "negative"
        or person == "third"
        or (person == "first" and number == "plural")
    )


def _apply_rule(stem: str, ending: str, rule: ExceptionRule,
                person: str, number: str, mood: str, tense: str,
                positivity: str) -> str:
    if is_subjunctive_like(mood, person, number, positivity):
        # every yo marker except -ío carries into the whole present subjunctive
        yo_everywhere = bool(rule.yo) and rule.yo != YO_IO
        if tense == "present" and (person == "third" or number == "singular" or yo_everywhere):
            if rule.subj_stem:
                return rule.subj_stem
            return apply_yo_marker(stem, rule.yo)
        if tense == "future" and rule.future:
            return rule.future
        if ending == "ir":
            return replace_last(stem, "e", "i")
        return stem

    if tense == "future" and rule.future:
        return rule.future

    if (rule.yo and mood == INDICATIVE and tense == "present"
            and number == "singular" and person == "first"):
        return apply_yo_marker(stem, rule.yo)

    if (rule.stem_change
            and (mood == IMPERATIVE or (mood == INDICATIVE and tense == "present"))
            and (person == "third" or number == "singular")):
        return apply_stem_change(stem, rule.stem_change)

    if mood == IMPERATIVE and ending == "ir" and (person == "first" or positivity == "negative"):
        return replace_last(stem, "e", "i")

    if tense == "preterite" and rule.preterite:
        if rule.preterite == PRETERITE_THIRD_E_I:
            return replace_last(stem, "e", "i") if person == "third" else stem
        return rule.preterite

    return stem


def _shift_spelling(stem: str, ending: str, initial: str, has_rule: bool) -> str:
    if ending == "ar":
        if initial in FRONT_VOWELS:
            if stem.endswith("c"):
                return stem[:-1] + "qu"
            if stem.endswith("g"):
                return stem[:-1] + "gu"
            if stem.endswith("z"):
                return stem[:-1] + "c"
    elif ending == "er":
        if stem[-2:] in ("oc", "ec") and initial in BACK_VOWELS:
            return stem[:-1] + "zc"
    elif ending == "ir" and not has_rule:
        if initial in BACK_VOWELS:
            if stem.endswith("uc"):
                return stem[:-1] + "zc"
            if stem.endswith("g"):
                return stem[:-1] + "j"
    return stem


def fix_stem(
    stem: str,
    ending: str,
    suffix: str,
    options: Optional[Mapping[str, str]] = None,
    dataset: Optional[Dataset] = None,
) -> str:
    """
    Mutate a verb stem so that it fits the given suffix.

    Args:
        stem: Infinitive without its last two letters.
        ending: Infinitive class, "ar", "er" or "ir".
        suffix: The regular suffix the stem will be joined to.
        options: person, number, mood, tense and positivity of the form.
            Missing keys take the usual defaults.
        dataset: Tables to consult. Defaults to the bundled dataset.

    Returns:
        The stem to put in front of suffix.

    Example:
        >>> fix_stem("ten", "er", "o", {"person": "first"})
        'teng'
        >>> fix_stem("busc", "ar", "é", {"tense": "preterite"})
        'busqu'
    """
    options = options or {}
    dataset = dataset or get_dataset()

    person = options.get("person") or DEFAULT_PERSON
    number = options.get("number") or DEFAULT_NUMBER
    mood = options.get("mood") or DEFAULT_MOOD
    tense = options.get("tense") or DEFAULT_TENSE
    positivity = options.get("positivity") or DEFAULT_POSITIVITY

    infinitive = stem + ending
    rule = dataset.exception_rules.get(infinitive)

    if rule is not None:
        stem = _apply_rule(stem, ending, rule, person, number, mood, tense, positivity)

    if ((mood == IMPERATIVE or tense == "present")
            and infinitive in dataset.diphthong_verbs
            and (person == "third" or number == "singular")):
        stem = stem.replace("o", "ue", 1)

    stem = _shift_spelling(stem, ending, suffix[:1], rule is not None)

    if stem.startswith("u"):
        stem = "h" + stem

    return stem
