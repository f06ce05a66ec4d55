"""
Full paradigms.

conjugate_verb() calls inflect() once for every mood, tense (or
positivity), number and person left open by the options, and collects the
forms in a nested dict:

    {"indicative": {"present": {"singular": {"first": "hablo", ...}}}}
"""

from typing import Any, Dict, Iterator, Optional, Tuple

from conjugador.constants import IMPERATIVE, MOOD_TENSES, MOODS, NUMBERS, PERSONS
from conjugador.dataset import Dataset
from conjugador.inflect import inflect
from conjugador.models import ConjugateOptions, OptionsLike, to_conjugate_options
from conjugador.pronouns import get_pronoun

Conjugation = Dict[str, Dict[str, Dict[str, Dict[str, str]]]]


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def _axes(mood: str, options: ConjugateOptions) -> Tuple[str, ...]:
    """Tenses (positivities for the imperative) to generate for a mood."""
    if mood == IMPERATIVE:
        if options.positivity:
            return (options.positivity,)
        if options.tense:
            return ()
        return MOOD_TENSES[IMPERATIVE]
    if options.tense:
        return (options.tense,) if options.tense in MOOD_TENSES[mood] else ()
    return MOOD_TENSES[mood]


def iter_cells(options: OptionsLike = None) -> Iterator[Tuple[str, str, str, str]]:
    """
    Yield every (mood, axis, number, person) cell selected by the options.

    The first person singular imperative is never yielded.
    """
    options = to_conjugate_options(options)
    moods = (options.mood,) if options.mood else MOODS
    numbers = (options.number,) if options.number else NUMBERS
    persons = (options.person,) if options.person else PERSONS

    for mood in moods:
        for axis in _axes(mood, options):
            for number in numbers:
                for person in persons:
                    if mood == IMPERATIVE and number == "singular" and person == "first":
                        continue
                    yield mood, axis, number, person


def conjugate_form(verb: str, mood: str, axis: str, number: str, person: str,
                   options: OptionsLike = None, dataset: Optional[Dataset] = None) -> str:
    """
    Produce one cell of a paradigm, formatted as conjugate_verb() does.

    Imperatives read "¡No hables!" unless verb_only is set; other forms
    are prefixed with the capitalized pronoun when use_pronouns is set.
    """
    options = to_conjugate_options(options)
    params: Dict[str, Any] = {
        "style": options.style,
        "gender": options.gender,
        "formality": options.formality,
        "reflection": options.reflection,
        "mood": mood,
        "number": number,
        "person": person,
    }
    if mood == IMPERATIVE:
        params["positivity"] = axis
    else:
        params["tense"] = axis

    form = inflect(verb, params, dataset)
    pronoun = get_pronoun(params) + " " if options.use_pronouns else ""

    if mood == IMPERATIVE:
        if options.verb_only:
            return form
        negation = "no " if axis == "negative" else ""
        return "¡" + _capitalize(pronoun + negation + form) + "!"

    return _capitalize(pronoun) + form


def conjugate_verb(verb: str, options: OptionsLike = None,
                   dataset: Optional[Dataset] = None) -> Conjugation:
    """
    Conjugate a verb into every form selected by the options.

    Any of mood, tense, positivity, number and person that is left out is
    iterated over all of its values; a given value restricts that axis.
    A tense filter skips the moods that lack that tense.

    Args:
        verb: Infinitive to conjugate.
        options: ConjugateOptions or dict. Besides the inflect() options,
            accepts use_pronouns (usePronouns) and verb_only (verbOnly).
        dataset: Tables to use. Defaults to the bundled dataset.

    Returns:
        Nested dict mood -> tense/positivity -> number -> person -> form.

    Raises:
        pydantic.ValidationError: If the options hold unknown keys or values.

    Example:
        >>> conjugate_verb("hablar", {"mood": "indicative", "tense": "present",
        ...                           "number": "singular", "person": "first"})
        {'indicative': {'present': {'singular': {'first': 'hablo'}}}}
    """
    options = to_conjugate_options(options)
    conjugation: Conjugation = {}

    for mood, axis, number, person in iter_cells(options):
        form = conjugate_form(verb, mood, axis, number, person, options, dataset)
        conjugation.setdefault(mood, {}).setdefault(axis, {}).setdefault(number, {})[person] = form

    return conjugation
