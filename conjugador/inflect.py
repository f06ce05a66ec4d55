"""
Inflection of a single Spanish verb form.

inflect() resolves one (infinitive, options) pair to a surface form. It
never raises for a string verb: anything too short returns "", anything
that is not an -ar/-er/-ir infinitive is returned unchanged, and a cell
the tables cannot produce falls back to the infinitive.

Resolution order:
1. prefixed compounds of irregular verbs (detener) are conjugated as
   their base (tener) with the prefix put back
2. the person used for lookup is adjusted for formality and style
   (usted/ustedes take third person endings)
3. compound tenses: haber auxiliary + past participle
4. simple tenses: explicit paradigm of the verb, then of its base,
   then the regular ending table with stem mutation
"""

from typing import Optional

from conjugador.constants import (
    COMPOUND_TENSES, DEFAULT_FORMALITY, DEFAULT_MOOD, DEFAULT_NUMBER,
    DEFAULT_PERSON, DEFAULT_POSITIVITY, DEFAULT_TENSE, IMPERATIVE,
)
from conjugador.dataset import Dataset, FullParadigm, get_dataset
from conjugador.models import OptionsLike, option_values
from conjugador.stems import fix_stem, replace_last
from conjugador.styles import Style, resolve_style


def _paradigm_form(paradigm: Optional[FullParadigm], mood: str, axis: str,
                   number: str, person: str, style: Style) -> Optional[str]:
    if paradigm is None:
        return None
    form = paradigm.form(mood, axis, number, person)
    if form is None:
        return None
    return form.resolve(style.voseo)


def inflect(verb: str, options: OptionsLike = None, dataset: Optional[Dataset] = None) -> str:
    """
    Inflect a verb for the given grammatical options.

    Args:
        verb: Infinitive, e.g. "hablar".
        options: An InflectOptions model or a dict with any of person,
            number, mood, tense, positivity, gender, formality, style,
            reflection and verbOnly.
        dataset: Tables to use. Defaults to the bundled dataset.

    Returns:
        The inflected form. Compound tenses include the auxiliary
        ("he hablado").

    Example:
        >>> inflect("tener", {"person": "first"})
        'tengo'
        >>> inflect("contener", {"mood": "imperative", "person": "second"})
        'contén'
    """
    if not verb or len(verb) < 2:
        return ""

    dataset = dataset or get_dataset()
    ending = verb[-2:]
    endings = dataset.endings.get(ending)
    if endings is None:
        return verb

    values = option_values(options)
    person = values.get("person") or DEFAULT_PERSON
    number = values.get("number") or DEFAULT_NUMBER
    mood = values.get("mood") or DEFAULT_MOOD
    tense = values.get("tense") or DEFAULT_TENSE
    positivity = values.get("positivity") or DEFAULT_POSITIVITY
    formality = values.get("formality") or DEFAULT_FORMALITY
    explicit_formality = values.get("formality") in ("formal", "informal")
    style = resolve_style(values.get("style"))

    original = verb
    base_verb = verb
    prefix = ""
    compound = dataset.base_of(verb)
    if compound is not None:
        prefix = compound.prefix_of(verb)
        base_verb = compound.base
    stem = base_verb[:-2]

    lookup_person = person
    if style.tuteo and person == "second" and number == "singular" and formality == "formal":
        formality = "informal"
    if style.ustedes and person == "second" and number == "plural":
        lookup_person = "third"
    if explicit_formality and person == "second" and formality == "formal":
        lookup_person = "third"

    if tense in COMPOUND_TENSES:
        aux = dataset.auxiliary(lookup_person, number, mood, tense)
        if aux is None:
            return original
        paradigm = dataset.paradigm(base_verb)
        if paradigm is not None and paradigm.past_participle:
            participle = paradigm.past_participle
        else:
            participle = stem + endings.past_participle
        return f"{aux} {prefix}{participle}"

    axis = positivity if mood == IMPERATIVE else tense

    form = _paradigm_form(dataset.paradigm(original), mood, axis, number, lookup_person, style)
    if form:
        return form

    if prefix:
        form = _paradigm_form(dataset.paradigm(base_verb), mood, axis, number, lookup_person, style)
        if form:
            form = prefix + form
            if (mood == IMPERATIVE and ending == "er" and lookup_person == "second"
                    and positivity == "affirmative" and number == "singular"):
                # detener -> detén
                form = replace_last(form, "e", "é")
            return form

    suffix = endings.suffix(lookup_person, number, mood, axis)
    if suffix is None:
        return original

    text = suffix.resolve(style.voseo)
    cell = {
        "person": lookup_person,
        "number": number,
        "mood": mood,
        "tense": tense,
        "positivity": positivity,
    }
    return prefix + fix_stem(stem, ending, text, cell, dataset) + text
