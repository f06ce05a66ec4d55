"""
Pydantic models for conjugation options.

Both inflect() and conjugate_verb() accept either one of these models or a
plain dict with the same keys. The camelCase aliases (verbOnly,
usePronouns) are accepted alongside the snake_case field names.

Usage:
    from conjugador.models import ConjugateOptions

    options = ConjugateOptions(mood="imperative", usePronouns=True)
    conjugate_verb("hablar", options)
"""

from typing import Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


Person = Literal["first", "second", "third"]
Number = Literal["singular", "plural"]
Mood = Literal["indicative", "subjunctive", "conditional", "imperative"]
Tense = Literal[
    "present", "imperfect", "preterite", "future",
    "perfect", "pluperfect", "future perfect", "preterite perfect",
    "imperfect -ra", "imperfect -se",
]
Positivity = Literal["affirmative", "negative"]
Gender = Literal["masculine", "feminine", "inanimate"]
Formality = Literal["formal", "informal"]


class InflectOptions(BaseModel):
    """
    Grammatical options of a single verb form.

    Unset fields take their defaults inside the engine: first person,
    singular, indicative, present, affirmative, masculine, castillano.
    """
    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    person: Optional[Person] = Field(None, description="Grammatical person")
    number: Optional[Number] = Field(None, description="Grammatical number")
    mood: Optional[Mood] = Field(None, description="Verb mood")
    tense: Optional[Tense] = Field(None, description="Tense; ignored for the imperative")
    positivity: Optional[Positivity] = Field(None, description="Imperative polarity")
    gender: Optional[Gender] = Field(None, description="Gender of the subject pronoun")
    formality: Optional[Formality] = Field(None, description="Second person register")
    style: Optional[str] = Field(None, description="Regional style name (e.g. 'rioplatense')")
    reflection: bool = Field(False, description="Reflexive use; accepted but does not change forms")
    verb_only: bool = Field(False, alias="verbOnly", description="Leave imperatives unformatted")


class ConjugateOptions(InflectOptions):
    """Options of a full paradigm."""
    use_pronouns: bool = Field(False, alias="usePronouns", description="Prefix forms with the subject pronoun")


OptionsLike = Union[None, Dict[str, Any], InflectOptions]


def option_values(options: OptionsLike) -> Dict[str, Any]:
    """
    Flatten options into a dict of the values that were set.

    Models are dumped by field name; dicts are copied as they are.
    """
    if options is None:
        return {}
    if isinstance(options, BaseModel):
        return options.model_dump(exclude_none=True)
    return dict(options)


def to_conjugate_options(options: OptionsLike) -> ConjugateOptions:
    """
    Validate options for the paradigm driver.

    Raises:
        pydantic.ValidationError: On unknown keys or values.
    """
    if isinstance(options, ConjugateOptions):
        return options
    return ConjugateOptions.model_validate(option_values(options))
