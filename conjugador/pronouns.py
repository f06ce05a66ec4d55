"""
Subject pronouns.

The table is keyed person -> number -> tu/vos -> formality -> gender, but
a branch stops as soon as the pronoun no longer varies: "yo" is the whole
first person singular, while the first person plural needs the gender.
"""

from typing import Dict, Union

from conjugador import settings
from conjugador.constants import DEFAULT_GENDER, DEFAULT_NUMBER, DEFAULT_PERSON
from conjugador.models import OptionsLike, option_values
from conjugador.styles import resolve_style

PronounTree = Union[str, Dict[str, 'PronounTree']]

PRONOUNS: Dict[str, Dict[str, PronounTree]] = {
    "first": {
        "singular": "yo",
        "plural": {
            "tu": {
                "informal": {
                    "masculine": "nosotros",
                    "feminine": "nosotras",
                    "inanimate": "nosotros",
                },
            },
        },
    },
    "second": {
        "singular": {
            "tu": {
                "informal": "tú",
                "formal": "usted",
            },
            "vos": {
                "informal": "vos",
                "formal": "usted",
            },
        },
        "plural": {
            "tu": {
                "informal": "vosotros",
                "formal": "ustedes",
            },
            "vos": "ustedes",
        },
    },
    "third": {
        "singular": {
            "tu": {
                "informal": {
                    "masculine": "él",
                    "feminine": "ella",
                    "inanimate": "ello",
                },
            },
        },
        "plural": {
            "tu": {
                "informal": {
                    "masculine": "ellos",
                    "feminine": "ellas",
                    "inanimate": "ellos",
                },
            },
        },
    },
}


def get_pronoun(options: OptionsLike = None) -> str:
    """
    Get the subject pronoun for a person/number/formality/gender.

    Args:
        options: InflectOptions or dict. Formality only matters for the
            second person; style only when it is not castillano.

    Returns:
        The pronoun, e.g. "nosotras" or "usted". Empty string if the
        options do not lead to a pronoun.

    Example:
        >>> get_pronoun({"person": "second", "style": "rioplatense"})
        'vos'
    """
    values = option_values(options)
    person = values.get("person") or DEFAULT_PERSON
    number = values.get("number") or DEFAULT_NUMBER
    gender = values.get("gender") or DEFAULT_GENDER
    formality = (values.get("formality") if person == "second" else None) or "informal"
    tuvos = "tu"

    style_name = values.get("style")
    if style_name and style_name != settings.DEFAULT_STYLE:
        style = resolve_style(style_name)
        if style.tuteo and person == "second" and number == "singular" and formality == "formal":
            formality = "informal"
        if style.ustedes and person == "second" and number == "plural":
            formality = "formal"
        if style.voseo and person != "first":
            tuvos = "vos"
        if person == "third":
            tuvos = "tu"

    node = PRONOUNS.get(person, {}).get(number)
    for key in (tuvos, formality, gender):
        if not isinstance(node, dict):
            break
        node = node.get(key)

    return node if isinstance(node, str) else ""
