"""
Output formatting for paradigms.
"""

import json
from typing import Iterator, List, Tuple

from conjugador.conjugate import Conjugation


def iter_forms(conjugation: Conjugation) -> Iterator[Tuple[str, str, str, str, str]]:
    """Yield (mood, tense, number, person, form) in paradigm order."""
    for mood, tenses in conjugation.items():
        for tense, numbers in tenses.items():
            for number, persons in numbers.items():
                for person, form in persons.items():
                    yield mood, tense, number, person, form


def conjugation_to_json(conjugation: Conjugation, indent: int = 2) -> str:
    """Serialize a paradigm as JSON, keeping accented characters as-is."""
    return json.dumps(conjugation, ensure_ascii=False, indent=indent)


def conjugation_to_lines(conjugation: Conjugation) -> List[str]:
    """
    Flatten a paradigm into one line per form.

    Example:
        >>> conjugation_to_lines({"indicative": {"present": {"singular": {"first": "hablo"}}}})
        ['indicative present singular first: hablo']
    """
    return [
        f"{mood} {tense} {number} {person}: {form}"
        for mood, tense, number, person, form in iter_forms(conjugation)
    ]


def conjugation_to_text(conjugation: Conjugation) -> str:
    """Join conjugation_to_lines() output into one newline-separated string."""
    return "\n".join(conjugation_to_lines(conjugation))
