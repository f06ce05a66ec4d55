"""
Command line interface for conjugador.

Usage:
    conjugador hablar                       # full paradigm as JSON
    conjugador hablar list                  # one line per form
    conjugador tener subjunctive present    # restrict mood and tense
    conjugador venir imperative pronouns rioplatense
    conjugador hablar "future perfect" plural

Option tokens may appear in any order after the verb. Tense names that
contain a space can also be written with an underscore (future_perfect).
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

from conjugador import __version__, settings
from conjugador.conjugate import conjugate_verb
from conjugador.constants import (
    FORMALITIES, GENDERS, MOODS, NUMBERS, PERSONS, POSITIVITIES, TENSES,
)
from conjugador.loading.tables import DatasetError
from conjugador.output import conjugation_to_json, conjugation_to_text
from conjugador.styles import list_styles

# Flag tokens and the option each one sets
FLAG_TOKENS = {
    'pronouns': 'usePronouns',
    'verbOnly': 'verbOnly',
}
LIST_TOKEN = 'list'


def parse_tokens(tokens: List[str]) -> Tuple[Dict[str, Any], bool]:
    """
    Turn option tokens into a conjugate_verb() options dict.

    Args:
        tokens: Words following the verb on the command line.

    Returns:
        Tuple of (options, as_list).

    Raises:
        ValueError: On a token that names no option.
    """
    axes = [
        ('mood', MOODS),
        ('tense', TENSES),
        ('person', PERSONS),
        ('number', NUMBERS),
        ('positivity', POSITIVITIES),
        ('formality', FORMALITIES),
        ('gender', GENDERS),
        ('style', tuple(list_styles())),
    ]

    options: Dict[str, Any] = {}
    as_list = False

    for token in tokens:
        word = token.replace('_', ' ')
        if token == LIST_TOKEN:
            as_list = True
        elif token in FLAG_TOKENS:
            options[FLAG_TOKENS[token]] = True
        else:
            for key, values in axes:
                if word in values:
                    options[key] = word
                    break
            else:
                raise ValueError(f"unrecognized option '{token}'")

    return options, as_list


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Conjugate Spanish verbs',
        prog='conjugador',
        epilog=(
            'Tokens: mood, tense, person, number, positivity, formality, '
            'gender or style names, plus "pronouns", "verbOnly" and "list".'
        ),
    )

    parser.add_argument(
        'verb',
        nargs='?',
        help='Spanish infinitive to conjugate',
    )

    parser.add_argument(
        'tokens',
        nargs='*',
        help='Option tokens restricting or formatting the paradigm',
    )

    parser.add_argument(
        '--styles',
        action='store_true',
        help='List the known regional styles and exit',
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        default=settings.DEBUG,
        help='Log dataset loading to stderr',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'conjugador {__version__}')
        return 0

    if parsed.debug:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    try:
        if parsed.styles:
            for name in list_styles():
                print(name)
            return 0

        if not parsed.verb:
            parser.print_help()
            return 1

        options, as_list = parse_tokens(parsed.tokens)
        conjugation = conjugate_verb(parsed.verb, options)
    except DatasetError as e:
        print(f'Error loading dataset: {e}', file=sys.stderr)
        return 1
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if as_list:
        print(conjugation_to_text(conjugation))
    else:
        print(conjugation_to_json(conjugation))
    return 0


if __name__ == '__main__':
    sys.exit(main())
