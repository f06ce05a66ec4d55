"""
Conjugador: Spanish verb conjugation.

Inflects single verb forms and builds full paradigms from a bundled table
of regular endings, stem changes and irregular verbs, with support for
regional address styles (voseo, tuteo, ustedes).
"""

import time
from typing import Tuple

__version__ = "0.2.0"

from conjugador.conjugate import conjugate_verb
from conjugador.inflect import inflect
from conjugador.models import ConjugateOptions, InflectOptions
from conjugador.pronouns import get_pronoun
from conjugador.styles import get_style, list_styles


def warm_up(verbose: bool = False) -> Tuple[float, dict]:
    """
    Load every dataset table up front.

    Tables are otherwise read on first use; call this at application
    startup to keep that cost out of the first request.

    Args:
        verbose: If True, print timing information.

    Returns:
        Tuple of (total_time_seconds, timing_details_dict)

    Example:
        >>> import conjugador
        >>> elapsed, details = conjugador.warm_up(verbose=True)
        Warming up conjugador tables...
          Dataset:    4.2ms
          Styles:     0.3ms
        Total warm-up:    4.5ms
    """
    from conjugador.dataset import get_dataset

    timings = {}
    total_start = time.perf_counter()

    if verbose:
        print("Warming up conjugador tables...")

    t0 = time.perf_counter()
    get_dataset()
    timings['dataset'] = (time.perf_counter() - t0) * 1000
    if verbose:
        print(f"  Dataset:  {timings['dataset']:>6.1f}ms")

    t0 = time.perf_counter()
    list_styles()
    timings['styles'] = (time.perf_counter() - t0) * 1000
    if verbose:
        print(f"  Styles:   {timings['styles']:>6.1f}ms")

    total_time = time.perf_counter() - total_start
    timings['total'] = total_time * 1000

    if verbose:
        print(f"Total warm-up:    {timings['total']:>6.1f}ms")

    return total_time, timings


__all__ = [
    '__version__',
    'conjugate_verb',
    'get_pronoun',
    'get_style',
    'inflect',
    'list_styles',
    'warm_up',
    'ConjugateOptions',
    'InflectOptions',
]
