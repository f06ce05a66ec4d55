"""
Readers for the bundled conjugation dataset files.
"""

from conjugador.loading.tables import (
    DatasetError,
    load_diphthong_verbs,
    load_endings,
    load_exception_rows,
    load_irregular_verbs,
    load_styles,
)

__all__ = [
    'DatasetError',
    'load_diphthong_verbs',
    'load_endings',
    'load_exception_rows',
    'load_irregular_verbs',
    'load_styles',
]
