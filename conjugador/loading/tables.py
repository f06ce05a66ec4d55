"""
Dataset file loading for conjugador.

The dataset is made of five files, all found in settings.DATA_DIR:
- endings.json: regular endings per infinitive class, plus the haber
  auxiliaries used by the compound tenses
- styles.json: regional address-form flags
- stem_changes.tsv: per-verb stem change rules
- diphthong_verbs.tsv: verbs whose stressed stem o becomes ue
- irregular_verbs.json: explicit paradigms, irregular participles and
  prefixed compounds of irregular verbs

These functions only read and sanity-check the raw structures; the typed
tables are built in conjugador.dataset.
"""

import csv
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from conjugador import settings

logger = logging.getLogger(__name__)


# Columns of stem_changes.tsv, in file order
EXCEPTION_COLUMNS = (
    "infinitive",
    "stem change",
    "yo",
    "subj stem",
    "future",
    "preterite",
)


class DatasetError(Exception):
    """Raised when a dataset file is missing or malformed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def _resolve(path: Optional[Path], filename: str) -> Path:
    if path is None:
        return settings.data_path(filename)
    return Path(path)


def _read_json(path: Path) -> Any:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        raise DatasetError(path, "file not found")
    except json.JSONDecodeError as e:
        raise DatasetError(path, f"invalid JSON: {e}")


def _read_tsv(path: Path) -> List[Dict[str, str]]:
    """
    Read a tab-separated file whose first row is a header.

    Returns:
        One dict per data row, keyed by header column. Missing trailing
        cells are filled with empty strings; blank lines are skipped.
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            reader = csv.reader(f, delimiter='\t')
            try:
                header = [name.strip() for name in next(reader)]
            except StopIteration:
                raise DatasetError(path, "missing header row")

            rows = []
            for row in reader:
                if not row or not row[0].strip():
                    continue
                cells = [cell.strip() for cell in row]
                cells += [''] * (len(header) - len(cells))
                rows.append(dict(zip(header, cells)))
            return rows
    except FileNotFoundError:
        raise DatasetError(path, "file not found")


def load_endings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load the regular ending table.

    Args:
        path: Override for the endings file. Defaults to settings.DATA_DIR.

    Returns:
        Mapping of ending class ("ar", "er", "ir") and "auxiliaries" to
        their nested person -> number -> mood structures.
    """
    path = _resolve(path, settings.ENDINGS_FILE)
    endings = _read_json(path)

    if not isinstance(endings, dict) or "auxiliaries" not in endings:
        raise DatasetError(path, "expected an object with an 'auxiliaries' key")
    for ending in ("ar", "er", "ir"):
        if ending not in endings:
            raise DatasetError(path, f"missing ending class '{ending}'")
        if "past participle" not in endings[ending]:
            raise DatasetError(path, f"ending class '{ending}' has no past participle")

    logger.debug(f"Loaded endings from {path}")
    return endings


def load_styles(path: Optional[Path] = None) -> Dict[str, Dict[str, bool]]:
    """Load the style name -> {tuteo, voseo, ustedes} table."""
    path = _resolve(path, settings.STYLES_FILE)
    styles = _read_json(path)

    if not isinstance(styles, dict) or not styles:
        raise DatasetError(path, "expected a non-empty object of styles")

    logger.debug(f"Loaded {len(styles)} styles from {path}")
    return styles


def load_exception_rows(path: Optional[Path] = None) -> List[Dict[str, str]]:
    """
    Load per-verb stem change rules.

    Returns:
        One dict per verb keyed by EXCEPTION_COLUMNS; absent values are
        empty strings.
    """
    path = _resolve(path, settings.STEM_CHANGES_FILE)
    rows = _read_tsv(path)

    for row in rows:
        for column in EXCEPTION_COLUMNS:
            row.setdefault(column, '')

    logger.debug(f"Loaded {len(rows)} stem change rules from {path}")
    return rows


def load_diphthong_verbs(path: Optional[Path] = None) -> List[str]:
    """Load the list of infinitives whose stem o becomes ue."""
    path = _resolve(path, settings.DIPHTHONG_VERBS_FILE)
    verbs = [row["infinitive"] for row in _read_tsv(path) if row.get("infinitive")]

    logger.debug(f"Loaded {len(verbs)} o-ue verbs from {path}")
    return verbs


def load_irregular_verbs(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load irregular verb overrides.

    Each value is either an object (explicit paradigm and/or an irregular
    "past participle") or a string naming the irregular base verb of a
    prefixed compound.
    """
    path = _resolve(path, settings.IRREGULAR_VERBS_FILE)
    overrides = _read_json(path)

    if not isinstance(overrides, dict):
        raise DatasetError(path, "expected an object keyed by infinitive")
    for verb, value in overrides.items():
        if not isinstance(value, (str, dict)):
            raise DatasetError(path, f"override for '{verb}' must be a string or an object")

    logger.debug(f"Loaded {len(overrides)} irregular verb overrides from {path}")
    return overrides
