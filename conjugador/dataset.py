"""
Typed, load-once conjugation tables.

The raw files read by conjugador.loading are turned into these
structures the first time get_dataset() is called:
- EndingClass: regular suffixes of one infinitive class (ar, er, ir)
- ExceptionRule: stem changes and irregular stems of one verb
- Override: either a FullParadigm of explicit forms or PrefixOf(base)
  for a prefixed compound of an irregular verb
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

from conjugador import settings
from conjugador.cache import defcache
from conjugador.constants import ENDING_CLASSES
from conjugador.loading.tables import (
    DatasetError,
    load_diphthong_verbs,
    load_endings,
    load_exception_rows,
    load_irregular_verbs,
)

logger = logging.getLogger(__name__)

PAST_PARTICIPLE = "past participle"


# =============================================================================
# Suffixes
# =============================================================================

@dataclass(frozen=True)
class LiteralSuffix:
    """A suffix (or form) shared by every regional style."""
    text: str

    def resolve(self, voseo: bool = False) -> str:
        return self.text


@dataclass(frozen=True)
class DialectalSuffix:
    """A suffix (or form) with a separate voseo variant."""
    tu: str
    vos: str

    def resolve(self, voseo: bool = False) -> str:
        return self.vos if voseo else self.tu


Suffix = Union[LiteralSuffix, DialectalSuffix]


def parse_suffix(value: Any, where: str = "") -> Suffix:
    """
    Convert a raw table leaf into a Suffix.

    Args:
        value: Either a string or a {"tu": ..., "vos": ...} object.
        where: Location used in the error message.
    """
    if isinstance(value, str):
        return LiteralSuffix(value)
    if isinstance(value, dict) and "tu" in value and "vos" in value:
        return DialectalSuffix(tu=value["tu"], vos=value["vos"])
    raise ValueError(f"expected a string or a tu/vos pair at {where}: {value!r}")


# =============================================================================
# Regular endings
# =============================================================================

# A mood entry is either one suffix for every tense of the mood, or a
# mapping of tense (positivity for the imperative) to suffix
MoodEntry = Union[Suffix, Dict[str, Suffix]]


@dataclass
class EndingClass:
    """Regular suffixes of one infinitive class."""
    name: str
    moods: Dict[Tuple[str, str, str], MoodEntry]
    past_participle: str

    def suffix(self, person: str, number: str, mood: str, axis: str) -> Optional[Suffix]:
        """
        Look up the suffix for one cell.

        Args:
            axis: The tense, or the positivity for the imperative.

        Returns:
            The suffix, or None if the table has no entry for the cell.
        """
        entry = self.moods.get((person, number, mood))
        if isinstance(entry, dict):
            return entry.get(axis)
        return entry


def _build_ending_class(name: str, raw: Dict[str, Any]) -> EndingClass:
    moods: Dict[Tuple[str, str, str], MoodEntry] = {}
    for person, numbers in raw.items():
        if person == PAST_PARTICIPLE:
            continue
        for number, mood_entries in numbers.items():
            for mood, entry in mood_entries.items():
                where = f"{name}/{person}/{number}/{mood}"
                if isinstance(entry, dict) and not ("tu" in entry and "vos" in entry):
                    moods[(person, number, mood)] = {
                        axis: parse_suffix(value, f"{where}/{axis}")
                        for axis, value in entry.items()
                    }
                else:
                    moods[(person, number, mood)] = parse_suffix(entry, where)

    participle = raw[PAST_PARTICIPLE]["singular"]["masculine"]
    return EndingClass(name=name, moods=moods, past_participle=participle)


# =============================================================================
# Exception rules
# =============================================================================

@dataclass(frozen=True)
class ExceptionRule:
    """
    Stem irregularities of one verb.

    Attributes:
        stem_change: "e-ie", "e-i", "i-í" or None.
        yo: Yo-form marker "-go", "-ío", "-jo" or None.
        subj_stem: Explicit present subjunctive stem.
        future: Explicit future/conditional stem.
        preterite: Explicit preterite stem, or "3rd e-i".
    """
    infinitive: str
    stem_change: Optional[str] = None
    yo: Optional[str] = None
    subj_stem: Optional[str] = None
    future: Optional[str] = None
    preterite: Optional[str] = None

    @classmethod
    def from_row(cls, row: Dict[str, str]) -> 'ExceptionRule':
        return cls(
            infinitive=row["infinitive"],
            stem_change=row["stem change"] or None,
            yo=row["yo"] or None,
            subj_stem=row["subj stem"] or None,
            future=row["future"] or None,
            preterite=row["preterite"] or None,
        )


# =============================================================================
# Verb overrides
# =============================================================================

@dataclass
class FullParadigm:
    """Explicit forms of an irregular verb, used verbatim."""
    forms: Dict[Tuple[str, str, str, str], Suffix] = field(default_factory=dict)
    past_participle: Optional[str] = None

    def form(self, mood: str, axis: str, number: str, person: str) -> Optional[Suffix]:
        return self.forms.get((mood, axis, number, person))


@dataclass(frozen=True)
class PrefixOf:
    """A prefixed compound that conjugates like its base verb."""
    base: str

    def prefix_of(self, verb: str) -> str:
        return verb[:len(verb) - len(self.base)]


Override = Union[FullParadigm, PrefixOf]


def _build_paradigm(verb: str, raw: Dict[str, Any]) -> FullParadigm:
    paradigm = FullParadigm(past_participle=raw.get(PAST_PARTICIPLE))
    for mood, axes in raw.items():
        if mood == PAST_PARTICIPLE:
            continue
        for axis, numbers in axes.items():
            for number, persons in numbers.items():
                for person, value in persons.items():
                    where = f"{verb}/{mood}/{axis}/{number}/{person}"
                    paradigm.forms[(mood, axis, number, person)] = parse_suffix(value, where)
    return paradigm


# =============================================================================
# Dataset
# =============================================================================

@dataclass
class Dataset:
    """All static tables consumed by the inflection engine."""
    endings: Dict[str, EndingClass]
    auxiliaries: Dict[Tuple[str, str, str, str], str]
    exception_rules: Dict[str, ExceptionRule]
    diphthong_verbs: FrozenSet[str]
    overrides: Dict[str, Override]

    def auxiliary(self, person: str, number: str, mood: str, tense: str) -> Optional[str]:
        return self.auxiliaries.get((person, number, mood, tense))

    def paradigm(self, verb: str) -> Optional[FullParadigm]:
        override = self.overrides.get(verb)
        return override if isinstance(override, FullParadigm) else None

    def base_of(self, verb: str) -> Optional[PrefixOf]:
        override = self.overrides.get(verb)
        return override if isinstance(override, PrefixOf) else None


def load_dataset(data_dir: Optional[Path] = None) -> Dataset:
    """
    Read and type every dataset file.

    Args:
        data_dir: Directory holding the files. Defaults to settings.DATA_DIR.

    Raises:
        DatasetError: If a file is missing or malformed.
    """
    def path(filename: str) -> Optional[Path]:
        return Path(data_dir) / filename if data_dir is not None else None

    endings_path = path(settings.ENDINGS_FILE) or settings.data_path(settings.ENDINGS_FILE)
    raw_endings = load_endings(path(settings.ENDINGS_FILE))

    try:
        endings = {
            name: _build_ending_class(name, raw_endings[name])
            for name in ENDING_CLASSES
        }
    except (KeyError, TypeError, AttributeError, ValueError) as e:
        raise DatasetError(endings_path, f"malformed ending table: {e}")

    auxiliaries: Dict[Tuple[str, str, str, str], str] = {}
    for person, numbers in raw_endings["auxiliaries"].items():
        for number, moods in numbers.items():
            for mood, tenses in moods.items():
                for tense, aux in tenses.items():
                    auxiliaries[(person, number, mood, tense)] = aux

    exception_rules = {
        row["infinitive"]: ExceptionRule.from_row(row)
        for row in load_exception_rows(path(settings.STEM_CHANGES_FILE))
    }

    diphthong_verbs = frozenset(load_diphthong_verbs(path(settings.DIPHTHONG_VERBS_FILE)))

    overrides_path = path(settings.IRREGULAR_VERBS_FILE) or settings.data_path(settings.IRREGULAR_VERBS_FILE)
    overrides: Dict[str, Override] = {}
    for verb, value in load_irregular_verbs(path(settings.IRREGULAR_VERBS_FILE)).items():
        if isinstance(value, str):
            if not verb.endswith(value) or verb == value:
                raise DatasetError(overrides_path, f"'{verb}' is not a prefixed form of '{value}'")
            overrides[verb] = PrefixOf(value)
        else:
            try:
                overrides[verb] = _build_paradigm(verb, value)
            except (TypeError, AttributeError, ValueError) as e:
                raise DatasetError(overrides_path, f"malformed paradigm for '{verb}': {e}")

    logger.info(
        f"Dataset ready: {len(exception_rules)} stem rules, "
        f"{len(diphthong_verbs)} o-ue verbs, {len(overrides)} overrides"
    )

    return Dataset(
        endings=endings,
        auxiliaries=auxiliaries,
        exception_rules=exception_rules,
        diphthong_verbs=diphthong_verbs,
        overrides=overrides,
    )


@defcache("dataset")
def _dataset_cache() -> Dataset:
    return load_dataset()


def get_dataset() -> Dataset:
    """Get the process-wide dataset, loading it on first use."""
    return _dataset_cache.ensure()
