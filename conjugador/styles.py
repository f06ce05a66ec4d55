"""
Regional styles of Spanish.

A style decides how the second person is addressed:
- tuteo: tú is used even where usted would be formal
- voseo: vos replaces tú, with its own endings
- ustedes: ustedes replaces vosotros in the plural
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from conjugador import settings
from conjugador.cache import defcache
from conjugador.loading.tables import load_styles


class UnknownStyleError(KeyError):
    """Raised when a style name is not in the style table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown style '{self.name}'"


@dataclass(frozen=True)
class Style:
    name: str
    tuteo: bool = False
    voseo: bool = False
    ustedes: bool = False


@defcache("styles")
def _styles_cache() -> Dict[str, Style]:
    return {
        name: Style(
            name=name,
            tuteo=bool(flags.get("tuteo")),
            voseo=bool(flags.get("voseo")),
            ustedes=bool(flags.get("ustedes")),
        )
        for name, flags in load_styles().items()
    }


def list_styles() -> List[str]:
    """Names of all known styles, in table order."""
    return list(_styles_cache.ensure())


def get_style(name: Optional[str] = None) -> Style:
    """
    Get the flags of a style.

    Args:
        name: Style name. None means the default (castillano).

    Raises:
        UnknownStyleError: If the name is not a known style.
    """
    styles = _styles_cache.ensure()
    name = name or settings.DEFAULT_STYLE
    try:
        return styles[name]
    except KeyError:
        raise UnknownStyleError(name) from None


def resolve_style(name: Optional[str] = None) -> Style:
    """Like get_style(), but unknown names fall back to the default style."""
    styles = _styles_cache.ensure()
    return styles.get(name or settings.DEFAULT_STYLE) or styles[settings.DEFAULT_STYLE]
