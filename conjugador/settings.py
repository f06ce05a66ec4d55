"""
Settings and configuration for conjugador.
"""

import os
from pathlib import Path

# Data directory paths
PACKAGE_DIR = Path(__file__).parent
DEFAULT_DATA_DIR = PACKAGE_DIR / "data"

# Environment variable for a custom dataset directory
DATA_DIR = Path(os.environ.get("CONJUGADOR_DATA_DIR", DEFAULT_DATA_DIR))

# Dataset file names (bundled with package)
ENDINGS_FILE = "endings.json"
STYLES_FILE = "styles.json"
STEM_CHANGES_FILE = "stem_changes.tsv"
DIPHTHONG_VERBS_FILE = "diphthong_verbs.tsv"
IRREGULAR_VERBS_FILE = "irregular_verbs.json"

# Style used when none is requested
DEFAULT_STYLE = "castillano"

# Debug mode
DEBUG = os.environ.get("CONJUGADOR_DEBUG", "").lower() in ("1", "true", "yes")


def data_path(filename: str) -> Path:
    """Resolve a dataset file name against the configured data directory."""
    return DATA_DIR / filename
