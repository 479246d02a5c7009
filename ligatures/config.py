"""
Configuration constants for ligature rule compilation.

Centralizes the length limits, selector tokens, and glyph naming used
when compiling and exporting ligature tables.
"""

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class LigatureConfig:
    """Configuration for ligature compilation and export."""

    # Literal ligatures
    MIN_LIGATURE_LENGTH: int = 2

    # Selector values treated as "every mode"
    UNIVERSAL_TOKENS: FrozenSet[str] = frozenset({"*"})

    # Feature file export
    LIGATURE_FEATURE_TAG: str = "liga"
    LIGATURE_GLYPH_SUFFIX: str = ".liga"
    GLYPH_NAME_JOINER: str = "_"

    # Expression operators (see expansion.py)
    SEQUENCE_OPERATORS: FrozenSet[str] = frozenset({"seq", ":", "sequence"})
    ALTERNATION_OPERATORS: FrozenSet[str] = frozenset({"or", "|"})
    CHARSET_OPERATORS: FrozenSet[str] = frozenset({"any", "in", "char"})
    RAW_OPERATORS: FrozenSet[str] = frozenset({"regexp", "regex"})


# Global configuration instance
CONFIG = LigatureConfig()
