"""
Data structures shared by the rule compiler and table generator.

Mode selectors, ligature specifications, compiled per-character patterns,
and the errors raised while compiling them.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Tuple, Union

from .config import CONFIG


class LigatureError(Exception):
    """Base class for ligature compilation errors."""


class InvalidLigatureSpec(LigatureError, ValueError):
    """A ligature specification has the wrong shape."""

    def __init__(self, spec: Any, reason: str = "not a valid ligature"):
        self.spec = spec
        super().__init__(f"Ligature {spec!r} is {reason}")


class InvalidLigatureLength(InvalidLigatureSpec):
    """A literal ligature is shorter than two characters."""

    def __init__(self, text: str):
        super().__init__(
            text,
            f"shorter than {CONFIG.MIN_LIGATURE_LENGTH} characters",
        )
        self.text = text


class PatternExpressionError(LigatureError, ValueError):
    """A pattern expression could not be expanded."""


class SelectorKind(Enum):
    """Which modes a selector covers."""

    UNIVERSAL = "universal"
    SINGLE = "single"
    SET = "set"


@dataclass(frozen=True)
class ModeSelector:
    """Identifies the editing mode(s) a rule group applies to.

    Selectors compare by value: two ``SET`` selectors are equal only when
    they list the same modes in the same order.
    """

    kind: SelectorKind
    modes: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.modes, tuple) or not all(
            isinstance(mode, str) for mode in self.modes
        ):
            raise TypeError(f"Selector modes must be a tuple of names: {self.modes!r}")
        if self.kind is SelectorKind.UNIVERSAL and self.modes:
            raise ValueError("A universal selector lists no modes")
        if self.kind is SelectorKind.SINGLE and len(self.modes) != 1:
            raise ValueError(f"A single-mode selector needs one mode: {self.modes!r}")
        if self.kind is SelectorKind.SET and not self.modes:
            raise ValueError("A mode-set selector needs at least one mode")

    @classmethod
    def universal(cls) -> "ModeSelector":
        return cls(SelectorKind.UNIVERSAL)

    @classmethod
    def single(cls, mode: str) -> "ModeSelector":
        return cls(SelectorKind.SINGLE, (mode,))

    @classmethod
    def of(cls, modes: Iterable[str]) -> "ModeSelector":
        return cls(SelectorKind.SET, tuple(modes))

    @classmethod
    def coerce(cls, value: Any) -> "ModeSelector":
        """Build a selector from a selector, mode name, or list of mode names."""
        if isinstance(value, ModeSelector):
            return value
        if value is None or value is True:
            return cls.universal()
        if isinstance(value, str):
            if value in CONFIG.UNIVERSAL_TOKENS:
                return cls.universal()
            return cls.single(value)
        if isinstance(value, (list, tuple)) and all(
            isinstance(mode, str) for mode in value
        ):
            return cls.of(value)
        raise TypeError(f"Cannot use {value!r} as a mode selector")

    @property
    def is_universal(self) -> bool:
        return self.kind is SelectorKind.UNIVERSAL

    def __str__(self) -> str:
        if self.is_universal:
            return "*"
        if self.kind is SelectorKind.SINGLE:
            return self.modes[0]
        return "[" + ", ".join(self.modes) + "]"


@dataclass(frozen=True)
class LiteralLigature:
    """A literal character sequence such as ``"=>"``."""

    text: str

    @property
    def leading_char(self) -> str:
        return self.text[0]

    @property
    def fragment(self) -> str:
        return self.text[1:]


@dataclass(frozen=True)
class PatternLigature:
    """A leading character plus a pattern for the characters after it.

    ``source`` is either a ready-made ``re`` pattern string or a structured
    expression that still has to be expanded.
    """

    char: str
    source: Union[str, tuple, list]

    @property
    def needs_expansion(self) -> bool:
        return not isinstance(self.source, str)


LigatureSpec = Union[LiteralLigature, PatternLigature]


def coerce_spec(value: Any) -> LigatureSpec:
    """
    Normalize a caller-supplied ligature into a LigatureSpec.

    Strings become literal ligatures, ``(char, pattern)`` pairs become
    pattern ligatures.

    Raises:
        InvalidLigatureLength: literal shorter than the minimum length
        InvalidLigatureSpec: anything else that is not a ligature
    """
    if isinstance(value, str):
        value = LiteralLigature(value)
    elif isinstance(value, (tuple, list)) and len(value) == 2:
        value = PatternLigature(value[0], value[1])

    if isinstance(value, LiteralLigature):
        if not isinstance(value.text, str):
            raise InvalidLigatureSpec(value.text)
        if len(value.text) < CONFIG.MIN_LIGATURE_LENGTH:
            raise InvalidLigatureLength(value.text)
        return value
    if isinstance(value, PatternLigature):
        if not isinstance(value.char, str) or len(value.char) != 1:
            raise InvalidLigatureSpec(
                value, "missing a single leading character"
            )
        if not isinstance(value.source, (str, tuple, list)):
            raise InvalidLigatureSpec(value, "missing a pattern")
        return value
    raise InvalidLigatureSpec(value)


@dataclass(frozen=True)
class CompiledPattern:
    """
    Match rule for the characters following one leading character.

    Regex-derived alternatives are tried before literal ones, since regex
    ligatures are expected to be more specific. An empty group is omitted
    when rendering.
    """

    regex_alternatives: Tuple[str, ...] = ()
    literal_alternatives: Tuple[str, ...] = ()

    @property
    def has_regex_group(self) -> bool:
        return bool(self.regex_alternatives)

    @property
    def has_literal_group(self) -> bool:
        return bool(self.literal_alternatives)

    def to_regex(self) -> str:
        """Render as a Python ``re`` pattern for the tail after the leading character."""
        groups = []
        if self.regex_alternatives:
            groups.append(
                "(?:" + "|".join(f"(?:{alt})" for alt in self.regex_alternatives) + ")"
            )
        if self.literal_alternatives:
            # Longest first so a shorter literal never shadows a longer one
            literals = sorted(
                dict.fromkeys(self.literal_alternatives), key=len, reverse=True
            )
            groups.append("(?:" + "|".join(re.escape(lit) for lit in literals) + ")")
        return "(?:" + "|".join(groups) + ")"

    def __str__(self) -> str:
        return self.to_regex()
