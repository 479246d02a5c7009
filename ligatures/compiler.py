"""
Ligature rule compilation.

Group ligature specifications by leading character into compiled patterns,
and keep the ordered registry of rule groups keyed by mode selector.
"""

import logging
from collections import defaultdict
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .expansion import expand_pattern
from .models import (
    CompiledPattern,
    LiteralLigature,
    ModeSelector,
    coerce_spec,
)

logger = logging.getLogger(__name__)

RuleGroup = Mapping[str, CompiledPattern]
Expander = Callable[[Any], str]


class RuleCompiler:
    """Compile ligature specifications into a rule group."""

    def __init__(self, expander: Optional[Expander] = None):
        self.expander = expander or expand_pattern

    def compile(self, specs: Iterable[Any]) -> RuleGroup:
        """
        Build a rule group from ligature specifications.

        Fragments sharing a leading character accumulate under that
        character in declaration order.

        Args:
            specs: LigatureSpec values, literal strings, or (char, pattern) pairs

        Returns:
            Read-only mapping of leading character to CompiledPattern

        Raises:
            InvalidLigatureLength: If a literal is shorter than two characters
            InvalidLigatureSpec: If a spec has the wrong shape
        """
        regexes: Dict[str, List[str]] = defaultdict(list)
        literals: Dict[str, List[str]] = defaultdict(list)
        order: Dict[str, None] = {}

        for raw in specs:
            spec = coerce_spec(raw)
            if isinstance(spec, LiteralLigature):
                literals[spec.leading_char].append(spec.fragment)
                order.setdefault(spec.leading_char)
            else:
                source = spec.source
                if spec.needs_expansion:
                    source = self.expander(source)
                regexes[spec.char].append(source)
                order.setdefault(spec.char)

        group = {
            char: CompiledPattern(
                regex_alternatives=tuple(regexes.get(char, ())),
                literal_alternatives=tuple(literals.get(char, ())),
            )
            for char in order
        }
        return MappingProxyType(group)


class RuleRegistry:
    """
    Ordered rule groups keyed by mode selector.

    At most one entry exists per selector value. Replacing a selector drops
    its old entry and appends the new one, so it counts as the most recent
    registration.
    """

    def __init__(self):
        self._entries: List[Tuple[ModeSelector, RuleGroup]] = []

    def replace(self, selector: ModeSelector, group: RuleGroup):
        """Install ``group`` as the only rule group for ``selector``."""
        self._entries = [
            entry for entry in self._entries if entry[0] != selector
        ]
        self._entries.append((selector, group))

    def get(self, selector: ModeSelector) -> Optional[RuleGroup]:
        for entry_selector, group in self._entries:
            if entry_selector == selector:
                return group
        return None

    def entries(self) -> Tuple[Tuple[ModeSelector, RuleGroup], ...]:
        """Snapshot of (selector, group) pairs in registration order."""
        return tuple(self._entries)

    def __iter__(self):
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, selector: ModeSelector) -> bool:
        return self.get(selector) is not None
