"""
Dispatch table generation.

Resolve which registered rule groups apply to an active mode and merge them
into a per-mode table of leading character to compiled pattern, cached until
the registry changes.
"""

import logging
import re
from typing import Callable, Dict, Iterator, Mapping, Optional, Sequence, Tuple

from .compiler import RuleRegistry
from .models import CompiledPattern, ModeSelector

logger = logging.getLogger(__name__)

DerivedModePredicate = Callable[[str, Sequence[str]], bool]


def _no_hierarchy(mode: str, ancestors: Sequence[str]) -> bool:
    return False


class GeneratedTable(Mapping):
    """
    Resolved leading character -> CompiledPattern table for one mode.

    Read-only once built. The shaping side asks ``rule_for(char)`` for the
    pattern to try when it meets ``char``, or calls ``match`` directly.
    """

    def __init__(self, mode: str, patterns: Dict[str, CompiledPattern]):
        self.mode = mode
        self._patterns = dict(patterns)
        self._rules: Dict[str, "re.Pattern"] = {}

    def __getitem__(self, char: str) -> CompiledPattern:
        return self._patterns[char]

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"GeneratedTable({self.mode!r}, {len(self)} characters)"

    def rule_for(self, char: str) -> Optional["re.Pattern"]:
        """Compiled rule anchored at ``char``, or None if ``char`` has no ligatures."""
        pattern = self._patterns.get(char)
        if pattern is None:
            return None
        rule = self._rules.get(char)
        if rule is None:
            rule = re.compile(re.escape(char) + pattern.to_regex())
            self._rules[char] = rule
        return rule

    def match(self, text: str, pos: int = 0) -> Optional[Tuple[int, int]]:
        """
        Find the ligature span starting at ``text[pos]``.

        Returns:
            (start, end) of the matched span, or None when nothing matches
        """
        if pos < 0 or pos >= len(text):
            return None
        rule = self.rule_for(text[pos])
        if rule is None:
            return None
        found = rule.match(text, pos)
        if found is None:
            return None
        return found.span()


class TableCache:
    """Generated tables keyed by mode."""

    def __init__(self):
        self._tables: Dict[str, GeneratedTable] = {}

    def get(self, mode: str) -> Optional[GeneratedTable]:
        return self._tables.get(mode)

    def store(self, mode: str, table: GeneratedTable):
        self._tables[mode] = table

    def invalidate(self):
        """Drop every cached table."""
        if self._tables:
            logger.debug("Discarding %d cached ligature table(s)", len(self._tables))
        self._tables.clear()

    def modes(self) -> Tuple[str, ...]:
        return tuple(self._tables)

    def __len__(self) -> int:
        return len(self._tables)


class TableGenerator:
    """Build and cache dispatch tables from a rule registry."""

    def __init__(
        self,
        registry: RuleRegistry,
        cache: TableCache,
        is_derived: Optional[DerivedModePredicate] = None,
    ):
        self.registry = registry
        self.cache = cache
        self.is_derived = is_derived or _no_hierarchy

    def _applies(self, selector: ModeSelector, mode: str) -> bool:
        if selector.is_universal or mode in selector.modes:
            return True
        return self.is_derived(mode, selector.modes)

    def generate(self, mode: str) -> GeneratedTable:
        """
        Get the dispatch table for ``mode``.

        Rule groups apply in registration order, and a later group overrides
        an earlier one for the characters it defines.
        """
        cached = self.cache.get(mode)
        if cached is not None:
            logger.debug("Ligature table cache hit for %s", mode)
            return cached

        patterns: Dict[str, CompiledPattern] = {}
        for selector, group in self.registry.entries():
            if not self._applies(selector, mode):
                continue
            patterns.update(group)

        table = GeneratedTable(mode, patterns)
        self.cache.store(mode, table)
        logger.debug(
            "Generated ligature table for %s with %d character(s)", mode, len(table)
        )
        return table
