"""
Ligature table service.

Owns one rule registry and one table cache and exposes the two operations
that touch them, so a registration always invalidates generated tables.
"""

import logging
from typing import Any, Iterable, Optional, Tuple

from .compiler import Expander, RuleCompiler, RuleRegistry
from .generator import DerivedModePredicate, GeneratedTable, TableCache, TableGenerator
from .models import ModeSelector

logger = logging.getLogger(__name__)


class LigatureTables:
    """
    Register ligature rules per mode selector and generate per-mode tables.

    Example::

        hierarchy = ModeHierarchy({"prog-mode": None, "c-mode": "prog-mode"})
        tables = LigatureTables(is_derived=hierarchy.is_derived)
        tables.register("prog-mode", ["==", "=>", ("-", r"-+>")])
        tables.generate("c-mode")["="].to_regex()
    """

    def __init__(
        self,
        is_derived: Optional[DerivedModePredicate] = None,
        expander: Optional[Expander] = None,
    ):
        self._registry = RuleRegistry()
        self._cache = TableCache()
        self._compiler = RuleCompiler(expander)
        self._generator = TableGenerator(self._registry, self._cache, is_derived)

    def register(self, selector: Any, specs: Iterable[Any]):
        """
        Replace the rule group registered for ``selector``.

        The whole batch is compiled before anything changes; if any spec is
        invalid the registry and cached tables are left untouched.

        Args:
            selector: ModeSelector, mode name, list of mode names, or "*"
            specs: Ligature specs, literal strings, or (char, pattern) pairs

        Raises:
            InvalidLigatureLength: If a literal is shorter than two characters
            InvalidLigatureSpec: If a spec has the wrong shape
        """
        selector = ModeSelector.coerce(selector)
        group = self._compiler.compile(specs)
        self._registry.replace(selector, group)
        self._cache.invalidate()
        logger.debug(
            "Registered %d ligature character(s) for %s", len(group), selector
        )

    def generate(self, mode: str) -> GeneratedTable:
        """Dispatch table for ``mode``, built on first request and cached."""
        return self._generator.generate(mode)

    @property
    def registry(self) -> Tuple:
        """Registered (selector, rule group) pairs in registration order."""
        return self._registry.entries()

    @property
    def cached_modes(self) -> Tuple[str, ...]:
        return self._cache.modes()
