"""
Editing-mode hierarchy.

A minimal parent-link model of derived modes. Hosts with their own mode
taxonomy can hand any ``(mode, ancestors) -> bool`` callable to the table
generator instead.
"""

from typing import Dict, Iterable, List, Optional


class ModeHierarchy:
    """Parent links between editing modes."""

    def __init__(self, parents: Optional[Dict[str, Optional[str]]] = None):
        self._parents: Dict[str, Optional[str]] = {}
        for mode, parent in (parents or {}).items():
            self.define(mode, parent)

    def define(self, mode: str, parent: Optional[str] = None):
        """Declare ``mode``, optionally derived from ``parent``."""
        if parent is not None:
            if parent == mode or mode in self.ancestors(parent):
                raise ValueError(f"Deriving {mode!r} from {parent!r} makes a cycle")
        self._parents[mode] = parent

    def parent(self, mode: str) -> Optional[str]:
        return self._parents.get(mode)

    def ancestors(self, mode: str) -> List[str]:
        """Parent chain of ``mode``, nearest first."""
        chain = []
        current = self._parents.get(mode)
        while current is not None:
            chain.append(current)
            current = self._parents.get(current)
        return chain

    def is_derived(self, mode: str, ancestors: Iterable[str]) -> bool:
        """True if ``mode`` is one of ``ancestors`` or descends from one."""
        candidates = set(ancestors)
        if mode in candidates:
            return True
        return any(parent in candidates for parent in self.ancestors(mode))

    def __contains__(self, mode: str) -> bool:
        return mode in self._parents
