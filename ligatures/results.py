"""
Reports for ligature feature export.

Collects what an export or validation step produced along with the notes,
skipped pattern ligatures, and parse failures found on the way.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

logger = logging.getLogger(__name__)

Ligature = Tuple[List[str], str]


class Severity(Enum):
    """How much an export message matters."""

    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


@dataclass(frozen=True)
class ExportMessage:
    """One note about an export; ``char`` names the leading character involved."""

    severity: Severity
    text: str
    char: Optional[str] = None
    details: Optional[str] = None

    def __str__(self) -> str:
        where = f" [{self.char}]" if self.char else ""
        base = f"{self.severity.name}{where}: {self.text}"
        if self.details:
            base += f" ({self.details})"
        return base


@dataclass
class ExportReport:
    """Outcome of collecting, rendering, or validating ligature feature code."""

    ok: bool = True
    messages: List[ExportMessage] = field(default_factory=list)
    ligatures: List[Ligature] = field(default_factory=list)
    document: Optional[Any] = None

    def note(self, text: str, char: Optional[str] = None):
        self.messages.append(ExportMessage(Severity.INFO, text, char))

    def skip(self, text: str, char: Optional[str] = None, details: Optional[str] = None):
        """Record something left out of the export."""
        self.messages.append(ExportMessage(Severity.WARNING, text, char, details))

    def fail(self, text: str, details: Optional[str] = None):
        self.messages.append(ExportMessage(Severity.ERROR, text, details=details))
        self.ok = False

    @property
    def skipped(self) -> List[ExportMessage]:
        return [m for m in self.messages if m.severity is Severity.WARNING]

    @property
    def errors(self) -> List[ExportMessage]:
        return [m for m in self.messages if m.severity is Severity.ERROR]

    def emit_all(self, target: Optional[logging.Logger] = None):
        """Log every message at its severity."""
        target = target or logger
        for msg in self.messages:
            target.log(msg.severity.value, "%s", msg)
