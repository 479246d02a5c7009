"""
Ligature table library modules.

Compile ligature declarations per editing mode and generate the per-mode
dispatch tables a shaping engine consults.
"""

__all__ = [
    "CONFIG",
    "CompiledPattern",
    "ExportMessage",
    "ExportReport",
    "FeatureCodeGenerator",
    "GeneratedTable",
    "InvalidLigatureLength",
    "InvalidLigatureSpec",
    "LigatureError",
    "LigatureTables",
    "LiteralLigature",
    "ModeHierarchy",
    "ModeSelector",
    "PatternExpressionError",
    "PatternLigature",
    "RuleCompiler",
    "RuleRegistry",
    "SelectorKind",
    "Severity",
    "TableCache",
    "TableGenerator",
    "expand_pattern",
]

# Import main exports for convenience
from ligatures.config import CONFIG
from ligatures.models import (
    CompiledPattern,
    InvalidLigatureLength,
    InvalidLigatureSpec,
    LigatureError,
    LiteralLigature,
    ModeSelector,
    PatternExpressionError,
    PatternLigature,
    SelectorKind,
)
from ligatures.results import ExportMessage, ExportReport, Severity
from ligatures.expansion import expand_pattern
from ligatures.hierarchy import ModeHierarchy
from ligatures.compiler import RuleCompiler, RuleRegistry
from ligatures.generator import GeneratedTable, TableCache, TableGenerator
from ligatures.service import LigatureTables
from ligatures.feature_generation import FeatureCodeGenerator
