"""
Feature code generation from generated ligature tables.

Generate .fea (Feature File) code for the literal ligatures of a table so a
font can be built with matching ligature glyphs.
"""

import io
import logging
from typing import List

from fontTools.agl import UV2AGL
from fontTools.feaLib.error import FeatureLibError
from fontTools.feaLib.parser import Parser

from .config import CONFIG
from .generator import GeneratedTable
from .results import ExportReport, Ligature


def glyph_name_for_char(char: str) -> str:
    """Production glyph name for a character (AGL name, else uniXXXX/uXXXXX)."""
    codepoint = ord(char)
    name = UV2AGL.get(codepoint)
    if name:
        return name
    if codepoint <= 0xFFFF:
        return f"uni{codepoint:04X}"
    return f"u{codepoint:05X}"


class FeatureCodeGenerator:
    """Generate .fea code from generated ligature tables."""

    @staticmethod
    def ligatures_from_table(table: GeneratedTable) -> ExportReport:
        """
        Collect literal ligatures from a table as (components, ligature glyph).

        Regex alternatives have no feature-file equivalent and are recorded
        as skipped. Longer sequences come first so they win over their
        prefixes.
        """
        report = ExportReport()
        seen = set()

        for char, pattern in table.items():
            if pattern.has_regex_group:
                report.skip(
                    f"{len(pattern.regex_alternatives)} pattern ligature(s) not exported",
                    char,
                    "Patterns cannot be expressed as feature file substitutions",
                )
            for fragment in pattern.literal_alternatives:
                sequence = char + fragment
                if sequence in seen:
                    continue
                seen.add(sequence)
                components = [glyph_name_for_char(c) for c in sequence]
                lig_glyph = (
                    CONFIG.GLYPH_NAME_JOINER.join(components)
                    + CONFIG.LIGATURE_GLYPH_SUFFIX
                )
                report.ligatures.append((components, lig_glyph))

        report.ligatures.sort(key=lambda lig: len(lig[0]), reverse=True)
        report.note(f"Collected {len(report.ligatures)} ligature(s) for {table.mode}")
        return report

    @staticmethod
    def render_liga_feature(ligatures: List[Ligature]) -> str:
        """Render (components, ligature glyph) pairs as a liga feature block."""
        if not ligatures:
            return ""

        tag = CONFIG.LIGATURE_FEATURE_TAG
        lines = [f"feature {tag} {{"]
        for components, lig_glyph in ligatures:
            lines.append(f"  sub {' '.join(components)} by {lig_glyph};")
        lines.append(f"}} {tag};")
        return "\n".join(lines)

    @staticmethod
    def generate_liga_feature(table: GeneratedTable) -> str:
        """Generate liga (standard ligatures) feature code for ``table``."""
        report = FeatureCodeGenerator.ligatures_from_table(table)
        return FeatureCodeGenerator.render_liga_feature(report.ligatures)

    @staticmethod
    def validate_feature_code(fea_content: str) -> ExportReport:
        """Parse feature code with fontTools.feaLib and report problems."""
        report = ExportReport()
        if not fea_content.strip():
            report.skip("No feature code to validate")
            return report

        fonttools_logger = logging.getLogger("fontTools")
        previous_level = fonttools_logger.level
        fonttools_logger.setLevel(logging.ERROR)
        try:
            document = Parser(io.StringIO(fea_content), glyphNames=()).parse()
        except FeatureLibError as e:
            report.fail("Feature code failed to parse", str(e))
            return report
        finally:
            fonttools_logger.setLevel(previous_level)

        report.document = document
        report.note(f"Parsed {len(document.statements)} feature block(s)")
        return report
