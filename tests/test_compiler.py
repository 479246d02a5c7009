import unittest

from ligatures.compiler import RuleCompiler, RuleRegistry
from ligatures.models import (
    CompiledPattern,
    InvalidLigatureLength,
    LiteralLigature,
    ModeSelector,
    PatternLigature,
)


class TestRuleCompiler(unittest.TestCase):
    def setUp(self):
        self.compiler = RuleCompiler()

    def test_literals_sharing_a_leading_character(self):
        group = self.compiler.compile(["==", "=>"])
        self.assertEqual(list(group), ["="])
        self.assertEqual(group["="], CompiledPattern((), ("=", ">")))
        self.assertFalse(group["="].has_regex_group)

    def test_regex_and_literal_fragments_accumulate(self):
        group = self.compiler.compile(["==", ("=", "=+"), "=>", "->"])
        self.assertEqual(group["="].regex_alternatives, ("=+",))
        self.assertEqual(group["="].literal_alternatives, ("=", ">"))
        self.assertEqual(group["-"], CompiledPattern((), (">",)))

    def test_accepts_spec_objects(self):
        group = self.compiler.compile(
            [LiteralLigature("<="), PatternLigature("<", r"-+")]
        )
        self.assertEqual(group["<"], CompiledPattern(("-+",), ("=",)))

    def test_expressions_are_expanded(self):
        group = self.compiler.compile([("=", ("+", ("any", "=>")))])
        self.assertEqual(group["="].regex_alternatives, ("(?:[=>])+",))

    def test_injected_expander(self):
        seen = []

        def expander(expression):
            seen.append(expression)
            return "X"

        group = RuleCompiler(expander).compile([("=", ["custom"]), ("-", ">+")])
        self.assertEqual(seen, [["custom"]])
        self.assertEqual(group["="].regex_alternatives, ("X",))
        self.assertEqual(group["-"].regex_alternatives, (">+",))

    def test_empty_specs(self):
        self.assertEqual(dict(self.compiler.compile([])), {})

    def test_short_literal_fails(self):
        with self.assertRaises(InvalidLigatureLength):
            self.compiler.compile(["==", "="])

    def test_group_is_read_only(self):
        group = self.compiler.compile(["=="])
        with self.assertRaises(TypeError):
            group["-"] = CompiledPattern()


class TestRuleRegistry(unittest.TestCase):
    def test_replace_keeps_one_entry_per_selector(self):
        registry = RuleRegistry()
        universal = ModeSelector.universal()
        c_mode = ModeSelector.single("c-mode")
        registry.replace(universal, {"=": CompiledPattern((), ("=",))})
        registry.replace(c_mode, {"-": CompiledPattern((), (">",))})
        registry.replace(universal, {"<": CompiledPattern((), ("=",))})

        self.assertEqual(len(registry), 2)
        self.assertEqual([s for s, _ in registry], [c_mode, universal])
        self.assertEqual(list(registry.get(universal)), ["<"])
        self.assertIn(c_mode, registry)
        self.assertNotIn(ModeSelector.single("text-mode"), registry)

    def test_overlapping_sets_are_distinct_entries(self):
        registry = RuleRegistry()
        registry.replace(ModeSelector.of(["a", "b"]), {})
        registry.replace(ModeSelector.of(["b", "c"]), {})
        self.assertEqual(len(registry), 2)
