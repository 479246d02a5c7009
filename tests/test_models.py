import unittest

from ligatures.models import (
    CompiledPattern,
    InvalidLigatureLength,
    InvalidLigatureSpec,
    LiteralLigature,
    ModeSelector,
    PatternLigature,
    SelectorKind,
    coerce_spec,
)


class TestModeSelector(unittest.TestCase):
    def test_coerce_universal_forms(self):
        for value in (None, True, "*", ModeSelector.universal()):
            self.assertEqual(ModeSelector.coerce(value), ModeSelector.universal())

    def test_coerce_single_and_set(self):
        self.assertEqual(
            ModeSelector.coerce("c-mode"),
            ModeSelector(SelectorKind.SINGLE, ("c-mode",)),
        )
        self.assertEqual(
            ModeSelector.coerce(["a", "b"]),
            ModeSelector(SelectorKind.SET, ("a", "b")),
        )

    def test_set_equality_is_structural(self):
        self.assertEqual(ModeSelector.of(["a", "b"]), ModeSelector.of(("a", "b")))
        self.assertNotEqual(ModeSelector.of(["a", "b"]), ModeSelector.of(["b", "a"]))
        self.assertNotEqual(ModeSelector.of(["a"]), ModeSelector.single("a"))

    def test_coerce_rejects_other_values(self):
        with self.assertRaises(TypeError):
            ModeSelector.coerce(42)
        with self.assertRaises(TypeError):
            ModeSelector.coerce(["a", 1])


    def test_fields_must_agree_with_kind(self):
        with self.assertRaises(ValueError):
            ModeSelector(SelectorKind.SINGLE, ())
        with self.assertRaises(ValueError):
            ModeSelector(SelectorKind.SINGLE, ("a", "b"))
        with self.assertRaises(ValueError):
            ModeSelector(SelectorKind.UNIVERSAL, ("a",))
        with self.assertRaises(ValueError):
            ModeSelector.of([])
        with self.assertRaises(TypeError):
            ModeSelector(SelectorKind.SET, ["a"])

    def test_str(self):
        self.assertEqual(str(ModeSelector.universal()), "*")
        self.assertEqual(str(ModeSelector.single("c-mode")), "c-mode")
        self.assertEqual(str(ModeSelector.of(["a", "b"])), "[a, b]")


class TestCoerceSpec(unittest.TestCase):
    def test_string_becomes_literal(self):
        spec = coerce_spec("=>")
        self.assertEqual(spec, LiteralLigature("=>"))
        self.assertEqual(spec.leading_char, "=")
        self.assertEqual(spec.fragment, ">")

    def test_pair_becomes_pattern(self):
        spec = coerce_spec(("-", r"-+>"))
        self.assertEqual(spec, PatternLigature("-", r"-+>"))
        self.assertFalse(spec.needs_expansion)
        self.assertTrue(coerce_spec(("-", ("+", "-"))).needs_expansion)

    def test_short_literal_is_rejected(self):
        for text in ("=", ""):
            with self.assertRaises(InvalidLigatureLength) as cm:
                coerce_spec(text)
            self.assertEqual(cm.exception.text, text)

    def test_length_error_is_a_spec_error(self):
        with self.assertRaises(InvalidLigatureSpec):
            coerce_spec(LiteralLigature("x"))
        with self.assertRaises(ValueError):
            coerce_spec("x")

    def test_malformed_specs(self):
        for value in (42, ("ab", "c"), ("=", 3), ["=", "a", "b"], PatternLigature("", "x")):
            with self.assertRaises(InvalidLigatureSpec):
                coerce_spec(value)


class TestCompiledPattern(unittest.TestCase):
    def test_literal_only(self):
        pattern = CompiledPattern(literal_alternatives=("=", ">"))
        self.assertFalse(pattern.has_regex_group)
        self.assertTrue(pattern.has_literal_group)
        self.assertEqual(pattern.to_regex(), "(?:(?:=|>))")

    def test_regex_group_precedes_literals(self):
        pattern = CompiledPattern(
            regex_alternatives=("=+",), literal_alternatives=(">",)
        )
        self.assertEqual(pattern.to_regex(), "(?:(?:(?:=+))|(?:>))")

    def test_literals_are_escaped_and_longest_first(self):
        pattern = CompiledPattern(literal_alternatives=("*", "**", "*"))
        self.assertEqual(pattern.to_regex(), r"(?:(?:\*\*|\*))")
