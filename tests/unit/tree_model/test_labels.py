"""Label, badge, and visibility formatting tests."""

from __future__ import annotations

import unittest

from infotree.errors import MalformedReference
from infotree.tree_model.labels import (
    badges_for_tags,
    file_icon_class,
    format_property_label,
    format_reference_label,
    icon_class,
    visibility_for_tags,
    visibility_style,
)
from infotree.tree_model.types import Reference, SourceRange


def _reference(tags: list[str], value: str = "foo()") -> Reference:
    return Reference(id="r", range=SourceRange("f1", 12, 4), display_value=value, tags=frozenset(tags))


class BadgeOrderTests(unittest.TestCase):
    def test_badges_follow_fixed_precedence_not_input_order(self) -> None:
        for tags in (["virtual", "static", "global"], ["global", "virtual", "static"]):
            with self.subTest(tags=tags):
                badges = badges_for_tags(tags)
                self.assertEqual([badge.tag for badge in badges], ["static", "virtual", "global"])
                self.assertEqual([badge.letter for badge in badges], ["S", "V", "G"])

    def test_implicit_and_inherited_share_letter_but_keep_order(self) -> None:
        badges = badges_for_tags(["inherited", "destructor", "implicit", "constructor"])
        self.assertEqual([badge.tag for badge in badges], ["constructor", "destructor", "implicit", "inherited"])
        self.assertEqual("".join(badge.letter for badge in badges), "CDII")

    def test_unknown_and_visibility_tags_produce_no_badges(self) -> None:
        self.assertEqual(badges_for_tags(["public", "mystery"]), ())


class ReferenceLabelTests(unittest.TestCase):
    def test_label_text_is_position_then_value(self) -> None:
        label = format_reference_label(_reference([], "bar(1, 2)"))
        self.assertEqual(label.text, "12:4: bar(1, 2)")
        self.assertEqual(str(label), "12:4: bar(1, 2)")
        self.assertIsNone(label.hint)

    def test_badges_prefix_plain_string_form(self) -> None:
        label = format_reference_label(_reference(["virtual", "static"]))
        self.assertEqual(str(label), "[S][V] 12:4: foo()")

    def test_implicit_tag_adds_style_hint(self) -> None:
        label = format_reference_label(_reference(["implicit"]))
        self.assertEqual(label.hint, "label-implicit")

    def test_reference_without_file_is_malformed(self) -> None:
        with self.assertRaises(MalformedReference):
            format_reference_label(Reference(id="r", range=SourceRange("", 1, 1)))

    def test_property_label_is_name_value_pair(self) -> None:
        label = format_property_label("Qualified name", "foo::bar")
        self.assertEqual(label.pair(), ("Qualified name", "foo::bar"))
        self.assertEqual(str(label), "Qualified name: foo::bar")


class VisibilityTests(unittest.TestCase):
    def test_public_wins_over_private(self) -> None:
        self.assertEqual(visibility_for_tags(["private", "public"]), "public")

    def test_private_wins_over_protected(self) -> None:
        self.assertEqual(visibility_for_tags(["protected", "private", "static"]), "private")

    def test_no_visibility_tag_classifies_as_none(self) -> None:
        self.assertIsNone(visibility_for_tags(["static"]))
        self.assertIsNone(visibility_style(["static"]))

    def test_visibility_style_class(self) -> None:
        self.assertEqual(visibility_style(["protected"]), "icon-visibility icon-protected")


class IconClassTests(unittest.TestCase):
    def test_icon_class_replaces_spaces(self) -> None:
        self.assertEqual(icon_class("Overridden by"), "icon-Overridden-by")

    def test_file_icon_class_uses_suffix(self) -> None:
        self.assertEqual(file_icon_class("/src/A.CPP"), "icon icon-file icon-cpp")
        self.assertEqual(file_icon_class("/src.d/Makefile"), "icon icon-file")


if __name__ == "__main__":
    unittest.main()
