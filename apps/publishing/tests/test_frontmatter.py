from __future__ import annotations

from pathlib import Path

from django.test import SimpleTestCase

from apps.publishing.frontmatter import FrontMatterError, split_front_matter


class SplitFrontMatterTests(SimpleTestCase):
    def test_no_front_matter_returns_text_unchanged(self) -> None:
        text = "<p>hello</p>\n"
        self.assertEqual(split_front_matter(text), ({}, text))

    def test_mapping_and_body(self) -> None:
        data, body = split_front_matter("---\ntitle: Photos\ntags: [cats]\n---\n<h1>x</h1>\n")
        self.assertEqual(data, {"title": "Photos", "tags": ["cats"]})
        self.assertEqual(body, "<h1>x</h1>\n")

    def test_empty_front_matter(self) -> None:
        self.assertEqual(split_front_matter("---\n---\nbody"), ({}, "body"))

    def test_unclosed_front_matter(self) -> None:
        with self.assertRaises(FrontMatterError):
            split_front_matter("---\ntitle: x\nbody")

    def test_non_mapping_rejected_with_path(self) -> None:
        with self.assertRaises(FrontMatterError) as ctx:
            split_front_matter("---\n- a\n- b\n---\n", path=Path("list.html"))
        self.assertEqual(ctx.exception.path, Path("list.html"))
        self.assertIn("list.html", str(ctx.exception))

    def test_invalid_yaml(self) -> None:
        with self.assertRaises(FrontMatterError):
            split_front_matter("---\ntitle: [unclosed\n---\n")
