import io
import sys
import os
import unittest
from datetime import datetime, timedelta, timezone

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from hunks.comparison import Comparison
from hunks.hunk import CompareResult
from hunks.line import LineRecord
from renderers import create_renderer, get_available_renderers
from renderers.base import (
    ColorScheme, OutputWriter, OutputTarget, DisplayOptions, PatchOptions, RendererFactory
)
from renderers.display import DisplayRenderer
from renderers.line_diff import SubLineDiffer
from renderers.patch import PatchRenderer, format_timestamp

PLAIN = DisplayOptions(use_color=False)
STAMP = datetime(2020, 6, 27, 18, 10, 3, tzinfo=timezone(timedelta(hours=2)))


def split_pair():
    shared = [f"s{i}" for i in range(7)]
    return ["x"] + shared + ["y"], ["X"] + shared + ["Y"]


class TestOptions(unittest.TestCase):
    def test_display_options(self):
        options = DisplayOptions()
        self.assertEqual(options.offset, 0)
        self.assertIsNone(options.message)
        self.assertTrue(options.use_color)
        changed = options.with_offset(5).with_message("hi").with_color(False)
        self.assertEqual((changed.offset, changed.message, changed.use_color), (5, "hi", False))
        self.assertEqual(options.offset, 0)

    def test_negative_offset(self):
        with self.assertRaises(ValueError):
            DisplayOptions(offset=-1)
        with self.assertRaises(ValueError):
            DisplayOptions().with_offset(-3)

    def test_patch_options(self):
        self.assertEqual(PatchOptions().offset, 1)
        self.assertEqual(PatchOptions().with_offset(0).offset, 0)


class TestColorSchemeAndWriter(unittest.TestCase):
    def test_paint(self):
        s = ColorScheme()
        self.assertEqual(s.paint("x", s.red), "\033[31mx\033[0m")
        plain = ColorScheme.no_color()
        self.assertEqual(plain.paint("x", plain.red), "x")

    def test_writer(self):
        w = OutputWriter(OutputTarget.STRING)
        w.write("a")
        w.writeln("b")
        self.assertEqual(w.get_output(), "ab\n")


class TestDisplay(unittest.TestCase):
    def test_replaced_lines(self):
        out = Comparison(["A B C", "D E F"], ["A B D", "E F G"]).display(PLAIN)
        self.assertEqual(out, (
            "... ...   @@ -1,2 +1,2 @@\n"
            "001      -A B C\n"
            "002      -D E F\n"
            "    001  +A B D\n"
            "    002  +E F G\n"
        ))

    def test_unchanged_and_plain_changes(self):
        out = Comparison(["a", "b"], ["a", "b", "c"]).display(PLAIN)
        self.assertEqual(out, "... ...   @@ -1,2 +1,3 @@\n001 001   a\n002 002   b\n    003  +c\n")

    def test_offset(self):
        out = Comparison(["A B C", "D E F"], ["A B D", "E F G"]).display(PLAIN.with_offset(123))
        self.assertTrue(out.startswith("... ...   @@ -124,2 +124,2 @@\n124      -A B C\n"))
        self.assertIn("    124  +A B D\n", out)

    def test_message_is_printed_once(self):
        left, right = split_pair()
        out = Comparison(left, right).display(PLAIN.with_message("config.toml"))
        self.assertTrue(out.startswith("\nconfig.toml\n\n... ...   @@ -1,4 +1,4 @@\n"))
        self.assertEqual(out.count("config.toml"), 1)

    def test_hunks_separated_by_blank_line(self):
        left, right = split_pair()
        out = Comparison(left, right).display(PLAIN)
        self.assertEqual(out.count("\n\n"), 1)
        self.assertIn("003 003   s1\n004 004   s2\n\n... ...   @@ -6,4 +6,4 @@\n", out)

    def test_empty_result(self):
        self.assertEqual(Comparison(["a"], ["a"]).display(PLAIN), "")
        self.assertEqual(Comparison(["a"], ["a"]).display(PLAIN.with_message("m")), "")

    def test_unicode_row(self):
        renderer = DisplayRenderer(PLAIN)
        left = LineRecord.replace_removed(1, 2, "Pośród")
        right = LineRecord.replace_inserted(1, 2, "Posród")
        styled = renderer.sub_line.highlight(left, right)
        self.assertEqual(renderer.format_line(right, styled=styled), "    003  +Posród")
        self.assertEqual(renderer.format_line(left), "002      -Pośród")

    def test_unicode_display(self):
        out = Comparison(["Pośród"], ["Posród"]).display(PLAIN)
        self.assertEqual(out, "... ...   @@ -1,1 +1,1 @@\n001      -Pośród\n    001  +Posród\n")

    def test_colored_highlight(self):
        out = Comparison(["A B C"], ["A B D"]).display()
        self.assertIn("\033[7mD\033[0m", out)
        self.assertIn("\033[7mC\033[0m", out)
        self.assertIn("\033[2mA B \033[0m", out)

    def test_stream_output(self):
        stream = io.StringIO()
        result = Comparison(["a"], ["b"]).compare()
        self.assertEqual(DisplayRenderer(PLAIN).render(result, stream), "")
        self.assertEqual(stream.getvalue(), "... ...   @@ -1,1 +1,1 @@\n001      -a\n    001  +b\n")

    def test_render_single_hunk(self):
        result = Comparison(["a"], ["b"]).compare()
        out = DisplayRenderer(PLAIN).render_hunk(result[0])
        self.assertTrue(out.startswith("... ...   @@ -1,1 +1,1 @@\n"))


class TestSubLineDiffer(unittest.TestCase):
    def test_single_code_point_change(self):
        differ = SubLineDiffer(ColorScheme.no_color())
        left = LineRecord.replace_removed(1, 2, "Pośród")
        right = LineRecord.replace_inserted(1, 2, "Posród")
        hunk = differ.diff(left, right)
        self.assertEqual((hunk.additions, hunk.deletions), (1, 1))
        runs = [text for _, text in differ.segments(hunk)]
        self.assertEqual(runs, ["Po", "s", "ród"])

    def test_equal_lines(self):
        differ = SubLineDiffer()
        line = LineRecord.replace_removed(0, 0, "same")
        self.assertIsNone(differ.diff(line, line.with_content("same")))
        self.assertIsNone(differ.highlight(line, line))

    def test_long_lines_stay_in_one_hunk(self):
        differ = SubLineDiffer(ColorScheme.no_color())
        left = LineRecord.replace_removed(0, 0, "a" + "-" * 30 + "b")
        right = LineRecord.replace_inserted(0, 0, "A" + "-" * 30 + "B")
        self.assertEqual(differ.highlight(left, right), "A" + "-" * 30 + "B")


class TestPatch(unittest.TestCase):
    def test_patch_output(self):
        shared = [f"c{i}" for i in range(10)]
        result = Comparison(["del"] + shared + ["old"], shared + ["new"]).compare()
        out = result.patch("a.txt", STAMP, "b.txt", STAMP)
        self.assertEqual(out, (
            "--- a.txt\t2020-06-27 18:10:03 +0200\n"
            "+++ b.txt\t2020-06-27 18:10:03 +0200\n"
            "@@ -1,4 +1,3 @@\n"
            "-del\n"
            " c0\n"
            " c1\n"
            " c2\n"
            "@@ -9,4 +8,4 @@\n"
            " c7\n"
            " c8\n"
            " c9\n"
            "-old\n"
            "+new\n"
        ))

    def test_string_timestamps_and_none(self):
        result = Comparison(["a"], ["b"]).compare()
        out = PatchRenderer("a", "yesterday", "b", None).render(result)
        self.assertEqual(out, "--- a\tyesterday\n+++ b\n@@ -1,1 +1,1 @@\n-a\n+b\n")

    def test_patch_offset(self):
        result = Comparison(["a"], ["b"]).compare()
        out = PatchRenderer("a", None, "b", None, PatchOptions(offset=0)).render(result)
        self.assertIn("@@ -0,1 +0,1 @@\n", out)

    def test_empty_patch(self):
        result = Comparison(["a"], ["a"]).compare()
        self.assertEqual(result.patch("a", "T1", "b", "T2"), "--- a\tT1\n+++ b\tT2\n")
        self.assertEqual(result.patch("a", STAMP, "b", None),
                         "--- a\t2020-06-27 18:10:03 +0200\n+++ b\n")

    def test_format_timestamp(self):
        self.assertEqual(format_timestamp(STAMP), "2020-06-27 18:10:03 +0200")
        self.assertEqual(format_timestamp("now"), "now")
        self.assertIsNone(format_timestamp(None))

    def test_patch_has_no_colors(self):
        result = Comparison(["a"], ["b"]).compare()
        self.assertNotIn("\033[", result.patch("a", None, "b", None))


class TestFactory(unittest.TestCase):
    def test_factory(self):
        self.assertIn("display", get_available_renderers())
        self.assertIn("patch", get_available_renderers())
        self.assertIsInstance(create_renderer("display"), DisplayRenderer)
        self.assertIsInstance(RendererFactory.create("patch", "a", None, "b", None), PatchRenderer)
        with self.assertRaises(ValueError):
            create_renderer("html")

    def test_empty_result_object(self):
        self.assertEqual(DisplayRenderer(PLAIN).render(CompareResult([])), "")


if __name__ == '__main__':
    unittest.main(verbosity=2)
