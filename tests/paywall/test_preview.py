"""
Unit-тесты для truncation превью: точные позиции среза на подобранных входах.
"""
import unittest

from app.paywall.preview import build_preview, find_cutoff, target_length


def _doc(length: int, marks: dict[int, str], filler: str = "a") -> str:
    chars = [filler] * length
    for pos, ch in marks.items():
        chars[pos] = ch
    return "".join(chars)


class TestTargetLength(unittest.TestCase):
    def test_rounds_up(self):
        self.assertEqual(target_length(1000), 300)
        self.assertEqual(target_length(15), 5)
        self.assertEqual(target_length(1), 1)
        self.assertEqual(target_length(0), 0)


class TestFindCutoff(unittest.TestCase):
    def test_period_after_target_accepted(self):
        content = _doc(1000, {310: "."})
        self.assertEqual(find_cutoff(content, 300), 311)
        self.assertEqual(build_preview(content), "a" * 310 + ".")

    def test_latest_terminator_wins(self):
        content = _doc(1000, {250: "?", 320: ".", 380: "!"})
        self.assertEqual(find_cutoff(content, 300), 381)

    def test_window_end_inclusive(self):
        self.assertEqual(find_cutoff(_doc(1000, {400: "."}), 300), 401)
        self.assertEqual(find_cutoff(_doc(1000, {401: "."}), 300), 300)

    def test_too_early_rejected(self):
        self.assertEqual(find_cutoff(_doc(1000, {150: "."}), 300), 300)
        self.assertEqual(find_cutoff(_doc(1000, {200: "."}), 300), 300)
        self.assertEqual(find_cutoff(_doc(1000, {201: "."}), 300), 202)

    def test_earlier_in_window_used_when_later_outside(self):
        content = _doc(1000, {260: ".", 450: "."})
        self.assertEqual(find_cutoff(content, 300), 261)

    def test_too_close_to_end_rejected(self):
        # len 200, target 60: period at 155 lies in window but not before len - 50
        content = _doc(200, {155: "."})
        self.assertEqual(find_cutoff(content, 60), 60)
        content = _doc(200, {149: "."})
        self.assertEqual(find_cutoff(content, 60), 150)

    def test_no_terminators_cuts_at_target(self):
        content = "word " * 200
        self.assertEqual(find_cutoff(content, 300), 300)
        self.assertEqual(build_preview(content), content[:300].strip())

    def test_near_end_falls_back_to_space(self):
        content = "hello world foo"
        self.assertEqual(target_length(len(content)), 5)
        self.assertEqual(find_cutoff(content, 5), 5)
        self.assertEqual(build_preview(content), "hello")

    def test_near_end_last_space_before_target(self):
        content = "ab cdefghijkl"
        self.assertEqual(find_cutoff(content, 4), 2)
        self.assertEqual(build_preview(content), "ab")

    def test_near_end_without_space_keeps_target(self):
        self.assertEqual(find_cutoff("abcdefghij", 3), 3)
        self.assertEqual(build_preview("abcdefghij"), "abc")

    def test_empty_content(self):
        self.assertEqual(find_cutoff("", 0), 0)
        self.assertEqual(build_preview(""), "")


class TestBuildPreview(unittest.TestCase):
    def test_whitespace_trimmed(self):
        content = _doc(1000, {0: " ", 1: " ", 310: "."}, filler="b")
        self.assertEqual(build_preview(content), "b" * 308 + ".")

    def test_deterministic(self):
        content = "Alpha beta. Gamma delta? " * 80
        self.assertEqual(build_preview(content), build_preview(content))

    def test_preview_shorter_than_content(self):
        for length in (2, 20, 200, 2000):
            content = ("Lorem ipsum dolor sit amet. " * 100)[:length]
            self.assertLess(len(build_preview(content)), len(content))
