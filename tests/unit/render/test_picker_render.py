"""Tests for overlay frame composition, list windowing, and click geometry."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazyopen.ansi import clip_ansi_line, clip_left, display_width
from lazyopen.file_kinds import file_kind_label
from lazyopen.filesystem import FileSystem
from lazyopen.matching import MatchEngine, SessionCache
from lazyopen.path_model import InputPath, PathResolver
from lazyopen.render import PickerLayout, ensure_cursor_visible, render_picker
from lazyopen.runtime.config import PickerConfig
from lazyopen.runtime.navigation import NavigationState
from lazyopen.ui_theme import DEFAULT_THEME, PLAIN_THEME, resolve_theme


class PickerRenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.realpath(self._tmp.name)
        base = Path(self.root)
        (base / "alpha").mkdir()
        (base / "main.py").write_text("", encoding="utf-8")
        self.projects = [self.root]
        resolver = PathResolver(home_directory="/home/alice", project_paths=lambda: list(self.projects))
        engine = MatchEngine(FileSystem(), resolver, SessionCache())
        self.navigation = NavigationState(engine, PickerConfig(), lambda: InputPath(self.root + "/"))
        self.navigation.reset()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_plain_frame_layout(self) -> None:
        lines, layout = render_picker(self.navigation, 200, 20, PLAIN_THEME)
        self.assertEqual(lines[0], f"> {self.root}/_")
        self.assertEqual(lines[1], "  ../")
        self.assertEqual(lines[2], "+ alpha/")
        self.assertTrue(lines[3].startswith("  main.py"))
        self.assertTrue(lines[3].endswith("Python"))
        self.assertEqual(display_width(lines[3]), 200)
        self.assertEqual(lines[4], "─" * 200)
        self.assertTrue(lines[5].startswith("2 matches"))
        self.assertEqual(layout.overlay_rows, 6)
        self.assertEqual(layout.entry_index_at(2), 0)
        self.assertEqual(layout.entry_index_at(4), 2)
        self.assertIsNone(layout.entry_index_at(5))
        self.assertIsNone(layout.entry_index_at(1))

    def test_selected_row_is_reversed(self) -> None:
        self.navigation.move_cursor_to_top()
        lines, _ = render_picker(self.navigation, 40, 20, DEFAULT_THEME)
        self.assertIn(DEFAULT_THEME.reverse, lines[1])
        self.assertNotIn(DEFAULT_THEME.reverse, lines[2])

    def test_project_folder_marker(self) -> None:
        self.projects.append(os.path.join(self.root, "alpha"))
        self.navigation.refresh_project_flags()
        lines, _ = render_picker(self.navigation, 80, 20, PLAIN_THEME)
        self.assertEqual(lines[2], "* alpha/")

    def test_message_replaces_status(self) -> None:
        lines, _ = render_picker(self.navigation, 80, 20, PLAIN_THEME, message="Directory created: x")
        self.assertEqual(lines[-1], "Directory created: x")

    def test_pending_listing_status(self) -> None:
        self.navigation.entries = []
        self.navigation.listing_pending = True
        lines, layout = render_picker(self.navigation, 80, 20, PLAIN_THEME)
        self.assertEqual(lines[-1], "listing…")
        self.assertEqual(layout.list_rows, 0)

    def test_list_window_follows_cursor(self) -> None:
        self.navigation.move_cursor_to_bottom()
        lines, layout = render_picker(self.navigation, 80, 5, PLAIN_THEME)
        self.assertEqual(layout.list_rows, 2)
        self.assertEqual(layout.list_start, 1)
        self.assertEqual(layout.entry_index_at(3), 2)
        self.assertTrue(lines[2].startswith("  main.py"))


class PickerGeometryTests(unittest.TestCase):
    def test_ensure_cursor_visible(self) -> None:
        self.assertEqual(ensure_cursor_visible(10, 0, 5, 20), 6)
        self.assertEqual(ensure_cursor_visible(2, 4, 5, 20), 2)
        self.assertEqual(ensure_cursor_visible(5, 4, 5, 20), 4)
        self.assertEqual(ensure_cursor_visible(None, 30, 5, 20), 15)

    def test_layout_hit_testing(self) -> None:
        layout = PickerLayout(width=40, overlay_rows=6, list_top_row=2, list_rows=3, list_start=10, entry_count=12)
        self.assertTrue(layout.contains(40, 6))
        self.assertFalse(layout.contains(41, 6))
        self.assertFalse(layout.contains(1, 7))
        self.assertEqual(layout.entry_index_at(3), 11)
        self.assertIsNone(layout.entry_index_at(4))
        self.assertTrue(layout.is_marker_column(2))
        self.assertFalse(layout.is_marker_column(3))


class TextHelperTests(unittest.TestCase):
    def test_clip_ansi_line_keeps_escapes(self) -> None:
        self.assertEqual(clip_ansi_line("\x1b[1mabcdef\x1b[0m", 3), "\x1b[1mabc")
        self.assertEqual(clip_ansi_line("界界", 3), "界")
        self.assertEqual(display_width("\x1b[1m界a\x1b[0m"), 3)

    def test_clip_left_keeps_tail(self) -> None:
        self.assertEqual(clip_left("/very/long/path", 6), "…/path")
        self.assertEqual(clip_left("/short", 10), "/short")

    def test_file_kind_labels(self) -> None:
        self.assertEqual(file_kind_label("main.py"), "Python")
        self.assertEqual(file_kind_label("data.zzz-unknown"), "")

    def test_theme_resolution(self) -> None:
        self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertEqual(resolve_theme(" OCEAN ").name, "ocean")


if __name__ == "__main__":
    unittest.main()
