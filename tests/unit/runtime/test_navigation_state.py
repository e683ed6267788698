"""Tests for the picker navigation state machine.

Exercises list construction, cursor wrapping, autocomplete, undo history,
and the directory shortcuts against a real temporary directory tree.
"""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazyopen.filesystem import FileSystem
from lazyopen.matching import MatchEngine, SessionCache
from lazyopen.path_model import InputPath, PathResolver
from lazyopen.runtime.config import PickerConfig
from lazyopen.runtime.navigation import NavigationState, PathHistory


class NavigationStateTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.realpath(self._tmp.name)
        base = Path(self.root)
        (base / "alpha").mkdir()
        (base / "beta").mkdir()
        (base / "foo.txt").write_text("", encoding="utf-8")
        (base / "foobar.txt").write_text("", encoding="utf-8")
        self.projects = [self.root]
        self.resolver = PathResolver(home_directory="/home/alice", project_paths=lambda: list(self.projects))

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _state(self, config: PickerConfig | None = None, **kwargs) -> NavigationState:
        config = config if config is not None else PickerConfig()
        engine = MatchEngine(FileSystem(), self.resolver, SessionCache(), fuzzy_match=config.fuzzy_match)
        state = NavigationState(engine, config, lambda: InputPath(self.root + "/"), **kwargs)
        state.reset()
        return state

    def test_reset_lists_parent_then_directories_then_files(self) -> None:
        state = self._state()
        self.assertEqual(state.current_path.full, self.root + "/")
        self.assertEqual([entry.label for entry in state.entries], ["..", "alpha", "beta", "foo.txt", "foobar.txt"])
        self.assertTrue(state.entries[0].is_parent)
        self.assertEqual(state.entries[0].path, InputPath(self.root + "/").parent(self.resolver))
        self.assertIsNone(state.cursor_index)

    def test_no_matches_means_no_parent_row(self) -> None:
        state = self._state()
        state.path_change(InputPath(self.root + "/zzz"))
        self.assertEqual(state.entries, [])
        self.assertFalse(state.move_cursor_down())
        self.assertIsNone(state.cursor_index)
        self.assertIsNone(state.first_path())

    def test_root_has_no_parent_row(self) -> None:
        state = self._state()
        state.path_change(InputPath("/"))
        self.assertTrue(state.entries)
        self.assertFalse(any(entry.is_parent for entry in state.entries))

    def test_cursor_wraps_both_ways(self) -> None:
        state = self._state()
        self.assertTrue(state.move_cursor_up())
        self.assertEqual(state.cursor_index, 4)
        state.move_cursor_down()
        self.assertEqual(state.cursor_index, 0)
        state.move_cursor_up()
        self.assertEqual(state.cursor_index, 4)
        state.move_cursor_to_top()
        self.assertEqual(state.cursor_index, 0)
        state.move_cursor_to_bottom()
        self.assertEqual(state.cursor_index, 4)
        self.assertEqual(state.selected_path().fragment, "foobar.txt")

    def test_set_cursor_index_clamps_out_of_range_to_none(self) -> None:
        state = self._state()
        state.set_cursor_index(99)
        self.assertIsNone(state.cursor_index)
        state.set_cursor_index(-1)
        self.assertIsNone(state.cursor_index)

    def test_first_path_skips_parent_row(self) -> None:
        state = self._state()
        self.assertEqual(state.first_path().fragment, "alpha")

    def test_autocomplete_extends_to_common_prefix(self) -> None:
        state = self._state()
        state.path_change(InputPath(self.root + "/f"))
        self.assertTrue(state.autocomplete())
        self.assertEqual(state.current_path.full, self.root + "/foo")
        self.assertFalse(state.autocomplete())

        self.assertTrue(state.undo())
        self.assertEqual(state.current_path.full, self.root + "/f")

    def test_autocomplete_single_directory_appends_separator(self) -> None:
        state = self._state()
        state.path_change(InputPath(self.root + "/al"))
        self.assertTrue(state.autocomplete())
        self.assertEqual(state.current_path.full, self.root + "/alpha/")

    def test_autocomplete_without_matches_rejects(self) -> None:
        state = self._state()
        state.path_change(InputPath(self.root + "/zzz"))
        self.assertFalse(state.autocomplete())
        self.assertEqual(state.current_path.full, self.root + "/zzz")

    def test_fuzzy_autocomplete_takes_best_match(self) -> None:
        state = self._state(PickerConfig(fuzzy_match=True))
        state.path_change(InputPath(self.root + "/fbr"))
        self.assertTrue(state.autocomplete())
        self.assertEqual(state.current_path.full, self.root + "/foobar.txt")

    def test_undo_without_history_returns_to_initial(self) -> None:
        state = self._state()
        self.assertFalse(state.undo())
        state.path_change(InputPath(self.root + "/x"))
        self.assertEqual(len(state.history), 0)
        self.assertTrue(state.undo())
        self.assertEqual(state.current_path.full, self.root + "/")

    def test_delete_path_component(self) -> None:
        state = self._state()
        state.path_change(InputPath(self.root + "/alpha/"))
        self.assertTrue(state.delete_path_component())
        self.assertEqual(state.current_path.full, self.root + "/")
        state.path_change(InputPath("/"))
        self.assertFalse(state.delete_path_component())

    def test_shortcuts_need_dir_switch(self) -> None:
        state = self._state()
        self.assertFalse(state.path_change(InputPath(self.root + "//")))
        self.assertEqual(state.current_path.full, self.root + "//")

    def test_root_shortcut_is_undoable(self) -> None:
        state = self._state(PickerConfig(helm_dir_switch=True))
        self.assertTrue(state.path_change(InputPath(self.root + "//")))
        self.assertEqual(state.current_path.full, "/")
        self.assertTrue(state.undo())
        self.assertEqual(state.current_path.full, self.root + "/")

    def test_home_and_project_shortcuts(self) -> None:
        state = self._state(PickerConfig(helm_dir_switch=True))
        state.path_change(InputPath("/tmp/~/"))
        self.assertEqual(state.current_path.full, "/home/alice" + os.sep)
        state.path_change(InputPath("/somewhere/:/"))
        self.assertEqual(state.current_path.full, self.root + "/")

    def test_project_shortcut_without_projects_stays_typed(self) -> None:
        self.projects.clear()
        state = self._state(PickerConfig(helm_dir_switch=True))
        self.assertFalse(state.path_change(InputPath("/somewhere/:/")))
        self.assertEqual(state.current_path.full, "/somewhere/:/")

    def test_project_flags_refresh_after_registration(self) -> None:
        state = self._state()
        alpha = next(entry for entry in state.entries if entry.label == "alpha")
        self.assertTrue(alpha.can_add_project)
        self.projects.append(os.path.join(self.root, "alpha"))
        state.refresh_project_flags()
        alpha = next(entry for entry in state.entries if entry.label == "alpha")
        self.assertTrue(alpha.is_project)
        self.assertFalse(alpha.can_add_project)

    def test_background_listing_discards_stale_results(self) -> None:
        requested: list[InputPath] = []
        state = self._state(request_listing=requested.append)
        self.assertTrue(state.listing_pending)
        self.assertEqual(state.entries, [])
        self.assertEqual(requested, [InputPath(self.root + "/")])

        state.path_change(InputPath(self.root + "/f"))
        stale = state.engine.get_matching_paths(requested[0])
        self.assertFalse(state.apply_matches(requested[0], stale))
        self.assertTrue(state.listing_pending)

        fresh = state.engine.get_matching_paths(requested[1])
        self.assertTrue(state.apply_matches(requested[1], fresh))
        self.assertFalse(state.listing_pending)
        self.assertEqual([entry.label for entry in state.entries], ["..", "foo.txt", "foobar.txt"])


class PathHistoryTests(unittest.TestCase):
    def test_history_is_bounded(self) -> None:
        history = PathHistory(max_entries=2)
        for text in ("a", "b", "c"):
            history.push(InputPath(text))
        self.assertEqual([path.full for path in history.entries], ["b", "c"])
        self.assertEqual(history.pop().full, "c")
        history.clear()
        self.assertIsNone(history.pop())


if __name__ == "__main__":
    unittest.main()
